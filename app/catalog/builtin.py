"""
Built-in content catalog.

Used when the host has no external content service and by the test
suite.  Exercise entries extend the app's original exercise library;
meal shares are energy fractions (protein / carbs / fat).

To add content, append to the lists below; ``BUILTIN_CATALOG`` is built
once at import time and is immutable.
"""

from __future__ import annotations

from app.catalog.archetypes import (
    Catalog,
    DietTag,
    ExerciseArchetype,
    HabitArchetype,
    HabitCategory,
    MealArchetype,
    MealType,
    Modality,
)

BUILTIN_CATALOG_VERSION = "builtin-2024.2"

# Aliases for brevity in the tables below
B = MealType.BREAKFAST
L = MealType.LUNCH
D = MealType.DINNER
SN = MealType.SNACK
VEG = DietTag.VEGETARIAN
VGN = DietTag.VEGAN
S = Modality.STRENGTH
CA = Modality.CARDIO
H = Modality.HIIT
Y = Modality.YOGA


def _meal(aid: str, name: str, types: list[MealType], p: float, c: float, f: float,
          tags: list[DietTag] | None = None, foods: list[str] | None = None) -> MealArchetype:
    return MealArchetype(archetype_id=aid, display_name=name, meal_types=types, protein_pct=p, carb_pct=c,
                         fat_pct=f, diet_tags=tags or [], foods=foods or [])


def _ex(aid: str, name: str, modality: Modality, groups: list[str], compound: bool = False) -> ExerciseArchetype:
    return ExerciseArchetype(archetype_id=aid, display_name=name, modality=modality, muscle_groups=groups,
                             is_compound=compound)


# ======================================================================
# Meals
# ======================================================================

_MEALS: list[MealArchetype] = [
    # ── Breakfast ─────────────────────────────────────────────────
    _meal("greek_yogurt_parfait", "Greek Yogurt Parfait", [B], 0.30, 0.50, 0.20, [VEG],
          ["greek yogurt", "berries", "granola", "honey"]),
    _meal("veggie_omelette_toast", "Veggie Omelette with Toast", [B], 0.30, 0.30, 0.40, [VEG],
          ["eggs", "spinach", "peppers", "whole-grain toast"]),
    _meal("protein_overnight_oats", "Protein Overnight Oats", [B], 0.25, 0.55, 0.20, [VEG],
          ["rolled oats", "milk", "whey protein", "chia seeds"]),
    _meal("tofu_scramble_wrap", "Tofu Scramble Wrap", [B, L], 0.28, 0.37, 0.35, [VGN, VEG],
          ["firm tofu", "black beans", "whole-wheat tortilla", "salsa"]),
    _meal("avocado_egg_toast", "Avocado Egg Toast", [B], 0.20, 0.40, 0.40, [VEG],
          ["sourdough", "avocado", "poached eggs"]),
    _meal("protein_pancakes", "Protein Pancakes", [B], 0.35, 0.45, 0.20, [VEG],
          ["oat flour", "egg whites", "banana", "cottage cheese"]),

    # ── Lunch ─────────────────────────────────────────────────────
    _meal("chicken_quinoa_bowl", "Grilled Chicken Quinoa Bowl", [L, D], 0.35, 0.40, 0.25, None,
          ["chicken breast", "quinoa", "roasted vegetables", "tahini"]),
    _meal("turkey_whole_grain_wrap", "Turkey Whole-Grain Wrap", [L], 0.30, 0.45, 0.25, None,
          ["turkey breast", "whole-grain wrap", "lettuce", "hummus"]),
    _meal("lentil_power_salad", "Lentil Power Salad", [L], 0.25, 0.50, 0.25, [VGN, VEG],
          ["green lentils", "cucumber", "cherry tomatoes", "olive oil"]),
    _meal("salmon_greens_plate", "Salmon & Greens Plate", [L, D], 0.35, 0.20, 0.45, None,
          ["salmon fillet", "mixed greens", "avocado", "lemon"]),
    _meal("chickpea_buddha_bowl", "Chickpea Buddha Bowl", [L], 0.18, 0.55, 0.27, [VGN, VEG],
          ["chickpeas", "brown rice", "sweet potato", "kale"]),
    _meal("tuna_avocado_salad", "Tuna Avocado Salad", [L], 0.38, 0.17, 0.45, None,
          ["tuna", "avocado", "red onion", "rocket"]),

    # ── Dinner ────────────────────────────────────────────────────
    _meal("lean_beef_stir_fry", "Lean Beef Stir-Fry", [D], 0.32, 0.38, 0.30, None,
          ["lean beef", "broccoli", "jasmine rice", "soy sauce"]),
    _meal("salmon_sweet_potato", "Baked Salmon & Sweet Potato", [D], 0.30, 0.40, 0.30, None,
          ["salmon", "sweet potato", "green beans"]),
    _meal("chicken_veg_traybake", "Chicken & Vegetable Traybake", [D], 0.40, 0.25, 0.35, None,
          ["chicken thighs", "courgette", "red onion", "olive oil"]),
    _meal("tofu_veggie_curry", "Tofu Vegetable Curry", [D], 0.22, 0.48, 0.30, [VGN, VEG],
          ["tofu", "coconut milk", "basmati rice", "spinach"]),
    _meal("black_bean_chili", "Black Bean Chili", [D, L], 0.25, 0.50, 0.25, [VGN, VEG],
          ["black beans", "kidney beans", "tomatoes", "peppers"]),
    _meal("steak_cauliflower_mash", "Steak with Cauliflower Mash", [D], 0.35, 0.15, 0.50, None,
          ["sirloin steak", "cauliflower", "butter", "asparagus"]),
    _meal("shrimp_zoodles", "Garlic Shrimp Zoodles", [D], 0.40, 0.20, 0.40, None,
          ["shrimp", "courgette noodles", "garlic", "parmesan"]),

    # ── Snacks ────────────────────────────────────────────────────
    _meal("cottage_cheese_berries", "Cottage Cheese & Berries", [SN], 0.40, 0.40, 0.20, [VEG],
          ["cottage cheese", "blueberries"]),
    _meal("apple_peanut_butter", "Apple with Peanut Butter", [SN], 0.12, 0.50, 0.38, [VGN, VEG],
          ["apple", "peanut butter"]),
    _meal("protein_shake_banana", "Protein Shake & Banana", [SN], 0.40, 0.45, 0.15, [VEG],
          ["whey protein", "banana", "milk"]),
    _meal("hummus_veggie_sticks", "Hummus & Veggie Sticks", [SN], 0.15, 0.50, 0.35, [VGN, VEG],
          ["hummus", "carrots", "celery"]),
    _meal("edamame_bowl", "Salted Edamame", [SN], 0.35, 0.30, 0.35, [VGN, VEG],
          ["edamame", "sea salt"]),
    _meal("boiled_eggs", "Hard-Boiled Eggs", [SN], 0.35, 0.05, 0.60, [VEG],
          ["eggs"]),
    _meal("mixed_nuts", "Handful of Mixed Nuts", [SN], 0.12, 0.18, 0.70, [VGN, VEG],
          ["almonds", "walnuts", "cashews"]),
    _meal("turkey_cheese_roll_ups", "Turkey & Cheese Roll-Ups", [SN], 0.40, 0.20, 0.40, None,
          ["sliced turkey", "cheddar", "cucumber"]),
    _meal("greek_yogurt_walnuts", "Greek Yogurt with Walnuts", [SN], 0.28, 0.30, 0.42, [VEG],
          ["full-fat greek yogurt", "walnuts", "cinnamon"]),
    _meal("chia_coconut_pudding", "Chia Coconut Pudding", [SN], 0.15, 0.40, 0.45, [VGN, VEG],
          ["chia seeds", "coconut milk", "raspberries"]),
]

# ======================================================================
# Exercises
# ======================================================================

_EXERCISES: list[ExerciseArchetype] = [
    # ── Lower Body ────────────────────────────────────────────────
    _ex("back_squat", "Back Squat", S, ["quadriceps", "glutes", "core"], compound=True),
    _ex("goblet_squat", "Goblet Squat", S, ["quadriceps", "glutes"], compound=True),
    _ex("deadlift", "Deadlift", S, ["hamstrings", "glutes", "back"], compound=True),
    _ex("romanian_deadlift", "Romanian Deadlift", S, ["hamstrings", "glutes"], compound=True),
    _ex("leg_press", "Leg Press", S, ["quadriceps", "glutes"], compound=True),
    _ex("walking_lunge", "Walking Lunge", S, ["quadriceps", "glutes", "hamstrings"], compound=True),
    _ex("hip_thrust", "Hip Thrust", S, ["glutes", "hamstrings"], compound=True),
    _ex("leg_curl", "Leg Curl", S, ["hamstrings"]),
    _ex("leg_extension", "Leg Extension", S, ["quadriceps"]),
    _ex("calf_raise", "Standing Calf Raise", S, ["calves"]),

    # ── Upper Push ────────────────────────────────────────────────
    _ex("bench_press", "Bench Press", S, ["chest", "triceps", "shoulders"], compound=True),
    _ex("push_up", "Push-ups", S, ["chest", "triceps", "shoulders"], compound=True),
    _ex("overhead_press", "Overhead Press", S, ["shoulders", "triceps"], compound=True),
    _ex("incline_db_press", "Incline Dumbbell Press", S, ["chest", "shoulders"], compound=True),
    _ex("dip", "Dip", S, ["chest", "triceps"], compound=True),
    _ex("lateral_raise", "Lateral Raise", S, ["shoulders"]),
    _ex("tricep_pushdown", "Tricep Pushdown", S, ["triceps"]),
    _ex("cable_chest_fly", "Cable Chest Fly", S, ["chest"]),

    # ── Upper Pull ────────────────────────────────────────────────
    _ex("barbell_row", "Barbell Row", S, ["back", "biceps"], compound=True),
    _ex("pull_up", "Pull-Up", S, ["back", "biceps"], compound=True),
    _ex("lat_pulldown", "Lat Pulldown", S, ["back", "biceps"], compound=True),
    _ex("seated_cable_row", "Seated Cable Row", S, ["back"], compound=True),
    _ex("face_pull", "Face Pull", S, ["shoulders", "back"]),
    _ex("bicep_curl", "Bicep Curl", S, ["biceps"]),
    _ex("hammer_curl", "Hammer Curl", S, ["biceps"]),

    # ── Core ──────────────────────────────────────────────────────
    _ex("plank", "Plank", S, ["core"]),
    _ex("dead_bug", "Dead Bug", S, ["core"]),
    _ex("cable_pallof_press", "Cable Pallof Press", S, ["core"]),
    _ex("hanging_knee_raise", "Hanging Knee Raise", S, ["core"]),

    # ── Cardio ────────────────────────────────────────────────────
    _ex("running", "Running", CA, ["cardio", "quadriceps"]),
    _ex("cycling", "Cycling", CA, ["cardio", "quadriceps"]),
    _ex("rowing_machine", "Rowing Machine", CA, ["cardio", "back"]),
    _ex("jump_rope", "Jump Rope", CA, ["cardio", "full_body"]),
    _ex("brisk_walk", "Brisk Walk", CA, ["cardio"]),
    _ex("elliptical", "Elliptical Trainer", CA, ["cardio"]),
    _ex("stair_climber", "Stair Climber", CA, ["cardio", "glutes"]),

    # ── HIIT ──────────────────────────────────────────────────────
    _ex("hiit_circuit", "HIIT Circuit", H, ["full_body", "cardio"], compound=True),
    _ex("burpees", "Burpees", H, ["full_body", "cardio"], compound=True),
    _ex("kettlebell_swing", "Kettlebell Swing", H, ["glutes", "hamstrings", "full_body"], compound=True),
    _ex("mountain_climbers", "Mountain Climbers", H, ["core", "cardio"]),
    _ex("jump_squats", "Jump Squats", H, ["quadriceps", "cardio"], compound=True),
    _ex("battle_ropes", "Battle Ropes", H, ["shoulders", "cardio"]),
    _ex("high_knees", "High Knees", H, ["cardio", "core"]),

    # ── Yoga & Mobility ───────────────────────────────────────────
    _ex("yoga_flow", "Yoga Flow", Y, ["mobility", "core"]),
    _ex("sun_salutation", "Sun Salutation Sequence", Y, ["mobility", "full_body"]),
    _ex("hip_opener_sequence", "Hip Opener Sequence", Y, ["mobility"]),
    _ex("yin_yoga", "Yin Yoga Holds", Y, ["mobility"]),
    _ex("core_pilates", "Core Pilates", Y, ["core", "mobility"]),
    _ex("hamstring_stretch_flow", "Hamstring Stretch Flow", Y, ["mobility", "hamstrings"]),
    _ex("breathwork_cooldown", "Breathwork Cool-down", Y, ["mobility"]),
    _ex("thoracic_mobility", "Thoracic Spine Mobility", Y, ["mobility", "back"]),
]

# ======================================================================
# Habits
# ======================================================================

_HABITS: list[HabitArchetype] = [
    HabitArchetype(archetype_id="drink_water", display_name="Drink 8 glasses of water", icon="💧",
                   category=HabitCategory.HEALTH, tags=["health", "energy", "diet", "appearance"]),
    HabitArchetype(archetype_id="morning_walk", display_name="10-minute morning walk", icon="🚶",
                   category=HabitCategory.PHYSICAL, tags=["energy", "time", "longevity", "health"]),
    HabitArchetype(archetype_id="meditate", display_name="Meditate", icon="🧘",
                   category=HabitCategory.MINDFULNESS, tags=["stress", "sleep", "confidence", "motivation"]),
    HabitArchetype(archetype_id="gratitude", display_name="Write three gratitudes", icon="🙏",
                   category=HabitCategory.MENTAL, tags=["motivation", "confidence", "stress"]),
    HabitArchetype(archetype_id="screens_off", display_name="Screens off 30 minutes before bed", icon="📵",
                   category=HabitCategory.ROUTINE, tags=["sleep", "energy", "stress"]),
    HabitArchetype(archetype_id="protein_each_meal", display_name="Protein with every meal", icon="🍳",
                   category=HabitCategory.HEALTH, tags=["diet", "strength", "appearance", "knowledge"]),
    HabitArchetype(archetype_id="daily_stretch", display_name="Stretch for 5 minutes", icon="🤸",
                   category=HabitCategory.PHYSICAL, tags=["injury_pain", "longevity", "equipment"]),
    HabitArchetype(archetype_id="meal_prep", display_name="Weekly meal prep", icon="🥗",
                   category=HabitCategory.ROUTINE, frequency="1x per week", tags=["diet", "time", "consistency"]),
    HabitArchetype(archetype_id="read_pages", display_name="Read 10 pages", icon="📚",
                   category=HabitCategory.LEARNING, tags=["knowledge", "stress"]),
    HabitArchetype(archetype_id="reach_out", display_name="Reach out to a friend", icon="💬",
                   category=HabitCategory.SOCIAL, frequency="3x per week",
                   tags=["social_support", "motivation", "confidence"]),
    HabitArchetype(archetype_id="no_added_sugar", display_name="No added sugar", icon="🍬",
                   category=HabitCategory.HEALTH, tags=["diet", "energy", "health", "appearance"]),
    HabitArchetype(archetype_id="log_workout", display_name="Log your workout", icon="🏋️",
                   category=HabitCategory.FITNESS, frequency="3x per week",
                   tags=["consistency", "motivation", "strength", "competition"]),
    HabitArchetype(archetype_id="cold_shower", display_name="Cold shower finish", icon="🚿",
                   category=HabitCategory.HEALTH, tags=["energy", "confidence"], is_default=False),
]

BUILTIN_CATALOG = Catalog(version=BUILTIN_CATALOG_VERSION, meals=_MEALS, exercises=_EXERCISES, habits=_HABITS)


def get_builtin_catalog() -> Catalog:
    """Return the immutable built-in catalog."""
    return BUILTIN_CATALOG
