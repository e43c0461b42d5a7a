"""
Nutrition plan generator.

Daily targets are split across ``meals_per_day`` slots with fixed
per-meal-type ratios (breakfast 0.25, lunch 0.30, dinner 0.35,
snack 0.10) re-normalised over the slots actually used.  Every slot
carries the same macro energy split as the day, so a meal archetype
matches a slot when each of its protein/carb/fat energy shares is within
``meal_share_tolerance`` of the slot's shares.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from app.catalog.archetypes import Catalog, MealArchetype, MealType
from app.engine.errors import InvalidProfileError
from app.engine.planning import DEFAULT_PLAN_CONFIG, PlanConfig, rank
from app.schemas.plans import (
    MealSuggestion,
    MealTemplate,
    NutritionPlan,
    PlanKind,
    PlanWarning,
)
from app.schemas.profile import NutritionApproach, UserProfile
from app.schemas.targets import TargetSet

logger = logging.getLogger(__name__)

MEAL_TYPE_RATIOS: dict[MealType, float] = {
    MealType.BREAKFAST: 0.25,
    MealType.LUNCH: 0.30,
    MealType.DINNER: 0.35,
    MealType.SNACK: 0.10,
}

# Slots in time-of-day order.
SLOT_LAYOUTS: dict[int, list[MealType]] = {
    1: [MealType.DINNER],
    2: [MealType.LUNCH, MealType.DINNER],
    3: [MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER],
    4: [MealType.BREAKFAST, MealType.LUNCH, MealType.SNACK, MealType.DINNER],
    5: [MealType.BREAKFAST, MealType.SNACK, MealType.LUNCH, MealType.DINNER, MealType.SNACK],
    6: [MealType.BREAKFAST, MealType.SNACK, MealType.LUNCH, MealType.SNACK, MealType.DINNER, MealType.SNACK],
}

_APPROACH_TITLES: dict[NutritionApproach, str] = {
    NutritionApproach.BALANCED: "Balanced",
    NutritionApproach.HIGH_PROTEIN: "High Protein",
    NutritionApproach.LOW_CARB: "Low Carb",
    NutritionApproach.PLANT_BASED: "Plant-Based",
    NutritionApproach.FLEXIBLE: "Flexible",
}


def slot_ratios(meals_per_day: int) -> list[tuple[MealType, float]]:
    """Return ``[(meal_type, ratio), ...]`` summing to 1.0."""
    layout = SLOT_LAYOUTS.get(meals_per_day)
    if layout is None:
        raise InvalidProfileError("meals_per_day", f"must be between 1 and {max(SLOT_LAYOUTS)}")
    total = sum(MEAL_TYPE_RATIOS[m] for m in layout)
    return [(m, MEAL_TYPE_RATIOS[m] / total) for m in layout]


def macro_shares(targets: TargetSet) -> tuple[float, float, float]:
    """Energy shares ``(protein, carbs, fat)`` of the macro targets."""
    p = targets.daily_protein_grams * 4
    c = targets.daily_carb_grams * 4
    f = targets.daily_fat_grams * 9
    total = p + c + f
    if total <= 0:
        return 0.0, 0.0, 0.0
    return p / total, c / total, f / total


def _split(total: float, ratios: list[float]) -> list[float]:
    """Split *total* by *ratios*; the last part absorbs rounding."""
    parts = [round(total * r, 1) for r in ratios[:-1]]
    parts.append(round(total - sum(parts), 1))
    return parts


def _share_distance(meal: MealArchetype, shares: tuple[float, float, float]) -> tuple[float, float, float]:
    p, c, f = shares
    return abs(meal.protein_pct - p), abs(meal.carb_pct - c), abs(meal.fat_pct - f)


def match_meals(
    catalog: Catalog,
    meal_type: MealType,
    shares: tuple[float, float, float],
    approach: NutritionApproach,
    config: PlanConfig,
    rng: Optional[random.Random] = None,
) -> list[MealArchetype]:
    """Catalog meals for *meal_type* within tolerance, best first (unbounded)."""
    candidates = catalog.meals_for_type(meal_type)
    if approach == NutritionApproach.PLANT_BASED:
        candidates = [m for m in candidates if m.is_plant_based]

    tol = config.meal_share_tolerance
    matching = [m for m in candidates if max(_share_distance(m, shares)) <= tol + 1e-9]
    return rank(matching, score=lambda m: (round(sum(_share_distance(m, shares)), 6),),
                name=lambda m: m.display_name, rng=rng)


def generate_nutrition_plan(
    profile: UserProfile,
    targets: TargetSet,
    catalog: Catalog,
    config: Optional[PlanConfig] = None,
    rng: Optional[random.Random] = None,
) -> tuple[NutritionPlan, list[PlanWarning]]:
    """Build the :class:`NutritionPlan` and its catalog warnings."""
    cfg = config or DEFAULT_PLAN_CONFIG
    slots = slot_ratios(profile.meals_per_day)
    ratios = [r for _, r in slots]

    calories = _split(targets.daily_calories, ratios)
    protein = _split(targets.daily_protein_grams, ratios)
    carbs = _split(targets.daily_carb_grams, ratios)
    fat = _split(targets.daily_fat_grams, ratios)
    shares = macro_shares(targets)

    templates: list[MealTemplate] = []
    warnings: list[PlanWarning] = []
    for i, (meal_type, ratio) in enumerate(slots):
        slot_name = f"{meal_type.value}_{i + 1}"
        matches = match_meals(catalog, meal_type, shares, profile.nutrition_approach, cfg, rng)
        chosen = matches[:cfg.max_meal_suggestions]

        if not chosen:
            warnings.append(PlanWarning(code="no_meal_suggestions", plan=PlanKind.NUTRITION, slot=slot_name,
                                        message=f"No {meal_type.value} archetypes match this macro split."))
        elif len(chosen) < cfg.min_meal_suggestions:
            warnings.append(PlanWarning(code="too_few_meal_suggestions", plan=PlanKind.NUTRITION, slot=slot_name,
                                        message=f"Only {len(chosen)} {meal_type.value} archetype(s) match."))

        templates.append(MealTemplate(
            meal_type=meal_type.value,
            ratio=round(ratio, 4),
            calories=calories[i],
            protein=protein[i],
            carbs=carbs[i],
            fat=fat[i],
            suggestions=[MealSuggestion(archetype_id=m.archetype_id, display_name=m.display_name, foods=m.foods)
                         for m in chosen],
        ))

    if warnings:
        logger.warning("Nutrition plan has %d catalog gap(s)", len(warnings))

    plan = NutritionPlan(
        name=f"{_APPROACH_TITLES[profile.nutrition_approach]} Nutrition Plan",
        calorie_target=targets.daily_calories,
        protein_target=targets.daily_protein_grams,
        carbs_target=targets.daily_carb_grams,
        fat_target=targets.daily_fat_grams,
        meal_templates=templates,
    )
    return plan, warnings
