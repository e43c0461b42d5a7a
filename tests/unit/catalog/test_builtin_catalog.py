"""Tests for the catalog archetypes and the built-in content."""

import pytest
from pydantic import ValidationError

from app.catalog.archetypes import (
    Catalog,
    ExerciseArchetype,
    HabitArchetype,
    HabitCategory,
    MealArchetype,
    MealType,
    Modality,
    slugify_tag,
)
from app.catalog.builtin import BUILTIN_CATALOG, get_builtin_catalog
from app.engine.fitness import (
    ACTIVE_RECOVERY,
    FULL_BODY,
    HIIT_DAY,
    INTERVAL_CARDIO,
    LEGS,
    LOWER,
    MOBILITY_CORE,
    PULL,
    PUSH,
    STEADY_CARDIO,
    UPPER,
    YOGA_FLOW,
)

_ALL_DAY_TEMPLATES = [FULL_BODY, UPPER, LOWER, PUSH, PULL, LEGS, STEADY_CARDIO, INTERVAL_CARDIO, HIIT_DAY,
                      YOGA_FLOW, MOBILITY_CORE, ACTIVE_RECOVERY]


class TestBuiltinCatalog:
    def test_singleton(self):
        assert get_builtin_catalog() is BUILTIN_CATALOG

    def test_unique_ids(self):
        for kind in ("meals", "exercises", "habits"):
            ids = [a.archetype_id for a in getattr(BUILTIN_CATALOG, kind)]
            assert len(ids) == len(set(ids)), f"Duplicate {kind} ids"

    @pytest.mark.parametrize("meal_type", list(MealType))
    def test_every_meal_type_has_choices(self, meal_type):
        assert len(BUILTIN_CATALOG.meals_for_type(meal_type)) >= 4

    @pytest.mark.parametrize("template", _ALL_DAY_TEMPLATES, ids=lambda t: t.focus)
    def test_every_day_template_has_exercises(self, template):
        found = BUILTIN_CATALOG.exercises_for(list(template.modalities), list(template.muscle_groups))
        assert len(found) >= 4, f"{template.focus} has only {len(found)} exercises"

    def test_default_habits_exclude_opt_in(self):
        ids = {h.archetype_id for h in BUILTIN_CATALOG.default_habits()}
        assert "cold_shower" not in ids
        assert "meditate" in ids

    def test_frozen(self):
        with pytest.raises(ValidationError):
            BUILTIN_CATALOG.version = "other"


class TestArchetypes:
    def test_meal_shares_must_sum_to_one(self):
        with pytest.raises(ValidationError):
            MealArchetype(archetype_id="bad", display_name="Bad", meal_types=[MealType.LUNCH],
                          protein_pct=0.5, carb_pct=0.5, fat_pct=0.5)

    def test_meal_needs_a_type(self):
        with pytest.raises(ValidationError):
            MealArchetype(archetype_id="bad", display_name="Bad", meal_types=[],
                          protein_pct=0.3, carb_pct=0.4, fat_pct=0.3)

    def test_habit_tags_slugified(self):
        habit = HabitArchetype(archetype_id="h", display_name="H", category=HabitCategory.HEALTH,
                               tags=["Injury/Pain", " Social Support "])
        assert habit.tags == ["injury_pain", "social_support"]

    @pytest.mark.parametrize("text, slug", [
        ("Energy", "energy"),
        ("Injury/Pain", "injury_pain"),
        ("  Time  ", "time"),
        ("Look & Feel", "look_feel"),
    ])
    def test_slugify(self, text, slug):
        assert slugify_tag(text) == slug

    def test_exercises_for_filters_modality_and_group(self):
        catalog = Catalog(exercises=[
            ExerciseArchetype(archetype_id="row", display_name="Row", modality=Modality.STRENGTH,
                              muscle_groups=["back"]),
            ExerciseArchetype(archetype_id="erg", display_name="Erg", modality=Modality.CARDIO,
                              muscle_groups=["cardio", "back"]),
        ])
        assert [e.archetype_id for e in catalog.exercises_for([Modality.STRENGTH], ["back"])] == ["row"]
        assert [e.archetype_id for e in catalog.exercises_for([Modality.CARDIO], ["chest"])] == []
