"""
Catalog archetypes — meal, exercise and habit templates.

Archetypes are user-independent content supplied by the content
collaborator.  The plan generator only *selects* from them; it never
invents meals, exercises or habits of its own.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


# ======================================================================
# Enums
# ======================================================================

class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class DietTag(str, Enum):
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"


class Modality(str, Enum):
    STRENGTH = "strength"
    CARDIO = "cardio"
    HIIT = "hiit"
    YOGA = "yoga"


class HabitCategory(str, Enum):
    HEALTH = "health"
    FITNESS = "fitness"
    MINDFULNESS = "mindfulness"
    SOCIAL = "social"
    LEARNING = "learning"
    PHYSICAL = "physical"
    MENTAL = "mental"
    ROUTINE = "routine"


def slugify_tag(text: str) -> str:
    """``'Injury/Pain'`` → ``'injury_pain'``."""
    return re.sub(r"[^a-z0-9]+", "_", text.strip().lower()).strip("_")


# ======================================================================
# Archetypes
# ======================================================================

class MealArchetype(BaseModel):
    """A meal template described by its macro energy split.

    ``protein_pct``/``carb_pct``/``fat_pct`` are shares of the meal's
    energy (0–1) and must sum to ~1.  Portions scale to the slot.
    """

    archetype_id: str
    display_name: str
    meal_types: list[MealType] = Field(..., min_length=1)
    protein_pct: float = Field(..., ge=0.0, le=1.0)
    carb_pct: float = Field(..., ge=0.0, le=1.0)
    fat_pct: float = Field(..., ge=0.0, le=1.0)
    diet_tags: list[DietTag] = Field(default_factory=list)
    foods: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_shares(self) -> MealArchetype:
        total = self.protein_pct + self.carb_pct + self.fat_pct
        if abs(total - 1.0) > 0.02:
            raise ValueError(f"{self.archetype_id}: macro shares sum to {total:.2f}, expected 1.0")
        return self

    @property
    def is_plant_based(self) -> bool:
        return DietTag.VEGAN in self.diet_tags or DietTag.VEGETARIAN in self.diet_tags


class ExerciseArchetype(BaseModel):
    """An exercise template tagged by modality and muscle groups."""

    archetype_id: str
    display_name: str
    modality: Modality
    muscle_groups: list[str] = Field(..., min_length=1)
    is_compound: bool = False


class HabitArchetype(BaseModel):
    """A habit template; ``tags`` are slugs matched against motivations/challenges."""

    archetype_id: str
    display_name: str
    icon: str = ""
    category: HabitCategory
    frequency: str = "daily"
    tags: list[str] = Field(default_factory=list)
    is_default: bool = True

    @field_validator("tags")
    @classmethod
    def _slug_tags(cls, value: list[str]) -> list[str]:
        return [slugify_tag(t) for t in value]


# ======================================================================
# Catalog container
# ======================================================================

class Catalog(BaseModel):
    """Read-only bundle of archetypes at a given content version."""

    version: str = "unversioned"
    meals: list[MealArchetype] = Field(default_factory=list)
    exercises: list[ExerciseArchetype] = Field(default_factory=list)
    habits: list[HabitArchetype] = Field(default_factory=list)

    model_config = {"frozen": True}

    def meals_for_type(self, meal_type: MealType) -> list[MealArchetype]:
        return [m for m in self.meals if meal_type in m.meal_types]

    def exercises_for(self, modalities: list[Modality], muscle_groups: list[str]) -> list[ExerciseArchetype]:
        """Exercises of any of *modalities* hitting at least one of *muscle_groups*."""
        groups = set(muscle_groups)
        return [e for e in self.exercises if e.modality in modalities and groups.intersection(e.muscle_groups)]

    def default_habits(self) -> list[HabitArchetype]:
        return [h for h in self.habits if h.is_default]
