"""Content catalog — meal, exercise and habit archetypes."""

from app.catalog.archetypes import (
    Catalog,
    ExerciseArchetype,
    HabitArchetype,
    MealArchetype,
    MealType,
    Modality,
)
from app.catalog.builtin import BUILTIN_CATALOG, get_builtin_catalog

__all__ = [
    "Catalog",
    "ExerciseArchetype",
    "HabitArchetype",
    "MealArchetype",
    "MealType",
    "Modality",
    "BUILTIN_CATALOG",
    "get_builtin_catalog",
]
