"""
Generated plan schemas.

Three plan kinds are produced from one profile: nutrition, fitness and
wellness.  Empty slots are explicit (an empty ``suggestions`` or
``exercises`` list) and always come with a :class:`PlanWarning`.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PlanKind(str, Enum):
    NUTRITION = "nutrition"
    FITNESS = "fitness"
    WELLNESS = "wellness"


class PlanWarning(BaseModel):
    """Structured note about a slot the catalog could not fully serve."""

    code: str = Field(..., description="e.g. no_meal_suggestions, too_few_exercises")
    plan: PlanKind
    slot: str = Field(..., description="Meal slot or workout day the warning refers to")
    message: str


# ======================================================================
# Nutrition
# ======================================================================

class MealSuggestion(BaseModel):
    archetype_id: str
    display_name: str
    foods: list[str] = Field(default_factory=list)


class MealTemplate(BaseModel):
    """One meal slot with its share of the daily targets."""

    meal_type: str
    ratio: float = Field(..., ge=0.0, le=1.0, description="Share of daily calories")
    calories: float = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fat: float = Field(..., ge=0)
    suggestions: list[MealSuggestion] = Field(default_factory=list)


class NutritionPlan(BaseModel):
    name: str
    calorie_target: float
    protein_target: float
    carbs_target: float
    fat_target: float
    meal_templates: list[MealTemplate]


# ======================================================================
# Fitness
# ======================================================================

class ExercisePrescription(BaseModel):
    archetype_id: str
    name: str
    sets: int = Field(..., ge=1)
    reps_low: Optional[int] = Field(None, ge=1)
    reps_high: Optional[int] = Field(None, ge=1)
    rest_seconds: int = Field(..., ge=0)
    duration_minutes: Optional[float] = Field(None, description="Time-based work (cardio, yoga)")


class Workout(BaseModel):
    day: str
    focus: str
    muscle_groups: list[str]
    exercises: list[ExercisePrescription] = Field(default_factory=list)
    estimated_duration: float = Field(..., ge=0, description="Minutes")


class FitnessPlan(BaseModel):
    name: str
    workout_split: str
    days_per_week: int = Field(..., ge=1, le=7)
    workouts: list[Workout]


# ======================================================================
# Wellness
# ======================================================================

class SleepRecommendation(BaseModel):
    target_hours: float
    bed_time_window: str = Field(..., description="e.g. '10:30 PM - 11:00 PM'")
    tips: list[str] = Field(default_factory=list)


class MeditationRecommendation(BaseModel):
    frequency_per_week: int = Field(..., ge=0, le=7)
    session_duration: int = Field(..., ge=0, description="Minutes")
    style: str


class RecommendedHabit(BaseModel):
    archetype_id: str
    name: str
    icon: str
    category: str
    frequency: str
    matched_tags: list[str] = Field(default_factory=list)


class WellnessPlan(BaseModel):
    name: str
    sleep_recommendation: SleepRecommendation
    meditation_recommendation: MeditationRecommendation
    recommended_habits: list[RecommendedHabit]


# ======================================================================
# Bundle
# ======================================================================

class GeneratedPlans(BaseModel):
    """The three plans produced in one generation pass."""

    nutrition_plan: NutritionPlan
    fitness_plan: FitnessPlan
    wellness_plan: WellnessPlan
    catalog_version: str
    seed: Optional[int] = None
    warnings: list[PlanWarning] = Field(default_factory=list)


class StoredPlanResponse(BaseModel):
    """A persisted plan as returned by the plans endpoints."""

    id: int
    kind: PlanKind
    is_active: bool
    profile_version: int
    catalog_version: str
    seed: Optional[int] = None
    payload: dict
    warnings: list[PlanWarning] = Field(default_factory=list)
    created_at: datetime.datetime
