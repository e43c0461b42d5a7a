"""
User profile schemas.

:class:`UserProfile` is the engine's input and is always expressed in SI
units (kg, cm).  :class:`OnboardingAnswers` is the boundary model: it
accepts whatever unit the user typed and converts exactly once in
:meth:`OnboardingAnswers.to_profile`.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.schemas.targets import TargetSet

KG_PER_LB = 0.453592
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12


# ======================================================================
# Enums
# ======================================================================

class BiologicalSex(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class FitnessGoal(str, Enum):
    LOSE_WEIGHT = "lose_weight"
    BUILD_MUSCLE = "build_muscle"
    MAINTAIN = "maintain"
    IMPROVE_HEALTH = "improve_health"


class ActivityLevel(str, Enum):
    """5-point ordinal, declared from least to most active."""
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"


class FitnessExperience(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class WorkoutPreference(str, Enum):
    STRENGTH = "strength"
    CARDIO = "cardio"
    HIIT = "hiit"
    YOGA = "yoga"
    MIXED = "mixed"


class NutritionApproach(str, Enum):
    BALANCED = "balanced"
    HIGH_PROTEIN = "high_protein"
    LOW_CARB = "low_carb"
    PLANT_BASED = "plant_based"
    FLEXIBLE = "flexible"


class StressLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class WeightUnit(str, Enum):
    KG = "kg"
    LB = "lb"


class HeightUnit(str, Enum):
    CM = "cm"
    FT_IN = "ft_in"


# ======================================================================
# Engine input
# ======================================================================

class UserProfile(BaseModel):
    """Canonical profile consumed by the engine (SI units only).

    Ranges are deliberately *not* enforced here: the target calculator
    validates biometrics itself and raises
    :class:`~app.engine.errors.InvalidProfileError`.
    """

    biological_sex: BiologicalSex
    age: int
    weight_kg: float
    height_cm: float
    target_weight_kg: Optional[float] = None

    goal: FitnessGoal = FitnessGoal.MAINTAIN
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY
    fitness_experience: FitnessExperience = FitnessExperience.BEGINNER
    workout_preference: WorkoutPreference = WorkoutPreference.MIXED
    weekly_workout_hours: float = Field(3.0, description="Training-time budget in hours per week")
    available_days_per_week: Optional[int] = Field(
        None, description="Explicit training days; derived from the hours budget when omitted",
    )

    nutrition_approach: NutritionApproach = NutritionApproach.BALANCED
    meals_per_day: int = 3

    sleep_hours: float = Field(7.0, description="Self-reported baseline sleep per night")
    stress_level: StressLevel = StressLevel.MODERATE
    motivations: list[str] = Field(default_factory=list)
    challenges: list[str] = Field(default_factory=list)
    goal_statement: str = ""


# ======================================================================
# Boundary models
# ======================================================================

class OnboardingAnswers(BaseModel):
    """Raw onboarding answers, in the units the user chose.

    For ``ft_in`` heights, ``height`` holds the feet and ``height_inches``
    the remaining inches.
    """

    biological_sex: BiologicalSex
    age: int = Field(..., ge=13, le=120)
    weight: float = Field(..., gt=0)
    weight_unit: WeightUnit = WeightUnit.KG
    height: float = Field(..., gt=0)
    height_inches: float = Field(0.0, ge=0, lt=12)
    height_unit: HeightUnit = HeightUnit.CM
    target_weight: Optional[float] = Field(None, gt=0)

    goal: FitnessGoal
    activity_level: ActivityLevel
    fitness_experience: FitnessExperience = FitnessExperience.BEGINNER
    workout_preference: WorkoutPreference = WorkoutPreference.MIXED
    weekly_workout_hours: float = Field(3.0, ge=0, le=40)
    available_days_per_week: Optional[int] = Field(None, ge=1, le=7)

    nutrition_approach: NutritionApproach = NutritionApproach.BALANCED
    meals_per_day: int = Field(3, ge=1, le=6)

    sleep_hours: float = Field(7.0, ge=0, le=24)
    stress_level: StressLevel = StressLevel.MODERATE
    motivations: list[str] = Field(default_factory=list)
    challenges: list[str] = Field(default_factory=list)
    goal_statement: str = Field("", max_length=1000)

    @model_validator(mode="after")
    def _check_metric_height_has_no_inches(self) -> OnboardingAnswers:
        if self.height_unit == HeightUnit.CM and self.height_inches:
            raise ValueError("height_inches is only valid with height_unit 'ft_in'")
        return self

    def _to_kg(self, value: float) -> float:
        return value * KG_PER_LB if self.weight_unit == WeightUnit.LB else value

    def to_profile(self) -> UserProfile:
        """Convert to the canonical SI profile."""
        if self.height_unit == HeightUnit.FT_IN:
            height_cm = (self.height * INCHES_PER_FOOT + self.height_inches) * CM_PER_INCH
        else:
            height_cm = self.height

        return UserProfile(
            biological_sex=self.biological_sex,
            age=self.age,
            weight_kg=round(self._to_kg(self.weight), 2),
            height_cm=round(height_cm, 1),
            target_weight_kg=round(self._to_kg(self.target_weight), 2) if self.target_weight else None,
            goal=self.goal,
            activity_level=self.activity_level,
            fitness_experience=self.fitness_experience,
            workout_preference=self.workout_preference,
            weekly_workout_hours=self.weekly_workout_hours,
            available_days_per_week=self.available_days_per_week,
            nutrition_approach=self.nutrition_approach,
            meals_per_day=self.meals_per_day,
            sleep_hours=self.sleep_hours,
            stress_level=self.stress_level,
            motivations=self.motivations,
            challenges=self.challenges,
            goal_statement=self.goal_statement,
        )


class ProfileUpdate(BaseModel):
    """Partial profile update, SI units.  Unset fields keep their value."""

    age: Optional[int] = Field(None, ge=13, le=120)
    weight_kg: Optional[float] = Field(None, gt=0)
    height_cm: Optional[float] = Field(None, gt=0)
    target_weight_kg: Optional[float] = Field(None, gt=0)
    goal: Optional[FitnessGoal] = None
    activity_level: Optional[ActivityLevel] = None
    fitness_experience: Optional[FitnessExperience] = None
    workout_preference: Optional[WorkoutPreference] = None
    weekly_workout_hours: Optional[float] = Field(None, ge=0, le=40)
    available_days_per_week: Optional[int] = Field(None, ge=1, le=7)
    nutrition_approach: Optional[NutritionApproach] = None
    meals_per_day: Optional[int] = Field(None, ge=1, le=6)
    sleep_hours: Optional[float] = Field(None, ge=0, le=24)
    stress_level: Optional[StressLevel] = None
    motivations: Optional[list[str]] = None
    challenges: Optional[list[str]] = None
    goal_statement: Optional[str] = Field(None, max_length=1000)

    def apply_to(self, profile: UserProfile) -> UserProfile:
        """Return a new profile with the set fields replaced."""
        return profile.model_copy(update=self.model_dump(exclude_unset=True))


# ======================================================================
# Response models
# ======================================================================

class ProfileVersionResponse(BaseModel):
    """A stored profile version."""

    id: int
    version: int
    is_current: bool
    profile: UserProfile
    created_at: datetime.datetime
    superseded_at: Optional[datetime.datetime] = None


class ProfileWithTargets(BaseModel):
    """Profile version plus the targets derived from it."""

    profile: ProfileVersionResponse
    targets: TargetSet
