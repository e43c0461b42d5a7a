"""
Target calculator — profile → daily energy and macro targets.

Pipeline
--------

1. **BMR** (Mifflin–St Jeor)::

       BMR = 10·kg + 6.25·cm − 5·age + s        s = +5 (male), −161 (female)

2. **TDEE** = BMR × activity multiplier (5-point table).
3. **Calories** = TDEE + goal adjustment, clamped to a safety band
   ``[calorie_floor, calorie_ceiling]``.  The clamp is always reported.
4. **Protein** from g/kg of body weight (goal and nutrition-approach
   overrides, approach wins).
5. **Fat** as a fixed share of calories (higher for low-carb).
6. **Carbs** fill the remaining energy, floored at 50 g.

The tables below are the single source of truth for these constants;
nothing else in the code base re-derives them.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, Field

from app.engine.errors import InvalidProfileError
from app.schemas.profile import (
    ActivityLevel,
    BiologicalSex,
    FitnessGoal,
    NutritionApproach,
    UserProfile,
)
from app.schemas.targets import TargetSet

logger = logging.getLogger(__name__)

# ======================================================================
# Tables
# ======================================================================

SEX_CONSTANTS: dict[BiologicalSex, float] = {
    BiologicalSex.MALE: 5.0,
    BiologicalSex.FEMALE: -161.0,
}

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

GOAL_CALORIE_ADJUSTMENTS: dict[FitnessGoal, float] = {
    FitnessGoal.LOSE_WEIGHT: -500.0,
    FitnessGoal.BUILD_MUSCLE: 300.0,
    FitnessGoal.MAINTAIN: 0.0,
    FitnessGoal.IMPROVE_HEALTH: 0.0,
}

# Protein in g per kg of body weight.
BASE_PROTEIN_PER_KG = 1.6
GOAL_PROTEIN_PER_KG: dict[FitnessGoal, float] = {
    FitnessGoal.BUILD_MUSCLE: 2.2,
    FitnessGoal.LOSE_WEIGHT: 2.0,
}
APPROACH_PROTEIN_PER_KG: dict[NutritionApproach, float] = {
    NutritionApproach.HIGH_PROTEIN: 2.5,
}

DEFAULT_FAT_SHARE = 0.30
APPROACH_FAT_SHARE: dict[NutritionApproach, float] = {
    NutritionApproach.LOW_CARB: 0.40,
}

KCAL_PER_G_PROTEIN = 4.0
KCAL_PER_G_CARB = 4.0
KCAL_PER_G_FAT = 9.0

MIN_AGE = 13
MAX_AGE = 120


class TargetConfig(BaseModel):
    """Tunable safety limits for the target calculator."""

    calorie_floor: float = Field(1200.0, ge=0)
    calorie_ceiling: float = Field(5000.0, gt=0)
    min_carb_grams: float = Field(50.0, ge=0)
    decimals: int = Field(1, ge=0, le=3)


DEFAULT_TARGET_CONFIG = TargetConfig()


# ======================================================================
# Validation
# ======================================================================


def validate_profile(profile: UserProfile) -> None:
    """Raise :class:`InvalidProfileError` for unusable biometrics."""
    if profile.weight_kg is None or profile.weight_kg <= 0:
        raise InvalidProfileError("weight_kg", "must be a positive number of kilograms")
    if profile.height_cm is None or profile.height_cm <= 0:
        raise InvalidProfileError("height_cm", "must be a positive number of centimetres")
    if profile.age is None or not MIN_AGE <= profile.age <= MAX_AGE:
        raise InvalidProfileError("age", f"must be between {MIN_AGE} and {MAX_AGE} years")
    if profile.biological_sex not in SEX_CONSTANTS:
        raise InvalidProfileError(
            "biological_sex",
            f"'{getattr(profile.biological_sex, 'value', profile.biological_sex)}' is not supported by the "
            f"Mifflin–St Jeor equation (supported: male, female)",
        )
    if profile.activity_level not in ACTIVITY_MULTIPLIERS:
        raise InvalidProfileError("activity_level", f"unknown activity level '{profile.activity_level}'")
    if profile.goal not in GOAL_CALORIE_ADJUSTMENTS:
        raise InvalidProfileError("goal", f"unknown goal '{profile.goal}'")


# ======================================================================
# Formula pieces
# ======================================================================


def compute_bmr(sex: BiologicalSex, age: int, weight_kg: float, height_cm: float) -> float:
    """Mifflin–St Jeor basal metabolic rate in kcal/day."""
    try:
        s = SEX_CONSTANTS[sex]
    except KeyError:
        raise InvalidProfileError("biological_sex", f"'{getattr(sex, 'value', sex)}' is not supported by the Mifflin–St Jeor equation")
    return 10.0 * weight_kg + 6.25 * height_cm - 5.0 * age + s


def compute_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    return bmr * ACTIVITY_MULTIPLIERS[activity_level]


def protein_per_kg(goal: FitnessGoal, approach: NutritionApproach) -> float:
    """Protein factor; the nutrition-approach override beats the goal override."""
    if approach in APPROACH_PROTEIN_PER_KG:
        return APPROACH_PROTEIN_PER_KG[approach]
    return GOAL_PROTEIN_PER_KG.get(goal, BASE_PROTEIN_PER_KG)


def fat_share(approach: NutritionApproach) -> float:
    return APPROACH_FAT_SHARE.get(approach, DEFAULT_FAT_SHARE)


def _clamp_calories(calories: float, cfg: TargetConfig) -> tuple[float, Optional[str]]:
    if calories < cfg.calorie_floor:
        return cfg.calorie_floor, "floor"
    if calories > cfg.calorie_ceiling:
        return cfg.calorie_ceiling, "ceiling"
    return calories, None


# ======================================================================
# Main entry point
# ======================================================================


def compute_targets(profile: UserProfile, config: Optional[TargetConfig] = None) -> TargetSet:
    """Compute the daily :class:`TargetSet` for *profile*.

    Args:
        profile: Canonical SI profile.
        config: Optional :class:`TargetConfig` override (uses
            ``DEFAULT_TARGET_CONFIG`` if ``None``).

    Returns:
        :class:`TargetSet` rounded to ``config.decimals`` places.

    Raises:
        InvalidProfileError: non-positive weight/height, out-of-range age
            or a biological sex the BMR equation does not cover.
    """
    cfg = config or DEFAULT_TARGET_CONFIG
    validate_profile(profile)
    warnings: list[str] = []

    bmr = compute_bmr(profile.biological_sex, profile.age, profile.weight_kg, profile.height_cm)
    if bmr <= 0:
        raise InvalidProfileError("weight_kg", "biometrics produce a non-positive BMR")
    tdee = compute_tdee(bmr, profile.activity_level)

    raw_calories = tdee + GOAL_CALORIE_ADJUSTMENTS[profile.goal]
    calories, clamp = _clamp_calories(raw_calories, cfg)
    if clamp is not None:
        logger.info("Calorie target %.1f clamped to %s %.1f", raw_calories, clamp, calories)
        warnings.append(f"Calorie target {raw_calories:.0f} kcal was clamped to the safety {clamp} "
                        f"of {calories:.0f} kcal.")

    protein_g = profile.weight_kg * protein_per_kg(profile.goal, profile.nutrition_approach)
    fat_g = calories * fat_share(profile.nutrition_approach) / KCAL_PER_G_FAT

    remaining = calories - protein_g * KCAL_PER_G_PROTEIN - fat_g * KCAL_PER_G_FAT
    carb_g = remaining / KCAL_PER_G_CARB
    carb_floor_applied = carb_g < cfg.min_carb_grams
    if carb_floor_applied:
        carb_g = cfg.min_carb_grams
        warnings.append(f"Carbohydrates raised to the {cfg.min_carb_grams:.0f} g minimum; "
                        "macro energy exceeds the calorie target.")

    d = cfg.decimals
    targets = TargetSet(
        bmr=round(bmr, d),
        tdee=round(tdee, d),
        daily_calories=round(calories, d),
        daily_protein_grams=round(protein_g, d),
        daily_carb_grams=round(carb_g, d),
        daily_fat_grams=round(fat_g, d),
        calorie_clamp=clamp,
        carb_floor_applied=carb_floor_applied,
        warnings=warnings,
    )
    logger.debug("Targets computed: bmr=%s tdee=%s kcal=%s", targets.bmr, targets.tdee, targets.daily_calories)
    return targets
