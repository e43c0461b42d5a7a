"""
Daily energy and macro target schemas.

A :class:`TargetSet` is a derived view of a profile: it is recomputed
whenever the profile changes and never stored on its own.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TargetSet(BaseModel):
    """Daily targets produced by the target calculator."""

    bmr: float = Field(..., ge=0, description="Basal metabolic rate (kcal/day, Mifflin–St Jeor)")
    tdee: float = Field(..., ge=0, description="Total daily energy expenditure (kcal/day)")
    daily_calories: float = Field(..., ge=0, description="Daily calorie target after goal adjustment and clamp")
    daily_protein_grams: float = Field(..., ge=0)
    daily_carb_grams: float = Field(..., ge=0)
    daily_fat_grams: float = Field(..., ge=0)

    calorie_clamp: Optional[str] = Field(
        None, description="'floor' or 'ceiling' when the safety clamp changed the calorie target",
    )
    carb_floor_applied: bool = Field(
        False, description="Carbs were raised to the minimum; macro energy then exceeds the calorie target",
    )
    warnings: list[str] = Field(default_factory=list)

    def macro_calories(self) -> float:
        """Energy implied by the macro targets (4/4/9 kcal per gram)."""
        return self.daily_protein_grams * 4 + self.daily_carb_grams * 4 + self.daily_fat_grams * 9
