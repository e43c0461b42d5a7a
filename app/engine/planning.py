"""
Shared plan-generation configuration and ranking.

Archetype selection is always *rule-ranked*: candidates are ordered by a
score and then by name, so the same input produces the same plan.  When
a seed is supplied, candidates with equal scores are shuffled with a
``random.Random(seed)`` instead of the name tie-break.  Scores are never
randomised, so every seeded plan satisfies the same invariants.
"""

from __future__ import annotations

import random
from typing import Callable, Iterable, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PlanConfig(BaseModel):
    """Configuration for the three plan generators."""

    # Nutrition
    meal_share_tolerance: float = Field(0.15, gt=0.0, le=1.0,
                                        description="Max absolute difference per macro energy share")
    min_meal_suggestions: int = Field(2, ge=0)
    max_meal_suggestions: int = Field(4, ge=1)

    # Fitness
    min_exercises_per_workout: int = Field(4, ge=1)
    warmup_minutes: float = Field(10.0, ge=0)
    strength_set_minutes: float = Field(0.75, gt=0, description="Working time of one strength set")

    # Wellness
    base_sleep_hours: float = Field(8.0, gt=0, le=12)
    high_stress_sleep_bonus: float = Field(0.5, ge=0)
    wake_time: str = Field("07:00", pattern=r"^\d{2}:\d{2}$")
    bedtime_window_minutes: int = Field(30, ge=0, le=180)
    max_habits: int = Field(6, ge=1)


DEFAULT_PLAN_CONFIG = PlanConfig()


def make_rng(seed: Optional[int]) -> Optional[random.Random]:
    return random.Random(seed) if seed is not None else None


def rank(
    items: Iterable[T],
    score: Callable[[T], tuple],
    name: Callable[[T], str],
    rng: Optional[random.Random] = None,
) -> list[T]:
    """Order *items* by ascending *score*; ties by name or, when seeded, by rng."""
    decorated = []
    for item in items:
        tie = rng.random() if rng is not None else 0.0
        decorated.append((score(item), tie, name(item), item))
    decorated.sort(key=lambda row: (row[0], row[1], row[2]))
    return [row[3] for row in decorated]
