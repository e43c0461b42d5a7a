"""
Analytics schemas — streaks, rolling statistics, recommendations.

Streak status labels:

- ``no_history`` — nothing in the supplied history qualifies
- ``active``     — the as-of date continues a run of qualifying days
- ``broken``     — there were qualifying days, but the run ended before as-of

Stability scores are 0-100 (higher = steadier).  A score computed from
fewer than ``min_samples_for_stability`` values is marked
``low_confidence`` and should not be read on its own.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.logs import MetricKind


class StreakStatus(str, Enum):
    NO_HISTORY = "no_history"
    ACTIVE = "active"
    BROKEN = "broken"


class StreakState(BaseModel):
    """Streak state for one (user, metric), always recomputed from logs."""

    metric: MetricKind
    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)
    last_qualifying_date: Optional[datetime.date] = None
    status: StreakStatus = StreakStatus.NO_HISTORY


class Recommendation(BaseModel):
    """Advisory display text derived from the statistics."""

    code: str
    metric: Optional[MetricKind] = None
    message: str
    action: Optional[str] = None


class MetricAnalytics(BaseModel):
    """Derived statistics for one metric as of a date."""

    metric: MetricKind
    as_of: datetime.date
    window_days: int
    habit_id: Optional[str] = None

    streak: int = Field(..., ge=0, description="Current streak in days")
    longest_streak: int = Field(..., ge=0)
    streak_status: StreakStatus
    last_qualifying_date: Optional[datetime.date] = None

    rolling_average: Optional[float] = Field(None, description="Mean over days with entries; None if none")
    long_rolling_average: Optional[float] = Field(None, description="Same over the long window (90 days)")
    stability_score: int = Field(..., ge=0, le=100)
    std_dev: float = Field(..., ge=0, description="Population standard deviation of the window values")
    sample_count: int = Field(..., ge=0, description="Days with entries in the window")
    low_confidence: bool = Field(..., description="Too few samples for the stability score to mean much")

    recommendations: list[Recommendation] = Field(default_factory=list)


class WellnessInsights(BaseModel):
    """Combined sleep / mood / meditation / reflection view.

    ``calmness_score`` weighs mood stability, sleep adequacy and
    meditation minutes, using only components that have data.
    """

    as_of: datetime.date
    window_days: int
    calmness_score: Optional[int] = Field(None, ge=0, le=100)
    avg_sleep: Optional[float] = None
    sleep_consistency: Optional[float] = Field(None, description="Std-dev of nightly sleep hours")
    mood_stability: Optional[int] = Field(None, ge=0, le=100)
    meditation_minutes: float = 0.0
    reflection_count: float = 0.0
    recommendations: list[Recommendation] = Field(default_factory=list)
