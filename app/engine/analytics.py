"""
Rolling statistics and per-metric analytics.

Windows
-------
A window of ``N`` days ending at ``as_of`` covers
``[as_of − (N − 1), as_of]``.  Days without entries are *skipped*, never
counted as zero, so two logged days in a seven-day window average to the
mean of those two values.

Stability
---------
Population standard deviation σ of the window's day values, mapped to
0-100 with the metric's cap::

    score = clamp(0, 100, round((1 − min(σ, cap) / cap) · 100))

≤1 value gives σ = 0 and the maximum score; ``sample_count`` and
``low_confidence`` travel with the score so callers can tell.

Cost is proportional to the entries passed in: callers hand over only the
needed date range (see :func:`required_lookback_days`).
"""

from __future__ import annotations

import datetime
import logging
import statistics
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from app.engine.errors import InvalidWindowError
from app.engine.metrics import LogEntryLike, MetricRegistry, daily_values, resolve_metric
from app.engine.recommendations import derive_recommendations
from app.engine.streaks import compute_streak
from app.schemas.analytics import MetricAnalytics
from app.schemas.logs import MetricKind

logger = logging.getLogger(__name__)


class AnalyticsConfig(BaseModel):
    """Configuration for streak and rolling-statistics computation."""

    default_window_days: int = Field(7, ge=1)
    long_window_days: int = Field(90, ge=1)
    max_window_days: int = Field(366, ge=1)
    min_samples_for_stability: int = Field(3, ge=1)
    allow_pending_today: bool = Field(False, description="An as-of day without entries does not break the streak")
    sleep_target_hours: float = Field(8.0, gt=0)
    weekly_meditation_target_minutes: float = Field(70.0, gt=0)


DEFAULT_ANALYTICS_CONFIG = AnalyticsConfig()


# ======================================================================
# Windows
# ======================================================================


def validate_range(start: datetime.date, end: datetime.date, config: Optional[AnalyticsConfig] = None) -> int:
    """Check an inclusive date range and return its length in days.

    Raises:
        InvalidWindowError: ``start > end`` or the range is longer than
            ``max_window_days``.
    """
    cfg = config or DEFAULT_ANALYTICS_CONFIG
    if start > end:
        raise InvalidWindowError(f"start {start.isoformat()} is after end {end.isoformat()}")
    days = (end - start).days + 1
    if days > cfg.max_window_days:
        raise InvalidWindowError(f"range of {days} days exceeds the {cfg.max_window_days}-day maximum", days)
    return days


def window_bounds(
    as_of: datetime.date,
    window_days: int,
    config: Optional[AnalyticsConfig] = None,
) -> tuple[datetime.date, datetime.date]:
    """Return the inclusive ``(start, end)`` of a window ending at *as_of*."""
    cfg = config or DEFAULT_ANALYTICS_CONFIG
    if window_days < 1:
        raise InvalidWindowError("window_days must be at least 1", window_days)
    if window_days > cfg.max_window_days:
        raise InvalidWindowError(f"window_days must be at most {cfg.max_window_days}", window_days)
    return as_of - datetime.timedelta(days=window_days - 1), as_of


def required_lookback_days(window_days: int, config: Optional[AnalyticsConfig] = None) -> int:
    """Days of history a caller must load for :func:`compute_metric_analytics`."""
    cfg = config or DEFAULT_ANALYTICS_CONFIG
    return max(window_days, cfg.long_window_days)


# ======================================================================
# Statistics
# ======================================================================


def window_values(
    entries: Iterable[LogEntryLike],
    metric: MetricKind,
    as_of: datetime.date,
    window_days: int,
    habit_id: Optional[str] = None,
    config: Optional[AnalyticsConfig] = None,
) -> list[float]:
    """Aggregated day values in the window, oldest first; missing days skipped."""
    start, end = window_bounds(as_of, window_days, config)
    spec = MetricRegistry.get_or_raise(metric)
    values = daily_values(entries, spec, start=start, end=end, habit_id=habit_id)
    return [values[day] for day in sorted(values)]


def rolling_average(
    entries: Iterable[LogEntryLike],
    metric: MetricKind,
    as_of: datetime.date,
    window_days: int = 7,
    habit_id: Optional[str] = None,
    config: Optional[AnalyticsConfig] = None,
) -> Optional[float]:
    """Mean over days with entries; ``None`` when the window is empty."""
    values = window_values(entries, metric, as_of, window_days, habit_id, config)
    if not values:
        return None
    return round(statistics.fmean(values), 2)


def window_total(
    entries: Iterable[LogEntryLike],
    metric: MetricKind,
    as_of: datetime.date,
    window_days: int = 7,
    config: Optional[AnalyticsConfig] = None,
) -> float:
    """Sum of the day values in the window (minutes, counts, glasses)."""
    return round(sum(window_values(entries, metric, as_of, window_days, config=config)), 2)


def population_std_dev(values: list[float]) -> float:
    if len(values) <= 1:
        return 0.0
    return statistics.pstdev(values)


def stability_score(values: list[float], cap: float) -> int:
    """0-100 consistency score; lower σ gives a higher score."""
    sigma = population_std_dev(values)
    score = round((1.0 - min(sigma, cap) / cap) * 100)
    return max(0, min(100, score))


# ======================================================================
# Main entry point
# ======================================================================


def compute_metric_analytics(
    entries: Iterable[LogEntryLike],
    metric: MetricKind,
    as_of: datetime.date,
    window_days: int = 7,
    config: Optional[AnalyticsConfig] = None,
    habit_id: Optional[str] = None,
) -> MetricAnalytics:
    """Streak, rolling averages and stability for one metric.

    Args:
        entries: Log entries for the user (any order; other metrics are
            ignored).  Pass at least :func:`required_lookback_days` of
            history before *as_of*.
        metric: Metric to analyse.
        as_of: Reference date (inclusive window end).
        window_days: Short window length (default 7).
        config: Optional :class:`AnalyticsConfig`.
        habit_id: Restrict habit entries to one habit.

    Raises:
        InvalidWindowError: window shorter than 1 day or longer than
            ``max_window_days``.
        InvalidMetricError: *metric* is unknown or not registered.
    """
    cfg = config or DEFAULT_ANALYTICS_CONFIG
    metric = resolve_metric(metric)
    window_bounds(as_of, window_days, cfg)
    spec = MetricRegistry.get_or_raise(metric)
    entries = list(entries)

    streak = compute_streak(entries, metric, as_of, habit_id=habit_id,
                            allow_pending_today=cfg.allow_pending_today)
    values = window_values(entries, metric, as_of, window_days, habit_id, cfg)
    long_avg = rolling_average(entries, metric, as_of, min(cfg.long_window_days, cfg.max_window_days),
                               habit_id, cfg)

    analytics = MetricAnalytics(
        metric=metric,
        as_of=as_of,
        window_days=window_days,
        habit_id=habit_id,
        streak=streak.current_streak,
        longest_streak=streak.longest_streak,
        streak_status=streak.status,
        last_qualifying_date=streak.last_qualifying_date,
        rolling_average=round(statistics.fmean(values), 2) if values else None,
        long_rolling_average=long_avg,
        stability_score=stability_score(values, spec.stability_cap),
        std_dev=round(population_std_dev(values), 3),
        sample_count=len(values),
        low_confidence=len(values) < cfg.min_samples_for_stability,
    )
    recommendations = derive_recommendations(analytics, cfg.min_samples_for_stability)
    logger.debug("Analytics %s as_of=%s: streak=%d samples=%d", metric.value, as_of, analytics.streak,
                 analytics.sample_count)
    return analytics.model_copy(update={"recommendations": recommendations})
