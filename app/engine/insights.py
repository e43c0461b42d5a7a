"""
Wellness insights — a combined view over sleep, mood, meditation and
reflection logs.

Calmness score
--------------
Weighted mean of three components, each in 0-1:

    mood stability      0.4   stability_score / 100
    sleep adequacy      0.3   min(1, avg_sleep / sleep_target_hours)
    meditation          0.3   min(1, minutes / weekly target scaled to the window)

Components without data are dropped and the remaining weights are
re-normalised; with no data at all the score is ``None``.
"""

from __future__ import annotations

import datetime
import logging
from typing import Iterable, Mapping, Optional

from app.engine.analytics import (
    DEFAULT_ANALYTICS_CONFIG,
    AnalyticsConfig,
    compute_metric_analytics,
    window_total,
)
from app.engine.metrics import LogEntryLike
from app.schemas.analytics import Recommendation, WellnessInsights
from app.schemas.logs import MetricKind

logger = logging.getLogger(__name__)

CALMNESS_WEIGHTS: dict[str, float] = {
    "mood": 0.4,
    "sleep": 0.3,
    "meditation": 0.3,
}

_LOW_CALMNESS = 50


def _calmness(components: dict[str, float]) -> Optional[int]:
    if not components:
        return None
    total_weight = sum(CALMNESS_WEIGHTS[name] for name in components)
    weighted = sum(CALMNESS_WEIGHTS[name] * value for name, value in components.items())
    return max(0, min(100, round(weighted / total_weight * 100)))


def compute_wellness_insights(
    entries_by_metric: Mapping[MetricKind, Iterable[LogEntryLike]],
    as_of: datetime.date,
    config: Optional[AnalyticsConfig] = None,
    window_days: int = 7,
) -> WellnessInsights:
    """Combine sleep, mood, meditation and reflection analytics.

    Raises:
        InvalidWindowError: invalid *window_days*.
    """
    cfg = config or DEFAULT_ANALYTICS_CONFIG

    def _entries(metric: MetricKind) -> list:
        return list(entries_by_metric.get(metric, []))

    sleep_entries = _entries(MetricKind.SLEEP)
    meditation_entries = _entries(MetricKind.MEDITATION)
    reflection_entries = _entries(MetricKind.REFLECTION)

    sleep = compute_metric_analytics(sleep_entries, MetricKind.SLEEP, as_of, window_days, cfg)
    mood = compute_metric_analytics(_entries(MetricKind.MOOD), MetricKind.MOOD, as_of, window_days, cfg)
    meditation = compute_metric_analytics(meditation_entries, MetricKind.MEDITATION, as_of, window_days, cfg)
    reflection = compute_metric_analytics(reflection_entries, MetricKind.REFLECTION, as_of, window_days, cfg)

    meditation_minutes = window_total(meditation_entries, MetricKind.MEDITATION, as_of, window_days, cfg)
    reflection_count = window_total(reflection_entries, MetricKind.REFLECTION, as_of, window_days, cfg)

    components: dict[str, float] = {}
    if mood.sample_count:
        components["mood"] = mood.stability_score / 100.0
    if sleep.rolling_average is not None:
        components["sleep"] = min(1.0, sleep.rolling_average / cfg.sleep_target_hours)
    if meditation.sample_count:
        target = cfg.weekly_meditation_target_minutes * window_days / 7.0
        components["meditation"] = min(1.0, meditation_minutes / target)
    calmness = _calmness(components)

    recommendations: list[Recommendation] = []
    seen: set[tuple[str, Optional[MetricKind]]] = set()
    for analytics in (sleep, mood, meditation, reflection):
        for rec in analytics.recommendations:
            if (rec.code, rec.metric) not in seen:
                seen.add((rec.code, rec.metric))
                recommendations.append(rec)
    if calmness is not None and calmness < _LOW_CALMNESS:
        recommendations.append(Recommendation(
            code="low_calmness",
            message=f"Your calmness score is {calmness} / 100 this period.",
            action="Pair a regular bedtime with a short daily meditation.",
        ))

    logger.debug("Wellness insights as_of=%s: calmness=%s components=%s", as_of, calmness, sorted(components))
    return WellnessInsights(
        as_of=as_of,
        window_days=window_days,
        calmness_score=calmness,
        avg_sleep=sleep.rolling_average,
        sleep_consistency=sleep.std_dev if sleep.sample_count else None,
        mood_stability=mood.stability_score if mood.sample_count else None,
        meditation_minutes=meditation_minutes,
        reflection_count=reflection_count,
        recommendations=recommendations,
    )
