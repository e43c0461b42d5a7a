"""
Analytics service.

Loads only the date range the engine needs from the log store
(``max(window, long window)`` days ending at ``as_of``) and hands it to
the pure analytics functions.  The engine computes every value
regardless of entitlement; gating happens in the API layer.
"""

import datetime
from collections import defaultdict
from typing import Optional

from sqlmodel import Session

from app.db.repositories.log_entry import LogEntryRepository
from app.engine.analytics import (
    DEFAULT_ANALYTICS_CONFIG,
    AnalyticsConfig,
    compute_metric_analytics,
    required_lookback_days,
    window_bounds,
)
from app.engine.insights import compute_wellness_insights
from app.schemas.analytics import MetricAnalytics, WellnessInsights
from app.schemas.logs import DailyLogEntry, MetricKind

_INSIGHT_METRICS = [MetricKind.SLEEP, MetricKind.MOOD, MetricKind.MEDITATION, MetricKind.REFLECTION]


class AnalyticsService:
    """Service for metric analytics."""

    def __init__(self, session: Session, config: Optional[AnalyticsConfig] = None):
        self.repository = LogEntryRepository(session)
        self.config = config or DEFAULT_ANALYTICS_CONFIG

    def metric_analytics(
        self,
        user_id: int,
        metric: MetricKind,
        as_of: datetime.date,
        window_days: int = 7,
        habit_id: Optional[str] = None,
    ) -> MetricAnalytics:
        start = self._lookback_start(as_of, window_days)
        rows = self.repository.get_by_user_date_range(user_id, start, as_of, metric.value)
        entries = [DailyLogEntry.model_validate(r) for r in rows]
        return compute_metric_analytics(entries, metric, as_of, window_days, self.config, habit_id)

    def wellness_insights(self, user_id: int, as_of: datetime.date, window_days: int = 7) -> WellnessInsights:
        start = self._lookback_start(as_of, window_days)
        rows = self.repository.get_by_user_metrics_date_range(
            user_id, [m.value for m in _INSIGHT_METRICS], start, as_of,
        )
        by_metric: dict[MetricKind, list[DailyLogEntry]] = defaultdict(list)
        for row in rows:
            entry = DailyLogEntry.model_validate(row)
            by_metric[entry.metric].append(entry)
        return compute_wellness_insights(by_metric, as_of, self.config, window_days)

    def _lookback_start(self, as_of: datetime.date, window_days: int) -> datetime.date:
        window_bounds(as_of, window_days, self.config)
        lookback = required_lookback_days(window_days, self.config)
        return as_of - datetime.timedelta(days=lookback - 1)
