"""Tests for the combined wellness insights (calmness score)."""

import datetime

import pytest

from app.engine.errors import InvalidWindowError
from app.engine.insights import compute_wellness_insights
from app.schemas.logs import DailyLogEntry, MetricKind

AS_OF = datetime.date(2024, 9, 15)


def _daily(metric: MetricKind, values: list[float]) -> list[DailyLogEntry]:
    """One entry per day ending on AS_OF."""
    n = len(values)
    return [
        DailyLogEntry(metric=metric, date=AS_OF - datetime.timedelta(days=n - 1 - i), value=v)
        for i, v in enumerate(values)
    ]


class TestWellnessInsights:
    def test_no_data(self):
        insights = compute_wellness_insights({}, AS_OF)
        assert insights.calmness_score is None
        assert insights.avg_sleep is None
        assert insights.mood_stability is None
        assert insights.meditation_minutes == 0
        codes = [r.code for r in insights.recommendations]
        assert codes == ["start_meditation", "start_reflection"]

    def test_ideal_week(self):
        insights = compute_wellness_insights({
            MetricKind.MOOD: _daily(MetricKind.MOOD, [4, 4, 4]),
            MetricKind.SLEEP: _daily(MetricKind.SLEEP, [8] * 7),
            MetricKind.MEDITATION: _daily(MetricKind.MEDITATION, [10] * 7),
            MetricKind.REFLECTION: _daily(MetricKind.REFLECTION, [3, 3]),
        }, AS_OF)
        assert insights.calmness_score == 100
        assert insights.avg_sleep == 8.0
        assert insights.sleep_consistency == 0.0
        assert insights.mood_stability == 100
        assert insights.meditation_minutes == 70
        assert insights.reflection_count == 6

    def test_components_without_data_are_dropped(self):
        insights = compute_wellness_insights({MetricKind.MOOD: _daily(MetricKind.MOOD, [3, 3, 3])}, AS_OF)
        assert insights.calmness_score == 100

    def test_low_calmness(self):
        insights = compute_wellness_insights({
            MetricKind.MOOD: _daily(MetricKind.MOOD, [1, 5, 1, 5]),
            MetricKind.SLEEP: _daily(MetricKind.SLEEP, [4, 4, 4]),
        }, AS_OF)
        # (0.4 · 0 + 0.3 · 0.5) / 0.7
        assert insights.calmness_score == 21
        codes = [r.code for r in insights.recommendations]
        assert "low_calmness" in codes
        assert "increase_sleep" in codes
        assert "mood_swings" in codes

    def test_meditation_target_scales_with_window(self):
        entries = _daily(MetricKind.MEDITATION, [10] * 7)
        week = compute_wellness_insights({MetricKind.MEDITATION: entries}, AS_OF, window_days=7)
        fortnight = compute_wellness_insights({MetricKind.MEDITATION: entries}, AS_OF, window_days=14)
        assert week.calmness_score == 100
        assert fortnight.calmness_score == 50

    def test_recommendations_deduplicated(self):
        insights = compute_wellness_insights({}, AS_OF)
        keys = [(r.code, r.metric) for r in insights.recommendations]
        assert len(keys) == len(set(keys))

    def test_invalid_window(self):
        with pytest.raises(InvalidWindowError):
            compute_wellness_insights({}, AS_OF, window_days=0)
