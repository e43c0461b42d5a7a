"""Tests for rolling statistics, stability and per-metric analytics.

Pure unit tests: entries are built in memory as
:class:`~app.schemas.logs.DailyLogEntry` objects.
"""

import datetime

import pytest

from app.engine.analytics import (
    DEFAULT_ANALYTICS_CONFIG,
    AnalyticsConfig,
    compute_metric_analytics,
    population_std_dev,
    required_lookback_days,
    rolling_average,
    stability_score,
    validate_range,
    window_bounds,
)
from app.engine.errors import InvalidWindowError
from app.schemas.analytics import StreakStatus
from app.schemas.logs import DailyLogEntry, MetricKind

AS_OF = datetime.date(2024, 6, 30)


# ======================================================================
# Helpers
# ======================================================================


def _ago(days: int) -> datetime.date:
    return AS_OF - datetime.timedelta(days=days)


def _entry(metric: MetricKind, days_ago: int, value=None, completed=None, habit_id=None) -> DailyLogEntry:
    return DailyLogEntry(metric=metric, date=_ago(days_ago), value=value, completed=completed,
                         habit_id=habit_id)


def _series(metric: MetricKind, values: list[float]) -> list[DailyLogEntry]:
    """One entry per day, the last value on AS_OF."""
    n = len(values)
    return [_entry(metric, n - 1 - i, v) for i, v in enumerate(values)]


def _codes(analytics) -> list[str]:
    return [r.code for r in analytics.recommendations]


# ======================================================================
# AnalyticsConfig
# ======================================================================


class TestAnalyticsConfig:
    def test_default_values(self):
        cfg = AnalyticsConfig()
        assert cfg.default_window_days == 7
        assert cfg.long_window_days == 90
        assert cfg.min_samples_for_stability == 3
        assert cfg.allow_pending_today is False

    def test_default_config_singleton(self):
        assert DEFAULT_ANALYTICS_CONFIG.max_window_days == 366


# ======================================================================
# Windows
# ======================================================================


class TestWindows:
    def test_bounds_inclusive(self):
        assert window_bounds(AS_OF, 7) == (_ago(6), AS_OF)
        assert window_bounds(AS_OF, 1) == (AS_OF, AS_OF)

    @pytest.mark.parametrize("window_days", [0, -3, 367])
    def test_invalid_window(self, window_days):
        with pytest.raises(InvalidWindowError) as exc:
            window_bounds(AS_OF, window_days)
        assert exc.value.window_days == window_days

    def test_validate_range(self):
        assert validate_range(_ago(6), AS_OF) == 7
        assert validate_range(AS_OF, AS_OF) == 1

    def test_inverted_range(self):
        with pytest.raises(InvalidWindowError):
            validate_range(AS_OF, _ago(1))

    def test_range_too_long(self):
        with pytest.raises(InvalidWindowError):
            validate_range(_ago(366), AS_OF)

    def test_lookback_covers_long_window(self):
        assert required_lookback_days(7) == 90
        assert required_lookback_days(120) == 120


# ======================================================================
# Statistics
# ======================================================================


class TestRollingAverage:
    def test_missing_days_are_skipped(self):
        """Two logged nights in a seven-day window average to their own mean."""
        entries = [_entry(MetricKind.SLEEP, 1, 7.0), _entry(MetricKind.SLEEP, 4, 8.0)]
        assert rolling_average(entries, MetricKind.SLEEP, AS_OF, 7) == 7.5

    def test_window_edges(self):
        entries = [_entry(MetricKind.MOOD, 6, 2.0), _entry(MetricKind.MOOD, 7, 5.0)]
        assert rolling_average(entries, MetricKind.MOOD, AS_OF, 7) == 2.0

    def test_empty_window(self):
        assert rolling_average([], MetricKind.SLEEP, AS_OF, 7) is None

    def test_rounded_to_two_places(self):
        entries = _series(MetricKind.MOOD, [1, 2, 2])
        assert rolling_average(entries, MetricKind.MOOD, AS_OF, 7) == 1.67


class TestStabilityScore:
    @pytest.mark.parametrize("values, cap, expected", [
        ([], 2.0, 100),
        ([7.0], 2.0, 100),
        ([8.0, 8.0, 8.0], 2.0, 100),
        ([6.0, 8.0], 2.0, 50),
        ([5.0, 9.0], 2.0, 0),
        ([0.0, 20.0], 2.0, 0),
    ])
    def test_score(self, values, cap, expected):
        assert stability_score(values, cap) == expected

    def test_population_std_dev(self):
        assert population_std_dev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)
        assert population_std_dev([3.0]) == 0.0


# ======================================================================
# compute_metric_analytics
# ======================================================================


class TestComputeMetricAnalytics:
    def test_sparse_window(self):
        entries = [_entry(MetricKind.SLEEP, 1, 7.0), _entry(MetricKind.SLEEP, 4, 8.0)]
        a = compute_metric_analytics(entries, MetricKind.SLEEP, AS_OF)
        assert a.rolling_average == 7.5
        assert a.sample_count == 2
        assert a.low_confidence is True
        assert a.std_dev == 0.5

    def test_single_value_is_perfectly_stable_but_low_confidence(self):
        a = compute_metric_analytics([_entry(MetricKind.MOOD, 0, 4.0)], MetricKind.MOOD, AS_OF)
        assert a.stability_score == 100
        assert a.std_dev == 0.0
        assert a.low_confidence is True

    def test_long_rolling_average(self):
        entries = [_entry(MetricKind.WATER, 0, 8.0), _entry(MetricKind.WATER, 40, 4.0)]
        a = compute_metric_analytics(entries, MetricKind.WATER, AS_OF)
        assert a.rolling_average == 8.0
        assert a.long_rolling_average == 6.0

    def test_streak_fields(self):
        entries = [_entry(MetricKind.HABIT, n, completed=True, habit_id="walk") for n in range(0, 8)]
        a = compute_metric_analytics(entries, MetricKind.HABIT, AS_OF, habit_id="walk")
        assert a.streak == 8
        assert a.longest_streak == 8
        assert a.streak_status == StreakStatus.ACTIVE
        assert a.habit_id == "walk"
        assert "celebrate_streak" in _codes(a)

    def test_invalid_window(self):
        with pytest.raises(InvalidWindowError):
            compute_metric_analytics([], MetricKind.SLEEP, AS_OF, window_days=0)

    def test_pending_today_config(self):
        entries = [_entry(MetricKind.WORKOUT, n, 30.0) for n in (1, 2, 3)]
        strict = compute_metric_analytics(entries, MetricKind.WORKOUT, AS_OF)
        lenient = compute_metric_analytics(entries, MetricKind.WORKOUT, AS_OF,
                                           config=AnalyticsConfig(allow_pending_today=True))
        assert strict.streak == 0
        assert lenient.streak == 3


class TestRecommendations:
    def test_short_sleep(self):
        a = compute_metric_analytics(_series(MetricKind.SLEEP, [6.0, 6.0, 6.0]), MetricKind.SLEEP, AS_OF)
        assert "increase_sleep" in _codes(a)

    def test_irregular_sleep_needs_enough_samples(self):
        regular_count = compute_metric_analytics(_series(MetricKind.SLEEP, [5.0, 9.0, 5.0, 9.0]),
                                                 MetricKind.SLEEP, AS_OF)
        assert regular_count.stability_score == 0
        assert "irregular_sleep" in _codes(regular_count)

        sparse = compute_metric_analytics(_series(MetricKind.SLEEP, [5.0, 9.0]), MetricKind.SLEEP, AS_OF)
        assert sparse.stability_score == 0
        assert "irregular_sleep" not in _codes(sparse)
        assert "keep_logging" in _codes(sparse)

    def test_no_meditation(self):
        a = compute_metric_analytics([], MetricKind.MEDITATION, AS_OF)
        assert _codes(a) == ["start_meditation"]

    def test_restart_streak(self):
        entries = [_entry(MetricKind.SUGAR, n, completed=True) for n in (3, 4, 5)]
        a = compute_metric_analytics(entries, MetricKind.SUGAR, AS_OF)
        assert a.streak == 0
        assert a.streak_status == StreakStatus.BROKEN
        assert "restart_streak" in _codes(a)

    def test_recommendations_carry_metric(self):
        a = compute_metric_analytics(_series(MetricKind.WATER, [3, 4, 5]), MetricKind.WATER, AS_OF)
        assert _codes(a) == ["drink_more_water"]
        assert a.recommendations[0].metric == MetricKind.WATER
