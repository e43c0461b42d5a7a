"""Tests for the metric registry and per-day aggregation."""

import datetime

import pytest

from app.engine.errors import InvalidMetricError
from app.engine.metrics import (
    BUILTIN_METRICS,
    LAST,
    SUM,
    MetricRegistry,
    daily_values,
    register_builtin_metrics,
    resolve_metric,
)
from app.schemas.logs import DailyLogEntry, DailyLogEntryCreate, MetricKind

D1 = datetime.date(2024, 3, 4)
D2 = datetime.date(2024, 3, 5)


def _entry(metric: MetricKind, day: datetime.date, value=None, completed=None, habit_id=None, ts=0):
    return DailyLogEntry(metric=metric, date=day, value=value, completed=completed, habit_id=habit_id,
                         timestamp_ms=ts)


@pytest.fixture
def empty_registry():
    """Clear the registry for one test and restore the built-ins afterwards."""
    MetricRegistry.clear()
    yield MetricRegistry
    MetricRegistry.clear()
    register_builtin_metrics()


# ======================================================================
# Registry
# ======================================================================


class TestMetricRegistry:
    def test_every_metric_registered(self):
        assert set(MetricRegistry.all()) == set(MetricKind)
        assert MetricRegistry.available_metrics() == sorted(m.value for m in MetricKind)

    @pytest.mark.parametrize("metric, aggregation", [
        (MetricKind.SLEEP, LAST),
        (MetricKind.MOOD, LAST),
        (MetricKind.HABIT, LAST),
        (MetricKind.SUGAR, LAST),
        (MetricKind.MEDITATION, SUM),
        (MetricKind.REFLECTION, SUM),
        (MetricKind.WATER, SUM),
        (MetricKind.WORKOUT, SUM),
    ])
    def test_aggregation_per_metric(self, metric, aggregation):
        assert MetricRegistry.get_or_raise(metric).aggregation == aggregation

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError):
            MetricRegistry.register(MetricRegistry.get_or_raise(MetricKind.SLEEP))

    def test_missing_metric_raises_invalid_metric(self, empty_registry):
        assert empty_registry.get(MetricKind.SLEEP) is None
        with pytest.raises(InvalidMetricError) as exc:
            empty_registry.get_or_raise(MetricKind.SLEEP)
        assert exc.value.metric == "sleep"

    def test_unknown_metric_name(self):
        assert resolve_metric("water") == MetricKind.WATER
        with pytest.raises(InvalidMetricError) as exc:
            resolve_metric("steps")
        assert exc.value.metric == "steps"
        assert "sleep" in exc.value.available

    def test_builtins_restorable(self, empty_registry):
        register_builtin_metrics()
        assert len(empty_registry.all()) == len(BUILTIN_METRICS)


# ======================================================================
# Entry validation
# ======================================================================


class TestValidateEntry:
    @pytest.mark.parametrize("payload", [
        {"metric": "sleep", "value": 7.5},
        {"metric": "mood", "value": 4},
        {"metric": "habit", "completed": True, "habit_id": "drink_water"},
        {"metric": "sugar", "completed": False},
        {"metric": "meditation", "value": 10},
        {"metric": "water", "value": 8},
    ])
    def test_valid(self, payload):
        entry = DailyLogEntryCreate(date=D1, **payload)
        assert MetricRegistry.get_or_raise(entry.metric).validate_entry(entry) is None

    @pytest.mark.parametrize("payload, fragment", [
        ({"metric": "sleep"}, "require 'value'"),
        ({"metric": "sleep", "value": 25}, "<= 24"),
        ({"metric": "mood", "value": 0}, ">= 1"),
        ({"metric": "mood", "value": 6}, "<= 5"),
        ({"metric": "habit", "completed": True}, "habit_id"),
        ({"metric": "habit", "habit_id": "meditate"}, "completed"),
        ({"metric": "meditation", "value": -1}, ">= 0"),
    ])
    def test_invalid(self, payload, fragment):
        entry = DailyLogEntryCreate(date=D1, **payload)
        problem = MetricRegistry.get_or_raise(entry.metric).validate_entry(entry)
        assert problem is not None and fragment in problem, problem


# ======================================================================
# daily_values
# ======================================================================


class TestDailyValues:
    def test_last_uses_highest_timestamp(self):
        spec = MetricRegistry.get_or_raise(MetricKind.MOOD)
        entries = [
            _entry(MetricKind.MOOD, D1, 5, ts=3000),
            _entry(MetricKind.MOOD, D1, 2, ts=1000),
        ]
        assert daily_values(entries, spec) == {D1: 5}

    def test_last_equal_timestamps_use_list_order(self):
        spec = MetricRegistry.get_or_raise(MetricKind.SLEEP)
        entries = [_entry(MetricKind.SLEEP, D1, 6, ts=10), _entry(MetricKind.SLEEP, D1, 8, ts=10)]
        assert daily_values(entries, spec) == {D1: 8}

    def test_sum_adds_entries(self):
        spec = MetricRegistry.get_or_raise(MetricKind.MEDITATION)
        entries = [
            _entry(MetricKind.MEDITATION, D1, 5),
            _entry(MetricKind.MEDITATION, D1, 10),
            _entry(MetricKind.MEDITATION, D2, 3),
        ]
        assert daily_values(entries, spec) == {D1: 15, D2: 3}

    def test_flag_metrics(self):
        spec = MetricRegistry.get_or_raise(MetricKind.SUGAR)
        entries = [_entry(MetricKind.SUGAR, D1, completed=True), _entry(MetricKind.SUGAR, D2, completed=False)]
        assert daily_values(entries, spec) == {D1: 1.0, D2: 0.0}

    def test_filters(self):
        spec = MetricRegistry.get_or_raise(MetricKind.HABIT)
        entries = [
            _entry(MetricKind.HABIT, D1, completed=True, habit_id="walk"),
            _entry(MetricKind.HABIT, D2, completed=True, habit_id="read"),
            _entry(MetricKind.MOOD, D2, 3),
        ]
        assert daily_values(entries, spec, habit_id="walk") == {D1: 1.0}
        assert daily_values(entries, spec, start=D2) == {D2: 1.0}
        assert daily_values(entries, spec, end=D1) == {D1: 1.0}

    def test_entries_without_value_ignored(self):
        spec = MetricRegistry.get_or_raise(MetricKind.WATER)
        assert daily_values([_entry(MetricKind.WATER, D1)], spec) == {}

    def test_habits_resolve_per_habit_then_average(self):
        spec = MetricRegistry.get_or_raise(MetricKind.HABIT)
        entries = [
            _entry(MetricKind.HABIT, D1, completed=True, habit_id="walk", ts=1),
            _entry(MetricKind.HABIT, D1, completed=False, habit_id="read", ts=2),
            _entry(MetricKind.HABIT, D1, completed=False, habit_id="walk", ts=0),
        ]
        assert daily_values(entries, spec) == {D1: 0.5}
        assert daily_values(entries, spec, habit_id="walk") == {D1: 1.0}
