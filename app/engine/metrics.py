"""
Metric registry.

Every loggable metric is described by a :class:`MetricSpec`:

- **aggregation**: how several entries on one day collapse to one value
  (``sum`` for counts and durations, ``last`` for single-value readings,
  where the highest ``timestamp_ms`` wins and later list position breaks
  ties),
- **extract**: the numeric value an entry contributes,
- **qualifies**: whether an aggregated day value counts toward a streak,
- **stability_cap**: the σ at which the stability score reaches 0,
- a validation range for incoming entries.

Specs are registered at import time in :class:`MetricRegistry`.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Protocol

from app.engine.errors import InvalidMetricError
from app.schemas.logs import MetricKind

SUM = "sum"
LAST = "last"


class LogEntryLike(Protocol):
    """Anything shaped like a :class:`~app.schemas.logs.DailyLogEntry` (schema or ORM row)."""

    metric: MetricKind
    date: datetime.date
    timestamp_ms: int
    value: Optional[float]
    completed: Optional[bool]
    habit_id: Optional[str]


def _numeric(entry: LogEntryLike) -> Optional[float]:
    return entry.value


def _flag(entry: LogEntryLike) -> Optional[float]:
    if entry.completed is None:
        return None
    return 1.0 if entry.completed else 0.0


def _always(_: float) -> bool:
    return True


def _positive(value: float) -> bool:
    return value > 0


def _at_least_one(value: float) -> bool:
    return value >= 1


@dataclass(frozen=True)
class MetricSpec:
    """How one metric is aggregated, qualified and validated."""

    metric: MetricKind
    aggregation: str
    extract: Callable[[LogEntryLike], Optional[float]]
    qualifies: Callable[[float], bool]
    stability_cap: float
    unit: str = ""
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    requires_habit_id: bool = False

    @property
    def uses_flag(self) -> bool:
        return self.extract is _flag

    def validate_entry(self, entry) -> Optional[str]:
        """Return a problem description for an incoming entry, or ``None``."""
        if self.uses_flag:
            if entry.completed is None:
                return f"'{self.metric.value}' entries require 'completed'"
        else:
            if entry.value is None:
                return f"'{self.metric.value}' entries require 'value'"
            if self.min_value is not None and entry.value < self.min_value:
                return f"'{self.metric.value}' value must be >= {self.min_value:g} {self.unit}".rstrip()
            if self.max_value is not None and entry.value > self.max_value:
                return f"'{self.metric.value}' value must be <= {self.max_value:g} {self.unit}".rstrip()
        if self.requires_habit_id and not entry.habit_id:
            return f"'{self.metric.value}' entries require 'habit_id'"
        return None


class MetricRegistry:
    """Singleton registry of metric specs."""

    _specs: dict[MetricKind, MetricSpec] = {}

    @classmethod
    def register(cls, spec: MetricSpec) -> None:
        """Register a metric spec.

        Raises :class:`ValueError` if the metric is already registered.
        """
        if spec.metric in cls._specs:
            raise ValueError(f"Metric '{spec.metric.value}' already registered")
        cls._specs[spec.metric] = spec

    @classmethod
    def get(cls, metric: MetricKind) -> Optional[MetricSpec]:
        return cls._specs.get(metric)

    @classmethod
    def get_or_raise(cls, metric: MetricKind) -> MetricSpec:
        """Get the spec for *metric*.

        Raises :class:`InvalidMetricError` if not found.
        """
        spec = cls._specs.get(metric)
        if not spec:
            raise InvalidMetricError(str(getattr(metric, "value", metric)), cls.available_metrics())
        return spec

    @classmethod
    def all(cls) -> dict[MetricKind, MetricSpec]:
        return dict(cls._specs)

    @classmethod
    def available_metrics(cls) -> list[str]:
        return sorted(m.value for m in cls._specs)

    @classmethod
    def clear(cls) -> None:
        """Remove all specs.  Useful for testing."""
        cls._specs.clear()


BUILTIN_METRICS: list[MetricSpec] = [
    MetricSpec(MetricKind.SLEEP, LAST, _numeric, _always, 2.0, "h", 0, 24),
    MetricSpec(MetricKind.MOOD, LAST, _numeric, _always, 2.0, "", 1, 5),
    MetricSpec(MetricKind.HABIT, LAST, _flag, _positive, 0.5, requires_habit_id=True),
    MetricSpec(MetricKind.MEDITATION, SUM, _numeric, _positive, 10.0, "min", 0, 1440),
    MetricSpec(MetricKind.REFLECTION, SUM, _numeric, _at_least_one, 2.0, "", 0, 100),
    MetricSpec(MetricKind.SUGAR, LAST, _flag, _positive, 0.5),
    MetricSpec(MetricKind.WATER, SUM, _numeric, _positive, 3.0, "glasses", 0, 50),
    MetricSpec(MetricKind.WORKOUT, SUM, _numeric, _positive, 30.0, "min", 0, 1440),
]


def register_builtin_metrics() -> None:
    """Register every built-in spec that is not registered yet."""
    for spec in BUILTIN_METRICS:
        if MetricRegistry.get(spec.metric) is None:
            MetricRegistry.register(spec)


def resolve_metric(metric) -> MetricKind:
    """Coerce a metric name to :class:`MetricKind`.

    Raises :class:`InvalidMetricError` for unknown names.
    """
    try:
        return MetricKind(metric)
    except ValueError as exc:
        raise InvalidMetricError(str(metric), sorted(m.value for m in MetricKind)) from exc


# ======================================================================
# Aggregation
# ======================================================================


def daily_values(
    entries: Iterable[LogEntryLike],
    spec: MetricSpec,
    start: Optional[datetime.date] = None,
    end: Optional[datetime.date] = None,
    habit_id: Optional[str] = None,
) -> dict[datetime.date, float]:
    """Aggregate *entries* to ``{date: value}`` for one metric.

    Entries of other metrics, entries outside ``[start, end]``, entries
    without a usable value and (when *habit_id* is given) other habits
    are ignored.  Input order does not need to be sorted.

    ``last`` readings are resolved per ``(date, habit_id)``; when several
    habits were logged on one day the day value is their mean, i.e. the
    completion ratio for flag metrics.
    """
    sums: dict[datetime.date, float] = {}
    latest: dict[tuple[datetime.date, Optional[str]], tuple[int, int, float]] = {}

    for position, entry in enumerate(entries):
        if entry.metric != spec.metric:
            continue
        if habit_id is not None and entry.habit_id != habit_id:
            continue
        if (start is not None and entry.date < start) or (end is not None and entry.date > end):
            continue
        value = spec.extract(entry)
        if value is None:
            continue

        if spec.aggregation == SUM:
            sums[entry.date] = sums.get(entry.date, 0.0) + value
        else:
            slot = (entry.date, entry.habit_id)
            key = (entry.timestamp_ms or 0, position)
            current = latest.get(slot)
            if current is None or key >= current[:2]:
                latest[slot] = (key[0], key[1], value)

    if spec.aggregation == SUM:
        return sums

    per_day: dict[datetime.date, list[float]] = {}
    for (day, _), row in latest.items():
        per_day.setdefault(day, []).append(row[2])
    return {day: sum(values) / len(values) for day, values in per_day.items()}


register_builtin_metrics()
