"""
Streak computation.

A day *qualifies* for a metric when its aggregated value passes the
metric's predicate (see :mod:`app.engine.metrics`).  The current streak
is the number of consecutive qualifying days ending at ``as_of``; the
first gap walking backward ends it.  ``longest_streak`` is the longest
run anywhere in the supplied history up to ``as_of``.

Nothing is cached: the state is recomputed from the entries on every
call, so edits and deletes in the log store are reflected immediately.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from app.engine.metrics import LogEntryLike, MetricRegistry, daily_values, resolve_metric
from app.schemas.analytics import StreakState, StreakStatus
from app.schemas.logs import MetricKind

_ONE_DAY = datetime.timedelta(days=1)


def longest_run(days: Iterable[datetime.date]) -> int:
    """Length of the longest run of consecutive calendar days."""
    best = run = 0
    previous: Optional[datetime.date] = None
    for day in sorted(set(days)):
        run = run + 1 if previous is not None and day - previous == _ONE_DAY else 1
        best = max(best, run)
        previous = day
    return best


def compute_streak(
    entries: Iterable[LogEntryLike],
    metric: MetricKind,
    as_of: datetime.date,
    habit_id: Optional[str] = None,
    allow_pending_today: bool = False,
) -> StreakState:
    """Recompute the :class:`StreakState` for *metric* as of *as_of*.

    With ``allow_pending_today`` an ``as_of`` day that has no entries at
    all does not end the streak yet; counting starts from the day before.
    An ``as_of`` day with a non-qualifying entry always ends it.
    """
    metric = resolve_metric(metric)
    spec = MetricRegistry.get_or_raise(metric)
    values = daily_values(entries, spec, end=as_of, habit_id=habit_id)
    qualifying = {day for day, value in values.items() if spec.qualifies(value)}

    if not qualifying:
        return StreakState(metric=metric)

    cursor = as_of
    if allow_pending_today and as_of not in values:
        cursor = as_of - _ONE_DAY

    current = 0
    while cursor in qualifying:
        current += 1
        cursor -= _ONE_DAY

    return StreakState(
        metric=metric,
        current_streak=current,
        longest_streak=longest_run(qualifying),
        last_qualifying_date=max(qualifying),
        status=StreakStatus.ACTIVE if current > 0 else StreakStatus.BROKEN,
    )
