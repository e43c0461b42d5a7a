"""
Log entry service.

Append, edit, delete and list daily log entries.  Entries are validated
against the metric registry before they are stored; range listings are
bounded by the analytics window limit.
"""

import datetime
import logging
import time
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.clock import utc_now
from app.db.repositories.log_entry import LogEntryRepository
from app.engine.analytics import validate_range
from app.engine.metrics import MetricRegistry
from app.models.daily_log_entry import LogEntry
from app.schemas.logs import (
    DailyLogEntry,
    DailyLogEntryCreate,
    DailyLogEntryResponse,
    DailyLogEntryUpdate,
    MetricKind,
)

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class LogService:
    """Service for daily log business logic."""

    def __init__(self, session: Session):
        self.repository = LogEntryRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def append(self, user_id: int, data: DailyLogEntryCreate) -> DailyLogEntryResponse:
        self._validate(data)
        entry = LogEntry(
            user_id=user_id,
            metric=data.metric.value,
            date=data.date,
            timestamp_ms=data.timestamp_ms if data.timestamp_ms is not None else _now_ms(),
            value=data.value,
            completed=data.completed,
            habit_id=data.habit_id,
            quality_percent=data.quality_percent,
            note=data.note,
        )
        entry = self.repository.create(entry)
        logger.debug("User %s logged %s on %s", user_id, entry.metric, entry.date)
        return DailyLogEntryResponse.model_validate(entry)

    def update(self, user_id: int, entry_id: int, data: DailyLogEntryUpdate) -> DailyLogEntryResponse:
        entry = self._get_owned_entry(user_id, entry_id)
        changes = data.model_dump(exclude_unset=True)

        merged = DailyLogEntry.model_validate(entry).model_copy(update=changes)
        self._validate(merged)

        for key, value in changes.items():
            setattr(entry, key, value)
        entry.updated_at = utc_now()
        entry = self.repository.update(entry)
        logger.info("User %s edited %s entry %s", user_id, entry.metric, entry.id)
        return DailyLogEntryResponse.model_validate(entry)

    def delete(self, user_id: int, entry_id: int) -> None:
        entry = self._get_owned_entry(user_id, entry_id)
        self.repository.delete(entry_id)
        logger.info("User %s deleted %s entry %s", user_id, entry.metric, entry_id)

    def get_by_id(self, user_id: int, entry_id: int) -> DailyLogEntryResponse:
        return DailyLogEntryResponse.model_validate(self._get_owned_entry(user_id, entry_id))

    def get_range(
        self, user_id: int, start: datetime.date, end: datetime.date, metric: Optional[MetricKind] = None,
    ) -> list[DailyLogEntryResponse]:
        """Entries in ``[start, end]``; raises ``InvalidWindowError`` for bad ranges."""
        validate_range(start, end)
        entries = self.repository.get_by_user_date_range(user_id, start, end, metric.value if metric else None)
        return [DailyLogEntryResponse.model_validate(e) for e in entries]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(entry) -> None:
        problem = MetricRegistry.get_or_raise(MetricKind(entry.metric)).validate_entry(entry)
        if problem:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=problem)

    def _get_owned_entry(self, user_id: int, entry_id: int) -> LogEntry:
        """Get entry by id and verify ownership."""
        entry = self.repository.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Log entry not found",
            )
        return entry
