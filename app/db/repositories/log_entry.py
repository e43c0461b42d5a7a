"""
Log entry repository.

Handles database operations for :class:`LogEntry`.  Range queries are
always bounded by dates so analytics never load a user's full history.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.daily_log_entry import LogEntry


class LogEntryRepository:
    """Repository for LogEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: LogEntry) -> LogEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[LogEntry]:
        return self.session.get(LogEntry, entry_id)

    def get_by_user_date_range(
        self, user_id: int, start: datetime.date, end: datetime.date, metric: Optional[str] = None,
    ) -> list[LogEntry]:
        """Entries for a user within a date range (inclusive), oldest first.

        Ties on the same date are ordered by write timestamp so the last
        element is the last write.
        """
        statement = select(LogEntry).where(
            LogEntry.user_id == user_id,
            LogEntry.date >= start,
            LogEntry.date <= end,
        )
        if metric is not None:
            statement = statement.where(LogEntry.metric == metric)
        statement = statement.order_by(LogEntry.date, LogEntry.timestamp_ms, LogEntry.id)
        return list(self.session.exec(statement).all())

    def get_by_user_metrics_date_range(
        self, user_id: int, metrics: list[str], start: datetime.date, end: datetime.date,
    ) -> list[LogEntry]:
        statement = (
            select(LogEntry)
            .where(
                LogEntry.user_id == user_id,
                LogEntry.metric.in_(metrics),
                LogEntry.date >= start,
                LogEntry.date <= end,
            )
            .order_by(LogEntry.date, LogEntry.timestamp_ms, LogEntry.id)
        )
        return list(self.session.exec(statement).all())

    def update(self, entry: LogEntry) -> LogEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
