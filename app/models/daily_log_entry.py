"""
Daily log entry database model.

Stores every logged fact as its own row; several rows per
(user, metric, date) are allowed and aggregated on read.
"""

import datetime
from typing import Optional

from sqlalchemy import BigInteger, Column, Index
from sqlmodel import Field, SQLModel

from app.core.clock import TZ_DATETIME, utc_now


class LogEntry(SQLModel, table=True):
    """A time-stamped log entry for one metric on one calendar date."""

    __tablename__ = "daily_log_entries"
    __table_args__ = (
        Index("ix_log_user_metric_date", "user_id", "metric", "date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    metric: str = Field(nullable=False, max_length=30)
    date: datetime.date = Field(nullable=False)
    timestamp_ms: int = Field(sa_column=Column(BigInteger, nullable=False))

    value: Optional[float] = Field(default=None)
    completed: Optional[bool] = Field(default=None)
    habit_id: Optional[str] = Field(default=None, max_length=100)
    quality_percent: Optional[float] = Field(default=None)
    note: Optional[str] = Field(default=None, max_length=2000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=TZ_DATETIME)
    updated_at: datetime.datetime = Field(default_factory=utc_now, sa_type=TZ_DATETIME)
