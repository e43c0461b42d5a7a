"""
Daily log entry schemas.

A log entry is a time-stamped fact keyed by (user, metric, date).
Several entries per metric and day are allowed; the analytics engine
aggregates them per metric (sum or last-write).

Field usage per metric:

==========  ==========================================
metric      fields
==========  ==========================================
sleep       ``value`` (hours), ``quality_percent``
mood        ``value`` (score 1-5)
habit       ``habit_id``, ``completed``
meditation  ``value`` (minutes)
reflection  ``value`` (gratitude / journal count)
sugar       ``completed`` (sugar-free day)
water       ``value`` (glasses)
workout     ``value`` (minutes)
==========  ==========================================
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MetricKind(str, Enum):
    SLEEP = "sleep"
    MOOD = "mood"
    HABIT = "habit"
    MEDITATION = "meditation"
    REFLECTION = "reflection"
    SUGAR = "sugar"
    WATER = "water"
    WORKOUT = "workout"


# ---------------------------------------------------------------------------
# Entity schemas (Base / Create / Update / Response)
# ---------------------------------------------------------------------------

# Shared properties
class DailyLogEntryBase(BaseModel):
    """Base log entry schema with common fields."""

    metric: MetricKind
    date: datetime.date = Field(
        ...,
        description="Calendar date this entry belongs to (YYYY-MM-DD)",
    )
    value: Optional[float] = Field(
        None,
        description="Numeric value (hours, score, minutes, count or glasses)",
    )
    completed: Optional[bool] = Field(
        None,
        description="Completion flag for habit and sugar entries",
    )
    habit_id: Optional[str] = Field(
        None, max_length=100,
        description="Habit archetype id (habit entries only)",
    )
    quality_percent: Optional[float] = Field(
        None, ge=0, le=100,
        description="Sleep quality 0-100 (sleep entries only)",
    )
    note: Optional[str] = Field(None, max_length=2000)


class DailyLogEntry(DailyLogEntryBase):
    """Engine input: an already-stored entry with its write timestamp."""

    timestamp_ms: int = Field(0, description="Epoch milliseconds of the write; last-write tie-break")

    class Config:
        from_attributes = True


# Request schemas
class DailyLogEntryCreate(DailyLogEntryBase):
    """Schema for appending a log entry.  ``timestamp_ms`` defaults to now."""

    timestamp_ms: Optional[int] = Field(None, ge=0)


class DailyLogEntryUpdate(BaseModel):
    """Schema for editing a log entry (metric and date are immutable)."""

    value: Optional[float] = None
    completed: Optional[bool] = None
    habit_id: Optional[str] = Field(None, max_length=100)
    quality_percent: Optional[float] = Field(None, ge=0, le=100)
    note: Optional[str] = Field(None, max_length=2000)


# Response schemas
class DailyLogEntryResponse(DailyLogEntryBase):
    """Schema for log entry data in API responses."""

    id: int
    user_id: int
    timestamp_ms: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
