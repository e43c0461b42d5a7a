"""
User profile database model.

Profiles are versioned: an update inserts a new row and marks the
previous one as superseded.  Rows are never deleted.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.core.clock import TZ_DATETIME, utc_now


class ProfileVersion(SQLModel, table=True):
    """One version of a user's canonical (SI) profile.

    ``profile_data`` holds the serialised
    :class:`~app.schemas.profile.UserProfile`; exactly one row per user
    has ``is_current`` set.
    """

    __tablename__ = "user_profiles"
    __table_args__ = (
        UniqueConstraint("user_id", "version", name="uq_user_profile_version"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    version: int = Field(default=1, nullable=False)
    is_current: bool = Field(default=True, nullable=False, index=True)

    profile_data: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=TZ_DATETIME)
    superseded_at: Optional[datetime.datetime] = Field(default=None, sa_type=TZ_DATETIME)
