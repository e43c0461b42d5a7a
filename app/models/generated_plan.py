"""
Generated plan database model.

Stores each generated nutrition / fitness / wellness plan as JSON.
Regeneration deactivates the previous plans instead of deleting them,
so the table doubles as plan history.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from app.core.clock import TZ_DATETIME, utc_now


class GeneratedPlan(SQLModel, table=True):
    """One plan of one kind; at most one active row per (user, kind)."""

    __tablename__ = "generated_plans"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    kind: str = Field(nullable=False, max_length=20, index=True)
    is_active: bool = Field(default=True, nullable=False, index=True)

    # Generation inputs
    profile_version: int = Field(nullable=False)
    catalog_version: str = Field(nullable=False, max_length=50)
    seed: Optional[int] = Field(default=None)

    payload: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    warnings: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=TZ_DATETIME)
    deactivated_at: Optional[datetime.datetime] = Field(default=None, sa_type=TZ_DATETIME)
