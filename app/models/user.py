"""
User database model.

Identity itself lives with the identity collaborator; this table keeps
the account flags the app needs (entitlement tier, admin) keyed by id.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.core.clock import TZ_DATETIME, utc_now


class User(SQLModel, table=True):
    """
    Application user.

    ``is_premium`` and ``subscription_status`` mirror the billing
    collaborator and are only read by the entitlement checker.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)

    # Profile
    full_name: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = Field(default=True)
    is_admin: bool = Field(default=False)

    # Entitlements
    is_premium: bool = Field(default=False)
    subscription_status: str = Field(default="free", max_length=50)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=TZ_DATETIME)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=TZ_DATETIME)
