"""
User repository.

Handles database operations for :class:`User`.  Rows mirror the identity
and billing collaborators: the email identifies the account and the
subscription flags feed the entitlement checker.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.core.clock import utc_now
from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(func.lower(User.email) == email.lower())
        return self.session.exec(statement).first()

    def email_in_use(self, email: str, exclude_user_id: Optional[int] = None) -> bool:
        """Whether another account already uses *email* (case-insensitive)."""
        statement = select(User.id).where(func.lower(User.email) == email.lower())
        if exclude_user_id is not None:
            statement = statement.where(User.id != exclude_user_id)
        return self.session.exec(statement).first() is not None

    def save(self, user: User) -> User:
        """Persist changes to *user* and stamp ``updated_at``."""
        user.updated_at = utc_now()
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def set_subscription(self, user: User, subscription_status: str, is_premium: bool) -> User:
        """Store the billing collaborator's view of the subscription."""
        user.subscription_status = subscription_status
        user.is_premium = is_premium
        return self.save(user)
