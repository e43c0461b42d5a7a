"""
User service.

Business logic for user registration and lookup.  Credentials belong to
the identity collaborator; this service only mirrors the account.
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.entitlements import ACTIVE_SUBSCRIPTION_STATUSES
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)

    def register(self, user_data: UserCreate) -> User:
        """
        Register a new user.

        Raises:
            HTTPException: If email already exists
        """
        if self.repository.email_in_use(user_data.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already registered")

        user = self.repository.create(User(email=user_data.email, full_name=user_data.full_name))
        logger.info("Registered user %s", user.id)
        return user

    def update(self, user: User, data: UserUpdate) -> User:
        changes = data.model_dump(exclude_unset=True)
        if "email" in changes and self.repository.email_in_use(changes["email"], exclude_user_id=user.id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already in use")
        for key, value in changes.items():
            setattr(user, key, value)
        return self.repository.save(user)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Returns:
            User if found, None otherwise
        """
        return self.repository.get_by_id(user_id)

    def update_subscription(self, user_id: int, subscription_status: str) -> User:
        """
        Apply a subscription change reported by the billing collaborator.

        ``is_premium`` is kept in sync with the status so the entitlement
        checker sees one consistent tier.

        Raises:
            HTTPException: If the user does not exist
        """
        user = self.repository.get_by_id(user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        subscription_status = subscription_status.strip().lower()
        is_premium = subscription_status in ACTIVE_SUBSCRIPTION_STATUSES
        user = self.repository.set_subscription(user, subscription_status, is_premium)
        logger.info("User %s subscription is now %s (premium=%s)", user.id, subscription_status, is_premium)
        return user
