"""
Profile repository.

Handles database operations for :class:`ProfileVersion`.  Versions are
append-only; :meth:`supersede` swaps the current version in a single
commit.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.core.clock import utc_now
from app.models.user_profile import ProfileVersion


class ProfileRepository:
    """Repository for ProfileVersion database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, profile_id: int) -> Optional[ProfileVersion]:
        return self.session.get(ProfileVersion, profile_id)

    def get_current(self, user_id: int) -> Optional[ProfileVersion]:
        statement = select(ProfileVersion).where(
            ProfileVersion.user_id == user_id,
            ProfileVersion.is_current == True,  # noqa: E712
        )
        return self.session.exec(statement).first()

    def get_history(self, user_id: int) -> list[ProfileVersion]:
        """All versions for a user, newest first."""
        statement = (
            select(ProfileVersion)
            .where(ProfileVersion.user_id == user_id)
            .order_by(ProfileVersion.version.desc())
        )
        return list(self.session.exec(statement).all())

    def latest_version_number(self, user_id: int) -> int:
        statement = select(func.max(ProfileVersion.version)).where(ProfileVersion.user_id == user_id)
        return self.session.exec(statement).first() or 0

    def supersede(self, user_id: int, profile_data: dict) -> ProfileVersion:
        """Insert a new current version and retire the previous one."""
        try:
            previous = self.get_current(user_id)
            if previous is not None:
                previous.is_current = False
                previous.superseded_at = utc_now()
                self.session.add(previous)

            entry = ProfileVersion(
                user_id=user_id,
                version=self.latest_version_number(user_id) + 1,
                is_current=True,
                profile_data=profile_data,
            )
            self.session.add(entry)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(entry)
        return entry
