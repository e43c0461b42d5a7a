"""
Profile service.

Onboarding, versioned profile updates and target lookup.  Targets are
never stored: they are recomputed from the current profile version on
every read.  A profile is validated by computing its targets *before*
it is persisted, so an unusable profile never becomes current.
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.profile import ProfileRepository
from app.engine.targets import TargetConfig, compute_targets
from app.models.user_profile import ProfileVersion
from app.schemas.profile import (
    OnboardingAnswers,
    ProfileUpdate,
    ProfileVersionResponse,
    ProfileWithTargets,
    UserProfile,
)
from app.schemas.targets import TargetSet

logger = logging.getLogger(__name__)


def target_config_from_settings() -> TargetConfig:
    return TargetConfig(calorie_floor=settings.CALORIE_FLOOR_KCAL, calorie_ceiling=settings.CALORIE_CEILING_KCAL)


class ProfileService:
    """Service for profile business logic."""

    def __init__(self, session: Session, target_config: Optional[TargetConfig] = None):
        self.repository = ProfileRepository(session)
        self.target_config = target_config or target_config_from_settings()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def onboard(self, user_id: int, answers: OnboardingAnswers) -> ProfileWithTargets:
        """Convert onboarding answers to SI and store them as the current profile."""
        return self._store(user_id, answers.to_profile())

    def update(self, user_id: int, data: ProfileUpdate) -> ProfileWithTargets:
        """Apply a partial update as a new profile version."""
        current, _ = self.get_current_profile(user_id)
        return self._store(user_id, data.apply_to(current))

    def get_current(self, user_id: int) -> ProfileVersionResponse:
        return self._to_response(self._get_current_record(user_id))

    def get_current_profile(self, user_id: int) -> tuple[UserProfile, int]:
        """Return ``(profile, version)`` for the current version."""
        record = self._get_current_record(user_id)
        return UserProfile.model_validate(record.profile_data), record.version

    def get_history(self, user_id: int) -> list[ProfileVersionResponse]:
        return [self._to_response(r) for r in self.repository.get_history(user_id)]

    def get_targets(self, user_id: int) -> TargetSet:
        profile, _ = self.get_current_profile(user_id)
        return compute_targets(profile, self.target_config)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _store(self, user_id: int, profile: UserProfile) -> ProfileWithTargets:
        targets = compute_targets(profile, self.target_config)
        record = self.repository.supersede(user_id, profile.model_dump(mode="json"))
        logger.info("User %s profile is now version %s", user_id, record.version)
        return ProfileWithTargets(profile=self._to_response(record), targets=targets)

    def _get_current_record(self, user_id: int) -> ProfileVersion:
        record = self.repository.get_current(user_id)
        if not record:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="No profile yet; complete onboarding first",
            )
        return record

    @staticmethod
    def _to_response(record: ProfileVersion) -> ProfileVersionResponse:
        return ProfileVersionResponse(
            id=record.id,
            version=record.version,
            is_current=record.is_current,
            profile=UserProfile.model_validate(record.profile_data),
            created_at=record.created_at,
            superseded_at=record.superseded_at,
        )
