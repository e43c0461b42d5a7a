"""Tests for versioned profiles and target lookup (in-memory SQLite)."""

import pytest
from fastapi import HTTPException

from app.engine.errors import InvalidProfileError
from app.schemas.profile import (
    ActivityLevel,
    BiologicalSex,
    FitnessGoal,
    OnboardingAnswers,
    ProfileUpdate,
    WeightUnit,
)
from app.services.profile_service import ProfileService


def _answers(**overrides) -> OnboardingAnswers:
    defaults = {
        "biological_sex": BiologicalSex.MALE,
        "age": 30,
        "weight": 80.0,
        "height": 180.0,
        "goal": FitnessGoal.LOSE_WEIGHT,
        "activity_level": ActivityLevel.MODERATELY_ACTIVE,
    }
    defaults.update(overrides)
    return OnboardingAnswers(**defaults)


class TestProfileService:
    def test_onboarding_stores_version_one_with_targets(self, session, make_user):
        user = make_user()
        result = ProfileService(session).onboard(user.id, _answers())

        assert result.profile.version == 1
        assert result.profile.is_current is True
        assert result.targets.daily_calories == 2259.0

    def test_onboarding_converts_units_once(self, session, make_user):
        user = make_user()
        result = ProfileService(session).onboard(user.id, _answers(weight=176.0, weight_unit=WeightUnit.LB))
        assert result.profile.profile.weight_kg == pytest.approx(79.83)

    def test_update_creates_new_version(self, session, make_user):
        user = make_user()
        service = ProfileService(session)
        service.onboard(user.id, _answers())
        updated = service.update(user.id, ProfileUpdate(weight_kg=78.0))

        assert updated.profile.version == 2
        assert updated.profile.profile.weight_kg == 78.0
        assert updated.profile.profile.height_cm == 180.0

        history = service.get_history(user.id)
        assert [v.version for v in history] == [2, 1]
        assert [v.is_current for v in history] == [True, False]
        assert history[1].superseded_at is not None

    def test_targets_follow_current_version(self, session, make_user):
        user = make_user()
        service = ProfileService(session)
        service.onboard(user.id, _answers())
        before = service.get_targets(user.id)
        service.update(user.id, ProfileUpdate(goal=FitnessGoal.MAINTAIN))
        after = service.get_targets(user.id)
        assert after.daily_calories == pytest.approx(before.daily_calories + 500, abs=0.1)

    def test_invalid_profile_is_not_stored(self, session, make_user):
        user = make_user()
        service = ProfileService(session)
        with pytest.raises(InvalidProfileError):
            service.onboard(user.id, _answers(biological_sex=BiologicalSex.OTHER))
        assert service.get_history(user.id) == []

    def test_missing_profile_is_404(self, session, make_user):
        user = make_user()
        with pytest.raises(HTTPException) as exc:
            ProfileService(session).get_current(user.id)
        assert exc.value.status_code == 404
