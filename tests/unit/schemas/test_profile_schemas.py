"""Tests for the onboarding boundary, profile updates and log schemas."""

import datetime

import pytest
from pydantic import ValidationError

from app.schemas.logs import DailyLogEntryCreate, MetricKind
from app.schemas.profile import (
    ActivityLevel,
    BiologicalSex,
    FitnessGoal,
    HeightUnit,
    OnboardingAnswers,
    ProfileUpdate,
    WeightUnit,
)


def _make_answers(**overrides) -> OnboardingAnswers:
    defaults = {
        "biological_sex": BiologicalSex.FEMALE,
        "age": 34,
        "weight": 68.0,
        "height": 170.0,
        "goal": FitnessGoal.MAINTAIN,
        "activity_level": ActivityLevel.LIGHTLY_ACTIVE,
    }
    defaults.update(overrides)
    return OnboardingAnswers(**defaults)


class TestOnboardingAnswers:
    def test_metric_units_pass_through(self):
        profile = _make_answers().to_profile()
        assert profile.weight_kg == 68.0
        assert profile.height_cm == 170.0

    def test_pounds_converted(self):
        profile = _make_answers(weight=176.0, weight_unit=WeightUnit.LB, target_weight=160.0).to_profile()
        assert profile.weight_kg == pytest.approx(79.83)
        assert profile.target_weight_kg == pytest.approx(72.57)

    def test_feet_and_inches_converted(self):
        profile = _make_answers(height=5, height_inches=11, height_unit=HeightUnit.FT_IN).to_profile()
        assert profile.height_cm == pytest.approx(180.3)

    def test_inches_rejected_with_centimetres(self):
        with pytest.raises(ValidationError):
            _make_answers(height_inches=4)

    @pytest.mark.parametrize("overrides", [
        {"age": 12},
        {"weight": 0},
        {"meals_per_day": 7},
        {"available_days_per_week": 8},
        {"sleep_hours": 25},
    ])
    def test_out_of_range_answers(self, overrides):
        with pytest.raises(ValidationError):
            _make_answers(**overrides)

    def test_lists_and_statement_carried(self):
        profile = _make_answers(motivations=["Energy"], challenges=["Time"], goal_statement="Run a 10k").to_profile()
        assert profile.motivations == ["Energy"]
        assert profile.challenges == ["Time"]
        assert profile.goal_statement == "Run a 10k"


class TestProfileUpdate:
    def test_only_set_fields_change(self):
        original = _make_answers().to_profile()
        updated = ProfileUpdate(weight_kg=66.5).apply_to(original)
        assert updated.weight_kg == 66.5
        assert updated.height_cm == original.height_cm
        assert updated.goal == original.goal
        assert original.weight_kg == 68.0, "The original profile must not be mutated"

    def test_empty_update_is_identity(self):
        original = _make_answers().to_profile()
        assert ProfileUpdate().apply_to(original) == original


class TestDailyLogEntryCreate:
    def test_metric_parsed(self):
        entry = DailyLogEntryCreate(metric="sleep", date=datetime.date(2024, 1, 1), value=7.5, quality_percent=80)
        assert entry.metric == MetricKind.SLEEP
        assert entry.timestamp_ms is None

    def test_unknown_metric(self):
        with pytest.raises(ValidationError):
            DailyLogEntryCreate(metric="steps", date=datetime.date(2024, 1, 1), value=1000)

    def test_quality_percent_range(self):
        with pytest.raises(ValidationError):
            DailyLogEntryCreate(metric="sleep", date=datetime.date(2024, 1, 1), value=7, quality_percent=101)
