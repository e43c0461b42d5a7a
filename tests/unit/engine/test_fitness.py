"""Tests for the fitness plan generator."""

import pytest

from app.catalog.archetypes import Catalog, ExerciseArchetype, Modality
from app.catalog.builtin import BUILTIN_CATALOG
from app.engine.fitness import (
    ACTIVE_RECOVERY,
    EXERCISES_PER_DAY,
    FULL_BODY,
    STEADY_CARDIO,
    WEEKLY_SCHEDULE,
    days_per_week,
    estimate_duration,
    generate_fitness_plan,
    select_exercises,
    select_split,
)
from app.engine.planning import DEFAULT_PLAN_CONFIG
from app.schemas.plans import ExercisePrescription
from app.schemas.profile import (
    BiologicalSex,
    FitnessExperience,
    UserProfile,
    WorkoutPreference,
)


def _make_profile(**overrides) -> UserProfile:
    defaults = {
        "biological_sex": BiologicalSex.FEMALE,
        "age": 35,
        "weight_kg": 65.0,
        "height_cm": 168.0,
        "fitness_experience": FitnessExperience.INTERMEDIATE,
        "workout_preference": WorkoutPreference.STRENGTH,
        "weekly_workout_hours": 3.0,
    }
    defaults.update(overrides)
    return UserProfile(**defaults)


# ======================================================================
# Days per week
# ======================================================================


class TestDaysPerWeek:
    @pytest.mark.parametrize("hours, expected", [
        (0.0, 2),
        (2.0, 2),
        (3.0, 3),
        (5.0, 4),
        (7.5, 5),
        (12.0, 6),
    ])
    def test_derived_from_hours(self, hours, expected):
        profile = _make_profile(weekly_workout_hours=hours, fitness_experience=FitnessExperience.ADVANCED)
        assert days_per_week(profile) == expected

    def test_explicit_days_win(self):
        profile = _make_profile(available_days_per_week=5, weekly_workout_hours=1.0)
        assert days_per_week(profile) == 5

    def test_beginner_capped(self):
        profile = _make_profile(fitness_experience=FitnessExperience.BEGINNER, available_days_per_week=6)
        assert days_per_week(profile) == 4

    def test_hiit_capped_for_advanced(self):
        profile = _make_profile(
            fitness_experience=FitnessExperience.ADVANCED,
            workout_preference=WorkoutPreference.HIIT,
            available_days_per_week=6,
        )
        assert days_per_week(profile) == 4


# ======================================================================
# Split
# ======================================================================


class TestSelectSplit:
    @pytest.mark.parametrize("days, name", [
        (1, "Full Body"),
        (3, "Full Body"),
        (4, "Upper/Lower"),
        (5, "Push/Pull/Legs"),
        (6, "Push/Pull/Legs"),
        (7, "Push/Pull/Legs"),
    ])
    def test_strength_splits(self, days, name):
        split, templates = select_split(_make_profile(), days)
        assert split == name
        assert len(templates) == days

    def test_seven_day_strength_ends_with_recovery(self):
        _, templates = select_split(_make_profile(), 7)
        assert templates[-1] == ACTIVE_RECOVERY

    def test_mixed_alternates_strength_and_cardio(self):
        split, templates = select_split(_make_profile(workout_preference=WorkoutPreference.MIXED), 3)
        assert split == "Hybrid Strength & Cardio"
        assert templates == [FULL_BODY, STEADY_CARDIO, FULL_BODY]

    @pytest.mark.parametrize("preference, name", [
        (WorkoutPreference.CARDIO, "Cardio Endurance"),
        (WorkoutPreference.HIIT, "HIIT Circuit"),
        (WorkoutPreference.YOGA, "Yoga & Mobility"),
    ])
    def test_modality_splits(self, preference, name):
        split, templates = select_split(_make_profile(workout_preference=preference), 3)
        assert split == name
        assert len(templates) == 3


# ======================================================================
# Exercise selection
# ======================================================================


class TestSelectExercises:
    def test_no_duplicates_and_compound_first(self):
        picked = select_exercises(BUILTIN_CATALOG, FULL_BODY, 6, set())
        ids = [e.archetype_id for e in picked]
        assert len(ids) == 6
        assert len(set(ids)) == 6
        flags = [e.is_compound for e in picked]
        assert flags == sorted(flags, reverse=True), "Compound lifts should lead the session"

    def test_unused_exercises_preferred(self):
        first = select_exercises(BUILTIN_CATALOG, FULL_BODY, 4, set())
        second = select_exercises(BUILTIN_CATALOG, FULL_BODY, 4, {e.archetype_id for e in first})
        assert not {e.archetype_id for e in first} & {e.archetype_id for e in second}

    def test_only_template_modalities(self):
        picked = select_exercises(BUILTIN_CATALOG, STEADY_CARDIO, 5, set())
        assert picked
        assert all(e.modality == Modality.CARDIO for e in picked)

    def test_small_catalog_returns_what_exists(self):
        catalog = Catalog(exercises=[
            ExerciseArchetype(archetype_id="squat", display_name="Squat", modality=Modality.STRENGTH,
                              muscle_groups=["quadriceps"], is_compound=True),
        ])
        picked = select_exercises(catalog, FULL_BODY, 6, set())
        assert [e.archetype_id for e in picked] == ["squat"]


# ======================================================================
# Plan
# ======================================================================


class TestGenerateFitnessPlan:
    def test_advanced_push_pull_legs(self):
        profile = _make_profile(fitness_experience=FitnessExperience.ADVANCED, available_days_per_week=6)
        plan, warnings = generate_fitness_plan(profile, BUILTIN_CATALOG)

        assert warnings == []
        assert plan.name == "6-Day Push/Pull/Legs Plan"
        assert plan.days_per_week == 6
        assert [w.day for w in plan.workouts] == WEEKLY_SCHEDULE[6]
        for workout in plan.workouts:
            ids = [e.archetype_id for e in workout.exercises]
            assert len(ids) == EXERCISES_PER_DAY[FitnessExperience.ADVANCED]
            assert len(set(ids)) == len(ids), f"{workout.day} repeats an exercise"

    def test_intermediate_strength_prescription(self):
        plan, _ = generate_fitness_plan(_make_profile(), BUILTIN_CATALOG)
        rx = plan.workouts[0].exercises[0]
        assert (rx.sets, rx.reps_low, rx.reps_high, rx.rest_seconds) == (3, 8, 12, 75)
        assert rx.duration_minutes is None

    def test_beginner_three_days(self):
        profile = _make_profile(fitness_experience=FitnessExperience.BEGINNER)
        plan, _ = generate_fitness_plan(profile, BUILTIN_CATALOG)
        assert [w.day for w in plan.workouts] == ["Monday", "Wednesday", "Friday"]
        assert all(len(w.exercises) == 4 for w in plan.workouts)
        assert all(e.sets == 3 and e.reps_low == 10 for w in plan.workouts for e in w.exercises)

    def test_yoga_is_time_based(self):
        profile = _make_profile(workout_preference=WorkoutPreference.YOGA)
        plan, _ = generate_fitness_plan(profile, BUILTIN_CATALOG)
        for workout in plan.workouts:
            assert workout.exercises
            assert all(e.reps_low is None and e.duration_minutes for e in workout.exercises)

    def test_empty_catalog_warns_per_day(self):
        plan, warnings = generate_fitness_plan(_make_profile(), Catalog(version="empty"))
        assert len(plan.workouts) == 3
        assert all(w.exercises == [] and w.estimated_duration == 0 for w in plan.workouts)
        assert [w.code for w in warnings] == ["no_exercises"] * 3
        assert [w.slot for w in warnings] == WEEKLY_SCHEDULE[3]

    def test_deterministic_without_seed(self):
        profile = _make_profile(workout_preference=WorkoutPreference.MIXED, available_days_per_week=4)
        assert generate_fitness_plan(profile, BUILTIN_CATALOG) == generate_fitness_plan(profile, BUILTIN_CATALOG)


class TestEstimateDuration:
    def test_strength_sets(self):
        rx = ExercisePrescription(archetype_id="x", name="X", sets=3, reps_low=10, reps_high=10, rest_seconds=60)
        # 10 warm-up + 4 exercises · 3 sets · (0.75 + 1.0)
        assert estimate_duration([rx] * 4, DEFAULT_PLAN_CONFIG) == 31

    def test_timed_work(self):
        rx = ExercisePrescription(archetype_id="x", name="X", sets=1, rest_seconds=60, duration_minutes=15.0)
        assert estimate_duration([rx, rx], DEFAULT_PLAN_CONFIG) == 42

    def test_empty(self):
        assert estimate_duration([], DEFAULT_PLAN_CONFIG) == 0
