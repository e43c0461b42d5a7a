"""
Fitness plan generator.

Steps
-----

1. **Days per week**: explicit ``available_days_per_week`` or derived
   from the weekly hours budget; beginners and HIIT are capped at 4.
2. **Split**: a template keyed by preference, experience and day count
   gives every training day a focus, target muscle groups and
   modalities.
3. **Exercises**: drawn round-robin over the day's muscle groups,
   compound movements first, never twice in one day.  A focus that
   repeats in the week prefers exercises it has not used yet.
4. **Prescription** by experience (strength is rep-based; cardio and
   yoga are time-based).
"""

from __future__ import annotations

import logging
import random
from collections import defaultdict
from dataclasses import dataclass
from typing import Optional

from app.catalog.archetypes import Catalog, ExerciseArchetype, Modality
from app.engine.planning import DEFAULT_PLAN_CONFIG, PlanConfig, rank
from app.schemas.plans import (
    ExercisePrescription,
    FitnessPlan,
    PlanKind,
    PlanWarning,
    Workout,
)
from app.schemas.profile import FitnessExperience, UserProfile, WorkoutPreference

logger = logging.getLogger(__name__)

# ======================================================================
# Tables
# ======================================================================

# (max weekly hours, days); budgets above the last row get 6 days.
_HOURS_TO_DAYS: list[tuple[float, int]] = [
    (2.0, 2),
    (4.0, 3),
    (6.0, 4),
    (8.0, 5),
]
_MAX_DERIVED_DAYS = 6
_CAPPED_DAYS = 4

EXERCISES_PER_DAY: dict[FitnessExperience, int] = {
    FitnessExperience.BEGINNER: 4,
    FitnessExperience.INTERMEDIATE: 5,
    FitnessExperience.ADVANCED: 6,
}

WEEKLY_SCHEDULE: dict[int, list[str]] = {
    1: ["Monday"],
    2: ["Monday", "Thursday"],
    3: ["Monday", "Wednesday", "Friday"],
    4: ["Monday", "Tuesday", "Thursday", "Friday"],
    5: ["Monday", "Tuesday", "Wednesday", "Friday", "Saturday"],
    6: ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
    7: ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
}


@dataclass(frozen=True)
class Prescription:
    sets: int
    reps_low: Optional[int]
    reps_high: Optional[int]
    rest_seconds: int
    duration_minutes: Optional[float] = None


_STRENGTH_RX: dict[FitnessExperience, Prescription] = {
    FitnessExperience.BEGINNER: Prescription(3, 10, 10, 60),
    FitnessExperience.INTERMEDIATE: Prescription(3, 8, 12, 75),
    FitnessExperience.ADVANCED: Prescription(4, 6, 8, 90),
}

# HIIT rounds are short timed efforts.
_HIIT_RX: dict[FitnessExperience, Prescription] = {
    FitnessExperience.BEGINNER: Prescription(3, None, None, 30, 0.5),
    FitnessExperience.INTERMEDIATE: Prescription(4, None, None, 20, 0.75),
    FitnessExperience.ADVANCED: Prescription(5, None, None, 15, 0.75),
}

_CARDIO_RX: dict[FitnessExperience, Prescription] = {
    FitnessExperience.BEGINNER: Prescription(1, None, None, 60, 10.0),
    FitnessExperience.INTERMEDIATE: Prescription(1, None, None, 60, 15.0),
    FitnessExperience.ADVANCED: Prescription(1, None, None, 60, 20.0),
}

_YOGA_RX: dict[FitnessExperience, Prescription] = {
    FitnessExperience.BEGINNER: Prescription(1, None, None, 0, 8.0),
    FitnessExperience.INTERMEDIATE: Prescription(1, None, None, 0, 10.0),
    FitnessExperience.ADVANCED: Prescription(1, None, None, 0, 12.0),
}

_RX_BY_MODALITY: dict[Modality, dict[FitnessExperience, Prescription]] = {
    Modality.STRENGTH: _STRENGTH_RX,
    Modality.HIIT: _HIIT_RX,
    Modality.CARDIO: _CARDIO_RX,
    Modality.YOGA: _YOGA_RX,
}


@dataclass(frozen=True)
class DayTemplate:
    focus: str
    muscle_groups: tuple[str, ...]
    modalities: tuple[Modality, ...]


_S = (Modality.STRENGTH,)

FULL_BODY = DayTemplate("Full Body", ("quadriceps", "chest", "back", "hamstrings", "shoulders", "core"), _S)
UPPER = DayTemplate("Upper Body", ("chest", "back", "shoulders", "triceps", "biceps"), _S)
LOWER = DayTemplate("Lower Body", ("quadriceps", "hamstrings", "glutes", "calves", "core"), _S)
PUSH = DayTemplate("Push", ("chest", "shoulders", "triceps"), _S)
PULL = DayTemplate("Pull", ("back", "biceps", "shoulders"), _S)
LEGS = DayTemplate("Legs", ("quadriceps", "hamstrings", "glutes", "calves"), _S)
STEADY_CARDIO = DayTemplate("Steady-State Cardio", ("cardio",), (Modality.CARDIO,))
INTERVAL_CARDIO = DayTemplate("Cardio Intervals", ("cardio",), (Modality.CARDIO, Modality.HIIT))
HIIT_DAY = DayTemplate("Full-Body HIIT", ("full_body", "cardio", "core"), (Modality.HIIT,))
YOGA_FLOW = DayTemplate("Vinyasa Flow", ("mobility", "full_body"), (Modality.YOGA,))
MOBILITY_CORE = DayTemplate("Mobility & Core", ("mobility", "core"), (Modality.YOGA,))
ACTIVE_RECOVERY = DayTemplate("Active Recovery", ("mobility",), (Modality.YOGA,))


# ======================================================================
# Day count and split
# ======================================================================


def days_per_week(profile: UserProfile) -> int:
    """Training days for *profile* after experience/modality caps."""
    if profile.available_days_per_week:
        days = profile.available_days_per_week
    else:
        days = _MAX_DERIVED_DAYS
        for max_hours, d in _HOURS_TO_DAYS:
            if profile.weekly_workout_hours <= max_hours:
                days = d
                break

    if profile.fitness_experience == FitnessExperience.BEGINNER or \
            profile.workout_preference == WorkoutPreference.HIIT:
        days = min(days, _CAPPED_DAYS)
    return max(1, min(days, 7))


def _alternate(a: DayTemplate, b: DayTemplate, days: int) -> list[DayTemplate]:
    return [a if i % 2 == 0 else b for i in range(days)]


def _strength_split(days: int) -> tuple[str, list[DayTemplate]]:
    if days <= 3:
        return "Full Body", [FULL_BODY] * days
    if days == 4:
        return "Upper/Lower", [UPPER, LOWER, UPPER, LOWER]
    ppl = [PUSH, PULL, LEGS] * 2
    if days == 7:
        return "Push/Pull/Legs", ppl + [ACTIVE_RECOVERY]
    return "Push/Pull/Legs", ppl[:days]


def select_split(profile: UserProfile, days: int) -> tuple[str, list[DayTemplate]]:
    """Return ``(split_name, day_templates)`` with ``len(day_templates) == days``."""
    pref = profile.workout_preference
    if pref == WorkoutPreference.STRENGTH:
        return _strength_split(days)
    if pref == WorkoutPreference.CARDIO:
        return "Cardio Endurance", _alternate(STEADY_CARDIO, INTERVAL_CARDIO, days)
    if pref == WorkoutPreference.HIIT:
        return "HIIT Circuit", [HIIT_DAY] * days
    if pref == WorkoutPreference.YOGA:
        return "Yoga & Mobility", _alternate(YOGA_FLOW, MOBILITY_CORE, days)
    return "Hybrid Strength & Cardio", _alternate(FULL_BODY, STEADY_CARDIO, days)


# ======================================================================
# Exercise selection
# ======================================================================


def select_exercises(
    catalog: Catalog,
    template: DayTemplate,
    count: int,
    already_used: set[str],
    rng: Optional[random.Random] = None,
) -> list[ExerciseArchetype]:
    """Pick up to *count* distinct exercises for one day.

    Candidates are ranked compound-first; exercises in *already_used*
    (earlier days with the same focus) go to the back of the queue.
    """
    candidates = catalog.exercises_for(list(template.modalities), list(template.muscle_groups))
    ranked = rank(
        candidates,
        score=lambda e: (e.archetype_id in already_used, not e.is_compound),
        name=lambda e: e.display_name,
        rng=rng,
    )

    picked: list[ExerciseArchetype] = []
    picked_ids: set[str] = set()
    while len(picked) < count:
        progressed = False
        for group in template.muscle_groups:
            if len(picked) >= count:
                break
            for ex in ranked:
                if ex.archetype_id not in picked_ids and group in ex.muscle_groups:
                    picked.append(ex)
                    picked_ids.add(ex.archetype_id)
                    progressed = True
                    break
        if not progressed:
            break

    # Compound lifts lead the session.
    return sorted(picked, key=lambda e: not e.is_compound)


def prescribe(exercise: ExerciseArchetype, experience: FitnessExperience) -> ExercisePrescription:
    rx = _RX_BY_MODALITY[exercise.modality][experience]
    return ExercisePrescription(
        archetype_id=exercise.archetype_id,
        name=exercise.display_name,
        sets=rx.sets,
        reps_low=rx.reps_low,
        reps_high=rx.reps_high,
        rest_seconds=rx.rest_seconds,
        duration_minutes=rx.duration_minutes,
    )


def estimate_duration(exercises: list[ExercisePrescription], config: PlanConfig) -> float:
    """Session length in minutes: warm-up plus work and rest for every set."""
    if not exercises:
        return 0.0
    total = config.warmup_minutes
    for ex in exercises:
        work = ex.duration_minutes if ex.duration_minutes is not None else config.strength_set_minutes
        total += ex.sets * (work + ex.rest_seconds / 60.0)
    return round(total, 0)


# ======================================================================
# Main entry point
# ======================================================================


def generate_fitness_plan(
    profile: UserProfile,
    catalog: Catalog,
    config: Optional[PlanConfig] = None,
    rng: Optional[random.Random] = None,
) -> tuple[FitnessPlan, list[PlanWarning]]:
    """Build the weekly :class:`FitnessPlan` and its catalog warnings."""
    cfg = config or DEFAULT_PLAN_CONFIG
    days = days_per_week(profile)
    split_name, templates = select_split(profile, days)
    per_day = EXERCISES_PER_DAY[profile.fitness_experience]
    minimum = min(cfg.min_exercises_per_workout, per_day)

    used_by_focus: dict[str, set[str]] = defaultdict(set)
    workouts: list[Workout] = []
    warnings: list[PlanWarning] = []

    for day, template in zip(WEEKLY_SCHEDULE[days], templates):
        chosen = select_exercises(catalog, template, per_day, used_by_focus[template.focus], rng)
        used_by_focus[template.focus].update(e.archetype_id for e in chosen)

        if not chosen:
            warnings.append(PlanWarning(code="no_exercises", plan=PlanKind.FITNESS, slot=day,
                                        message=f"No catalog exercises match the {template.focus} day."))
        elif len(chosen) < minimum:
            warnings.append(PlanWarning(code="too_few_exercises", plan=PlanKind.FITNESS, slot=day,
                                        message=f"Only {len(chosen)} exercise(s) available for {template.focus}."))

        prescriptions = [prescribe(e, profile.fitness_experience) for e in chosen]
        workouts.append(Workout(
            day=day,
            focus=template.focus,
            muscle_groups=list(template.muscle_groups),
            exercises=prescriptions,
            estimated_duration=estimate_duration(prescriptions, cfg),
        ))

    if warnings:
        logger.warning("Fitness plan has %d catalog gap(s)", len(warnings))

    plan = FitnessPlan(
        name=f"{days}-Day {split_name} Plan",
        workout_split=split_name,
        days_per_week=days,
        workouts=workouts,
    )
    return plan, warnings
