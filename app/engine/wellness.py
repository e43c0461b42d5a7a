"""
Wellness plan generator: sleep target, meditation prescription and
habit recommendations.
"""

from __future__ import annotations

import datetime
import logging
import random
from typing import Optional

from app.catalog.archetypes import Catalog, HabitArchetype, HabitCategory, slugify_tag
from app.engine.planning import DEFAULT_PLAN_CONFIG, PlanConfig, rank
from app.schemas.plans import (
    MeditationRecommendation,
    RecommendedHabit,
    SleepRecommendation,
    WellnessPlan,
)
from app.schemas.profile import FitnessGoal, StressLevel, UserProfile

logger = logging.getLogger(__name__)

_HIGH_STRESS = (StressLevel.HIGH, StressLevel.VERY_HIGH)

# (sessions per week, minutes, style)
MEDITATION_TABLE: dict[StressLevel, tuple[int, int, str]] = {
    StressLevel.LOW: (3, 5, "breathing"),
    StressLevel.MODERATE: (5, 10, "mindfulness"),
    StressLevel.HIGH: (7, 10, "guided"),
    StressLevel.VERY_HIGH: (7, 15, "guided"),
}

# Baseline sleep this far below target triggers the wind-down tip.
_SLEEP_DEFICIT_HOURS = 1.0
# Baseline below this adds the "sleep" tag for habit matching.
_SHORT_SLEEP_HOURS = 7.0


# ======================================================================
# Sleep
# ======================================================================


def sleep_target_hours(stress_level: StressLevel, config: PlanConfig) -> float:
    bonus = config.high_stress_sleep_bonus if stress_level in _HIGH_STRESS else 0.0
    return config.base_sleep_hours + bonus


def _format_clock(moment: datetime.datetime) -> str:
    return moment.strftime("%I:%M %p").lstrip("0")


def bedtime_window(target_hours: float, config: PlanConfig) -> str:
    """``"10:30 PM - 11:00 PM"`` for an 8 h target and a 07:00 wake time."""
    hour, minute = (int(part) for part in config.wake_time.split(":"))
    wake = datetime.datetime.combine(datetime.date(2000, 1, 2), datetime.time(hour, minute))
    latest = wake - datetime.timedelta(hours=target_hours)
    earliest = latest - datetime.timedelta(minutes=config.bedtime_window_minutes)
    return f"{_format_clock(earliest)} - {_format_clock(latest)}"


def _sleep_tips(profile: UserProfile, target: float) -> list[str]:
    tips = ["Keep the same wake time every day, weekends included."]
    if profile.sleep_hours < target - _SLEEP_DEFICIT_HOURS:
        tips.append(f"You currently sleep about {profile.sleep_hours:g} h. Move bedtime 15 minutes earlier "
                    f"each week until you reach {target:g} h.")
    if profile.stress_level in _HIGH_STRESS:
        tips.append("Wind down with 5 minutes of slow breathing before bed.")
    if profile.goal in (FitnessGoal.LOSE_WEIGHT, FitnessGoal.BUILD_MUSCLE):
        tips.append("Recovery and appetite control depend on sleep, so protect your sleep window.")
    tips.append("Keep the bedroom cool, dark and free of screens.")
    return tips


def build_sleep_recommendation(profile: UserProfile, config: PlanConfig) -> SleepRecommendation:
    target = sleep_target_hours(profile.stress_level, config)
    return SleepRecommendation(
        target_hours=target,
        bed_time_window=bedtime_window(target, config),
        tips=_sleep_tips(profile, target),
    )


def build_meditation_recommendation(stress_level: StressLevel) -> MeditationRecommendation:
    frequency, minutes, style = MEDITATION_TABLE[stress_level]
    return MeditationRecommendation(frequency_per_week=frequency, session_duration=minutes, style=style)


# ======================================================================
# Habits
# ======================================================================


def profile_tags(profile: UserProfile) -> set[str]:
    """Slugs from motivations and challenges plus implied stress/sleep tags."""
    tags = {slugify_tag(t) for t in [*profile.motivations, *profile.challenges] if t.strip()}
    if profile.stress_level in _HIGH_STRESS:
        tags.add("stress")
    if profile.sleep_hours < _SHORT_SLEEP_HOURS:
        tags.add("sleep")
    return tags


def rank_habits(
    profile: UserProfile,
    catalog: Catalog,
    limit: int,
    rng: Optional[random.Random] = None,
) -> list[tuple[HabitArchetype, list[str]]]:
    """Default habits ordered by tag matches, best first, with the matched tags."""
    tags = profile_tags(profile)
    high_stress = profile.stress_level in _HIGH_STRESS

    def score(habit: HabitArchetype) -> tuple:
        matches = len(tags.intersection(habit.tags))
        if high_stress and habit.category == HabitCategory.MINDFULNESS:
            matches += 1
        return (-matches,)

    ranked = rank(catalog.default_habits(), score=score, name=lambda h: h.display_name, rng=rng)
    return [(h, sorted(tags.intersection(h.tags))) for h in ranked[:limit]]


# ======================================================================
# Main entry point
# ======================================================================


def generate_wellness_plan(
    profile: UserProfile,
    catalog: Catalog,
    config: Optional[PlanConfig] = None,
    rng: Optional[random.Random] = None,
) -> WellnessPlan:
    cfg = config or DEFAULT_PLAN_CONFIG
    habits = rank_habits(profile, catalog, cfg.max_habits, rng)
    if not habits:
        logger.info("Catalog %s has no default habits", catalog.version)

    return WellnessPlan(
        name="Daily Wellness Plan",
        sleep_recommendation=build_sleep_recommendation(profile, cfg),
        meditation_recommendation=build_meditation_recommendation(profile.stress_level),
        recommended_habits=[
            RecommendedHabit(
                archetype_id=h.archetype_id,
                name=h.display_name,
                icon=h.icon,
                category=h.category.value,
                frequency=h.frequency,
                matched_tags=matched,
            )
            for h, matched in habits
        ],
    )
