"""Simulate onboarding, plan generation and two weeks of logs without a database."""

import datetime

from app.catalog.builtin import get_builtin_catalog
from app.core.logging import configure_logging
from app.engine.analytics import compute_metric_analytics
from app.engine.insights import compute_wellness_insights
from app.engine.plans import generate_plans
from app.engine.targets import compute_targets
from app.schemas.logs import DailyLogEntry, MetricKind
from app.schemas.profile import OnboardingAnswers

ANSWERS = OnboardingAnswers(
    biological_sex="male",
    age=30,
    weight=176.4,
    weight_unit="lb",
    height=5,
    height_inches=11,
    height_unit="ft_in",
    goal="lose_weight",
    activity_level="moderately_active",
    fitness_experience="intermediate",
    workout_preference="strength",
    weekly_workout_hours=5,
    meals_per_day=4,
    sleep_hours=6.5,
    stress_level="high",
    motivations=["Health", "Energy"],
    challenges=["Time", "Consistency"],
)

START = datetime.date(2024, 1, 1)

# ─── (day offset, sleep h, mood, meditation min, habit done) ────────
RAW_DAYS = [
    (0, 6.5, 3, 10, True),
    (1, 7.0, 4, 0, True),
    (2, 5.5, 2, 5, True),
    (3, None, 3, 10, True),
    (4, 7.5, 4, 15, True),
    (5, 8.0, 5, 10, False),
    (6, 6.0, 3, 0, True),
    (7, 7.0, 3, 10, True),
    (8, 7.5, 4, 10, True),
    (9, None, None, 0, True),
    (10, 6.5, 2, 5, True),
    (11, 7.0, 4, 10, True),
    (12, 8.0, 4, 15, True),
    (13, 7.5, 5, 10, None),
]


def _entries() -> list[DailyLogEntry]:
    out = []
    for offset, sleep, mood, meditation, habit in RAW_DAYS:
        day = START + datetime.timedelta(days=offset)
        ts = int(datetime.datetime.combine(day, datetime.time(21, 0)).timestamp() * 1000)
        if sleep is not None:
            out.append(DailyLogEntry(metric=MetricKind.SLEEP, date=day, value=sleep, timestamp_ms=ts))
        if mood is not None:
            out.append(DailyLogEntry(metric=MetricKind.MOOD, date=day, value=mood, timestamp_ms=ts))
        if meditation:
            out.append(DailyLogEntry(metric=MetricKind.MEDITATION, date=day, value=meditation, timestamp_ms=ts))
        if habit is not None:
            out.append(DailyLogEntry(metric=MetricKind.HABIT, date=day, habit_id="drink_water",
                                     completed=habit, timestamp_ms=ts))
    return out


def main():
    configure_logging("WARNING")
    profile = ANSWERS.to_profile()
    targets = compute_targets(profile)
    plans = generate_plans(profile, targets, get_builtin_catalog())

    print()
    print("=" * 72)
    print(f"Profile: {profile.weight_kg} kg, {profile.height_cm} cm -> BMR {targets.bmr}, "
          f"TDEE {targets.tdee}, {targets.daily_calories} kcal")
    print(f"Macros:  P {targets.daily_protein_grams} g  C {targets.daily_carb_grams} g  "
          f"F {targets.daily_fat_grams} g")
    print("=" * 72)

    for slot in plans.nutrition_plan.meal_templates:
        names = ", ".join(s.display_name for s in slot.suggestions) or "--"
        print(f"{slot.meal_type:<10} {slot.calories:>7.1f} kcal  {names}")

    print()
    print(f"{plans.fitness_plan.name} ({plans.fitness_plan.workout_split})")
    for workout in plans.fitness_plan.workouts:
        names = ", ".join(e.name for e in workout.exercises)
        print(f"  {workout.day:<10} {workout.focus:<12} {workout.estimated_duration:>4.0f} min  {names}")

    sleep = plans.wellness_plan.sleep_recommendation
    print()
    print(f"Sleep {sleep.target_hours} h, bed {sleep.bed_time_window}; "
          f"habits: {', '.join(h.name for h in plans.wellness_plan.recommended_habits)}")

    entries = _entries()
    as_of = START + datetime.timedelta(days=13)

    print()
    print("=" * 72)
    print(f"{'Metric':<12} {'Streak':>7} {'Best':>5} {'7d avg':>8} {'Stab':>5} {'n':>3}  Recommendations")
    print("=" * 72)
    for metric in (MetricKind.SLEEP, MetricKind.MOOD, MetricKind.MEDITATION, MetricKind.HABIT):
        a = compute_metric_analytics(entries, metric, as_of)
        avg = f"{a.rolling_average:.2f}" if a.rolling_average is not None else "--"
        codes = ", ".join(r.code for r in a.recommendations) or "-"
        print(f"{metric.value:<12} {a.streak:>7} {a.longest_streak:>5} {avg:>8} {a.stability_score:>5} "
              f"{a.sample_count:>3}  {codes}")

    by_metric: dict = {}
    for e in entries:
        by_metric.setdefault(e.metric, []).append(e)
    insights = compute_wellness_insights(by_metric, as_of)
    print()
    print(f"Calmness {insights.calmness_score}, avg sleep {insights.avg_sleep}, "
          f"meditation {insights.meditation_minutes} min")


if __name__ == "__main__":
    main()
