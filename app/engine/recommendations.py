"""
Recommendation rules.

A small rule table over computed :class:`MetricAnalytics`.  The output is
advisory display text, not statistical inference.

Rules that read the stability score are skipped while the window holds
fewer than ``min_samples`` values; a single ``keep_logging``
recommendation is emitted instead, so a perfect score computed from one
or two days is never presented as a finding.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from app.schemas.analytics import MetricAnalytics, Recommendation
from app.schemas.logs import MetricKind


@dataclass(frozen=True)
class _Rule:
    code: str
    metric: Optional[MetricKind]  # None = any metric
    applies: Callable[[MetricAnalytics], bool]
    message: Callable[[MetricAnalytics], str]
    action: Optional[str] = None
    uses_stability: bool = False


def _avg_below(threshold: float) -> Callable[[MetricAnalytics], bool]:
    return lambda a: a.rolling_average is not None and a.rolling_average < threshold


def _avg_above(threshold: float) -> Callable[[MetricAnalytics], bool]:
    return lambda a: a.rolling_average is not None and a.rolling_average > threshold


def _stability_below(threshold: int) -> Callable[[MetricAnalytics], bool]:
    return lambda a: a.sample_count > 0 and a.stability_score < threshold


_STREAK_METRICS = (MetricKind.HABIT, MetricKind.MEDITATION, MetricKind.REFLECTION,
                   MetricKind.SUGAR, MetricKind.WORKOUT)

_RULES: list[_Rule] = [
    # ── Sleep ─────────────────────────────────────────────────────
    _Rule("increase_sleep", MetricKind.SLEEP, _avg_below(7.0),
          lambda a: f"You averaged {a.rolling_average:.1f} h of sleep, below the 7 h minimum.",
          "Move your bedtime 15 minutes earlier this week."),
    _Rule("long_sleep", MetricKind.SLEEP, _avg_above(10.0),
          lambda a: f"You averaged {a.rolling_average:.1f} h of sleep. Very long sleep can signal poor recovery.",
          "Notice how rested you feel and mention it to a professional if it persists."),
    _Rule("irregular_sleep", MetricKind.SLEEP, _stability_below(60),
          lambda a: "Your sleep duration varies a lot from night to night.",
          "Keep a consistent bedtime and wake time.", uses_stability=True),

    # ── Mood ──────────────────────────────────────────────────────
    _Rule("low_mood", MetricKind.MOOD, _avg_below(3.0),
          lambda a: f"Your average mood was {a.rolling_average:.1f} / 5 this period.",
          "Try a short walk outside or reach out to a friend."),
    _Rule("mood_swings", MetricKind.MOOD, _stability_below(50),
          lambda a: "Your mood has been swinging more than usual.",
          "A few minutes of journaling can help you spot the triggers.", uses_stability=True),

    # ── Meditation ────────────────────────────────────────────────
    _Rule("start_meditation", MetricKind.MEDITATION, lambda a: a.sample_count == 0,
          lambda a: "No meditation logged recently.",
          "Start with a 5-minute breathing session today."),
    _Rule("lengthen_meditation", MetricKind.MEDITATION, _avg_below(5.0),
          lambda a: f"Your sessions average {a.rolling_average:.0f} minutes.",
          "Add two minutes per session until you reach 10."),

    # ── Reflection / water / workout ──────────────────────────────
    _Rule("start_reflection", MetricKind.REFLECTION, lambda a: a.sample_count == 0,
          lambda a: "No gratitude or journal entries recently.",
          "Write down three things you are grateful for tonight."),
    _Rule("drink_more_water", MetricKind.WATER, _avg_below(8.0),
          lambda a: f"You averaged {a.rolling_average:.1f} glasses of water a day.",
          "Keep a bottle within reach and refill it at every meal."),
    _Rule("irregular_workouts", MetricKind.WORKOUT, _stability_below(40),
          lambda a: "Your workout length varies a lot from day to day.",
          "Plan sessions of a similar length on fixed days.", uses_stability=True),

    # ── Streaks ───────────────────────────────────────────────────
    _Rule("restart_streak", None,
          lambda a: a.metric in _STREAK_METRICS and a.streak == 0 and a.longest_streak > 0,
          lambda a: f"Your best {a.metric.value} streak was {a.longest_streak} days.",
          "Start a new streak today."),
    _Rule("celebrate_streak", None,
          lambda a: a.metric in _STREAK_METRICS and a.streak >= 7,
          lambda a: f"{a.streak} days in a row of {a.metric.value}. Keep it going!"),
]


def derive_recommendations(analytics: MetricAnalytics, min_samples: int) -> list[Recommendation]:
    """Apply the rule table to *analytics*, in table order."""
    sparse = analytics.sample_count < min_samples
    out: list[Recommendation] = []

    for rule in _RULES:
        if rule.metric is not None and rule.metric != analytics.metric:
            continue
        if rule.uses_stability and sparse:
            continue
        if rule.applies(analytics):
            out.append(Recommendation(code=rule.code, metric=analytics.metric,
                                      message=rule.message(analytics), action=rule.action))

    if sparse and analytics.sample_count > 0:
        out.append(Recommendation(
            code="keep_logging",
            metric=analytics.metric,
            message=(f"Only {analytics.sample_count} day(s) of {analytics.metric.value} in the last "
                     f"{analytics.window_days} days. Log at least {min_samples} to see consistency insights."),
        ))
    return out
