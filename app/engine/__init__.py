"""Personal metrics & plan engine — pure computation, no storage."""

from app.engine.analytics import (
    DEFAULT_ANALYTICS_CONFIG,
    AnalyticsConfig,
    compute_metric_analytics,
    rolling_average,
    stability_score,
)
from app.engine.errors import (
    EngineError,
    InsufficientCatalogError,
    InvalidMetricError,
    InvalidProfileError,
    InvalidWindowError,
)
from app.engine.insights import compute_wellness_insights
from app.engine.metrics import MetricRegistry, MetricSpec, resolve_metric
from app.engine.planning import DEFAULT_PLAN_CONFIG, PlanConfig
from app.engine.plans import generate_plans
from app.engine.streaks import compute_streak
from app.engine.targets import DEFAULT_TARGET_CONFIG, TargetConfig, compute_targets

__all__ = [
    "AnalyticsConfig",
    "DEFAULT_ANALYTICS_CONFIG",
    "compute_metric_analytics",
    "rolling_average",
    "stability_score",
    "EngineError",
    "InsufficientCatalogError",
    "InvalidMetricError",
    "InvalidProfileError",
    "InvalidWindowError",
    "compute_wellness_insights",
    "MetricRegistry",
    "resolve_metric",
    "MetricSpec",
    "PlanConfig",
    "DEFAULT_PLAN_CONFIG",
    "generate_plans",
    "compute_streak",
    "TargetConfig",
    "DEFAULT_TARGET_CONFIG",
    "compute_targets",
]
