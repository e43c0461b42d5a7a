"""Pydantic schemas for request/response validation and engine I/O."""

from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.schemas.profile import (
    OnboardingAnswers,
    ProfileUpdate,
    ProfileVersionResponse,
    ProfileWithTargets,
    UserProfile,
)
from app.schemas.targets import TargetSet
from app.schemas.plans import (
    FitnessPlan,
    GeneratedPlans,
    NutritionPlan,
    PlanKind,
    PlanWarning,
    StoredPlanResponse,
    WellnessPlan,
)
from app.schemas.logs import (
    DailyLogEntry,
    DailyLogEntryCreate,
    DailyLogEntryResponse,
    DailyLogEntryUpdate,
    MetricKind,
)
from app.schemas.analytics import (
    MetricAnalytics,
    Recommendation,
    StreakState,
    StreakStatus,
    WellnessInsights,
)

__all__ = [
    "UserCreate",
    "UserResponse",
    "UserUpdate",
    "OnboardingAnswers",
    "ProfileUpdate",
    "ProfileVersionResponse",
    "ProfileWithTargets",
    "UserProfile",
    "TargetSet",
    "FitnessPlan",
    "GeneratedPlans",
    "NutritionPlan",
    "PlanKind",
    "PlanWarning",
    "StoredPlanResponse",
    "WellnessPlan",
    "DailyLogEntry",
    "DailyLogEntryCreate",
    "DailyLogEntryResponse",
    "DailyLogEntryUpdate",
    "MetricKind",
    "MetricAnalytics",
    "Recommendation",
    "StreakState",
    "StreakStatus",
    "WellnessInsights",
]
