"""Business logic services."""

from app.services.user_service import UserService
from app.services.profile_service import ProfileService
from app.services.plan_service import PlanService
from app.services.log_service import LogService
from app.services.analytics_service import AnalyticsService

__all__ = [
    "UserService",
    "ProfileService",
    "PlanService",
    "LogService",
    "AnalyticsService",
]
