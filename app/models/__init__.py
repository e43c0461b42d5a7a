"""SQLModel database models."""

from app.models.user import User
from app.models.user_profile import ProfileVersion
from app.models.daily_log_entry import LogEntry
from app.models.generated_plan import GeneratedPlan

__all__ = [
    "User",
    "ProfileVersion",
    "LogEntry",
    "GeneratedPlan",
]
