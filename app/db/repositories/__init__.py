"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.profile import ProfileRepository
from app.db.repositories.log_entry import LogEntryRepository
from app.db.repositories.generated_plan import GeneratedPlanRepository

__all__ = [
    "UserRepository",
    "ProfileRepository",
    "LogEntryRepository",
    "GeneratedPlanRepository",
]
