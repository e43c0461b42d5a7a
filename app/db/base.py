"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.user_profile import ProfileVersion  # noqa: F401
from app.models.daily_log_entry import LogEntry  # noqa: F401
from app.models.generated_plan import GeneratedPlan  # noqa: F401
