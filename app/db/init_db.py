"""
Database initialization.

Creates all tables directly from the SQLModel metadata.  Production
databases should be migrated with Alembic instead.
"""

import logging
from typing import Optional

from sqlalchemy import Engine, inspect
from sqlmodel import Session, SQLModel

from app.db.repositories.user import UserRepository
from app.models.user import User

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None) -> list[str]:
    """Create every table registered in ``app.db.base``; return the table names."""
    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    if bind is None:
        from app.db.session import engine as bind

    SQLModel.metadata.create_all(bind)
    tables = sorted(inspect(bind).get_table_names())
    logger.info("Tables present: %s", ", ".join(tables))
    return tables


def ensure_demo_user(session: Session, email: str, premium: bool = False) -> User:
    """Return the account for *email*, creating it if needed (for local testing)."""
    repository = UserRepository(session)
    user = repository.find_by_email(email)
    if user is None:
        user = repository.create(User(email=email, full_name="Demo User"))
        logger.info("Created demo user %s (%s)", user.id, email)
    if user.is_premium != premium:
        status = "pro" if premium else "free"
        user = repository.set_subscription(user, status, premium)
    return user
