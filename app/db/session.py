"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlmodel import Session, create_engine

from app.core.config import settings

_engine_kwargs: dict = {
    "echo": settings.DEBUG,   # Log SQL queries in debug mode
    "pool_pre_ping": True,    # Verify connections before using
}
if not settings.DATABASE_URL.startswith("sqlite"):
    _engine_kwargs.update(pool_size=5, max_overflow=10)

# Create database engine
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
