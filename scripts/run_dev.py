"""
Development server launcher.

Loads the .env file, then serves the VitalPlan API with uvicorn.  Host,
port, reload and log level come from the application settings
(``API_HOST``, ``API_PORT``, ``API_RELOAD``, ``LOG_LEVEL``).

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env before the settings are read
from dotenv import load_dotenv

load_dotenv()

import uvicorn
from sqlalchemy.engine import make_url

from app.core.config import settings


def _database_label() -> str:
    """Database URL with the password masked."""
    return make_url(settings.DATABASE_URL).render_as_string(hide_password=True)


if __name__ == "__main__":
    print("=" * 60)
    print(f"{settings.PROJECT_NAME} v{settings.VERSION}")
    print("=" * 60)
    print()
    print(f"API:      http://{settings.API_HOST}:{settings.API_PORT}/api/v1")
    print(f"Docs:     http://{settings.API_HOST}:{settings.API_PORT}/docs")
    print(f"Database: {_database_label()}")
    print(f"Premium:  {', '.join(settings.PREMIUM_FEATURES) or '(none)'}")
    print(f"Reload:   {'on' if settings.API_RELOAD else 'off'}")
    print()
    print("Identify callers with the X-User-Id header (POST /api/v1/users to register).")
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.API_RELOAD,
                log_level=settings.LOG_LEVEL.lower())
