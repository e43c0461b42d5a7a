"""
Logging setup.

Modules obtain their logger with ``logging.getLogger(__name__)``; this
module only configures the root handler once at start-up.
"""

import logging
from typing import Optional

from app.core.config import settings

_configured = False


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure the root logger from settings (idempotent)."""
    global _configured
    if _configured:
        return

    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=fmt or settings.LOG_FORMAT)
    # SQL echo is controlled by DEBUG in app.db.session, keep the engine logger quiet otherwise.
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    _configured = True
