"""
Timestamp helpers shared by the models and the services.

Stored timestamps are always timezone-aware UTC.
"""

import datetime

from sqlalchemy import DateTime


def utc_now() -> datetime.datetime:
    """Current time as an aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


# Column type for every stored timestamp.
TZ_DATETIME = DateTime(timezone=True)
