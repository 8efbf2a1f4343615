"""
DateTime Utilities for Pomotimer

All timestamps are stored in UTC.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Get the current UTC time as a timezone-aware datetime.

    Returns:
        datetime: Current UTC time with tzinfo=timezone.utc
    """
    return datetime.now(timezone.utc)
