# clean_api/shared/utils/datetime_utils.py

"""
Utilities for datetime operations.

Every timestamp the auth core compares or stores is a timezone-aware UTC
datetime. Backends that hand back naive values (sqlite) are normalized on
the way out of the repositories.
"""

from datetime import datetime, timezone
from typing import Optional


class DateTimeUtil:
    """
    Utility class for datetime operations.
    """

    @staticmethod
    def utcnow() -> datetime:
        """
        Get current UTC time as a timezone-aware datetime.
        """
        return datetime.now(timezone.utc)

    @staticmethod
    def from_storage(dt: Optional[datetime]) -> Optional[datetime]:
        """
        Convert a datetime read from the database into an aware UTC datetime.

        Naive values are assumed to already be in UTC.
        """
        if dt is None:
            return None
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
