# clean_api/shared/utils/duration.py

"""
Parser for human friendly durations such as "15m" or "7d".
"""

import logging
import re
from datetime import timedelta

logger = logging.getLogger(__name__)

DURATION_PATTERN = re.compile(r"^(\d+)([smhd])$")

_UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 60 * 60 * 24,
}


def parse_duration(value: str, default: str) -> timedelta:
    """
    Parse `<amount><unit>` where unit is one of s, m, h, d.

    Malformed values fall back to `default` (which must itself be valid).
    """
    match = DURATION_PATTERN.match((value or "").strip())
    if not match:
        logger.warning(f"Invalid duration {value!r}, falling back to {default!r}")
        match = DURATION_PATTERN.match(default)
        if not match:
            raise ValueError(f"Invalid default duration: {default!r}")

    amount, unit = match.groups()
    return timedelta(seconds=int(amount) * _UNIT_SECONDS[unit])
