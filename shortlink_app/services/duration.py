"""
Parsing of human-written expiration durations such as "30m", "24h" or "1h30m".
"""

import re
from datetime import timedelta

from shortlink_app.exceptions import InvalidExpirationError


_UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 3600,
}

_TERM = re.compile(r"(\d+(?:\.\d*)?|\.\d+)([smh])")
_FULL = re.compile(r"^(?:(?:\d+(?:\.\d*)?|\.\d+)[smh])+$")


def parse_duration(value: str) -> timedelta:
    """
    Parse a sequence of <number><unit> terms, unit being s, m or h.

    Numbers may be fractional ("1.5h"). The total must be positive.

    Raises:
        InvalidExpirationError: If the string is empty, malformed, or not positive
    """
    if not value or not isinstance(value, str):
        raise InvalidExpirationError("Expiration duration is required")

    text = value.strip()
    if not _FULL.match(text):
        raise InvalidExpirationError(
            f"Invalid expiration duration '{value}' (expected e.g. 30s, 15m, 24h, 1h30m)"
        )

    seconds = sum(
        float(number) * _UNIT_SECONDS[unit]
        for number, unit in _TERM.findall(text)
    )

    if seconds <= 0:
        raise InvalidExpirationError(f"Expiration duration must be positive, got '{value}'")

    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        raise InvalidExpirationError(f"Expiration duration '{value}' is too large")
