"""Date and time utility functions.

Expiration instants are stored as integer epoch seconds where ``0`` means
"never expires".
"""

import re
from datetime import datetime, timezone

NEVER_EXPIRES = 0

_TTL_PATTERN = re.compile(r"^(\d+)([smhdw])$")
_TTL_MULTIPLIERS = {
    "s": 1,           # seconds
    "m": 60,          # minutes
    "h": 3600,        # hours
    "d": 86400,       # days
    "w": 604800,      # weeks
}


def parse_ttl(ttl_str: str) -> int:
    """Parse a TTL string into seconds.

    Accepts plain integers (including zero and negatives, which mean "never
    expires") and human-readable forms like ``30s``, ``5m``, ``2h``, ``1d``.
    """
    text = ttl_str.strip().lower()
    if not text:
        raise ValueError("TTL cannot be empty")

    if re.fullmatch(r"[+-]?\d+", text):
        return int(text)

    match = _TTL_PATTERN.match(text)
    if not match:
        raise ValueError(f"Invalid TTL format: {ttl_str}")

    value, unit = match.groups()
    return int(value) * _TTL_MULTIPLIERS[unit]


def calculate_expiry(ttl_seconds: int, now: int) -> int:
    """Absolute expiry for a TTL, or ``NEVER_EXPIRES`` when ``ttl_seconds <= 0``."""
    if ttl_seconds <= 0:
        return NEVER_EXPIRES
    return now + ttl_seconds


def is_expired(expires_at: int, now: int) -> bool:
    """An instant has passed once ``now`` is strictly after it."""
    return expires_at != NEVER_EXPIRES and now > expires_at


def from_epoch(timestamp: int) -> datetime:
    """Convert epoch seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """Render a timestamp the way the audit log prints it (ctime style)."""
    return dt.strftime("%a %b %d %H:%M:%S %Y")
