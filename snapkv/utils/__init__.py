"""Utility functions and helpers."""

from .date_utils import calculate_expiry, is_expired, parse_ttl
from .validation import validate_key, validate_snapshot_id, validate_ttl, validate_value

__all__ = [
    "calculate_expiry",
    "is_expired",
    "parse_ttl",
    "validate_key",
    "validate_value",
    "validate_ttl",
    "validate_snapshot_id",
]
