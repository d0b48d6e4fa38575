"""Argument validation for store operations."""

from typing import Any

from ..core.exceptions import ValidationError


def validate_key(key: Any) -> str:
    """Keys must be non-empty strings."""
    if not isinstance(key, str):
        raise ValidationError(f"Key must be a string, got {type(key).__name__}", "key")
    if not key:
        raise ValidationError("Key cannot be empty", "key")
    return key


def validate_value(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"Value must be a string, got {type(value).__name__}", "value")
    return value


def validate_ttl(ttl_seconds: Any) -> int:
    """TTLs are whole seconds; zero or negative means the key never expires."""
    # bool is an int subclass but never a meaningful TTL
    if isinstance(ttl_seconds, bool) or not isinstance(ttl_seconds, int):
        raise ValidationError("TTL must be an integer number of seconds", "ttl_seconds")
    return ttl_seconds


def validate_snapshot_id(snapshot_id: Any) -> int:
    if isinstance(snapshot_id, bool) or not isinstance(snapshot_id, int):
        raise ValidationError("Snapshot id must be an integer", "snapshot_id")
    return snapshot_id
