"""Core building blocks for SnapKV."""

from .clock import Clock, ManualClock, SystemClock
from .exceptions import (
    DocumentFormatError,
    KeyExpiredError,
    KeyNotFoundError,
    PersistenceError,
    PersistenceIOError,
    SerializationError,
    SnapKVError,
    SnapshotNotFoundError,
    ValidationError,
)

__all__ = [
    "Clock",
    "ManualClock",
    "SystemClock",
    "SnapKVError",
    "ValidationError",
    "KeyNotFoundError",
    "KeyExpiredError",
    "SnapshotNotFoundError",
    "PersistenceError",
    "PersistenceIOError",
    "SerializationError",
    "DocumentFormatError",
]
