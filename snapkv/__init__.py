"""
SnapKV - an in-memory key-value store with history.

This package provides:
- Keys with optional time-to-live and lazy expiration
- Single-level undo/redo of set and delete
- Point-in-time snapshots that can be restored
- Durable persistence to a JSON document
"""

__version__ = "0.1.0"

from .config.settings import Settings
from .store.core import KeyValueStore

__all__ = ["KeyValueStore", "Settings"]
