"""
In-memory key-value store with expiration, history and snapshots.

- **KeyValueStore**: owns the live entries and coordinates everything else
- **ActionLog**: undo/redo stacks of reversible set/delete records
- **SnapshotRegistry**: point-in-time copies keyed by a forward-only id
- **AuditTrail**: append-only record of completed operations
- **persistence**: JSON document codec with atomic saves
"""

from .audit import AuditTrail
from .core import KeyValueStore
from .history import ActionLog
from .persistence import load_state, save_state
from .snapshots import SnapshotRegistry

__all__ = [
    "KeyValueStore",
    "ActionLog",
    "SnapshotRegistry",
    "AuditTrail",
    "load_state",
    "save_state",
]
