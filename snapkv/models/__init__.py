"""SnapKV domain models."""

from .actions import Action, DeleteAction, SetAction
from .audit import AuditAction, AuditEntry
from .base import SnapKVBaseModel
from .document import StoreDocument
from .entry import Entry
from .snapshot import Snapshot

__all__ = [
    "SnapKVBaseModel",
    "Entry",
    "Action",
    "SetAction",
    "DeleteAction",
    "Snapshot",
    "AuditAction",
    "AuditEntry",
    "StoreDocument",
]
