"""Audit trail records."""

from datetime import datetime
from enum import Enum

from pydantic import ConfigDict, Field

from ..utils.date_utils import format_timestamp
from .base import SnapKVBaseModel


class AuditAction(str, Enum):
    """Operations that leave a trace in the audit trail."""

    SET = "set"
    DELETE = "delete"
    UNDO = "undo"
    REDO = "redo"
    SNAPSHOT = "snapshot"
    RESTORE = "restore"
    SAVE = "save"
    LOAD = "load"


class AuditEntry(SnapKVBaseModel):
    """One human-readable record of a completed operation."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(description="When the operation completed (UTC)")
    action: AuditAction = Field(description="Operation that was performed")
    description: str = Field(description="Human-readable summary")

    def __str__(self) -> str:
        return f"[{format_timestamp(self.timestamp)}] {self.description}"
