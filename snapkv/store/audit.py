"""Append-only audit trail."""

from typing import Iterator, List

from ..core.clock import Clock
from ..models.audit import AuditAction, AuditEntry
from ..utils.date_utils import from_epoch


class AuditTrail:
    """Timestamped descriptions of every completed operation, oldest first."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._entries: List[AuditEntry] = []

    def record(self, action: AuditAction, description: str) -> AuditEntry:
        entry = AuditEntry(
            timestamp=from_epoch(self._clock.now()),
            action=action,
            description=description,
        )
        self._entries.append(entry)
        return entry

    def entries(self) -> List[AuditEntry]:
        return list(self._entries)

    def __iter__(self) -> Iterator[AuditEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
