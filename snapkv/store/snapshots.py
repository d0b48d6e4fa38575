"""Registry of point-in-time store copies."""

from typing import Dict, List

from ..config.logging import LoggerMixin
from ..core.exceptions import SnapshotNotFoundError
from ..models.entry import Entry
from ..models.snapshot import Snapshot


def _detached(snapshot: Snapshot) -> Snapshot:
    return Snapshot(id=snapshot.id, entries=dict(snapshot.entries))


class SnapshotRegistry(LoggerMixin):
    """Snapshots keyed by id.

    Ids come from a counter that only moves forward: it is never reset by a
    restore, and ids are never reused.
    """

    def __init__(self) -> None:
        self._snapshots: Dict[int, Snapshot] = {}
        self._last_id = 0

    @property
    def last_id(self) -> int:
        """The most recently issued id (0 before the first snapshot)."""
        return self._last_id

    def capture(self, entries: Dict[str, Entry]) -> Snapshot:
        """Store an independent copy of ``entries`` under a fresh id."""
        self._last_id += 1
        snapshot = Snapshot(id=self._last_id, entries=dict(entries))
        self._snapshots[snapshot.id] = snapshot
        self.logger.info("Snapshot captured", snapshot_id=snapshot.id, keys=len(snapshot))
        return _detached(snapshot)

    def get(self, snapshot_id: int) -> Snapshot:
        try:
            return _detached(self._snapshots[snapshot_id])
        except KeyError:
            raise SnapshotNotFoundError(snapshot_id) from None

    def list(self) -> List[Snapshot]:
        """Copies of all snapshots in ascending id order."""
        return [_detached(self._snapshots[snapshot_id]) for snapshot_id in sorted(self._snapshots)]

    def replace(self, last_id: int, snapshots: Dict[int, Snapshot]) -> None:
        """Swap in a complete registry, e.g. one read back from disk."""
        if any(snapshot_id > last_id for snapshot_id in snapshots):
            raise ValueError("Snapshot ids cannot be ahead of the counter")
        self._snapshots = {snapshot_id: _detached(snapshot) for snapshot_id, snapshot in snapshots.items()}
        self._last_id = last_id

    def to_document(self) -> Dict[int, Dict[str, Entry]]:
        return {snapshot.id: dict(snapshot.entries) for snapshot in self.list()}

    def __contains__(self, snapshot_id: object) -> bool:
        return snapshot_id in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)
