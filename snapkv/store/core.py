"""The key-value store: live data plus its history, snapshots and audit trail."""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..config.logging import LoggerMixin
from ..config.settings import Settings
from ..core.clock import Clock, SystemClock
from ..core.exceptions import KeyExpiredError, KeyNotFoundError, SnapshotNotFoundError
from ..models.actions import DeleteAction, SetAction
from ..models.audit import AuditAction, AuditEntry
from ..models.document import StoreDocument
from ..models.entry import Entry
from ..models.snapshot import Snapshot
from ..utils.validation import validate_key, validate_snapshot_id, validate_ttl, validate_value
from .audit import AuditTrail
from .history import ActionLog
from .persistence import PathLike, load_state, save_state
from .snapshots import SnapshotRegistry


class KeyValueStore(LoggerMixin):
    """An in-memory store with TTLs, undo/redo, snapshots and persistence.

    Each instance owns its own data, history, snapshot registry and audit
    trail. Instances are not thread-safe; callers sharing one across threads
    must serialize access to it as a whole.
    """

    def __init__(self, settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> None:
        self.settings = settings or Settings()
        self.clock = clock or SystemClock()
        self._data: Dict[str, Entry] = {}
        self._history = ActionLog()
        self._snapshots = SnapshotRegistry()
        self._audit = AuditTrail(self.clock)

    # Mutations

    def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> Entry:
        """Install ``value`` under ``key``, replacing any existing entry.

        ``ttl_seconds`` defaults to ``Settings.DEFAULT_TTL_SECONDS``; zero or a
        negative TTL means the key never expires.
        """
        validate_key(key)
        validate_value(value)
        if ttl_seconds is None:
            ttl_seconds = self.settings.DEFAULT_TTL_SECONDS
        validate_ttl(ttl_seconds)

        entry = Entry.create(value, ttl_seconds, self.clock.now())
        self._history.record(SetAction(key=key, prior=self._data.get(key), new=entry))
        self._data[key] = entry

        self._audit.record(AuditAction.SET, f"SET key: {key} value: {value} ttl: {ttl_seconds}")
        self.logger.info("Key set", key=key, ttl_seconds=ttl_seconds, expires_at=entry.expires_at)
        return entry

    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns ``False`` (and records nothing) if it was absent."""
        prior = self._data.get(key)
        if prior is None:
            self.logger.debug("Key not found for deletion", key=key)
            return False

        self._history.record(DeleteAction(key=key, prior=prior))
        del self._data[key]

        self._audit.record(AuditAction.DELETE, f"DELETE key: {key}")
        self.logger.info("Key deleted", key=key)
        return True

    def undo(self) -> bool:
        """Revert the latest set/delete. Returns ``False`` when there is nothing to undo."""
        action = self._history.undo(self._data)
        if action is None:
            return False
        self._audit.record(AuditAction.UNDO, f"UNDO action on key: {action.key}")
        self.logger.info("Undo performed", key=action.key, kind=action.kind)
        return True

    def redo(self) -> bool:
        """Re-apply the latest undone action. Returns ``False`` when there is nothing to redo."""
        action = self._history.redo(self._data)
        if action is None:
            return False
        self._audit.record(AuditAction.REDO, f"REDO action on key: {action.key}")
        self.logger.info("Redo performed", key=action.key, kind=action.kind)
        return True

    # Reads

    def get(self, key: str) -> str:
        """Return the value stored under ``key``.

        Raises ``KeyNotFoundError`` if the key is absent. If the key is
        present but expired it is evicted and ``KeyExpiredError`` is raised;
        eviction is not recorded in the undo history.
        """
        entry = self._data.get(key)
        if entry is None:
            raise KeyNotFoundError(key)
        if entry.is_expired(self.clock.now()):
            del self._data[key]
            self.logger.debug("Removed expired key", key=key, expired_at=entry.expires_at)
            raise KeyExpiredError(key)
        return entry.value

    def sweep_expired(self) -> int:
        """Evict every expired entry and return how many were removed."""
        now = self.clock.now()
        expired = [key for key, entry in self._data.items() if entry.is_expired(now)]
        for key in expired:
            del self._data[key]
        if expired:
            self.logger.debug("Swept expired keys", count=len(expired))
        return len(expired)

    def items(self) -> List[Tuple[str, str]]:
        """Live key/value pairs sorted by key, after sweeping expired entries."""
        self.sweep_expired()
        return [(key, entry.value) for key, entry in sorted(self._data.items())]

    def entries(self) -> Dict[str, Entry]:
        """A copy of the raw entries, expired ones included."""
        return dict(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        entry = self._data.get(key)  # type: ignore[arg-type]
        return entry is not None and not entry.is_expired(self.clock.now())

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    # Snapshots

    def snapshot(self) -> int:
        """Capture the live (swept) store and return the new snapshot id."""
        self.sweep_expired()
        snapshot = self._snapshots.capture(self._data)
        self._audit.record(AuditAction.SNAPSHOT, f"SNAPSHOT created with ID: {snapshot.id}")
        return snapshot.id

    def restore(self, snapshot_id: int) -> bool:
        """Replace the live store with a copy of a snapshot.

        Clears undo and redo history. Returns ``False`` and leaves everything
        untouched if the snapshot does not exist.
        """
        validate_snapshot_id(snapshot_id)
        try:
            snapshot = self._snapshots.get(snapshot_id)
        except SnapshotNotFoundError:
            self.logger.debug("Snapshot not found", snapshot_id=snapshot_id)
            return False

        self._data = dict(snapshot.entries)
        self._history.clear()

        self._audit.record(AuditAction.RESTORE, f"RESTORE snapshot ID: {snapshot_id}")
        self.logger.info("Snapshot restored", snapshot_id=snapshot_id, keys=len(self._data))
        return True

    def list_snapshots(self) -> List[Snapshot]:
        """All snapshots in id order, as captured.

        Sweeps the live store first; snapshot contents are left as they were
        when taken, even if some of their entries have since expired.
        """
        self.sweep_expired()
        return self._snapshots.list()

    @property
    def snapshot_counter(self) -> int:
        return self._snapshots.last_id

    # Persistence

    def to_document(self) -> StoreDocument:
        return StoreDocument(
            store=dict(self._data),
            snapshot_id=self._snapshots.last_id,
            snapshots=self._snapshots.to_document(),
        )

    def save(self, path: Optional[PathLike] = None) -> Path:
        """Write the store, snapshot counter and snapshots to ``path``.

        Defaults to ``Settings.DATA_FILE``. Live state is never modified.
        """
        destination = save_state(
            path if path is not None else self.settings.DATA_FILE,
            self.to_document(),
            self.settings.JSON_INDENT,
        )
        self._audit.record(AuditAction.SAVE, f"SAVE to file: {destination}")
        return destination

    def load(self, path: Optional[PathLike] = None) -> bool:
        """Replace the store, snapshot counter and snapshots with those in ``path``.

        Returns ``False`` when there is no prior state (missing or empty
        file). On success the undo/redo history is cleared, since it refers
        to the state that was just replaced. Errors leave the store as it was.
        """
        source = path if path is not None else self.settings.DATA_FILE
        document = load_state(source)
        if document is None:
            return False

        self._snapshots.replace(document.snapshot_id, document.snapshot_models())
        self._data = dict(document.store)
        self._history.clear()

        self._audit.record(AuditAction.LOAD, f"LOAD from file: {source}")
        self.logger.info("Store loaded", path=str(source), keys=len(self._data))
        return True

    # Audit

    def audit_log(self) -> List[AuditEntry]:
        return self._audit.entries()
