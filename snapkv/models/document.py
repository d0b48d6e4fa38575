"""The persisted document: the entire durable state of a store."""

from typing import Dict

from pydantic import Field, model_validator

from .base import SnapKVBaseModel
from .entry import Entry
from .snapshot import Snapshot


class StoreDocument(SnapKVBaseModel):
    """Serialized form of ``{store, snapshot_id, snapshots}``.

    ``snapshot_id`` is the last id handed out; the next snapshot gets
    ``snapshot_id + 1``. Snapshot ids appear as strings in JSON.
    """

    store: Dict[str, Entry] = Field(description="Live entries by key")
    snapshot_id: int = Field(ge=0, description="Last snapshot id issued")
    snapshots: Dict[int, Dict[str, Entry]] = Field(description="Snapshot contents by id")

    @model_validator(mode="after")
    def _check_consistency(self) -> "StoreDocument":
        if "" in self.store:
            raise ValueError("store contains an empty key")
        for snapshot_id, entries in self.snapshots.items():
            if snapshot_id < 1:
                raise ValueError(f"snapshot id {snapshot_id} is not positive")
            if snapshot_id > self.snapshot_id:
                raise ValueError(
                    f"snapshot id {snapshot_id} is ahead of the snapshot counter {self.snapshot_id}"
                )
            if "" in entries:
                raise ValueError(f"snapshot {snapshot_id} contains an empty key")
        return self

    def snapshot_models(self) -> Dict[int, Snapshot]:
        return {
            snapshot_id: Snapshot(id=snapshot_id, entries=entries)
            for snapshot_id, entries in self.snapshots.items()
        }
