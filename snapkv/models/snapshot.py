"""Snapshot model."""

from typing import Dict, List, Tuple

from pydantic import ConfigDict, Field

from .base import SnapKVBaseModel
from .entry import Entry


class Snapshot(SnapKVBaseModel):
    """A frozen copy of the store taken at some point in time."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1, description="Snapshot identifier, never reused")
    entries: Dict[str, Entry] = Field(default_factory=dict, description="Store contents as captured")

    def items(self) -> List[Tuple[str, str]]:
        """Key/value pairs as captured, sorted by key. Expiry is not re-checked."""
        return [(key, entry.value) for key, entry in sorted(self.entries.items())]

    def __len__(self) -> int:
        return len(self.entries)
