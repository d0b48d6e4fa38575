"""Tests for the snapshot registry."""

import pytest

from snapkv.core.exceptions import SnapshotNotFoundError
from snapkv.models.entry import Entry
from snapkv.models.snapshot import Snapshot
from snapkv.store.snapshots import SnapshotRegistry


class TestSnapshotRegistry:
    """Capture, lookup and replacement of snapshots."""

    def test_ids_start_at_one_and_increase(self):
        registry = SnapshotRegistry()

        assert registry.last_id == 0
        assert registry.capture({}).id == 1
        assert registry.capture({}).id == 2
        assert registry.last_id == 2
        assert len(registry) == 2

    def test_capture_is_independent_of_source(self):
        registry = SnapshotRegistry()
        data = {"a": Entry(value="1")}

        snapshot = registry.capture(data)
        data["a"] = Entry(value="changed")
        data["b"] = Entry(value="new")

        assert registry.get(snapshot.id).entries == {"a": Entry(value="1")}

    def test_get_unknown_id_raises(self):
        registry = SnapshotRegistry()

        with pytest.raises(SnapshotNotFoundError) as exc_info:
            registry.get(7)

        assert exc_info.value.snapshot_id == 7
        assert exc_info.value.error_code == "SNAPSHOT_NOT_FOUND"

    def test_list_is_sorted_by_id(self):
        registry = SnapshotRegistry()
        registry.replace(
            5,
            {
                4: Snapshot(id=4),
                1: Snapshot(id=1),
                3: Snapshot(id=3),
            },
        )

        assert [snapshot.id for snapshot in registry.list()] == [1, 3, 4]

    def test_replace_keeps_counter_moving_forward(self):
        registry = SnapshotRegistry()
        registry.replace(5, {2: Snapshot(id=2)})

        assert registry.capture({}).id == 6
        assert 2 in registry
        assert 5 not in registry

    def test_replace_rejects_ids_ahead_of_counter(self):
        registry = SnapshotRegistry()

        with pytest.raises(ValueError):
            registry.replace(1, {2: Snapshot(id=2)})

    def test_to_document_maps_ids_to_entries(self):
        registry = SnapshotRegistry()
        registry.capture({"a": Entry(value="1")})

        assert registry.to_document() == {1: {"a": Entry(value="1")}}

    def test_returned_snapshots_are_copies(self):
        registry = SnapshotRegistry()
        captured = registry.capture({"a": Entry(value="1")})

        captured.entries["b"] = Entry(value="2")
        registry.get(1).entries.clear()
        registry.list()[0].entries["c"] = Entry(value="3")

        assert registry.get(1).entries == {"a": Entry(value="1")}
        assert registry.to_document() == {1: {"a": Entry(value="1")}}
