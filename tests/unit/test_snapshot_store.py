"""Tests for pending snapshot storage."""

from pathlib import Path

import pytest

from framesync.core.errors import SnapshotError
from framesync.core.ir import RuntimeObject
from framesync.reconcile import SnapshotState, SnapshotStore


class TestSnapshotStore:
    def test_capture_strips_clone_suffix(self, screen):
        store = SnapshotStore()

        snapshot = store.capture(screen.instantiate(), source=Path("Screen.json"))

        assert snapshot.name == "Screen"
        assert snapshot.root.name == "Screen"
        assert snapshot.state == SnapshotState.CAPTURED
        assert "Screen" in store
        assert len(store) == 1

    def test_take_removes_snapshot(self, screen):
        store = SnapshotStore()
        store.capture(screen.instantiate())

        snapshot = store.take("Screen")

        assert snapshot is not None
        assert len(store) == 0
        assert store.take("Screen") is None

    def test_recapture_replaces_and_releases(self, screen_factory):
        store = SnapshotStore()
        first = store.capture(screen_factory().instantiate(), source=Path("a/Screen.json"))
        second = store.capture(screen_factory().instantiate(), source=Path("b/Screen.json"))

        assert first.state == SnapshotState.REPLACED
        assert first.root.destroyed
        assert store.get("Screen") is second
        assert len(store) == 1

    def test_release_all_marks_unmatched(self):
        store = SnapshotStore()
        store.capture(RuntimeObject(name="Home(Clone)"))
        store.capture(RuntimeObject(name="Settings(Clone)"))

        released = store.release_all()

        assert sorted(s.name for s in released) == ["Home", "Settings"]
        assert all(s.state == SnapshotState.UNMATCHED for s in released)
        assert all(s.root.destroyed for s in released)
        assert len(store) == 0

    def test_release_twice_raises(self, screen):
        store = SnapshotStore()
        snapshot = store.capture(screen.instantiate())
        snapshot.release(SnapshotState.MERGED)

        with pytest.raises(SnapshotError):
            snapshot.release(SnapshotState.MERGED)
