"""Snapshot persistence: single JSON files and a rotating history store."""

from .files import empty_snapshot, load_snapshot_file, save_snapshot_file
from .store import SnapshotEntry, SnapshotStore, StoredSnapshot

__all__ = [
    "SnapshotEntry",
    "SnapshotStore",
    "StoredSnapshot",
    "empty_snapshot",
    "load_snapshot_file",
    "save_snapshot_file",
]
