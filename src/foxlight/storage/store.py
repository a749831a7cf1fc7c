"""Rotating snapshot history under ``<project>/.foxlight/snapshots/``.

Each save writes one timestamped JSON file, prunes files beyond
``max_snapshots`` (oldest first) and rewrites ``manifest.json``, which
lists the kept snapshots oldest to newest.
"""

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from ..logging_config import get_logger
from ..models import ProjectSnapshot
from .files import load_snapshot_file, save_snapshot_file

logger = get_logger(__name__)

MANIFEST_NAME = "manifest.json"

# Sortable, filesystem-safe UTC timestamp used as the file stem
_STAMP_FORMAT = "%Y-%m-%dT%H-%M-%S-%fZ"


@dataclass
class SnapshotEntry:
    """One manifest line: when a snapshot was stored and where."""

    timestamp: str  # ISO-8601
    path: str
    size: int


@dataclass
class StoredSnapshot:
    timestamp: str
    snapshot: ProjectSnapshot


class SnapshotStore:
    """Keeps the most recent ``max_snapshots`` snapshots of a project."""

    def __init__(
        self,
        project_root: Union[str, Path],
        snapshot_dir: str = ".foxlight/snapshots",
        max_snapshots: int = 30,
    ):
        self.snapshots_dir = Path(project_root) / snapshot_dir
        self.max_snapshots = max_snapshots

    @property
    def manifest_path(self) -> Path:
        return self.snapshots_dir / MANIFEST_NAME

    def save(self, snapshot: ProjectSnapshot) -> SnapshotEntry:
        """Store ``snapshot`` and rotate old ones out."""
        self.snapshots_dir.mkdir(parents=True, exist_ok=True)

        stamp = datetime.now(timezone.utc).strftime(_STAMP_FORMAT)
        path = save_snapshot_file(snapshot, self.snapshots_dir / f"{stamp}.json")
        entries = self._rotate()

        for entry in entries:
            if Path(entry.path) == path:
                return entry
        # Only reachable when max_snapshots pruned the file just written
        return SnapshotEntry(timestamp=_stamp_to_iso(stamp), path=str(path), size=0)

    def list_entries(self) -> List[SnapshotEntry]:
        """Manifest entries oldest to newest; empty when there is no usable manifest."""
        if not self.manifest_path.exists():
            return []
        try:
            with open(self.manifest_path, encoding="utf-8") as f:
                raw = json.load(f)
            return [SnapshotEntry(**item) for item in raw.get("snapshots", [])]
        except (OSError, json.JSONDecodeError, TypeError, AttributeError) as e:
            logger.warning(f"Ignoring unreadable manifest {self.manifest_path}: {e}")
            return []

    def load_latest(self) -> Optional[StoredSnapshot]:
        entries = self.list_entries()
        if not entries:
            return None
        latest = entries[-1]
        return StoredSnapshot(timestamp=latest.timestamp, snapshot=load_snapshot_file(latest.path))

    def load_recent(self, limit: Optional[int] = None) -> List[StoredSnapshot]:
        """The newest ``limit`` snapshots (all when None), oldest first."""
        entries = self.list_entries()
        if limit is not None:
            entries = entries[max(0, len(entries) - limit):]
        return [
            StoredSnapshot(timestamp=e.timestamp, snapshot=load_snapshot_file(e.path))
            for e in entries
        ]

    def _rotate(self) -> List[SnapshotEntry]:
        files = sorted(
            (p for p in self.snapshots_dir.glob("*.json") if p.name != MANIFEST_NAME),
            reverse=True,
        )

        for stale in files[self.max_snapshots:]:
            try:
                stale.unlink()
                logger.debug(f"Rotated out snapshot {stale.name}")
            except OSError as e:
                logger.warning(f"Could not delete old snapshot {stale}: {e}")

        kept = list(reversed(files[: self.max_snapshots]))
        entries = [
            SnapshotEntry(
                timestamp=_stamp_to_iso(p.stem),
                path=str(p),
                size=p.stat().st_size,
            )
            for p in kept
        ]

        with open(self.manifest_path, "w", encoding="utf-8") as f:
            json.dump({"snapshots": [asdict(e) for e in entries]}, f, indent=2)

        return entries


def _stamp_to_iso(stamp: str) -> str:
    try:
        parsed = datetime.strptime(stamp, _STAMP_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        return stamp
    return parsed.isoformat()
