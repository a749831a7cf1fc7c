"""Read and write single snapshot JSON files."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from ..exceptions import SnapshotFormatError, SnapshotNotFoundError
from ..logging_config import get_logger
from ..models import ProjectSnapshot

logger = get_logger(__name__)

PathLike = Union[str, Path]


def save_snapshot_file(snapshot: ProjectSnapshot, path: PathLike) -> Path:
    """Write ``snapshot`` as indented JSON, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(snapshot.to_dict(), f, indent=2)
    logger.info(f"Saved snapshot {snapshot.id} to {target}")
    return target


def load_snapshot_file(path: PathLike) -> ProjectSnapshot:
    """Read a snapshot written by ``save_snapshot_file``.

    Raises:
        SnapshotNotFoundError: If the file does not exist
        SnapshotFormatError: If the file is not JSON or lacks required keys
    """
    source = Path(path)
    if not source.exists():
        raise SnapshotNotFoundError(source)

    try:
        with open(source, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise SnapshotFormatError(source, f"invalid JSON: {e}")

    if not isinstance(raw, dict):
        raise SnapshotFormatError(source, "top-level value must be an object")

    try:
        snapshot = ProjectSnapshot.from_dict(raw)
    except KeyError as e:
        raise SnapshotFormatError(source, f"missing key {e}")
    except (TypeError, ValueError, AttributeError) as e:
        raise SnapshotFormatError(source, str(e))

    logger.info(f"Loaded snapshot {snapshot.id} from {source}")
    return snapshot


def empty_snapshot() -> ProjectSnapshot:
    """Baseline used when no previous snapshot exists; everything diffs as added."""
    return ProjectSnapshot(
        id="empty",
        commit_sha="0000000",
        branch="none",
        created_at=datetime.now(timezone.utc).isoformat(),
    )
