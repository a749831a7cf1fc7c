"""Snapshot persistence exceptions: missing or malformed snapshot files."""

from pathlib import Path

from .base import FoxlightError


class SnapshotError(FoxlightError):
    """Base class for snapshot storage errors."""

    pass


class SnapshotNotFoundError(SnapshotError):
    """Raised when a snapshot file does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Snapshot not found: {path}", details={"path": str(path)})
        self.path = path


class SnapshotFormatError(SnapshotError):
    """Raised when a snapshot file cannot be decoded into a ProjectSnapshot."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Malformed snapshot: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
