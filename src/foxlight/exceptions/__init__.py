"""Exception hierarchy for Foxlight."""

from .base import FoxlightError
from .config import ConfigurationError, InvalidConfigError
from .snapshot import SnapshotError, SnapshotFormatError, SnapshotNotFoundError

__all__ = [
    "FoxlightError",
    "ConfigurationError",
    "InvalidConfigError",
    "SnapshotError",
    "SnapshotNotFoundError",
    "SnapshotFormatError",
]
