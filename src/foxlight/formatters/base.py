"""Base formatter interface for snapshot diff rendering."""

from abc import ABC, abstractmethod

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..diff.models import SnapshotDiff


class BaseFormatter(ABC):
    """Abstract base class for diff formatters."""

    def __init__(self, thresholds: ThresholdConfig = DEFAULT_THRESHOLDS):
        self.thresholds = thresholds

    def render(self, diff: SnapshotDiff) -> None:
        """Print the formatted diff to stdout."""
        print(self.format(diff))

    @abstractmethod
    def format(self, diff: SnapshotDiff) -> str:
        """Return formatted string representation of the diff."""
