"""CI significance policy: decide whether a diff is worth reporting."""

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from .models import SnapshotDiff


def has_significant_changes(
    diff: SnapshotDiff,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> bool:
    """True when components changed or a bundle/health delta exceeds its threshold.

    Bundle deltas are judged on gzip size. Both comparisons are strict, so a
    delta exactly at the threshold is not significant.
    """
    if not diff.components.is_empty:
        return True

    if any(abs(b.delta.gzip) > thresholds.significant_gzip_bytes for b in diff.bundle_diff):
        return True

    return any(abs(h.delta) > thresholds.significant_health_points for h in diff.health_diff)
