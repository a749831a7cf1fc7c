"""JSON formatter for snapshot diffs."""

import json

from ..diff.models import SnapshotDiff
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render a diff in the camelCase snapshot wire shape."""

    def format(self, diff: SnapshotDiff) -> str:
        return json.dumps(diff.to_dict(), indent=2, ensure_ascii=False)
