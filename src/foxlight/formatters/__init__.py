"""Output formatters for snapshot diffs."""

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .markdown_formatter import COMMENT_MARKER, MarkdownFormatter, format_bytes
from .rich_formatter import RichFormatter


def get_formatter(name: str, thresholds: ThresholdConfig = DEFAULT_THRESHOLDS) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json", "markdown"
        thresholds: Row filtering thresholds for rich and markdown output

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "json": JsonFormatter,
        "markdown": MarkdownFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls(thresholds=thresholds)


__all__ = [
    "BaseFormatter",
    "COMMENT_MARKER",
    "JsonFormatter",
    "MarkdownFormatter",
    "RichFormatter",
    "format_bytes",
    "get_formatter",
]
