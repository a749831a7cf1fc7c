"""
Logging configuration for Foxlight.

Every module logs through a child of the ``foxlight`` logger obtained with
``get_logger(__name__)``:

- ``foxlight.registry`` / ``foxlight.crossref`` — snapshot capture and
  consumer linking, including name collisions (DEBUG).
- ``foxlight.graph.*`` / ``foxlight.dead_code`` — graph build and analysis
  statistics (DEBUG).
- ``foxlight.storage.*`` — snapshot files and the project store: saves and
  loads (INFO), rotation (DEBUG), unreadable manifests and failed deletions
  (WARNING).
- ``foxlight.cli.*`` — command-level notices such as a missing baseline.

The library never configures handlers itself; the CLI callback calls
``setup_logging`` once, so WARNING and above reach stderr by default and
``--verbose`` opens up the DEBUG detail.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route the ``foxlight`` logger hierarchy to stderr through rich.

    Log records carry file paths and component ids verbatim, so rich markup
    is disabled on the handler.

    Args:
        verbose: DEBUG level, with source paths and traceback locals
        quiet: Only ERROR and above (wins over ``verbose``)
        log_file: Optional file path that also receives every record

    Returns:
        The ``foxlight`` logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    console = Console(stderr=True)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger("foxlight")
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get the logger for a Foxlight module.

    Args:
        name: ``__name__`` of the calling module (``foxlight.storage.store``)
              or a short name (``registry``), which is placed under
              ``foxlight.``. None returns the ``foxlight`` logger itself.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("foxlight")

    if name != "foxlight" and not name.startswith("foxlight."):
        name = f"foxlight.{name}"

    return logging.getLogger(name)
