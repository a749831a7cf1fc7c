"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import FoxlightConfig, load_config
from ..registry import ComponentRegistry
from ..storage import SnapshotStore, load_snapshot_file

console = Console()


def resolve_config(ctx: typer.Context) -> FoxlightConfig:
    """Build config from the global ``--config`` / ``--verbose`` options."""
    obj = ctx.obj or {}
    overrides = {}
    if obj.get("verbose"):
        overrides["verbose"] = True
    return load_config(config_file=obj.get("config"), **overrides)


def project_root(ctx: typer.Context) -> Path:
    obj = ctx.obj or {}
    return Path(obj.get("path") or Path.cwd()).resolve()


def open_store(ctx: typer.Context, config: Optional[FoxlightConfig] = None) -> SnapshotStore:
    config = config or resolve_config(ctx)
    return SnapshotStore(
        project_root(ctx),
        snapshot_dir=config.snapshot_dir,
        max_snapshots=config.max_snapshots,
    )


def registry_from_file(path: Path) -> ComponentRegistry:
    """Fresh registry holding the contents of a snapshot file."""
    registry = ComponentRegistry()
    registry.load_snapshot(load_snapshot_file(path))
    return registry
