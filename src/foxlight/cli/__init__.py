"""CLI entry point — registers all subcommands."""

import typer

app = typer.Typer(
    name="foxlight",
    help="Foxlight - component registry, dependency graph and snapshot diffs",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .diff import diff_cmd as _diff  # noqa: F401, E402
from .graph import graph as _graph  # noqa: F401, E402
from .dead_code import dead_code as _dead_code  # noqa: F401, E402
from .history import history as _history, save as _save  # noqa: F401, E402
