# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from lenstrack import configuration
from lenstrack.logger import LOG_LEVELS
from lenstrack.repository.configuration import CONFIGURATION_REPO
from lenstrack.terminal.custom_typer import AliasedTyperGroup
from lenstrack.terminal.parse import parse_lens_type

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(CONFIGURATION_REPO.config_path))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("default_lens_type", config["default_lens_type"])
    table.add_row("log_level", config["log_level"])
    table.add_row("week_start", config["week_start"])
    table.add_row("recent_entries_limit", str(config["recent_entries_limit"]))

    console.print(table)


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory for the cycle history"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="use the default data directory"),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header"),
    ] = None,
    default_lens_type: Annotated[
        Optional[str],
        typer.Option("--default-lens-type", "-t"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=", ".join(LOG_LEVELS)),
    ] = None,
    week_start: Annotated[
        Optional[str],
        typer.Option("--week-start", help="sunday or monday"),
    ] = None,
    recent_entries_limit: Annotated[
        Optional[int],
        typer.Option("--recent-entries-limit", min=1),
    ] = None,
) -> None:
    """Change configuration settings."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        typer.echo(
            f"Invalid log level: {log_level}. Valid options: {', '.join(LOG_LEVELS)}"
        )
        raise typer.Exit(1)
    if week_start is not None and week_start not in ("sunday", "monday"):
        typer.echo(f"Invalid week start: {week_start}. Valid options: sunday, monday")
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        default_lens_type=(
            parse_lens_type(default_lens_type)
            if default_lens_type is not None
            else None
        ),
        log_level=log_level,
        week_start=week_start,  # type: ignore[arg-type]
        recent_entries_limit=recent_entries_limit,
    )
    CONFIGURATION_REPO.flush()

    view()
