# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer

from lenstrack.model.lens_type import LensType
from lenstrack.repository.configuration import CONFIGURATION_REPO
from lenstrack.service.calendar import shift_month
from lenstrack.service.tracker import LensTracker
from lenstrack.terminal.parse import (
    parse_date,
    parse_lens_type,
    parse_month,
    parse_required_date,
)
from lenstrack.view.views.calendar import calendar_view
from lenstrack.view.views.dashboard import dashboard_view
from lenstrack.view.views.history import history_view


def get_tracker(ctx: typer.Context) -> LensTracker:
    tracker = cast(LensTracker, ctx.obj)
    tracker.load_data()
    return tracker


def exit_on_error(tracker: LensTracker) -> None:
    if tracker.error_message is not None:
        typer.secho(tracker.error_message, fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


# ─────────────────────────────────────────────────────────────
# Dashboard & wear tracking
# ─────────────────────────────────────────────────────────────


def status(ctx: typer.Context) -> None:
    """Show progress toward lens replacement."""
    tracker = get_tracker(ctx)
    dashboard_view(tracker)


def log(ctx: typer.Context) -> None:
    """Log that the lenses were worn today."""
    tracker = get_tracker(ctx)
    if tracker.has_worn_today:
        typer.echo("Already logged today")
        return

    tracker.log_today_wear()
    exit_on_error(tracker)
    dashboard_view(tracker)


def add(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="YYYY-MM-DD, today, yesterday or -N")],
) -> None:
    """Add a wear entry for a date."""
    wear_date = parse_required_date(date)
    tracker = get_tracker(ctx)
    tracker.add_wear_entry(wear_date)
    exit_on_error(tracker)
    dashboard_view(tracker)


def remove(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="YYYY-MM-DD, today, yesterday or -N")],
) -> None:
    """Remove the wear entry for a date."""
    wear_date = parse_required_date(date)
    tracker = get_tracker(ctx)
    tracker.remove_wear_entry(wear_date)
    exit_on_error(tracker)
    dashboard_view(tracker)


def calendar(
    ctx: typer.Context,
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", help="YYYY-MM, defaults to this month"),
    ] = None,
    offset: Annotated[
        int,
        typer.Option("--offset", "-o", help="months relative to --month"),
    ] = 0,
) -> None:
    """Show worn days for a month of the current cycle."""
    config = CONFIGURATION_REPO.get_config()
    base_year, base_month = parse_month(month)
    try:
        year, month_number = shift_month(base_year, base_month, offset)
    except (ValueError, OverflowError) as e:
        raise typer.BadParameter(f"Month offset out of range: {e}", param_hint="--offset")

    tracker = get_tracker(ctx)
    calendar_view(
        tracker.current_cycle,
        year,
        month_number,
        config["week_start"],
        tracker.status_color,
        config["recent_entries_limit"],
    )


# ─────────────────────────────────────────────────────────────
# Cycle management
# ─────────────────────────────────────────────────────────────


def start(
    ctx: typer.Context,
    lens_type: Annotated[
        Optional[str],
        typer.Option(
            "--type",
            "-t",
            help=", ".join(LensType.values()),
        ),
    ] = None,
    start_date: Annotated[
        Optional[str],
        typer.Option("--start-date", "-sd", help="defaults to today"),
    ] = None,
) -> None:
    """Start a new cycle with a fresh pair; the current cycle is archived."""
    config = CONFIGURATION_REPO.get_config()
    new_lens_type = parse_lens_type(
        lens_type if lens_type is not None else config["default_lens_type"]
    )
    new_start_date = parse_date(start_date)

    tracker = get_tracker(ctx)
    tracker.start_new_cycle(new_lens_type, new_start_date)
    exit_on_error(tracker)
    dashboard_view(tracker)


def reset(
    ctx: typer.Context,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="skip confirmation")
    ] = False,
) -> None:
    """Reset the cycle to today; the current cycle is archived."""
    tracker = get_tracker(ctx)
    if tracker.has_active_cycle and not yes:
        typer.confirm("Archive the current cycle and start over today?", abort=True)

    tracker.reset_cycle()
    exit_on_error(tracker)
    dashboard_view(tracker)


def change_type(
    ctx: typer.Context,
    lens_type: Annotated[str, typer.Argument(help=", ".join(LensType.values()))],
) -> None:
    """Switch lens type; this starts a new cycle today."""
    new_lens_type = parse_lens_type(lens_type)
    tracker = get_tracker(ctx)
    tracker.change_lens_type(new_lens_type)
    exit_on_error(tracker)
    dashboard_view(tracker)


def change_start_date(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="YYYY-MM-DD, today, yesterday or -N")],
) -> None:
    """Correct the start date of the current cycle without touching wear history."""
    new_start_date = parse_required_date(date)
    tracker = get_tracker(ctx)
    tracker.update_start_date(new_start_date)
    exit_on_error(tracker)
    dashboard_view(tracker)


def history(ctx: typer.Context) -> None:
    """List archived cycles."""
    tracker = get_tracker(ctx)
    history_view(tracker.load_previous_cycles(), tracker.current_cycle)
