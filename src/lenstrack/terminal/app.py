# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer

from lenstrack import state as app_state
from lenstrack.initialize import build_cycle_repository
from lenstrack.service.tracker import LensTracker
from lenstrack.terminal import configuration, cycle
from lenstrack.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="lenstrack - Contact lens wear tracking in the CLI",
    no_args_is_help=True,
)
app.command(name="status, st")(cycle.status)
app.command(name="log, l")(cycle.log)
app.command(name="add, a", no_args_is_help=True)(cycle.add)
app.command(name="remove, rm", no_args_is_help=True)(cycle.remove)
app.command(name="calendar, cal")(cycle.calendar)
app.command(name="start, s")(cycle.start)
app.command(name="reset")(cycle.reset)
app.command(name="type, t", no_args_is_help=True)(cycle.change_type)
app.command(name="start-date, sd", no_args_is_help=True)(cycle.change_start_date)
app.command(name="history, h")(cycle.history)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    ctx: typer.Context,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Log storage activity at debug level",
        ),
    ] = False,
) -> None:
    """
    lenstrack - Contact lens wear tracking in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        app_state.set_show_header(False)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if ctx.obj is None:
        ctx.obj = LensTracker(build_cycle_repository())


def run() -> None:
    app()
