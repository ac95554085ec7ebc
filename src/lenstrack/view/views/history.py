# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from lenstrack.color import color_for_cycle
from lenstrack.model.lens_cycle import LensCycle
from lenstrack.time import date_to_display_str_optional
from lenstrack.view.views.header import header


def history_view(
    previous_cycles: list[LensCycle],
    current_cycle: LensCycle | None,
) -> None:
    """The active cycle first, then archived cycles newest first."""
    header("history")

    history_table = Table(box=box.SIMPLE)
    history_table.add_column("#", justify="right")
    history_table.add_column("lens type")
    history_table.add_column("started")
    history_table.add_column("first worn")
    history_table.add_column("last worn")
    history_table.add_column("days worn", justify="right")
    history_table.add_column("state")

    rows: list[tuple[int, LensCycle, str]] = []
    if current_cycle is not None:
        rows.append((len(previous_cycles) + 1, current_cycle, "current"))
    for index, cycle in reversed(list(enumerate(previous_cycles, start=1))):
        rows.append((index, cycle, "archived"))

    for number, cycle, state in rows:
        color = color_for_cycle(cycle)
        first_worn = cycle.wear_dates[0] if cycle.wear_dates else None
        last_worn = cycle.wear_dates[-1] if cycle.wear_dates else None
        history_table.add_row(
            str(number),
            cycle.lens_type.display_name,
            date_to_display_str_optional(cycle.start_date),
            date_to_display_str_optional(first_worn),
            date_to_display_str_optional(last_worn),
            f"[{color}]{cycle.current_day}/{cycle.lens_type.max_days}[/{color}]",
            state,
        )

    console = Console()
    console.print(history_table)
