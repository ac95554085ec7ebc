# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from lenstrack.color import LENS_PRIMARY_COLOR
from lenstrack.configuration import WeekStart
from lenstrack.model.lens_cycle import LensCycle
from lenstrack.service.calendar import CalendarDay, calendar_month, weekday_headers
from lenstrack.time import date_to_display_str, month_to_display_str
from lenstrack.view.views.header import header


def _format_day(day: CalendarDay, color: str) -> str:
    label = f"{day['date'].day:>2}"
    if day["is_worn"]:
        label = f"[bold {color}]{label}●[/bold {color}]"
    else:
        label = f"{label} "
    if day["is_today"]:
        label = f"[underline]{label}[/underline]"
    return label


def calendar_view(
    cycle: LensCycle | None,
    year: int,
    month: int,
    week_start: WeekStart,
    color: str,
    recent_limit: int = 10,
) -> None:
    header("calendar")

    calendar_table = Table(
        title=month_to_display_str(year, month),
        box=box.SIMPLE,
    )
    for weekday in weekday_headers(week_start):
        calendar_table.add_column(weekday, justify="right")

    for week in calendar_month(cycle, year, month, week_start):
        calendar_table.add_row(
            *[_format_day(day, color) if day is not None else "" for day in week]
        )

    console = Console()
    console.print(calendar_table)

    if cycle is None:
        console.print(" No active lens cycle")
        return

    recent_table = Table(title="recent entries", box=box.SIMPLE)
    recent_table.add_column("date")
    recent_table.add_column("cycle day", justify="right")
    for date in cycle.recent_wear_dates(recent_limit):
        recent_table.add_row(
            date_to_display_str(date),
            f"[{LENS_PRIMARY_COLOR}]{cycle.cycle_day_for(date)}[/{LENS_PRIMARY_COLOR}]",
        )
    console.print(recent_table)
