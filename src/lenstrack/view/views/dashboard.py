# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.padding import Padding
from rich.progress_bar import ProgressBar
from rich.table import Table

from lenstrack.color import LENS_CRITICAL_COLOR
from lenstrack.service.tracker import LensTracker
from lenstrack.time import date_to_display_str
from lenstrack.view.views.header import header


def dashboard_view(tracker: LensTracker) -> None:
    """Progress toward replacement for the active cycle, or onboarding text."""
    header("status")
    console = Console()

    cycle = tracker.current_cycle
    if cycle is None:
        console.print(
            Padding(
                f"[{tracker.status_color}]{tracker.status_text}[/{tracker.status_color}]",
                (1, 1, 0, 1),
            )
        )
        console.print(
            Padding(
                "Start tracking with: lenstrack start",
                (0, 1, 1, 1),
            )
        )
        return

    color = tracker.status_color
    console.print(
        Padding(
            f"[bold {color}]Day {tracker.current_day}[/bold {color}] of {tracker.max_days}"
            f"  [dim]{cycle.lens_type.display_name}[/dim]",
            (1, 1, 0, 1),
        )
    )
    console.print(
        Padding(
            ProgressBar(
                total=1.0,
                completed=tracker.progress_percentage,
                width=40,
                complete_style=color,
                finished_style=color,
            ),
            (0, 1),
        )
    )
    console.print(Padding(f"[{color}]{tracker.status_text}[/{color}]", (0, 1, 1, 1)))

    details_table = Table(box=box.SIMPLE, show_header=False)
    details_table.add_column("property")
    details_table.add_column("value")
    details_table.add_row("lens type", cycle.lens_type.display_name)
    details_table.add_row("schedule", cycle.lens_type.schedule_description)
    details_table.add_row("started", date_to_display_str(cycle.start_date))
    remaining_color = LENS_CRITICAL_COLOR if cycle.is_overdue else color
    details_table.add_row(
        "days remaining",
        f"[{remaining_color}]{tracker.days_remaining}[/{remaining_color}]",
    )
    details_table.add_row("worn today", "✓" if tracker.has_worn_today else "✗")

    console.print(details_table)
