# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias, TypedDict

import pendulum

from lenstrack.configuration import WeekStart
from lenstrack.model.lens_cycle import LensCycle
from lenstrack.time import today_local

WEEKDAY_HEADERS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


class CalendarDay(TypedDict):
    date: pendulum.Date
    is_worn: bool
    cycle_day: Optional[int]
    is_today: bool


CalendarWeek: TypeAlias = list[Optional[CalendarDay]]


def weekday_headers(week_start: WeekStart = "sunday") -> list[str]:
    if week_start == "monday":
        return list(WEEKDAY_HEADERS)
    return WEEKDAY_HEADERS[-1:] + WEEKDAY_HEADERS[:-1]


def days_in_month(year: int, month: int) -> list[pendulum.Date]:
    first_day = pendulum.date(year, month, 1)
    return [first_day.add(days=offset) for offset in range(first_day.days_in_month)]


def leading_blank_days(first_day: pendulum.Date, week_start: WeekStart) -> int:
    # date.weekday(): Monday == 0 ... Sunday == 6
    if week_start == "monday":
        return first_day.weekday()
    return (first_day.weekday() + 1) % 7


def calendar_month(
    cycle: Optional[LensCycle],
    year: int,
    month: int,
    week_start: WeekStart = "sunday",
) -> list[CalendarWeek]:
    """
    Lay out a month as weeks of seven cells, padded with None.

    Each day carries whether the current cycle has it as a wear date and, if
    so, which wear day of the cycle it was.
    """
    today = today_local()
    days = days_in_month(year, month)

    cells: list[Optional[CalendarDay]] = [None] * leading_blank_days(
        days[0], week_start
    )
    for date in days:
        cells.append(
            {
                "date": date,
                "is_worn": cycle is not None and cycle.has_worn_on(date),
                "cycle_day": cycle.cycle_day_for(date) if cycle is not None else None,
                "is_today": date == today,
            }
        )

    trailing = (-len(cells)) % 7
    cells.extend([None] * trailing)

    return [cells[index : index + 7] for index in range(0, len(cells), 7)]


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    shifted = pendulum.date(year, month, 1).add(months=months)
    return shifted.year, shifted.month
