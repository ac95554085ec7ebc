# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, cast

import pendulum


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def start_of_day(value: datetime.date) -> pendulum.Date:
    """Normalize a date or datetime to the local calendar day it falls on.

    Naive datetimes are read as local time, aware ones are converted to the
    local time zone first so that a late-evening UTC timestamp lands on the
    right day.
    """
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz="local").in_tz("local").date()
    return pendulum.Date(value.year, value.month, value.day)


def date_to_iso_str(date: datetime.date) -> str:
    return start_of_day(date).isoformat()


def date_from_str(date: str) -> pendulum.Date:
    """Parse 'YYYY-MM-DD' or a full ISO-8601 timestamp into a local calendar day."""
    parsed = pendulum.parse(date, tz="local")
    if not isinstance(parsed, datetime.date):
        raise ValueError(f"not a date: {date!r}")
    return start_of_day(cast(datetime.date, parsed))


def date_to_display_str(date: datetime.date) -> str:
    return pendulum.Date(date.year, date.month, date.day).format("MMM D, YYYY")


def date_to_display_str_optional(date: Optional[datetime.date]) -> str:
    if date is None:
        return ""
    return date_to_display_str(date)


def month_to_display_str(year: int, month: int) -> str:
    return pendulum.date(year, month, 1).format("MMMM YYYY")
