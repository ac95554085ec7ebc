# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from lenstrack.model.lens_type import LensType
from lenstrack.time import date_from_str, today_local


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = date_param.strip().lower()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except (ValueError, OverflowError) as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Relative days, e.g. "-1" for yesterday
    if re.match(r"^[-+]?\d+$", date):
        try:
            return today_local().add(days=int(date))
        except (ValueError, OverflowError):
            raise typer.BadParameter(f"Day offset out of range: {date_param}")

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)

    raise typer.BadParameter(
        "Incorrect date format, use YYYY-MM-DD, today, yesterday or a day offset"
    )


def parse_required_date(date_param: str) -> pendulum.Date:
    date = parse_date(date_param)
    if date is None:
        raise typer.BadParameter("A date is required")
    return date


def parse_lens_type(lens_type_param: str) -> LensType:
    try:
        return LensType(lens_type_param.strip().lower())
    except ValueError:
        raise typer.BadParameter(
            f"Invalid lens type: {lens_type_param}. Valid options: {', '.join(LensType.values())}"
        )


def parse_month(month_param: Optional[str]) -> tuple[int, int]:
    if month_param is None:
        today = today_local()
        return today.year, today.month

    month_match = re.match(r"^(\d{4})-(\d{1,2})$", month_param.strip())
    if not month_match:
        raise typer.BadParameter("Incorrect month format, use YYYY-MM")

    year = int(month_match.group(1))
    month = int(month_match.group(2))
    if month < 1 or month > 12:
        raise typer.BadParameter(f"Month must be between 1 and 12, got {month}")
    try:
        pendulum.date(year, month, 1)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid month: {e}")
    return year, month
