# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Optional

from lenstrack.model.lens_cycle import LensCycle

# Lower bounds on current_day / max_days. Colour and message selection both go
# through status_level, so these are the only copies.
CAUTION_THRESHOLD = 0.67
WARNING_THRESHOLD = 0.81


class StatusLevel(str, Enum):
    HEALTHY = "healthy"
    CAUTION = "caution"
    WARNING = "warning"
    DUE = "due"
    OVERDUE = "overdue"

    @property
    def is_critical(self) -> bool:
        return self in (StatusLevel.DUE, StatusLevel.OVERDUE)


def status_level(current_day: int, max_days: int) -> StatusLevel:
    if current_day > max_days:
        return StatusLevel.OVERDUE
    if current_day == max_days:
        return StatusLevel.DUE

    percentage = current_day / max_days
    if percentage < CAUTION_THRESHOLD:
        return StatusLevel.HEALTHY
    if percentage < WARNING_THRESHOLD:
        return StatusLevel.CAUTION
    return StatusLevel.WARNING


def status_level_for_cycle(cycle: LensCycle) -> StatusLevel:
    return status_level(cycle.current_day, cycle.lens_type.max_days)


def _days(count: int) -> str:
    return f"{count} {'day' if count == 1 else 'days'}"


def status_text(cycle: Optional[LensCycle]) -> str:
    if cycle is None:
        return "No active lens cycle"

    # daily lenses never sit between fresh and spent
    if cycle.lens_type.max_days == 1:
        return "Ready to wear" if cycle.current_day == 0 else "Replace with fresh lenses"

    remaining = cycle.days_remaining
    level = status_level_for_cycle(cycle)
    if level == StatusLevel.OVERDUE:
        return f"{_days(abs(remaining))} overdue - replace immediately"
    if level == StatusLevel.DUE:
        return "Replace today"
    if level == StatusLevel.HEALTHY:
        return f"Looking good! {_days(remaining)} until replacement"
    if level == StatusLevel.CAUTION:
        return f"Replace in {_days(remaining)}"
    return f"Replace soon - {_days(remaining)} remaining"
