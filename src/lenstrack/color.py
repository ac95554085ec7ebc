# SPDX-License-Identifier: MIT

from typing import Optional

from lenstrack.model.lens_cycle import LensCycle
from lenstrack.model.status import StatusLevel, status_level, status_level_for_cycle

# Rich colour names for the status buckets
LENS_HEALTHY_COLOR = "green"
LENS_CAUTION_COLOR = "yellow"
LENS_WARNING_COLOR = "dark_orange"
LENS_CRITICAL_COLOR = "red"
LENS_PRIMARY_COLOR = "blue"
NO_CYCLE_COLOR = "grey50"

STATUS_COLORS: dict[StatusLevel, str] = {
    StatusLevel.HEALTHY: LENS_HEALTHY_COLOR,
    StatusLevel.CAUTION: LENS_CAUTION_COLOR,
    StatusLevel.WARNING: LENS_WARNING_COLOR,
    StatusLevel.DUE: LENS_CRITICAL_COLOR,
    StatusLevel.OVERDUE: LENS_CRITICAL_COLOR,
}


def color_for_day(day: int, max_days: int) -> str:
    return STATUS_COLORS[status_level(day, max_days)]


def color_for_cycle(cycle: Optional[LensCycle]) -> str:
    if cycle is None:
        return NO_CYCLE_COLOR
    return STATUS_COLORS[status_level_for_cycle(cycle)]
