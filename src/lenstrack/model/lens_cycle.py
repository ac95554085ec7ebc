# SPDX-License-Identifier: MIT

import datetime
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

import pendulum

from lenstrack.model.entity_id import CycleId, generate_cycle_id
from lenstrack.model.lens_type import LensType
from lenstrack.time import start_of_day, today_local


def _normalize_wear_dates(
    wear_dates: Iterable[datetime.date],
) -> tuple[pendulum.Date, ...]:
    return tuple(sorted({start_of_day(date) for date in wear_dates}))


@dataclass(frozen=True, kw_only=True)
class LensCycle:
    """One continuous period of wearing the same pair of lenses.

    Instances are immutable: every edit returns a new cycle. Dates are kept as
    local calendar days, and wear dates are always sorted and unique, whatever
    was passed in.
    """

    id: CycleId = field(default_factory=generate_cycle_id)
    start_date: pendulum.Date = field(default_factory=today_local)
    lens_type: LensType
    wear_dates: tuple[pendulum.Date, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", start_of_day(self.start_date))
        object.__setattr__(self, "lens_type", LensType(self.lens_type))
        object.__setattr__(
            self, "wear_dates", _normalize_wear_dates(self.wear_dates)
        )

    @property
    def current_day(self) -> int:
        # counts days actually worn, not calendar days since start_date
        return len(self.wear_dates)

    @property
    def days_remaining(self) -> int:
        return self.lens_type.max_days - self.current_day

    @property
    def is_overdue(self) -> bool:
        return self.current_day > self.lens_type.max_days

    @property
    def has_worn_today(self) -> bool:
        return self.has_worn_on(today_local())

    @property
    def progress_percentage(self) -> float:
        return min(self.current_day / self.lens_type.max_days, 1.0)

    def has_worn_on(self, date: datetime.date) -> bool:
        return start_of_day(date) in self.wear_dates

    def cycle_day_for(self, date: datetime.date) -> Optional[int]:
        """1-based position of the date among the wear dates, None if not worn."""
        normalized_date = start_of_day(date)
        if normalized_date not in self.wear_dates:
            return None
        return self.wear_dates.index(normalized_date) + 1

    def recent_wear_dates(self, limit: int = 10) -> list[pendulum.Date]:
        return list(reversed(self.wear_dates))[:limit]

    def add_wear_entry(self, date: Optional[datetime.date] = None) -> "LensCycle":
        normalized_date = today_local() if date is None else start_of_day(date)
        if normalized_date in self.wear_dates:
            return self
        return replace(self, wear_dates=self.wear_dates + (normalized_date,))

    def remove_wear_entry(self, date: datetime.date) -> "LensCycle":
        normalized_date = start_of_day(date)
        if normalized_date not in self.wear_dates:
            return self
        return replace(
            self,
            wear_dates=tuple(d for d in self.wear_dates if d != normalized_date),
        )

    def reset(self) -> "LensCycle":
        """Start over with the same lens type; archiving the old cycle is up to the caller."""
        return LensCycle(lens_type=self.lens_type)

    def update_start_date(self, new_date: datetime.date) -> "LensCycle":
        return replace(self, start_date=new_date)
