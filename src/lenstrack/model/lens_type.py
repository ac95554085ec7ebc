# SPDX-License-Identifier: MIT

from enum import Enum


class LensType(str, Enum):
    """Lens replacement schedules.

    Daily disposables are replaced after a single day of wear, biweekly lenses
    after 14 and monthly lenses after 30.
    """

    DAILY = "daily"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"

    @property
    def max_days(self) -> int:
        return _MAX_DAYS[self]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def schedule_description(self) -> str:
        if self.max_days == 1:
            return "Replace every day"
        return f"Replace every {self.max_days} days"

    @classmethod
    def values(cls) -> list[str]:
        return [lens_type.value for lens_type in cls]


_MAX_DAYS: dict[LensType, int] = {
    LensType.DAILY: 1,
    LensType.BIWEEKLY: 14,
    LensType.MONTHLY: 30,
}
