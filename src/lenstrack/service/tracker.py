# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Optional

from lenstrack.color import color_for_cycle
from lenstrack.model.lens_cycle import LensCycle
from lenstrack.model.lens_type import LensType
from lenstrack.model.status import StatusLevel, status_level_for_cycle, status_text
from lenstrack.repository.cycle import CycleRepository
from lenstrack.repository.error import PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_MAX_DAYS = LensType.BIWEEKLY.max_days


class LensTracker:
    """State holder between the terminal front end and the cycle repository.

    Every mutating operation persists first and only then replaces
    current_cycle, so a failed write leaves the last good state in place and
    reports the failure through error_message.
    """

    def __init__(self, repository: CycleRepository) -> None:
        self.repository = repository
        self.current_cycle: Optional[LensCycle] = None
        self.is_loading = False
        self.error_message: Optional[str] = None

    # ─────────────────────────────────────────────────────────────
    # Derived state
    # ─────────────────────────────────────────────────────────────

    @property
    def has_active_cycle(self) -> bool:
        return self.current_cycle is not None

    @property
    def current_day(self) -> int:
        return self.current_cycle.current_day if self.current_cycle else 0

    @property
    def max_days(self) -> int:
        if self.current_cycle is None:
            return DEFAULT_MAX_DAYS
        return self.current_cycle.lens_type.max_days

    @property
    def days_remaining(self) -> int:
        return self.current_cycle.days_remaining if self.current_cycle else 0

    @property
    def progress_percentage(self) -> float:
        return self.current_cycle.progress_percentage if self.current_cycle else 0.0

    @property
    def has_worn_today(self) -> bool:
        return self.current_cycle.has_worn_today if self.current_cycle else False

    @property
    def status_level(self) -> Optional[StatusLevel]:
        if self.current_cycle is None:
            return None
        return status_level_for_cycle(self.current_cycle)

    @property
    def status_text(self) -> str:
        return status_text(self.current_cycle)

    @property
    def status_color(self) -> str:
        return color_for_cycle(self.current_cycle)

    # ─────────────────────────────────────────────────────────────
    # Loading
    # ─────────────────────────────────────────────────────────────

    def load_data(self) -> None:
        self.is_loading = True
        self.error_message = None

        self.current_cycle = self.repository.load_cycle()

        self.is_loading = False

    def load_previous_cycles(self) -> list[LensCycle]:
        history = self.repository.load_history()
        if history is None:
            return []
        return list(history.previous_cycles)

    # ─────────────────────────────────────────────────────────────
    # Wear tracking
    # ─────────────────────────────────────────────────────────────

    def log_today_wear(self) -> None:
        if self.current_cycle is None:
            self.error_message = "No active lens cycle. Please start a new cycle first."
            return

        if self.current_cycle.has_worn_today:
            return

        self.__update_current_cycle(self.current_cycle.add_wear_entry())

    def add_wear_entry(self, date: datetime.date) -> None:
        if self.current_cycle is None:
            self.error_message = "No active lens cycle found"
            return

        self.__update_current_cycle(self.current_cycle.add_wear_entry(date))

    def remove_wear_entry(self, date: datetime.date) -> None:
        if self.current_cycle is None:
            self.error_message = "No active lens cycle found"
            return

        self.__update_current_cycle(self.current_cycle.remove_wear_entry(date))

    def update_start_date(self, new_date: datetime.date) -> None:
        if self.current_cycle is None:
            self.error_message = "No active lens cycle found"
            return

        self.__update_current_cycle(self.current_cycle.update_start_date(new_date))

    # ─────────────────────────────────────────────────────────────
    # Cycle management
    # ─────────────────────────────────────────────────────────────

    def start_new_cycle(
        self,
        lens_type: LensType,
        start_date: Optional[datetime.date] = None,
    ) -> None:
        self.__create_new_cycle(lens_type, start_date)

    def reset_cycle(self) -> None:
        if self.current_cycle is None:
            self.error_message = "No active lens cycle to reset"
            return

        self.__create_new_cycle(self.current_cycle.lens_type, None)

    def change_lens_type(self, lens_type: LensType) -> None:
        # a different lens type always means a fresh pair
        self.__create_new_cycle(lens_type, None)

    # ─────────────────────────────────────────────────────────────
    # Error handling
    # ─────────────────────────────────────────────────────────────

    def handle_error(self, error: Exception) -> None:
        if isinstance(error, PersistenceError):
            self.error_message = str(error)
        else:
            self.error_message = f"An unexpected error occurred: {error}"

        logger.error("lens tracker error: %r", error)

    def clear_error(self) -> None:
        self.error_message = None

    def __update_current_cycle(self, updated_cycle: LensCycle) -> None:
        self.is_loading = True
        self.error_message = None

        try:
            self.repository.update_cycle(updated_cycle)
            self.current_cycle = updated_cycle
        except Exception as e:
            self.handle_error(e)
        finally:
            self.is_loading = False

    def __create_new_cycle(
        self,
        lens_type: LensType,
        start_date: Optional[datetime.date],
    ) -> None:
        self.is_loading = True
        self.error_message = None

        try:
            self.current_cycle = self.repository.create_new_cycle(
                lens_type, start_date
            )
        except Exception as e:
            self.handle_error(e)
        finally:
            self.is_loading = False
