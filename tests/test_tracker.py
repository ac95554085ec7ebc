import datetime

import pendulum
import pytest

from lenstrack.color import LENS_CAUTION_COLOR, NO_CYCLE_COLOR
from lenstrack.model.lens_cycle import LensCycle
from lenstrack.model.lens_type import LensType
from lenstrack.model.status import StatusLevel
from lenstrack.repository.cycle import CycleRepository
from lenstrack.repository.error import SaveFailedError
from lenstrack.repository.store import MemoryStore
from lenstrack.service.tracker import LensTracker


class SwitchableStore(MemoryStore):
    def __init__(self) -> None:
        super().__init__("switchable")
        self.fail_writes = False

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("storage unavailable")
        super().set(key, value)


@pytest.fixture
def switchable_store() -> SwitchableStore:
    return SwitchableStore()


@pytest.fixture
def failing_tracker(switchable_store: SwitchableStore) -> LensTracker:
    return LensTracker(CycleRepository(switchable_store))


def test_empty_tracker_state(tracker: LensTracker) -> None:
    tracker.load_data()

    assert not tracker.has_active_cycle
    assert tracker.current_day == 0
    assert tracker.max_days == 14
    assert tracker.days_remaining == 0
    assert tracker.progress_percentage == 0.0
    assert not tracker.has_worn_today
    assert tracker.status_level is None
    assert tracker.status_text == "No active lens cycle"
    assert tracker.status_color == NO_CYCLE_COLOR
    assert not tracker.is_loading


def test_load_data_reads_current_cycle(
    tracker: LensTracker, repository: CycleRepository, biweekly_cycle: LensCycle
) -> None:
    repository.save_cycle(biweekly_cycle)

    tracker.load_data()

    assert tracker.current_cycle == biweekly_cycle
    assert tracker.current_day == 7
    assert tracker.has_worn_today


def test_log_today_wear_without_cycle_sets_message(tracker: LensTracker) -> None:
    tracker.log_today_wear()

    assert tracker.error_message == "No active lens cycle. Please start a new cycle first."


def test_log_today_wear_persists(
    tracker: LensTracker, repository: CycleRepository, today: pendulum.Date
) -> None:
    tracker.start_new_cycle(LensType.BIWEEKLY)

    tracker.log_today_wear()
    tracker.log_today_wear()

    assert tracker.current_cycle is not None
    assert tracker.current_cycle.wear_dates == (today,)
    assert repository.load_cycle() == tracker.current_cycle
    assert tracker.error_message is None


def test_add_and_remove_wear_entries(
    tracker: LensTracker, repository: CycleRepository
) -> None:
    tracker.start_new_cycle(LensType.MONTHLY, datetime.date(2024, 4, 1))

    tracker.add_wear_entry(datetime.date(2024, 4, 3))
    tracker.add_wear_entry(datetime.date(2024, 4, 2))
    tracker.remove_wear_entry(datetime.date(2024, 4, 3))

    cycle = repository.load_cycle()
    assert cycle is not None
    assert cycle.wear_dates == (pendulum.date(2024, 4, 2),)
    history = repository.load_history()
    assert history is not None and history.previous_cycles == ()


def test_edits_without_cycle_set_message(tracker: LensTracker) -> None:
    tracker.add_wear_entry(datetime.date(2024, 4, 3))
    assert tracker.error_message == "No active lens cycle found"

    tracker.remove_wear_entry(datetime.date(2024, 4, 3))
    assert tracker.error_message == "No active lens cycle found"

    tracker.update_start_date(datetime.date(2024, 4, 3))
    assert tracker.error_message == "No active lens cycle found"

    tracker.reset_cycle()
    assert tracker.error_message == "No active lens cycle to reset"


def test_reset_archives_and_keeps_lens_type(
    tracker: LensTracker,
    repository: CycleRepository,
    biweekly_cycle: LensCycle,
    today: pendulum.Date,
) -> None:
    repository.save_cycle(biweekly_cycle)
    tracker.load_data()

    tracker.reset_cycle()

    assert tracker.current_cycle is not None
    assert tracker.current_cycle.lens_type == LensType.BIWEEKLY
    assert tracker.current_cycle.start_date == today
    assert tracker.current_day == 0
    assert tracker.load_previous_cycles() == [biweekly_cycle]


def test_change_lens_type_archives(
    tracker: LensTracker, repository: CycleRepository, biweekly_cycle: LensCycle
) -> None:
    repository.save_cycle(biweekly_cycle)
    tracker.load_data()

    tracker.change_lens_type(LensType.DAILY)

    assert tracker.current_cycle is not None
    assert tracker.current_cycle.lens_type == LensType.DAILY
    assert tracker.max_days == 1
    assert tracker.load_previous_cycles() == [biweekly_cycle]


def test_update_start_date_keeps_history(
    tracker: LensTracker, repository: CycleRepository, biweekly_cycle: LensCycle
) -> None:
    repository.save_cycle(biweekly_cycle)
    tracker.load_data()

    tracker.update_start_date(datetime.date(2024, 1, 1))

    assert tracker.current_cycle is not None
    assert tracker.current_cycle.id == biweekly_cycle.id
    assert tracker.current_cycle.start_date == pendulum.date(2024, 1, 1)
    assert tracker.load_previous_cycles() == []


def test_derived_fields_for_caution_cycle(
    tracker: LensTracker, repository: CycleRepository, cycle_factory
) -> None:
    repository.save_cycle(cycle_factory(LensType.BIWEEKLY, 10))
    tracker.load_data()

    assert tracker.days_remaining == 4
    assert tracker.status_level == StatusLevel.CAUTION
    assert tracker.status_text == "Replace in 4 days"
    assert tracker.status_color == LENS_CAUTION_COLOR


def test_failed_write_leaves_state_unchanged(
    failing_tracker: LensTracker, switchable_store: SwitchableStore
) -> None:
    failing_tracker.start_new_cycle(LensType.BIWEEKLY)
    before = failing_tracker.current_cycle
    switchable_store.fail_writes = True

    failing_tracker.log_today_wear()

    assert failing_tracker.current_cycle == before
    assert failing_tracker.error_message == "Failed to save lens cycle to storage"
    assert not failing_tracker.is_loading


def test_failed_new_cycle_leaves_state_unchanged(
    failing_tracker: LensTracker, switchable_store: SwitchableStore
) -> None:
    failing_tracker.start_new_cycle(LensType.BIWEEKLY)
    before = failing_tracker.current_cycle
    switchable_store.fail_writes = True

    failing_tracker.change_lens_type(LensType.MONTHLY)

    assert failing_tracker.current_cycle == before
    assert failing_tracker.error_message == "Failed to save lens cycle to storage"

    switchable_store.fail_writes = False
    failing_tracker.change_lens_type(LensType.MONTHLY)
    assert failing_tracker.error_message is None


def test_handle_error_messages(tracker: LensTracker) -> None:
    tracker.handle_error(SaveFailedError())
    assert tracker.error_message == "Failed to save lens cycle to storage"

    tracker.handle_error(RuntimeError("boom"))
    assert tracker.error_message == "An unexpected error occurred: boom"

    tracker.clear_error()
    assert tracker.error_message is None


class BrokenStore(MemoryStore):
    def set(self, key: str, value: str) -> None:
        raise RuntimeError("store crashed")


def test_unexpected_failure_is_reported(
    biweekly_cycle: LensCycle, today: pendulum.Date
) -> None:
    tracker = LensTracker(CycleRepository(BrokenStore("broken")))

    tracker.start_new_cycle(LensType.DAILY)
    assert tracker.current_cycle is None
    assert tracker.error_message == "An unexpected error occurred: store crashed"
    assert not tracker.is_loading

    tracker.current_cycle = biweekly_cycle
    tracker.add_wear_entry(today.add(days=1))
    assert tracker.current_cycle == biweekly_cycle
    assert tracker.error_message == "An unexpected error occurred: store crashed"
