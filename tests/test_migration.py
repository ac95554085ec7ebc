import json

import pendulum
import pytest

from lenstrack.model.cycle_history import CycleHistory
from lenstrack.model.lens_cycle import LensCycle
from lenstrack.model.lens_type import LensType
from lenstrack.repository.cycle import (
    CYCLE_HISTORY_KEY,
    LEGACY_CURRENT_CYCLE_KEY,
    CycleRepository,
)
from lenstrack.repository.store import MemoryStore

LEGACY_ID = "9f0c1a52-8f5e-4b8e-9a76-2d0f4b1c3e77"

LEGACY_RECORD = {
    "id": LEGACY_ID,
    "startDate": "2024-01-01",
    "lensType": "biweekly",
    "wearDates": ["2024-01-01"],
}


class FlakyStore(MemoryStore):
    """Fails to write the history record until told otherwise."""

    def __init__(self) -> None:
        super().__init__("flaky")
        self.fail_writes = True

    def set(self, key: str, value: str) -> None:
        if self.fail_writes and key == CYCLE_HISTORY_KEY:
            raise OSError("read-only")
        super().set(key, value)


def expected_legacy_cycle() -> LensCycle:
    return LensCycle(
        id=LEGACY_ID,
        start_date=pendulum.date(2024, 1, 1),
        lens_type=LensType.BIWEEKLY,
        wear_dates=(pendulum.date(2024, 1, 1),),
    )


def test_legacy_record_is_wrapped_and_removed(
    repository: CycleRepository, store: MemoryStore
) -> None:
    store.set(LEGACY_CURRENT_CYCLE_KEY, json.dumps(LEGACY_RECORD))

    history = repository.load_history()

    assert history == CycleHistory(
        current_cycle=expected_legacy_cycle(), previous_cycles=()
    )
    assert store.get(LEGACY_CURRENT_CYCLE_KEY) is None
    assert store.get(CYCLE_HISTORY_KEY) is not None


def test_second_load_reads_migrated_record(
    repository: CycleRepository, store: MemoryStore
) -> None:
    store.set(LEGACY_CURRENT_CYCLE_KEY, json.dumps(LEGACY_RECORD))
    first = repository.load_history()
    migrated_document = store.get(CYCLE_HISTORY_KEY)

    second = repository.load_history()

    assert second == first
    assert store.get(CYCLE_HISTORY_KEY) == migrated_document


def test_corrupt_current_record_falls_back_to_legacy(
    repository: CycleRepository, store: MemoryStore
) -> None:
    store.set(CYCLE_HISTORY_KEY, "{broken")
    store.set(LEGACY_CURRENT_CYCLE_KEY, json.dumps(LEGACY_RECORD))

    history = repository.load_history()

    assert history is not None
    assert history.current_cycle == expected_legacy_cycle()
    assert store.get(LEGACY_CURRENT_CYCLE_KEY) is None


def test_current_record_wins_over_legacy(
    repository: CycleRepository, store: MemoryStore
) -> None:
    cycle = repository.create_new_cycle(LensType.MONTHLY)
    store.set(LEGACY_CURRENT_CYCLE_KEY, json.dumps(LEGACY_RECORD))

    assert repository.load_cycle() == cycle
    assert store.get(LEGACY_CURRENT_CYCLE_KEY) is not None


def test_corrupt_legacy_record_means_no_data(
    repository: CycleRepository, store: MemoryStore
) -> None:
    store.set(LEGACY_CURRENT_CYCLE_KEY, '{"id": 42}')

    assert repository.load_history() is None


def test_legacy_timestamps_are_read_as_calendar_days(
    repository: CycleRepository, store: MemoryStore
) -> None:
    local_midnight = pendulum.datetime(2024, 1, 5, tz="local")
    record = dict(
        LEGACY_RECORD,
        startDate=local_midnight.in_tz("UTC").isoformat(),
        wearDates=[local_midnight.add(hours=20).in_tz("UTC").isoformat()],
    )
    store.set(LEGACY_CURRENT_CYCLE_KEY, json.dumps(record))

    cycle = repository.load_cycle()

    assert cycle is not None
    assert cycle.start_date == pendulum.date(2024, 1, 5)
    assert cycle.wear_dates == (pendulum.date(2024, 1, 5),)


def test_failed_migration_write_keeps_legacy_record() -> None:
    store = FlakyStore()
    store.set(LEGACY_CURRENT_CYCLE_KEY, json.dumps(LEGACY_RECORD))
    repository = CycleRepository(store)

    history = repository.load_history()

    assert history is not None
    assert history.current_cycle == expected_legacy_cycle()
    assert store.get(LEGACY_CURRENT_CYCLE_KEY) is not None

    store.fail_writes = False
    assert repository.load_history() == history
    assert store.get(LEGACY_CURRENT_CYCLE_KEY) is None


@pytest.mark.parametrize("lens_type", list(LensType))
def test_migrated_cycle_keeps_archiving_on_new_cycle(
    repository: CycleRepository, store: MemoryStore, lens_type: LensType
) -> None:
    store.set(LEGACY_CURRENT_CYCLE_KEY, json.dumps(LEGACY_RECORD))

    new_cycle = repository.create_new_cycle(lens_type)

    history = repository.load_history()
    assert history is not None
    assert history.previous_cycles == (expected_legacy_cycle(),)
    assert history.current_cycle == new_cycle
