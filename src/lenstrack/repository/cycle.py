# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Optional

from lenstrack.migrate.legacy import migrate_legacy_cycle
from lenstrack.model.cycle_history import CycleHistory
from lenstrack.model.lens_cycle import LensCycle
from lenstrack.model.lens_type import LensType
from lenstrack.repository.codec import decode_history, encode_history
from lenstrack.repository.error import DecodingFailedError, SaveFailedError
from lenstrack.repository.store import KeyValueStore, MemoryStore, read_record
from lenstrack.time import today_local

logger = logging.getLogger(__name__)

CYCLE_HISTORY_KEY = "cycleHistory"
LEGACY_CURRENT_CYCLE_KEY = "currentLensCycle"


class CycleRepository:
    """Sole owner of the persisted cycle history.

    The whole history is one document under CYCLE_HISTORY_KEY; every write
    replaces it. Reads never raise: an unreadable document falls back to the
    legacy record and then to "no data".
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    @classmethod
    def make_test_instance(cls, namespace: str = "test") -> "CycleRepository":
        return cls(MemoryStore(namespace))

    def load_history(self) -> Optional[CycleHistory]:
        document = read_record(self.store, CYCLE_HISTORY_KEY)
        if document is None:
            return self.__migrate_legacy_data()

        try:
            history = decode_history(document)
        except DecodingFailedError as e:
            logger.warning("failed to decode cycle history: %s", e)
            return self.__migrate_legacy_data()

        logger.debug(
            "loaded cycle history with %d archived cycles",
            len(history.previous_cycles),
        )
        return history

    def load_cycle(self) -> Optional[LensCycle]:
        history = self.load_history()
        if history is None:
            return None
        return history.current_cycle

    def save_history(self, history: CycleHistory) -> None:
        document = encode_history(history)
        try:
            self.store.set(CYCLE_HISTORY_KEY, document)
        except OSError as e:
            raise SaveFailedError() from e
        logger.debug("saved cycle history")

    def save_cycle(self, cycle: LensCycle) -> None:
        history = self.load_history() or CycleHistory()
        self.save_history(history.with_current(cycle))

    def update_cycle(self, cycle: LensCycle) -> None:
        self.save_cycle(cycle)

    def create_new_cycle(
        self,
        lens_type: LensType,
        start_date: Optional[datetime.date] = None,
    ) -> LensCycle:
        cycle = LensCycle(
            start_date=start_date if start_date is not None else today_local(),
            lens_type=lens_type,
        )

        history = self.load_history() or CycleHistory()
        self.save_history(history.archive_and_start_new(cycle))
        logger.debug(
            "started %s cycle %s, %d cycles archived",
            lens_type.value,
            cycle.id,
            len(history.previous_cycles) + (history.current_cycle is not None),
        )
        return cycle

    def delete_cycle(self) -> None:
        history = self.load_history() or CycleHistory()
        if history.current_cycle is None:
            return
        self.save_history(history.archive_current())

    def has_cycle(self) -> bool:
        return self.load_cycle() is not None

    def reset_all_data(self) -> None:
        self.store.remove(CYCLE_HISTORY_KEY)
        self.store.remove(LEGACY_CURRENT_CYCLE_KEY)

    def __migrate_legacy_data(self) -> Optional[CycleHistory]:
        return migrate_legacy_cycle(
            self.store,
            LEGACY_CURRENT_CYCLE_KEY,
            self.save_history,
        )
