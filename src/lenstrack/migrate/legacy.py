# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional

from lenstrack.model.cycle_history import CycleHistory
from lenstrack.repository.codec import decode_cycle
from lenstrack.repository.error import DecodingFailedError, PersistenceError
from lenstrack.repository.store import KeyValueStore, read_record

logger = logging.getLogger(__name__)


def migrate_legacy_cycle(
    store: KeyValueStore,
    legacy_key: str,
    save_history: Callable[[CycleHistory], None],
) -> Optional[CycleHistory]:
    """Wrap a bare single-cycle record into a history with an empty archive.

    Runs whenever the current-format record is missing or unreadable. The
    legacy key is removed once the wrapped history has been written, so a
    second load finds the new record and never gets here.
    """
    document = read_record(store, legacy_key)
    if document is None:
        return None

    try:
        cycle = decode_cycle(document)
    except DecodingFailedError as e:
        logger.warning("failed to migrate legacy cycle data: %s", e)
        return None

    history = CycleHistory(current_cycle=cycle, previous_cycles=())

    try:
        save_history(history)
    except PersistenceError as e:
        # keep the legacy record so the next load can retry
        logger.warning("failed to save migrated cycle history: %s", e)
        return history

    try:
        store.remove(legacy_key)
    except OSError as e:
        logger.warning("could not remove legacy cycle record: %s", e)
    logger.info("migrated legacy cycle %s to the history format", cycle.id)
    return history
