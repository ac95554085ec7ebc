# SPDX-License-Identifier: MIT

import json
from typing import Any, cast

from lenstrack import time
from lenstrack.model.cycle_history import CycleHistory
from lenstrack.model.entity_id import is_cycle_id
from lenstrack.model.lens_cycle import LensCycle
from lenstrack.model.lens_type import LensType
from lenstrack.repository.error import DecodingFailedError, EncodingFailedError


def convert_cycle_for_serialization(cycle: LensCycle) -> dict[str, Any]:
    return {
        "id": cycle.id,
        "startDate": time.date_to_iso_str(cycle.start_date),
        "lensType": cycle.lens_type.value,
        "wearDates": [time.date_to_iso_str(date) for date in cycle.wear_dates],
    }


def convert_cycle_for_deserialization(raw_cycle: Any) -> LensCycle:
    if not isinstance(raw_cycle, dict):
        raise DecodingFailedError(f"expected a cycle object, got {type(raw_cycle).__name__}")
    raw_cycle = cast(dict[str, Any], raw_cycle)

    try:
        cycle_id = raw_cycle["id"]
        raw_wear_dates = raw_cycle["wearDates"]
        if not is_cycle_id(cycle_id):
            raise DecodingFailedError(f"invalid cycle id: {cycle_id!r}")
        if not isinstance(raw_wear_dates, list):
            raise DecodingFailedError("wearDates must be a list")
        return LensCycle(
            id=cycle_id,
            start_date=time.date_from_str(raw_cycle["startDate"]),
            lens_type=LensType(raw_cycle["lensType"]),
            wear_dates=tuple(time.date_from_str(date) for date in raw_wear_dates),
        )
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        raise DecodingFailedError(f"malformed cycle: {e}") from e


def convert_history_for_serialization(history: CycleHistory) -> dict[str, Any]:
    current_cycle = history.current_cycle
    return {
        "currentCycle": (
            convert_cycle_for_serialization(current_cycle)
            if current_cycle is not None
            else None
        ),
        "previousCycles": [
            convert_cycle_for_serialization(cycle) for cycle in history.previous_cycles
        ],
    }


def convert_history_for_deserialization(raw_history: Any) -> CycleHistory:
    if not isinstance(raw_history, dict):
        raise DecodingFailedError(
            f"expected a history object, got {type(raw_history).__name__}"
        )
    if "previousCycles" not in raw_history:
        raise DecodingFailedError("missing previousCycles")

    raw_current = raw_history.get("currentCycle")
    raw_previous = raw_history["previousCycles"]
    if not isinstance(raw_previous, list):
        raise DecodingFailedError("previousCycles must be a list")

    return CycleHistory(
        current_cycle=(
            convert_cycle_for_deserialization(raw_current)
            if raw_current is not None
            else None
        ),
        previous_cycles=tuple(
            convert_cycle_for_deserialization(cycle) for cycle in raw_previous
        ),
    )


def encode_history(history: CycleHistory) -> str:
    try:
        return json.dumps(convert_history_for_serialization(history), indent=2)
    except (TypeError, ValueError, AttributeError) as e:
        raise EncodingFailedError() from e


def __load_json(document: str) -> Any:
    try:
        return json.loads(document)
    except (ValueError, RecursionError) as e:
        raise DecodingFailedError(f"invalid JSON: {e}") from e


def decode_history(document: str) -> CycleHistory:
    return convert_history_for_deserialization(__load_json(document))


def decode_cycle(document: str) -> LensCycle:
    return convert_cycle_for_deserialization(__load_json(document))
