# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

CycleId: TypeAlias = str


def generate_cycle_id() -> CycleId:
    return str(uuid.uuid4())


def is_cycle_id(value: object) -> bool:
    if not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True
