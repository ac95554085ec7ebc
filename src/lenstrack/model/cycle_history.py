# SPDX-License-Identifier: MIT

from dataclasses import dataclass, replace
from typing import Optional

from lenstrack.model.lens_cycle import LensCycle


@dataclass(frozen=True)
class CycleHistory:
    """The persisted aggregate: the active cycle plus every archived one.

    previous_cycles is oldest first and only ever grows; a replaced or deleted
    cycle is archived rather than dropped.
    """

    current_cycle: Optional[LensCycle] = None
    previous_cycles: tuple[LensCycle, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "previous_cycles", tuple(self.previous_cycles))

    @property
    def all_cycles(self) -> list[LensCycle]:
        cycles = list(self.previous_cycles)
        if self.current_cycle is not None:
            cycles.append(self.current_cycle)
        return cycles

    def archive_and_start_new(self, new_cycle: LensCycle) -> "CycleHistory":
        return CycleHistory(
            current_cycle=new_cycle,
            previous_cycles=self.archive_current().previous_cycles,
        )

    def archive_current(self) -> "CycleHistory":
        if self.current_cycle is None:
            return self
        return CycleHistory(
            current_cycle=None,
            previous_cycles=self.previous_cycles + (self.current_cycle,),
        )

    def with_current(self, cycle: Optional[LensCycle]) -> "CycleHistory":
        """Replace the active cycle in place, without archiving it."""
        return replace(self, current_cycle=cycle)
