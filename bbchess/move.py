"""Move representation."""

from dataclasses import dataclass
from enum import IntEnum


class MoveFlag(IntEnum):
    """Kind of move."""

    NORMAL = 0
    CASTLE = 1
    EN_PASSANT = 2


@dataclass(frozen=True)
class Move:
    """A move from one square to another."""

    start: int
    dest: int
    flag: MoveFlag = MoveFlag.NORMAL

    def __post_init__(self):
        object.__setattr__(self, "flag", MoveFlag(self.flag))