from dataclasses import dataclass
from enum import Enum
from typing import Union


class Direction(Enum):
    """ An edge of the buffer.

    TOP is the lowest-sorted end (index 0), BOTTOM is the highest-sorted end.
    """

    TOP = 'TOP'
    BOTTOM = 'BOTTOM'

    @property
    def opposite(self) -> 'Direction':
        return Direction.BOTTOM if self is Direction.TOP else Direction.TOP


@dataclass(frozen=True)
class FocusChange:
    index: int
    last_index: int

    def __str__(self) -> str:
        return f"Focused index moved from {self.last_index} to {self.index}."


@dataclass(frozen=True)
class Trim:
    side: Direction
    discarded: int
    kept: int

    def __str__(self) -> str:
        return f"Discarded {self.discarded} item(s) from the {self.side.value.lower()}, keeping {self.kept}."


@dataclass(frozen=True)
class Recenter:
    focused_key: str
    last_index: int
    center: int

    def __str__(self) -> str:
        return f"Window around {self.focused_key!r} at {self.last_index} overflows the buffer, recentring at {self.center}."


@dataclass(frozen=True)
class DropFocus:
    focused_key: str
    side: Direction

    def __str__(self) -> str:
        return f"Focused item {self.focused_key!r} is gone, anchoring at the {self.side.value.lower()}."


EventType = Union[FocusChange, Trim, Recenter, DropFocus]
