"""
Slot values of the fixed-length buffer.

A slot either holds an item or the EMPTY marker. None is a legal item, so
emptiness is never spelled as None.
"""

from enum import Enum
from typing import TypeVar, Union


T = TypeVar('T')


class Empty(Enum):
    EMPTY = 'EMPTY'

    def __repr__(self) -> str:
        return 'EMPTY'


EMPTY = Empty.EMPTY

Slot = Union[T, Empty]
