"""
Bounded sorted collection ordered by a comparator.

SortedWindow keeps items sorted by a caller-supplied comparator and enforces
a fixed capacity by evicting from one chosen end.
"""


from functools import cmp_to_key
from typing import Callable, Generic, Iterable, Iterator, Sequence, TypeVar, Any
from sortedcontainers import SortedKeyList

from focus_window.core.focus_events import Direction


T = TypeVar('T')


class SortedWindow(Sequence, Generic[T]):
    """
    A sorted collection with a fixed capacity.

    Inserting beyond capacity evicts the smallest item when the eviction side
    is Direction.TOP, or the largest one when it is Direction.BOTTOM. Items
    that compare equal keep their insertion order, so filling a window gives
    the same result as a stable sort followed by trimming one end.
    """

    def __init__(self,
                 capacity: int,
                 sorter: Callable[[T, T], int],
                 evict: Direction) -> None:
        if capacity < 0:
            raise ValueError("SortedWindow capacity cannot be negative.", capacity)

        self._capacity: int = capacity
        self._evict: Direction = evict
        # SortedKeyList.add() inserts after equal keys
        self._data: SortedKeyList = SortedKeyList(key=cmp_to_key(sorter))
        # how many items were pushed out since creation
        self.evicted: int = 0

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __getitem__(self, index: Any) -> Any:  # type: ignore
        return self._data[index]

    def insert(self, item: T) -> None:
        """Insert an item, keep sorted, and enforce capacity."""

        self._data.add(item)
        if len(self._data) <= self._capacity:
            return

        if self._evict is Direction.TOP:
            self._data.pop(0)
        else:
            self._data.pop()
        self.evicted += 1

    def update(self, items: Iterable[T]) -> None:
        for item in items:
            self.insert(item)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def evict(self) -> Direction:
        return self._evict

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(data={list(self._data)!r}, "
            f"capacity={self._capacity}, evict={self._evict.name})"
        )
