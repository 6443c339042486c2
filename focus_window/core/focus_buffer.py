"""
Fixed-capacity, sorted, deduplicated window anchored on a focused item.

A FocusBuffer owns a list of exactly reserved_size slots. Batches of items
arrive through append() or prepend(); each batch is merged with the items
already in the window, sorted, trimmed to max_length, and placed back into
the slots so that the focused item keeps its index whenever it can. When the
focused index has to move, the buffer reports a FocusChange, both through
the on_focused_index_change callback and as the return value.

Typical use, for a chat history that grows at the bottom:

    buffer = FocusBuffer.create(sorter=by_timestamp,
                                key_extractor=lambda message: message.id,
                                on_focused_index_change=keep_scroll_position)
    buffer.append(newer_messages)
    buffer.prepend(older_messages)
"""

import logging
from typing import Callable, Dict, Generic, Iterable, Iterator, List, Optional, Sequence, TypeVar

from focus_window.core.buffer_config import BufferConfig
from focus_window.core.focus_events import Direction, DropFocus, EventType, FocusChange, Recenter, Trim
from focus_window.core.slots import EMPTY, Slot
from focus_window.utils.sorted_window import SortedWindow
from focus_window.utils.user_error import FocusWindowError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class EmptyFocusTarget(FocusWindowError):
    def __init__(self, index: int):
        super().__init__("Cannot set focused index to empty slot %s.", index)
        self.index = index


def log(event: EventType) -> None:
    logger.debug("%s", event, extra={'event': event})


class FocusBuffer(Generic[T]):
    def __init__(self, config: BufferConfig[T]) -> None:
        config.check()
        self._config = config
        self._array: List[Slot[T]] = [EMPTY] * config.reserved_size
        self._focused_index: int = config.initial_focus_index
        self._focused_key: Optional[str] = None
        self._sorter: Callable[[T, T], int] = config.sorter  # type: ignore
        self._key_extractor: Callable[[T], str] = config.key_extractor  # type: ignore

        if config.prepend_items:
            self.prepend(config.prepend_items)
        if config.append_items:
            self.append(config.append_items)

    @classmethod
    def create(cls, **settings) -> 'FocusBuffer[T]':
        """ Build the BufferConfig from keyword arguments. """
        return cls(BufferConfig(**settings))

    @property
    def config(self) -> BufferConfig[T]:
        return self._config

    @property
    def array(self) -> List[Slot[T]]:
        """ The slots themselves, EMPTY where there is no item.

        Always the same list object of reserved_size slots. Treat it as
        read-only: writing to it breaks the buffer's invariants.
        """
        return self._array

    @property
    def focused_index(self) -> int:
        return self._focused_index

    @property
    def focused_key(self) -> Optional[str]:
        return self._focused_key

    def items(self) -> Iterator[T]:
        """ Yield the occupied slots in buffer order. """
        return (slot for slot in self._array if slot is not EMPTY)

    def __len__(self) -> int:
        return sum(1 for _ in self.items())

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(reserved_size={len(self._array)}, "
                f"items={len(self)}, focused_index={self._focused_index}, "
                f"focused_key={self._focused_key!r})")

    def append(self,
               new_items: Iterable[T],
               new_focused_index: Optional[int] = None) -> List[FocusChange]:
        """ Add items that belong after the current window.

        If the merged window is longer than max_length, the lowest-sorted
        items are discarded. If the focused item is gone, focus moves to the
        first item of a window aligned against the bottom of the buffer.

        :param new_items: items to merge; keys already in the buffer keep
            their existing item.
        :param new_focused_index: if given, focus this index before merging,
            so that it becomes the anchor.
        :return: the FocusChange events emitted, at most one.
        """
        return self._insert(new_items, new_focused_index, Direction.BOTTOM)

    def prepend(self,
                new_items: Iterable[T],
                new_focused_index: Optional[int] = None) -> List[FocusChange]:
        """ Add items that belong before the current window.

        Mirror image of append(): the highest-sorted items are discarded, and
        a lost focus moves to the last item of a window aligned against the
        top of the buffer.
        """
        return self._insert(new_items, new_focused_index, Direction.TOP)

    def set_focused_index(self, index: int) -> None:
        """ Focus the item at index.

        Raises EmptyFocusTarget if there is no item there. The index has
        already changed by then, and the focused key is cleared, so the focus
        is not usable until another call succeeds.
        """
        self._focused_index = index
        if self._resolve_focused_key() is EMPTY:
            raise EmptyFocusTarget(index)

    def _insert(self,
                new_items: Iterable[T],
                new_focused_index: Optional[int],
                base: Direction) -> List[FocusChange]:
        if new_focused_index is not None:
            self.set_focused_index(new_focused_index)

        window = self._merge(new_items, evict=base.opposite)
        return self._reposition(list(window), base)

    def _merge(self, new_items: Iterable[T], evict: Direction) -> SortedWindow[T]:
        key_extractor = self._key_extractor
        merged: Dict[str, T] = {key_extractor(item): item
                                for item in self.items()}
        existing_count = len(merged)
        # A repeated key in the batch keeps its first position and last value.
        batch = {key_extractor(item): item for item in new_items}
        for key, item in batch.items():
            merged.setdefault(key, item)

        window = SortedWindow(self._config.max_length, self._sorter, evict)
        window.update(merged.values())
        logger.debug("Merged %d unseen item(s) into %d existing item(s).",
                     len(merged) - existing_count, existing_count)
        if window.evicted:
            log(Trim(evict, window.evicted, len(window)))
        return window

    def _reposition(self, arr: Sequence[T], base: Direction) -> List[FocusChange]:
        reserved_size = len(self._array)
        initial_focus_index = self._config.initial_focus_index

        if all(slot is EMPTY for slot in self._array):
            if base is Direction.BOTTOM:
                self._place(arr, reserved_size - initial_focus_index)
            else:
                self._place(arr, initial_focus_index - len(arr) + 1)
            return self._update_focused_index(initial_focus_index,
                                              always_notify=True)

        position = self._find_focused(arr)
        if position is None:
            if self._focused_key is not None:
                log(DropFocus(self._focused_key, base))
            if base is Direction.BOTTOM:
                start = reserved_size - len(arr)
                self._place(arr, start)
                return self._update_focused_index(start, always_notify=True)
            self._place(arr, 0)
            return self._update_focused_index(len(arr) - 1, always_notify=True)

        want_start = self._focused_index - position
        want_end = self._focused_index + len(arr) - position - 1
        if want_start < 0 or want_end >= reserved_size:
            center = reserved_size // 2
            log(Recenter(self._key_extractor(arr[position]),
                         self._focused_index,
                         center))
            self._place(arr, center - position)
            return self._update_focused_index(center, always_notify=False)

        self._place(arr, want_start)
        self._resolve_focused_key()
        return []

    def _find_focused(self, arr: Sequence[T]) -> Optional[int]:
        if self._focused_key is None:
            return None
        for position, item in enumerate(arr):
            if self._key_extractor(item) == self._focused_key:
                return position
        return None

    def _place(self, arr: Sequence[T], start: int) -> None:
        """ Rewrite every slot, with arr starting at index start. """
        reserved_size = len(self._array)
        layout: List[Slot[T]] = [EMPTY] * reserved_size
        dropped = 0
        for offset, item in enumerate(arr):
            index = start + offset
            if 0 <= index < reserved_size:
                layout[index] = item
            else:
                dropped += 1

        if dropped:
            logger.warning("%d item(s) fell outside the %d slots and were dropped.",
                           dropped, reserved_size)
        self._array[:] = layout

    def _resolve_focused_key(self) -> Slot[T]:
        index = self._focused_index
        slot = self._array[index] if 0 <= index < len(self._array) else EMPTY
        self._focused_key = None if slot is EMPTY else self._key_extractor(slot)
        return slot

    def _update_focused_index(self,
                              index: int,
                              always_notify: bool) -> List[FocusChange]:
        last_index = self._focused_index
        self._focused_index = index
        self._resolve_focused_key()
        if index == last_index and not always_notify:
            return []

        event = FocusChange(index, last_index)
        log(event)
        callback = self._config.on_focused_index_change
        if callback is not None:
            callback(index, last_index)
        return [event]
