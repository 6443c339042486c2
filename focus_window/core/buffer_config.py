from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, TypeVar

from focus_window.utils.user_error import FocusWindowError


T = TypeVar('T')

DEFAULT_RESERVED_SIZE = 10000
DEFAULT_MAX_LENGTH = 1000
DEFAULT_INITIAL_FOCUS_INDEX = 5000


class ConfigError(FocusWindowError):
    """Base exception for invalid buffer settings."""


class MissingSorter(ConfigError):
    def __init__(self):
        super().__init__("sorter is required.")


class MissingKeyExtractor(ConfigError):
    def __init__(self):
        super().__init__("key_extractor is required.")


class MaxLengthTooLarge(ConfigError):
    def __init__(self, max_length: int, reserved_size: int):
        fmt = "max_length (%s) cannot be greater than reserved_size (%s)."
        super().__init__(fmt, max_length, reserved_size)


class InitialFocusIndexTooLarge(ConfigError):
    def __init__(self, initial_focus_index: int, reserved_size: int):
        fmt = "initial_focus_index (%s) cannot be greater than reserved_size (%s)."
        super().__init__(fmt, initial_focus_index, reserved_size)


class TooManyPrependItems(ConfigError):
    def __init__(self, count: int, initial_focus_index: int):
        fmt = ("prepend_items length (%s) cannot be greater than "
               "initial_focus_index (%s).")
        super().__init__(fmt, count, initial_focus_index)


class TooManyAppendItems(ConfigError):
    def __init__(self, count: int, room: int):
        fmt = ("append_items length (%s) cannot be greater than "
               "reserved_size - initial_focus_index (%s).")
        super().__init__(fmt, count, room)


class InvalidReservedSize(ConfigError):
    def __init__(self, reserved_size: int):
        super().__init__("reserved_size (%s) must be greater than 0.", reserved_size)


class InvalidMaxLength(ConfigError):
    def __init__(self, max_length: int):
        super().__init__("max_length (%s) cannot be negative.", max_length)


@dataclass(frozen=True)
class BufferConfig(Generic[T]):
    """ Settings for a FocusBuffer, fixed for the buffer's lifetime.

    sorter is a comparator returning a negative number, zero, or a positive
    number, like the cmp argument of Python 2's sorted(). key_extractor must
    return a string that identifies an item. Both are required, even though
    they default to None here so that check() can report them.
    """

    sorter: Optional[Callable[[T, T], int]] = None
    key_extractor: Optional[Callable[[T], str]] = None
    reserved_size: int = DEFAULT_RESERVED_SIZE
    max_length: int = DEFAULT_MAX_LENGTH
    initial_focus_index: int = DEFAULT_INITIAL_FOCUS_INDEX
    prepend_items: Sequence[T] = ()
    append_items: Sequence[T] = ()
    # called with (index, last_index)
    on_focused_index_change: Optional[Callable[[int, int], object]] = None

    def check(self) -> None:
        """ Raise the first ConfigError that these settings violate. """
        if self.sorter is None:
            raise MissingSorter()
        if self.key_extractor is None:
            raise MissingKeyExtractor()
        if self.max_length > self.reserved_size:
            raise MaxLengthTooLarge(self.max_length, self.reserved_size)
        if self.initial_focus_index > self.reserved_size:
            raise InitialFocusIndexTooLarge(self.initial_focus_index,
                                            self.reserved_size)
        if len(self.prepend_items) > self.initial_focus_index:
            raise TooManyPrependItems(len(self.prepend_items),
                                      self.initial_focus_index)
        room = self.reserved_size - self.initial_focus_index
        if len(self.append_items) > room:
            raise TooManyAppendItems(len(self.append_items), room)
        if self.reserved_size < 1:
            raise InvalidReservedSize(self.reserved_size)
        if self.max_length < 0:
            raise InvalidMaxLength(self.max_length)
