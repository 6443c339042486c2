import pytest

from focus_window.core.buffer_config import (
    BufferConfig, ConfigError, InitialFocusIndexTooLarge, InvalidMaxLength,
    InvalidReservedSize, MaxLengthTooLarge, MissingKeyExtractor, MissingSorter, TooManyAppendItems,
    TooManyPrependItems)
from focus_window.core.focus_buffer import FocusBuffer


def sorter(a, b):
    return a - b


def key_extractor(item):
    return str(item)


def test_defaults():
    config = BufferConfig(sorter=sorter, key_extractor=key_extractor)

    config.check()
    assert config.reserved_size == 10000
    assert config.max_length == 1000
    assert config.initial_focus_index == 5000
    assert config.prepend_items == ()
    assert config.append_items == ()
    assert config.on_focused_index_change is None


def test_missing_sorter():
    with pytest.raises(MissingSorter, match='sorter is required'):
        FocusBuffer.create(key_extractor=key_extractor)


def test_missing_key_extractor():
    with pytest.raises(MissingKeyExtractor, match='key_extractor is required'):
        FocusBuffer.create(sorter=sorter)


def test_sorter_checked_before_key_extractor():
    with pytest.raises(MissingSorter):
        BufferConfig().check()


def test_max_length_greater_than_reserved_size():
    with pytest.raises(MaxLengthTooLarge,
                       match=r'max_length \(2000\) cannot be greater than '
                             r'reserved_size \(1000\)'):
        FocusBuffer.create(sorter=sorter,
                           key_extractor=key_extractor,
                           max_length=2000,
                           reserved_size=1000)


def test_initial_focus_index_greater_than_reserved_size():
    with pytest.raises(InitialFocusIndexTooLarge,
                       match='initial_focus_index .* cannot be greater than reserved_size'):
        FocusBuffer.create(sorter=sorter,
                           key_extractor=key_extractor,
                           initial_focus_index=1500,
                           reserved_size=1000,
                           max_length=100)


def test_prepend_items_longer_than_initial_focus_index():
    with pytest.raises(TooManyPrependItems,
                       match='prepend_items length .* cannot be greater than initial_focus_index'):
        FocusBuffer.create(sorter=sorter,
                           key_extractor=key_extractor,
                           prepend_items=[1, 2, 3],
                           initial_focus_index=2,
                           reserved_size=1000,
                           max_length=100)


def test_append_items_longer_than_room_after_focus():
    with pytest.raises(TooManyAppendItems,
                       match=r'reserved_size - initial_focus_index \(1\)'):
        FocusBuffer.create(sorter=sorter,
                           key_extractor=key_extractor,
                           append_items=[1, 2, 3],
                           initial_focus_index=5,
                           reserved_size=6,
                           max_length=3)


def test_reserved_size_must_be_positive():
    with pytest.raises(InvalidReservedSize):
        FocusBuffer.create(sorter=sorter,
                           key_extractor=key_extractor,
                           reserved_size=0,
                           max_length=0,
                           initial_focus_index=0)


def test_max_length_cannot_be_negative():
    with pytest.raises(InvalidMaxLength, match=r"max_length \(-1\) cannot be negative"):
        FocusBuffer.create(sorter=sorter,
                           key_extractor=key_extractor,
                           reserved_size=10,
                           max_length=-1,
                           initial_focus_index=5)


def test_zero_max_length_keeps_nothing():
    buffer = FocusBuffer.create(sorter=sorter,
                                key_extractor=key_extractor,
                                reserved_size=10,
                                max_length=0,
                                initial_focus_index=5)

    buffer.append([1, 2])

    assert list(buffer.items()) == []
    assert buffer.focused_key is None


def test_first_violation_wins():
    # Both max_length and initial_focus_index are too large.
    config = BufferConfig(sorter=sorter,
                          key_extractor=key_extractor,
                          reserved_size=10,
                          max_length=20,
                          initial_focus_index=30)

    with pytest.raises(MaxLengthTooLarge):
        config.check()


def test_config_errors_share_a_base():
    with pytest.raises(ConfigError) as excinfo:
        FocusBuffer.create(sorter=sorter,
                           key_extractor=key_extractor,
                           max_length=11,
                           reserved_size=10,
                           initial_focus_index=5)

    assert excinfo.value.code == 1
    assert excinfo.value.fmt_args == (11, 10)


def test_config_is_frozen():
    config = BufferConfig(sorter=sorter, key_extractor=key_extractor)

    with pytest.raises(AttributeError):
        config.max_length = 5  # type: ignore[misc]
