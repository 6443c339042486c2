#! /usr/bin/env python

"""
Replay a scenario of append and prepend batches on a FocusBuffer, and print
the slots and the focus after every step.

A scenario is a YAML file like this:

    buffer:
      reserved_size: 10
      max_length: 4
      initial_focus_index: 5
    steps:
      - prepend: [3, 4, 5]
      - prepend: [1, 2]
      - prepend: {items: [0], focus: 1}
      - focus: 4

Items are ordered naturally and identified by str(item). For mapping items,
set sort_field and key_field at the top level to order and identify them by
those fields instead. Runs of more than three empty slots are printed as _*N.
"""

import argparse
import logging
import logging.config
import sys
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, TextIO

import yaml

from focus_window.core.focus_buffer import FocusBuffer
from focus_window.core.slots import EMPTY, Slot
from focus_window.utils.focus_window_logging_config import LOGGING
from focus_window.utils.structured_logger import capture_events
from focus_window.utils.user_error import FocusWindowError

logger = logging.getLogger(__name__)
buffer_logger = logging.getLogger('focus_window.core.focus_buffer')

BUFFER_SETTINGS = ('reserved_size',
                   'max_length',
                   'initial_focus_index',
                   'prepend_items',
                   'append_items')
MAX_EMPTY_RUN = 3


class ScenarioError(FocusWindowError):
    """Base exception for malformed scenarios."""


class InvalidScenario(ScenarioError):
    def __init__(self, name: str, reason: str):
        super().__init__("Cannot read scenario %r: %s", name, reason)


class UnknownSetting(ScenarioError):
    def __init__(self, setting: str):
        super().__init__("Unknown buffer setting %r.", setting)


class UnknownStep(ScenarioError):
    def __init__(self, number: int, step: object):
        fmt = "Step %s is not an append, prepend, or focus step: %r."
        super().__init__(fmt, number, step)


class InvalidFocus(ScenarioError):
    def __init__(self, number: int, focus: object):
        super().__init__("Step %s has focus %r, expected a slot index.", number, focus)


def compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def make_sorter(sort_field: Optional[str]) -> Callable[[Any, Any], int]:
    if sort_field is None:
        return compare
    return lambda a, b: compare(a[sort_field], b[sort_field])


def make_key_extractor(key_field: Optional[str]) -> Callable[[Any], str]:
    if key_field is None:
        return str
    return lambda item: str(item[key_field])


def load_scenario(reader: TextIO) -> Mapping[str, Any]:
    name = getattr(reader, 'name', '<stream>')
    try:
        scenario = yaml.safe_load(reader)
    except yaml.YAMLError as e:
        raise InvalidScenario(name, str(e)) from e

    if scenario is None:
        return {}
    if not isinstance(scenario, Mapping):
        raise InvalidScenario(name, "expected a mapping at the top level.")
    return scenario


def format_slots(slots: Sequence[Slot[Any]],
                 key_extractor: Callable[[Any], str]) -> str:
    words = []
    empty_run = 0

    def flush():
        if empty_run > MAX_EMPTY_RUN:
            words.append(f'_*{empty_run}')
        else:
            words.extend('_' * empty_run)

    for slot in slots:
        if slot is EMPTY:
            empty_run += 1
            continue
        flush()
        empty_run = 0
        words.append(key_extractor(slot))
    flush()
    return ' '.join(words)


def write_state(writer: TextIO,
                label: str,
                buffer: FocusBuffer,
                key_extractor: Callable[[Any], str],
                events: Iterable[object]) -> None:
    slots = format_slots(buffer.array, key_extractor)
    writer.write(f'{label}: {slots} | focus {buffer.focused_index} '
                 f'({buffer.focused_key!r})\n')
    for event in events:
        writer.write(f'  {event}\n')


def check_focus(number: int, focus: object) -> None:
    # bool is an int subclass, but yes/no is never a slot index.
    if not isinstance(focus, int) or isinstance(focus, bool):
        raise InvalidFocus(number, focus)


def run_step(buffer: FocusBuffer, number: int, step: object) -> str:
    if not isinstance(step, Mapping) or len(step) != 1:
        raise UnknownStep(number, step)

    [(action, argument)] = step.items()
    if action == 'focus':
        check_focus(number, argument)
        buffer.set_focused_index(argument)
        return action
    if action not in ('append', 'prepend'):
        raise UnknownStep(number, step)

    if isinstance(argument, Mapping):
        items = argument.get('items') or []
        focus = argument.get('focus')
    else:
        items = argument or []
        focus = None
    if focus is not None:
        check_focus(number, focus)

    logger.debug("Step %s: %s %r with focus %r.", number, action, items, focus)
    if action == 'append':
        buffer.append(items, focus)
    else:
        buffer.prepend(items, focus)
    return action


def replay(scenario: Mapping[str, Any],
           writer: TextIO,
           propagate: bool = False) -> FocusBuffer:
    settings = dict(scenario.get('buffer') or {})
    for setting in settings:
        if setting not in BUFFER_SETTINGS:
            raise UnknownSetting(setting)

    key_extractor = make_key_extractor(scenario.get('key_field'))
    sorter = make_sorter(scenario.get('sort_field'))

    old_propagate = buffer_logger.propagate
    buffer_logger.propagate = propagate
    try:
        with capture_events(buffer_logger) as handler:
            buffer = FocusBuffer.create(sorter=sorter,
                                        key_extractor=key_extractor,
                                        **settings)
        write_state(writer, 'start', buffer, key_extractor, handler.events)

        for number, step in enumerate(scenario.get('steps') or [], 1):
            with capture_events(buffer_logger) as handler:
                action = run_step(buffer, number, step)
            write_state(writer,
                        f'{number} {action}',
                        buffer,
                        key_extractor,
                        handler.events)
    finally:
        buffer_logger.propagate = old_propagate

    return buffer


def parse_arguments(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Replay append and prepend steps on a focus buffer.")

    parser.add_argument('scenario',
                        type=argparse.FileType('r'),
                        help='YAML scenario file, or - for standard input.')

    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument('--verbose', action='store_true',
                                 help='Increase output verbosity.')
    verbosity_group.add_argument('--debug', action='store_true',
                                 help='Maximum output verbosity.')
    verbosity_group.add_argument('--quiet', action='store_true',
                                 help='Minimize output verbosity.')

    return parser.parse_args(argv)


def configure_logging(args: argparse.Namespace) -> None:
    logging.config.dictConfig(LOGGING)
    if args.quiet:
        logger.setLevel(logging.ERROR)
    elif args.debug:
        logger.setLevel(logging.DEBUG)
    elif args.verbose:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(logging.WARNING)


def main(argv: Sequence[str]) -> int:
    args = parse_arguments(argv)
    configure_logging(args)

    try:
        with args.scenario:
            scenario = load_scenario(args.scenario)
        replay(scenario, sys.stdout, propagate=args.debug)
        logger.debug("Done.")
        return 0
    except BrokenPipeError:
        logger.debug("Broken pipe.")
        return 1
    except FocusWindowError as e:
        return e.report(logger)


def cli() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == '__main__':
    cli()
