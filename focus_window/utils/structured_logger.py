import logging
from contextlib import contextmanager
from typing import Callable, Iterator, List

from focus_window.core.focus_events import EventType


class InMemoryLogHandler(logging.Handler):
    def __init__(self, name: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.name: str = name
        self.logs: List[logging.LogRecord] = []
        self.callbacks: List[Callable[[logging.LogRecord], object]] = []


    def emit(self, record: logging.LogRecord):
        self.logs.append(record)
        for callback in self.callbacks:
            callback(record)


    def addCallback(self, callback: Callable[[logging.LogRecord], object]):
        self.callbacks.append(callback)


    @property
    def events(self) -> List[EventType]:
        """ Events attached to the collected records, in logging order. """
        return [record.event  # type: ignore[attr-defined]
                for record in self.logs
                if hasattr(record, 'event')]


def add_structured_handler(logger: logging.Logger):
    memory_handler = InMemoryLogHandler(logger.name)
    logger.addHandler(memory_handler)
    return memory_handler


@contextmanager
def capture_events(logger: logging.Logger) -> Iterator[InMemoryLogHandler]:
    """ Collect everything logger emits at DEBUG or above, then detach. """
    memory_handler = add_structured_handler(logger)
    old_level = logger.level
    logger.setLevel(logging.DEBUG)
    try:
        yield memory_handler
    finally:
        logger.setLevel(old_level)
        logger.removeHandler(memory_handler)
