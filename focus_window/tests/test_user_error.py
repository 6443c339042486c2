import logging

from focus_window.core.buffer_config import MaxLengthTooLarge
from focus_window.utils.user_error import FocusWindowError


def test_message_is_formatted():
    error = FocusWindowError("Slot %s of %s.", 3, 10)

    assert str(error) == "Slot 3 of 10."
    assert error.fmt == "Slot %s of %s."
    assert error.fmt_args == (3, 10)


def test_message_without_arguments_keeps_percent_signs():
    error = FocusWindowError("100% full.")

    assert str(error) == "100% full."


def test_report(caplog):
    logger = logging.getLogger('focus_window.tests.report')
    error = MaxLengthTooLarge(20, 10)

    with caplog.at_level(logging.CRITICAL, logger.name):
        code = error.report(logger)

    assert code == 1
    [record] = caplog.records
    assert record.levelno == logging.CRITICAL
    assert record.getMessage() == \
        "max_length (20) cannot be greater than reserved_size (10)."


def test_subclass_can_change_code():
    class Interrupted(FocusWindowError):
        code = 2

    logger = logging.getLogger('focus_window.tests.report')

    assert Interrupted("Stopped.").report(logger) == 2
