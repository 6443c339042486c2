import logging


class FocusWindowError(RuntimeError):
    """
    Base class for all exceptions raised by focus_window.

    The message is kept as a %-style format plus its arguments, so that
    command-line tools can hand both straight to the logger. code is the
    exit status a tool should return after reporting the error.
    """

    code = 1

    def __init__(self, fmt: str, *fmt_args: object):
        self.fmt = fmt
        self.fmt_args = fmt_args
        super().__init__(fmt % fmt_args if fmt_args else fmt)

    def report(self, logger: logging.Logger) -> int:
        """ Log this error as fatal, and return the exit code. """
        logger.fatal(self.fmt, *self.fmt_args)
        return self.code
