import logging
import sys

# library use: stay silent unless the application configures logging
_exprcalc_root_logger = logging.getLogger("exprcalc")

if not _exprcalc_root_logger.hasHandlers():
    _exprcalc_root_logger.addHandler(logging.NullHandler())

CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"
_console_handler = None


def _as_level(level):
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        _exprcalc_root_logger.warning(
            "Invalid exprcalc log level %r. Defaulting to WARNING.", level
        )
        return logging.WARNING
    return resolved


def setup_console_logging(level=logging.WARNING, stream=None, log_format=CONSOLE_LOG_FORMAT):
    """
    Configures logging for the exprcalc command-line tool.

    Sets up a StreamHandler for the 'exprcalc' package logger. Calling it
    again in the same process reuses that handler with the new level and
    stream.

    Args:
        level: The minimum logging level, a number or a level name.
        stream: The output stream (default: the current sys.stderr).
        log_format: The format string for log messages.
    """
    global _console_handler
    if stream is None:
        stream = sys.stderr
    level = _as_level(level)
    package_logger = _exprcalc_root_logger
    package_logger.setLevel(level)

    if _console_handler is None:
        for handler in package_logger.handlers[:]:
            if isinstance(handler, logging.NullHandler):
                package_logger.removeHandler(handler)
        _console_handler = logging.StreamHandler(stream)
        package_logger.addHandler(_console_handler)
        # the tool is the entry point, avoid duplicates through the root logger
        package_logger.propagate = False
    else:
        _console_handler.setStream(stream)

    _console_handler.setLevel(level)
    _console_handler.setFormatter(logging.Formatter(log_format))

    package_logger.debug(
        "exprcalc console logging configured to level %s", logging.getLevelName(level)
    )
    return _console_handler
