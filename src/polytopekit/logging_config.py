"""
Logging setup for applications built on polytopekit.

Library modules only log through ``logging.getLogger(__name__)``; the
package logger carries a ``NullHandler`` so nothing is printed unless
an application asks for it.  ``setup_logging`` is that request: the
command line front end calls it with a level derived from ``-v``.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "polytopekit"

FORMAT = '%(levelname)-7s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'


def verbosity_to_level(verbosity: int) -> int:
    """Map a count of ``-v`` flags to a level: WARNING, INFO, then DEBUG."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(level: int = logging.WARNING,
                  log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Route polytopekit's log records to ``stream`` (stderr by default)
    and, if given, to ``log_file``.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: threshold for the package logger and its handlers.
        log_file: optional path; the file is overwritten and gets timestamps.
        stream: console stream, so that command output on stdout stays clean.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    logger.debug("logging to %s%s", getattr(console.stream, 'name', 'stream'),
                 ' and {}'.format(log_file) if log_file else '')
    return logger
