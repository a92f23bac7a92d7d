"""
Utility functions for the suppression audit.
"""

import logging
import sys


LOG_FORMAT = "%(levelname)s | %(message)s"

_HANDLER_ATTR = "_suppressaudit_handler"


def log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def _remove_our_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Route the package's log records to the current stderr.

    Safe to call more than once: a handler installed by a previous call
    is replaced, never duplicated, and never written to again.
    """
    logger = logging.getLogger("suppressaudit")
    logger.setLevel(level)
    _remove_our_handlers(logger)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    return logger
