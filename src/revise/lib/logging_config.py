"""Logging configuration for revise.

All loggers live under the ``revise`` namespace so that the CLI can adjust
verbosity for the whole package with a single call to ``setup_logging``.
"""

import logging
import sys

ROOT_LOGGER_NAME = "revise"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the revise namespace.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger named ``name`` if already namespaced, else ``revise.<name>``
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the revise root logger.

    Installs a single stderr handler, replacing any handler installed by a
    previous call so that repeated CLI invocations do not duplicate output.

    Args:
        verbose: Log everything down to DEBUG
        quiet: Only log errors (takes precedence over verbose)

    Returns:
        The configured ``revise`` root logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
