"""
Logging for the interface library.

Everything in this library logs through the functions in this module,
which wrap a single named stdlib logger. The library adds a `NullHandler`
only, so nothing is printed unless the application configures logging
or attaches a handler with `add_handler()`.
"""
from . import constants
import logging
import os

_logger = logging.getLogger("artie_interface")
_logger.addHandler(logging.NullHandler())

def _level_from_env() -> int:
    name = os.environ.get(constants.InterfaceEnvVariables.LOG_LEVEL, constants.DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(constants.DEFAULT_LOG_LEVEL)
    return level

_logger.setLevel(_level_from_env())

def get_logger() -> logging.Logger:
    """Return the library's logger."""
    return _logger

def set_level(level: int|str):
    """Set the level of the library's logger. Accepts a level number or a level name."""
    _logger.setLevel(level.upper() if isinstance(level, str) else level)

def add_handler(handler: logging.Handler):
    """Attach a handler to the library's logger."""
    _logger.addHandler(handler)

def remove_handler(handler: logging.Handler):
    """Detach a handler previously attached with `add_handler()`."""
    _logger.removeHandler(handler)

def debug(msg: str):
    _logger.debug(msg)

def info(msg: str):
    _logger.info(msg)

def warning(msg: str):
    _logger.warning(msg)

def error(msg: str):
    _logger.error(msg)
