"""
Logging for PyHermite.

Every module logs under the ``pyhermite`` logger. The first call to
``get_logger`` installs a stderr handler (plus a file handler when asked
for) configured from the environment:

- PYHERMITE_LOG_LEVEL: level name, WARNING when unset or unknown
- PYHERMITE_LOG_FORMAT: ``default`` or ``json``
- PYHERMITE_LOG_FILE: optional path that receives a copy of every record
"""

from __future__ import annotations

import logging
import os
import sys
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, List, Optional, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

ROOT_LOGGER_NAME = "pyhermite"

LOG_LEVEL_ENV = "PYHERMITE_LOG_LEVEL"
LOG_FORMAT_ENV = "PYHERMITE_LOG_FORMAT"
LOG_FILE_ENV = "PYHERMITE_LOG_FILE"

FORMATS = {
    "default": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
}

_installed: List[logging.Handler] = []


def _level_from_env() -> int:
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def _format_from_env() -> str:
    return FORMATS.get(os.environ.get(LOG_FORMAT_ENV, "default").lower(), FORMATS["default"])


def setup_logging(
    level: Optional[int] = None,
    format_str: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """Install handlers on the ``pyhermite`` logger.

    Arguments left as None are read from the environment. Without
    ``force`` an already configured logger is returned untouched; with it
    the previous handlers are closed and replaced.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _installed and not force:
        return root

    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()

    root.setLevel(level if level is not None else _level_from_env())
    root.propagate = False

    formatter = logging.Formatter(format_str or _format_from_env())
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    path = log_file or os.environ.get(LOG_FILE_ENV)
    if path:
        handlers.append(logging.FileHandler(path))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _installed.append(handler)

    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``pyhermite`` or its ``pyhermite.<name>`` child."""
    root = setup_logging()
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}") if name else root


def LOG_DEBUG(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().debug(msg, *args, **kwargs)


@contextmanager
def profile_scope(name: str, log_level: int = logging.DEBUG):
    """Log how long the body of the ``with`` block took.

    Example:
        with profile_scope("cost"):
            cost = spline.sum_dcurvature_squared(200)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        get_logger().log(log_level, f"{name} took {time.perf_counter() - start:.4f}s")


def timed(func: F) -> F:
    """Decorator form of profile_scope, named after the wrapped function."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with profile_scope(func.__name__):
            return func(*args, **kwargs)

    return wrapper  # type: ignore
