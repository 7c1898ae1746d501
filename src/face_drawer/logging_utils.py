"""Logging helpers.

All loggers live under the ``face_drawer`` namespace. The process root
logger is never modified; ``configure_logging`` only touches the package
logger, so applications embedding the library keep control of their own
handlers.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

__all__ = ["get_logger", "configure_logging"]

_ROOT_NAME = "face_drawer"
_FORMAT = logging.Formatter("%(levelname)s %(name)s: %(message)s")


class _PackageHandler(logging.StreamHandler):
    """Stdout handler installed by ``configure_logging``."""


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else default


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """Attach a single stdout handler to the package logger and set its level.

    The package logger stops propagating to the process root so records are
    not printed twice. Calling it again only updates the level.
    """
    root = logging.getLogger(_ROOT_NAME)
    for handler in list(root.handlers):
        if isinstance(handler, logging.NullHandler):
            root.removeHandler(handler)
    if not any(isinstance(h, _PackageHandler) for h in root.handlers):
        handler = _PackageHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    root.setLevel(_to_level(level))
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger below the ``face_drawer`` namespace.

    Without ``level`` the logger inherits from the package logger.
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + "."):
        name = f"{_ROOT_NAME}.{name}"
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log
