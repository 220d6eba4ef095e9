"""
Structured logging for the starkcall SDK.

Thin helpers over the standard library ``logging`` module. All SDK
loggers live under the ``starkcall`` namespace; the package logger carries
a ``NullHandler`` so nothing is printed unless the application configures
logging (or calls :func:`configure_logging`).

Example:
    ```python
    from starkcall.utils.logging import configure_logging, get_logger

    configure_logging("DEBUG")
    logger = get_logger(__name__)
    logger.info("Submitting", extra={"address": "0x1234"})
    ```
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

ROOT_LOGGER_NAME = "starkcall"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s%(context)s"

_root = logging.getLogger(ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())

# LogRecord attributes; anything else on a record came from ``extra``.
_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "context"}


class ContextFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        extras = {k: v for k, v in vars(record).items() if k not in _RESERVED}
        record.context = (
            " " + " ".join(f"{k}={v}" for k, v in sorted(extras.items())) if extras else ""
        )
        return super().format(record)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``starkcall`` namespace."""
    if not name or name == ROOT_LOGGER_NAME:
        return _root
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the SDK root logger.

    Calling this more than once replaces the previously configured handler.

    Args:
        level: Log level name or number
        fmt: Format string; ``%(context)s`` expands to the ``extra`` fields
        handler: Handler to use instead of a ``StreamHandler``

    Returns:
        The configured ``starkcall`` logger
    """
    for existing in list(_root.handlers):
        if not isinstance(existing, logging.NullHandler):
            _root.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    handler.setFormatter(ContextFormatter(fmt))
    _root.addHandler(handler)
    set_level(level)
    return _root


def set_level(level: Union[int, str]) -> None:
    if isinstance(level, str):
        level = level.upper()
    _root.setLevel(level)


def enable_debug() -> None:
    set_level(logging.DEBUG)


def disable_logging() -> None:
    _root.setLevel(logging.CRITICAL + 1)


class LogContext(logging.LoggerAdapter):
    """
    Logger adapter that merges a fixed context into every record.

    Example:
        >>> log = LogContext(get_logger("account"), {"address": "0x1"})
        >>> log.debug("Nonce resolved", extra={"nonce": 3})
    """

    def __init__(self, logger: logging.Logger, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(logger, context or {})

    def process(self, msg: Any, kwargs: Any) -> Any:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


__all__ = [
    "ContextFormatter",
    "LogContext",
    "configure_logging",
    "disable_logging",
    "enable_debug",
    "get_logger",
    "set_level",
]
