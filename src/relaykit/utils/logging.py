"""
Structured logging for relaykit.

Every module obtains its logger through ``get_logger(__name__)`` and
attaches context with ``extra={...}``. Library code never installs
handlers; applications call ``configure_logging()`` once at startup.

Example:
    ```python
    from relaykit.utils.logging import configure_logging, get_logger

    configure_logging("DEBUG")
    logger = get_logger(__name__)
    logger.info("Relay selected", extra={"relay_url": url})
    ```
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional, Union

ROOT_LOGGER_NAME = "relaykit"

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes present on every LogRecord; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the relaykit namespace.

    Args:
        name: Module name, usually ``__name__``. Names outside the
            ``relaykit`` namespace are nested under it.

    Returns:
        Logger instance
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def extract_extra(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the fields that were passed to a log call via ``extra``."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class StructuredFormatter(logging.Formatter):
    """
    Formatter that renders ``extra`` fields after the message.

    Text mode appends ``key=value`` pairs; JSON mode emits one object per line.
    """

    def __init__(self, fmt: Optional[str] = None, *, json_format: bool = False) -> None:
        super().__init__(fmt or DEFAULT_FORMAT)
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        extra = extract_extra(record)
        if self.json_format:
            payload: Dict[str, Any] = {
                "time": self.formatTime(record),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            }
            payload.update(extra)
            if record.exc_info:
                payload["exc_info"] = self.formatException(record.exc_info)
            return json.dumps(payload, default=str)

        line = super().format(record)
        if extra:
            pairs = " ".join(f"{key}={value!r}" for key, value in sorted(extra.items()))
            line = f"{line} [{pairs}]"
        return line


def configure_logging(
    level: Union[int, str] = logging.INFO,
    *,
    json_format: bool = False,
    stream: Any = None,
) -> logging.Logger:
    """
    Install a single structured handler on the relaykit root logger.

    Calling it again replaces the previous handler.

    Args:
        level: Log level name or number
        json_format: Emit JSON lines instead of text
        stream: Output stream (defaults to stderr)

    Returns:
        The configured relaykit root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_relaykit_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter(json_format=json_format))
    handler._relaykit_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    set_level(level)
    return logger


def set_level(level: Union[int, str]) -> None:
    """Set the level of the relaykit root logger."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
