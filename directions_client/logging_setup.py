"""Logging setup driven by ObservabilityConfig.

Library modules only create loggers; applications call
``configure_logging`` once at startup.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

# Attributes every LogRecord carries; anything else came from ``extra``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    logger_name: str = "directions_client",
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again replaces the handler instead of stacking a new one.

    Args:
        config: Logging configuration (defaults to get_config().observability).
        logger_name: Logger to configure.

    Returns:
        The configured logger.
    """
    config = config or get_config().observability
    logger = logging.getLogger(logger_name)
    logger.setLevel(config.level.upper())

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    for existing in list(logger.handlers):
        if getattr(existing, "_directions_client", False):
            logger.removeHandler(existing)
    handler._directions_client = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
