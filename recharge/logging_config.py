"""Logging setup driven by ObservabilityConfig.

Components log through ``logging.getLogger(__name__)`` and pass context
via ``extra``. Plain mode uses the configured format string; structured
mode emits one JSON object per record including the ``extra`` fields.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

# Attributes every LogRecord has; anything else came in through ``extra``.
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Formats records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger.

    Args:
        config: Logging settings (defaults to the application config).
    """
    config = config or get_config().observability
    level = getattr(logging, config.level.upper(), logging.INFO)

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logging.basicConfig(level=level, handlers=[handler], force=True)
