"""katas.logging_utils
======================

Logging setup for applications embedding the package. Library modules only
create loggers and emit DEBUG records; attaching handlers is left to the
caller through :func:`setup_logging`.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

PACKAGE_LOGGER = "katas"

# Extra attributes surfaced by the JSON formatter when a record carries them.
EXTRA_FIELDS = ("operation", "size")


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            value = record.__dict__.get(key)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "plain") -> logging.Logger:
    """Attach a stream handler to the package logger.

    Parameters
    ----------
    level:
        Level name such as ``"DEBUG"``. Unknown names fall back to ``INFO``.
    fmt:
        ``"json"`` for one JSON object per line, anything else for plain text.

    Returns
    -------
    logging.Logger
        The configured ``katas`` logger. Calling the function again replaces
        the handler installed by the previous call instead of stacking them.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_katas_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._katas_handler = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger


__all__ = ["PACKAGE_LOGGER", "JSONFormatter", "setup_logging"]
