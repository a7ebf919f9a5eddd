from __future__ import annotations

import json
import logging
import sys
import time
from typing import Any, TextIO

from .config import settings

# Structured fields passed through `extra=`
_REQUEST_KEYS = ("request_id", "path", "method", "status_code", "latency_ms")
_QUERY_KEYS = ("term", "field", "token_count")


class JsonFormatter(logging.Formatter):
    """One JSON object per line, carrying request and query fields when set."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update({k: getattr(record, k) for k in _REQUEST_KEYS + _QUERY_KEYS if hasattr(record, k)})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Install the JSON handler on the root logger.

    Logs go to stderr by default so CLI output on stdout stays parseable.
    """
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    root.handlers[:] = [handler]

    # uvicorn's own handlers would print every line twice
    for name in ("uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).handlers.clear()
