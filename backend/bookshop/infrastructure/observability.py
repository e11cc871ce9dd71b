"""Structured Logging — one JSON object per line for the bookshop services.

Invariants:
    - Every record carries timestamp, level, logger and message
    - Domain ids passed in `extra` (item_id, order_id, customer_id) and the
      error_code / status / amount fields are copied into the object when set
    - Record time is the moment the record was created, in UTC

Design Decisions:
    - Hand-written JSONFormatter on stdlib logging, no extra dependency
    - setup_logging() replaces root handlers, so a second lifespan start in the
      same process does not double every line
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "item_id", "order_id", "customer_id", "error_code", "status", "amount",
)
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "timestamp": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, getattr(record, key)) for key in _EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install a single stderr handler on the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
