"""Logging setup for the receipt processor.

setup_logging() installs a single stream handler on the root logger, either
human-readable or one JSON object per line. Extra fields passed through
``extra=`` (receipt_id, points, path, error_code) are surfaced in JSON output.
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("receipt_id", "points", "path", "error_code")


class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


_handler = None


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Configure the root logger. Calling it again replaces the previous handler."""
    global _handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    if _handler is not None:
        logging.root.removeHandler(_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler
    return handler
