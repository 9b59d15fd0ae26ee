"""Logging setup for the gateway process."""

import json
import logging
from datetime import datetime, timezone
from typing import Any

SIMPLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level: str = "INFO", fmt: str = "simple") -> None:
    """Install a single stream handler on the root logger.

    Safe to call more than once; previous handlers are replaced.
    """
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(SIMPLE_FORMAT))

    root.addHandler(handler)
    root.setLevel(level)

    # Keep library chatter out of the application log
    for noisy in ("httpx", "httpcore", "anthropic", "aiosqlite"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
