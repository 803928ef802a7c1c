# invoicebook/observability.py
"""
Logging setup, called once from the application lifespan.
"""

import json
import logging
from datetime import datetime, timezone

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("error_kind", "path", "invoice_id", "user_id"):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = str(val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    # lifespan can run more than once per process (tests, reloads)
    for existing in list(root.handlers):
        if getattr(existing, "_invoicebook", False):
            root.removeHandler(existing)
    handler._invoicebook = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
