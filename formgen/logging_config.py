"""Structured logging configuration."""
import json
import logging
import sys
from datetime import datetime, timezone

from formgen.config import get_config

# Attributes passed through ``extra=`` that the JSON formatter keeps.
JSON_EXTRA_KEYS = ("strategy", "error_kind", "excerpt")


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in JSON_EXTRA_KEYS:
            if hasattr(record, key):
                log_obj[key] = getattr(record, key)
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj)


def setup_logging(level=None, json_format=None):
    log_config = get_config().get("logging", {})
    if level is None:
        level = log_config.get("level", "INFO")
    if json_format is None:
        json_format = bool(log_config.get("json", False))
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
