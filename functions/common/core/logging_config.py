"""
Logging Configuration

Provides:
- CustomJsonFormatter: JSON line formatter tagged with the owning service
- setup_logging: YAML dictConfig loader with ${VAR} substitution
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone
from typing import Mapping, Optional

import yaml

# Attributes every LogRecord carries; anything else came in through `extra=`.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys() | {"message", "asctime"}
)


class CustomJsonFormatter(logging.Formatter):
    """
    JSON line formatter.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level, logger, message
      - service: set when the formatter is configured with one
      - extra fields passed via `extra=` (function, field, locator, ...)
      - exception / exception_type when exc_info is attached
    """

    def __init__(self, *args, service: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
        }
        if self.service:
            log_data["service"] = self.service
        log_data["message"] = record.getMessage()

        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS or key.startswith("_"):
                continue
            # Optional extras such as `field` are often None; keep lines short.
            if value is not None:
                log_data[key] = value

        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception_type"] = record.exc_info[0].__name__
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(config_path: str, defaults: Optional[Mapping[str, str]] = None):
    """
    Load the YAML config, substitute environment variables, and initialize logging.

    `defaults` fills in ${VAR} placeholders the environment does not set;
    LOG_LEVEL falls back to INFO.
    """
    mapping = {"LOG_LEVEL": "INFO"}
    mapping.update(defaults or {})
    mapping.update(os.environ)

    if not os.path.exists(config_path):
        logging.basicConfig(level=mapping["LOG_LEVEL"])
        return

    with open(config_path, "r", encoding="utf-8") as f:
        template = string.Template(f.read())

    config = yaml.safe_load(template.safe_substitute(mapping))
    logging.config.dictConfig(config)
