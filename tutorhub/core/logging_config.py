# /tutorhub/core/logging_config.py

"""
Structured JSON logging.

Every log line is one JSON object with a timestamp, level, channel, message,
the current request id, and any business context passed by the caller.
Channels: http (request middleware), db (repositories), reporting (services
that derive dashboard figures).
"""

import json
import logging
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Optional

from . import config

# The request id travels with the request through every layer.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

CHANNELS = ["http", "db", "reporting"]


class StructuredJsonFormatter(logging.Formatter):
    """Formats a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "message": record.getMessage(),
            "channel": getattr(record, "channel", record.name.split(".")[-1]),
            "context": {
                "request_id": request_id_var.get(""),
                **(getattr(record, "context", {}) or {}),
            },
            "extra": getattr(record, "extra_data", {}) or {},
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def setup_logging() -> logging.Logger:
    """
    Configures the root logger with the JSON formatter and sets the level of
    each channel logger. Safe to call more than once.
    """
    level = getattr(logging, config.LOG_LEVEL, logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredJsonFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for channel in CHANNELS:
        logging.getLogger(f"tutorhub.{channel}").setLevel(level)

    return root_logger


def get_logger(channel: str) -> logging.Logger:
    return logging.getLogger(f"tutorhub.{channel}")


def log_with_context(logger: logging.Logger, level: str, message: str,
                     context: Optional[dict] = None, extra_data: Optional[dict] = None,
                     exc_info: bool = False):
    """
    Emits a log entry carrying business context (student_id, fee_id, ...) and
    extra metadata (duration_ms, counts, ...).
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.log(
        log_level,
        message,
        exc_info=exc_info,
        extra={
            "context": context or {},
            "extra_data": extra_data or {},
            "channel": logger.name.split(".")[-1],
        },
    )


def generate_request_id() -> str:
    return str(uuid.uuid4())
