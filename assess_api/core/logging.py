"""
Logging setup for the scoring service.

Log lines carry the service name and environment, plus any structured
fields passed as ``extra_data`` (submission size, tolerance, totals).
"""

import sys
import logging
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import Settings, settings


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, "extra_data", None) or {}


class StructuredFormatter(logging.Formatter):
    """One JSON object per log record"""

    def __init__(self, service: str, environment: str):
        super().__init__()
        self.service = service
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "service": self.service,
            "environment": self.environment,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(_extra_fields(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Plain text lines with structured fields appended as key=value"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _extra_fields(record)
        if fields:
            line += " " + " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
        return line


def build_handlers(config: Settings) -> List[logging.Handler]:
    """Console handler, plus a file handler when LOG_FILE is set"""
    if config.LOG_FORMAT == "json":
        formatter: logging.Formatter = StructuredFormatter(config.APP_NAME, config.ENVIRONMENT)
    else:
        formatter = TextFormatter()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if config.LOG_FILE:
        log_path = Path(config.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(config: Optional[Settings] = None) -> None:
    """Configure root logging from the service settings"""
    config = config or settings
    log_level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(level=log_level, handlers=build_handlers(config), force=True)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger accepting structured ``extra_data`` fields"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        fields = {**self.extra, **kwargs.pop("extra_data", {})}
        kwargs.setdefault("extra", {})["extra_data"] = fields
        return msg, kwargs


def get_logger(name: str, **context: Any) -> LoggerAdapter:
    """Logger whose records always carry ``context`` as structured fields"""
    return LoggerAdapter(logging.getLogger(name), context)
