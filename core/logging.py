"""
Structured logging for ShopAudit

JSON records for the API, plain text for terminals. Context bound with
``get_logger(name, **context)`` or ``with_context(...)`` becomes top-level JSON
fields, or a trailing ``[key=value ...]`` block in text output.
"""
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from core.config import settings

JSON_FORMAT = "%(timestamp)s %(level)s %(name)s %(message)s"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
QUIET_LOGGERS = ("uvicorn", "httpx", "httpcore")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that stamps every record with app, version and environment"""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        log_record["app"] = settings.app_name
        log_record["version"] = settings.app_version
        log_record["environment"] = settings.environment
        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        # Bound context is already flattened into the record
        log_record.pop("context", None)
        log_record.pop("msg", None)


class ContextTextFormatter(logging.Formatter):
    """Plain text formatter that appends bound context"""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
            line = f"{line} [{pairs}]"
        return line


def setup_logging(
    level: Optional[str] = None,
    log_format: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure the root logger

    Level and format default to settings; the CLI passes stderr as the stream
    so stdout stays clean for report output.
    """
    level = (level or settings.log_level).upper()
    log_format = (log_format or settings.log_format).lower()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    if log_format == "json":
        handler.setFormatter(CustomJsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(ContextTextFormatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger adapter carrying bound context into every record"""

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.extra)
        extra["context"] = dict(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs

    def with_context(self, **context) -> "LoggerAdapter":
        """New adapter with ``context`` added to the bound fields"""
        return LoggerAdapter(self.logger, {**self.extra, **context})


def get_logger(name: str, **context) -> LoggerAdapter:
    """
    Get a logger with optional bound context

    Example:
        logger = get_logger(__name__, domain="d1")
        logger.with_context(url=url).info("Audit finished", extra={"score": 87})
    """
    return LoggerAdapter(logging.getLogger(name), context)


# Initialize logging on import
setup_logging()
