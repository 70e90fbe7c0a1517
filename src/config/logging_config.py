"""
Logging configuration for the questionnaire and document pipeline.

Provides structured logging with:
- JSON formatting for production
- Human-readable formatting for development
- Per-session and per-document context on every record
"""

import logging
import json
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

# Context variables for session tracking
session_id_var: ContextVar[Optional[str]] = ContextVar('session_id', default=None)
document_type_var: ContextVar[Optional[str]] = ContextVar('document_type', default=None)


class JsonFormatter(logging.Formatter):
    """
    JSON log formatter for structured logging.

    Outputs logs as JSON objects for easy parsing by log aggregators.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        session_id = session_id_var.get()
        if session_id:
            log_data["session_id"] = session_id

        document_type = document_type_var.get()
        if document_type:
            log_data["document_type"] = document_type

        # Add extra fields from the record
        if hasattr(record, 'extra_data'):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ReadableFormatter(logging.Formatter):
    """
    Human-readable log formatter for development.
    """

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m',
    }

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format log record for human readability."""
        level = f"{record.levelname:8s}"
        if self.use_color:
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            level = f"{color}{level}{self.COLORS['RESET']}"

        timestamp = datetime.now().strftime('%H:%M:%S.%f')[:-3]
        message = f"{timestamp} {level} [{record.name}] {record.getMessage()}"

        if hasattr(record, 'extra_data') and record.extra_data:
            extras = ' | '.join(f"{k}={v}" for k, v in record.extra_data.items())
            message += f" | {extras}"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class ContextLogger(logging.LoggerAdapter):
    """
    Logger adapter that includes context in all log messages.
    """

    def process(self, msg: str, kwargs: Dict) -> tuple:
        """Add context to log message."""
        extra = dict(kwargs.get('extra') or {})
        extra_data = dict(extra.get('extra_data') or {})

        session_id = session_id_var.get()
        if session_id:
            extra_data.setdefault('session_id', session_id)

        extra_data.update(self.extra)
        extra['extra_data'] = extra_data

        kwargs['extra'] = extra
        return msg, kwargs


@contextmanager
def log_context(session_id: Optional[str] = None, document_type: Optional[str] = None) -> Iterator[None]:
    """Attach a session id and/or document type to records logged inside the block."""
    tokens = []
    if session_id is not None:
        tokens.append((session_id_var, session_id_var.set(session_id)))
    if document_type is not None:
        tokens.append((document_type_var, document_type_var.set(document_type)))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[Union[str, Path]] = None
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, output JSON formatted logs
        log_file: Optional file path for log output
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    root_logger.handlers.clear()

    if json_output:
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = ReadableFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JsonFormatter())  # Always JSON for files
        root_logger.addHandler(file_handler)

    # pypdf warns on every slightly malformed template
    logging.getLogger("pypdf").setLevel(logging.ERROR)


def configure_from_settings(settings=None) -> None:
    """Configure logging from application settings."""
    if settings is None:
        from config.settings import get_settings
        settings = get_settings()

    configure_logging(
        level=settings.log_level,
        json_output=settings.log_json,
        log_file=settings.log_file,
    )


def get_logger(name: str, **extra) -> ContextLogger:
    """
    Get a context-aware logger.

    Args:
        name: Logger name (typically __name__)
        **extra: Additional context to include in all logs

    Returns:
        ContextLogger instance
    """
    base_logger = logging.getLogger(name)
    return ContextLogger(base_logger, extra)
