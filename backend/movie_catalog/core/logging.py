"""
Movie Catalog API - Logging Configuration
=========================================

Structured logging on top of the standard library with optional
rotating file output.

Usage:
    from movie_catalog.core.logging import get_logger, setup_logging

    # Setup logging (call once at startup)
    setup_logging(settings)

    # Get logger for module
    logger = get_logger(__name__)
    logger.info("Hello world")
"""

import sys
import json
import logging
import logging.handlers
from datetime import datetime, timezone
from typing import Optional
from pathlib import Path
from contextvars import ContextVar

import structlog
from structlog.stdlib import LoggerFactory, add_logger_name, add_log_level
from structlog.dev import ConsoleRenderer
from structlog.processors import TimeStamper, StackInfoRenderer, format_exc_info

from movie_catalog.core.config import Settings

# ==========================================
# CONTEXT VARIABLES FOR REQUEST TRACKING
# ==========================================

request_id_var: ContextVar[Optional[str]] = ContextVar('request_id', default=None)

SENSITIVE_KEYS = {'password', 'secret', 'token', 'authorization', 'cookie', 'database_url'}


# ==========================================
# CUSTOM STRUCTLOG PROCESSORS
# ==========================================

def add_request_context(logger, method_name, event_dict):
    """Add request context to log entries"""
    request_id = request_id_var.get()
    if request_id:
        event_dict['request_id'] = request_id
    return event_dict


def make_app_context_processor(settings: Settings):
    """Build a processor that stamps application identity on every entry"""

    def add_app_context(logger, method_name, event_dict):
        event_dict.setdefault('app_name', settings.APP_NAME)
        event_dict.setdefault('app_version', settings.APP_VERSION)
        event_dict.setdefault('environment', settings.ENVIRONMENT)
        return event_dict

    return add_app_context


def censor_sensitive_data(logger, method_name, event_dict):
    """Mask sensitive values in log entries"""

    def _censor(obj, max_depth=5):
        if max_depth <= 0:
            return obj
        if isinstance(obj, dict):
            return {
                k: "***CENSORED***" if any(sens in str(k).lower() for sens in SENSITIVE_KEYS)
                else _censor(v, max_depth - 1)
                for k, v in obj.items()
            }
        if isinstance(obj, (list, tuple)):
            return type(obj)(_censor(item, max_depth - 1) for item in obj)
        return obj

    return _censor(event_dict)


# ==========================================
# CUSTOM FORMATTERS
# ==========================================

class JSONFormatter(logging.Formatter):
    """JSON formatter for file logs"""

    def format(self, record):
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info),
            }

        request_id = request_id_var.get()
        if request_id:
            log_entry['request_id'] = request_id

        return json.dumps(log_entry, default=str, ensure_ascii=False)


# ==========================================
# FILE HANDLERS WITH ROTATION
# ==========================================

def parse_size(max_size: str) -> int:
    """Convert a size such as "100MB" to bytes"""
    size_multipliers = {'KB': 1024, 'MB': 1024**2, 'GB': 1024**3}
    size_str = max_size.strip().upper()

    for suffix, multiplier in size_multipliers.items():
        if size_str.endswith(suffix):
            return int(size_str[:-len(suffix)]) * multiplier
    return int(size_str)


def create_file_handler(settings: Settings) -> logging.Handler:
    """Create a rotating file handler according to LOG_ROTATION"""
    log_path = Path(settings.LOG_FILE)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    if settings.LOG_ROTATION == "size":
        handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=parse_size(settings.LOG_MAX_SIZE),
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
    else:
        handler = logging.handlers.TimedRotatingFileHandler(
            filename=log_path,
            when="midnight" if settings.LOG_ROTATION == "daily" else "W0",
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        handler.suffix = "%Y-%m-%d"

    # Always use JSON format for file logs
    handler.setFormatter(JSONFormatter())
    return handler


# ==========================================
# LOGGING SETUP
# ==========================================

def setup_logging(settings: Settings) -> None:
    """Setup structured logging"""

    processors = [
        add_request_context,
        make_app_context_processor(settings),
        censor_sensitive_data,
        add_logger_name,
        add_log_level,
        TimeStamper(fmt="iso"),
        StackInfoRenderer(),
        format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    elif settings.LOG_FORMAT == "structured":
        processors.append(ConsoleRenderer(colors=sys.stdout.isatty()))
    else:  # simple
        processors.append(ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Standard library logging
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    if settings.LOG_FORMAT == "simple":
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    else:
        # structlog has already rendered the event
        console_handler.setFormatter(logging.Formatter('%(message)s'))
    root_logger.addHandler(console_handler)

    if settings.LOG_FILE:
        root_logger.addHandler(create_file_handler(settings))

    # Quieter third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    if settings.DB_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
    else:
        logging.getLogger("sqlalchemy").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance for the given name"""
    return structlog.get_logger(name)


# ==========================================
# CONTEXT MANAGERS FOR REQUEST TRACKING
# ==========================================

class LogContext:
    """Bind a request id to every log entry emitted inside the block"""

    def __init__(self, request_id: Optional[str]):
        self.request_id = request_id
        self.token = None

    def __enter__(self):
        self.token = request_id_var.set(self.request_id)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        request_id_var.reset(self.token)


# ==========================================
# STRUCTURED LOGGING HELPERS
# ==========================================

def log_api_request(method: str, path: str, status_code: int, duration: float):
    """Log API request with structured data"""

    api_logger = get_logger("api")

    log_data = {
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": round(duration * 1000, 2),
    }

    # Determine log level based on status code
    if status_code >= 500:
        api_logger.error("API request failed", **log_data)
    elif status_code >= 400:
        api_logger.warning("API request error", **log_data)
    else:
        api_logger.info("API request completed", **log_data)


__all__ = [
    "setup_logging",
    "get_logger",
    "LogContext",
    "log_api_request",
    "request_id_var",
    "JSONFormatter",
    "parse_size",
]
