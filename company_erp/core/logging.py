"""
Logging Configuration and Utilities

Structured logging built on structlog, rendered either as key/value text or
as JSON through python-json-logger.
"""

import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog
from pythonjsonlogger.json import JsonFormatter

from company_erp.config.settings import Settings

# Context variable for request tracking
request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)

SENSITIVE_KEYS = (
    'password', 'token', 'secret', 'authorization', 'cookie', 'credentials'
)


class RequestContextProcessor:
    """Add request context to log records"""

    def __init__(self, environment: str):
        self.environment = environment

    def __call__(self, logger, method_name, event_dict):
        req_id = request_id.get()
        if req_id:
            event_dict['request_id'] = req_id

        event_dict['timestamp'] = datetime.now(timezone.utc).isoformat()
        event_dict['service'] = 'company-erp'
        event_dict['environment'] = self.environment
        return event_dict


class SecurityLogProcessor:
    """Mask sensitive values before they are rendered"""

    def __call__(self, logger, method_name, event_dict):
        self._sanitize_event_dict(event_dict)
        return event_dict

    def _sanitize_event_dict(self, event_dict: Dict[str, Any]):
        for key in list(event_dict.keys()):
            if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                event_dict[key] = '[REDACTED]'
            elif isinstance(event_dict[key], dict):
                self._sanitize_event_dict(event_dict[key])


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter for structured logging"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


class LoggingConfig:
    """Centralized logging configuration"""

    @staticmethod
    def configure_structured_logging(settings: Settings):
        """Configure structlog to hand events to the standard library"""
        processors = [
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            RequestContextProcessor(settings.ENVIRONMENT),
            SecurityLogProcessor(),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]

        if settings.LOG_FORMAT == "json":
            # Event dict becomes LogRecord extras for the JSON formatter.
            processors.append(structlog.stdlib.render_to_log_kwargs)
        else:
            processors.append(structlog.processors.KeyValueRenderer(
                key_order=['timestamp', 'level', 'logger', 'event'],
                drop_missing=True,
            ))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
            context_class=dict,
            cache_logger_on_first_use=False,
        )

    @staticmethod
    def configure_standard_logging(settings: Settings):
        """Configure standard Python logging"""
        level = getattr(logging, settings.LOG_LEVEL)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        if settings.LOG_FORMAT == "json":
            formatter = CustomJsonFormatter('%(asctime)s %(name)s %(levelname)s %(message)s')
        else:
            formatter = logging.Formatter('%(message)s')

        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        LoggingConfig._configure_library_loggers()

    @staticmethod
    def _configure_library_loggers():
        """Reduce noise from external libraries"""
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        logging.getLogger("stripe").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to ``name``."""
    return structlog.stdlib.get_logger(name)


def setup_logging(settings: Settings) -> None:
    """Initialize logging configuration"""
    LoggingConfig.configure_standard_logging(settings)
    LoggingConfig.configure_structured_logging(settings)

    get_logger(__name__).info(
        "logging_initialized",
        log_level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
    )


__all__ = [
    'get_logger',
    'setup_logging',
    'LoggingConfig',
    'request_id',
]
