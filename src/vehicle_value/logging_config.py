"""
Structured JSON Logging Configuration for the vehicle value code hook

Single-line JSON in Lambda (CloudWatch-friendly), coloured lines for local
development. Logs can be filtered with jq.
"""
import json
import logging
import os
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# LogRecord attributes that are not user data
_STANDARD_ATTRS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'taskName', 'getMessage',
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Every field passed via extra={} is included when it is JSON-serializable.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            'timestamp': _utc_now().isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        for attr_name, attr_value in record.__dict__.items():
            if attr_name in _STANDARD_ATTRS or attr_name in log_data:
                continue
            if isinstance(attr_value, (str, int, float, bool, type(None), dict, list)):
                log_data[attr_name] = attr_value

        return json.dumps(log_data, ensure_ascii=False, default=str)


class PrettyJSONFormatter(logging.Formatter):
    """
    Readable formatter for development.

    Same fields as JSONFormatter, rendered on one coloured line.
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m',       # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']

        parts = [
            f"{color}[{record.levelname}]{reset}",
            _utc_now().strftime('%H:%M:%S.%f')[:-3],
            f"{record.name}:",
            record.getMessage(),
        ]

        extra_parts = []
        for key in ('request_id', 'intent_name', 'status_code', 'duration_ms'):
            value = getattr(record, key, None)
            if value is not None:
                extra_parts.append(f"{key}={value}")
        if extra_parts:
            parts.append(f"({', '.join(extra_parts)})")

        result = ' '.join(parts)
        if record.exc_info:
            result += '\n' + self.formatException(record.exc_info)
        return result


def setup_logging(
    app_name: str = 'vehicle_value',
    log_level: str = 'INFO',
    log_format: str = 'json',
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure structured logging for the application.

    Module loggers under app_name (vehicle_value.dispatch, ...) inherit the
    handlers configured here.

    Args:
        app_name: Name of the application logger
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format type ('json' or 'pretty')
        log_file: Optional file path for file-based logging

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logging('vehicle_value', 'INFO', 'json')
        >>> logger.info('Hook ready', extra={'intent_name': 'VehicleValue'})
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(app_name)
    logger.setLevel(numeric_level)
    logger.handlers = []  # Clear any existing handlers

    formatter = PrettyJSONFormatter() if log_format == 'pretty' else JSONFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(numeric_level)
            # Always use JSON for file logs
            file_handler.setFormatter(JSONFormatter())
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Failed to setup file logging: {e}")

    # Don't propagate to root logger (Lambda installs its own root handler)
    logger.propagate = False

    return logger


def generate_request_id() -> str:
    """
    Generate a short request ID for tracing.

    Returns:
        8-character unique identifier
    """
    return str(uuid.uuid4())[:8]


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    request_id: Optional[str] = None,
    **kwargs
):
    """
    Log with additional context fields.

    Example:
        >>> log_with_context(
        ...     logger, logging.INFO, "Directive built",
        ...     request_id="abc123", dialog_action="Delegate"
        ... )
    """
    extra: Dict[str, Any] = {}
    if request_id:
        extra['request_id'] = request_id
    extra.update(kwargs)
    logger.log(level, message, extra=extra)
