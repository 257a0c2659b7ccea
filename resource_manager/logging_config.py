"""
Centralized logging configuration.

Development gets a readable one-line format, production gets JSON lines that
log aggregators can parse. Both carry the request id and the authenticated
user id when a request context is active.
"""

import json
import logging
import sys
import time
import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from flask import Flask, g, has_request_context, request

PACKAGE_LOGGER = 'resource_manager'

_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'pathname', 'process',
    'processName', 'relativeCreated', 'stack_info', 'exc_info', 'exc_text',
    'thread', 'threadName', 'message', 'taskName', 'request_id', 'user_id',
}


def generate_request_id() -> str:
    """Generate a short request id"""
    return uuid.uuid4().hex[:8]


def get_request_id() -> str:
    if has_request_context():
        return g.get('request_id', '')
    return ''


def get_user_id() -> str:
    if has_request_context():
        current_user = g.get('current_user')
        if current_user:
            return str(current_user.get('id', ''))
    return ''


class ContextualFormatter(logging.Formatter):
    """Readable formatter that adds request_id and user_id to every record"""

    def format(self, record: logging.LogRecord) -> str:
        record.request_id = get_request_id() or '-'
        record.user_id = get_user_id() or '-'
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging in production"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        request_id = get_request_id()
        if request_id:
            log_data['request_id'] = request_id

        user_id = get_user_id()
        if user_id:
            log_data['user_id'] = user_id

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': traceback.format_exception(*record.exc_info) if record.exc_info[0] else None,
            }

        # Fields passed through ``extra=``
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith('_'):
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging(app: Flask) -> logging.Logger:
    """Configure the package logger from the app config and hook request logging"""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(sys.stdout)
    if app.config.get('LOG_JSON'):
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ContextualFormatter(
            '%(asctime)s | %(levelname)-8s | [%(request_id)s] [%(user_id)s] | '
            '%(name)s:%(lineno)d | %(message)s'
        ))
    logger.addHandler(handler)

    request_logger = logging.getLogger(f'{PACKAGE_LOGGER}.requests')

    @app.before_request
    def start_request_timer():
        g.request_id = request.headers.get('X-Request-ID') or generate_request_id()
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.get('request_started')
        duration_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        request_logger.info(
            f"HTTP {request.method} {request.path} - {response.status_code} ({duration_ms:.2f}ms)",
            extra={
                'event_type': 'http_request',
                'http_method': request.method,
                'http_path': request.path,
                'http_status': response.status_code,
                'duration_ms': duration_ms,
            }
        )
        response.headers['X-Request-ID'] = g.get('request_id', '')
        return response

    return logger


def log_auth_event(logger: logging.Logger, event: str, success: bool,
                   user_email: str = None, reason: str = None) -> None:
    """Log authentication events, failures at WARNING"""
    level = logging.INFO if success else logging.WARNING
    logger.log(
        level,
        f"Auth {event}: {'success' if success else 'failed'}" +
        (f" - {user_email}" if user_email else "") +
        (f" - {reason}" if reason else ""),
        extra={
            'event_type': 'auth',
            'auth_event': event,
            'auth_success': success,
            'user_email': user_email,
            'failure_reason': reason,
        }
    )
