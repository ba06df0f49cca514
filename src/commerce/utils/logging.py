"""Logging configuration shared by the commerce and rides domains.

Standard library logging carries the handlers; structlog renders the records.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

# Log files are named <prefix>.log and <prefix>_error.log under LOG_DIR.
LOG_FILE_PREFIX = "cymelle"
DEFAULT_LOG_DIR = "logs"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_configured = False


def current_environment() -> str:
    """The deployment environment, falling back to the Protean config overlay."""
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """LOG_LEVEL if set, otherwise the default for the current environment."""
    default = LEVEL_BY_ENVIRONMENT.get(current_environment(), "INFO")
    return os.getenv("LOG_LEVEL", default).upper()


def _rotating_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging() -> None:
    """Route the root logger to stdout and to rotating files in LOG_DIR."""
    log_level = get_log_level()
    log_dir = Path(os.getenv("LOG_DIR", DEFAULT_LOG_DIR))
    log_dir.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(log_level)

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers = [
        console,
        _rotating_handler(log_dir / f"{LOG_FILE_PREFIX}.log", log_level),
        _rotating_handler(log_dir / f"{LOG_FILE_PREFIX}_error.log", logging.ERROR),
    ]

    # Framework chatter stays quiet below warnings.
    for noisy in ("protean", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def _renderer():
    if current_environment() in ("production", "staging"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=True, max_frames=2),
    )


def setup_structlog() -> None:
    """JSON lines in production and staging, Rich console output elsewhere."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            ),
            _renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(force: bool = False) -> None:
    """Configure all logging for the application. Runs once per process unless forced."""
    global _configured
    if _configured and not force:
        return

    setup_stdlib_logging()
    setup_structlog()
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind request-scoped values (method, path) onto every later log line."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
