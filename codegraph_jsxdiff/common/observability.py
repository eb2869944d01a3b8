"""
Structured logging (structlog).

The first call to get_logger() configures logging from Settings
(JSXDIFF_LOG_LEVEL, JSXDIFF_LOG_JSON). Call configure_logging()
explicitly to override.
"""

import logging

import structlog
from structlog.processors import JSONRenderer

# Logger cache per name
_LOGGER_CACHE: dict[str, structlog.stdlib.BoundLogger] = {}
_INITIALIZED = False

PACKAGE_LOGGER = "codegraph_jsxdiff"
_HANDLER_MARK = "_jsxdiff_handler"


def configure_logging(level: str | None = None, json_format: bool | None = None) -> None:
    """
    Configure structured logging.

    Args:
        level: Log level name (None → settings.log_level)
        json_format: JSON output (None → settings.log_json)
    """
    global _INITIALIZED

    if level is None or json_format is None:
        from codegraph_jsxdiff.config import get_settings

        current = get_settings()
        level = level or current.log_level
        json_format = current.log_json if json_format is None else json_format

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # stdlib logging backs structlog; only the package logger is touched
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(getattr(h, _HANDLER_MARK, False) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(handler, _HANDLER_MARK, True)
        package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False

    _INITIALIZED = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger (configures logging on first call).

    Args:
        name: Logger name (usually __name__)
    """
    if not _INITIALIZED:
        configure_logging()

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = structlog.get_logger(name)
    return _LOGGER_CACHE[name]


def reset_logging() -> None:
    """Reset logging state (for tests)."""
    global _INITIALIZED
    _INITIALIZED = False
    _LOGGER_CACHE.clear()
    structlog.reset_defaults()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in package_logger.handlers if getattr(h, _HANDLER_MARK, False)]:
        package_logger.removeHandler(handler)
    package_logger.propagate = True
