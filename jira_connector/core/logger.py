"""
Structured logging for HTTP traffic and connector events.

Provides JSON-formatted logs with timestamps and structured fields. The
library only emits records; handlers are attached by the application through
configure_logging().
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional, Union

LOGGER_NAME = "jira_connector"

_installed_handler: Optional[logging.Handler] = None

# Attributes every LogRecord carries; anything else arrived through ``extra``
RECORD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', None, None))) | {'message', 'asctime'}


class StructuredFormatter(logging.Formatter):
    """Render a record as one JSON object.

    The object holds timestamp, level, event and logger, followed by every
    field passed through ``extra``. Values JSON cannot encode are written
    with ``str()``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "event": record.getMessage(),
            "logger": record.name,
        }
        log_data.update(
            (key, value) for key, value in vars(record).items() if key not in RECORD_ATTRS
        )
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


class StructuredLogger:
    """Structured logger wrapper with convenience methods."""

    def __init__(self, name: str = LOGGER_NAME):
        """Initialize structured logger.

        Args:
            name: Logger name (a child of "jira_connector")
        """
        self._logger = logging.getLogger(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def info(self, event: str, **kwargs: Any) -> None:
        self._logger.info(event, extra=kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._logger.warning(event, extra=kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._logger.error(event, extra=kwargs)

    def debug(self, event: str, **kwargs: Any) -> None:
        self._logger.debug(event, extra=kwargs)

    def log_request(
        self,
        method: str,
        url: str,
        duration_ms: float,
        status_code: Optional[int] = None,
        transport: Optional[str] = None,
        error: Optional[str] = None
    ) -> None:
        """Log one HTTP exchange with Jira.

        Args:
            method: HTTP verb
            url: Request URL including the query string
            duration_ms: Round trip duration in milliseconds
            status_code: Response status, None when no response arrived
            transport: Name of the transport that sent the request
            error: Error description for failed calls
        """
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        self._logger.debug(
            "http_request",
            extra={
                "method": method,
                "url": url,
                "status_code": status_code,
                "duration_ms": round(duration_ms, 2),
                "transport": transport,
                "success": error is None,
                "error": error
            }
        )


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    json_format: bool = True,
    stream: Any = None
) -> logging.Logger:
    """Attach a console handler to the library logger.

    A handler installed by an earlier call is replaced; handlers the
    application attached itself are left in place.

    Args:
        level: Logging level (name or number)
        json_format: Use StructuredFormatter; plain text otherwise
        stream: Output stream, stdout by default

    Returns:
        The configured "jira_connector" logger
    """
    global _installed_handler

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    _installed_handler = handler
    return logger


def get_logger(name: Optional[str] = None) -> StructuredLogger:
    """Return a StructuredLogger under the library namespace."""
    return StructuredLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)
