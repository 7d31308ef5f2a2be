"""
Logging configuration for the gateway.

Every record carries the id of the request it was emitted under, or
"-" outside a request. Never logs request bodies, passwords or the
Moodle token.
"""

import logging
import sys
from contextvars import ContextVar

LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | rid=%(request_id)s | %(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Per-request access lines come from the gateway middleware instead.
QUIET_LOGGERS = ("uvicorn.access", "httpcore")

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Stamps the current request id onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def configure_logging(level: str = "INFO", http_client_level: str = "WARNING") -> None:
    """Configure logging for the gateway process.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        http_client_level: Level of the ``httpx`` logger, which reports
            every Moodle call at INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(RequestIdFilter())

    logging.getLogger("httpx").setLevel(
        getattr(logging, http_client_level.upper(), logging.WARNING)
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
