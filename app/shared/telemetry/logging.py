"""Stdout logging with the request ID stamped on every record."""

import logging
import sys

from app.core.config import get_settings
from app.shared.context import get_request_id

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"

# Chatty third-party loggers held at WARNING regardless of DEBUG.
_QUIET_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore", "botocore", "boto3")


class RequestIdFilter(logging.Filter):
    """Set record.request_id from the request context ('-' outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


def setup_logging() -> None:
    """Install the stdout handler; DEBUG when settings.debug, else INFO."""
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
