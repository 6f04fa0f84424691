"""Logging setup with bearer token redaction.

Request logs include URLs and header summaries; the formatter below makes
sure a token never reaches a log sink in clear text.
"""

import logging
import re
import sys
from typing import Any, Dict, Optional

from ..config.settings import settings

SENSITIVE_PATTERNS = {
    "bearer_token": re.compile(r"Bearer\s+[A-Za-z0-9%._~+/=-]+", re.IGNORECASE),
    "access_token": re.compile(r"(access_token=)[^&\s]+", re.IGNORECASE),
}

SENSITIVE_HEADERS = {"authorization", "cookie", "set-cookie"}


def sanitize_string(value: str) -> str:
    """Redact tokens from a string.

    :param value: String to sanitize
    :type value: str
    :return: String with sensitive data redacted
    :rtype: str
    """
    if not value:
        return value
    value = SENSITIVE_PATTERNS["bearer_token"].sub("Bearer <REDACTED>", value)
    return SENSITIVE_PATTERNS["access_token"].sub(r"\1<REDACTED>", value)


def sanitize_headers(headers: Dict[str, Any]) -> Dict[str, Any]:
    """Sanitize HTTP headers for logging.

    :param headers: Mapping of header names to values
    :type headers: Dict[str, Any]
    :return: Copy of the headers with sensitive values redacted
    :rtype: Dict[str, Any]
    """
    sanitized = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            sanitized[key] = f"<REDACTED:length={len(str(value))}>"
        else:
            sanitized[key] = value
    return sanitized


class SanitizingFormatter(logging.Formatter):
    """Formatter that redacts tokens from the rendered message."""

    def format(self, record: logging.LogRecord) -> str:
        if record.args:
            try:
                record.msg = record.msg % record.args
                record.args = None
            except (TypeError, ValueError):
                pass
        record.msg = sanitize_string(str(record.msg))
        return super().format(record)


_LOGGING_CONFIGURED = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger with the sanitizing formatter.

    Calling this more than once is a no-op.

    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
        defaults to the configured ``LOG_LEVEL``
    :type level: Optional[str]
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        logging.getLogger(__name__).debug("Logging already configured")
        return

    if level is None:
        level = settings.log_level

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        SanitizingFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )
    # httpx logs full URLs at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _LOGGING_CONFIGURED = True
