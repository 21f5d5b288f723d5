import logging
from typing import Any, Mapping

from glowboard.core.config import get_settings

SENSITIVE_KEYS = ("password", "token", "api_key", "apikey", "secret", "key")
REDACTED = "[REDACTED]"


def sanitize_for_log(data: Any) -> Any:
    """
    Return a shallow copy of a mapping with sensitive values masked.
    Non-mapping values are returned unchanged.
    """
    if not isinstance(data, Mapping):
        return data
    return {
        k: (REDACTED if str(k).lower() in SENSITIVE_KEYS and v else v)
        for k, v in data.items()
    }


class RedactingFilter(logging.Filter):
    """Masks sensitive keys in mapping arguments passed to a log call."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, Mapping):
            record.args = sanitize_for_log(record.args)
        elif isinstance(record.args, tuple):
            record.args = tuple(sanitize_for_log(arg) for arg in record.args)
        return True


def configure_logging(level: str = None) -> None:
    """
    Configure root logging for the API process.
    """
    level = level or get_settings().LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    redacting_filter = RedactingFilter()
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, RedactingFilter) for f in handler.filters):
            handler.addFilter(redacting_filter)
