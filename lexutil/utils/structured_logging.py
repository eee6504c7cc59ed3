"""
Structured Logging Module
Provides JSON-formatted logging for better integration with log aggregation tools
"""

import json
import logging
from typing import Any

from lexutil.modules.rendering import munge_chars


class JSONFormatter(logging.Formatter):
    """
    Custom formatter that outputs log records as JSON.

    Diagnostics attach their source location through
    `extra={"extra_fields": {...}}`; those fields are merged into the
    top-level JSON object so a log query can filter on line or column
    directly.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as JSON.

        Args:
            record: Python logging.LogRecord to format

        Returns:
            JSON string with structured log data
        """
        # Base log data that's always included
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Include exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Include any extra fields added via logger.info("msg", extra={"extra_fields": {...}})
        if hasattr(record, "extra_fields"):
            log_data.update({
                k: self._sanitize_value(v)
                for k, v in record.extra_fields.items()
            })

        return json.dumps(log_data, default=str)

    @staticmethod
    def _sanitize_value(value: Any) -> Any:
        """
        Render string values with munge_chars.

        Source snippets often hold tabs, escape sequences or non-ASCII text.
        Munging keeps them one character per position, so an offset recorded
        next to the snippet still lines up with it.

        Args:
            value: Field value

        Returns:
            The munged string, or value unchanged if it is not a str
        """
        if isinstance(value, str):
            return munge_chars(value)
        return value
