"""Structured logging configuration for sheetfdw."""

import logging
import sys
from typing import Optional

from json_log_formatter import JSONFormatter


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    table_name: Optional[str] = None,
) -> None:
    """Configure logging for sheetfdw.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; otherwise use normal format
        table_name: Optional foreign table name to include in every record
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("sheetfdw")
    logger.setLevel(log_level)
    logger.handlers.clear()

    # stdout carries scan output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if json_format:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = StructuredFormatter()
    handler.setFormatter(formatter)

    if table_name:
        handler.addFilter(_TableNameFilter(table_name))

    logger.addHandler(handler)


class _TableNameFilter(logging.Filter):
    def __init__(self, table_name: str):
        super().__init__()
        self.table_name = table_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.table_name = self.table_name
        return True


class StructuredFormatter(logging.Formatter):
    """Structured formatter that adds context to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with context."""
        context = getattr(record, "context", {})

        parts = [f"[{record.levelname}]"]

        if hasattr(record, "table_name"):
            parts.append(f"table={record.table_name}")

        for key, value in context.items():
            parts.append(f"{key}={value}")

        parts.append(record.getMessage())

        return " ".join(parts)
