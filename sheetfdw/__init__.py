"""sheetfdw - expose a remote JSON spreadsheet as foreign table rows.

A read-only connector that fetches one JSON document per scan, buffers its
records, and materializes them into typed rows on demand.
"""

__version__ = "0.1.0"

# Public API
from sheetfdw.api import read_batch, scan_rows

# Core classes
from sheetfdw.core.batch import ArrowBatch
from sheetfdw.core.options import Context, Options, OptionsType
from sheetfdw.core.session import Session
from sheetfdw.core.types import Cell, Column, Row, TypeOid
from sheetfdw.fdw import SheetsFdw

# Exceptions
from sheetfdw.core.exceptions import (
    ConfigError,
    FdwError,
    NotSupportedError,
    ParseError,
    ProtocolError,
    TransportError,
    UnsupportedTypeError,
)

__all__ = [
    # Version
    "__version__",
    # Public API
    "read_batch",
    "scan_rows",
    # Core classes
    "SheetsFdw",
    "ArrowBatch",
    "Cell",
    "Column",
    "Context",
    "Options",
    "OptionsType",
    "Row",
    "Session",
    "TypeOid",
    # Exceptions
    "FdwError",
    "ConfigError",
    "TransportError",
    "ProtocolError",
    "ParseError",
    "UnsupportedTypeError",
    "NotSupportedError",
]
