"""Configuration models."""

from sheetfdw.models.definition import ColumnDefinition, TableDefinition
from sheetfdw.models.loader import load_definition
from sheetfdw.models.server_config import ServerConfig

__all__ = ["ColumnDefinition", "ServerConfig", "TableDefinition", "load_definition"]
