"""Typed option lookup and the per-call context handed over by the host."""

from enum import Enum
from typing import Mapping, Optional

from sheetfdw.core.exceptions import ConfigError
from sheetfdw.core.types import Column


class OptionsType(str, Enum):
    """Scope an option was declared in."""

    SERVER = "server"
    TABLE = "table"


class Options:
    """Read-only key/value options for one scope."""

    def __init__(
        self,
        options_type: OptionsType,
        values: Optional[Mapping[str, str]] = None,
    ):
        self.options_type = options_type
        self._values = dict(values or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def require(self, key: str) -> str:
        """Return the value for ``key``.

        Raises:
            ConfigError: If the option is missing or empty
        """
        value = self._values.get(key)
        if value is None or value == "":
            raise ConfigError(
                f"required option '{key}' is not specified",
                context={"scope": self.options_type.value, "option": key},
            )
        return value

    def require_or(self, key: str, default: str) -> str:
        value = self._values.get(key)
        if value is None or value == "":
            return default
        return value

    def to_dict(self) -> dict[str, str]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values


class Context:
    """Everything a lifecycle call can see: options per scope and target columns."""

    def __init__(
        self,
        server_options: Optional[Mapping[str, str]] = None,
        table_options: Optional[Mapping[str, str]] = None,
        columns: Optional[list[Column]] = None,
    ):
        self._options = {
            OptionsType.SERVER: Options(OptionsType.SERVER, server_options),
            OptionsType.TABLE: Options(OptionsType.TABLE, table_options),
        }
        self._columns = list(columns or [])

    def get_options(self, options_type: OptionsType) -> Options:
        return self._options[options_type]

    def get_columns(self) -> list[Column]:
        return list(self._columns)
