"""Table definition model: what a CREATE FOREIGN TABLE statement would carry."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from sheetfdw.core.exceptions import ConfigError
from sheetfdw.core.options import Context
from sheetfdw.core.type_mapping import parse_type_name
from sheetfdw.core.types import Column, TypeOid


class ColumnDefinition(BaseModel):
    """One target column."""

    name: str = Field(min_length=1, description="Column name")
    type: TypeOid = Field(description="Column type name (e.g., 'bigint', 'text')")
    num: Optional[int] = Field(
        default=None, ge=1, description="1-based position, defaults to list order"
    )

    @field_validator("type", mode="before")
    @classmethod
    def resolve_type_name(cls, value: Any) -> Any:
        # pydantic only collects ValueError into a ValidationError
        if isinstance(value, str):
            try:
                return parse_type_name(value)
            except ConfigError as e:
                raise ValueError(str(e)) from e
        return value


class TableDefinition(BaseModel):
    """A foreign table with its server options, table options and columns."""

    name: str = Field(default="foreign_table", description="Table name, used in logs")
    server: dict[str, str] = Field(default_factory=dict, description="Server options")
    table: dict[str, str] = Field(default_factory=dict, description="Table options")
    columns: list[ColumnDefinition] = Field(min_length=1, description="Target columns")

    @field_validator("server", "table", mode="before")
    @classmethod
    def stringify_options(cls, value: Any) -> Any:
        # option values are always text on the host side
        if isinstance(value, dict):
            return {str(k): "" if v is None else str(v) for k, v in value.items()}
        return value

    @model_validator(mode="after")
    def validate_unique_names(self):
        names = [column.name for column in self.columns]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate column names: {', '.join(duplicates)}")
        return self

    def to_columns(self) -> list[Column]:
        return [
            Column(
                num=definition.num if definition.num is not None else position,
                name=definition.name,
                type_oid=definition.type,
            )
            for position, definition in enumerate(self.columns, start=1)
        ]

    def to_context(self) -> Context:
        return Context(
            server_options=self.server,
            table_options=self.table,
            columns=self.to_columns(),
        )
