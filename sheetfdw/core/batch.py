"""Arrow batch holding the rows of a finished scan."""

from typing import Any

import pyarrow as pa

from sheetfdw.core.type_mapping import to_arrow_type
from sheetfdw.core.types import Column, Row


class ArrowBatch:
    """Arrow-based batch implementation using PyArrow.

    Columns keep the Arrow type derived from each column's declared type, so
    an all-absent column still has a concrete type.
    """

    def __init__(self, table: pa.Table, metadata: dict[str, Any] | None = None):
        """Initialize from Arrow table.

        Args:
            table: PyArrow Table containing the data
            metadata: Optional metadata dictionary

        Raises:
            ValueError: If table has zero columns
        """
        if len(table.column_names) == 0:
            raise ValueError("table cannot have zero columns")

        self._table = table
        self._metadata = metadata or {}

    @classmethod
    def from_rows(
        cls,
        columns: list[Column],
        rows: list[Row],
        metadata: dict[str, Any] | None = None,
    ) -> "ArrowBatch":
        """Create ArrowBatch from target columns and materialized rows.

        Args:
            columns: Target columns, in the order cells appear in each row
            rows: Rows produced by a scan
            metadata: Optional metadata dictionary

        Returns:
            ArrowBatch instance

        Raises:
            ValueError: If columns is empty or a row length doesn't match
        """
        if len(columns) == 0:
            raise ValueError("columns cannot be empty")

        schema = pa.schema(
            [pa.field(column.name, to_arrow_type(column.type_oid)) for column in columns]
        )

        values_by_column: list[list[Any]] = [[] for _ in columns]
        for i, row in enumerate(rows):
            if len(row) != len(columns):
                raise ValueError(
                    f"Row {i} length {len(row)} does not match column count {len(columns)}"
                )
            for position, value in enumerate(row.values()):
                values_by_column[position].append(value)

        arrays = [
            pa.array(values, type=field.type)
            for values, field in zip(values_by_column, schema)
        ]
        return cls(pa.Table.from_arrays(arrays, schema=schema), metadata)

    @property
    def columns(self) -> list[str]:
        """Return column names from Arrow schema."""
        return self._table.column_names

    @property
    def rows(self) -> list[list[Any]]:
        """Return rows as list of lists in column order."""
        column_names = self.columns
        return [[row[col] for col in column_names] for row in self._table.to_pylist()]

    @property
    def row_count(self) -> int:
        return len(self._table)

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata

    def to_arrow(self) -> pa.Table:
        """Return underlying Arrow table for zero-copy operations."""
        return self._table
