"""Column descriptors, typed cells and rows exchanged with the host."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional


class TypeOid(str, Enum):
    """Column types the host can declare for a foreign table column."""

    BOOL = "bool"
    I8 = "i8"
    I16 = "i16"
    F32 = "f32"
    I32 = "i32"
    F64 = "f64"
    I64 = "i64"
    NUMERIC = "numeric"
    STRING = "string"
    DATE = "date"
    TIMESTAMP = "timestamp"
    TIMESTAMPTZ = "timestamptz"
    JSON = "json"
    UUID = "uuid"


@dataclass(frozen=True)
class Column:
    """Target column descriptor supplied by the host for one query.

    Attributes:
        num: 1-based position of the column in the foreign table
        name: Column name
        type_oid: Declared column type
    """

    num: int
    name: str
    type_oid: TypeOid


@dataclass(frozen=True)
class Cell:
    """A present, typed cell value. Absent cells are represented by ``None``."""

    type_oid: TypeOid
    value: Any


@dataclass
class Row:
    """Output row: one optional cell per requested column, in request order."""

    cells: list[Optional[Cell]] = field(default_factory=list)

    def push(self, cell: Optional[Cell]) -> None:
        self.cells.append(cell)

    def clear(self) -> None:
        self.cells.clear()

    def values(self) -> list[Any]:
        """Return plain Python values, with ``None`` for absent cells."""
        return [cell.value if cell is not None else None for cell in self.cells]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Optional[Cell]]:
        return iter(self.cells)


class _Missing:
    """Marker for a source cell that does not exist at the requested address."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()
