"""Per-connector session state for a single active scan."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Session:
    """Mutable state owned by one connector instance.

    ``base_url`` is configuration and lives as long as the connector.
    ``source_records`` and ``cursor`` only live for the duration of one scan.
    Invariant: ``0 <= cursor <= len(source_records)``.
    """

    base_url: str
    source_records: list[Any] = field(default_factory=list)
    cursor: int = 0
    active: bool = False

    def load(self, records: list[Any]) -> None:
        """Buffer freshly fetched records and start reading from the first one."""
        self.source_records = list(records)
        self.cursor = 0
        self.active = True

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.source_records)

    def current(self) -> Any:
        """Return the record under the cursor.

        Raises:
            IndexError: If all records have been consumed
        """
        if self.exhausted:
            raise IndexError("no record under cursor")
        return self.source_records[self.cursor]

    def advance(self) -> None:
        if not self.exhausted:
            self.cursor += 1

    def clear(self) -> None:
        """Release buffered records; ``base_url`` is kept for the next scan."""
        self.source_records = []
        self.cursor = 0
        self.active = False
