"""Public Python API for running scans outside a database host.

These helpers drive a ``SheetsFdw`` through one full scan lifecycle, the way
a host would, and hand the rows back to the caller.
"""

from typing import Iterator, Mapping, Optional

from sheetfdw.core.batch import ArrowBatch
from sheetfdw.core.options import Context
from sheetfdw.core.types import Column, Row
from sheetfdw.fdw import SheetsFdw
from sheetfdw.transport.http import HttpTransport


def scan_rows(
    server_options: Mapping[str, str],
    table_options: Mapping[str, str],
    columns: list[Column],
    transport: Optional[HttpTransport] = None,
    limit: Optional[int] = None,
) -> Iterator[Row]:
    """Run one scan and yield its rows.

    ``end_scan`` runs even when the consumer stops early or a row fails.

    Args:
        server_options: Foreign server options (e.g., source, base_url)
        table_options: Foreign table options (e.g., sheet_id)
        columns: Target columns to materialize
        transport: HTTP transport, a default one is created if omitted
        limit: Stop after this many rows

    Yields:
        Row instances in source order

    Raises:
        FdwError: Any connector error, see sheetfdw.core.exceptions

    Example:
        >>> from sheetfdw import Column, TypeOid, scan_rows
        >>> columns = [Column(1, "id", TypeOid.I64), Column(2, "name", TypeOid.STRING)]
        >>> for row in scan_rows({}, {"sheet_id": "1XyZ"}, columns):
        ...     print(row.values())
    """
    ctx = Context(server_options, table_options, columns)
    fdw = SheetsFdw(ctx, transport=transport)
    try:
        fdw.begin_scan(ctx)
        try:
            produced = 0
            while limit is None or produced < limit:
                row = fdw.next_row(columns)
                if row is None:
                    break
                produced += 1
                yield row
        finally:
            fdw.end_scan(ctx)
    finally:
        # only close a transport we created ourselves
        if transport is None:
            fdw.close()


def read_batch(
    server_options: Mapping[str, str],
    table_options: Mapping[str, str],
    columns: list[Column],
    transport: Optional[HttpTransport] = None,
    limit: Optional[int] = None,
) -> ArrowBatch:
    """Run one scan and collect every row into an ArrowBatch.

    The batch schema follows the declared column types.
    """
    rows = list(scan_rows(server_options, table_options, columns, transport, limit))
    return ArrowBatch.from_rows(
        columns,
        rows,
        metadata={
            "row_count": len(rows),
            "source": server_options.get("source") or "gsheets",
        },
    )
