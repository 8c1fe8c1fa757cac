"""Foreign data wrapper exposing a remote JSON document as table rows.

The host creates one ``SheetsFdw`` per foreign server and drives it through
``begin_scan`` -> ``iter_scan``* -> ``end_scan``. Exactly one HTTP request is
made per scan; records are buffered in memory until the scan ends.
"""

import logging
from typing import Optional

from sheetfdw.core.coercion import coerce_cell
from sheetfdw.core.exceptions import NotSupportedError
from sheetfdw.core.options import Context, OptionsType
from sheetfdw.core.session import Session
from sheetfdw.core.types import Cell, Column, Row
from sheetfdw.core.version import HOST_VERSION_REQUIREMENT, check_host_version
from sheetfdw.models.server_config import ServerConfig
from sheetfdw.sources import get_source
from sheetfdw.transport.http import HttpTransport

logger = logging.getLogger(__name__)


class SheetsFdw:
    """Read-only connector instance.

    Not safe for concurrent scans: the host runs one scan lifecycle at a time
    per instance, and a second ``begin_scan`` before ``end_scan`` is rejected.
    """

    def __init__(self, ctx: Context, transport: Optional[HttpTransport] = None):
        """Initialize from server options.

        Args:
            ctx: Host context; only server options are read here
            transport: HTTP transport, a default one is created if omitted

        Raises:
            ConfigError: If server options are invalid or the source is unknown
        """
        self.server_config = ServerConfig.from_options(ctx.get_options(OptionsType.SERVER))
        self.source = get_source(self.server_config.source)
        self.session = Session(
            base_url=self.server_config.base_url or self.source.default_base_url
        )
        self._transport = transport or HttpTransport()

    @staticmethod
    def host_version_requirement() -> str:
        return HOST_VERSION_REQUIREMENT

    @classmethod
    def check_host_version(cls, host_version: str) -> None:
        check_host_version(host_version, cls.host_version_requirement())

    def begin_scan(self, ctx: Context) -> None:
        """Fetch the source document and buffer its records.

        Raises:
            NotSupportedError: If a scan is already active
            ConfigError: If a required table option is missing
            TransportError: If the request fails
            ProtocolError: If the response envelope is not as expected
            ParseError: If the response body is not valid JSON
        """
        if self.session.active:
            raise NotSupportedError(
                "scan already in progress, re-entrant scans are not supported",
                context={"source": self.source.name},
            )

        table_options = ctx.get_options(OptionsType.TABLE)
        request = self.source.build_request(
            self.session.base_url, table_options, self.server_config
        )
        response = self._transport.get(request)
        records = self.source.extract_records(response.body, table_options)

        self.session.load(records)
        logger.info(
            "We got response array length: %d",
            len(records),
            extra={"context": {"source": self.source.name}},
        )

    def next_row(self, columns: list[Column]) -> Optional[Row]:
        """Materialize the record under the cursor.

        Args:
            columns: Requested target columns, in output order

        Returns:
            The next Row, or None when all records have been consumed

        Raises:
            UnsupportedTypeError: If a column type has no coercion rule
        """
        if self.session.exhausted:
            return None

        record = self.session.current()
        row = Row()
        for column in columns:
            value = self.source.locate_cell(record, column)
            row.push(coerce_cell(column, value, self.source.coercion_rules))

        self.session.advance()
        return row

    def iter_scan(self, ctx: Context, row: Row) -> Optional[int]:
        """Fill ``row`` with the next record; host-facing form of next_row.

        Returns:
            0 when a row was produced, None at end of data
        """
        next_row = self.next_row(ctx.get_columns())
        if next_row is None:
            return None
        row.clear()
        for cell in next_row:
            row.push(cell)
        return 0

    def re_scan(self, ctx: Context) -> None:
        raise NotSupportedError("re_scan on foreign table is not supported")

    def end_scan(self, ctx: Context) -> None:
        self.session.clear()

    def begin_modify(self, ctx: Context) -> None:
        raise NotSupportedError("modify on foreign table is not supported")

    # Unreachable while begin_modify refuses to start a modify transaction

    def insert(self, ctx: Context, row: Row) -> None:
        pass

    def update(self, ctx: Context, rowid: Cell, row: Row) -> None:
        pass

    def delete(self, ctx: Context, rowid: Cell) -> None:
        pass

    def end_modify(self, ctx: Context) -> None:
        pass

    def close(self) -> None:
        self._transport.close()
