"""Google Sheets source, read through the Visualization API JSON export."""

import logging
from typing import Any

from sheetfdw.core import coercion
from sheetfdw.core.exceptions import ProtocolError
from sheetfdw.core.options import Options
from sheetfdw.core.types import TypeOid
from sheetfdw.models.server_config import ServerConfig
from sheetfdw.sources.base import USER_AGENT, SourceProfile, find_records, parse_document
from sheetfdw.sources.registry import register_source
from sheetfdw.transport.http import Method, Request

logger = logging.getLogger(__name__)

# Anti-XSSI guard the service puts in front of the JSON body
RESPONSE_PREFIX = ")]}'\n"
ROWS_PATH = "table.rows"


@register_source("gsheets")
class GoogleSheetsSource(SourceProfile):
    """Reads a spreadsheet published as Visualization API JSON.

    Each record looks like ``{"c": [{"v": 1.0, "f": "1"}, {"v": "x"}, null]}``
    and cells are addressed by column position.
    """

    name = "gsheets"
    default_base_url = "https://docs.google.com/spreadsheets/d"
    required_table_options = ("sheet_id",)
    coercion_rules = {
        TypeOid.BOOL: coercion.to_bool,
        TypeOid.F64: coercion.to_f64,
        TypeOid.I64: coercion.to_i64,
        TypeOid.STRING: coercion.to_string,
        TypeOid.TIMESTAMP: coercion.gviz_to_timestamp,
        TypeOid.JSON: coercion.to_json,
    }

    def build_request(
        self, base_url: str, table_options: Options, server_config: ServerConfig
    ) -> Request:
        sheet_id = table_options.require("sheet_id")
        return Request(
            method=Method.GET,
            url=f"{base_url}/{sheet_id}/gviz/tq?tqx=out:json",
            headers=[
                ("user-agent", USER_AGENT),
                # makes the service answer with plain JSON instead of a JS callback
                ("x-datasource-auth", "true"),
            ],
        )

    def extract_records(self, body: str, table_options: Options) -> list[Any]:
        if not body.startswith(RESPONSE_PREFIX):
            raise ProtocolError(
                "invalid response",
                context={"reason": "missing response prefix"},
            )
        document = parse_document(body[len(RESPONSE_PREFIX):])
        return find_records(document, ROWS_PATH)
