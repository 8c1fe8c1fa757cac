"""Generic JSON API source: one GET per scan, records are JSON objects."""

from typing import Any

from sheetfdw.core import coercion
from sheetfdw.core.options import Options
from sheetfdw.core.types import TypeOid
from sheetfdw.models.server_config import ServerConfig
from sheetfdw.sources.base import USER_AGENT, SourceProfile, find_records, parse_document
from sheetfdw.sources.registry import register_source
from sheetfdw.transport.http import Method, Request

ROOT_PATH = "$"


@register_source("json_api")
class JsonApiSource(SourceProfile):
    """Reads ``{base_url}/{object}``, records are addressed by column name.

    The response is either a JSON array of records or an object holding the
    array at the table option ``rows_path`` (a JSONPath expression).
    """

    name = "json_api"
    default_base_url = "https://api.github.com"
    required_table_options = ("object",)
    coercion_rules = {
        TypeOid.BOOL: coercion.to_bool,
        TypeOid.F64: coercion.to_f64,
        TypeOid.I32: coercion.to_i32,
        TypeOid.I64: coercion.to_i64,
        TypeOid.STRING: coercion.to_string,
        TypeOid.TIMESTAMP: coercion.to_timestamp,
        TypeOid.TIMESTAMPTZ: coercion.to_timestamptz,
        TypeOid.JSON: coercion.to_json_document,
    }

    def build_request(
        self, base_url: str, table_options: Options, server_config: ServerConfig
    ) -> Request:
        obj = table_options.require("object").lstrip("/")
        headers = [("user-agent", USER_AGENT)]
        if server_config.access_token is not None:
            headers.append(
                ("authorization", f"Bearer {server_config.access_token.get_secret_value()}")
            )
        return Request(method=Method.GET, url=f"{base_url}/{obj}", headers=headers)

    def extract_records(self, body: str, table_options: Options) -> list[Any]:
        document = parse_document(body)
        return find_records(document, table_options.require_or("rows_path", ROOT_PATH))
