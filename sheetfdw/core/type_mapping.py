"""Mapping between type names, host column types and Arrow types.

Table definition files declare column types using the names people type in
``CREATE FOREIGN TABLE`` statements. This module resolves those names onto
``TypeOid`` and gives every ``TypeOid`` an Arrow representation.
"""

import pyarrow as pa

from sheetfdw.core.exceptions import ConfigError
from sheetfdw.core.types import TypeOid

ALIASES: dict[str, TypeOid] = {
    "bool": TypeOid.BOOL,
    "boolean": TypeOid.BOOL,
    "char": TypeOid.I8,
    "i8": TypeOid.I8,
    "smallint": TypeOid.I16,
    "int2": TypeOid.I16,
    "i16": TypeOid.I16,
    "real": TypeOid.F32,
    "float4": TypeOid.F32,
    "f32": TypeOid.F32,
    "integer": TypeOid.I32,
    "int": TypeOid.I32,
    "int4": TypeOid.I32,
    "i32": TypeOid.I32,
    "double precision": TypeOid.F64,
    "double": TypeOid.F64,
    "float8": TypeOid.F64,
    "float": TypeOid.F64,
    "f64": TypeOid.F64,
    "bigint": TypeOid.I64,
    "int8": TypeOid.I64,
    "i64": TypeOid.I64,
    "numeric": TypeOid.NUMERIC,
    "decimal": TypeOid.NUMERIC,
    "text": TypeOid.STRING,
    "varchar": TypeOid.STRING,
    "character varying": TypeOid.STRING,
    "string": TypeOid.STRING,
    "str": TypeOid.STRING,
    "date": TypeOid.DATE,
    "timestamp": TypeOid.TIMESTAMP,
    "timestamp without time zone": TypeOid.TIMESTAMP,
    "timestamptz": TypeOid.TIMESTAMPTZ,
    "timestamp with time zone": TypeOid.TIMESTAMPTZ,
    "json": TypeOid.JSON,
    "jsonb": TypeOid.JSON,
    "uuid": TypeOid.UUID,
}

ARROW_TYPES: dict[TypeOid, pa.DataType] = {
    TypeOid.BOOL: pa.bool_(),
    TypeOid.I8: pa.int8(),
    TypeOid.I16: pa.int16(),
    TypeOid.F32: pa.float32(),
    TypeOid.I32: pa.int32(),
    TypeOid.F64: pa.float64(),
    TypeOid.I64: pa.int64(),
    TypeOid.NUMERIC: pa.float64(),
    TypeOid.STRING: pa.string(),
    TypeOid.DATE: pa.date32(),
    TypeOid.TIMESTAMP: pa.timestamp("us"),
    TypeOid.TIMESTAMPTZ: pa.timestamp("us", tz="UTC"),
    # JSON cells carry serialized text
    TypeOid.JSON: pa.string(),
    TypeOid.UUID: pa.string(),
}


def parse_type_name(type_name: str) -> TypeOid:
    """Resolve a SQL-ish type name to a TypeOid.

    Args:
        type_name: Type name such as "bigint", "text" or "timestamptz"

    Returns:
        The matching TypeOid

    Raises:
        ConfigError: If the name is unknown
    """
    normalized = " ".join(type_name.lower().split())
    type_oid = ALIASES.get(normalized)
    if type_oid is None:
        raise ConfigError(
            f"Unsupported type name: {type_name}",
            context={"supported": ", ".join(sorted(ALIASES))},
        )
    return type_oid


def to_arrow_type(type_oid: TypeOid) -> pa.DataType:
    return ARROW_TYPES[type_oid]
