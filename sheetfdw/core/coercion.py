"""Coercion of raw JSON values into typed cells.

A coercion rule takes a non-null JSON value and returns the Python value for
the target type, or ``None`` when the value's JSON kind cannot represent that
type. A type with no rule at all is a configuration mistake and fails the row.
"""

import json
import logging
import math
import re
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

from sheetfdw.core.exceptions import UnsupportedTypeError
from sheetfdw.core.types import MISSING, Cell, Column, TypeOid

logger = logging.getLogger(__name__)

CoercionRule = Callable[[Any], Any]

I32_MIN, I32_MAX = -(2**31), 2**31 - 1
I64_MIN, I64_MAX = -(2**63), 2**63 - 1

# Google Visualization date literal, month is zero-based: Date(2024,0,31,13,5,0)
_GVIZ_DATE_RE = re.compile(
    r"^Date\((\d+),(\d+),(\d+)(?:,(\d+),(\d+),(\d+)(?:,(\d+))?)?\)$"
)


def _is_number(value: Any) -> bool:
    # bool is a subclass of int, JSON true/false are not numbers
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _truncate(value: Any, lower: int, upper: int) -> Optional[int]:
    # out-of-range numbers saturate at the nearest bound
    if not _is_number(value):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        value = int(value)
    return max(lower, min(upper, value))


def to_i64(value: Any) -> Optional[int]:
    return _truncate(value, I64_MIN, I64_MAX)


def to_i32(value: Any) -> Optional[int]:
    return _truncate(value, I32_MIN, I32_MAX)


def to_f64(value: Any) -> Optional[float]:
    if not _is_number(value):
        return None
    return float(value)


def to_string(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def to_bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def to_json_document(value: Any) -> Optional[str]:
    """Serialize objects and arrays only; scalars are not JSON documents."""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return None


def _parse_rfc3339(value: Any) -> Optional[datetime]:
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Cannot parse timestamp %r", value)
        return None


def to_timestamp(value: Any) -> Optional[datetime]:
    """Parse an RFC 3339 string into a naive UTC timestamp."""
    parsed = _parse_rfc3339(value)
    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def to_timestamptz(value: Any) -> Optional[datetime]:
    """Parse an RFC 3339 string into an aware timestamp, naive input is UTC."""
    parsed = _parse_rfc3339(value)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def gviz_to_timestamp(value: Any) -> Optional[datetime]:
    """Parse a Google Visualization ``Date(...)`` literal."""
    if not isinstance(value, str):
        return None
    match = _GVIZ_DATE_RE.match(value.strip())
    if match is None:
        logger.debug("Cannot parse visualization date %r", value)
        return None
    year, month, day, hour, minute, second, millis = (
        int(part) if part is not None else 0 for part in match.groups()
    )
    try:
        return datetime(
            year, month + 1, day, hour, minute, second, millis * 1000
        )
    except ValueError:
        logger.debug("Visualization date out of range %r", value)
        return None


def coerce_cell(
    column: Column,
    value: Any,
    rules: Mapping[TypeOid, CoercionRule],
) -> Optional[Cell]:
    """Coerce one source value into a cell for ``column``.

    Args:
        column: Target column descriptor
        value: Raw JSON value, or ``MISSING`` when no source cell exists
        rules: Coercion table of the active source profile

    Returns:
        A present Cell, or None when the cell is missing, null, or of a
        mismatched JSON kind.

    Raises:
        UnsupportedTypeError: If the column type has no coercion rule
    """
    rule = rules.get(column.type_oid)
    if rule is None:
        raise UnsupportedTypeError(
            f"column {column.name} data type is not supported",
            context={"column": column.name, "type": column.type_oid.value},
        )

    if value is MISSING or value is None:
        return None

    coerced = rule(value)
    if coerced is None:
        return None
    return Cell(column.type_oid, coerced)
