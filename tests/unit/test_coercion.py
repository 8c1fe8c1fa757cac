"""Tests for JSON value coercion."""

import json
from datetime import datetime, timezone

import pytest

from sheetfdw.core import coercion
from sheetfdw.core.coercion import coerce_cell
from sheetfdw.core.exceptions import UnsupportedTypeError
from sheetfdw.core.types import MISSING, Cell, Column, TypeOid

RULES = {
    TypeOid.I64: coercion.to_i64,
    TypeOid.STRING: coercion.to_string,
}


class TestIntegerRules:
    """Tests for integer coercion."""

    def test_float_is_truncated(self):
        assert coercion.to_i64(1.0) == 1
        assert coercion.to_i64(2.9) == 2
        assert coercion.to_i64(-2.9) == -2

    def test_int_passes_through(self):
        assert coercion.to_i64(42) == 42

    def test_non_numeric_is_absent(self):
        assert coercion.to_i64("1") is None
        assert coercion.to_i64([1]) is None
        assert coercion.to_i64({"v": 1}) is None

    def test_bool_is_not_a_number(self):
        assert coercion.to_i64(True) is None
        assert coercion.to_f64(False) is None

    def test_non_finite_is_absent(self):
        assert coercion.to_i64(float("nan")) is None
        assert coercion.to_i64(float("inf")) is None

    def test_out_of_range_saturates(self):
        assert coercion.to_i64(2**63) == coercion.I64_MAX
        assert coercion.to_i64(1e20) == coercion.I64_MAX
        assert coercion.to_i64(-1e20) == coercion.I64_MIN
        assert coercion.to_i32(2**31) == coercion.I32_MAX
        assert coercion.to_i32(-3e9) == coercion.I32_MIN
        assert coercion.to_i32(2**31 - 1) == 2**31 - 1


class TestScalarRules:
    """Tests for string, bool, float and JSON coercion."""

    def test_string(self):
        assert coercion.to_string("Erlich Bachman") == "Erlich Bachman"
        assert coercion.to_string(1.0) is None

    def test_bool(self):
        assert coercion.to_bool(True) is True
        assert coercion.to_bool(False) is False
        assert coercion.to_bool(1) is None

    def test_f64(self):
        assert coercion.to_f64(1) == 1.0
        assert isinstance(coercion.to_f64(1), float)
        assert coercion.to_f64("1.5") is None

    def test_json_serializes_any_value(self):
        assert json.loads(coercion.to_json({"a": [1, 2]})) == {"a": [1, 2]}
        assert coercion.to_json("x") == '"x"'

    def test_json_document_only_objects_and_arrays(self):
        assert json.loads(coercion.to_json_document([1, 2])) == [1, 2]
        assert coercion.to_json_document("x") is None
        assert coercion.to_json_document(3) is None


class TestTimestampRules:
    """Tests for timestamp parsing."""

    def test_rfc3339_utc(self):
        assert coercion.to_timestamp("2024-03-01T10:20:30Z") == datetime(2024, 3, 1, 10, 20, 30)

    def test_rfc3339_offset_converted_to_utc(self):
        assert coercion.to_timestamp("2024-03-01T12:20:30+02:00") == datetime(2024, 3, 1, 10, 20, 30)

    def test_timestamptz_is_aware(self):
        value = coercion.to_timestamptz("2024-03-01T10:20:30")
        assert value == datetime(2024, 3, 1, 10, 20, 30, tzinfo=timezone.utc)

    def test_invalid_timestamp_is_absent(self):
        assert coercion.to_timestamp("yesterday") is None
        assert coercion.to_timestamp(1709288430) is None

    def test_gviz_date(self):
        """Visualization dates use zero-based months."""
        assert coercion.gviz_to_timestamp("Date(2024,0,31)") == datetime(2024, 1, 31)

    def test_gviz_datetime_with_millis(self):
        value = coercion.gviz_to_timestamp("Date(2024,11,25,8,30,15,250)")
        assert value == datetime(2024, 12, 25, 8, 30, 15, 250000)

    def test_gviz_invalid(self):
        assert coercion.gviz_to_timestamp("2024-01-31") is None
        assert coercion.gviz_to_timestamp("Date(2024,12,1)") is None
        assert coercion.gviz_to_timestamp(45000) is None


class TestCoerceCell:
    """Tests for coerce_cell."""

    def test_present_value(self):
        column = Column(1, "id", TypeOid.I64)
        assert coerce_cell(column, 1.0, RULES) == Cell(TypeOid.I64, 1)

    def test_missing_cell_is_absent(self):
        column = Column(3, "age", TypeOid.I64)
        assert coerce_cell(column, MISSING, RULES) is None

    def test_null_value_is_absent(self):
        column = Column(1, "name", TypeOid.STRING)
        assert coerce_cell(column, None, RULES) is None

    def test_mismatched_kind_is_absent(self):
        column = Column(1, "name", TypeOid.STRING)
        assert coerce_cell(column, 12.0, RULES) is None

    @pytest.mark.parametrize("value", [1.0, MISSING, None])
    def test_unsupported_type_always_fails(self, value):
        """No coercion rule fails whether or not the cell is present."""
        column = Column(1, "born", TypeOid.DATE)
        with pytest.raises(UnsupportedTypeError, match="born") as exc_info:
            coerce_cell(column, value, RULES)
        assert exc_info.value.context["type"] == "date"
