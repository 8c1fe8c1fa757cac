"""Pytest configuration and shared fixtures."""

import json
import logging
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest

from sheetfdw.core.types import Column, TypeOid
from sheetfdw.transport.http import HttpTransport, Response

GVIZ_PREFIX = ")]}'\n"


def _gviz_body(rows: list) -> str:
    """Build a Visualization API response body around ``rows``."""
    document = {
        "version": "0.6",
        "status": "ok",
        "table": {"cols": [], "rows": rows},
    }
    return GVIZ_PREFIX + json.dumps(document)


def _make_response(body: str, status_code: int = 200) -> Response:
    return Response(
        url="https://docs.google.com/spreadsheets/d/sheet-1/gviz/tq?tqx=out:json",
        status_code=status_code,
        headers={"Content-Type": "application/json"},
        body=body,
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def people_rows() -> list:
    """Two sheet rows with an id, a name and a sparse tail."""
    return [
        {"c": [{"v": 1.0, "f": "1"}, {"v": "Erlich Bachman"}, None, {"v": None}]},
        {"c": [{"v": 2.0, "f": "2"}, {"v": "Richard Hendricks"}]},
    ]


@pytest.fixture
def people_columns() -> list[Column]:
    return [
        Column(num=1, name="id", type_oid=TypeOid.I64),
        Column(num=2, name="name", type_oid=TypeOid.STRING),
    ]


@pytest.fixture
def mock_transport():
    """Transport double; set ``mock_transport.get.return_value`` per test."""
    transport = Mock(spec=HttpTransport)
    transport.get.return_value = _make_response(_gviz_body([]))
    return transport


@pytest.fixture
def gviz_body():
    """Factory for Visualization API response bodies."""
    return _gviz_body


@pytest.fixture
def make_response():
    """Factory for transport responses."""
    return _make_response


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by configure_logging during a test."""
    yield
    logger = logging.getLogger("sheetfdw")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
