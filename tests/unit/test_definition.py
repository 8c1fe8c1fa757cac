"""Tests for table definitions, templates and the YAML loader."""

import pytest
from pydantic import ValidationError

from sheetfdw.core.exceptions import ConfigError
from sheetfdw.core.options import Options, OptionsType
from sheetfdw.core.types import Column, TypeOid
from sheetfdw.models.definition import TableDefinition
from sheetfdw.models.loader import load_definition
from sheetfdw.models.server_config import ServerConfig
from sheetfdw.models.templates import render_templates

DEFINITION_YAML = """
name: people
server:
  base_url: https://docs.google.com/spreadsheets/d
table:
  sheet_id: "{{ var('sheet') }}"
columns:
  - name: id
    type: bigint
  - name: name
    type: text
  - name: note
    type: jsonb
    num: 7
"""


class TestTableDefinition:
    """Tests for TableDefinition."""

    def test_columns_default_to_list_position(self):
        definition = TableDefinition.model_validate(
            {"columns": [{"name": "id", "type": "bigint"}, {"name": "name", "type": "text", "num": 5}]}
        )
        assert definition.to_columns() == [
            Column(1, "id", TypeOid.I64),
            Column(5, "name", TypeOid.STRING),
        ]

    def test_options_become_strings(self):
        definition = TableDefinition.model_validate(
            {"table": {"sheet_id": 12345}, "columns": [{"name": "id", "type": "i64"}]}
        )
        assert definition.table == {"sheet_id": "12345"}

    def test_requires_columns(self):
        with pytest.raises(ValidationError):
            TableDefinition.model_validate({"columns": []})

    def test_duplicate_column_names(self):
        with pytest.raises(ValidationError, match="duplicate column names: id"):
            TableDefinition.model_validate(
                {"columns": [{"name": "id", "type": "bigint"}, {"name": "id", "type": "text"}]}
            )

    def test_unknown_type_name(self):
        with pytest.raises(ValidationError, match="geometry"):
            TableDefinition.model_validate({"columns": [{"name": "g", "type": "geometry"}]})

    def test_to_context(self):
        definition = TableDefinition.model_validate(
            {
                "server": {"source": "gsheets"},
                "table": {"sheet_id": "abc"},
                "columns": [{"name": "id", "type": "bigint"}],
            }
        )
        ctx = definition.to_context()
        assert ctx.get_options(OptionsType.SERVER).get("source") == "gsheets"
        assert ctx.get_options(OptionsType.TABLE).require("sheet_id") == "abc"
        assert ctx.get_columns() == [Column(1, "id", TypeOid.I64)]


class TestServerConfig:
    """Tests for ServerConfig."""

    def test_defaults(self):
        config = ServerConfig.from_options(Options(OptionsType.SERVER, {}))
        assert config.source == "gsheets"
        assert config.base_url is None
        assert config.access_token is None

    def test_empty_values_use_defaults(self):
        config = ServerConfig.from_options(Options(OptionsType.SERVER, {"source": "", "base_url": ""}))
        assert config.source == "gsheets"
        assert config.base_url is None

    def test_access_token_is_secret(self):
        config = ServerConfig.from_options(Options(OptionsType.SERVER, {"access_token": "tok"}))
        assert config.access_token.get_secret_value() == "tok"
        assert "tok" not in repr(config)

    def test_unknown_options_ignored(self):
        config = ServerConfig.from_options(Options(OptionsType.SERVER, {"fdw_package_name": "x"}))
        assert config.source == "gsheets"


class TestTemplates:
    """Tests for template rendering."""

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("SHEET_TOKEN", "s3cret")
        rendered = render_templates({"server": {"access_token": "{{ env_var('SHEET_TOKEN') }}"}})
        assert rendered == {"server": {"access_token": "s3cret"}}

    def test_cli_var_in_list(self):
        rendered = render_templates({"items": ["a-{{ var('x') }}", 3]}, {"x": "1"})
        assert rendered == {"items": ["a-1", 3]}

    def test_missing_env_var(self, monkeypatch):
        monkeypatch.delenv("NOT_SET_ANYWHERE", raising=False)
        with pytest.raises(ConfigError, match="NOT_SET_ANYWHERE"):
            render_templates({"a": "{{ env_var('NOT_SET_ANYWHERE') }}"})

    def test_missing_cli_var(self):
        with pytest.raises(ConfigError, match="not provided"):
            render_templates({"a": "{{ var('sheet') }}"}, {})

    def test_unknown_expression(self):
        with pytest.raises(ConfigError, match="Unsupported template expression"):
            render_templates({"a": "{{ table.name }}"})


class TestLoader:
    """Tests for load_definition."""

    def test_load(self, temp_dir):
        path = temp_dir / "people.yaml"
        path.write_text(DEFINITION_YAML)

        definition = load_definition(str(path), cli_vars={"sheet": "1XyZ"})

        assert definition.name == "people"
        assert definition.table == {"sheet_id": "1XyZ"}
        assert [c.num for c in definition.to_columns()] == [1, 2, 7]

    def test_missing_file(self, temp_dir):
        with pytest.raises(ConfigError, match="not found"):
            load_definition(str(temp_dir / "nope.yaml"))

    def test_invalid_yaml(self, temp_dir):
        path = temp_dir / "bad.yaml"
        path.write_text("columns: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_definition(str(path))

    def test_not_a_mapping(self, temp_dir):
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="YAML dictionary"):
            load_definition(str(path))

    def test_validation_failure(self, temp_dir):
        path = temp_dir / "empty.yaml"
        path.write_text("name: empty\ncolumns: []\n")
        with pytest.raises(ConfigError, match="validation failed"):
            load_definition(str(path))

    def test_unknown_type_carries_path(self, temp_dir):
        path = temp_dir / "geo.yaml"
        path.write_text("columns:\n  - name: g\n    type: geometry\n")
        with pytest.raises(ConfigError, match="geometry") as exc_info:
            load_definition(str(path))
        assert exc_info.value.context["path"] == str(path)
