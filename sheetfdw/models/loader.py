"""Loader for YAML table definition files."""

from pathlib import Path
from typing import Dict

import yaml
from pydantic import ValidationError

from sheetfdw.core.exceptions import ConfigError
from sheetfdw.models.definition import TableDefinition
from sheetfdw.models.templates import render_templates


def load_definition(path: str, cli_vars: Dict[str, str] | None = None) -> TableDefinition:
    """
    Load a table definition from a YAML file.

    Args:
        path: Path to the definition file
        cli_vars: Variables passed via CLI (e.g., --vars key=value)

    Returns:
        Validated TableDefinition

    Raises:
        ConfigError: If the file is missing, not valid YAML, or fails validation
    """
    definition_path = Path(path)
    try:
        with open(definition_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Definition file not found: {path}", context={"path": path})
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML in definition file: {e}", context={"path": path}
        ) from e

    if not isinstance(raw, dict):
        raise ConfigError(
            "Definition file must contain a YAML dictionary", context={"path": path}
        )

    rendered = render_templates(raw, cli_vars)

    try:
        return TableDefinition.model_validate(rendered)
    except ValidationError as e:
        raise ConfigError(
            f"Definition validation failed: {e}", context={"path": path}
        ) from e
