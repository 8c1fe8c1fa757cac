"""Template rendering for table definition values.

Supports ``{{ env_var('NAME') }}`` and ``{{ var('NAME') }}`` so secrets such
as access tokens stay out of definition files.
"""

import os
import re
from typing import Any, Callable, Dict

from sheetfdw.core.exceptions import ConfigError

_TEMPLATE_RE = re.compile(r"\{\{\s*([^}]+?)\s*\}\}")
_CALL_RE = re.compile(r"^(\w+)\(['\"]([^'\"]+)['\"]\)$")


def render_templates(data: Dict[str, Any], cli_vars: Dict[str, str] | None = None) -> Dict[str, Any]:
    """Render templates in every string value of ``data``, recursively.

    Raises:
        ConfigError: If a referenced variable is missing or the expression is unknown
    """
    functions: Dict[str, Callable[[str], str]] = {
        "env_var": _get_env_var,
        "var": lambda key: _get_cli_var(key, cli_vars or {}),
    }
    return _render_value(data, functions)


def _get_env_var(key: str) -> str:
    value = os.environ.get(key)
    if value is None:
        raise ConfigError(
            f"Environment variable '{key}' not found",
            context={"key": key},
        )
    return value


def _get_cli_var(key: str, cli_vars: Dict[str, str]) -> str:
    if key not in cli_vars:
        raise ConfigError(
            f"CLI variable '{key}' not provided",
            context={"key": key, "available": list(cli_vars.keys())},
        )
    return cli_vars[key]


def _render_value(value: Any, functions: Dict[str, Callable[[str], str]]) -> Any:
    if isinstance(value, dict):
        return {key: _render_value(item, functions) for key, item in value.items()}
    if isinstance(value, list):
        return [_render_value(item, functions) for item in value]
    if isinstance(value, str):
        return _render_string(value, functions)
    return value


def _render_string(text: str, functions: Dict[str, Callable[[str], str]]) -> str:
    def replace(match: re.Match) -> str:
        expr = match.group(1)
        call = _CALL_RE.match(expr)
        if call is None or call.group(1) not in functions:
            raise ConfigError(
                f"Unsupported template expression: {expr}",
                context={"available": ", ".join(sorted(functions))},
            )
        return functions[call.group(1)](call.group(2))

    return _TEMPLATE_RE.sub(replace, text)
