"""Source profile registry.

Profiles register a factory under a name; the server option ``source``
selects which one a connector instance uses.
"""

from __future__ import annotations

from typing import Callable, overload

from sheetfdw.core.exceptions import ConfigError
from sheetfdw.sources.base import SourceProfile

SourceFactory = Callable[[], SourceProfile]

_source_registry: dict[str, SourceFactory] = {}


@overload
def register_source(name: str) -> Callable[[SourceFactory], SourceFactory]: ...


@overload
def register_source(name: str, factory: SourceFactory) -> None: ...


def register_source(
    name: str,
    factory: SourceFactory | None = None,
) -> Callable[[SourceFactory], SourceFactory] | None:
    """Register a source profile factory.

    Can be used as a decorator or called directly:

        @register_source("gsheets")
        class GoogleSheetsSource(SourceProfile):
            ...

        register_source("gsheets", GoogleSheetsSource)

    Raises:
        ConfigError: If a profile with the same name is already registered.
    """

    def _register(f: SourceFactory) -> SourceFactory:
        if name in _source_registry:
            raise ConfigError(
                f"Source '{name}' is already registered",
                context={"source": name},
            )
        _source_registry[name] = f
        return f

    if factory is not None:
        _register(factory)
        return None

    return _register


def get_source(name: str) -> SourceProfile:
    """Instantiate the source profile registered under ``name``.

    Raises:
        ConfigError: If no profile is registered under that name.
    """
    factory = _source_registry.get(name)
    if factory is None:
        available = ", ".join(sorted(_source_registry)) or "(none)"
        raise ConfigError(
            f"Unknown source: '{name}'",
            context={"source": name, "available_sources": available},
        )
    return factory()


def list_source_types() -> list[str]:
    """Return the names of all registered source profiles."""
    return sorted(_source_registry)


def clear_registry() -> None:
    """Clear all registered profiles. Intended for testing only."""
    _source_registry.clear()
