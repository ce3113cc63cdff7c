"""
Flat property maps: prefix extraction and loading from TOML.

Properties are plain ``str -> str`` mappings, the shape build tools pass as
user properties. Everything here preserves input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def properties_by_prefix(properties: Mapping[str, str], prefix: str) -> dict[str, str]:
    """
    Select properties whose name starts with ``prefix``.

    The result is keyed by the remainder of the name
    (``restDependencyRanks.foo`` with prefix ``restDependencyRanks.`` gives
    ``foo``). A name equal to the prefix itself is ignored.
    """
    return {
        name[len(prefix):]: value
        for name, value in properties.items()
        if name.startswith(prefix) and len(name) > len(prefix)
    }


def _to_property_value(name: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int)):
        return str(value)
    raise ConfigurationError(
        f"Unsupported value for property {name!r}: {type(value).__name__}",
        property_name=name,
    )


def _flatten(data: Mapping[str, Any], parent: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in data.items():
        name = f"{parent}.{key}" if parent else str(key)
        if isinstance(value, dict):
            flat.update(_flatten(value, name))
        else:
            flat[name] = _to_property_value(name, value)
    return flat


def load_properties(path: str | Path) -> dict[str, str]:
    """
    Load a property file written in TOML.

    Nested tables are flattened with dots, so

        [restDependencyRanks]
        "org.foo" = "redhat;community"

    yields ``restDependencyRanks.org.foo``. Booleans become ``true``/``false``.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the TOML is malformed or holds unsupported values
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Property file not found: {path}")

    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Failed to parse property file {path}: {e}") from e

    properties = _flatten(data)
    logger.debug("Loaded %d properties from %s", len(properties), path)
    return properties


def parse_assignment(assignment: str) -> tuple[str, str]:
    """Parse ``key=value``; a bare ``key`` means ``key=true`` as with ``-Dkey``."""
    name, sep, value = assignment.partition("=")
    name = name.strip()
    if not name:
        raise ConfigurationError(f"Property assignment has no name: {assignment!r}")
    return name, value if sep else "true"


def merge_properties(*sources: Mapping[str, str] | Iterable[tuple[str, str]]) -> dict[str, str]:
    """Merge property sources left to right; later sources win."""
    merged: dict[str, str] = {}
    for source in sources:
        merged.update(source)
    return merged
