"""
Recognized REST alignment properties.

One table describes every key: its default, how it is parsed and where it is
documented. The loader and the ``restalign properties`` command both read it.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from .constraints.build import DEFAULT_RANK_DELIMITER, validate_delimiter
from .errors import ConfigurationError
from .properties import properties_by_prefix
from .translator import (
    CHUNK_SPLIT_COUNT,
    DEFAULT_CONNECTION_TIMEOUT_SEC,
    DEFAULT_SOCKET_TIMEOUT_SEC,
    RETRY_DURATION_SEC,
    UNBOUNDED_SIZE,
)

PropertyKind = Literal["string", "boolean", "integer", "delimiter", "prefix"]

ENDPOINT_DOCS = "dep-manip.html#rest-endpoint"
TIMEOUT_DOCS = "dep-manip.html#rest-timeouts-and-retries"
CONSTRAINT_DOCS = "dep-manip.html#rest-pnc-specific-properties"

KEY_PREFIX = "rest"

_INTEGER = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class PropertySpec:
    name: str
    description: str
    default: str | None = None
    kind: PropertyKind = "string"
    doc_index: str = ENDPOINT_DOCS

    @property
    def is_prefix(self) -> bool:
        return self.kind == "prefix"

    def raw(self, properties: Mapping[str, str]) -> str | None:
        return properties.get(self.name, self.default)

    def parse(self, properties: Mapping[str, str]) -> Any:
        if self.kind == "prefix":
            return properties_by_prefix(properties, self.name)
        raw = self.raw(properties)
        if self.kind == "boolean":
            return parse_bool(raw)
        if self.kind == "integer":
            return parse_int(self.name, raw)
        if self.kind == "delimiter":
            return validate_delimiter(raw if raw is not None else DEFAULT_RANK_DELIMITER)
        return raw


def parse_bool(raw: str | None) -> bool:
    """Only a case-insensitive ``true`` is true; anything else, including None, is false."""
    return raw is not None and raw.lower() == "true"


def parse_int(name: str, raw: str | None) -> int:
    """Parse a signed 32-bit integer; padding and out-of-range values are errors."""
    if raw is None or not _INTEGER.fullmatch(raw):
        raise ValueError(f"Property {name!r} must be an integer; got {raw!r}")
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"Property {name!r} is out of range [{INT_MIN}, {INT_MAX}]; got {raw!r}")
    return value


PROPERTIES: tuple[PropertySpec, ...] = (
    PropertySpec("restURL", "URL of the dependency analysis REST endpoint; empty disables REST alignment"),
    PropertySpec("restSuffixAlign", "Align suffixed versions returned by the endpoint", "true", "boolean"),
    PropertySpec("restBrewPullActive", "Ask the endpoint to also look up versions in Brew", None, "boolean"),
    PropertySpec("restMode", "Alignment mode passed through to the endpoint", ""),
    PropertySpec(
        "restMaxSize", "Maximum number of GAVs per request (-1 is unbounded)", str(UNBOUNDED_SIZE), "integer"
    ),
    PropertySpec(
        "restMinSize", "Minimum request size when splitting failed requests", str(CHUNK_SPLIT_COUNT), "integer"
    ),
    PropertySpec("restHeaders", "Extra HTTP headers as key:value pairs separated by commas", ""),
    PropertySpec(
        "restConnectionTimeout",
        "Connection timeout in seconds",
        str(DEFAULT_CONNECTION_TIMEOUT_SEC),
        "integer",
        TIMEOUT_DOCS,
    ),
    PropertySpec(
        "restSocketTimeout", "Socket timeout in seconds", str(DEFAULT_SOCKET_TIMEOUT_SEC), "integer", TIMEOUT_DOCS
    ),
    PropertySpec(
        "restRetryDuration", "How long to keep retrying, in seconds", str(RETRY_DURATION_SEC), "integer", TIMEOUT_DOCS
    ),
    PropertySpec("restDependencyRanks", "Global rank list", None, "string", CONSTRAINT_DOCS),
    PropertySpec("restDependencyAllowList", "Global allow list", None, "string", CONSTRAINT_DOCS),
    PropertySpec("restDependencyDenyList", "Global deny list", None, "string", CONSTRAINT_DOCS),
    PropertySpec("restDependencyRanks.", "Rank list for one artifact scope", None, "prefix", CONSTRAINT_DOCS),
    PropertySpec("restDependencyAllowList.", "Allow list for one artifact scope", None, "prefix", CONSTRAINT_DOCS),
    PropertySpec("restDependencyDenyList.", "Deny list for one artifact scope", None, "prefix", CONSTRAINT_DOCS),
    PropertySpec(
        "restDependencyRankDelimiter",
        "Single character separating entries of a rank list",
        DEFAULT_RANK_DELIMITER,
        "delimiter",
        CONSTRAINT_DOCS,
    ),
)

_BY_NAME: dict[str, PropertySpec] = {spec.name: spec for spec in PROPERTIES}


def lookup(name: str) -> PropertySpec:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise ConfigurationError(f"Unknown property: {name}", property_name=name) from None


def resolve(properties: Mapping[str, str], name: str) -> Any:
    """Parse one property, applying its default."""
    return lookup(name).parse(properties)


def is_known(name: str) -> bool:
    if name in _BY_NAME:
        return True
    return any(spec.is_prefix and name.startswith(spec.name) for spec in PROPERTIES)


def unknown_properties(properties: Mapping[str, str]) -> list[str]:
    """Names that look like REST alignment properties but are not recognized."""
    return [name for name in properties if name.startswith(KEY_PREFIX) and not is_known(name)]
