"""
Settings bundle handed to the version translator (the REST client).

The client itself lives elsewhere; this module only publishes its defaults
and the frozen bundle it is constructed from.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .constraints import Constraint

# Defaults published by the translator.
CHUNK_SPLIT_COUNT = 4
DEFAULT_CONNECTION_TIMEOUT_SEC = 30
DEFAULT_SOCKET_TIMEOUT_SEC = 600
RETRY_DURATION_SEC = 30

UNBOUNDED_SIZE = -1


@dataclass(frozen=True)
class TranslatorSettings:
    """Frozen and comparable, but not hashable: ``headers`` is a read-only mapping."""

    __hash__ = None  # type: ignore[assignment]

    url: str | None
    max_size: int = UNBOUNDED_SIZE
    min_size: int = CHUNK_SPLIT_COUNT
    brew_pull_active: bool = False
    mode: str = ""
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    connection_timeout: int = DEFAULT_CONNECTION_TIMEOUT_SEC
    socket_timeout: int = DEFAULT_SOCKET_TIMEOUT_SEC
    retry_duration: int = RETRY_DURATION_SEC
    constraints: frozenset[Constraint] = frozenset()

    def sorted_constraints(self) -> list[Constraint]:
        """Constraints in display order: global first, then by scope name."""
        return sorted(self.constraints, key=lambda c: (c.scope is not None, c.scope or ""))

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "maxSize": self.max_size,
            "minSize": self.min_size,
            "brewPullActive": self.brew_pull_active,
            "mode": self.mode,
            "headers": dict(self.headers),
            "connectionTimeout": self.connection_timeout,
            "socketTimeout": self.socket_timeout,
            "retryDuration": self.retry_duration,
            "constraints": [c.to_dict() for c in self.sorted_constraints()],
        }
