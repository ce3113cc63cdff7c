from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Constraint:
    """
    Override rule for the recommendation service.

    ``scope`` is None for the global constraint. For every other field None
    means "no restriction", while an empty string is a real value.
    """

    scope: str | None = None
    allow_list: str | None = None
    deny_list: str | None = None
    ranks: tuple[str, ...] | None = None

    @property
    def is_global(self) -> bool:
        return self.scope is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "artifactScope": self.scope,
            "allowList": self.allow_list,
            "denyList": self.deny_list,
            "ranks": list(self.ranks) if self.ranks is not None else None,
        }


@dataclass
class ConstraintDraft:
    """Mutable per-scope accumulator; ``freeze`` produces the final record."""

    scope: str | None
    allow_list: str | None = None
    deny_list: str | None = None
    ranks: tuple[str, ...] | None = None

    def freeze(self) -> Constraint:
        return Constraint(
            scope=self.scope,
            allow_list=self.allow_list,
            deny_list=self.deny_list,
            ranks=self.ranks,
        )
