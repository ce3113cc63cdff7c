from __future__ import annotations

import logging
from collections.abc import Mapping

from ..errors import ConfigurationError
from .schema import Constraint, ConstraintDraft

logger = logging.getLogger(__name__)

DEFAULT_RANK_DELIMITER = ";"


def validate_delimiter(delimiter: str) -> str:
    if len(delimiter) != 1:
        raise ConfigurationError(
            f"Incorrect rank delimiter format; expecting exactly one character; got {delimiter!r}",
            property_name="restDependencyRankDelimiter",
        )
    return delimiter


def split_ranks(raw: str, delimiter: str) -> tuple[str, ...]:
    """
    Split a raw rank string on a literal single-character delimiter.

    Trailing empty tokens are dropped (``"a;b;"`` gives ``("a", "b")``). A
    string without the delimiter is a single token, so ``""`` gives ``("",)``.
    """
    parts = raw.split(delimiter)
    if len(parts) == 1:
        return (raw,)
    while parts and parts[-1] == "":
        parts.pop()
    return tuple(parts)


def construct_constraints(
    global_rank: str | None,
    global_allow: str | None,
    global_deny: str | None,
    scoped_ranks: Mapping[str, str],
    scoped_allows: Mapping[str, str],
    scoped_denies: Mapping[str, str],
    delimiter: str = DEFAULT_RANK_DELIMITER,
) -> frozenset[Constraint]:
    """
    Merge global and scoped overrides into one constraint per scope.

    Each scoped mapping contributes a single field, so a scope named in all
    three ends up as one record carrying ranks, allow list and deny list.
    Allow and deny values are kept verbatim; only ranks are split.
    """
    delimiter = validate_delimiter(delimiter)
    constraints: set[Constraint] = set()

    if global_rank is not None or global_allow is not None or global_deny is not None:
        constraints.add(
            Constraint(
                scope=None,
                allow_list=global_allow,
                deny_list=global_deny,
                ranks=split_ranks(global_rank, delimiter) if global_rank is not None else None,
            )
        )

    drafts: dict[str, ConstraintDraft] = {}

    def draft_for(scope: str) -> ConstraintDraft:
        if scope not in drafts:
            drafts[scope] = ConstraintDraft(scope=scope)
        return drafts[scope]

    for scope, ranks in scoped_ranks.items():
        draft_for(scope).ranks = split_ranks(ranks, delimiter)

    for scope, allows in scoped_allows.items():
        draft_for(scope).allow_list = allows

    for scope, denies in scoped_denies.items():
        draft_for(scope).deny_list = denies

    constraints.update(draft.freeze() for draft in drafts.values())

    logger.debug(
        "Constructed %d constraint(s): global=%s, scopes=%s",
        len(constraints),
        any(c.is_global for c in constraints),
        sorted(drafts),
    )
    return frozenset(constraints)
