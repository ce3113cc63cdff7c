"""
REST alignment state, resolved once from user properties.

``initialise`` is the entry point. It applies defaults, validates the rank
delimiter before any rank list is split, parses headers, merges constraints and
bundles everything the version translator needs. A missing or empty
``restURL`` is not an error: the state simply reports itself disabled and
callers must skip REST alignment.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .constraints import Constraint, construct_constraints
from .headers import parse_headers
from .schema import resolve, unknown_properties
from .translator import TranslatorSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestState:
    __hash__ = None  # type: ignore[assignment]

    url: str | None
    suffix_align: bool
    rank_delimiter: str
    translator: TranslatorSettings

    @classmethod
    def initialise(cls, properties: Mapping[str, str]) -> "RestState":
        return initialise(properties)

    @property
    def is_enabled(self) -> bool:
        """Enabled only when ``restURL`` is set to a non-empty value."""
        return bool(self.url)

    @property
    def version_translator(self) -> TranslatorSettings:
        return self.translator

    @property
    def headers(self) -> Mapping[str, str]:
        return self.translator.headers

    @property
    def constraints(self) -> frozenset[Constraint]:
        return self.translator.constraints

    def to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.is_enabled,
            "suffixAlign": self.suffix_align,
            "rankDelimiter": self.rank_delimiter,
            **self.translator.to_dict(),
        }


def initialise(properties: Mapping[str, str]) -> RestState:
    """
    Build the REST alignment state from a flat property map.

    Raises:
        ConfigurationError: If ``restDependencyRankDelimiter`` is not exactly one character
        ValueError: If an integer property is malformed
    """
    for name in unknown_properties(properties):
        logger.warning("Ignoring unrecognized REST property: %s", name)

    url = resolve(properties, "restURL")
    suffix_align = resolve(properties, "restSuffixAlign")
    brew_pull_active = resolve(properties, "restBrewPullActive")
    mode = resolve(properties, "restMode")
    max_size = resolve(properties, "restMaxSize")
    min_size = resolve(properties, "restMinSize")
    headers = parse_headers(resolve(properties, "restHeaders"))
    connection_timeout = resolve(properties, "restConnectionTimeout")
    socket_timeout = resolve(properties, "restSocketTimeout")
    retry_duration = resolve(properties, "restRetryDuration")

    delimiter = resolve(properties, "restDependencyRankDelimiter")

    constraints = construct_constraints(
        resolve(properties, "restDependencyRanks"),
        resolve(properties, "restDependencyAllowList"),
        resolve(properties, "restDependencyDenyList"),
        resolve(properties, "restDependencyRanks."),
        resolve(properties, "restDependencyAllowList."),
        resolve(properties, "restDependencyDenyList."),
        delimiter,
    )

    translator = TranslatorSettings(
        url=url,
        max_size=max_size,
        min_size=min_size,
        brew_pull_active=brew_pull_active,
        mode=mode,
        headers=MappingProxyType(headers),
        connection_timeout=connection_timeout,
        socket_timeout=socket_timeout,
        retry_duration=retry_duration,
        constraints=constraints,
    )
    state = RestState(url=url, suffix_align=suffix_align, rank_delimiter=delimiter, translator=translator)

    if state.is_enabled:
        logger.debug("REST alignment enabled for %s with %d constraint(s)", url, len(constraints))
    else:
        logger.info("REST alignment disabled: restURL is not set")
    return state
