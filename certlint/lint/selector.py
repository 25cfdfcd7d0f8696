"""
Lint selection: (Registry, RunConfig) -> conflict-free lint list for one run.

Order of operations:
1. all registered lints, minus deprecated ones unless opted in
2. source filter (enabled sources, then excluded sources)
3. name pattern
4. exclude list
5. include list (force-adds, overriding steps 1-4)
6. mutual exclusion: explicit includes win, then the smallest name
"""

from __future__ import annotations

import logging
import re

from ..errors import ConfigurationError
from .base import Lint
from .config import RunConfig
from .registry import Registry

logger = logging.getLogger(__name__)


def _check_names(registry: Registry, names: frozenset[str], kind: str) -> None:
    unknown = sorted(n for n in names if n not in registry)
    if unknown:
        raise ConfigurationError(f"Unknown lint name(s) in {kind} list: {', '.join(unknown)}")


def resolve_mutual_exclusion(
    registry: Registry,
    candidates: list[Lint],
    preferred: frozenset[str] = frozenset(),
) -> list[Lint]:
    """
    Keep at most one lint of every mutually exclusive pair.

    Candidates are visited in priority order (names in `preferred` first, then
    lexicographic); a lint is kept only if none of its exclusive partners has
    already been kept.
    """
    ordered = sorted(candidates, key=lambda lint: (lint.name not in preferred, lint.name))
    kept: dict[str, Lint] = {}
    for lint in ordered:
        rivals = registry.exclusions_of(lint.name)
        winner = next((name for name in rivals if name in kept), None)
        if winner is not None:
            logger.debug(f"Dropping {lint.name}: mutually exclusive with selected {winner}")
            continue
        kept[lint.name] = lint
    return [kept[name] for name in sorted(kept)]


def select_lints(registry: Registry, config: RunConfig | None = None) -> list[Lint]:
    """
    Compute the lints to run, sorted by name.

    Raises:
        ConfigurationError: If include/exclude name unknown lints
    """
    config = config or RunConfig()
    if not registry.frozen:
        registry.freeze()

    _check_names(registry, config.include, "include")
    _check_names(registry, config.exclude, "exclude")

    selected = registry.all()
    if not config.include_deprecated:
        selected = [lint for lint in selected if not lint.metadata.deprecated]
    if config.sources:
        selected = [lint for lint in selected if lint.metadata.source in config.sources]
    if config.exclude_sources:
        selected = [lint for lint in selected if lint.metadata.source not in config.exclude_sources]
    if config.name_pattern:
        pattern = re.compile(config.name_pattern)
        selected = [lint for lint in selected if pattern.search(lint.name)]
    if config.exclude:
        selected = [lint for lint in selected if lint.name not in config.exclude]

    by_name = {lint.name: lint for lint in selected}
    for name in config.include:
        by_name[name] = registry.get(name)  # type: ignore[assignment]

    result = resolve_mutual_exclusion(registry, list(by_name.values()), preferred=config.include)
    logger.debug(f"Selected {len(result)} of {len(registry)} lints")
    return result
