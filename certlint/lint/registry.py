"""
Lint registry: name -> Lint lookup.

Lints are added during start-up through explicit `register(registry)` calls
(see certlint.lints). Once `freeze()` runs the registry is read-only, so the
executor can read it from any number of threads without locking.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Iterable

from ..errors import DuplicateLintError, LintDefinitionError, RegistryError, RegistryFrozenError
from .base import Category, Lint, Source

logger = logging.getLogger(__name__)


class Registry:
    """Write-once collection of lints keyed by globally unique name."""

    def __init__(self) -> None:
        self._lints: dict[str, Lint] = {}
        self._exclusions: dict[str, frozenset[str]] = {}
        self._frozen = False

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, lint: Lint) -> None:
        """
        Add a lint to the registry.

        Raises:
            RegistryFrozenError: If the registry was already frozen
            DuplicateLintError: If the name is already taken
            LintDefinitionError: If the descriptor is invalid
        """
        if self._frozen:
            raise RegistryFrozenError(f"cannot register {lint.name}: registry is frozen")
        lint.metadata.validate()
        if lint.name in self._lints:
            raise DuplicateLintError(lint.name)
        self._lints[lint.name] = lint

    def freeze(self) -> Registry:
        """
        Validate cross-lint references and make the registry read-only.

        The mutual-exclusion relation is closed symmetrically here: if A
        names B, B excludes A even when B's descriptor does not say so.
        """
        if self._frozen:
            return self

        exclusions: dict[str, set[str]] = {name: set() for name in self._lints}
        for name, lint in self._lints.items():
            for other in lint.metadata.mutually_exclusive_with:
                if other not in self._lints:
                    raise LintDefinitionError(
                        f"{name}: mutually_exclusive_with references unknown lint {other!r}"
                    )
                exclusions[name].add(other)
                exclusions[other].add(name)

        self._exclusions = {name: frozenset(others) for name, others in exclusions.items()}
        self._frozen = True
        logger.debug(f"Lint registry frozen with {len(self._lints)} lints")
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, name: str) -> Lint | None:
        """Look up a lint by name; None if it is not registered."""
        return self._lints.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._lints

    def __len__(self) -> int:
        return len(self._lints)

    def names(self) -> list[str]:
        return sorted(self._lints)

    def all(self) -> list[Lint]:
        """All lints, sorted by name."""
        return [self._lints[name] for name in sorted(self._lints)]

    def sources(self) -> set[Source]:
        return {lint.metadata.source for lint in self._lints.values()}

    def filter_by_source(self, sources: Iterable[Source]) -> list[Lint]:
        wanted = set(sources)
        return [lint for lint in self.all() if lint.metadata.source in wanted]

    def filter_by_category(self, categories: Iterable[Category]) -> list[Lint]:
        wanted = set(categories)
        return [lint for lint in self.all() if lint.metadata.category in wanted]

    def filter_by_pattern(self, pattern: str | re.Pattern[str]) -> list[Lint]:
        """Lints whose name matches `pattern` (re.search semantics)."""
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        return [lint for lint in self.all() if regex.search(lint.name)]

    def exclusions_of(self, name: str) -> frozenset[str]:
        """Names that must never run in the same selection as `name`."""
        if not self._frozen:
            raise RegistryError("exclusions are only available on a frozen registry")
        return self._exclusions.get(name, frozenset())


# Process-wide registry, built once from certlint.lints on first use.
_DEFAULT: Registry | None = None
_DEFAULT_LOCK = threading.Lock()


def default_registry() -> Registry:
    """Return the frozen registry holding every built-in lint."""
    global _DEFAULT
    registry = _DEFAULT
    if registry is not None:
        return registry
    with _DEFAULT_LOCK:
        if _DEFAULT is None:
            from ..lints import register_all

            built = Registry()
            register_all(built)
            _DEFAULT = built.freeze()
        return _DEFAULT


def reset_default_registry() -> None:
    """Drop the cached default registry (for testing)."""
    global _DEFAULT
    with _DEFAULT_LOCK:
        _DEFAULT = None
