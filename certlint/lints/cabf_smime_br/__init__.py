"""Lints for the CA/Browser Forum S/MIME Baseline Requirements."""

from __future__ import annotations

from ...lint.registry import Registry
from . import legacy_aia_contains_internal_names

MODULES = (legacy_aia_contains_internal_names,)


def register(registry: Registry) -> None:
    for module in MODULES:
        module.register(registry)
