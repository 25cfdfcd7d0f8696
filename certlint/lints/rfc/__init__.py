"""Lints for RFC 5280 requirements."""

from __future__ import annotations

from ...lint.registry import Registry
from . import dnsname_underscore_in_trd, key_identifiers

MODULES = (dnsname_underscore_in_trd, key_identifiers)


def register(registry: Registry) -> None:
    for module in MODULES:
        module.register(registry)
