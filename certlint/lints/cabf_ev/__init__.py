"""Lints for the CA/Browser Forum EV Guidelines."""

from __future__ import annotations

from ...lint.registry import Registry
from . import ev_san_ip_address_present, ev_valid_time_too_long

MODULES = (ev_san_ip_address_present, ev_valid_time_too_long)


def register(registry: Registry) -> None:
    for module in MODULES:
        module.register(registry)
