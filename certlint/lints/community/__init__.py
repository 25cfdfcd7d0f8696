"""Community best-practice lints."""

from __future__ import annotations

from ...lint.registry import Registry
from . import san_dns_name_duplicate, subject_common_name_included, validity_time_not_positive

MODULES = (san_dns_name_duplicate, subject_common_name_included, validity_time_not_positive)


def register(registry: Registry) -> None:
    for module in MODULES:
        module.register(registry)
