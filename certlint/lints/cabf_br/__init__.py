"""Lints for the CA/Browser Forum Baseline Requirements."""

from __future__ import annotations

from ...lint.registry import Registry
from . import (
    cert_policy_iv_requires_country,
    cert_policy_ov_requires_country,
    sub_cert_validity_period,
    subject_common_name_from_san,
)

MODULES = (
    cert_policy_iv_requires_country,
    cert_policy_ov_requires_country,
    sub_cert_validity_period,
    subject_common_name_from_san,
)


def register(registry: Registry) -> None:
    for module in MODULES:
        module.register(registry)
