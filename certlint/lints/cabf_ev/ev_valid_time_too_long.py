"""
EVGs: 9.4

The validity period for an EV Certificate SHALL NOT exceed 825 days.
"""

from __future__ import annotations

from ...lint.base import Lint, LintMetadata, LintResult, LintStatus, Source
from ...lint.registry import Registry
from ...x509.certificate import Certificate
from ..util import EV_GUIDELINES_DATE, is_ev, is_subscriber_cert

MAX_DAYS = 825


def check_applies(c: Certificate) -> bool:
    return is_ev(c) and is_subscriber_cert(c)


def execute(c: Certificate) -> LintResult:
    if c.validity_days > MAX_DAYS:
        return LintResult(LintStatus.ERROR, f"EV validity period exceeds {MAX_DAYS} days")
    return LintResult.passed()


LINT = Lint(
    metadata=LintMetadata(
        name="e_ev_valid_time_too_long",
        description="EV certificates must not have a validity period longer than 825 days",
        citation="EVGs: 9.4",
        source=Source.CABF_EV,
        effective_date=EV_GUIDELINES_DATE,
    ),
    check_applies=check_applies,
    execute=execute,
)


def register(registry: Registry) -> None:
    registry.register(LINT)
