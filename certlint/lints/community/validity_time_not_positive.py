"""Flags certificates whose notBefore is later than their notAfter."""

from __future__ import annotations

from ...lint.base import Lint, LintMetadata, LintResult, LintStatus, Source
from ...lint.registry import Registry
from ...x509.certificate import Certificate
from ..util import ZERO_DATE


def check_applies(c: Certificate) -> bool:
    return True


def execute(c: Certificate) -> LintResult:
    if c.not_before > c.not_after:
        return LintResult(LintStatus.ERROR, "notBefore is after notAfter")
    return LintResult.passed()


LINT = Lint(
    metadata=LintMetadata(
        name="e_validity_time_not_positive",
        description="Certificates MUST have a positive time for which they are valid",
        citation="lint.AWSLabs certlint",
        source=Source.COMMUNITY,
        effective_date=ZERO_DATE,
    ),
    check_applies=check_applies,
    execute=execute,
)


def register(registry: Registry) -> None:
    registry.register(LINT)
