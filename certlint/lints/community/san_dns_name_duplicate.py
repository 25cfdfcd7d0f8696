"""Flags subjectAltName extensions that list the same dNSName more than once."""

from __future__ import annotations

from ...lint.base import Lint, LintMetadata, LintResult, LintStatus, Source
from ...lint.registry import Registry
from ...x509 import oids
from ...x509.certificate import Certificate
from ..util import ZERO_DATE


def check_applies(c: Certificate) -> bool:
    return c.has_extension(oids.SUBJECT_ALT_NAME)


def execute(c: Certificate) -> LintResult:
    seen: set[str] = set()
    for name in c.dns_names:
        key = name.lower()
        if key in seen:
            return LintResult(LintStatus.NOTICE, f"duplicate dNSName in subjectAltName: {name}")
        seen.add(key)
    return LintResult.passed()


LINT = Lint(
    metadata=LintMetadata(
        name="n_san_dns_name_duplicate",
        description="SAN DNSName contains duplicate values",
        citation="awslabs certlint",
        source=Source.COMMUNITY,
        effective_date=ZERO_DATE,
    ),
    check_applies=check_applies,
    execute=execute,
)


def register(registry: Registry) -> None:
    registry.register(LINT)
