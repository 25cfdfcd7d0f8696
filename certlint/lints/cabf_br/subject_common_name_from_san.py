"""
BRs: 7.1.4.3

If present, the subject commonName field MUST contain a single IP address or
Fully-Qualified Domain Name that is one of the values contained in the
Certificate's subjectAltName extension.

Two variants exist: the historical case-insensitive comparison and the
byte-for-byte comparison required since ballot SC62. They express the same
requirement and are mutually exclusive; include the one you want by name.
"""

from __future__ import annotations

from ...lint.base import Lint, LintMetadata, LintResult, LintStatus, Source
from ...lint.registry import Registry
from ...x509.certificate import Certificate
from ..util import CAB_EFFECTIVE_DATE, is_subscriber_cert

CITATION = "BRs: 7.1.4.3"


def check_applies(c: Certificate) -> bool:
    return is_subscriber_cert(c) and bool(c.subject.common_names)


def execute_case_insensitive(c: Certificate) -> LintResult:
    sans = {name.lower() for name in c.dns_names} | set(c.ip_addresses)
    for cn in c.subject.common_names:
        if cn.lower() not in sans:
            return LintResult(LintStatus.ERROR, f"commonName {cn!r} not found in subjectAltName")
    return LintResult.passed()


def execute_exact(c: Certificate) -> LintResult:
    sans = set(c.dns_names) | set(c.ip_addresses)
    for cn in c.subject.common_names:
        if cn not in sans:
            return LintResult(
                LintStatus.ERROR,
                f"commonName {cn!r} is not an exact copy of a subjectAltName value",
            )
    return LintResult.passed()


LINT_CASE_INSENSITIVE = Lint(
    metadata=LintMetadata(
        name="e_subject_common_name_not_from_san",
        description="Subscriber certificate commonName MUST be one of the subjectAltName values (case-insensitive).",
        citation=CITATION,
        source=Source.CABF_BR,
        effective_date=CAB_EFFECTIVE_DATE,
        mutually_exclusive_with=frozenset({"e_subject_common_name_not_exactly_from_san"}),
    ),
    check_applies=check_applies,
    execute=execute_case_insensitive,
)

LINT_EXACT = Lint(
    metadata=LintMetadata(
        name="e_subject_common_name_not_exactly_from_san",
        description="Subscriber certificate commonName MUST be a byte-for-byte copy of a subjectAltName value.",
        citation=CITATION,
        source=Source.CABF_BR,
        effective_date=CAB_EFFECTIVE_DATE,
    ),
    check_applies=check_applies,
    execute=execute_exact,
)


def register(registry: Registry) -> None:
    registry.register(LINT_CASE_INSENSITIVE)
    registry.register(LINT_EXACT)
