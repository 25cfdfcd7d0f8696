"""
RFC 5280: 4.2.1.1, 4.2.1.2

The keyIdentifier field of the authorityKeyIdentifier extension MUST be
included in all certificates generated by conforming CAs, except where a CA
distributes its public key as a self-signed certificate. For end entity
certificates, the subject key identifier extension SHOULD be included.
"""

from __future__ import annotations

from ...lint.base import Lint, LintMetadata, LintResult, LintStatus, Source
from ...lint.registry import Registry
from ...x509.certificate import Certificate
from ..util import RFC5280_DATE, is_subscriber_cert


def aki_applies(c: Certificate) -> bool:
    return not c.is_self_issued


def aki_execute(c: Certificate) -> LintResult:
    if c.authority_key_id is None:
        return LintResult(LintStatus.ERROR, "authorityKeyIdentifier keyIdentifier is missing")
    return LintResult.passed()


def ski_execute(c: Certificate) -> LintResult:
    if c.subject_key_id is None:
        return LintResult(LintStatus.WARN, "subjectKeyIdentifier is missing")
    return LintResult.passed()


AKI_LINT = Lint(
    metadata=LintMetadata(
        name="e_ext_authority_key_identifier_missing",
        description="CAs must include keyIdentifer field of AKI in all non-self-issued certificates",
        citation="RFC 5280: 4.2.1.1",
        source=Source.RFC5280,
        effective_date=RFC5280_DATE,
    ),
    check_applies=aki_applies,
    execute=aki_execute,
)

SKI_LINT = Lint(
    metadata=LintMetadata(
        name="w_ext_subject_key_identifier_missing_sub_cert",
        description="Sub certificates SHOULD include Subject Key Identifier in end entity certs",
        citation="RFC 5280: 4.2 & 4.2.1.2",
        source=Source.RFC5280,
        effective_date=RFC5280_DATE,
    ),
    check_applies=is_subscriber_cert,
    execute=ski_execute,
)


def register(registry: Registry) -> None:
    registry.register(AKI_LINT)
    registry.register(SKI_LINT)
