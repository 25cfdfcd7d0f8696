"""
Notes subscriber certificates that still carry a subject commonName.

Deprecated: superseded by the BR commonName lints, kept for callers that
select it by name.
"""

from __future__ import annotations

from ...lint.base import Lint, LintMetadata, LintResult, LintStatus, Source
from ...lint.registry import Registry
from ...x509.certificate import Certificate
from ..util import CAB_EFFECTIVE_DATE, is_subscriber_cert


def check_applies(c: Certificate) -> bool:
    return is_subscriber_cert(c)


def execute(c: Certificate) -> LintResult:
    if c.subject.common_names:
        return LintResult(LintStatus.NOTICE, "subscriber certificate includes subject commonName")
    return LintResult.passed()


LINT = Lint(
    metadata=LintMetadata(
        name="n_subject_common_name_included",
        description="Subscriber Certificate: commonName is deprecated.",
        citation="BRs: 7.1.4.2.2",
        source=Source.COMMUNITY,
        effective_date=CAB_EFFECTIVE_DATE,
        deprecated=True,
    ),
    check_applies=check_applies,
    execute=execute,
)


def register(registry: Registry) -> None:
    registry.register(LINT)
