"""
BRs: 6.3.2

Subscriber Certificates issued after 1 March 2018 MUST have a Validity
Period no greater than 825 days. Subscriber Certificates issued on or after
1 September 2020 SHOULD NOT have a Validity Period greater than 397 days and
MUST NOT have a Validity Period greater than 398 days.

The two limits are registered as separate lints whose effective windows do
not overlap.
"""

from __future__ import annotations

from typing import Callable

from ...lint.base import Lint, LintMetadata, LintResult, LintStatus, Source
from ...lint.registry import Registry
from ...x509.certificate import Certificate
from ..util import SUB_CERT_398_DAYS_DATE, SUB_CERT_825_DAYS_DATE, is_subscriber_cert


def _max_validity(limit: int) -> Callable[[Certificate], LintResult]:
    def execute(c: Certificate) -> LintResult:
        days = c.validity_days
        if days > limit:
            return LintResult(
                LintStatus.ERROR,
                f"validity period is {days:.0f} days; maximum is {limit}",
            )
        return LintResult.passed()

    return execute


LINT_825 = Lint(
    metadata=LintMetadata(
        name="e_sub_cert_valid_time_longer_than_825_days",
        description="Subscriber Certificates issued after 1 March 2018 MUST have a Validity Period no greater than 825 days.",
        citation="BRs: 6.3.2",
        source=Source.CABF_BR,
        effective_date=SUB_CERT_825_DAYS_DATE,
        ineffective_date=SUB_CERT_398_DAYS_DATE,
    ),
    check_applies=is_subscriber_cert,
    execute=_max_validity(825),
)

LINT_398 = Lint(
    metadata=LintMetadata(
        name="e_sub_cert_valid_time_longer_than_398_days",
        description="Subscriber Certificates issued on or after 1 September 2020 MUST NOT have a Validity Period greater than 398 days.",
        citation="BRs: 6.3.2",
        source=Source.CABF_BR,
        effective_date=SUB_CERT_398_DAYS_DATE,
    ),
    check_applies=is_subscriber_cert,
    execute=_max_validity(398),
)


def register(registry: Registry) -> None:
    registry.register(LINT_825)
    registry.register(LINT_398)
