"""
BRs: 7.1.6.4

If the Certificate asserts the policy identifier of 2.23.140.1.2.3, then it
MUST also include (i) either organizationName or givenName and surname,
(ii) localityName (to the extent such field is required under Section
7.1.4.2.2), (iii) stateOrProvinceName (to the extent required under Section
7.1.4.2.2), and (iv) countryName in the Subject field.
"""

from __future__ import annotations

from ...lint.base import Lint, LintMetadata, LintResult, LintStatus, Source
from ...lint.registry import Registry
from ...x509 import oids
from ...x509.certificate import Certificate
from ..util import CAB_V131_DATE


def check_applies(c: Certificate) -> bool:
    return c.has_policy(oids.BR_INDIVIDUAL_VALIDATED)


def execute(c: Certificate) -> LintResult:
    if c.subject.countries:
        return LintResult.passed()
    return LintResult(LintStatus.ERROR, "IV certificate subject is missing countryName")


LINT = Lint(
    metadata=LintMetadata(
        name="e_cert_policy_iv_requires_country",
        description="If certificate policy 2.23.140.1.2.3 is included, countryName MUST be included in subject",
        citation="BRs: 7.1.6.4",
        source=Source.CABF_BR,
        effective_date=CAB_V131_DATE,
    ),
    check_applies=check_applies,
    execute=execute,
)


def register(registry: Registry) -> None:
    registry.register(LINT)
