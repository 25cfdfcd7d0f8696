"""
EVGs: 9.2.2

This extension MUST contain one or more host Domain Name(s) as specified in
RFC 5280. This extension MUST NOT contain IP Addresses.
"""

from __future__ import annotations

from ...lint.base import Lint, LintMetadata, LintResult, LintStatus, Source
from ...lint.registry import Registry
from ...x509.certificate import Certificate
from ..util import EV_GUIDELINES_DATE, is_ev, is_subscriber_cert


def check_applies(c: Certificate) -> bool:
    return is_ev(c) and is_subscriber_cert(c)


def execute(c: Certificate) -> LintResult:
    if c.ip_addresses:
        return LintResult(
            LintStatus.ERROR,
            f"subjectAltName contains IP address(es): {', '.join(c.ip_addresses)}",
        )
    return LintResult.passed()


LINT = Lint(
    metadata=LintMetadata(
        name="e_ev_san_ip_address_present",
        description="The Subject Alternate Name extension MUST contain only 'dnsName' name types.",
        citation="EVGs: 9.2.2",
        source=Source.CABF_EV,
        effective_date=EV_GUIDELINES_DATE,
    ),
    check_applies=check_applies,
    execute=execute,
)


def register(registry: Registry) -> None:
    registry.register(LINT)
