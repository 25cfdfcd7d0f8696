"""
RFC 5280: 4.2.1.6

Underscores are not valid in hostnames; labels to the left of the registrable
domain (the third-level and deeper labels) SHOULD NOT contain them. The
registrable domain is the public suffix plus one label, so for `a.b.co.uk`
only `a` is checked.
"""

from __future__ import annotations

from ...lint.base import Lint, LintMetadata, LintResult, LintStatus, Source
from ...lint.registry import Registry
from ...x509.certificate import Certificate
from ..util import RFC5280_DATE, is_subscriber_cert, subdomain_labels


def check_applies(c: Certificate) -> bool:
    return is_subscriber_cert(c) and bool(c.dns_names)


def execute(c: Certificate) -> LintResult:
    for name in c.dns_names:
        labels = subdomain_labels(name)
        for label in labels:
            if "_" in label:
                return LintResult(LintStatus.WARN, f"dNSName {name!r} has an underscore in a subdomain label")
    return LintResult.passed()


LINT = Lint(
    metadata=LintMetadata(
        name="w_rfc_dnsname_underscore_in_trd",
        description="DNSName MUST NOT contain underscore characters in its third-level or deeper labels",
        citation="RFC5280: 4.2.1.6",
        source=Source.RFC5280,
        effective_date=RFC5280_DATE,
    ),
    check_applies=check_applies,
    execute=execute,
)


def register(registry: Registry) -> None:
    registry.register(LINT)
