"""
SMIME BRs: 7.1.2.3c

CA Certificate Authority Information Access. The authorityInformationAccess
extension MAY contain one or more accessMethod values for each of the
following types:

    id-ad-ocsp        specifies the URI of the Issuing CA's OCSP responder.
    id-ad-caIssuers   specifies the URI of the Issuing CA's Certificate.

For Legacy: when provided, at least one accessMethod SHALL have the URI
scheme HTTP. Other schemes (LDAP, FTP, ...) MAY be present.
"""

from __future__ import annotations

from urllib.parse import urlparse

from ...lint.base import Lint, LintMetadata, LintResult, LintStatus, Source
from ...lint.registry import Registry
from ...x509.certificate import Certificate
from ..util import CAB_EFFECTIVE_DATE, has_public_suffix, is_ip_literal, is_legacy_smime

HTTP_REQUIRED = "at least one accessMethod MUST have the URI scheme HTTP"


def check_applies(c: Certificate) -> bool:
    return is_legacy_smime(c)


def _check_urls(urls: tuple[str, ...]) -> LintResult | None:
    has_http = False
    for url in urls:
        try:
            parsed = urlparse(url)
            host = parsed.hostname or ""
        except ValueError:
            return LintResult(LintStatus.ERROR, f"unparseable accessLocation: {url!r}")
        if not is_ip_literal(host) and not has_public_suffix(host):
            return LintResult(LintStatus.WARN, f"accessLocation host is not under a public suffix: {url!r}")
        if parsed.scheme == "http":
            has_http = True
    if urls and not has_http:
        return LintResult(LintStatus.ERROR, HTTP_REQUIRED)
    return None


def execute(c: Certificate) -> LintResult:
    for urls in (c.ocsp_servers, c.issuing_certificate_urls):
        finding = _check_urls(urls)
        if finding is not None:
            return finding
    return LintResult.passed()


LINT = Lint(
    metadata=LintMetadata(
        name="w_smime_legacy_aia_contains_internal_names",
        description=(
            "SMIME Legacy certificates authorityInformationAccess: when provided, at least one "
            "accessMethod SHALL have the URI scheme HTTP. Other schemes (LDAP, FTP, ...) MAY be present."
        ),
        citation="BRs: 7.1.2.3c",
        source=Source.CABF_SMIME_BR,
        effective_date=CAB_EFFECTIVE_DATE,
    ),
    check_applies=check_applies,
    execute=execute,
)


def register(registry: Registry) -> None:
    registry.register(LINT)
