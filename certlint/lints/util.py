"""Shared dates and certificate predicates for the lint corpus."""

from __future__ import annotations

import ipaddress
from datetime import datetime, timezone

from tldextract import TLDExtract

from ..x509 import oids
from ..x509.certificate import Certificate


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


# Effective dates of the documents (and ballots) lints cite
ZERO_DATE = datetime(1, 1, 1, tzinfo=timezone.utc)
RFC5280_DATE = _utc(2008, 5, 1)
CAB_EFFECTIVE_DATE = _utc(2012, 7, 1)
CAB_V131_DATE = _utc(2015, 9, 28)
SUB_CERT_825_DAYS_DATE = _utc(2018, 3, 1)
SUB_CERT_398_DAYS_DATE = _utc(2020, 9, 1)
EV_GUIDELINES_DATE = _utc(2007, 6, 12)
SMIME_BR_DATE = _utc(2023, 9, 1)

# Public Suffix List lookups use the snapshot bundled with tldextract; lints
# never fetch the live list, so verdicts do not depend on network access.
_PSL = TLDExtract(suffix_list_urls=())


def is_subscriber_cert(c: Certificate) -> bool:
    return not c.is_ca


def is_ca_cert(c: Certificate) -> bool:
    return c.is_ca


def is_ev(c: Certificate) -> bool:
    return c.has_policy(oids.EV_GUIDELINES)


def is_legacy_smime(c: Certificate) -> bool:
    return any(p in oids.SMIME_LEGACY_POLICIES for p in c.policy_oids)


def is_ip_literal(host: str) -> bool:
    try:
        ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        return False
    return True


def _normalize(name: str) -> str:
    return name.strip().rstrip(".").lower()


def has_public_suffix(host: str) -> bool:
    """
    True if `host` ends in a suffix on the Public Suffix List.

    Bare labels, reserved names (.local, .internal, ...) and made-up TLDs
    have no public suffix. An empty host has none either.
    """
    host = _normalize(host)
    if not host:
        return False
    return bool(_PSL(host).suffix)


def subdomain_labels(name: str) -> list[str]:
    """
    Labels to the left of the registrable domain (domain + public suffix).

    `foo.a_b.co.uk` -> ["foo"]. For a name without a known suffix the last
    label is taken as the registrable domain.
    """
    subdomain = _PSL(_normalize(name)).subdomain
    return subdomain.split(".") if subdomain else []
