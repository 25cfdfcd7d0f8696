"""
Tests for the built-in lint corpus.

Each lint is looked up in the default registry and run through the
executor's single-lint entry point, so the time window and applicability
checks are exercised along with the rule body.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from certlint.lint import LintStatus, default_registry, run_lint
from certlint.lints.util import has_public_suffix, is_ip_literal, subdomain_labels
from certlint.x509 import Extension
from certlint.x509 import oids


def _utc(year: int, month: int = 1, day: int = 1) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def _status(name: str, cert) -> LintStatus:
    lint = default_registry().get(name)
    assert lint is not None, name
    return run_lint(lint, cert, cert.not_before).status


# -----------------------------------------------------------------------------
# CA/Browser Forum Baseline Requirements
# -----------------------------------------------------------------------------


class TestPolicyRequiresCountry:
    @pytest.mark.parametrize(
        "name, policy",
        [
            ("e_cert_policy_iv_requires_country", oids.BR_INDIVIDUAL_VALIDATED),
            ("e_cert_policy_ov_requires_country", oids.BR_ORGANIZATION_VALIDATED),
        ],
    )
    def test_missing_country_is_error(self, cert_factory, make_name, name, policy):
        cert = cert_factory(subject=make_name(cn="example.com", o="Example"), policy_oids=(policy,))
        assert _status(name, cert) == LintStatus.ERROR

    @pytest.mark.parametrize(
        "name, policy",
        [
            ("e_cert_policy_iv_requires_country", oids.BR_INDIVIDUAL_VALIDATED),
            ("e_cert_policy_ov_requires_country", oids.BR_ORGANIZATION_VALIDATED),
        ],
    )
    def test_country_present_passes(self, cert_factory, name, policy):
        cert = cert_factory(policy_oids=(policy,))
        assert _status(name, cert) == LintStatus.PASS

    def test_without_policy_not_applicable(self, cert_factory, make_name):
        cert = cert_factory(subject=make_name(cn="example.com"), policy_oids=(oids.BR_DOMAIN_VALIDATED,))
        assert _status("e_cert_policy_ov_requires_country", cert) == LintStatus.NA

    def test_iv_before_effective_date_not_applicable(self, cert_factory, make_name):
        cert = cert_factory(
            not_before=_utc(2015, 1, 1),
            subject=make_name(given_name="Jane", surname="Doe"),
            policy_oids=(oids.BR_INDIVIDUAL_VALIDATED,),
        )
        assert _status("e_cert_policy_iv_requires_country", cert) == LintStatus.NA


class TestSubscriberValidityPeriod:
    def test_398_day_limit(self, cert_factory):
        start = _utc(2021)
        long_cert = cert_factory(not_before=start, not_after=start + timedelta(days=400))
        ok_cert = cert_factory(not_before=start, not_after=start + timedelta(days=398, seconds=-1))

        assert _status("e_sub_cert_valid_time_longer_than_398_days", long_cert) == LintStatus.ERROR
        assert _status("e_sub_cert_valid_time_longer_than_398_days", ok_cert) == LintStatus.PASS

    def test_825_day_limit_only_before_398_date(self, cert_factory):
        start = _utc(2019)
        cert = cert_factory(not_before=start, not_after=start + timedelta(days=700))

        assert _status("e_sub_cert_valid_time_longer_than_825_days", cert) == LintStatus.PASS
        assert _status("e_sub_cert_valid_time_longer_than_398_days", cert) == LintStatus.NA

        later = cert_factory(not_before=_utc(2021), not_after=_utc(2021) + timedelta(days=900))
        assert _status("e_sub_cert_valid_time_longer_than_825_days", later) == LintStatus.NA

    def test_ca_certificates_exempt(self, cert_factory):
        cert = cert_factory(is_ca=True, not_after=_utc(2031))
        assert _status("e_sub_cert_valid_time_longer_than_398_days", cert) == LintStatus.NA


class TestCommonNameFromSan:
    def test_case_difference(self, cert_factory, make_name):
        cert = cert_factory(subject=make_name(cn="Example.COM", c="US"))
        assert _status("e_subject_common_name_not_from_san", cert) == LintStatus.PASS
        assert _status("e_subject_common_name_not_exactly_from_san", cert) == LintStatus.ERROR

    def test_cn_missing_from_san(self, cert_factory, make_name):
        cert = cert_factory(subject=make_name(cn="other.example.net"))
        assert _status("e_subject_common_name_not_from_san", cert) == LintStatus.ERROR

    def test_ip_common_name(self, cert_factory, make_name):
        cert = cert_factory(subject=make_name(cn="192.0.2.1"), ip_addresses=("192.0.2.1",))
        assert _status("e_subject_common_name_not_exactly_from_san", cert) == LintStatus.PASS

    def test_no_common_name_not_applicable(self, cert_factory, make_name):
        cert = cert_factory(subject=make_name(o="Example"))
        assert _status("e_subject_common_name_not_exactly_from_san", cert) == LintStatus.NA


# -----------------------------------------------------------------------------
# EV Guidelines
# -----------------------------------------------------------------------------


class TestEv:
    def test_ip_in_san_is_error(self, cert_factory):
        cert = cert_factory(policy_oids=(oids.EV_GUIDELINES,), ip_addresses=("192.0.2.1",))
        assert _status("e_ev_san_ip_address_present", cert) == LintStatus.ERROR

    def test_non_ev_not_applicable(self, cert_factory):
        cert = cert_factory(ip_addresses=("192.0.2.1",))
        assert _status("e_ev_san_ip_address_present", cert) == LintStatus.NA

    def test_validity_too_long(self, cert_factory):
        start = _utc(2016)
        cert = cert_factory(
            not_before=start,
            not_after=start + timedelta(days=900),
            policy_oids=(oids.EV_GUIDELINES,),
        )
        assert _status("e_ev_valid_time_too_long", cert) == LintStatus.ERROR

    def test_validity_ok(self, cert_factory):
        cert = cert_factory(policy_oids=(oids.EV_GUIDELINES,))
        assert _status("e_ev_valid_time_too_long", cert) == LintStatus.PASS


# -----------------------------------------------------------------------------
# S/MIME Baseline Requirements
# -----------------------------------------------------------------------------


class TestSmimeLegacyAia:
    @pytest.fixture
    def legacy(self, cert_factory):
        policy = next(iter(sorted(oids.SMIME_LEGACY_POLICIES)))

        def make(**overrides):
            return cert_factory(policy_oids=(policy,), **overrides)

        return make

    def test_public_http_passes(self, legacy):
        cert = legacy(
            ocsp_servers=("http://ocsp.example.com",),
            issuing_certificate_urls=("http://ca.example.com/ca.crt", "ldap://ldap.example.com/ca"),
        )
        assert _status("w_smime_legacy_aia_contains_internal_names", cert) == LintStatus.PASS

    def test_internal_name_warns(self, legacy):
        cert = legacy(ocsp_servers=("http://ocsp.corp",))
        assert _status("w_smime_legacy_aia_contains_internal_names", cert) == LintStatus.WARN

    def test_bare_label_warns(self, legacy):
        cert = legacy(issuing_certificate_urls=("http://ca-server/ca.crt",))
        assert _status("w_smime_legacy_aia_contains_internal_names", cert) == LintStatus.WARN

    def test_unknown_tld_warns(self, legacy):
        cert = legacy(ocsp_servers=("http://ocsp.example.notarealtld",))
        assert _status("w_smime_legacy_aia_contains_internal_names", cert) == LintStatus.WARN

    def test_empty_host_warns(self, legacy):
        cert = legacy(ocsp_servers=("http:///ocsp",))
        assert _status("w_smime_legacy_aia_contains_internal_names", cert) == LintStatus.WARN

    def test_ip_literal_host_passes(self, legacy):
        cert = legacy(ocsp_servers=("http://192.0.2.1/ocsp",))
        assert _status("w_smime_legacy_aia_contains_internal_names", cert) == LintStatus.PASS

    def test_no_http_is_error(self, legacy):
        cert = legacy(ocsp_servers=("ldap://ldap.example.com/ocsp",))
        assert _status("w_smime_legacy_aia_contains_internal_names", cert) == LintStatus.ERROR

    def test_non_legacy_not_applicable(self, cert_factory):
        cert = cert_factory(ocsp_servers=("http://ocsp.corp",))
        assert _status("w_smime_legacy_aia_contains_internal_names", cert) == LintStatus.NA


# -----------------------------------------------------------------------------
# Community
# -----------------------------------------------------------------------------


def test_duplicate_dns_name_notice(cert_factory):
    cert = cert_factory(dns_names=("example.com", "EXAMPLE.com"))
    assert _status("n_san_dns_name_duplicate", cert) == LintStatus.NOTICE


def test_duplicate_dns_name_requires_san(cert_factory):
    cert = cert_factory(extensions=(), dns_names=("example.com", "example.com"))
    assert _status("n_san_dns_name_duplicate", cert) == LintStatus.NA


def test_validity_not_positive(cert_factory):
    cert = cert_factory(not_after=_utc(2020))
    assert _status("e_validity_time_not_positive", cert) == LintStatus.ERROR
    assert _status("e_validity_time_not_positive", cert_factory()) == LintStatus.PASS


def test_common_name_included_is_deprecated(cert_factory):
    lint = default_registry().get("n_subject_common_name_included")
    assert lint.metadata.deprecated
    assert _status("n_subject_common_name_included", cert_factory()) == LintStatus.NOTICE


# -----------------------------------------------------------------------------
# RFC 5280
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "dns_name, expected",
    [
        ("foo_bar.example.com", LintStatus.WARN),
        ("a.b_c.example.com", LintStatus.WARN),
        ("foo.example_co.com", LintStatus.PASS),
        ("www.example.com", LintStatus.PASS),
        ("foo.a_b.co.uk", LintStatus.PASS),
        ("x_y.example.com.au", LintStatus.WARN),
    ],
)
def test_underscore_in_subdomain(cert_factory, dns_name, expected):
    cert = cert_factory(dns_names=(dns_name,))
    assert _status("w_rfc_dnsname_underscore_in_trd", cert) == expected


def test_aki_missing(cert_factory):
    cert = cert_factory(authority_key_id=None)
    assert _status("e_ext_authority_key_identifier_missing", cert) == LintStatus.ERROR


def test_aki_not_required_when_self_issued(cert_factory, make_name):
    name = make_name(cn="Example Root CA", c="US")
    cert = cert_factory(subject=name, issuer=name, authority_key_id=None, is_ca=True)
    assert _status("e_ext_authority_key_identifier_missing", cert) == LintStatus.NA


def test_ski_missing_on_subscriber(cert_factory):
    cert = cert_factory(
        subject_key_id=None,
        extensions=(Extension(oids.SUBJECT_ALT_NAME, False),),
    )
    assert _status("w_ext_subject_key_identifier_missing_sub_cert", cert) == LintStatus.WARN


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "host, expected",
    [
        ("ocsp.example.com", True),
        ("OCSP.Example.CO.UK.", True),
        ("ocsp.corp", False),
        ("server.local.", False),
        ("intranet", False),
        ("ocsp.example.notarealtld", False),
        ("", False),
    ],
)
def test_has_public_suffix(host, expected):
    assert has_public_suffix(host) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("www.example.com.", ["www"]),
        ("foo.a_b.co.uk", ["foo"]),
        ("a.b.example.com.au", ["a", "b"]),
        ("example.com", []),
    ],
)
def test_subdomain_labels(name, expected):
    assert subdomain_labels(name) == expected


def test_ip_literal():
    assert is_ip_literal("2001:db8::1")
    assert is_ip_literal("[2001:db8::1]")
    assert not is_ip_literal("example.com")
    assert not is_ip_literal("")
