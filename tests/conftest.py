"""Pytest configuration and fixtures."""

from __future__ import annotations

import ipaddress
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Iterable

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import AuthorityInformationAccessOID, NameOID

from certlint.lint import Lint, LintMetadata, LintResult, LintStatus, Registry, Source
from certlint.x509 import Certificate, Extension, Name, NameAttribute
from certlint.x509 import oids

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
X509_NOT_BEFORE = datetime(2024, 3, 1, tzinfo=timezone.utc)


def _make_name(**attrs: str) -> Name:
    """Build a Name from keyword attributes: cn, c, o, given_name, surname."""
    oid_for = {
        "cn": oids.COMMON_NAME,
        "c": oids.COUNTRY_NAME,
        "o": oids.ORGANIZATION_NAME,
        "given_name": oids.GIVEN_NAME,
        "surname": oids.SURNAME,
    }
    return Name(tuple(NameAttribute(oid_for[key], value) for key, value in attrs.items()))


def _make_lint(
    name: str,
    *,
    status: LintStatus = LintStatus.PASS,
    details: str | None = None,
    source: Source = Source.CUSTOM,
    effective_date: datetime = EPOCH,
    ineffective_date: datetime | None = None,
    exclusive: Iterable[str] = (),
    deprecated: bool = False,
    applies: bool = True,
    check_applies: Callable[[Certificate], bool] | None = None,
    execute: Callable[[Certificate], Any] | None = None,
) -> Lint:
    """Build a test lint that returns `status` unless `execute` is given."""
    return Lint(
        metadata=LintMetadata(
            name=name,
            description=f"test lint {name}",
            citation="test",
            source=source,
            effective_date=effective_date,
            ineffective_date=ineffective_date,
            mutually_exclusive_with=frozenset(exclusive),
            deprecated=deprecated,
        ),
        check_applies=check_applies or (lambda c: applies),
        execute=execute or (lambda c: LintResult(status, details)),
    )


@pytest.fixture
def cert_factory() -> Callable[..., Certificate]:
    """Factory for well-formed subscriber certificates; keyword args override fields."""

    def make(**overrides: Any) -> Certificate:
        not_before = overrides.pop("not_before", datetime(2021, 1, 1, tzinfo=timezone.utc))
        fields: dict[str, Any] = {
            "not_before": not_before,
            "not_after": not_before + timedelta(days=90),
            "subject": _make_name(cn="example.com", c="US"),
            "issuer": _make_name(cn="Example Issuing CA", c="US"),
            "serial_number": 1,
            "extensions": (
                Extension(oids.SUBJECT_ALT_NAME, False),
                Extension(oids.SUBJECT_KEY_IDENTIFIER, False),
                Extension(oids.AUTHORITY_KEY_IDENTIFIER, False),
            ),
            "dns_names": ("example.com", "www.example.com"),
            "subject_key_id": b"\x01" * 20,
            "authority_key_id": b"\x02" * 20,
        }
        fields.update(overrides)
        return Certificate(**fields)

    return make


@pytest.fixture
def make_lint() -> Callable[..., Lint]:
    return _make_lint


@pytest.fixture
def registry_factory() -> Callable[..., Registry]:
    """Build and freeze a registry from the given lints."""

    def make(*lints: Lint, freeze: bool = True) -> Registry:
        registry = Registry()
        for lint in lints:
            registry.register(lint)
        return registry.freeze() if freeze else registry

    return make


@pytest.fixture
def make_name() -> Callable[..., Name]:
    return _make_name


def _build_x509(
    common_name: str = "example.com",
    dns_names: tuple[str, ...] = ("example.com", "www.example.com"),
    days: int = 90,
    serial: int = 1000,
) -> x509.Certificate:
    key = ec.generate_private_key(ec.SECP256R1())
    issuer_key = ec.generate_private_key(ec.SECP256R1())

    subject = x509.Name(
        [
            x509.NameAttribute(NameOID.COUNTRY_NAME, "US"),
            x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Example Org"),
            x509.NameAttribute(NameOID.COMMON_NAME, common_name),
        ]
    )
    issuer = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "Example Issuing CA")])

    builder = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(issuer)
        .public_key(key.public_key())
        .serial_number(serial)
        .not_valid_before(X509_NOT_BEFORE)
        .not_valid_after(X509_NOT_BEFORE + timedelta(days=days))
        .add_extension(x509.BasicConstraints(ca=False, path_length=None), critical=True)
        .add_extension(
            x509.SubjectAlternativeName(
                [x509.DNSName(n) for n in dns_names]
                + [x509.IPAddress(ipaddress.ip_address("192.0.2.10"))]
            ),
            critical=False,
        )
        .add_extension(x509.SubjectKeyIdentifier.from_public_key(key.public_key()), critical=False)
        .add_extension(
            x509.AuthorityKeyIdentifier.from_issuer_public_key(issuer_key.public_key()),
            critical=False,
        )
        .add_extension(
            x509.CertificatePolicies(
                [x509.PolicyInformation(x509.ObjectIdentifier(oids.BR_ORGANIZATION_VALIDATED), None)]
            ),
            critical=False,
        )
        .add_extension(
            x509.AuthorityInformationAccess(
                [
                    x509.AccessDescription(
                        AuthorityInformationAccessOID.OCSP,
                        x509.UniformResourceIdentifier("http://ocsp.example.com"),
                    ),
                    x509.AccessDescription(
                        AuthorityInformationAccessOID.CA_ISSUERS,
                        x509.UniformResourceIdentifier("http://ca.example.com/ca.crt"),
                    ),
                ]
            ),
            critical=False,
        )
    )
    return builder.sign(issuer_key, hashes.SHA256())


@pytest.fixture
def x509_factory() -> Callable[..., x509.Certificate]:
    """Factory for signed `cryptography` leaf certificates (OV policy, SAN, AIA, key ids)."""
    return _build_x509
