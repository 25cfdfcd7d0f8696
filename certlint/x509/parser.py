"""
Certificate adapter: PEM/DER bytes -> Certificate.

Decoding is delegated to `cryptography`; this module only copies the fields
the lint corpus reads into the engine's immutable Certificate value.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.x509.oid import AuthorityInformationAccessOID

from ..errors import CertificateParseError
from .certificate import Certificate, Extension, Name, NameAttribute

PEM_MARKER = b"-----BEGIN CERTIFICATE-----"

# Decoding failures; cryptography raises some of these outside ValueError
_DECODE_ERRORS = (
    ValueError,
    x509.DuplicateExtension,
    x509.UnsupportedGeneralNameType,
    x509.InvalidVersion,
)


def _convert_name(name: x509.Name) -> Name:
    attrs = []
    for attr in name:
        value = attr.value if isinstance(attr.value, str) else attr.value.hex()
        attrs.append(NameAttribute(oid=attr.oid.dotted_string, value=value))
    return Name(attributes=tuple(attrs))


def _ext_value(extensions: x509.Extensions, ext_class: type) -> Any:
    try:
        return extensions.get_extension_for_class(ext_class).value
    except x509.ExtensionNotFound:
        return None


def from_cryptography(cert: x509.Certificate) -> Certificate:
    """Build a Certificate from an already-loaded `cryptography` certificate."""
    try:
        extensions = cert.extensions
    except _DECODE_ERRORS as e:
        raise CertificateParseError(f"Failed to decode extensions: {e}") from e

    dns_names: list[str] = []
    ip_addresses: list[str] = []
    email_addresses: list[str] = []
    san = _ext_value(extensions, x509.SubjectAlternativeName)
    if san is not None:
        dns_names = san.get_values_for_type(x509.DNSName)
        ip_addresses = [str(ip) for ip in san.get_values_for_type(x509.IPAddress)]
        email_addresses = san.get_values_for_type(x509.RFC822Name)

    ocsp_servers: list[str] = []
    issuer_urls: list[str] = []
    aia = _ext_value(extensions, x509.AuthorityInformationAccess)
    if aia is not None:
        for desc in aia:
            if not isinstance(desc.access_location, x509.UniformResourceIdentifier):
                continue
            if desc.access_method == AuthorityInformationAccessOID.OCSP:
                ocsp_servers.append(desc.access_location.value)
            elif desc.access_method == AuthorityInformationAccessOID.CA_ISSUERS:
                issuer_urls.append(desc.access_location.value)

    ski = _ext_value(extensions, x509.SubjectKeyIdentifier)
    aki = _ext_value(extensions, x509.AuthorityKeyIdentifier)
    policies = _ext_value(extensions, x509.CertificatePolicies)
    basic_constraints = _ext_value(extensions, x509.BasicConstraints)
    eku = _ext_value(extensions, x509.ExtendedKeyUsage)

    return Certificate(
        not_before=cert.not_valid_before_utc,
        not_after=cert.not_valid_after_utc,
        subject=_convert_name(cert.subject),
        issuer=_convert_name(cert.issuer),
        serial_number=cert.serial_number,
        version=cert.version.value + 1,
        extensions=tuple(
            Extension(oid=ext.oid.dotted_string, critical=ext.critical, value=ext.value)
            for ext in extensions
        ),
        dns_names=tuple(dns_names),
        ip_addresses=tuple(ip_addresses),
        email_addresses=tuple(email_addresses),
        subject_key_id=ski.digest if ski is not None else None,
        authority_key_id=aki.key_identifier if aki is not None else None,
        policy_oids=tuple(p.policy_identifier.dotted_string for p in policies or ()),
        ocsp_servers=tuple(ocsp_servers),
        issuing_certificate_urls=tuple(issuer_urls),
        is_ca=bool(basic_constraints and basic_constraints.ca),
        ext_key_usages=tuple(u.dotted_string for u in eku or ()),
        signature_algorithm_oid=cert.signature_algorithm_oid.dotted_string,
        raw=cert.public_bytes(serialization.Encoding.DER),
    )


def parse_certificate(data: bytes) -> Certificate:
    """
    Parse a single PEM or DER certificate.

    Raises:
        CertificateParseError: If the bytes are not a decodable certificate
    """
    try:
        if PEM_MARKER in data:
            cert = x509.load_pem_x509_certificate(data)
        else:
            cert = x509.load_der_x509_certificate(data)
    except _DECODE_ERRORS as e:
        raise CertificateParseError(f"Failed to parse certificate: {e}") from e
    return from_cryptography(cert)


def load_certificates(path: Path) -> list[Certificate]:
    """Load every certificate in a PEM bundle, or the single certificate of a DER file."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise CertificateParseError(f"Cannot read {path}: {e}") from e
    if PEM_MARKER not in data:
        return [parse_certificate(data)]
    try:
        certs = x509.load_pem_x509_certificates(data)
    except _DECODE_ERRORS as e:
        raise CertificateParseError(f"Failed to parse {path.name}: {e}") from e
    return [from_cryptography(c) for c in certs]
