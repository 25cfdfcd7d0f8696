"""Parsed certificate model and the `cryptography`-based adapter that builds it."""

from .certificate import Certificate, Extension, Name, NameAttribute
from .parser import from_cryptography, load_certificates, parse_certificate

__all__ = [
    "Certificate",
    "Extension",
    "Name",
    "NameAttribute",
    "from_cryptography",
    "load_certificates",
    "parse_certificate",
]
