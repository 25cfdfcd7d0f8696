"""
Parsed certificate model consumed by the lint engine.

The engine never decodes DER itself. It receives a Certificate value whose
fields have already been extracted (see parser.py for the adapter built on
`cryptography`). All containers are tuples so lints get read-only access.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from . import oids


@dataclass(frozen=True)
class NameAttribute:
    """One (type, value) pair of a distinguished name."""

    oid: str
    value: str


@dataclass(frozen=True)
class Name:
    """Distinguished name as an ordered list of attributes."""

    attributes: tuple[NameAttribute, ...] = ()

    def get(self, oid: str) -> list[str]:
        """Return every value carried under `oid`, in encoding order."""
        return [a.value for a in self.attributes if a.oid == oid]

    def has(self, oid: str) -> bool:
        return any(a.oid == oid for a in self.attributes)

    @property
    def common_names(self) -> list[str]:
        return self.get(oids.COMMON_NAME)

    @property
    def countries(self) -> list[str]:
        return self.get(oids.COUNTRY_NAME)

    @property
    def organizations(self) -> list[str]:
        return self.get(oids.ORGANIZATION_NAME)

    @property
    def is_empty(self) -> bool:
        return not self.attributes

    def __str__(self) -> str:
        return ", ".join(f"{a.oid}={a.value}" for a in self.attributes)


@dataclass(frozen=True)
class Extension:
    """A certificate extension with its decoded value."""

    oid: str
    critical: bool
    value: Any = None


@dataclass(frozen=True)
class Certificate:
    """An already-parsed X.509 certificate."""

    not_before: datetime
    not_after: datetime
    subject: Name = field(default_factory=Name)
    issuer: Name = field(default_factory=Name)
    serial_number: int = 0
    version: int = 3
    extensions: tuple[Extension, ...] = ()
    dns_names: tuple[str, ...] = ()
    ip_addresses: tuple[str, ...] = ()
    email_addresses: tuple[str, ...] = ()
    subject_key_id: bytes | None = None
    authority_key_id: bytes | None = None
    policy_oids: tuple[str, ...] = ()
    ocsp_servers: tuple[str, ...] = ()
    issuing_certificate_urls: tuple[str, ...] = ()
    is_ca: bool = False
    ext_key_usages: tuple[str, ...] = ()
    signature_algorithm_oid: str | None = None
    raw: bytes = b""

    def get_extension(self, oid: str) -> Extension | None:
        for ext in self.extensions:
            if ext.oid == oid:
                return ext
        return None

    def has_extension(self, oid: str) -> bool:
        return self.get_extension(oid) is not None

    def has_policy(self, *policy_oids: str) -> bool:
        return any(p in self.policy_oids for p in policy_oids)

    @property
    def is_self_issued(self) -> bool:
        """Subject and issuer are identical (RFC 5280, 3.2)."""
        return self.subject == self.issuer

    @property
    def validity_days(self) -> float:
        """Validity period length in days, inclusive of the final second."""
        return ((self.not_after - self.not_before).total_seconds() + 1) / 86400
