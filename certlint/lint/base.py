"""
Lint contract: descriptor metadata, result values, and the Lint capability.

A lint is a value, not a subclass: it bundles an immutable LintMetadata with
two plain functions over a parsed certificate.

- check_applies(cert) -> bool: rule-specific scoping (CA only, S/MIME only...)
- execute(cert) -> LintResult: the check itself

Both functions must be pure with respect to the certificate. The executor
relies on this to run lints concurrently without locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from ..errors import ConfigurationError, LintDefinitionError
from ..x509.certificate import Certificate


class Source(str, Enum):
    CABF_BR = "CABF_BR"  # CA/Browser Forum Baseline Requirements
    CABF_EV = "CABF_EV"  # CA/Browser Forum EV Guidelines
    CABF_SMIME_BR = "CABF_SMIME_BR"  # CA/Browser Forum S/MIME BRs
    RFC5280 = "RFC5280"
    COMMUNITY = "Community"
    CUSTOM = "Custom"

    @classmethod
    def parse(cls, value: str) -> Source:
        """Resolve a configuration string (case-insensitive) to a Source."""
        needle = value.strip().lower()
        for member in cls:
            if member.value.lower() == needle or member.name.lower() == needle:
                return member
        known = ", ".join(m.value for m in cls)
        raise ConfigurationError(f"Unknown lint source: {value!r} (known: {known})")


class Category(str, Enum):
    ERROR = "error"
    WARN = "warn"
    NOTICE = "notice"
    INFO = "info"


NAME_PREFIXES: dict[str, Category] = {
    "e_": Category.ERROR,
    "w_": Category.WARN,
    "n_": Category.NOTICE,
    "i_": Category.INFO,
}


class LintStatus(str, Enum):
    NA = "NA"  # Time window or applicability check excluded the certificate
    PASS = "pass"
    NOTICE = "notice"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"  # The lint body itself failed

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    @classmethod
    def parse(cls, value: str) -> LintStatus:
        needle = value.strip().lower()
        for member in cls:
            if member.value.lower() == needle or member.name.lower() == needle:
                return member
        raise ConfigurationError(f"Unknown lint status: {value!r}")


# NA < PASS < NOTICE < WARN < ERROR < FATAL
_SEVERITY: dict[LintStatus, int] = {
    LintStatus.NA: 0,
    LintStatus.PASS: 1,
    LintStatus.NOTICE: 2,
    LintStatus.WARN: 3,
    LintStatus.ERROR: 4,
    LintStatus.FATAL: 5,
}


def category_for_name(name: str) -> Category:
    for prefix, category in NAME_PREFIXES.items():
        if name.startswith(prefix):
            return category
    raise LintDefinitionError(
        f"lint name {name!r} must start with one of: {', '.join(NAME_PREFIXES)}"
    )


@dataclass(frozen=True)
class LintMetadata:
    """Static metadata describing one lint."""

    name: str
    description: str
    citation: str
    source: Source
    effective_date: datetime
    ineffective_date: datetime | None = None
    mutually_exclusive_with: frozenset[str] = frozenset()
    deprecated: bool = False

    @property
    def category(self) -> Category:
        return category_for_name(self.name)

    def validate(self) -> None:
        """Raise LintDefinitionError if the descriptor violates its invariants."""
        if not self.name or self.name != self.name.strip():
            raise LintDefinitionError(f"invalid lint name: {self.name!r}")
        category_for_name(self.name)
        if self.effective_date.tzinfo is None:
            raise LintDefinitionError(f"{self.name}: effective_date must be timezone-aware")
        if self.ineffective_date is not None:
            if self.ineffective_date.tzinfo is None:
                raise LintDefinitionError(f"{self.name}: ineffective_date must be timezone-aware")
            if self.ineffective_date <= self.effective_date:
                raise LintDefinitionError(
                    f"{self.name}: ineffective_date must be after effective_date"
                )
        if self.name in self.mutually_exclusive_with:
            raise LintDefinitionError(f"{self.name}: a lint cannot exclude itself")

    def is_effective_at(self, when: datetime) -> bool:
        """True if `when` falls inside [effective_date, ineffective_date)."""
        if when < self.effective_date:
            return False
        return self.ineffective_date is None or when < self.ineffective_date

    def to_dict(self) -> dict[str, Any]:
        """Serialize for listings and JSON output."""
        return {
            "name": self.name,
            "description": self.description,
            "citation": self.citation,
            "source": self.source.value,
            "category": self.category.value,
            "effective_date": self.effective_date.isoformat(),
            "ineffective_date": self.ineffective_date.isoformat() if self.ineffective_date else None,
            "mutually_exclusive_with": sorted(self.mutually_exclusive_with),
            "deprecated": self.deprecated,
        }


@dataclass(frozen=True)
class LintResult:
    """Outcome of evaluating one lint against one certificate."""

    status: LintStatus
    details: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"result": self.status.value}
        if self.details:
            result["details"] = self.details
        return result

    @classmethod
    def passed(cls) -> LintResult:
        return cls(LintStatus.PASS)

    @classmethod
    def not_applicable(cls, details: str | None = None) -> LintResult:
        return cls(LintStatus.NA, details)

    @classmethod
    def fatal(cls, details: str) -> LintResult:
        return cls(LintStatus.FATAL, details)


CheckAppliesFn = Callable[[Certificate], bool]
ExecuteFn = Callable[[Certificate], LintResult]


@dataclass(frozen=True)
class Lint:
    """A registered rule: metadata plus its applicability and execution functions."""

    metadata: LintMetadata
    check_applies: CheckAppliesFn = field(compare=False)
    execute: ExecuteFn = field(compare=False)

    @property
    def name(self) -> str:
        return self.metadata.name
