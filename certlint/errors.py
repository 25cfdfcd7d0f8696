"""
Exception hierarchy for certlint.

Configuration and registry errors abort a run before any certificate is
evaluated. Failures inside a single lint body never surface here: the
executor converts them into a FATAL result for that lint.
"""

from __future__ import annotations


class CertlintError(Exception):
    """Base class for all certlint errors."""


class ConfigurationError(CertlintError):
    """Invalid run configuration (unknown lint name, bad source, bad pattern)."""


class RegistryError(CertlintError):
    """Lint registry could not be built."""


class DuplicateLintError(RegistryError):
    """A lint name was registered twice."""

    def __init__(self, name: str):
        super().__init__(f"lint already registered: {name}")
        self.name = name


class LintDefinitionError(RegistryError):
    """A lint descriptor violates its own invariants."""


class RegistryFrozenError(RegistryError):
    """Registration attempted after the registry was frozen."""


class LintRunCancelled(CertlintError):
    """A certificate was interrupted by cancellation; its report is discarded."""


class CertificateParseError(CertlintError):
    """Input bytes could not be decoded into a certificate."""
