"""certlint - rule engine for linting X.509 certificates."""

__version__ = "0.1.0"
