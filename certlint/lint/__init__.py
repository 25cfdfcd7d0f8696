"""
Lint engine: registry, selection, execution, and reporting.

Key principle: one lint's failure never takes down a run. Every lint
invocation passes through a single failure boundary in the executor.
"""

from __future__ import annotations

from .base import (
    Category,
    Lint,
    LintMetadata,
    LintResult,
    LintStatus,
    Source,
)
from .config import RunConfig, load_config
from .executor import Executor, run_lint
from .registry import Registry, default_registry, reset_default_registry
from .report import Report
from .selector import select_lints

__all__ = [
    # Lint contract
    "Category",
    "Lint",
    "LintMetadata",
    "LintResult",
    "LintStatus",
    "Source",
    # Configuration
    "RunConfig",
    "load_config",
    # Registry and selection
    "Registry",
    "default_registry",
    "reset_default_registry",
    "select_lints",
    # Execution
    "Executor",
    "Report",
    "run_lint",
]
