"""
Run configuration: which lints to select and how to execute them.

A RunConfig with no fields set selects every non-deprecated lint from every
source. Configuration can be loaded from the `[run]` table of a TOML file:

    [run]
    include = ["e_subject_common_name_not_from_san"]
    exclude = ["n_san_dns_name_duplicate"]
    exclude_sources = ["Community"]
    include_deprecated = false
    reference_time = 2024-01-01T00:00:00Z
    workers = 4
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

from ..errors import ConfigurationError
from .base import Source


def _coerce_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class RunConfig:
    """Per-run selection and execution settings."""

    reference_time: datetime | None = None
    include: frozenset[str] = frozenset()
    exclude: frozenset[str] = frozenset()
    sources: frozenset[Source] = frozenset()  # empty = all sources
    exclude_sources: frozenset[Source] = frozenset()
    name_pattern: str | None = None
    include_deprecated: bool = False
    workers: int = 1

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ConfigurationError(f"workers must be >= 1 (got {self.workers})")
        if self.reference_time is not None:
            object.__setattr__(self, "reference_time", as_utc(self.reference_time))
        if self.name_pattern:
            try:
                re.compile(self.name_pattern)
            except re.error as e:
                raise ConfigurationError(f"Invalid name pattern {self.name_pattern!r}: {e}") from e

    @classmethod
    def build(
        cls,
        *,
        reference_time: datetime | None = None,
        include: list[str] | tuple[str, ...] = (),
        exclude: list[str] | tuple[str, ...] = (),
        sources: list[str] | tuple[str, ...] = (),
        exclude_sources: list[str] | tuple[str, ...] = (),
        name_pattern: str | None = None,
        include_deprecated: bool = False,
        workers: int = 1,
    ) -> RunConfig:
        """Build a config from plain strings, resolving source names."""
        return cls(
            reference_time=reference_time,
            include=frozenset(n.strip() for n in include if n.strip()),
            exclude=frozenset(n.strip() for n in exclude if n.strip()),
            sources=frozenset(Source.parse(s) for s in sources),
            exclude_sources=frozenset(Source.parse(s) for s in exclude_sources),
            name_pattern=name_pattern or None,
            include_deprecated=include_deprecated,
            workers=workers,
        )

    def merged(self, **overrides: Any) -> RunConfig:
        """Return a copy with every non-empty override applied."""
        changes = {k: v for k, v in overrides.items() if v not in (None, (), [], frozenset())}
        return replace(self, **changes)


def _string_list(data: dict[str, Any], key: str) -> list[str]:
    raw = data.get(key, [])
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
        raise ConfigurationError(f"[run].{key} must be a list of strings")
    return raw


def _reference_time(value: Any) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time(0, 0), tzinfo=timezone.utc)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise ConfigurationError(f"[run].reference_time is not an ISO timestamp: {value!r}") from e
    raise ConfigurationError("[run].reference_time must be a TOML datetime or ISO string")


def parse_config(data: dict[str, Any]) -> RunConfig:
    """Build a RunConfig from already-decoded TOML data."""
    run = _coerce_dict(data.get("run"))

    workers = run.get("workers", 1)
    if not isinstance(workers, int) or isinstance(workers, bool):
        raise ConfigurationError("[run].workers must be an integer")

    name_pattern = run.get("name_pattern")
    if name_pattern is not None and not isinstance(name_pattern, str):
        raise ConfigurationError("[run].name_pattern must be a string")

    return RunConfig.build(
        reference_time=_reference_time(run.get("reference_time")),
        include=_string_list(run, "include"),
        exclude=_string_list(run, "exclude"),
        sources=_string_list(run, "sources"),
        exclude_sources=_string_list(run, "exclude_sources"),
        name_pattern=name_pattern,
        include_deprecated=bool(run.get("include_deprecated", False)),
        workers=workers,
    )


def load_config(path: Path) -> RunConfig:
    """
    Load a run configuration from TOML.

    Raises:
        ConfigurationError: If the file is missing, unreadable, or malformed
    """
    import tomllib

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read config {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Malformed config {path}: {e}") from e
    return parse_config(data)
