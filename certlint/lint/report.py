"""Per-certificate report: name-sorted results plus summary counts."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from .base import LintResult, LintStatus


@dataclass(frozen=True)
class Report:
    """
    Immutable set of lint results for one certificate in one run.

    `results` iterates in lint-name order whatever order the executor's
    workers finished in.
    """

    results: Mapping[str, LintResult] = field(default_factory=lambda: MappingProxyType({}))
    counts: Mapping[LintStatus, int] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_results(cls, results: Mapping[str, LintResult]) -> Report:
        ordered = {name: results[name] for name in sorted(results)}
        counts = {status: 0 for status in LintStatus}
        for result in ordered.values():
            counts[result.status] += 1
        return cls(results=MappingProxyType(ordered), counts=MappingProxyType(counts))

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[tuple[str, LintResult]]:
        return iter(self.results.items())

    def __getitem__(self, name: str) -> LintResult:
        return self.results[name]

    def __contains__(self, name: object) -> bool:
        return name in self.results

    def status_of(self, name: str) -> LintStatus | None:
        result = self.results.get(name)
        return result.status if result is not None else None

    def count(self, status: LintStatus) -> int:
        return self.counts.get(status, 0)

    @property
    def worst_status(self) -> LintStatus:
        """Highest-severity status present; NA for an empty report."""
        worst = LintStatus.NA
        for result in self.results.values():
            if result.status.severity > worst.severity:
                worst = result.status
        return worst

    def exceeds(self, threshold: LintStatus) -> bool:
        """True if any result is at or above `threshold` severity."""
        return self.worst_status.severity >= threshold.severity

    @property
    def notices_present(self) -> bool:
        return self.count(LintStatus.NOTICE) > 0

    @property
    def warnings_present(self) -> bool:
        return self.count(LintStatus.WARN) > 0

    @property
    def errors_present(self) -> bool:
        return self.count(LintStatus.ERROR) > 0

    @property
    def fatals_present(self) -> bool:
        return self.count(LintStatus.FATAL) > 0

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable view of the report."""
        return {
            "results": {name: result.to_dict() for name, result in self.results.items()},
            "summary": {status.value: self.count(status) for status in LintStatus},
            "worst_status": self.worst_status.value,
        }
