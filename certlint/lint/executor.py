"""
Lint executor: evaluates certificates against a selected lint set.

Per lint:
1. time window: effective_date <= ref < ineffective_date, else NA
2. check_applies(cert), else NA
3. execute(cert) inside a failure boundary: any exception becomes FATAL

`ref` is RunConfig.reference_time when set, otherwise the certificate's
not-before. Lints are pure, so slices of the lint list run on a bounded
thread pool; every worker fills its own dict and the dicts are merged once.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Iterable, Sequence

from ..errors import ConfigurationError, LintRunCancelled
from ..x509.certificate import Certificate
from .base import Lint, LintResult
from .config import RunConfig, as_utc
from .registry import Registry
from .report import Report
from .selector import select_lints

logger = logging.getLogger(__name__)


def run_lint(lint: Lint, cert: Certificate, reference_time: datetime) -> LintResult:
    """Evaluate a single lint. Never raises for failures inside the lint body."""
    meta = lint.metadata
    if not meta.is_effective_at(reference_time):
        return LintResult.not_applicable()

    try:
        if not lint.check_applies(cert):
            return LintResult.not_applicable()
        result = lint.execute(cert)
    except Exception as e:
        logger.warning(f"Lint {meta.name} failed: {type(e).__name__}: {e}")
        logger.debug(f"Traceback for {meta.name}", exc_info=True)
        return LintResult.fatal(f"{type(e).__name__}: {e}")

    if not isinstance(result, LintResult):
        logger.warning(f"Lint {meta.name} returned {type(result).__name__}, not LintResult")
        return LintResult.fatal(f"lint returned {type(result).__name__} instead of LintResult")
    return result


def _run_slice(
    lints: Sequence[Lint],
    cert: Certificate,
    reference_time: datetime,
    cancel: threading.Event | None,
) -> dict[str, LintResult]:
    results: dict[str, LintResult] = {}
    for lint in lints:
        if cancel is not None and cancel.is_set():
            break
        results[lint.name] = run_lint(lint, cert, reference_time)
    return results


def _partition(lints: Sequence[Lint], parts: int) -> list[Sequence[Lint]]:
    """Split into at most `parts` contiguous, near-equal slices."""
    parts = max(1, min(parts, len(lints)))
    size, extra = divmod(len(lints), parts)
    slices = []
    start = 0
    for i in range(parts):
        end = start + size + (1 if i < extra else 0)
        slices.append(lints[start:end])
        start = end
    return slices


class Executor:
    """
    Runs a fixed, already-selected lint set against certificates.

    Usage:
        executor = Executor.from_registry(default_registry(), RunConfig())
        report = executor.lint(cert)
    """

    def __init__(self, lints: Iterable[Lint], config: RunConfig | None = None):
        self.config = config or RunConfig()
        self.lints: tuple[Lint, ...] = tuple(sorted(lints, key=lambda lint: lint.name))

    @classmethod
    def from_registry(cls, registry: Registry, config: RunConfig | None = None) -> Executor:
        """Select lints from `registry` per `config` (fails fast on bad config)."""
        config = config or RunConfig()
        return cls(select_lints(registry, config), config)

    def _reference_time(self, cert: Certificate) -> datetime:
        return self.config.reference_time or as_utc(cert.not_before)

    def _evaluate(
        self,
        cert: Certificate | None,
        cancel: threading.Event | None,
        pool: ThreadPoolExecutor | None,
    ) -> Report:
        if cert is None:
            raise ConfigurationError("No certificate to lint (got None)")

        ref = self._reference_time(cert)
        if pool is None:
            results = _run_slice(self.lints, cert, ref, cancel)
        else:
            futures = [
                pool.submit(_run_slice, chunk, cert, ref, cancel)
                for chunk in _partition(self.lints, self.config.workers)
            ]
            results = {}
            for future in futures:
                results.update(future.result())

        if len(results) != len(self.lints):
            raise LintRunCancelled(
                f"cancelled after {len(results)} of {len(self.lints)} lints; report discarded"
            )
        return Report.from_results(results)

    def _pool(self) -> ThreadPoolExecutor | None:
        if self.config.workers <= 1 or len(self.lints) <= 1:
            return None
        return ThreadPoolExecutor(max_workers=self.config.workers, thread_name_prefix="certlint")

    def lint(self, cert: Certificate, *, cancel: threading.Event | None = None) -> Report:
        """
        Lint one certificate.

        Raises:
            ConfigurationError: If `cert` is None
            LintRunCancelled: If `cancel` was set before every lint finished
        """
        pool = self._pool()
        try:
            return self._evaluate(cert, cancel, pool)
        finally:
            if pool is not None:
                pool.shutdown(wait=True)

    def lint_batch(
        self,
        certs: Iterable[Certificate],
        *,
        cancel: threading.Event | None = None,
        timeout: float | None = None,
    ) -> list[Report]:
        """
        Lint certificates in order, one report per certificate.

        Once `cancel` is set (or `timeout` seconds elapse) no further
        certificates are started. The certificate in progress is discarded;
        reports for completed certificates are returned.
        """
        cancel = cancel or threading.Event()
        timer = None
        if timeout is not None:
            timer = threading.Timer(timeout, cancel.set)
            timer.daemon = True
            timer.start()

        reports: list[Report] = []
        pool = self._pool()
        try:
            for cert in certs:
                if cancel.is_set():
                    break
                try:
                    reports.append(self._evaluate(cert, cancel, pool))
                except LintRunCancelled as e:
                    logger.info(f"Batch cancelled: {e}")
                    break
        finally:
            if timer is not None:
                timer.cancel()
            if pool is not None:
                pool.shutdown(wait=True)

        if cancel.is_set():
            logger.info(f"Batch stopped after {len(reports)} completed certificate(s)")
        return reports
