"""Lint command implementation."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..errors import CertificateParseError, ConfigurationError
from ..lint import Executor, LintStatus, Report, RunConfig, Source, default_registry
from ..x509 import Certificate, load_certificates

STATUS_STYLES = {
    LintStatus.FATAL: "bold magenta",
    LintStatus.ERROR: "bold red",
    LintStatus.WARN: "yellow",
    LintStatus.NOTICE: "cyan",
    LintStatus.PASS: "green",
    LintStatus.NA: "dim",
}


def _load_inputs(paths: list[Path]) -> list[tuple[str, Certificate]]:
    inputs: list[tuple[str, Certificate]] = []
    for path in paths:
        certs = load_certificates(path)
        for index, cert in enumerate(certs):
            label = path.name if len(certs) == 1 else f"{path.name}[{index}]"
            inputs.append((label, cert))
    return inputs


def run_lint(
    paths: list[Path],
    config: RunConfig | None = None,
    *,
    output_json: bool = False,
    fail_on: str = "error",
    show_all: bool = False,
    timeout: float | None = None,
) -> int:
    """Lint certificate files.

    Args:
        paths: PEM or DER files; PEM files may hold several certificates
        config: Selection and execution settings
        output_json: Output results as JSON instead of tables
        fail_on: Exit with failure if any result reaches this status
        show_all: Also print passing and not-applicable results
        timeout: Stop scheduling certificates after this many seconds

    Returns:
        Exit code (0 = clean, 1 = findings at or above fail_on, 2 = bad input)
    """
    console = Console(stderr=True)

    try:
        threshold = LintStatus.parse(fail_on)
        executor = Executor.from_registry(default_registry(), config or RunConfig())
        inputs = _load_inputs(paths)
    except (ConfigurationError, CertificateParseError) as e:
        console.print(f"Error: {e}", style="bold red")
        return 2

    console.print(f"Linting {len(inputs)} certificate(s) with {len(executor.lints)} lints...", style="dim")
    reports = executor.lint_batch([cert for _, cert in inputs], timeout=timeout)
    labelled = list(zip([label for label, _ in inputs], reports))

    if output_json:
        _output_json(labelled)
    else:
        out = Console()
        for label, report in labelled:
            _print_report(out, label, report, show_all=show_all)

    if len(reports) < len(inputs):
        console.print(
            f"Cancelled: {len(inputs) - len(reports)} certificate(s) were not linted",
            style="bold red",
        )
        return 1

    if any(report.exceeds(threshold) for report in reports):
        return 1
    return 0


def _output_json(labelled: list[tuple[str, Report]]) -> None:
    output = {"certificates": [{"file": label, **report.to_dict()} for label, report in labelled]}
    print(json.dumps(output, indent=2))


def _print_report(console: Console, label: str, report: Report, *, show_all: bool) -> None:
    """Print one certificate's results as a table plus a summary line."""
    table = Table(title=label)
    table.add_column("Lint", style="cyan", no_wrap=True)
    table.add_column("Result")
    table.add_column("Details", style="dim")

    for name, result in report:
        if not show_all and result.status in (LintStatus.PASS, LintStatus.NA):
            continue
        style = STATUS_STYLES[result.status]
        table.add_row(name, f"[{style}]{result.status.value}[/]", result.details or "")

    if table.row_count:
        console.print(table)

    parts = [f"{report.count(status)} {status.value}" for status in LintStatus if report.count(status)]
    worst = report.worst_status
    console.print(f"{label}: {', '.join(parts) or 'no lints run'}", style=STATUS_STYLES[worst])


def run_list(source: str | None = None, output_json: bool = False) -> int:
    """List registered lints, optionally restricted to one source.

    Returns:
        Exit code (0 = success, 2 = unknown source)
    """
    console = Console()
    registry = default_registry()

    if source:
        try:
            lints = registry.filter_by_source([Source.parse(source)])
        except ConfigurationError as e:
            Console(stderr=True).print(f"Error: {e}", style="bold red")
            return 2
    else:
        lints = registry.all()

    if output_json:
        print(json.dumps([lint.metadata.to_dict() for lint in lints], indent=2))
        return 0

    table = Table(title="Lints")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Source", style="magenta")
    table.add_column("Effective")
    table.add_column("Citation", style="dim")

    for lint in lints:
        meta = lint.metadata
        name = f"{meta.name} (deprecated)" if meta.deprecated else meta.name
        table.add_row(name, meta.source.value, meta.effective_date.date().isoformat(), meta.citation)

    console.print(table)
    return 0


def run_explain(name: str) -> int:
    """Explain a specific lint.

    Returns:
        Exit code (0 = success, 1 = lint not found)
    """
    from rich.markdown import Markdown

    console = Console()
    registry = default_registry()

    lint = registry.get(name.strip())
    if lint is None:
        console.print(f"Unknown lint: {name}", style="bold red")
        console.print()
        console.print("Known lints:", style="bold")
        for known in registry.names():
            console.print(f"  - {known}")
        return 1

    meta = lint.metadata
    window = meta.effective_date.date().isoformat()
    if meta.ineffective_date is not None:
        window += f" until {meta.ineffective_date.date().isoformat()}"
    else:
        window += " onwards"

    explanation = f"""# {meta.name}

{meta.description}

**Citation**: {meta.citation}

**Source**: {meta.source.value}

**Category**: {meta.category.value}

**Applies to certificates issued**: {window}
"""
    exclusions = registry.exclusions_of(meta.name)
    if exclusions:
        explanation += f"\n**Mutually exclusive with**: {', '.join(sorted(exclusions))}\n"
    if meta.deprecated:
        explanation += "\n*Deprecated: runs only when named explicitly or deprecated lints are enabled.*\n"

    console.print(Markdown(explanation))
    return 0
