"""CLI entrypoint for certlint."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .errors import ConfigurationError
from .lint import RunConfig, load_config


class ConfigurationFailure(click.ClickException):
    """Bad run configuration; exits 2 like every other bad-input path."""

    exit_code = 2


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="certlint")
@click.option("--verbose", is_flag=True, help="Enable debug logging on stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """certlint - Lint X.509 certificates against CA/B Forum, RFC 5280 and community rules."""
    ctx.ensure_object(dict)
    _configure_logging(verbose)


@cli.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with a [run] table (flags below override it)",
)
@click.option("--include", "-i", multiple=True, metavar="LINT", help="Always run this lint (repeatable)")
@click.option("--exclude", "-x", multiple=True, metavar="LINT", help="Never run this lint (repeatable)")
@click.option("--source", "-s", "sources", multiple=True, metavar="SOURCE", help="Only run lints from this source (repeatable)")
@click.option("--exclude-source", "exclude_sources", multiple=True, metavar="SOURCE", help="Skip lints from this source (repeatable)")
@click.option("--pattern", "name_pattern", default=None, metavar="REGEX", help="Only run lints whose name matches")
@click.option("--include-deprecated", is_flag=True, help="Also run deprecated lints")
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Worker threads per certificate")
@click.option("--timeout", type=float, default=None, help="Stop scheduling certificates after N seconds")
@click.option(
    "--fail-on",
    type=click.Choice(["notice", "warn", "error", "fatal"]),
    default="error",
    help="Exit with error if this level or higher found",
)
@click.option("--all", "show_all", is_flag=True, help="Also show passing and not-applicable results")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
def lint(
    files: tuple[Path, ...],
    config_path: Path | None,
    include: tuple[str, ...],
    exclude: tuple[str, ...],
    sources: tuple[str, ...],
    exclude_sources: tuple[str, ...],
    name_pattern: str | None,
    include_deprecated: bool,
    workers: int | None,
    timeout: float | None,
    fail_on: str,
    show_all: bool,
    output_json: bool,
) -> None:
    """Lint one or more PEM/DER certificate files."""
    from .commands.lint import run_lint

    try:
        base = load_config(config_path) if config_path else RunConfig()
        flags = RunConfig.build(
            include=include,
            exclude=exclude,
            sources=sources,
            exclude_sources=exclude_sources,
        )
        config = base.merged(
            include=flags.include,
            exclude=flags.exclude,
            sources=flags.sources,
            exclude_sources=flags.exclude_sources,
            name_pattern=name_pattern,
            include_deprecated=True if include_deprecated else None,
            workers=workers,
        )
    except ConfigurationError as e:
        raise ConfigurationFailure(str(e)) from e

    exit_code = run_lint(
        list(files),
        config,
        output_json=output_json,
        fail_on=fail_on,
        show_all=show_all,
        timeout=timeout,
    )
    sys.exit(exit_code)


@cli.command("list")
@click.option("--source", "-s", default=None, metavar="SOURCE", help="Only list lints from this source")
@click.option("--json", "output_json", is_flag=True, help="Output lint metadata as JSON")
def list_lints(source: str | None, output_json: bool) -> None:
    """List every registered lint."""
    from .commands.lint import run_list

    sys.exit(run_list(source, output_json=output_json))


@cli.command()
@click.argument("name")
def explain(name: str) -> None:
    """Explain a lint: citation, source, effective window, exclusions."""
    from .commands.lint import run_explain

    sys.exit(run_explain(name))


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
