"""
Click-based CLI for configster.

IMPORTANT: This module only ORCHESTRATES. It never parses lines itself.
- Loads settings
- Invokes the file parser
- Formats output
- Maps results to exit codes
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from configster import __version__
from configster.actions.reporters import get_reporter
from configster.config import Settings, SettingsManager
from configster.errors import ConfigsterError
from configster.parser.config_file import ConfigFileParser

console = Console()
err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2

FORMATS = ["rich", "plain", "json"]


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _settings(ctx: click.Context) -> Settings:
    return ctx.obj["settings"]


def _build_parser(delimiter: str, encoding: str) -> ConfigFileParser:
    try:
        return ConfigFileParser(attr_delimiter=delimiter, encoding=encoding)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.version_option(version=__version__, prog_name="configster")
@click.option("--settings", "-c", "settings_dir", type=click.Path(file_okay=False), help="Path to settings directory")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, settings_dir: str | None, verbose: bool) -> None:
    """configster: parse `option = value, attr, ...` configuration files."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    manager = SettingsManager(Path(settings_dir) if settings_dir else None)
    try:
        ctx.obj["settings"] = manager.load()
    except ConfigsterError as e:
        err_console.print(f"[bold red]Error:[/] {escape(str(e))}")
        sys.exit(EXIT_ERROR)


@main.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option("--delimiter", "-d", default=None, help="Attribute delimiter character (default: ',')")
@click.option("--format", "-f", "fmt", type=click.Choice(FORMATS), default=None, help="Output format")
@click.option("--encoding", default=None, help="File encoding (default: utf-8)")
@click.option("--strict", is_flag=True, help="Exit with 1 if any option line is invalid")
@click.pass_context
def parse(
    ctx: click.Context,
    file: str,
    delimiter: str | None,
    fmt: str | None,
    encoding: str | None,
    strict: bool,
) -> None:
    """Parse FILE and print its options.

    Lines whose option name contains whitespace are listed as
    InvalidOption_on_Line<N>.
    """
    settings = _settings(ctx)
    parser = _build_parser(delimiter or settings.delimiter, encoding or settings.encoding)
    reporter = get_reporter(fmt or settings.output_format, console)

    try:
        records = parser.parse_file(file)
    except ConfigsterError as e:
        err_console.print(f"[bold red]Error:[/] {escape(str(e))}")
        sys.exit(EXIT_ERROR)

    reporter.report_records(file, records)

    if (strict or settings.strict) and any(r.is_invalid for r in records):
        sys.exit(EXIT_INVALID)


@main.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("--delimiter", "-d", default=None, help="Attribute delimiter character (default: ',')")
@click.option("--format", "-f", "fmt", type=click.Choice(FORMATS), default=None, help="Output format")
@click.option("--encoding", default=None, help="File encoding (default: utf-8)")
@click.pass_context
def check(
    ctx: click.Context,
    files: tuple[str, ...],
    delimiter: str | None,
    fmt: str | None,
    encoding: str | None,
) -> None:
    """CI friendly validation of one or more files.

    Exits with 1 if any file has invalid option lines, 2 if any file
    cannot be read.
    """
    settings = _settings(ctx)
    parser = _build_parser(delimiter or settings.delimiter, encoding or settings.encoding)
    reporter = get_reporter(fmt or settings.output_format, console)

    exit_code = EXIT_OK
    results = []
    for file in files:
        try:
            results.append((file, parser.parse_file(file)))
        except ConfigsterError as e:
            err_console.print(f"[bold red]Error:[/] {escape(str(e))}")
            exit_code = EXIT_ERROR

    if reporter.report_check(results):
        exit_code = max(exit_code, EXIT_INVALID)

    sys.exit(exit_code)


@main.command()
def version() -> None:
    """Print the configster version."""
    click.echo(__version__)


if __name__ == "__main__":
    main()
