"""Command line entry point for running a configured checker group."""

import json
import logging
from pathlib import Path
from typing import List

import click
from rich.console import Console
from rich.markup import escape

from ..core.checker import LABEL_SEPARATOR
from ..core.config import DEFAULT_CONFIG_PATH, load_config
from ..core.loader import build_group
from ..errors import LintGroupError, MultiCheckError
from ..utils.rich_logging import setup_logging

logger = logging.getLogger(__name__)

console = Console()

EXIT_OK = 0
EXIT_CHECK_FAILED = 1
EXIT_CONFIG_ERROR = 2


def _split_prefix(line: str) -> tuple[str, str]:
    """Split a report line into (checker name, message)."""
    name, sep, message = line.partition(LABEL_SEPARATOR)
    if not sep:
        return "", line
    return name, message


def _print_report(errors: List[str]) -> None:
    current = None
    for line in errors:
        name, message = _split_prefix(line)
        if name != current:
            console.print(f"\n[bold red]✗ {escape(name or 'unknown')}[/]")
            current = name
        console.print(f"  {escape(message)}")

    checkers = len({_split_prefix(line)[0] for line in errors})
    console.print(f"\n[red]{len(errors)} error(s) from {checkers} checker(s)[/]")


@click.command()
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Group configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.argument("targets", nargs=-1)
@click.pass_context
def cli(ctx, config_path, verbose, as_json, targets):
    """Run every configured checker against TARGETS and merge their errors."""
    try:
        config = load_config(config_path)
    except LintGroupError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        ctx.exit(EXIT_CONFIG_ERROR)

    setup_logging("DEBUG" if verbose else config.log_level)

    try:
        group = build_group(config)
    except LintGroupError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        ctx.exit(EXIT_CONFIG_ERROR)

    run_targets = list(targets) or config.targets
    logger.info(f"Running {len(group)} checker(s) on {', '.join(run_targets)}")

    errors: List[str] = []
    try:
        group.check(*run_targets)
    except MultiCheckError as e:
        errors = e.errors()

    if as_json:
        click.echo(json.dumps({"success": not errors, "errors": errors}, indent=2))
    elif errors:
        _print_report(errors)
    else:
        console.print(f"[green]✓ {len(group)} checker(s) passed[/]")

    ctx.exit(EXIT_CHECK_FAILED if errors else EXIT_OK)


def main():
    """Entry point for the ``lintgroup`` console script."""
    cli()


if __name__ == "__main__":
    main()
