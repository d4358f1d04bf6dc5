"""
eztest CLI

Driver for the test runner: runs the demonstration tests and shows the
effective configuration.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

import click
import structlog
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from eztest import __version__
from eztest.config import Config, load_config
from eztest.context import TestContext
from eztest.demo import run_demo
from eztest.errors import EzTestError

# Rich console for pretty output
console = Console()
error_console = Console(stderr=True)

logger = structlog.get_logger(__name__)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[bold red]Error:[/bold red] {message}")


def configure_logging(level: int) -> None:
    """Send structlog output to stderr so it never mixes with test output."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _flatten(prefix: str, data: dict[str, Any]) -> list[tuple[str, str]]:
    rows: list[tuple[str, str]] = []
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            rows.extend(_flatten(f"{name}.", value))
        else:
            rows.append((name, str(value)))
    return rows


@click.group()
@click.version_option(version=__version__, prog_name="eztest")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--project",
    "-p",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Directory searched for eztest.toml / eztest.yaml",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def main(ctx: click.Context, config: Optional[Path], project: Path, verbose: bool) -> None:
    """
    eztest - a small embedded test runner.
    """
    ctx.ensure_object(dict)

    try:
        loaded = load_config(config_path=config, project_root=project)
    except (EzTestError, ValidationError) as e:
        print_error(str(e))
        sys.exit(2)

    level = logging.DEBUG if verbose else getattr(logging, loaded.log_level)
    configure_logging(level)
    logger.debug("configuration loaded", source=str(config) if config else "discovered")

    ctx.obj["config"] = loaded


@main.command()
@click.option(
    "--max-reported-failures",
    "-m",
    type=click.IntRange(min=0),
    help="Failures per test printed individually",
)
@click.option(
    "--slow-iterations",
    "-n",
    type=click.IntRange(min=0),
    help="Loop bound of the slow test",
)
@click.option(
    "--braces/--python-style",
    default=None,
    help="Render lists and tuples in diagnostics as {a,b,c}",
)
@click.pass_context
def demo(
    ctx: click.Context,
    max_reported_failures: Optional[int],
    slow_iterations: Optional[int],
    braces: Optional[bool],
) -> None:
    """Run the demonstration tests and print the summary."""
    config: Config = ctx.obj["config"]

    if braces is not None:
        output = config.output.model_copy(
            update={"sequence_style": "braces" if braces else "python"}
        )
        config = config.model_copy(update={"output": output})

    cx = TestContext(output=config.output, max_reported_failures=max_reported_failures)
    iterations = config.demo.slow_iterations if slow_iterations is None else slow_iterations
    try:
        run_demo(cx, slow_iterations=iterations)
    except EzTestError as e:
        print_error(str(e))
        sys.exit(2)

    logger.info(
        "demo finished",
        failed=cx.failure_count,
        made=cx.assertions_made,
    )
    sys.exit(0 if cx.all_passed else 1)


@main.command(name="config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show the effective configuration."""
    config: Config = ctx.obj["config"]

    table = Table(
        title="eztest Configuration",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for name, value in _flatten("", config.to_dict()):
        table.add_row(name, value)

    console.print(table)


if __name__ == "__main__":
    main()
