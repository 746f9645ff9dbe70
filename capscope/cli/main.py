"""Main CLI entry point for capscope."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.logging import RichHandler

from capscope import __version__
from capscope.branding import CLI_PRIMARY_COMMAND
from capscope.cli.render import OUTPUT_FORMATS
from capscope.models.comparison import HighlightFilters
from capscope.ui.console import err_console
from capscope.utils.timing import DEFAULT_THRESHOLD_MS

_input_file = click.Path(exists=True, dir_okay=False, path_type=Path)

_format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="table",
    show_default=True,
    help="Output format",
)


def _configure_logging(verbose: bool) -> None:
    """Route capscope log records to stderr through Rich."""
    logger = logging.getLogger("capscope")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


def _advisory_ms(ctx: click.Context) -> float | None:
    value = ctx.obj.get("slow_ms", DEFAULT_THRESHOLD_MS)
    return None if value <= 0 else value


@click.group()
@click.version_option(version=__version__, prog_name=CLI_PRIMARY_COMMAND)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option(
    "--slow-ms",
    type=float,
    default=DEFAULT_THRESHOLD_MS,
    show_default=True,
    envvar="CAPSCOPE_SLOW_MS",
    help="Log operations slower than this many milliseconds (0 disables)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, slow_ms: float) -> None:
    """Resolve, compare, and score scoped MCP server and agent configuration."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["slow_ms"] = slow_ms
    _configure_logging(verbose)


@cli.command("merge")
@click.argument("user_config", type=_input_file)
@click.argument("project_config", type=_input_file)
@click.option("--local", "local_config", type=_input_file, help="Local-scope config document")
@click.option("--show-shadowed", is_flag=True, help="Also show lower-scope entries that were overridden")
@_format_option
@click.pass_context
def merge_cmd(
    ctx: click.Context,
    user_config: Path,
    project_config: Path,
    local_config: Path | None,
    show_shadowed: bool,
    output_format: str,
) -> None:
    """Resolve user, project, and local configuration into effective entries.

    \b
    Examples:
      capscope merge ~/.claude.json .mcp.json
      capscope merge user.json project.json --local local.json --format json
    """
    from capscope.cli.merge import run_merge

    run_merge(
        user_path=user_config,
        project_path=project_config,
        local_path=local_config,
        output_format=output_format,
        show_shadowed=show_shadowed,
        advisory_ms=_advisory_ms(ctx),
    )


@cli.command("diff")
@click.argument("left", type=_input_file)
@click.argument("right", type=_input_file)
@click.option("--only-differences", is_flag=True, help="Hide matching capabilities")
@click.option("--blue", is_flag=True, help="Show capabilities only in LEFT")
@click.option("--green", is_flag=True, help="Show capabilities only in RIGHT")
@click.option("--yellow", is_flag=True, help="Show capabilities whose values differ")
@click.option("--fail-on-difference", is_flag=True, help="Exit with status 1 when differences exist")
@_format_option
@click.pass_context
def diff_cmd(
    ctx: click.Context,
    left: Path,
    right: Path,
    only_differences: bool,
    blue: bool,
    green: bool,
    yellow: bool,
    fail_on_difference: bool,
    output_format: str,
) -> None:
    """Compare the capabilities of two projects or scopes.

    LEFT and RIGHT are capability lists or scope config documents.
    """
    from capscope.cli.diff import run_diff

    run_diff(
        left_path=left,
        right_path=right,
        filters=HighlightFilters(
            show_only_differences=only_differences,
            show_blue_only=blue,
            show_green_only=green,
            show_yellow_only=yellow,
        ),
        output_format=output_format,
        fail_on_difference=fail_on_difference,
        advisory_ms=_advisory_ms(ctx),
    )


@cli.command("stats")
@click.argument("user_config", type=_input_file)
@click.option("--project", "project_config", type=_input_file, help="Project-scope config document")
@click.option("--local", "local_config", type=_input_file, help="Local-scope config document")
@click.option(
    "--scope",
    type=click.Choice(["user", "project", "local"]),
    help="Only count capabilities from this scope",
)
@click.option(
    "--heuristic",
    is_flag=True,
    help="Classify by name matching over every scope's definitions, shadowed ones included",
)
@_format_option
@click.pass_context
def stats_cmd(
    ctx: click.Context,
    user_config: Path,
    project_config: Path | None,
    local_config: Path | None,
    scope: str | None,
    heuristic: bool,
    output_format: str,
) -> None:
    """Summarize MCP servers and agents across scopes."""
    from capscope.cli.stats import run_stats

    run_stats(
        user_path=user_config,
        project_path=project_config,
        local_path=local_config,
        scope=scope,
        heuristic=heuristic,
        output_format=output_format,
        advisory_ms=_advisory_ms(ctx),
    )


@cli.command("health")
@click.argument("capabilities", type=_input_file)
@click.option("--project-id", help="Project id (default: file stem)")
@click.option("--project-name", help="Project name (default: file stem)")
@_format_option
@click.pass_context
def health_cmd(
    ctx: click.Context,
    capabilities: Path,
    project_id: str | None,
    project_name: str | None,
    output_format: str,
) -> None:
    """Score a project's capabilities and list issues."""
    from capscope.cli.health import run_health

    run_health(
        capabilities_path=capabilities,
        project_id=project_id,
        project_name=project_name,
        output_format=output_format,
        advisory_ms=_advisory_ms(ctx),
    )


if __name__ == "__main__":
    cli()
