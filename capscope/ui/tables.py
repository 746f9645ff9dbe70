"""Rich table builders for engine results."""

from __future__ import annotations

import json
from typing import Any

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from capscope.models.comparison import DiffResult, HighlightClass, SummaryStats
from capscope.models.config import ConfigEntry
from capscope.models.health import ProjectHealth
from capscope.models.stats import CapabilityStats

_HIGHLIGHT_STYLES = {
    HighlightClass.BLUE: "highlight.blue",
    HighlightClass.GREEN: "highlight.green",
    HighlightClass.YELLOW: "highlight.yellow",
}

_VALUE_PREVIEW_LIMIT = 60


def _preview(value: Any) -> str:
    """Compact single-line rendering of a configuration value."""
    if value is None:
        return "[muted]N/A[/muted]"
    text = value if isinstance(value, str) else json.dumps(value, sort_keys=True, default=str)
    if len(text) > _VALUE_PREVIEW_LIMIT:
        text = text[: _VALUE_PREVIEW_LIMIT - 3] + "..."
    return escape(text)


def _styled(text: str, style: str) -> str:
    return f"[{style}]{text}[/{style}]" if style else text


def config_entry_table(entries: list[ConfigEntry], *, title: str = "Effective Configuration") -> Table:
    """Build a table of entries with their scope and inheritance flags."""
    table = Table(title=title, show_lines=False, pad_edge=False)
    table.add_column("Key", style="bold")
    table.add_column("Scope")
    table.add_column("Inherited")
    table.add_column("Overridden")
    table.add_column("Value", overflow="fold")

    for entry in entries:
        scope = entry.source.type.value
        table.add_row(
            escape(entry.key),
            _styled(scope, f"scope.{scope}"),
            "✓" if entry.inherited else "",
            "✓" if entry.overridden else "",
            _preview(entry.value),
        )
    return table


def diff_table(diffs: list[DiffResult]) -> Table:
    """Build a table of diff results coloured by highlight class."""
    table = Table(title="Capability Diff", show_lines=False, pad_edge=False)
    table.add_column("Capability", style="bold")
    table.add_column("Status")
    table.add_column("Severity")
    table.add_column("Left", overflow="fold")
    table.add_column("Right", overflow="fold")

    for diff in diffs:
        style = _HIGHLIGHT_STYLES.get(diff.highlight_class, "") if diff.highlight_class else ""
        table.add_row(
            escape(diff.capability_id),
            _styled(diff.status.value, style),
            _styled(diff.severity.value, f"severity.{diff.severity.value}"),
            _preview(diff.left_value.value) if diff.left_value else "[muted]-[/muted]",
            _preview(diff.right_value.value) if diff.right_value else "[muted]-[/muted]",
        )
    return table


def diff_summary_panel(summary: SummaryStats) -> Panel:
    """Compact panel with difference counts."""
    body = "  ".join(
        [
            f"total: {summary.total_differences}",
            _styled(f"only in A: {summary.only_in_a}", "highlight.blue"),
            _styled(f"only in B: {summary.only_in_b}", "highlight.green"),
            _styled(f"different: {summary.different_values}", "highlight.yellow"),
        ]
    )
    return Panel(body, title="Differences", expand=False)


def stats_table(stats: CapabilityStats) -> Table:
    """Build a table of counts and percentages plus the per-scope breakdown."""
    table = Table(title="Capability Statistics", show_lines=False, pad_edge=False)
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("Percent", justify="right")

    pct = stats.percentages
    table.add_row("MCP servers", str(stats.total_mcp), f"{pct.mcp}%")
    table.add_row("Agents", str(stats.total_agents), f"{pct.agents}%")
    table.add_row("Unique", str(stats.unique), f"{pct.unique}%")
    table.add_row("Inherited", str(stats.inherited), f"{pct.inherited}%")
    table.add_row("Overridden", str(stats.overridden), f"{pct.overridden}%")
    table.add_row("Total", str(stats.total_count), "", style="heading")

    for scope in ("user", "project", "local"):
        bucket = getattr(stats.breakdown, scope)
        table.add_row(
            _styled(f"{scope} scope", f"scope.{scope}"),
            str(bucket.total),
            f"[muted]mcp {bucket.mcp} / agents {bucket.agents}[/muted]",
        )
    table.caption = f"Most used type: {stats.most_used_type}"
    return table


def health_panel(health: ProjectHealth) -> Panel:
    """Panel with score, status, metrics, and recommendations."""
    status = health.status.value
    metrics = health.metrics
    lines = [
        f"Score: {_styled(str(health.score), f'health.{status}')}  Status: {_styled(status, f'health.{status}')}",
        (
            f"Capabilities: {metrics.total_capabilities}  Valid: {metrics.valid_configs}  "
            f"Invalid: {metrics.invalid_configs}  Warnings: {metrics.warnings}  Errors: {metrics.errors}"
        ),
        "",
        *(f"- {item}" for item in health.recommendations),
    ]
    return Panel("\n".join(lines), title=f"Health: {health.project_id}", expand=False)


def health_issue_table(health: ProjectHealth) -> Table:
    table = Table(title="Issues", show_lines=False, pad_edge=False)
    table.add_column("Type")
    table.add_column("Severity")
    table.add_column("Message")

    for issue in health.issues:
        kind = issue.type.value
        table.add_row(
            _styled(kind, kind),
            _styled(issue.severity.value, f"severity.{issue.severity.value}"),
            escape(issue.message),
        )
    return table
