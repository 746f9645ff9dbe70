"""Stats command implementation."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from capscope.cli.inputs import InputDocumentError, load_document
from capscope.cli.render import emit_payload
from capscope.core.merge import ScopeMergeResolver
from capscope.core.stats import CapabilityStatsAggregator
from capscope.core.unify import provenance_for_capabilities, unified_from_entries
from capscope.models.config import ScopeLayer, ScopeType
from capscope.ui.console import console
from capscope.ui.tables import stats_table


def run_stats(
    user_path: Path,
    project_path: Path | None,
    local_path: Path | None,
    scope: str | None,
    heuristic: bool,
    output_format: str,
    advisory_ms: float | None,
) -> None:
    """Run the stats command.

    Resolves the given scopes, then aggregates the effective MCP servers and
    agents. Unless ``heuristic`` is set, the resolver's provenance decides
    which capabilities count as overridden. The name heuristic needs every
    scope's definition, so with ``heuristic`` shadowed entries are counted too.
    """
    sources = [(ScopeType.USER, user_path), (ScopeType.PROJECT, project_path), (ScopeType.LOCAL, local_path)]
    try:
        layers = [
            ScopeLayer(scope=scope_type, config=load_document(path), path=str(path))
            for scope_type, path in sources
            if path is not None
        ]
    except InputDocumentError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    result = ScopeMergeResolver(advisory_ms=advisory_ms).resolve(layers)
    if heuristic:
        capabilities = unified_from_entries(result.shadowed + result.entries)
        provenance = None
    else:
        capabilities = unified_from_entries(result.entries)
        provenance = provenance_for_capabilities(result)
    stats = CapabilityStatsAggregator(advisory_ms=advisory_ms).calculate(capabilities, scope, provenance)

    if output_format == "table":
        console.print(stats_table(stats))
    else:
        emit_payload(stats.to_payload(), output_format)
