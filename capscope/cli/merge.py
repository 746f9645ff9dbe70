"""Merge command implementation."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from capscope.cli.inputs import InputDocumentError, load_document
from capscope.cli.render import emit_payload
from capscope.core.merge import ScopeMergeResolver
from capscope.models.config import ScopeLayer, ScopeType
from capscope.ui.console import console
from capscope.ui.tables import config_entry_table


def run_merge(
    user_path: Path,
    project_path: Path,
    local_path: Path | None,
    output_format: str,
    show_shadowed: bool,
    advisory_ms: float | None,
) -> None:
    """Run the merge command.

    Args:
        user_path: User-scope config document
        project_path: Project-scope config document
        local_path: Optional local-scope config document
        output_format: Output format (table, json, yaml)
        show_shadowed: Also report lower-scope entries that lost
        advisory_ms: Slow-operation logging threshold
    """
    sources = [(ScopeType.USER, user_path), (ScopeType.PROJECT, project_path)]
    if local_path is not None:
        sources.append((ScopeType.LOCAL, local_path))

    try:
        layers = [
            ScopeLayer(scope=scope, config=load_document(path), path=str(path))
            for scope, path in sources
        ]
    except InputDocumentError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    result = ScopeMergeResolver(advisory_ms=advisory_ms).resolve(layers)

    if output_format != "table":
        if show_shadowed:
            emit_payload(result.to_payload(), output_format)
        else:
            emit_payload([entry.to_payload() for entry in result.entries], output_format)
        return

    console.print(config_entry_table(result.entries))
    if show_shadowed and result.shadowed:
        console.print(config_entry_table(result.shadowed, title="Shadowed Entries"))
