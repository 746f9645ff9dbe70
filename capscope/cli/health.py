"""Health command implementation."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from capscope.cli.inputs import InputDocumentError, load_capabilities
from capscope.cli.render import emit_payload
from capscope.core.health import HealthScorer
from capscope.models.health import DiscoveredProject
from capscope.ui.console import console
from capscope.ui.tables import health_issue_table, health_panel


def run_health(
    capabilities_path: Path,
    project_id: str | None,
    project_name: str | None,
    output_format: str,
    advisory_ms: float | None,
) -> None:
    """Score the capabilities in one document as a single project."""
    try:
        capabilities = load_capabilities(capabilities_path)
    except (InputDocumentError, ValidationError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    project = DiscoveredProject(
        id=project_id or capabilities_path.stem,
        name=project_name or capabilities_path.stem,
        path=str(capabilities_path.parent),
        config_file_count=1,
    )
    health = HealthScorer(advisory_ms=advisory_ms).score(project, capabilities)

    if output_format != "table":
        emit_payload(health.to_payload(), output_format)
        return

    console.print(health_panel(health))
    if health.issues:
        console.print(health_issue_table(health))
