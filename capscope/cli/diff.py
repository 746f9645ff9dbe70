"""Diff command implementation."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from capscope.cli.inputs import InputDocumentError, load_capabilities
from capscope.cli.render import emit_payload
from capscope.core.compare import CapabilityDiffEngine
from capscope.core.highlight import HighlightClassifier
from capscope.models.comparison import HighlightFilters
from capscope.ui.console import console
from capscope.ui.tables import diff_summary_panel, diff_table


def run_diff(
    left_path: Path,
    right_path: Path,
    filters: HighlightFilters,
    output_format: str,
    fail_on_difference: bool,
    advisory_ms: float | None,
) -> None:
    """Run the diff command.

    Args:
        left_path: Capability document for side A
        right_path: Capability document for side B
        filters: Display toggles applied to the classified results
        output_format: Output format (table, json, yaml)
        fail_on_difference: Exit 1 when any difference is found
        advisory_ms: Slow-operation logging threshold
    """
    try:
        left = load_capabilities(left_path)
        right = load_capabilities(right_path)
    except (InputDocumentError, ValidationError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    classifier = HighlightClassifier(advisory_ms=advisory_ms)
    diffs = classifier.classify(CapabilityDiffEngine(advisory_ms=advisory_ms).diff(left, right))
    summary = classifier.summarize(diffs)
    shown = classifier.filter(diffs, filters)

    if output_format == "table":
        console.print(diff_table(shown))
        console.print(diff_summary_panel(summary))
    else:
        emit_payload(
            {
                "summary": summary.to_payload(),
                "diffResults": [diff.to_payload() for diff in shown],
            },
            output_format,
        )

    if fail_on_difference and summary.total_differences:
        sys.exit(1)
