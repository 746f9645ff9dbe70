"""Machine-readable output for CLI commands."""

from __future__ import annotations

import json
from typing import Any

import click
import yaml

OUTPUT_FORMATS = ("table", "json", "yaml")


def render_payload(payload: Any, fmt: str) -> str:
    """Render a JSON-compatible payload as json or yaml."""
    if fmt == "yaml":
        return yaml.safe_dump(payload, sort_keys=False)
    return json.dumps(payload, indent=2)


def emit_payload(payload: Any, fmt: str) -> None:
    click.echo(render_payload(payload, fmt))
