"""Load the JSON/YAML documents named on the command line."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from capscope.core.merge import extract_all_entries
from capscope.core.unify import capabilities_from_entries
from capscope.models.capability import Capability
from capscope.models.config import ScopeType


class InputDocumentError(ValueError):
    """An input document is missing or cannot be parsed."""


def load_document(path: Path) -> Any:
    """Parse a JSON or YAML file; an empty file loads as an empty mapping."""
    if not path.exists():
        raise InputDocumentError(f"File not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise InputDocumentError(f"Could not read {path}: {exc}") from exc
    return {} if data is None else data


def load_capabilities(path: Path, scope: ScopeType = ScopeType.PROJECT) -> list[Capability]:
    """Load capabilities from a capability list or from a scope config map.

    Accepted shapes:
      - a list of capability mappings (``id``, ``key``, ``value``, ``source``)
      - a mapping with a ``capabilities`` list
      - a scope configuration map (``mcpServers``, ``subAgents``, settings),
        flattened as if it came from ``scope``

    Raises:
        InputDocumentError: If the document has none of these shapes
        pydantic.ValidationError: If a capability item is malformed
    """
    data = load_document(path)
    if isinstance(data, Mapping) and isinstance(data.get("capabilities"), list):
        data = data["capabilities"]

    if isinstance(data, list):
        return [Capability.model_validate(item) for item in data]
    if isinstance(data, Mapping):
        return capabilities_from_entries(extract_all_entries(data, scope, str(path)))
    raise InputDocumentError(f"Expected a capability list or config map in {path}")
