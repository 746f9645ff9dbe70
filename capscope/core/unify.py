"""Turn resolved configuration entries into capabilities.

The resolver's dotted keys double as capability ids, so the provenance it
records can be handed straight to the statistics step.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Literal

from capscope.core.merge.extract import MCP_SERVER_PREFIX, SUB_AGENT_PREFIX
from capscope.models.capability import (
    Capability,
    CapabilityStatus,
    CapabilityType,
    UnifiedCapability,
)
from capscope.models.config import ConfigEntry, MergeResult, ScopeType

_TYPE_BY_PREFIX = {
    MCP_SERVER_PREFIX: CapabilityType.MCP,
    SUB_AGENT_PREFIX: CapabilityType.AGENT,
}

SortField = Literal["name", "type", "status", "source"]


def get_source_from_path(source_path: str) -> ScopeType:
    """Infer a scope from where a definition was read.

    ``~/.claude.json`` and ``~/.claude/agents/`` are user scope, paths
    relative to the project (``./``) are project scope, anything else local.
    """
    if source_path.startswith("./"):
        return ScopeType.PROJECT
    if ".claude.json" in source_path or ".claude/agents/" in source_path:
        return ScopeType.USER
    return ScopeType.LOCAL


def capability_type_of(key: str) -> CapabilityType | None:
    """Return the capability type for a dotted key, or None for plain settings."""
    prefix, _, name = key.partition(".")
    if not name:
        return None
    return _TYPE_BY_PREFIX.get(prefix)


def capabilities_from_entries(entries: list[ConfigEntry]) -> list[Capability]:
    """Convert entries to comparison capabilities keyed by their dotted path."""
    return [
        Capability(id=entry.key, key=entry.key, value=entry.value, source=entry.source.type.value)
        for entry in entries
    ]


def unified_from_entries(entries: list[ConfigEntry]) -> list[UnifiedCapability]:
    """Convert MCP server and agent entries; plain settings are skipped."""
    unified: list[UnifiedCapability] = []
    for entry in entries:
        cap_type = capability_type_of(entry.key)
        if cap_type is None:
            continue
        data = dict(entry.value) if isinstance(entry.value, Mapping) else {}
        description = data.get("description")
        unified.append(
            UnifiedCapability(
                id=entry.key,
                type=cap_type,
                name=entry.key.partition(".")[2],
                description=description if isinstance(description, str) else None,
                status=CapabilityStatus.ACTIVE,
                source=entry.source.type,
                source_path=entry.source.path,
                data=data,
            )
        )
    return unified


def provenance_for_capabilities(result: MergeResult) -> dict[str, str]:
    """Map capability ids in ``result`` to the scope that first defined them."""
    return {
        key: scope.value
        for key, scope in result.provenance.items()
        if capability_type_of(key) is not None
    }


def unify_capabilities(
    mcp_servers: list[UnifiedCapability],
    agents: list[UnifiedCapability],
) -> list[UnifiedCapability]:
    """Combine servers and agents into one list ordered by name."""
    return sorted([*mcp_servers, *agents], key=lambda cap: cap.name.casefold())


def filter_capabilities(
    capabilities: list[UnifiedCapability],
    *,
    cap_type: CapabilityType | Literal["all"] | None = None,
    source: ScopeType | None = None,
    status: CapabilityStatus | None = None,
    search: str | None = None,
) -> list[UnifiedCapability]:
    """Filter by type, source, status, and a case-insensitive search query.

    The query matches the name, the description, or the serialized
    definition.
    """
    filtered = list(capabilities)
    if cap_type and cap_type != "all":
        filtered = [cap for cap in filtered if cap.type == cap_type]
    if source:
        filtered = [cap for cap in filtered if cap.source == source]
    if status:
        filtered = [cap for cap in filtered if cap.status == status]

    query = (search or "").strip().lower()
    if query:
        filtered = [
            cap
            for cap in filtered
            if query in cap.name.lower()
            or query in (cap.description or "").lower()
            or query in json.dumps(cap.data, sort_keys=True, default=str).lower()
        ]
    return filtered


def sort_capabilities(
    capabilities: list[UnifiedCapability],
    field: SortField = "name",
    descending: bool = False,
) -> list[UnifiedCapability]:
    return sorted(
        capabilities,
        key=lambda cap: str(getattr(cap, field)).casefold(),
        reverse=descending,
    )
