"""Flatten a scope's raw configuration map into dotted-key entries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from capscope.models.config import ConfigEntry, ConfigSource, ScopeType

MCP_SERVER_PREFIX = "mcpServers"
SUB_AGENT_PREFIX = "subAgents"

# Accepted spellings, first one present wins (an empty container still counts).
MCP_SERVER_CONTAINERS = ("mcpServers", "mcp_servers")
SUB_AGENT_CONTAINERS = ("subAgents", "sub_agents", "agents")

_CAPABILITY_CONTAINERS = frozenset(MCP_SERVER_CONTAINERS + SUB_AGENT_CONTAINERS)


def _as_mapping(value: Any) -> Mapping[str, Any]:
    """Treat anything that is not a mapping as an empty config."""
    if isinstance(value, Mapping):
        return value
    return {}


def _first_container(config: Mapping[str, Any], names: tuple[str, ...]) -> Mapping[str, Any]:
    for name in names:
        container = config.get(name)
        if container is not None:
            return _as_mapping(container)
    return {}


def extract_config_entries(
    config: Any,
    scope: ScopeType,
    path: str = "",
) -> list[ConfigEntry]:
    """Return one entry per top-level key, skipping capability containers."""
    source = ConfigSource.for_scope(scope, path)
    return [
        ConfigEntry(key=str(key), value=value, source=source)
        for key, value in _as_mapping(config).items()
        if key not in _CAPABILITY_CONTAINERS
    ]


def extract_mcp_servers(config: Any, scope: ScopeType, path: str = "") -> list[ConfigEntry]:
    """Return ``mcpServers.<name>`` entries for each declared MCP server."""
    source = ConfigSource.for_scope(scope, path)
    servers = _first_container(_as_mapping(config), MCP_SERVER_CONTAINERS)
    return [
        ConfigEntry(key=f"{MCP_SERVER_PREFIX}.{name}", value=value, source=source)
        for name, value in servers.items()
    ]


def extract_sub_agents(config: Any, scope: ScopeType, path: str = "") -> list[ConfigEntry]:
    """Return ``subAgents.<name>`` entries for each declared agent."""
    source = ConfigSource.for_scope(scope, path)
    agents = _first_container(_as_mapping(config), SUB_AGENT_CONTAINERS)
    return [
        ConfigEntry(key=f"{SUB_AGENT_PREFIX}.{name}", value=value, source=source)
        for name, value in agents.items()
    ]


def extract_all_entries(config: Any, scope: ScopeType, path: str = "") -> list[ConfigEntry]:
    """Extract plain settings, then MCP servers, then agents."""
    return [
        *extract_config_entries(config, scope, path),
        *extract_mcp_servers(config, scope, path),
        *extract_sub_agents(config, scope, path),
    ]
