"""Shared test factories for the capscope test suite."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest

from capscope.models.capability import Capability, CapabilityType, UnifiedCapability
from capscope.models.health import DiscoveredProject

_DEFAULT_VALUE = object()


def make_capability(
    cap_id: str = "mcpServers.filesystem",
    value: Any = _DEFAULT_VALUE,
    source: str = "project",
    key: str | None = None,
) -> Capability:
    """Create a comparison Capability.

    Import it directly:

        from tests.conftest import make_capability
    """
    return Capability(
        id=cap_id,
        key=key if key is not None else cap_id,
        value={"command": "npx"} if value is _DEFAULT_VALUE else value,
        source=source,
    )


def make_unified(
    name: str = "filesystem",
    cap_type: CapabilityType = CapabilityType.MCP,
    source: str = "project",
    cap_id: str | None = None,
) -> UnifiedCapability:
    """Create a UnifiedCapability with an id derived from type, name, and source."""
    return UnifiedCapability(
        id=cap_id or f"{cap_type.value}-{name}-{source}",
        type=cap_type,
        name=name,
        source=source,
    )


def make_project(
    project_id: str = "proj-1",
    name: str = "Demo Project",
    last_modified: datetime | None = None,
) -> DiscoveredProject:
    return DiscoveredProject(
        id=project_id,
        name=name,
        path=f"/work/{project_id}",
        last_modified=last_modified,
    )


@pytest.fixture
def project() -> DiscoveredProject:
    return make_project()
