"""Capability models used by comparison, statistics, and health scoring."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import Field

from capscope.models.base import CamelModel
from capscope.models.config import ScopeType


class CapabilityType(StrEnum):
    """Kinds of capability a scope can define."""

    MCP = "mcp"
    AGENT = "agent"


class CapabilityStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ERROR = "error"


class Capability(CamelModel):
    """Atomic unit of comparison. ``id`` joins the two sides of a diff."""

    id: str
    key: str
    value: Any = None
    source: str


class UnifiedCapability(CamelModel):
    """An MCP server or an agent definition, as listed for a scope."""

    id: str
    type: CapabilityType
    name: str
    description: str | None = None
    status: CapabilityStatus = CapabilityStatus.ACTIVE
    source: ScopeType
    source_path: str = ""
    last_modified: datetime | None = None
    data: dict[str, Any] = Field(default_factory=dict)
