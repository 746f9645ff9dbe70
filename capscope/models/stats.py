"""Capability statistics models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import Field

from capscope.models.base import CamelModel

MostUsedType = Literal["mcp", "agents", "equal"]


class StatsBreakdown(CamelModel):
    total: int = 0
    mcp: int = 0
    agents: int = 0


class StatsPercentages(CamelModel):
    """Independently rounded shares of the total; they need not sum to 100."""

    mcp: int = 0
    agents: int = 0
    unique: int = 0
    inherited: int = 0
    overridden: int = 0


class ScopeBreakdown(CamelModel):
    user: StatsBreakdown = Field(default_factory=StatsBreakdown)
    project: StatsBreakdown = Field(default_factory=StatsBreakdown)
    local: StatsBreakdown = Field(default_factory=StatsBreakdown)


class CapabilityStats(CamelModel):
    """Counts, classification, and percentages for a capability set."""

    total_mcp: int = 0
    total_agents: int = 0
    total_count: int = 0
    most_used_type: MostUsedType = "equal"
    unique: int = 0
    inherited: int = 0
    overridden: int = 0
    percentages: StatsPercentages = Field(default_factory=StatsPercentages)
    breakdown: ScopeBreakdown = Field(default_factory=ScopeBreakdown)
    last_updated: datetime = Field(default_factory=lambda: datetime.now(UTC))
