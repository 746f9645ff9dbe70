"""Capability statistics.

Counts capabilities by type and scope, classifies each one as unique,
inherited, or overridden, and derives independently rounded percentages.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime

from capscope.models.capability import CapabilityType, UnifiedCapability
from capscope.models.config import ScopeType
from capscope.models.stats import (
    CapabilityStats,
    MostUsedType,
    ScopeBreakdown,
    StatsBreakdown,
    StatsPercentages,
)
from capscope.utils.rounding import percentage
from capscope.utils.timing import DEFAULT_THRESHOLD_MS, advisory_timer

logger = logging.getLogger(__name__)


def get_stats_for_scope(
    capabilities: list[UnifiedCapability],
    scope: ScopeType | str | None = None,
) -> list[UnifiedCapability]:
    """Filter capabilities to one source scope; no scope keeps everything."""
    if not scope:
        return list(capabilities)
    return [cap for cap in capabilities if cap.source == scope]


def _most_used(mcp: int, agents: int) -> MostUsedType:
    if mcp > agents:
        return "mcp"
    if agents > mcp:
        return "agents"
    return "equal"


class CapabilityStatsAggregator:
    """Compute CapabilityStats over a capability set."""

    def __init__(self, advisory_ms: float | None = DEFAULT_THRESHOLD_MS) -> None:
        self.advisory_ms = advisory_ms

    def calculate(
        self,
        capabilities: list[UnifiedCapability] | None,
        scope: ScopeType | str | None = None,
        provenance: Mapping[str, str] | None = None,
    ) -> CapabilityStats:
        """Calculate statistics for ``capabilities``.

        Args:
            capabilities: Capabilities to summarize; None or empty yields zeros
            scope: Optional source scope to restrict to
            provenance: Optional capability id -> originating scope map. When
                it covers a capability, that capability is overridden if its
                origin differs from its source and unique otherwise.

        Returns:
            CapabilityStats with counts, percentages, and per-scope breakdown
        """
        if not capabilities:
            return CapabilityStats()

        with advisory_timer("capability stats", self.advisory_ms, items=len(capabilities)):
            entries = get_stats_for_scope(capabilities, scope)

            counts = {scope_type: {"total": 0, "mcp": 0, "agents": 0} for scope_type in ScopeType}
            mcp_count = 0
            agent_count = 0
            for entry in entries:
                bucket = counts[ScopeType(entry.source)]
                bucket["total"] += 1
                if entry.type == CapabilityType.MCP:
                    mcp_count += 1
                    bucket["mcp"] += 1
                else:
                    agent_count += 1
                    bucket["agents"] += 1

            unique, inherited, overridden = self._classify(entries, provenance)

        total = len(entries)
        logger.debug(
            "Stats over %d capabilities: %d unique, %d inherited, %d overridden",
            total,
            unique,
            inherited,
            overridden,
        )
        return CapabilityStats(
            total_mcp=mcp_count,
            total_agents=agent_count,
            total_count=total,
            most_used_type=_most_used(mcp_count, agent_count),
            unique=unique,
            inherited=inherited,
            overridden=overridden,
            percentages=StatsPercentages(
                mcp=percentage(mcp_count, total),
                agents=percentage(agent_count, total),
                unique=percentage(unique, total),
                inherited=percentage(inherited, total),
                overridden=percentage(overridden, total),
            ),
            breakdown=ScopeBreakdown(
                user=StatsBreakdown(**counts[ScopeType.USER]),
                project=StatsBreakdown(**counts[ScopeType.PROJECT]),
                local=StatsBreakdown(**counts[ScopeType.LOCAL]),
            ),
            last_updated=datetime.now(UTC),
        )

    def _classify(
        self,
        entries: list[UnifiedCapability],
        provenance: Mapping[str, str] | None,
    ) -> tuple[int, int, int]:
        """Return (unique, inherited, overridden) counts.

        Without provenance for a capability, fall back to the name heuristic:
        local capabilities count as inherited, project capabilities sharing a
        name with a user capability count as overridden. Names are matched
        regardless of type.
        """
        user_names = {entry.name for entry in entries if entry.source == ScopeType.USER}
        unique = inherited = overridden = 0

        for entry in entries:
            if provenance is not None and entry.id in provenance:
                origin = provenance[entry.id]
                if origin and origin != entry.source:
                    overridden += 1
                else:
                    unique += 1
            elif entry.source == ScopeType.LOCAL:
                inherited += 1
            elif entry.source == ScopeType.PROJECT and entry.name in user_names:
                overridden += 1
            else:
                unique += 1

        return unique, inherited, overridden


def calculate_capability_stats(
    capabilities: list[UnifiedCapability] | None,
    scope: ScopeType | str | None = None,
    provenance: Mapping[str, str] | None = None,
) -> CapabilityStats:
    """Calculate statistics with the default aggregator."""
    return CapabilityStatsAggregator().calculate(capabilities, scope, provenance)
