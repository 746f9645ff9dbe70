"""Capability statistics."""

from capscope.core.stats.aggregator import (
    CapabilityStatsAggregator,
    calculate_capability_stats,
    get_stats_for_scope,
)

__all__ = [
    "CapabilityStatsAggregator",
    "calculate_capability_stats",
    "get_stats_for_scope",
]
