"""Pydantic data models for capscope."""

from capscope.models.capability import (
    Capability,
    CapabilityStatus,
    CapabilityType,
    UnifiedCapability,
)
from capscope.models.comparison import (
    DiffResult,
    DiffSeverity,
    DiffStatus,
    DiffSummary,
    HighlightClass,
    HighlightFilters,
    SummaryStats,
)
from capscope.models.config import (
    SCOPE_PRIORITY,
    ConfigEntry,
    ConfigSource,
    MergeResult,
    ScopeLayer,
    ScopeType,
)
from capscope.models.health import (
    ConfigSources,
    DiscoveredProject,
    HealthIssue,
    HealthMetrics,
    HealthStatus,
    HealthSummary,
    IssueSeverity,
    IssueType,
    ProjectHealth,
)
from capscope.models.stats import (
    CapabilityStats,
    ScopeBreakdown,
    StatsBreakdown,
    StatsPercentages,
)

__all__ = [
    # Config
    "ScopeType",
    "SCOPE_PRIORITY",
    "ConfigSource",
    "ConfigEntry",
    "ScopeLayer",
    "MergeResult",
    # Capability
    "CapabilityType",
    "CapabilityStatus",
    "Capability",
    "UnifiedCapability",
    # Comparison
    "DiffStatus",
    "DiffSeverity",
    "HighlightClass",
    "DiffResult",
    "HighlightFilters",
    "SummaryStats",
    "DiffSummary",
    # Stats
    "StatsBreakdown",
    "StatsPercentages",
    "ScopeBreakdown",
    "CapabilityStats",
    # Health
    "HealthStatus",
    "IssueType",
    "IssueSeverity",
    "ConfigSources",
    "DiscoveredProject",
    "HealthIssue",
    "HealthMetrics",
    "ProjectHealth",
    "HealthSummary",
]
