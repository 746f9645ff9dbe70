"""Capability comparison."""

from capscope.core.compare.engine import (
    CapabilityDiffEngine,
    calculate_diff,
    get_diff_summary,
    group_diffs_by_status,
)
from capscope.core.compare.equality import values_equal
from capscope.core.compare.severity import severity_for

__all__ = [
    "CapabilityDiffEngine",
    "calculate_diff",
    "group_diffs_by_status",
    "get_diff_summary",
    "values_equal",
    "severity_for",
]
