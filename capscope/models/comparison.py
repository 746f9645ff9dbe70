"""Diff and highlighting models."""

from __future__ import annotations

from enum import StrEnum

from capscope.models.base import CamelModel
from capscope.models.capability import Capability


class DiffStatus(StrEnum):
    """Outcome of comparing one capability id across two sides."""

    MATCH = "match"
    DIFFERENT = "different"
    CONFLICT = "conflict"  # Never emitted by the diff engine itself
    ONLY_LEFT = "only-left"
    ONLY_RIGHT = "only-right"


class DiffSeverity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class HighlightClass(StrEnum):
    """Display category derived from a diff status."""

    BLUE = "blue"  # Only in A
    GREEN = "green"  # Only in B
    YELLOW = "yellow"  # Different values
    NONE = "none"


class DiffResult(CamelModel):
    capability_id: str
    left_value: Capability | None = None
    right_value: Capability | None = None
    status: DiffStatus
    severity: DiffSeverity
    highlight_class: HighlightClass | None = None


class HighlightFilters(CamelModel):
    """Independent display toggles applied to diff results."""

    show_only_differences: bool = False
    show_blue_only: bool = False
    show_green_only: bool = False
    show_yellow_only: bool = False


class SummaryStats(CamelModel):
    """Difference counts; matches are excluded from every field."""

    total_differences: int = 0
    only_in_a: int = 0
    only_in_b: int = 0
    different_values: int = 0


class DiffSummary(CamelModel):
    total: int = 0
    matches: int = 0
    differences: int = 0
    conflicts: int = 0
    only_left: int = 0
    only_right: int = 0
    match_percentage: int = 0
