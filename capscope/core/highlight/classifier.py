"""Highlight classification and filtering of diff results."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from capscope.models.comparison import (
    DiffResult,
    DiffStatus,
    HighlightClass,
    HighlightFilters,
    SummaryStats,
)
from capscope.utils.timing import DEFAULT_THRESHOLD_MS, advisory_timer

_HIGHLIGHT_BY_STATUS: dict[DiffStatus, HighlightClass] = {
    DiffStatus.ONLY_LEFT: HighlightClass.BLUE,
    DiffStatus.ONLY_RIGHT: HighlightClass.GREEN,
    DiffStatus.DIFFERENT: HighlightClass.YELLOW,
    DiffStatus.CONFLICT: HighlightClass.YELLOW,
    DiffStatus.MATCH: HighlightClass.NONE,
}

_FILTER_FIELDS = (
    "showOnlyDifferences",
    "showBlueOnly",
    "showGreenOnly",
    "showYellowOnly",
)


def get_highlight_class(status: DiffStatus | str) -> HighlightClass:
    """Map a diff status to its display category; unknown statuses get none."""
    try:
        return _HIGHLIGHT_BY_STATUS[DiffStatus(status)]
    except ValueError:
        return HighlightClass.NONE


def _passes(diff: DiffResult, filters: HighlightFilters) -> bool:
    """Decide whether one diff survives the filter toggles.

    With ``show_only_differences`` matches are always dropped; colour toggles
    then narrow the rest. Without it, any colour toggle narrows to those
    colours, except that all three together also bring matches back.
    """
    blue = filters.show_blue_only and diff.status == DiffStatus.ONLY_LEFT
    green = filters.show_green_only and diff.status == DiffStatus.ONLY_RIGHT
    yellow = filters.show_yellow_only and diff.status in (DiffStatus.DIFFERENT, DiffStatus.CONFLICT)
    is_match = diff.status == DiffStatus.MATCH

    any_colour = filters.show_blue_only or filters.show_green_only or filters.show_yellow_only
    all_colours = filters.show_blue_only and filters.show_green_only and filters.show_yellow_only

    if filters.show_only_differences:
        if is_match:
            return False
        if any_colour:
            return blue or green or yellow
        return True

    if any_colour:
        if all_colours:
            return blue or green or yellow or is_match
        return blue or green or yellow

    return True


class HighlightClassifier:
    """Annotate, summarize, and filter diff results for display."""

    def __init__(self, advisory_ms: float | None = DEFAULT_THRESHOLD_MS) -> None:
        self.advisory_ms = advisory_ms

    def classify(self, diffs: list[DiffResult]) -> list[DiffResult]:
        """Return copies of ``diffs`` with ``highlight_class`` set."""
        with advisory_timer("highlight categorization", self.advisory_ms, items=len(diffs)):
            return [
                diff.model_copy(update={"highlight_class": get_highlight_class(diff.status)})
                for diff in diffs
            ]

    def summarize(self, diffs: list[DiffResult]) -> SummaryStats:
        """Count differences by kind; matches are not counted anywhere."""
        only_in_a = only_in_b = different_values = 0
        for diff in diffs:
            if diff.status == DiffStatus.ONLY_LEFT:
                only_in_a += 1
            elif diff.status == DiffStatus.ONLY_RIGHT:
                only_in_b += 1
            elif diff.status in (DiffStatus.DIFFERENT, DiffStatus.CONFLICT):
                different_values += 1

        return SummaryStats(
            total_differences=only_in_a + only_in_b + different_values,
            only_in_a=only_in_a,
            only_in_b=only_in_b,
            different_values=different_values,
        )

    def filter(self, diffs: list[DiffResult], filters: HighlightFilters) -> list[DiffResult]:
        """Keep the diffs selected by ``filters``, preserving order."""
        return [diff for diff in diffs if _passes(diff, filters)]


def categorize_differences(diffs: list[DiffResult]) -> list[DiffResult]:
    return HighlightClassifier().classify(diffs)


def calculate_summary_stats(diffs: list[DiffResult]) -> SummaryStats:
    return HighlightClassifier().summarize(diffs)


def filter_differences(diffs: list[DiffResult], filters: HighlightFilters) -> list[DiffResult]:
    return HighlightClassifier().filter(diffs, filters)


def validate_highlight_filters(raw: Mapping[str, Any]) -> tuple[bool, list[str]]:
    """Check a user-supplied filter payload before building HighlightFilters.

    Returns:
        (is_valid, errors) where each error names a non-boolean field
    """
    errors = [
        f"{name} must be a boolean"
        for name in _FILTER_FIELDS
        if not isinstance(raw.get(name), bool)
    ]
    return not errors, errors
