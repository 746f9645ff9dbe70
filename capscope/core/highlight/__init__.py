"""Diff highlighting."""

from capscope.core.highlight.classifier import (
    HighlightClassifier,
    calculate_summary_stats,
    categorize_differences,
    filter_differences,
    get_highlight_class,
    validate_highlight_filters,
)

__all__ = [
    "HighlightClassifier",
    "categorize_differences",
    "calculate_summary_stats",
    "filter_differences",
    "get_highlight_class",
    "validate_highlight_filters",
]
