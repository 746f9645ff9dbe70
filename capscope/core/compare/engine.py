"""Capability diff engine."""

from __future__ import annotations

import logging

from capscope.core.compare.equality import values_equal
from capscope.core.compare.severity import severity_for
from capscope.models.capability import Capability
from capscope.models.comparison import (
    DiffResult,
    DiffSeverity,
    DiffStatus,
    DiffSummary,
)
from capscope.utils.rounding import percentage
from capscope.utils.timing import DEFAULT_THRESHOLD_MS, advisory_timer

logger = logging.getLogger(__name__)


class CapabilityDiffEngine:
    """Engine for comparing two capability sets by id."""

    def __init__(self, advisory_ms: float | None = DEFAULT_THRESHOLD_MS) -> None:
        """Initialize the diff engine.

        Args:
            advisory_ms: Duration above which a diff is logged as slow
        """
        self.advisory_ms = advisory_ms

    def diff(
        self,
        left: list[Capability],
        right: list[Capability],
    ) -> list[DiffResult]:
        """Compare two capability lists.

        Each distinct id yields exactly one result: left-side ids first in
        order of first appearance, then right-only ids likewise. When an id
        repeats within one side, its last capability is the one compared.
        Runs in O(n + m).

        Args:
            left: Capabilities of side A (project or scope)
            right: Capabilities of side B

        Returns:
            One DiffResult per distinct id
        """
        diffs: list[DiffResult] = []

        with advisory_timer("capability diff", self.advisory_ms, items=len(left) + len(right)):
            left_map = {cap.id: cap for cap in left}
            right_map = {cap.id: cap for cap in right}

            for left_cap in left_map.values():
                right_cap = right_map.get(left_cap.id)
                if right_cap is None:
                    diffs.append(
                        DiffResult(
                            capability_id=left_cap.id,
                            left_value=left_cap,
                            status=DiffStatus.ONLY_LEFT,
                            severity=severity_for(left_cap),
                        )
                    )
                elif values_equal(left_cap.value, right_cap.value):
                    diffs.append(
                        DiffResult(
                            capability_id=left_cap.id,
                            left_value=left_cap,
                            right_value=right_cap,
                            status=DiffStatus.MATCH,
                            severity=DiffSeverity.LOW,
                        )
                    )
                else:
                    diffs.append(
                        DiffResult(
                            capability_id=left_cap.id,
                            left_value=left_cap,
                            right_value=right_cap,
                            status=DiffStatus.DIFFERENT,
                            severity=severity_for(left_cap),
                        )
                    )

            for right_cap in right_map.values():
                if right_cap.id not in left_map:
                    diffs.append(
                        DiffResult(
                            capability_id=right_cap.id,
                            right_value=right_cap,
                            status=DiffStatus.ONLY_RIGHT,
                            severity=severity_for(right_cap),
                        )
                    )

        logger.debug("Diffed %d vs %d capabilities: %d results", len(left), len(right), len(diffs))
        return diffs


def calculate_diff(left: list[Capability], right: list[Capability]) -> list[DiffResult]:
    """Compare two capability lists with the default engine."""
    return CapabilityDiffEngine().diff(left, right)


def group_diffs_by_status(diffs: list[DiffResult]) -> dict[DiffStatus, list[DiffResult]]:
    """Bucket diff results by status; every status has a (possibly empty) list."""
    grouped: dict[DiffStatus, list[DiffResult]] = {status: [] for status in DiffStatus}
    for diff in diffs:
        grouped[diff.status].append(diff)
    return grouped


def get_diff_summary(diffs: list[DiffResult]) -> DiffSummary:
    """Count results per status and the rounded share of matches."""
    grouped = group_diffs_by_status(diffs)
    matches = len(grouped[DiffStatus.MATCH])
    return DiffSummary(
        total=len(diffs),
        matches=matches,
        differences=len(grouped[DiffStatus.DIFFERENT]),
        conflicts=len(grouped[DiffStatus.CONFLICT]),
        only_left=len(grouped[DiffStatus.ONLY_LEFT]),
        only_right=len(grouped[DiffStatus.ONLY_RIGHT]),
        match_percentage=percentage(matches, len(diffs)),
    )
