"""Tests for project health scoring."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from capscope.core.health import (
    HealthScorer,
    calculate_batch_health,
    calculate_project_health,
    filter_by_health_status,
    sort_by_health_score,
    summarize_health,
)
from capscope.core.health.scorer import (
    EMPTY_PROJECT_RECOMMENDATION,
    MANY_WARNINGS_RECOMMENDATION,
)
from capscope.models.health import HealthStatus, IssueSeverity, IssueType
from tests.conftest import make_capability, make_project


def _caps(*values: Any):
    return [make_capability(f"setting{i}", value) for i, value in enumerate(values)]


class TestProjectHealth:
    """Scoring rules for a single project."""

    def test_many_invalid_values_is_error(self, project):
        health = calculate_project_health(project, _caps("invalid-a", "invalid-b", "invalid-c", "invalid-d"))

        assert health.status == HealthStatus.ERROR
        assert health.score == 0
        assert health.metrics.errors == 4
        assert health.metrics.invalid_configs == 4
        assert health.metrics.valid_configs == 0
        assert health.recommendations[0] == "Fix critical configuration errors immediately"

    def test_two_valid_capabilities_are_good(self, project):
        health = calculate_project_health(project, _caps("npx", {"command": "uvx"}))

        assert health.status == HealthStatus.GOOD
        assert health.score == 84
        assert health.issues == []
        assert health.recommendations == [
            "Configuration looks good",
            "Continue regular maintenance and monitoring",
        ]

    def test_good_score_is_capped(self, project):
        health = calculate_project_health(project, _caps(*range(30)))

        assert health.status == HealthStatus.GOOD
        assert health.score == 100

    def test_single_capability_is_warning(self, project):
        health = calculate_project_health(project, _caps("npx"))

        assert health.status == HealthStatus.WARNING
        assert health.score == 75

    def test_empty_project(self, project):
        health = calculate_project_health(project, [])

        assert health.status == HealthStatus.WARNING
        assert health.score == 75
        assert health.metrics.total_capabilities == 0
        assert EMPTY_PROJECT_RECOMMENDATION in health.recommendations

    def test_many_missing_values(self, project):
        health = calculate_project_health(project, _caps(None, None, None, None, None, None))

        assert health.status == HealthStatus.WARNING
        assert health.score == 45
        assert health.metrics.warnings == 6
        assert health.metrics.valid_configs == 6
        assert health.recommendations[-1] == MANY_WARNINGS_RECOMMENDATION

    def test_warning_score_floor(self, project):
        health = calculate_project_health(project, _caps("invalid", "invalid", "invalid", None))

        assert health.status == HealthStatus.WARNING
        assert health.score == 40

    def test_issue_details(self, project):
        health = calculate_project_health(project, _caps(None, "invalid token"))

        missing, invalid = health.issues
        assert missing.id == "missing-value-setting0"
        assert missing.type == IssueType.WARNING
        assert missing.severity == IssueSeverity.MEDIUM
        assert missing.message == 'Capability "setting0" has missing value'
        assert missing.project_id == "proj-1"
        assert invalid.id == "invalid-value-setting1"
        assert invalid.type == IssueType.ERROR
        assert invalid.severity == IssueSeverity.HIGH
        assert invalid.details == "Value contains invalid content"

    def test_non_string_values_are_not_invalid(self, project):
        health = calculate_project_health(project, _caps({"note": "invalid"}, ["invalid"]))

        assert health.status == HealthStatus.GOOD
        assert health.metrics.invalid_configs == 0

    def test_last_accessed_comes_from_project(self):
        touched = datetime(2025, 3, 1, tzinfo=UTC)
        health = calculate_project_health(make_project(last_modified=touched), _caps("a", "b"))

        assert health.metrics.last_accessed == touched
        assert health.metrics.last_checked.tzinfo is not None

    def test_custom_validator(self, project):
        class RejectNumbers:
            def is_invalid(self, value: Any) -> bool:
                return isinstance(value, int)

        health = HealthScorer(validator=RejectNumbers()).score(project, _caps(1, "invalid"))

        assert health.metrics.invalid_configs == 1
        assert health.issues[0].id == "invalid-value-setting0"

    def test_payload_uses_camel_case(self, project):
        payload = calculate_project_health(project, _caps("a", "b")).to_payload()

        assert payload["projectId"] == "proj-1"
        assert payload["metrics"]["totalCapabilities"] == 2
        assert payload["metrics"]["lastAccessed"] is None


class TestBatchHealth:
    """Batch scoring, sorting, filtering, and summary."""

    def _results(self):
        projects = [make_project("empty"), make_project("good"), make_project("broken")]
        capabilities = {
            "good": _caps("a", "b", "c"),
            "broken": _caps("invalid", "invalid", "invalid", "invalid", "invalid"),
        }
        return calculate_batch_health(projects, capabilities)

    def test_batch_scores_every_project(self):
        results = self._results()

        assert [health.project_id for health in results] == ["empty", "good", "broken"]
        assert [health.status for health in results] == [
            HealthStatus.WARNING,
            HealthStatus.GOOD,
            HealthStatus.ERROR,
        ]

    def test_sort_by_score_descending(self):
        ordered = sort_by_health_score(self._results())

        assert [health.project_id for health in ordered] == ["good", "empty", "broken"]

    def test_sort_is_stable_for_ties(self):
        results = calculate_batch_health([make_project("x"), make_project("y")], {})

        assert [health.project_id for health in sort_by_health_score(results)] == ["x", "y"]

    def test_filter_by_status(self):
        results = self._results()

        assert [h.project_id for h in filter_by_health_status(results, HealthStatus.ERROR)] == ["broken"]
        assert len(filter_by_health_status(results, "all")) == 3

    def test_summary(self):
        summary = summarize_health(self._results())

        assert summary.total_projects == 3
        assert summary.good_count == 1
        assert summary.warning_count == 1
        assert summary.error_count == 1
        # (75 + 86 + 0) / 3 = 53.67
        assert summary.average_health_score == 54

    def test_empty_summary(self):
        assert summarize_health([]).average_health_score == 0
