"""Project health scoring.

Detects per-capability issues and turns their counts into a 0-100 score,
a good/warning/error status, and fixed recommendations.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Literal

from capscope.core.health.validators import SubstringValidator, ValueValidator
from capscope.models.capability import Capability
from capscope.models.health import (
    DiscoveredProject,
    HealthIssue,
    HealthMetrics,
    HealthStatus,
    HealthSummary,
    IssueSeverity,
    IssueType,
    ProjectHealth,
)
from capscope.utils.rounding import round_half_up
from capscope.utils.timing import advisory_timer

logger = logging.getLogger(__name__)

MISSING_ISSUE_PREFIX = "missing-value-"
INVALID_ISSUE_PREFIX = "invalid-value-"

# Per-project target.
HEALTH_THRESHOLD_MS = 50.0

_RECOMMENDATIONS: dict[HealthStatus, tuple[str, str]] = {
    HealthStatus.ERROR: (
        "Fix critical configuration errors immediately",
        "Review project setup and validate all configuration files",
    ),
    HealthStatus.WARNING: (
        "Address configuration warnings to improve project health",
        "Validate configuration values and fix any issues",
    ),
    HealthStatus.GOOD: (
        "Configuration looks good",
        "Continue regular maintenance and monitoring",
    ),
}
EMPTY_PROJECT_RECOMMENDATION = "Add configuration files to improve project visibility"
MANY_WARNINGS_RECOMMENDATION = "High number of warnings detected - review all configurations"


class HealthScorer:
    """Score a project's capabilities."""

    def __init__(
        self,
        validator: ValueValidator | None = None,
        advisory_ms: float | None = HEALTH_THRESHOLD_MS,
    ) -> None:
        """Initialize the scorer.

        Args:
            validator: Strategy deciding which present values are invalid
            advisory_ms: Duration above which scoring is logged as slow
        """
        self.validator = validator or SubstringValidator()
        self.advisory_ms = advisory_ms

    def score(self, project: DiscoveredProject, capabilities: list[Capability]) -> ProjectHealth:
        """Calculate health for a single project in one pass.

        Args:
            project: Project descriptor
            capabilities: The project's capabilities

        Returns:
            ProjectHealth with score, status, metrics, issues, recommendations
        """
        issues: list[HealthIssue] = []
        warnings = 0
        errors = 0
        invalid_configs = 0

        with advisory_timer("health check", self.advisory_ms, items=len(capabilities)):
            for capability in capabilities:
                value = capability.value
                if value is None:
                    issues.append(
                        HealthIssue(
                            id=f"{MISSING_ISSUE_PREFIX}{capability.id}",
                            type=IssueType.WARNING,
                            severity=IssueSeverity.MEDIUM,
                            message=f'Capability "{capability.key}" has missing value',
                            details="Check configuration for this capability",
                            project_id=project.id,
                        )
                    )
                    warnings += 1
                elif self.validator.is_invalid(value):
                    issues.append(
                        HealthIssue(
                            id=f"{INVALID_ISSUE_PREFIX}{capability.id}",
                            type=IssueType.ERROR,
                            severity=IssueSeverity.HIGH,
                            message=f'Capability "{capability.key}" has invalid value',
                            details="Value contains invalid content",
                            project_id=project.id,
                        )
                    )
                    errors += 1
                    invalid_configs += 1

        total = len(capabilities)
        status, score = _score(total, warnings, errors, invalid_configs)
        logger.debug("Project %s health: %s (%d)", project.id, status.value, score)

        return ProjectHealth(
            project_id=project.id,
            status=status,
            score=score,
            metrics=HealthMetrics(
                total_capabilities=total,
                valid_configs=total - invalid_configs,
                invalid_configs=invalid_configs,
                warnings=warnings,
                errors=errors,
                last_checked=datetime.now(UTC),
                last_accessed=project.last_modified,
            ),
            issues=issues,
            recommendations=generate_recommendations(status, warnings, total),
        )


def _score(total: int, warnings: int, errors: int, invalid_configs: int) -> tuple[HealthStatus, int]:
    if errors > 3:
        return HealthStatus.ERROR, max(0, 50 - errors * 15 - warnings * 2)
    if errors > 0 or warnings > 0 or invalid_configs > 0 or total < 2:
        return HealthStatus.WARNING, max(40, 75 - warnings * 5 - invalid_configs * 10)
    return HealthStatus.GOOD, min(100, 80 + total * 2)


def generate_recommendations(status: HealthStatus, warnings: int, total: int) -> list[str]:
    """Return the fixed recommendations for a status plus conditional tips."""
    recommendations = list(_RECOMMENDATIONS[status])
    if total == 0:
        recommendations.append(EMPTY_PROJECT_RECOMMENDATION)
    if warnings > 5:
        recommendations.append(MANY_WARNINGS_RECOMMENDATION)
    return recommendations


def calculate_project_health(
    project: DiscoveredProject,
    capabilities: list[Capability],
) -> ProjectHealth:
    """Score one project with the default validator."""
    return HealthScorer().score(project, capabilities)


def calculate_batch_health(
    projects: list[DiscoveredProject],
    capabilities_by_project: Mapping[str, list[Capability]],
    scorer: HealthScorer | None = None,
) -> list[ProjectHealth]:
    """Score several projects; a project with no entry scores as empty."""
    scorer = scorer or HealthScorer()
    return [scorer.score(project, capabilities_by_project.get(project.id, [])) for project in projects]


def filter_by_health_status(
    results: list[ProjectHealth],
    status: HealthStatus | Literal["all"],
) -> list[ProjectHealth]:
    if status == "all":
        return list(results)
    return [health for health in results if health.status == status]


def sort_by_health_score(results: list[ProjectHealth]) -> list[ProjectHealth]:
    """Return results ordered by score, highest first; ties keep input order."""
    return sorted(results, key=lambda health: health.score, reverse=True)


def summarize_health(results: list[ProjectHealth]) -> HealthSummary:
    """Count projects per status and average their scores."""
    if not results:
        return HealthSummary()
    return HealthSummary(
        total_projects=len(results),
        good_count=sum(1 for health in results if health.status == HealthStatus.GOOD),
        warning_count=sum(1 for health in results if health.status == HealthStatus.WARNING),
        error_count=sum(1 for health in results if health.status == HealthStatus.ERROR),
        average_health_score=round_half_up(sum(health.score for health in results) / len(results)),
    )
