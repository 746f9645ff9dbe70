"""Project health models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import Field

from capscope.models.base import CamelModel


class HealthStatus(StrEnum):
    GOOD = "good"
    WARNING = "warning"
    ERROR = "error"


class IssueType(StrEnum):
    WARNING = "warning"
    ERROR = "error"


class IssueSeverity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ConfigSources(CamelModel):
    """Which scopes contributed configuration to a project."""

    user: bool = False
    project: bool = False
    local: bool = False


class DiscoveredProject(CamelModel):
    """Descriptor of a project found by the discovery layer."""

    id: str
    name: str
    path: str = ""
    config_file_count: int = 0
    last_modified: datetime | None = None
    config_sources: ConfigSources = Field(default_factory=ConfigSources)
    mcp_servers: list[str] = Field(default_factory=list)
    sub_agents: list[str] = Field(default_factory=list)


class HealthIssue(CamelModel):
    id: str
    type: IssueType
    severity: IssueSeverity
    message: str
    details: str | None = None
    project_id: str


class HealthMetrics(CamelModel):
    total_capabilities: int = 0
    valid_configs: int = 0
    invalid_configs: int = 0
    warnings: int = 0
    errors: int = 0
    last_checked: datetime
    last_accessed: datetime | None = None


class ProjectHealth(CamelModel):
    """Health score (0-100), status, and issues for one project."""

    project_id: str
    status: HealthStatus
    score: int = Field(ge=0, le=100)
    metrics: HealthMetrics
    issues: list[HealthIssue] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class HealthSummary(CamelModel):
    total_projects: int = 0
    good_count: int = 0
    warning_count: int = 0
    error_count: int = 0
    average_health_score: int = 0
