"""Project health scoring."""

from capscope.core.health.scorer import (
    HealthScorer,
    calculate_batch_health,
    calculate_project_health,
    filter_by_health_status,
    generate_recommendations,
    sort_by_health_score,
    summarize_health,
)
from capscope.core.health.validators import SubstringValidator, ValueValidator

__all__ = [
    "HealthScorer",
    "ValueValidator",
    "SubstringValidator",
    "calculate_project_health",
    "calculate_batch_health",
    "filter_by_health_status",
    "sort_by_health_score",
    "summarize_health",
    "generate_recommendations",
]
