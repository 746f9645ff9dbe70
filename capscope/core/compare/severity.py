"""Severity heuristic for diff results."""

from __future__ import annotations

from typing import Protocol

from capscope.core.severity_keywords import HIGH_SEVERITY_KEY_MARKERS
from capscope.models.comparison import DiffSeverity


class SeveritySubject(Protocol):
    key: str
    source: str


def severity_for(capability: SeveritySubject) -> DiffSeverity:
    """Rate a non-matching capability.

    Keys naming security or auth settings rate ``high``; everything else,
    whatever its scope, rates ``medium``. ``low`` is reserved for matches.
    """
    if HIGH_SEVERITY_KEY_MARKERS.search(capability.key):
        return DiffSeverity.HIGH
    return DiffSeverity.MEDIUM
