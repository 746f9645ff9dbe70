"""Lookups over resolved configuration entries."""

from __future__ import annotations

from collections import Counter

from capscope.models.config import ConfigEntry


def track_config_source(entries: list[ConfigEntry], key: str) -> ConfigEntry | None:
    """Return the first entry for ``key``, if any."""
    return next((entry for entry in entries if entry.key == key), None)


def get_source_hierarchy(entries: list[ConfigEntry]) -> dict[str, list[str]]:
    """Group entry keys by the scope they came from."""
    hierarchy: dict[str, list[str]] = {}
    for entry in entries:
        hierarchy.setdefault(entry.source.type.value, []).append(entry.key)
    return hierarchy


def find_conflicting_keys(entries: list[ConfigEntry]) -> list[str]:
    """Return keys defined by more than one entry, in first-seen order."""
    counts = Counter(entry.key for entry in entries)
    return [key for key, count in counts.items() if count > 1]
