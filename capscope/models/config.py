"""Scoped configuration entry models."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field

from capscope.models.base import CamelModel


class ScopeType(StrEnum):
    """Precedence tiers configuration can come from."""

    USER = "user"
    PROJECT = "project"
    LOCAL = "local"


# Higher wins.
SCOPE_PRIORITY: dict[ScopeType, int] = {
    ScopeType.USER: 1,
    ScopeType.PROJECT: 2,
    ScopeType.LOCAL: 3,
}


class ConfigSource(CamelModel):
    """Where a configuration entry came from."""

    type: ScopeType
    path: str = ""
    priority: int

    @classmethod
    def for_scope(cls, scope: ScopeType, path: str = "") -> ConfigSource:
        return cls(type=scope, path=path, priority=SCOPE_PRIORITY[scope])


class ConfigEntry(CamelModel):
    """A single configuration value keyed by its dotted structural path."""

    key: str
    value: Any = None
    source: ConfigSource
    inherited: bool | None = None
    overridden: bool | None = None


class ScopeLayer(CamelModel):
    """One scope's raw configuration handed to the resolver."""

    scope: ScopeType
    config: Any = None
    path: str = ""


class MergeResult(CamelModel):
    """Outcome of resolving several scope layers."""

    entries: list[ConfigEntry] = Field(default_factory=list)
    # Lower-scope entries that lost to a higher scope for the same key.
    shadowed: list[ConfigEntry] = Field(default_factory=list)
    resolved: dict[str, Any] = Field(default_factory=dict)
    provenance: dict[str, ScopeType] = Field(default_factory=dict)

    def source_of(self, key: str) -> ScopeType | None:
        """Return the scope whose value is effective for ``key``."""
        for entry in self.entries:
            if entry.key == key:
                return entry.source.type
        return None
