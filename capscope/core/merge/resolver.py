"""Scope merge resolver.

Combines per-scope configuration maps into one prioritized entry list.
Overrides are whole-entry and the highest-priority scope wins; nested
capability containers are flattened first so servers and agents compete
individually rather than as one root object.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from capscope.core.merge.extract import extract_all_entries
from capscope.models.config import (
    SCOPE_PRIORITY,
    ConfigEntry,
    MergeResult,
    ScopeLayer,
    ScopeType,
)
from capscope.utils.timing import DEFAULT_THRESHOLD_MS, advisory_timer

logger = logging.getLogger(__name__)


class ScopeMergeResolver:
    """Resolve scoped configuration into effective entries."""

    def __init__(self, advisory_ms: float | None = DEFAULT_THRESHOLD_MS) -> None:
        """Initialize the resolver.

        Args:
            advisory_ms: Duration above which a resolve is logged as slow
        """
        self.advisory_ms = advisory_ms

    def resolve(self, layers: Iterable[ScopeLayer]) -> MergeResult:
        """Resolve layers in ascending priority order.

        Entries of a lower layer whose key no higher layer defines are
        emitted with ``inherited=True``. Entries of the top layer carry
        ``overridden`` set to whether any lower layer defined the key.
        Lower-layer entries that lose are returned in ``shadowed``.

        Args:
            layers: One layer per scope, in any order

        Returns:
            MergeResult with effective entries, shadowed entries, resolved
            values, and per-key origin scope
        """
        ordered = sorted(layers, key=lambda layer: SCOPE_PRIORITY[layer.scope])
        extracted = [
            extract_all_entries(layer.config, layer.scope, layer.path) for layer in ordered
        ]
        key_sets = [{entry.key for entry in entries} for entries in extracted]
        top = len(extracted) - 1

        entries: list[ConfigEntry] = []
        shadowed: list[ConfigEntry] = []
        provenance: dict[str, ScopeType] = {}

        with advisory_timer("scope merge", self.advisory_ms, items=sum(map(len, key_sets))):
            for index, layer_entries in enumerate(extracted):
                lower_keys: set[str] = set().union(*key_sets[:index])
                higher_keys: set[str] = set().union(*key_sets[index + 1 :])

                for entry in layer_entries:
                    provenance.setdefault(entry.key, entry.source.type)
                    overrides = entry.key in lower_keys

                    if index == top:
                        entries.append(entry.model_copy(update={"overridden": overrides}))
                    elif entry.key in higher_keys:
                        shadowed.append(entry.model_copy(update={"inherited": False}))
                    else:
                        update: dict[str, Any] = {"inherited": True}
                        if overrides:
                            update["overridden"] = True
                        entries.append(entry.model_copy(update=update))

        logger.debug(
            "Resolved %d layers into %d entries (%d shadowed)",
            len(ordered),
            len(entries),
            len(shadowed),
        )
        return MergeResult(
            entries=entries,
            shadowed=shadowed,
            resolved={entry.key: entry.value for entry in entries},
            provenance=provenance,
        )

    def merge(
        self,
        user_config: Any,
        project_config: Any,
        local_config: Any | None = None,
    ) -> list[ConfigEntry]:
        """Merge user and project (and optionally local) configs.

        Returns:
            Effective entries, one per key
        """
        layers = [
            ScopeLayer(scope=ScopeType.USER, config=user_config),
            ScopeLayer(scope=ScopeType.PROJECT, config=project_config),
        ]
        if local_config is not None:
            layers.append(ScopeLayer(scope=ScopeType.LOCAL, config=local_config))
        return self.resolve(layers).entries


def merge_configs(
    user_config: Any,
    project_config: Any,
    local_config: Any | None = None,
) -> list[ConfigEntry]:
    """Merge scope configs; the higher scope overrides the same keys."""
    return ScopeMergeResolver().merge(user_config, project_config, local_config)
