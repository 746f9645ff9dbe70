"""Scope merge resolution."""

from capscope.core.merge.extract import (
    extract_all_entries,
    extract_config_entries,
    extract_mcp_servers,
    extract_sub_agents,
)
from capscope.core.merge.resolver import ScopeMergeResolver, merge_configs
from capscope.core.merge.sources import (
    find_conflicting_keys,
    get_source_hierarchy,
    track_config_source,
)

__all__ = [
    "ScopeMergeResolver",
    "merge_configs",
    "extract_all_entries",
    "extract_config_entries",
    "extract_mcp_servers",
    "extract_sub_agents",
    "track_config_source",
    "get_source_hierarchy",
    "find_conflicting_keys",
]
