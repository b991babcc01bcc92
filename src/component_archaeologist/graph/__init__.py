"""Component usage graph: assembly and read-only queries."""

from .builder import build_graph
from .queries import (
    LookupResult,
    TreeEntry,
    TreeEntryStatus,
    format_tree_lines,
    get_parents,
    lookup_component,
    suggest_names,
    walk_children_tree,
)

__all__ = [
    "build_graph",
    "get_parents",
    "lookup_component",
    "suggest_names",
    "walk_children_tree",
    "format_tree_lines",
    "LookupResult",
    "TreeEntry",
    "TreeEntryStatus",
]
