"""
Read-only graph queries used by the CLI and other presentation layers.

Looking up an unknown name is an expected outcome, never an error: callers
get a LookupResult with ``found=False`` and a few similar names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from component_archaeologist.extraction.models import ComponentGraph, GraphNode

DEFAULT_MAX_DEPTH = 2
DEFAULT_SUGGESTION_LIMIT = 10


class TreeEntryStatus(Enum):
    """How the children walk treated a visited node."""

    EXPANDED = "expanded"  # Children were walked
    LEAF = "leaf"  # Nothing below it
    TRUNCATED = "truncated"  # Depth cap reached
    CYCLE = "cycle"  # Already visited in this walk
    MISSING = "missing"  # Name has no graph node


@dataclass
class TreeEntry:
    """One printed line of a children tree."""

    name: str
    depth: int
    status: TreeEntryStatus
    node: GraphNode | None = None


@dataclass
class LookupResult:
    """Outcome of looking up a component by name."""

    name: str
    node: GraphNode | None = None
    suggestions: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.node is not None


def get_parents(graph: ComponentGraph, name: str) -> list[str] | None:
    """
    Direct parents of a component.

    Returns:
        Parent names as stored (an empty list marks a root/entry candidate),
        or None when the name is not in the graph
    """
    node = graph.get(name)
    return list(node.parents) if node is not None else None


def suggest_names(
    graph: ComponentGraph, query: str, limit: int = DEFAULT_SUGGESTION_LIMIT
) -> list[str]:
    """Names containing ``query`` case-insensitively, in graph insertion order."""
    needle = query.lower()
    return [name for name in graph if needle in name.lower()][:limit]


def lookup_component(
    graph: ComponentGraph, name: str, limit: int = DEFAULT_SUGGESTION_LIMIT
) -> LookupResult:
    node = graph.get(name)
    if node is not None:
        return LookupResult(name=name, node=node)
    return LookupResult(name=name, suggestions=suggest_names(graph, name, limit))


def walk_children_tree(
    graph: ComponentGraph, name: str, max_depth: int = DEFAULT_MAX_DEPTH
) -> list[TreeEntry]:
    """
    Depth-first walk of the components rendered below ``name``.

    Direct children sit at depth 1. A single visited set, seeded with the
    queried name, is shared by every sibling subtree: once a name has been
    expanded anywhere in this walk, reaching it again reports a cycle
    instead of recursing. Nodes at ``max_depth`` are listed but not
    expanded.

    Args:
        graph: Component graph
        name: Component whose subtree is walked
        max_depth: Deepest level that is listed

    Returns:
        Tree entries in print order; empty when ``name`` is unknown or
        renders no known components
    """
    root = graph.get(name)
    if root is None:
        return []

    entries: list[TreeEntry] = []
    visited = {name}

    def _visit(child_name: str, depth: int) -> None:
        node = graph.get(child_name)
        if node is None:
            entries.append(TreeEntry(child_name, depth, TreeEntryStatus.MISSING))
            return

        if child_name in visited:
            entries.append(TreeEntry(child_name, depth, TreeEntryStatus.CYCLE, node))
            return

        if depth >= max_depth:
            status = TreeEntryStatus.TRUNCATED if node.children else TreeEntryStatus.LEAF
            entries.append(TreeEntry(child_name, depth, status, node))
            return

        visited.add(child_name)
        status = TreeEntryStatus.EXPANDED if node.children else TreeEntryStatus.LEAF
        entries.append(TreeEntry(child_name, depth, status, node))
        for grandchild in node.children:
            _visit(grandchild, depth + 1)

    for child in root.children:
        _visit(child, 1)

    return entries


def format_tree_lines(entries: list[TreeEntry]) -> list[str]:
    """Render tree entries as indented text lines."""
    lines: list[str] = []
    for entry in entries:
        indent = "  " * entry.depth
        if entry.node is None:
            lines.append(f"{indent}- {entry.name} (not found in graph)")
            continue

        info = entry.node.info
        lines.append(f"{indent}- {entry.name} (LOC: {info.loc}, role: {info.role.value})")
        if entry.status is TreeEntryStatus.CYCLE:
            lines.append(f"{indent}  (cycle detected, stopping here)")
    return lines
