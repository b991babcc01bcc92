"""
Component graph assembly.

Turns the flat list of extracted components into a name-keyed graph of
parent/child usage edges.

Known limitation: components are keyed by name only. When two components
share a name, the first one encountered owns the graph node and later ones
are dropped from the graph (they stay in the flat component list). Their
rendered children are still attached to the surviving node.
"""

from __future__ import annotations

from component_archaeologist.extraction.models import (
    ComponentGraph,
    ComponentInfo,
    Diagnostic,
    DiagnosticKind,
    GraphNode,
)
from component_archaeologist.logging import get_logger

logger = get_logger(__name__)


def build_graph(components: list[ComponentInfo]) -> tuple[ComponentGraph, list[Diagnostic]]:
    """
    Build the component usage graph.

    Args:
        components: Extracted components in analysis order

    Returns:
        Tuple of (graph, diagnostics). Diagnostics record duplicate names and
        dangling child references; they never change the graph.
    """
    graph: ComponentGraph = {}
    diagnostics: list[Diagnostic] = []

    # 1) create nodes, first occurrence wins
    for comp in components:
        if comp.name not in graph:
            graph[comp.name] = GraphNode(info=comp)
            continue

        kept = graph[comp.name].info
        logger.debug(
            "duplicate_component_name",
            component=comp.name,
            kept=kept.file_path,
            dropped=comp.file_path,
        )
        diagnostics.append(
            Diagnostic(
                kind=DiagnosticKind.DUPLICATE_NAME,
                component=comp.name,
                file_path=comp.file_path,
                detail=f"shadowed by {kept.file_path}",
            )
        )

    # 2) connect edges, routing duplicates to the surviving node of their name
    for comp in components:
        parent_node = graph[comp.name]
        dangling: list[str] = []

        for child_name in comp.child_usages:
            child_node = graph.get(child_name)
            if child_node is None:
                if child_name not in dangling:
                    dangling.append(child_name)
                continue

            parent_node.children.append(child_name)
            if child_name != comp.name and comp.name not in child_node.parents:
                child_node.parents.append(comp.name)

        for child_name in dangling:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.DANGLING_CHILD,
                    component=comp.name,
                    file_path=comp.file_path,
                    detail=f"renders unknown component {child_name}",
                )
            )

    return graph, diagnostics
