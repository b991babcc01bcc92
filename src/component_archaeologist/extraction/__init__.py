"""
Static extraction of React component structure.

Re-exports the data model shared by the parser, detector and graph.
"""

from .models import (
    AnalysisResult,
    ComponentGraph,
    ComponentInfo,
    ComponentRole,
    Diagnostic,
    DiagnosticKind,
    GraphNode,
    LineRange,
    LineRanges,
)

__all__ = [
    "AnalysisResult",
    "ComponentGraph",
    "ComponentInfo",
    "ComponentRole",
    "Diagnostic",
    "DiagnosticKind",
    "GraphNode",
    "LineRange",
    "LineRanges",
]
