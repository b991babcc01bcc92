"""Component Archaeologist: recover the component structure of React codebases.

Detects function components by shape, extracts their props, hooks, rendered
children and structure, and assembles a parent/child usage graph.

Usage:
    from component_archaeologist import analyze_project

    result = analyze_project("path/to/app")
    result.graph["App"].children
"""

__version__ = "0.1.0"

from .base_exceptions import ArchaeologistException
from .exceptions import (
    ConfigurationException,
    ProjectConfigError,
    ProjectLoadException,
    ProjectNotFoundError,
    SourceReadError,
)
from .extraction.models import (
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
from .extraction.react import ReactComponentAnalyzer, analyze_project

__all__ = [
    "__version__",
    "analyze_project",
    "ReactComponentAnalyzer",
    "AnalysisResult",
    "ComponentGraph",
    "ComponentInfo",
    "ComponentRole",
    "Diagnostic",
    "DiagnosticKind",
    "GraphNode",
    "LineRange",
    "LineRanges",
    "ArchaeologistException",
    "ConfigurationException",
    "ProjectConfigError",
    "ProjectLoadException",
    "ProjectNotFoundError",
    "SourceReadError",
]
