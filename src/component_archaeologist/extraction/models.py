"""
Component analysis models.

These models represent the results of a static analysis run - the
components recognized in a source tree and the parent/child usage graph
assembled from them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ComponentRole(Enum):
    """Coarse, path-derived classification of a component."""

    PAGE = "page"  # Lives under /pages/
    FEATURE = "feature"  # Lives under /features/
    SHARED = "shared"  # Lives under /components/, /shared/ or /ui/
    UNKNOWN = "unknown"


class DiagnosticKind(Enum):
    """Graph inconsistencies resolved silently during graph assembly."""

    DUPLICATE_NAME = "duplicate_name"  # Later component dropped from the graph
    DANGLING_CHILD = "dangling_child"  # Rendered tag has no component node


@dataclass
class LineRange:
    """A 1-based, inclusive span of source lines."""

    start: int
    end: int

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass
class LineRanges:
    """Structural decomposition of a component body."""

    state: LineRange | None = None  # Merged span of useState/useReducer statements
    effects: list[LineRange] = field(default_factory=list)  # One per effect call
    handlers: list[LineRange] = field(default_factory=list)  # One per handler statement
    jsx: LineRange | None = None  # The returned markup expression

    def to_dict(self) -> dict[str, Any]:
        return {
            "state": self.state.to_dict() if self.state else None,
            "effects": [r.to_dict() for r in self.effects],
            "handlers": [r.to_dict() for r in self.handlers],
            "jsx": self.jsx.to_dict() if self.jsx else None,
        }


@dataclass
class ComponentInfo:
    """A UI component recognized in source code."""

    name: str
    file_path: str  # POSIX path relative to the analysis root
    role: ComponentRole = ComponentRole.UNKNOWN

    props: list[str] = field(default_factory=list)  # Parameter names, declaration order
    hooks: list[str] = field(default_factory=list)  # Unique, first-appearance order
    children: list[str] = field(default_factory=list)  # Unique capitalized JSX tags

    loc: int = 1
    # Not computed: None means "unknown", never a real cyclomatic score
    complexity: int | None = None

    line_ranges: LineRanges = field(default_factory=LineRanges)

    # Every capitalized JSX tag usage in source order, duplicates kept
    child_usages: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "name": self.name,
            "filePath": self.file_path,
            "role": self.role.value,
            "props": list(self.props),
            "hooks": list(self.hooks),
            "children": list(self.children),
            "loc": self.loc,
            "complexity": self.complexity,
            "lineRanges": self.line_ranges.to_dict(),
        }


@dataclass
class GraphNode:
    """A component plus its resolved edges within the project graph."""

    info: ComponentInfo
    parents: list[str] = field(default_factory=list)  # Deduplicated, no self-loops
    children: list[str] = field(default_factory=list)  # One entry per JSX usage

    def to_dict(self) -> dict[str, Any]:
        return {
            "info": self.info.to_dict(),
            "parents": list(self.parents),
            "children": list(self.children),
        }


# Keys are component names; insertion order follows first appearance
ComponentGraph = dict[str, GraphNode]


@dataclass
class Diagnostic:
    """A silently resolved graph inconsistency, reported for callers."""

    kind: DiagnosticKind
    component: str
    file_path: str
    detail: str

    def to_dict(self) -> dict[str, str]:
        return {
            "kind": self.kind.value,
            "component": self.component,
            "filePath": self.file_path,
            "detail": self.detail,
        }


@dataclass
class AnalysisResult:
    """Complete result of one analysis run."""

    root: str
    components: list[ComponentInfo] = field(default_factory=list)
    graph: ComponentGraph = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def find_components(self, name: str) -> list[ComponentInfo]:
        """Return every component with the given name, duplicates included."""
        return [c for c in self.components if c.name == name]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary.

        The output carries no timestamps, so repeated runs over identical
        files serialize identically.
        """
        return {
            "root": self.root,
            "components": [c.to_dict() for c in self.components],
            "graph": {name: node.to_dict() for name, node in self.graph.items()},
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
