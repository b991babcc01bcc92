"""
React Component Analyzer.

Main entry point for recovering the component model of a React codebase:
load the project, detect and extract components file by file, then build
the component usage graph.
"""

from __future__ import annotations

from pathlib import Path

from component_archaeologist.config import AnalyzerSettings, get_settings
from component_archaeologist.extraction.models import AnalysisResult, ComponentInfo
from component_archaeologist.extraction.typescript import SourceFile, load_project
from component_archaeologist.graph import build_graph
from component_archaeologist.logging import get_logger

from .components import detect_components, is_declaration_file, is_test_file
from .extractor import build_component_info

logger = get_logger(__name__)


class ReactComponentAnalyzer:
    """
    Static analyzer for React function components.

    Each call to ``analyze`` is a complete, independent run: the project is
    re-read and re-parsed from scratch and nothing is cached between runs.
    """

    def __init__(self, settings: AnalyzerSettings | None = None):
        """
        Initialize the analyzer.

        Args:
            settings: Optional settings. If not provided, the global settings are used.
        """
        self.settings = settings or get_settings()
        self.components: list[ComponentInfo] = []

    def analyze(self, project_root: str | Path) -> AnalysisResult:
        """
        Analyze the project rooted at ``project_root``.

        Args:
            project_root: Directory to analyze

        Returns:
            AnalysisResult with the flat component list, graph and diagnostics

        Raises:
            ProjectNotFoundError: If the root does not exist
            ProjectConfigError: If the project's tsconfig is malformed
            SourceReadError: If a source file cannot be read
        """
        self.reset()
        project = load_project(project_root, self.settings)

        for file_path in project.files:
            relative = file_path.relative_to(project.root).as_posix()
            if is_declaration_file(relative) or is_test_file(f"/{relative}"):
                logger.debug("file_skipped", file=relative)
                continue

            self.extract_components(project.parse(file_path))

        graph, diagnostics = build_graph(self.components)

        logger.info(
            "analysis_complete",
            root=str(project.root),
            files=len(project.files),
            components=len(self.components),
            graph_nodes=len(graph),
            diagnostics=len(diagnostics),
        )

        return AnalysisResult(
            root=str(project.root),
            components=list(self.components),
            graph=graph,
            diagnostics=diagnostics,
        )

    def extract_components(self, source: SourceFile) -> list[ComponentInfo]:
        """
        Detect and extract all components of one parsed file.

        Args:
            source: Parsed source file

        Returns:
            List of ComponentInfo objects, in declaration order
        """
        if source.has_syntax_errors:
            logger.debug("syntax_errors_recovered", file=source.relative_path)

        file_components = []
        for detected in detect_components(source):
            info = build_component_info(detected)
            logger.debug(
                "component_detected",
                component=info.name,
                file=info.file_path,
                loc=info.loc,
            )
            file_components.append(info)

        self.components.extend(file_components)
        return file_components

    def get_components(self) -> list[ComponentInfo]:
        """Get all extracted components."""
        return self.components

    def reset(self) -> None:
        """Reset the analyzer state."""
        self.components = []


def analyze_project(
    project_root: str | Path, settings: AnalyzerSettings | None = None
) -> AnalysisResult:
    """
    Analyze a project and return its components and component graph.

    Deterministic for identical file contents; reads files, writes nothing.
    """
    return ReactComponentAnalyzer(settings).analyze(project_root)
