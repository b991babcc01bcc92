"""Configuration and project loading exceptions.

Only these failures propagate out of an analysis run. Everything the
detector or extractor cannot recognize degrades to empty fields instead.
"""

from pathlib import Path

from .base_exceptions import ArchaeologistException


class ConfigurationException(ArchaeologistException):
    """Base exception for configuration errors."""

    pass


class ProjectConfigError(ConfigurationException):
    """Raised when the project's tsconfig cannot be read or parsed."""

    def __init__(self, config_path: Path, reason: str, **kwargs) -> None:
        """Initialize with config details."""
        super().__init__(
            f"Failed to read {config_path.name}: {reason}",
            error_code="INVALID_PROJECT_CONFIG",
            context={"config_path": str(config_path), "reason": reason, **kwargs},
        )


class ProjectLoadException(ArchaeologistException):
    """Base exception for errors while collecting or parsing source files."""

    pass


class ProjectNotFoundError(ProjectLoadException):
    """Raised when the analysis root does not exist or is not a directory."""

    def __init__(self, project_root: Path) -> None:
        """Initialize with the missing root."""
        super().__init__(
            f"Project root not found: {project_root}",
            error_code="PROJECT_NOT_FOUND",
            context={"project_root": str(project_root)},
        )


class SourceReadError(ProjectLoadException):
    """Raised when a source file cannot be read from disk."""

    def __init__(self, file_path: Path, reason: str) -> None:
        """Initialize with file details."""
        super().__init__(
            f"Cannot read source file {file_path}: {reason}",
            error_code="SOURCE_READ_ERROR",
            context={"file_path": str(file_path), "reason": reason},
        )
