"""Configuration management for Component Archaeologist using pydantic-settings.

Settings can be supplied through environment variables prefixed with
``COMPO_`` or through a ``.env`` file in the working directory.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class AnalyzerSettings(BaseSettings):
    """Main configuration settings for the component analyzer."""

    # Project loading
    tsconfig_name: str = Field("tsconfig.json", description="Project configuration file name")
    default_include: list[str] = Field(
        default_factory=lambda: ["src"],
        description="Include patterns used when the project has no tsconfig",
    )
    ignored_dirs: list[str] = Field(
        default_factory=lambda: ["node_modules", "bower_components", "jspm_packages"],
        description="Dependency/vendor directory names that are never analyzed",
    )
    source_extensions: list[str] = Field(
        default_factory=lambda: [".ts", ".tsx", ".js", ".jsx"],
        description="File suffixes considered source files",
    )

    # Queries
    tree_max_depth: int = Field(2, ge=1, description="Depth cap for children tree traversal")
    suggestion_limit: int = Field(10, ge=1, description="Maximum name suggestions on a miss")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "WARNING", description="Log level for the analyzer"
    )
    structured_logs: bool = Field(False, description="Emit JSON log lines instead of console output")
    debug_mode: bool = Field(False, description="Enable debug logging")

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_prefix = "COMPO_"
        case_sensitive = False
        extra = "ignore"

    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug_mode else self.log_level


# Singleton instance
_settings: AnalyzerSettings | None = None


def get_settings() -> AnalyzerSettings:
    """Get the singleton settings instance.

    Returns:
        AnalyzerSettings instance
    """
    global _settings

    if _settings is None:
        _settings = AnalyzerSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
