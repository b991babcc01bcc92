"""
Tests for analyzer settings.
"""

import pytest
from pydantic import ValidationError

from component_archaeologist.config import AnalyzerSettings, get_settings, reset_settings


class TestAnalyzerSettings:
    """Tests for defaults, environment overrides and validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = AnalyzerSettings()

        assert settings.tsconfig_name == "tsconfig.json"
        assert settings.default_include == ["src"]
        assert "node_modules" in settings.ignored_dirs
        assert settings.tree_max_depth == 2
        assert settings.suggestion_limit == 10
        assert settings.effective_log_level == "WARNING"

    def test_environment_override(self, monkeypatch) -> None:
        """Test COMPO_ prefixed variables are read."""
        monkeypatch.setenv("COMPO_TREE_MAX_DEPTH", "4")
        monkeypatch.setenv("COMPO_LOG_LEVEL", "INFO")

        settings = AnalyzerSettings()

        assert settings.tree_max_depth == 4
        assert settings.log_level == "INFO"

    def test_dotenv_file(self, tmp_path) -> None:
        """Test a .env file in the working directory is read."""
        (tmp_path / ".env").write_text("COMPO_SUGGESTION_LIMIT=3\n")

        assert AnalyzerSettings().suggestion_limit == 3

    def test_debug_mode_overrides_level(self) -> None:
        """Test debug mode forces DEBUG."""
        settings = AnalyzerSettings(debug_mode=True, log_level="ERROR")

        assert settings.effective_log_level == "DEBUG"

    def test_depth_must_be_positive(self) -> None:
        """Test validation of the depth cap."""
        with pytest.raises(ValidationError):
            AnalyzerSettings(tree_max_depth=0)

    def test_invalid_log_level(self) -> None:
        """Test validation of the log level."""
        with pytest.raises(ValidationError):
            AnalyzerSettings(log_level="LOUD")


class TestSettingsSingleton:
    """Tests for the shared settings instance."""

    def test_same_instance(self) -> None:
        """Test repeated calls share one instance."""
        assert get_settings() is get_settings()

    def test_reset(self, monkeypatch) -> None:
        """Test reset picks up new environment values."""
        first = get_settings()
        monkeypatch.setenv("COMPO_SUGGESTION_LIMIT", "5")
        reset_settings()

        second = get_settings()

        assert second is not first
        assert second.suggestion_limit == 5
