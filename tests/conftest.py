"""Pytest configuration and fixtures."""

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from component_archaeologist.config import AnalyzerSettings, reset_settings
from component_archaeologist.extraction.typescript import SourceFile, TypeScriptParser


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep settings independent of the developer's environment and .env files."""
    for var in ("COMPO_TREE_MAX_DEPTH", "COMPO_SUGGESTION_LIMIT", "COMPO_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> AnalyzerSettings:
    return AnalyzerSettings()


@pytest.fixture
def parser() -> TypeScriptParser:
    return TypeScriptParser()


@pytest.fixture
def parse_source(parser) -> Callable[..., SourceFile]:
    """Parse dedented source text as if it were a file at ``path``."""

    def _parse(code: str, path: str = "src/components/Example.tsx") -> SourceFile:
        return parser.parse_source(textwrap.dedent(code).lstrip("\n"), Path(path), path)

    return _parse


@pytest.fixture
def make_project(tmp_path) -> Callable[[dict[str, str]], Path]:
    """Write a project tree from a {relative_path: source} mapping."""

    def _make(files: dict[str, str], name: str = "app") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for relative, code in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(code).lstrip("\n"), encoding="utf-8")
        return root

    return _make
