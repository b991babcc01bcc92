"""
Project loading.

Locates the project's tsconfig (or falls back to a default configuration
that allows mixed JS/TS sources under ``src``) and collects the source
files an analysis run should parse.
"""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from component_archaeologist.config import AnalyzerSettings, get_settings
from component_archaeologist.exceptions import ProjectConfigError, ProjectNotFoundError
from component_archaeologist.logging import get_logger

from .parser import SourceFile, TypeScriptParser

logger = get_logger(__name__)

_JS_SUFFIXES = {".js", ".jsx"}
_TRAILING_COMMA = re.compile(r",(\s*[}\]])")


@dataclass
class ProjectConfig:
    """The subset of tsconfig.json that decides which files are analyzed."""

    files: list[str] = field(default_factory=list)
    include: list[str] = field(default_factory=lambda: ["**/*"])
    exclude: list[str] = field(default_factory=list)
    allow_js: bool = False
    out_dir: str | None = None


@dataclass
class LoadedProject:
    """A project root, its configuration and the source files to analyze."""

    root: Path
    config: ProjectConfig
    config_path: Path | None
    files: list[Path]
    parser: TypeScriptParser = field(default_factory=TypeScriptParser, repr=False)

    def parse(self, path: Path) -> SourceFile:
        return self.parser.parse_file(path, self.root)


def strip_jsonc(text: str) -> str:
    """
    Remove comments and trailing commas from JSON-with-comments text.

    String literals are left untouched, so values like ``"@/*"`` survive.
    """
    out: list[str] = []
    i = 0
    length = len(text)
    in_string = False

    while i < length:
        ch = text[i]

        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < length:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif text.startswith("//", i):
            newline = text.find("\n", i)
            i = length if newline == -1 else newline
        elif text.startswith("/*", i):
            close = text.find("*/", i + 2)
            i = length if close == -1 else close + 2
        else:
            out.append(ch)
            i += 1

    return _TRAILING_COMMA.sub(r"\1", "".join(out))


def read_project_config(config_path: Path) -> ProjectConfig:
    """
    Read a tsconfig.json file.

    Args:
        config_path: Path to the configuration file

    Returns:
        ProjectConfig with the file-selection settings

    Raises:
        ProjectConfigError: If the file cannot be read or is not valid JSON(C)
    """
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProjectConfigError(config_path, str(e)) from e

    try:
        data: Any = json.loads(strip_jsonc(raw)) if raw.strip() else {}
    except json.JSONDecodeError as e:
        raise ProjectConfigError(config_path, f"line {e.lineno}: {e.msg}") from e

    if not isinstance(data, dict):
        raise ProjectConfigError(config_path, "top-level value must be an object")

    compiler_options = data.get("compilerOptions") or {}
    if not isinstance(compiler_options, dict):
        raise ProjectConfigError(config_path, "'compilerOptions' must be an object")

    def _string_list(key: str, default: list[str]) -> list[str]:
        value = data.get(key, default)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ProjectConfigError(config_path, f"'{key}' must be a list of strings")
        return list(value)

    files = _string_list("files", [])
    # tsconfig semantics: an explicit "files" list without "include" includes nothing else
    default_include: list[str] = [] if files else ["**/*"]

    allow_js = compiler_options.get("allowJs", False)
    if not isinstance(allow_js, bool):
        raise ProjectConfigError(config_path, "'compilerOptions.allowJs' must be a boolean")

    out_dir = compiler_options.get("outDir")
    if out_dir is not None and not isinstance(out_dir, str):
        raise ProjectConfigError(config_path, "'compilerOptions.outDir' must be a string")

    return ProjectConfig(
        files=files,
        include=_string_list("include", default_include),
        exclude=_string_list("exclude", []),
        allow_js=allow_js,
        out_dir=out_dir,
    )


def _pattern_to_regex(pattern: str) -> re.Pattern[str]:
    """Translate a tsconfig include/exclude pattern into a regex over POSIX paths."""
    pattern = pattern.replace("\\", "/").strip()
    while pattern.startswith("./"):
        pattern = pattern[2:]
    pattern = pattern.rstrip("/")
    if pattern in ("", "."):
        pattern = "**"

    last_segment = pattern.rsplit("/", 1)[-1]
    if last_segment == "**":
        pattern = f"{pattern}/*"
    elif not any(ch in last_segment for ch in "*?."):
        # A bare directory means everything below it
        pattern = f"{pattern}/**/*"

    regex = ""
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            regex += "(?:.*/)?"
            i += 3
        elif pattern.startswith("**", i):
            regex += ".*"
            i += 2
        elif pattern[i] == "*":
            regex += "[^/]*"
            i += 1
        elif pattern[i] == "?":
            regex += "[^/]"
            i += 1
        else:
            regex += re.escape(pattern[i])
            i += 1

    return re.compile(f"^{regex}$")


def _matches_any(relative: str, patterns: list[re.Pattern[str]]) -> bool:
    return any(p.match(relative) for p in patterns)


def collect_source_files(
    root: Path, config: ProjectConfig, settings: AnalyzerSettings
) -> list[Path]:
    """
    Collect the source files selected by a project configuration.

    Dependency/vendor directories are never entered. The result is sorted so
    that repeated runs visit files in the same order.
    """
    suffixes = {s.lower() for s in settings.source_extensions}
    if not config.allow_js:
        suffixes -= _JS_SUFFIXES

    ignored = set(settings.ignored_dirs)
    include = [_pattern_to_regex(p) for p in config.include]
    exclude_patterns = list(config.exclude)
    if config.out_dir:
        exclude_patterns.append(config.out_dir)
    exclude = [_pattern_to_regex(p) for p in exclude_patterns]

    selected: set[Path] = set()

    for explicit in config.files:
        path = root / explicit
        if path.suffix.lower() not in suffixes:
            continue
        if path.is_file() and not any(part in ignored for part in Path(explicit).parts):
            selected.add(path)

    if include:
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in ignored)
            for filename in filenames:
                path = Path(dirpath) / filename
                if path.suffix.lower() not in suffixes:
                    continue
                relative = path.relative_to(root).as_posix()
                if _matches_any(relative, include) and not _matches_any(relative, exclude):
                    selected.add(path)

    return sorted(selected)


def load_project(
    project_root: str | Path, settings: AnalyzerSettings | None = None
) -> LoadedProject:
    """
    Load the project rooted at ``project_root``.

    Args:
        project_root: Directory to analyze
        settings: Optional settings; defaults to the global settings

    Returns:
        LoadedProject with the configuration and sorted source file list

    Raises:
        ProjectNotFoundError: If the root is not an existing directory
        ProjectConfigError: If the tsconfig is malformed
    """
    settings = settings or get_settings()
    root = Path(project_root).resolve()
    if not root.is_dir():
        raise ProjectNotFoundError(root)

    config_path: Path | None = root / settings.tsconfig_name
    if config_path.is_file():
        config = read_project_config(config_path)
    else:
        # Default: non-strict mixed JS/TS sources under src/
        config_path = None
        config = ProjectConfig(include=list(settings.default_include), allow_js=True)

    files = collect_source_files(root, config, settings)
    logger.debug(
        "project_loaded",
        root=str(root),
        config=str(config_path) if config_path else "default",
        files=len(files),
    )
    return LoadedProject(root=root, config=config, config_path=config_path, files=files)
