"""Pydantic-based configuration model and YAML loader for StyleIQ."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from styleiq.rules.base_rule import ViolationSeverity
from styleiq.rules.indentation_rule import DEFAULT_INDENT_SIZE
from styleiq.rules.line_length_rule import DEFAULT_MAX_LINE_LENGTH
from styleiq.rules.naming_rules import DEFAULT_NAMING_EXEMPTIONS


__all__ = ["RulesConfig", "StyleIQSettings", "ConfigError", "load_settings"]

_CONFIG_FILE_NAMES: list[str] = [
    "styleiq.yaml",
    "styleiq.yml",
    ".styleiq.yaml",
    ".styleiq.yml",
]

_DEFAULT_EXCLUDE: list[str] = [
    ".git", ".hg", ".svn", ".mypy_cache", ".pytest_cache", ".ruff_cache",
    ".tox", ".venv", "venv", "__pycache__", "node_modules", "dist", "build",
]


class ConfigError(Exception):
    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Invalid configuration in {source}: {detail}")


class RulesConfig(BaseModel):
    """Per-rule toggles and behaviour settings."""

    max_line_length: int = Field(
        default=DEFAULT_MAX_LINE_LENGTH, ge=1,
        description="Maximum number of characters on a physical line.",
    )
    indent_size: int = Field(
        default=DEFAULT_INDENT_SIZE, ge=1,
        description="Number of spaces per indentation level.",
    )
    require_docstrings: bool = Field(
        default=True,
        description="Require docstrings on public modules, classes and functions.",
    )
    naming_exemptions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NAMING_EXEMPTIONS),
        description="Function names (fnmatch patterns) exempt from the snake_case check.",
    )
    disabled: list[str] = Field(
        default_factory=list,
        description="Rule ids to skip entirely.",
    )
    severity: dict[str, ViolationSeverity] = Field(
        default_factory=dict,
        description="Per-rule severity overrides, e.g. {'line-too-long': 'ERROR'}.",
    )


class StyleIQSettings(BaseModel):
    """Top-level StyleIQ configuration."""

    extensions: list[str] = Field(
        default_factory=lambda: [".py", ".pyi"],
        description="File suffixes collected when a directory is linted.",
    )
    exclude: list[str] = Field(
        default_factory=lambda: list(_DEFAULT_EXCLUDE),
        description="Directory names skipped during discovery.",
    )
    jobs: int = Field(
        default=1, ge=1,
        description="Number of files evaluated concurrently.",
    )
    rules: RulesConfig = Field(
        default_factory=RulesConfig,
        description="Per-rule configuration.",
    )


def _find_config_file(search_dir: Path) -> Path | None:
    """Walk up from *search_dir* looking for a config file."""
    current = search_dir.resolve()
    while True:
        for name in _CONFIG_FILE_NAMES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(str(path), str(exc)) from exc
    if not isinstance(raw, dict):
        raise ConfigError(str(path), "top-level YAML value must be a mapping")
    return raw


def load_settings(
    config_path: Path | None = None,
    search_dir: Path | None = None,
) -> StyleIQSettings:
    """Load settings from a YAML file, falling back to defaults."""
    raw: dict[str, Any] = {}
    source = "<defaults>"

    if config_path is not None:
        resolved = Path(config_path).resolve()
        if not resolved.is_file():
            raise ConfigError(str(config_path), "file does not exist")
        raw, source = _read_yaml(resolved), str(resolved)
    else:
        found = _find_config_file(search_dir or Path.cwd())
        if found is not None:
            raw, source = _read_yaml(found), str(found)

    try:
        return StyleIQSettings(**raw)
    except ValidationError as exc:
        raise ConfigError(source, str(exc)) from exc
