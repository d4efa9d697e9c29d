# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_MANIFEST_NAME = "manifest.json"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from the [tool.bedrock] table of pyproject.toml.

    Attributes:
        project_dir: Directory the configuration applies to
        manifest: Path to manifest.json, relative to project_dir
        strict_dependency_versions: Reject malformed dependency versions
            instead of falling back to the default
    """

    project_dir: Path
    manifest: Path = Path(DEFAULT_MANIFEST_NAME)
    strict_dependency_versions: bool = False

    @property
    def manifest_path(self) -> Path:
        """Return the manifest path resolved against the project directory."""
        return self.project_dir / self.manifest

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any], project_dir: Path) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a [tool.bedrock] value has the wrong type
        """
        tool_bedrock = pyproject.get("tool", {}).get("bedrock", {})

        manifest = tool_bedrock.get("manifest", DEFAULT_MANIFEST_NAME)
        if not isinstance(manifest, str) or not manifest:
            raise ConfigError("[tool.bedrock] manifest must be a non-empty string")

        strict = tool_bedrock.get("strict_dependency_versions", False)
        if not isinstance(strict, bool):
            raise ConfigError("[tool.bedrock] strict_dependency_versions must be a boolean")

        return cls(
            project_dir=project_dir,
            manifest=Path(manifest),
            strict_dependency_versions=strict,
        )


def load_config(project_dir: str | Path | None = None) -> CLIConfig:
    """Load CLI configuration for a project directory.

    A missing pyproject.toml is not an error; defaults are used instead.

    Args:
        project_dir: Project directory (defaults to the current directory)

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If pyproject.toml exists but cannot be parsed
    """
    project_path = Path(project_dir) if project_dir is not None else Path.cwd()
    pyproject_path = project_path / "pyproject.toml"

    if not pyproject_path.exists():
        return CLIConfig(project_dir=project_path)

    try:
        with open(pyproject_path, "rb") as f:
            pyproject = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax: {e}") from e

    return CLIConfig.from_pyproject_dict(pyproject, project_path)
