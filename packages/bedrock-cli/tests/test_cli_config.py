# SPDX-License-Identifier: MIT
"""Tests for CLI configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from bedrock_cli.config import CLIConfig, ConfigError, load_config


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_without_pyproject(self, tmp_path: Path) -> None:
        """A directory without pyproject.toml uses defaults."""
        config = load_config(tmp_path)
        assert config.project_dir == tmp_path
        assert config.manifest_path == tmp_path / "manifest.json"
        assert config.strict_dependency_versions is False

    def test_reads_tool_bedrock(self, tmp_path: Path) -> None:
        """Values are read from [tool.bedrock]."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.bedrock]\nmanifest = "behavior_pack/manifest.json"\n'
            "strict_dependency_versions = true\n"
        )
        config = load_config(tmp_path)
        assert config.manifest_path == tmp_path / "behavior_pack" / "manifest.json"
        assert config.strict_dependency_versions is True

    def test_pyproject_without_tool_table(self, tmp_path: Path) -> None:
        """A pyproject.toml without [tool.bedrock] uses defaults."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "pack"\n')
        config = load_config(tmp_path)
        assert config.manifest == Path("manifest.json")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Invalid TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[tool.bedrock\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(tmp_path)


class TestCLIConfigFromDict:
    """Tests for CLIConfig.from_pyproject_dict."""

    def test_wrong_manifest_type(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            CLIConfig.from_pyproject_dict({"tool": {"bedrock": {"manifest": 1}}}, tmp_path)

    def test_wrong_strict_type(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            CLIConfig.from_pyproject_dict(
                {"tool": {"bedrock": {"strict_dependency_versions": "yes"}}}, tmp_path
            )
