# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

PACK_UUID = "0b6f2a1e-3c4d-4e5f-8a9b-1c2d3e4f5a6b"
SCRIPT_UUID = "2b3c4d5e-6f7a-4b9c-8d1e-2f3a4b5c6d7e"


def make_document(**overrides: Any) -> dict[str, Any]:
    """Build a valid manifest document with optional section overrides."""
    document: dict[str, Any] = {
        "format_version": 2,
        "header": {
            "name": "Test Pack",
            "description": "A pack for CLI tests",
            "min_engine_version": [1, 20, 0],
            "uuid": PACK_UUID,
            "version": [1, 0, 0],
        },
        "modules": [
            {
                "type": "script",
                "uuid": SCRIPT_UUID,
                "version": [1, 0, 0],
                "language": "javascript",
                "entry": "scripts/main.js",
            }
        ],
        "dependencies": [{"module_name": "@minecraft/server", "version": "1.8.0-beta"}],
        "capabilities": ["raytraced", "mystery"],
        "subpacks": [{"folder_name": "low", "name": "Low", "memory_tier": 0}],
    }
    document.update(overrides)
    return document


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def pack_dir(tmp_path: Path) -> Path:
    """Create a pack directory containing a valid manifest.json."""
    directory = tmp_path / "test_pack"
    directory.mkdir()
    (directory / "manifest.json").write_text(json.dumps(make_document()), encoding="utf-8")
    return directory


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Return a helper that writes a manifest document and returns its path."""

    def _write(document: Any, name: str = "manifest.json") -> Path:
        path = tmp_path / name
        text = document if isinstance(document, str) else json.dumps(document)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def document_factory():
    """Return the make_document helper."""
    return make_document
