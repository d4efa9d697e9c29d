# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for manifest tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

HEADER_UUID = "0b6f2a1e-3c4d-4e5f-8a9b-1c2d3e4f5a6b"
DATA_UUID = "1a2b3c4d-5e6f-4a8b-9c0d-1e2f3a4b5c6d"
SCRIPT_UUID = "2b3c4d5e-6f7a-4b9c-8d1e-2f3a4b5c6d7e"
RESOURCE_PACK_UUID = "3c4d5e6f-7a8b-4c0d-9e2f-3a4b5c6d7e8f"

BASE_DOCUMENT: dict[str, Any] = {
    "format_version": 2,
    "header": {
        "name": "Test Pack",
        "description": "A pack for tests",
        "min_engine_version": [1, 20, 0],
        "uuid": HEADER_UUID,
        "version": [1, 0, 0],
    },
    "modules": [],
    "dependencies": [],
    "capabilities": [],
    "subpacks": [],
}


@pytest.fixture
def document() -> dict[str, Any]:
    """Return a minimal valid manifest document that tests may modify."""
    return copy.deepcopy(BASE_DOCUMENT)


@pytest.fixture
def full_document() -> dict[str, Any]:
    """Return a manifest document using every section."""
    doc = copy.deepcopy(BASE_DOCUMENT)
    doc["header"]["min_engine_version"] = "1.20.50"
    doc["modules"] = [
        {"type": "data", "uuid": DATA_UUID, "version": [1, 0, 0], "description": "Behavior"},
        {
            "type": "script",
            "uuid": SCRIPT_UUID,
            "version": [1, 0, 0],
            "language": "javascript",
            "entry": "scripts/main.js",
        },
    ]
    doc["dependencies"] = [
        {"module_name": "@minecraft/server", "version": "1.8.0-beta"},
        {"module_name": "@minecraft/server-ui", "version": "1.1.0"},
        {"uuid": RESOURCE_PACK_UUID, "version": [1, 0, 0]},
    ]
    doc["capabilities"] = ["script_eval", "pbr"]
    doc["subpacks"] = [
        {"folder_name": "low", "name": "Low Detail", "memory_tier": 0},
        {"folder_name": "high", "name": "High Detail", "memory_tier": 2},
    ]
    return doc
