# SPDX-License-Identifier: MIT
"""JSON Schema definition for Bedrock add-on manifests (manifest.json).

This module describes the document shape accepted by the normalizer. It only
checks structure and primitive types; identifiers, versions and symbolic
names are interpreted later by the normalizer.
"""

from __future__ import annotations

import copy

# Integer-array version encoding, e.g. [1, 20, 0]
VERSION_ARRAY_SCHEMA: dict = {
    "type": "array",
    "description": "Version as [major, minor, patch]",
    "items": {"type": "integer"},
}

# Header versions accept either encoding
VERSION_SCHEMA: dict = {
    "anyOf": [
        VERSION_ARRAY_SCHEMA,
        {"type": "string", "description": "Version as MAJOR.MINOR.PATCH[-beta]"},
    ],
}

HEADER_SCHEMA: dict = {
    "type": "object",
    "required": ["name", "description", "min_engine_version", "uuid", "version"],
    "properties": {
        "name": {"type": "string", "description": "Display name of the pack"},
        "description": {"type": "string", "description": "Pack description"},
        "min_engine_version": VERSION_SCHEMA,
        "uuid": {"type": "string", "description": "Pack identity"},
        "version": VERSION_SCHEMA,
    },
    "additionalProperties": True,
}

MODULE_SCHEMA: dict = {
    "type": "object",
    "required": ["type", "uuid", "version"],
    "properties": {
        "type": {"type": "string", "description": "Module kind (script, data, resources, ...)"},
        "uuid": {"type": "string", "description": "Module identity"},
        "version": VERSION_ARRAY_SCHEMA,
        "language": {"type": "string"},
        "entry": {"type": "string", "description": "Script entry point"},
        "description": {"type": "string"},
    },
    "additionalProperties": True,
}

# Dependency versions are left unconstrained; the normalizer falls back to
# a default version when neither encoding is present.
DEPENDENCY_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "uuid": {"type": "string", "description": "Identity of a required pack"},
        "module_name": {"type": "string", "description": "Name of a required script API"},
        "version": {"description": "Required version in either encoding"},
    },
    "additionalProperties": True,
}

SUBPACK_SCHEMA: dict = {
    "type": "object",
    "required": ["folder_name", "name", "memory_tier"],
    "properties": {
        "folder_name": {"type": "string"},
        "name": {"type": "string"},
        "memory_tier": {"type": "integer"},
    },
    "additionalProperties": True,
}

# JSON Schema for manifest.json
MANIFEST_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Bedrock Add-on Manifest",
    "description": "Pack manifest for Bedrock add-ons (manifest.json)",
    "type": "object",
    "required": [
        "format_version",
        "header",
        "modules",
        "dependencies",
        "capabilities",
        "subpacks",
    ],
    "properties": {
        "format_version": {
            "type": "integer",
            "description": "Manifest format version (not interpreted)",
        },
        "header": HEADER_SCHEMA,
        "modules": {"type": "array", "items": MODULE_SCHEMA},
        "dependencies": {"type": "array", "items": DEPENDENCY_SCHEMA},
        "capabilities": {"type": "array", "items": {"type": "string"}},
        "subpacks": {"type": "array", "items": SUBPACK_SCHEMA},
    },
    "additionalProperties": True,  # Allow unknown fields for forward compatibility
}


def get_manifest_schema() -> dict:
    """Return a copy of the manifest JSON schema.

    Returns:
        A dictionary containing the JSON Schema for manifest.json
    """
    return copy.deepcopy(MANIFEST_SCHEMA)
