# SPDX-License-Identifier: MIT
"""Property-based tests for manifest normalization.

These tests verify that:
- Module, dependency, capability and subpack order follows the document
- Unknown module types are dropped without disturbing their siblings
- Known and unknown symbolic names resolve to members or Custom variants
- Nothing is deduplicated
"""

from __future__ import annotations

import copy
import json
import uuid

from hypothesis import given, settings, strategies as st

from bedrock_manifest import (
    CAPABILITIES,
    SCRIPT_API_NAMES,
    CustomCapability,
    CustomScriptAPI,
    DataModule,
    ScriptDependency,
    ScriptModule,
    Subpack,
    UuidDependency,
    Version,
    normalize_manifest,
)

BASE_DOCUMENT = {
    "format_version": 2,
    "header": {
        "name": "Property Pack",
        "description": "",
        "min_engine_version": [1, 20, 0],
        "uuid": "0b6f2a1e-3c4d-4e5f-8a9b-1c2d3e4f5a6b",
        "version": [1, 0, 0],
    },
    "modules": [],
    "dependencies": [],
    "capabilities": [],
    "subpacks": [],
}


# =============================================================================
# Strategies for generating test data
# =============================================================================

uuids = st.uuids()
version_triples = st.lists(st.integers(min_value=0, max_value=999), min_size=3, max_size=3)
module_types = st.sampled_from(["script", "data", "resources", "plugin", "javascript"])
symbol_text = st.text(
    alphabet=st.characters(min_codepoint=0x21, max_codepoint=0x7E), min_size=1, max_size=20
)
capability_names = st.one_of(st.sampled_from(sorted(CAPABILITIES)), symbol_text)
script_api_names = st.one_of(st.sampled_from(sorted(SCRIPT_API_NAMES)), symbol_text)


@st.composite
def module_records(draw):
    record = {
        "type": draw(module_types),
        "uuid": str(draw(uuids)),
        "version": draw(version_triples),
    }
    if record["type"] == "script":
        record["entry"] = draw(symbol_text)
    return record


@st.composite
def dependency_records(draw):
    version = draw(st.one_of(version_triples, version_triples.map(lambda v: ".".join(map(str, v)))))
    if draw(st.booleans()):
        return {"module_name": draw(script_api_names), "version": version}
    return {"uuid": str(draw(uuids)), "version": version}


subpack_records = st.fixed_dictionaries(
    {
        "folder_name": symbol_text,
        "name": symbol_text,
        "memory_tier": st.integers(min_value=0, max_value=4),
    }
)


def _document(**sections) -> str:
    doc = copy.deepcopy(BASE_DOCUMENT)
    doc.update(sections)
    return json.dumps(doc)


# =============================================================================
# Properties
# =============================================================================


@given(records=st.lists(module_records(), max_size=8))
@settings(max_examples=50)
def test_modules_keep_order_and_drop_unknown(records) -> None:
    """Recognized modules appear in document order; unknown types are dropped."""
    manifest = normalize_manifest(_document(modules=records))

    kept = [r for r in records if r["type"] in ("script", "data", "resources")]
    assert len(manifest.modules) == len(kept)

    for record, module in zip(kept, manifest.modules):
        assert module.uuid == uuid.UUID(record["uuid"])
        assert module.version == Version(*record["version"])
        if record["type"] == "script":
            assert isinstance(module, ScriptModule)
            assert module.entry == record["entry"]
        else:
            assert isinstance(module, DataModule)


@given(records=st.lists(dependency_records(), max_size=8))
@settings(max_examples=50)
def test_dependencies_keep_order(records) -> None:
    """Dependencies resolve one-to-one in document order."""
    manifest = normalize_manifest(_document(dependencies=records))

    assert len(manifest.dependencies) == len(records)
    for record, dependency in zip(records, manifest.dependencies):
        if "module_name" in record:
            assert isinstance(dependency, ScriptDependency)
            name = record["module_name"]
            expected = SCRIPT_API_NAMES.get(name, CustomScriptAPI(name))
            assert dependency.name == expected
        else:
            assert isinstance(dependency, UuidDependency)
            assert dependency.uuid == uuid.UUID(record["uuid"])
        raw = record["version"]
        triple = raw if isinstance(raw, list) else [int(part) for part in raw.split(".")]
        assert dependency.version == Version(*triple)


@given(names=st.lists(capability_names, max_size=10))
def test_capabilities_resolve_in_order(names) -> None:
    """Capabilities resolve in order, with Custom for unknown names."""
    manifest = normalize_manifest(_document(capabilities=names))

    assert len(manifest.capabilities) == len(names)
    for name, capability in zip(names, manifest.capabilities):
        if name in CAPABILITIES:
            assert capability is CAPABILITIES[name]
        else:
            assert capability == CustomCapability(name)


@given(records=st.lists(subpack_records, max_size=6))
def test_subpacks_pass_through(records) -> None:
    """Subpacks are copied field for field."""
    manifest = normalize_manifest(_document(subpacks=records))
    assert manifest.subpacks == tuple(Subpack(**record) for record in records)
