# SPDX-License-Identifier: MIT
"""Print the normalized contents of a Bedrock add-on manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from bedrock_manifest import (
    CapabilityName,
    CustomCapability,
    CustomScriptAPI,
    DataModule,
    Dependency,
    Manifest,
    Module,
    NormalizeConfig,
    ResourcesModule,
    ScriptAPIName,
    ScriptDependency,
    ScriptModule,
    load_manifest,
)

from ..main import Context, echo_info, pass_context
from .validate import resolve_manifest_path


def _describe_module(module: Module) -> str:
    if isinstance(module, ScriptModule):
        return f"script     {module.uuid} {module.version} entry={module.entry}"
    if isinstance(module, ResourcesModule):
        return f"resources  {module.uuid} {module.version}"
    if isinstance(module, DataModule):
        return f"data       {module.uuid} {module.version}"
    raise TypeError(f"Unknown module type: {type(module).__name__}")


def _describe_script_api(name: ScriptAPIName) -> str:
    if isinstance(name, CustomScriptAPI):
        return f"{name.name} (custom)"
    return name.value


def _describe_dependency(dependency: Dependency) -> str:
    if isinstance(dependency, ScriptDependency):
        return f"script     {_describe_script_api(dependency.name)} {dependency.version}"
    return f"pack       {dependency.uuid} {dependency.version}"


def _describe_capability(capability: CapabilityName) -> str:
    if isinstance(capability, CustomCapability):
        return f"{capability.name} (custom)"
    return capability.value


def format_manifest(manifest: Manifest) -> list[str]:
    """Render a normalized manifest as display lines."""
    header = manifest.header
    lines = [
        f"Name:               {header.name}",
        f"Description:        {header.description}",
        f"UUID:               {header.uuid}",
        f"Version:            {header.version}",
        f"Min engine version: {header.min_engine_version}",
        f"Format version:     {manifest.format_version}",
    ]

    sections = [
        ("Modules", [_describe_module(m) for m in manifest.modules]),
        ("Dependencies", [_describe_dependency(d) for d in manifest.dependencies]),
        ("Capabilities", [_describe_capability(c) for c in manifest.capabilities]),
        (
            "Subpacks",
            [f"{s.folder_name} ({s.name}) memory_tier={s.memory_tier}" for s in manifest.subpacks],
        ),
    ]
    for title, entries in sections:
        lines.append("")
        lines.append(f"{title} ({len(entries)}):")
        lines.extend(f"  - {entry}" for entry in entries)

    return lines


@click.command()
@click.argument(
    "manifest",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@pass_context
def inspect(ctx: Context, manifest: Optional[Path]) -> None:
    """Show the normalized contents of a manifest.json file.

    \b
    Examples:
        bedrock inspect                       # Inspect the configured manifest
        bedrock -C my_pack inspect            # Inspect my_pack/manifest.json
        bedrock inspect path/manifest.json    # Inspect a specific manifest
    """
    path = resolve_manifest_path(ctx, manifest)
    config = NormalizeConfig(strict_dependency_versions=ctx.load_config().strict_dependency_versions)

    normalized = load_manifest(path, config)

    for line in format_manifest(normalized):
        echo_info(line)
