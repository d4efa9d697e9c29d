# SPDX-License-Identifier: MIT
"""Validate a Bedrock add-on manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from bedrock_manifest import (
    ManifestError,
    NormalizeConfig,
    StructuralDecodeError,
    VersionFallback,
    decode_manifest_text,
    normalize_manifest_dict,
)

from ..main import Context, echo_error, echo_info, echo_success, echo_warning, pass_context


def resolve_manifest_path(ctx: Context, manifest: Optional[Path]) -> Path:
    """Return the manifest to operate on, defaulting to the configured one."""
    if manifest is not None:
        return manifest

    path = ctx.load_config().manifest_path
    if not path.exists():
        echo_error(f"No manifest found at {path}")
        raise SystemExit(1)
    return path


@click.command()
@click.argument(
    "manifest",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat warnings as errors.",
)
@pass_context
def validate(ctx: Context, manifest: Optional[Path], strict: bool) -> None:
    """Validate a manifest.json file.

    Checks the document structure, then normalizes it. Malformed dependency
    versions are reported as warnings because the normalizer substitutes a
    default version for them.

    \b
    Examples:
        bedrock validate                      # Validate the configured manifest
        bedrock validate path/manifest.json   # Validate a specific manifest
        bedrock validate --strict             # Treat warnings as errors
    """
    path = resolve_manifest_path(ctx, manifest)
    strict = strict or ctx.load_config().strict_dependency_versions

    echo_info(f"Validating: {path}")

    errors: list[str] = []
    warnings: list[str] = []

    try:
        document = decode_manifest_text(path.read_bytes())
    except StructuralDecodeError as e:
        for detail in e.errors:
            errors.append(f"Manifest error [{detail.field}]: {detail.message}")
    else:
        fallbacks: list[VersionFallback] = []
        config = NormalizeConfig(on_dependency_fallback=fallbacks.append)
        try:
            normalize_manifest_dict(document, config)
        except ManifestError as e:
            errors.append(f"Manifest error [{e.field}]: {e.message}")
        else:
            for fallback in fallbacks:
                warnings.append(f"{fallback.field}: {fallback.reason}; default version used")

    # Report results
    echo_info("")

    if warnings:
        echo_warning(f"Warnings ({len(warnings)}):")
        for warning in warnings:
            echo_warning(f"  - {warning}")

    if errors:
        echo_error(f"Errors ({len(errors)}):")
        for error in errors:
            echo_error(f"  - {error}")

    if errors:
        echo_error("\nValidation failed!")
        raise SystemExit(1)

    if warnings and strict:
        echo_error("\nValidation failed (strict mode)!")
        raise SystemExit(1)

    if warnings:
        echo_success("Validation passed with warnings")
    else:
        echo_success("Validation passed")
