# SPDX-License-Identifier: MIT
"""Normalize manifest.json documents into the typed manifest model.

This module decodes a manifest document, checks its structure, and maps
every field into the closed domain model defined in model.py.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
from uuid import UUID

from bedrock_version import InvalidVersionError, Version, parse_version, parse_version_from_triple

from .model import (
    DataModule,
    Dependency,
    Manifest,
    ManifestHeader,
    Module,
    ScriptDependency,
    ScriptModule,
    Subpack,
    UuidDependency,
    resolve_capability,
    resolve_script_api,
)
from .validator import (
    ErrorCode,
    ManifestError,
    StructuralDecodeError,
    decode_manifest_text,
    validate_manifest,
)

logger = logging.getLogger(__name__)

DEFAULT_DEPENDENCY_VERSION = Version(major=1, minor=0, patch=0)


class MalformedIdentifierError(ManifestError):
    """Raised when a UUID field does not parse as a UUID."""

    code = ErrorCode.MALFORMED_IDENTIFIER


class MalformedVersionError(ManifestError):
    """Raised when a version field cannot be normalized.

    Attributes:
        version: The raw version value
    """

    code = ErrorCode.MALFORMED_VERSION_TEXT

    def __init__(self, message: str, field: str, version: Any = None):
        self.version = version
        super().__init__(message, field)


class MissingRequiredFieldError(ManifestError):
    """Raised when a record lacks the field its variant requires."""

    code = ErrorCode.MISSING_REQUIRED_VARIANT_FIELD


@dataclass(frozen=True, slots=True)
class VersionFallback:
    """A dependency version that was replaced by the fallback version.

    Attributes:
        field: Path to the version field (e.g. "dependencies[1].version")
        raw: The raw value found there (None when absent)
        reason: Why the value could not be used
    """

    field: str
    raw: Any
    reason: str


@dataclass
class NormalizeConfig:
    """Configuration for manifest normalization.

    Attributes:
        fallback_dependency_version: Version used when a dependency's version
            is missing or malformed
        strict_dependency_versions: Raise on malformed dependency versions
            instead of falling back
        on_dependency_fallback: Called with a VersionFallback each time the
            fallback version is substituted
    """

    fallback_dependency_version: Version = DEFAULT_DEPENDENCY_VERSION
    strict_dependency_versions: bool = False
    on_dependency_fallback: Optional[Callable[[VersionFallback], None]] = None


def _parse_uuid(value: str, field: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as e:
        raise MalformedIdentifierError(f"Invalid UUID: {value!r}", field) from e


def _parse_version(raw: Any, field: str) -> Version:
    try:
        return parse_version(raw)
    except InvalidVersionError as e:
        path = f"{field}.{e.field}" if e.field else field
        raise MalformedVersionError(e.message, path, version=raw) from e


def _convert_header(header: dict) -> ManifestHeader:
    return ManifestHeader(
        uuid=_parse_uuid(header["uuid"], "header.uuid"),
        name=header["name"],
        description=header["description"],
        min_engine_version=_parse_version(
            header["min_engine_version"], "header.min_engine_version"
        ),
        version=_parse_version(header["version"], "header.version"),
    )


def _convert_module(module: dict, index: int) -> Optional[Module]:
    """Convert one module record, or return None for unknown module types."""
    path = f"modules[{index}]"
    module_type = module["type"]

    if module_type not in ("script", "data", "resources"):
        logger.debug("Dropping %s with unknown module type %r", path, module_type)
        return None

    uuid = _parse_uuid(module["uuid"], f"{path}.uuid")
    try:
        version = parse_version_from_triple(module["version"])
    except InvalidVersionError as e:
        field = f"{path}.version.{e.field}" if e.field else f"{path}.version"
        raise MalformedVersionError(e.message, field, version=module["version"]) from e

    if module_type == "script":
        entry = module.get("entry")
        if entry is None:
            raise MissingRequiredFieldError(
                "Script module is missing required field: entry", f"{path}.entry"
            )
        return ScriptModule(uuid=uuid, version=version, entry=entry)

    # "resources" collapses into the data variant
    return DataModule(uuid=uuid, version=version)


def _fall_back(fallback: VersionFallback, config: NormalizeConfig) -> Version:
    if fallback.raw is None:
        logger.debug(
            "No version at %s, using %s", fallback.field, config.fallback_dependency_version
        )
    else:
        logger.warning(
            "Malformed version %r at %s, using %s",
            fallback.raw,
            fallback.field,
            config.fallback_dependency_version,
        )
    if config.on_dependency_fallback is not None:
        config.on_dependency_fallback(fallback)
    return config.fallback_dependency_version


def _convert_dependency_version(raw: Any, path: str, config: NormalizeConfig) -> Version:
    if isinstance(raw, (str, list)):
        try:
            return _parse_version(raw, path)
        except MalformedVersionError as e:
            if config.strict_dependency_versions:
                raise
            return _fall_back(VersionFallback(field=path, raw=raw, reason=e.message), config)

    if raw is None:
        reason = "Missing version"
    else:
        reason = "Expected an integer array or a version string"
    if config.strict_dependency_versions:
        raise MalformedVersionError(reason, path, version=raw)
    return _fall_back(VersionFallback(field=path, raw=raw, reason=reason), config)


def _convert_dependency(dependency: dict, index: int, config: NormalizeConfig) -> Dependency:
    path = f"dependencies[{index}]"
    module_name = dependency.get("module_name")
    raw_uuid = dependency.get("uuid")

    if module_name is None and raw_uuid is None:
        raise MissingRequiredFieldError("Dependency must have either module_name or uuid", path)

    version = _convert_dependency_version(dependency.get("version"), f"{path}.version", config)

    # module_name takes precedence when both references are present
    if module_name is not None:
        return ScriptDependency(name=resolve_script_api(module_name), version=version)

    return UuidDependency(uuid=_parse_uuid(raw_uuid, f"{path}.uuid"), version=version)


def _convert_subpack(subpack: dict) -> Subpack:
    return Subpack(
        folder_name=subpack["folder_name"],
        name=subpack["name"],
        memory_tier=subpack["memory_tier"],
    )


def _normalize(document: dict, config: NormalizeConfig) -> Manifest:
    header = _convert_header(document["header"])

    modules = []
    for index, raw_module in enumerate(document["modules"]):
        module = _convert_module(raw_module, index)
        if module is not None:
            modules.append(module)

    dependencies = [
        _convert_dependency(raw_dependency, index, config)
        for index, raw_dependency in enumerate(document["dependencies"])
    ]

    capabilities = [resolve_capability(name) for name in document["capabilities"]]
    subpacks = [_convert_subpack(raw_subpack) for raw_subpack in document["subpacks"]]

    return Manifest(
        format_version=document["format_version"],
        header=header,
        modules=tuple(modules),
        dependencies=tuple(dependencies),
        subpacks=tuple(subpacks),
        capabilities=tuple(capabilities),
    )


def normalize_manifest(
    raw_text: str | bytes,
    config: NormalizeConfig | None = None,
) -> Manifest:
    """Normalize manifest.json text into a Manifest.

    Args:
        raw_text: manifest.json contents as text or UTF-8 bytes
        config: Optional normalization configuration

    Returns:
        The normalized Manifest

    Raises:
        StructuralDecodeError: If the text is not a document of the expected shape
        MalformedIdentifierError: If a UUID field does not parse
        MalformedVersionError: If a header or module version does not parse
        MissingRequiredFieldError: If a script module has no entry, or a
            dependency has neither module_name nor uuid

    Example:
        >>> manifest = normalize_manifest(Path("path/to/manifest.json").read_text())
        >>> manifest.header.version
        Version(major=1, minor=0, patch=0, prerelease=False)
    """
    config = config or NormalizeConfig()
    document = decode_manifest_text(raw_text)
    return _normalize(document, config)


def normalize_manifest_dict(
    document: dict[str, Any],
    config: NormalizeConfig | None = None,
) -> Manifest:
    """Normalize an already-decoded manifest document.

    This is a convenience function for when you already have the parsed JSON.
    The document is still checked against the schema.

    Raises:
        StructuralDecodeError: If the document does not have the expected shape
        ManifestError: For any of the errors raised by normalize_manifest
    """
    config = config or NormalizeConfig()
    result = validate_manifest(document)
    if not result.valid:
        raise StructuralDecodeError(result.errors)
    return _normalize(document, config)


def load_manifest(
    manifest_path: str | Path,
    config: NormalizeConfig | None = None,
) -> Manifest:
    """Read and normalize a manifest.json file.

    Raises:
        FileNotFoundError: If the file does not exist
        ManifestError: For any of the errors raised by normalize_manifest
    """
    path = Path(manifest_path)

    if not path.exists():
        raise FileNotFoundError(f"manifest.json not found: {path}")

    logger.debug("Loading manifest from %s", path)
    return normalize_manifest(path.read_bytes(), config)
