# SPDX-License-Identifier: MIT
"""Manifest schema, validation, and normalization for Bedrock add-ons.

This package provides utilities for working with manifest.json files:
- JSON Schema definition for the manifest document
- Structural validation with structured error reporting
- Normalization into an immutable, strongly typed Manifest

Example:
    >>> from bedrock_manifest import normalize_manifest, Capability
    >>>
    >>> manifest = normalize_manifest(Path("path/to/manifest.json").read_text())
    >>> manifest.header.version
    Version(major=1, minor=0, patch=0, prerelease=False)
    >>> manifest.has_capability(Capability.RAYTRACED)
    True
"""

__version__ = "0.1.0"

from bedrock_version import Version

from .model import (
    CAPABILITIES,
    SCRIPT_API_NAMES,
    Capability,
    CapabilityName,
    CustomCapability,
    CustomScriptAPI,
    DataModule,
    Dependency,
    Manifest,
    ManifestHeader,
    Module,
    ResourcesModule,
    ScriptAPI,
    ScriptAPIName,
    ScriptDependency,
    ScriptModule,
    Subpack,
    UuidDependency,
    resolve_capability,
    resolve_script_api,
)
from .normalizer import (
    DEFAULT_DEPENDENCY_VERSION,
    MalformedIdentifierError,
    MalformedVersionError,
    MissingRequiredFieldError,
    NormalizeConfig,
    VersionFallback,
    load_manifest,
    normalize_manifest,
    normalize_manifest_dict,
)
from .schema import MANIFEST_SCHEMA, get_manifest_schema
from .validator import (
    ErrorCode,
    ManifestError,
    StructuralDecodeError,
    ValidationErrorDetail,
    ValidationResult,
    decode_manifest_text,
    validate_manifest,
)

__all__ = [
    # Schema
    "MANIFEST_SCHEMA",
    "get_manifest_schema",
    # Validation
    "validate_manifest",
    "decode_manifest_text",
    "ValidationResult",
    "ValidationErrorDetail",
    "ErrorCode",
    "ManifestError",
    "StructuralDecodeError",
    # Model
    "Version",
    "Manifest",
    "ManifestHeader",
    "Module",
    "DataModule",
    "ResourcesModule",
    "ScriptModule",
    "Dependency",
    "ScriptDependency",
    "UuidDependency",
    "ScriptAPI",
    "ScriptAPIName",
    "CustomScriptAPI",
    "Capability",
    "CapabilityName",
    "CustomCapability",
    "Subpack",
    "SCRIPT_API_NAMES",
    "CAPABILITIES",
    "resolve_script_api",
    "resolve_capability",
    # Normalization
    "normalize_manifest",
    "normalize_manifest_dict",
    "load_manifest",
    "NormalizeConfig",
    "VersionFallback",
    "DEFAULT_DEPENDENCY_VERSION",
    "MalformedIdentifierError",
    "MalformedVersionError",
    "MissingRequiredFieldError",
]
