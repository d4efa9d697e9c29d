# SPDX-License-Identifier: MIT
"""Normalized domain model for Bedrock add-on manifests.

Every value here is immutable. Symbolic names from the manifest (script API
module names and capabilities) resolve to closed enumerations, with a Custom
variant for names that are not in the known tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union
from uuid import UUID

from bedrock_version import Version


# =============================================================================
# Modules
# =============================================================================


@dataclass(frozen=True, slots=True)
class DataModule:
    """A behavior or data module."""

    uuid: UUID
    version: Version


@dataclass(frozen=True, slots=True)
class ResourcesModule:
    """A resource module.

    Manifests declaring "resources" currently normalize to DataModule; this
    variant is kept so the module set stays closed if the two are split.
    """

    uuid: UUID
    version: Version


@dataclass(frozen=True, slots=True)
class ScriptModule:
    """A script module with its entry point."""

    uuid: UUID
    version: Version
    entry: str


Module = Union[DataModule, ResourcesModule, ScriptModule]


# =============================================================================
# Script APIs
# =============================================================================


class ScriptAPI(str, Enum):
    """First-party script API modules that a pack can depend on."""

    MINECRAFT_SERVER = "@minecraft/server"
    MINECRAFT_SERVER_UI = "@minecraft/server-ui"
    MINECRAFT_SERVER_NET = "@minecraft/server-net"
    MINECRAFT_SERVER_GAMETEST = "@minecraft/server-gametest"
    MINECRAFT_SERVER_ADMIN = "@minecraft/server-admin"
    MINECRAFT_SERVER_EDITOR = "@minecraft/server-editor"
    MINECRAFT_DEBUG_UTILITIES = "@minecraft/debug-utilities"


@dataclass(frozen=True, slots=True)
class CustomScriptAPI:
    """A script API module name outside the known set."""

    name: str


ScriptAPIName = Union[ScriptAPI, CustomScriptAPI]


# =============================================================================
# Capabilities
# =============================================================================


class Capability(str, Enum):
    """Optional engine capabilities a pack can request."""

    CHEMISTRY = "chemistry"
    EDITOR_EXTENSION = "editorExtension"
    EXPERIMENTAL_CUSTOM_UI = "experimental_custom_ui"
    PBR = "pbr"
    SCRIPT_EVAL = "script_eval"
    RAYTRACED = "raytraced"


@dataclass(frozen=True, slots=True)
class CustomCapability:
    """A capability outside the known set."""

    name: str


CapabilityName = Union[Capability, CustomCapability]


# =============================================================================
# Dependencies
# =============================================================================


@dataclass(frozen=True, slots=True)
class ScriptDependency:
    """A dependency on a script API module, referenced by name."""

    name: ScriptAPIName
    version: Version


@dataclass(frozen=True, slots=True)
class UuidDependency:
    """A dependency on another pack, referenced by its UUID."""

    uuid: UUID
    version: Version


Dependency = Union[ScriptDependency, UuidDependency]


# =============================================================================
# Manifest
# =============================================================================


@dataclass(frozen=True, slots=True)
class Subpack:
    """A subpack folder, passed through from the manifest unchanged.

    Attributes:
        folder_name: Directory name under subpacks/
        name: Display name
        memory_tier: Minimum memory tier required to offer the subpack
    """

    folder_name: str
    name: str
    memory_tier: int


@dataclass(frozen=True, slots=True)
class ManifestHeader:
    """Pack identity and version information.

    Attributes:
        uuid: Pack identity
        name: Display name
        description: Pack description
        min_engine_version: Oldest engine version the pack supports
        version: Pack version
    """

    uuid: UUID
    name: str
    description: str
    min_engine_version: Version
    version: Version


@dataclass(frozen=True, slots=True)
class Manifest:
    """A fully normalized manifest.

    Sequences keep the order in which entries appear in the source document.

    Attributes:
        format_version: Manifest format version, carried as-is
        header: Pack identity and versions
        modules: Recognized modules; unknown module types are dropped
        dependencies: Script API and pack dependencies
        subpacks: Subpack folders
        capabilities: Requested engine capabilities
    """

    format_version: int
    header: ManifestHeader
    modules: tuple[Module, ...] = ()
    dependencies: tuple[Dependency, ...] = ()
    subpacks: tuple[Subpack, ...] = ()
    capabilities: tuple[CapabilityName, ...] = ()

    @property
    def script_modules(self) -> tuple[ScriptModule, ...]:
        """Return the script modules in manifest order."""
        return tuple(m for m in self.modules if isinstance(m, ScriptModule))

    @property
    def script_dependencies(self) -> tuple[ScriptDependency, ...]:
        """Return the script API dependencies in manifest order."""
        return tuple(d for d in self.dependencies if isinstance(d, ScriptDependency))

    @property
    def uuid_dependencies(self) -> tuple[UuidDependency, ...]:
        """Return the pack dependencies in manifest order."""
        return tuple(d for d in self.dependencies if isinstance(d, UuidDependency))

    def has_capability(self, capability: CapabilityName) -> bool:
        """Return True if the manifest requests the given capability."""
        return capability in self.capabilities


# =============================================================================
# Lookup tables
# =============================================================================

SCRIPT_API_NAMES: Mapping[str, ScriptAPI] = MappingProxyType(
    {api.value: api for api in ScriptAPI}
)

CAPABILITIES: Mapping[str, Capability] = MappingProxyType(
    {capability.value: capability for capability in Capability}
)


def resolve_script_api(name: str) -> ScriptAPIName:
    """Resolve a script API module name.

    Lookup is exact and case-sensitive.

    Examples:
        >>> resolve_script_api("@minecraft/server")
        <ScriptAPI.MINECRAFT_SERVER: '@minecraft/server'>
        >>> resolve_script_api("@vendor/lib")
        CustomScriptAPI(name='@vendor/lib')
    """
    known = SCRIPT_API_NAMES.get(name)
    if known is not None:
        return known
    return CustomScriptAPI(name)


def resolve_capability(name: str) -> CapabilityName:
    """Resolve a capability name.

    Lookup is exact and case-sensitive.

    Examples:
        >>> resolve_capability("raytraced")
        <Capability.RAYTRACED: 'raytraced'>
        >>> resolve_capability("custom_flag")
        CustomCapability(name='custom_flag')
    """
    known = CAPABILITIES.get(name)
    if known is not None:
        return known
    return CustomCapability(name)
