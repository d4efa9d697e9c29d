# SPDX-License-Identifier: MIT
"""Version parsing for Bedrock add-on manifests.

This package normalizes the two version encodings found in manifest.json
files into a single Version value.

Example:
    >>> from bedrock_version import parse_version
    >>>
    >>> version = parse_version("1.2.0-beta")
    >>> version.minor
    2
    >>> version.prerelease
    True
    >>>
    >>> parse_version([1, 20, 0]) == parse_version("1.20.0")
    True
"""

__version__ = "0.1.0"

from .semver import (
    BETA_SUFFIX,
    InvalidVersionError,
    Version,
    is_valid_version_text,
    parse_version,
    parse_version_from_text,
    parse_version_from_triple,
)

__all__ = [
    "Version",
    "parse_version",
    "parse_version_from_text",
    "parse_version_from_triple",
    "is_valid_version_text",
    "InvalidVersionError",
    "BETA_SUFFIX",
]
