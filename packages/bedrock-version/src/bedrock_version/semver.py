# SPDX-License-Identifier: MIT
"""Version parsing for Bedrock add-on manifests.

Manifests encode versions in two ways:
- Dotted text: "1.2.3" or "1.2.3-beta"
- Integer triple: [1, 2, 3]

Both normalize to the same Version value. Only the "-beta" qualifier is
understood; the triple form never carries a pre-release marker.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional

BETA_SUFFIX = "-beta"

# Optional sign followed by ASCII digits
_COMPONENT_PATTERN = re.compile(r"[+-]?[0-9]+")

_COMPONENT_NAMES = ("major", "minor", "patch")


class InvalidVersionError(Exception):
    """Raised when a version value cannot be normalized.

    Attributes:
        version: The raw value that failed to parse
        message: Human-readable error message
        field: Name of the offending component ("major", "minor", "patch"), if known
    """

    def __init__(self, version: Any, message: str = "", field: Optional[str] = None):
        self.version = version
        self.field = field
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """A normalized manifest version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Whether the version carried the "-beta" qualifier
    """

    major: int
    minor: int
    patch: int
    prerelease: bool = False

    def __str__(self) -> str:
        version = self.base_version
        if self.prerelease:
            version += BETA_SUFFIX
        return version

    @property
    def base_version(self) -> str:
        """Return the version without the pre-release qualifier."""
        return f"{self.major}.{self.minor}.{self.patch}"


def _parse_component(text: str, name: str, raw: str) -> int:
    if not _COMPONENT_PATTERN.fullmatch(text):
        raise InvalidVersionError(
            raw, f"Invalid {name} component {text!r} in version {raw!r}", field=name
        )
    return int(text)


def parse_version_from_text(text: str) -> Version:
    """Parse a dotted version string.

    Args:
        text: A string of the form MAJOR.MINOR.PATCH, optionally followed by "-beta"

    Returns:
        The normalized Version

    Raises:
        InvalidVersionError: If fewer than three components are present or a
            component is not an integer

    Examples:
        >>> parse_version_from_text("1.20.0")
        Version(major=1, minor=20, patch=0, prerelease=False)

        >>> parse_version_from_text("1.2.0-beta")
        Version(major=1, minor=2, patch=0, prerelease=True)

        >>> parse_version_from_text("1.2.3.4")
        Version(major=1, minor=2, patch=3, prerelease=False)
    """
    if not isinstance(text, str):
        raise InvalidVersionError(
            text, f"Version text must be a string, got {type(text).__name__}"
        )

    prerelease = text.endswith(BETA_SUFFIX)
    body = text[: -len(BETA_SUFFIX)] if prerelease else text

    parts = body.split(".")
    if len(parts) < 3:
        raise InvalidVersionError(
            text, f"Version {text!r} must have three components (MAJOR.MINOR.PATCH)"
        )

    # Components past the third are ignored
    major, minor, patch = (
        _parse_component(part, name, text) for part, name in zip(parts, _COMPONENT_NAMES)
    )
    return Version(major=major, minor=minor, patch=patch, prerelease=prerelease)


def parse_version_from_triple(values: Sequence[int]) -> Version:
    """Parse an integer-array version.

    Args:
        values: An ordered sequence [major, minor, patch]

    Returns:
        The normalized Version (never a pre-release)

    Raises:
        InvalidVersionError: If fewer than three elements are present or an
            element is not an integer

    Examples:
        >>> parse_version_from_triple([1, 19, 50])
        Version(major=1, minor=19, patch=50, prerelease=False)
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidVersionError(
            values, f"Version triple must be a sequence, got {type(values).__name__}"
        )

    if len(values) < 3:
        raise InvalidVersionError(
            list(values), f"Version {list(values)!r} must have three components"
        )

    components = []
    for value, name in zip(values, _COMPONENT_NAMES):
        # bool is an int subclass but never a valid component
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidVersionError(
                list(values),
                f"Invalid {name} component {value!r} in version {list(values)!r}",
                field=name,
            )
        components.append(value)

    major, minor, patch = components
    return Version(major=major, minor=minor, patch=patch)


def parse_version(raw: Any) -> Version:
    """Parse a version in either manifest encoding.

    The encoding is detected from the value itself: strings go through
    parse_version_from_text, lists and tuples through parse_version_from_triple.

    Raises:
        InvalidVersionError: If the value is neither encoding or fails to parse
    """
    if isinstance(raw, str):
        return parse_version_from_text(raw)
    if isinstance(raw, (list, tuple)):
        return parse_version_from_triple(raw)
    raise InvalidVersionError(
        raw, f"Version must be a string or an integer array, got {type(raw).__name__}"
    )


def is_valid_version_text(text: str) -> bool:
    """Check if a string parses as a dotted manifest version.

    Examples:
        >>> is_valid_version_text("1.0.0")
        True
        >>> is_valid_version_text("1.0")
        False
    """
    try:
        parse_version_from_text(text)
    except InvalidVersionError:
        return False
    return True
