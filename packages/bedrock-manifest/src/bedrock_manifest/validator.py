# SPDX-License-Identifier: MIT
"""Structural validation for Bedrock add-on manifests.

This module decodes manifest text and checks it against the document schema,
with structured error reporting. It is the first stage of normalization:
nothing here interprets identifiers, versions or symbolic names.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from jsonschema import Draft202012Validator, ValidationError, validators

from .schema import MANIFEST_SCHEMA

ROOT_FIELD = "<root>"


def _is_integer(checker: Any, instance: Any) -> bool:
    # jsonschema treats integral floats such as 1.0 as integers
    return isinstance(instance, int) and not isinstance(instance, bool)


ManifestValidator = validators.extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_integer),
)


class ErrorCode:
    """Manifest error codes."""

    STRUCTURAL_DECODE = "STRUCTURAL_DECODE"
    MALFORMED_IDENTIFIER = "MALFORMED_IDENTIFIER"
    MALFORMED_VERSION_TEXT = "MALFORMED_VERSION_TEXT"
    MISSING_REQUIRED_VARIANT_FIELD = "MISSING_REQUIRED_VARIANT_FIELD"


class ManifestError(Exception):
    """Base exception for manifest-related errors.

    Attributes:
        code: Error code from the ErrorCode class
        field: Path to the offending field (e.g. "dependencies[2].uuid")
        message: Human-readable error message
    """

    code: str = ErrorCode.STRUCTURAL_DECODE

    def __init__(self, message: str, field: str = ROOT_FIELD):
        self.message = message
        self.field = field
        super().__init__(f"{field}: {message}")


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """Details about a single validation error.

    Attributes:
        field: JSON path to the invalid field (e.g., "header.uuid" or "modules[0]")
        message: Human-readable error message
        value: The invalid value that caused the error (if available)
    """

    field: str
    message: str
    value: Any = None


class StructuralDecodeError(ManifestError):
    """Raised when manifest text is not a document of the expected shape.

    Attributes:
        errors: Every structural error found, ordered by field path
    """

    code = ErrorCode.STRUCTURAL_DECODE

    def __init__(self, errors: list[ValidationErrorDetail]):
        self.errors = errors
        message = f"Manifest decoding failed with {len(errors)} error(s)"
        if errors:
            message += f": {errors[0].message}"
        super().__init__(message, errors[0].field if errors else ROOT_FIELD)


@dataclass
class ValidationResult:
    """Result of structural manifest validation.

    Attributes:
        valid: Whether the document has the expected shape
        errors: List of validation errors (empty if valid)
        document: The validated document (None if invalid)
    """

    valid: bool
    errors: list[ValidationErrorDetail] = field(default_factory=list)
    document: Optional[dict] = None


def format_field_path(parts: Any) -> str:
    """Render a sequence of keys and indices as a readable field path."""
    rendered = []
    for part in parts:
        if isinstance(part, int):
            rendered.append(f"[{part}]")
        elif rendered:
            rendered.append(f".{part}")
        else:
            rendered.append(str(part))
    return "".join(rendered) or ROOT_FIELD


def _format_error_message(error: ValidationError) -> str:
    """Format a jsonschema error into a human-readable message."""
    if error.validator == "required":
        # jsonschema reports one error per missing property
        missing = [name for name in error.validator_value if name not in error.instance]
        if len(missing) == 1:
            return f"Missing required field: {missing[0]}"
        return f"Missing required fields: {', '.join(missing)}"

    if error.validator == "type":
        expected = error.validator_value
        actual = type(error.instance).__name__
        return f"Expected {expected}, got {actual}"

    if error.validator == "anyOf":
        return "Expected an integer array or a version string"

    return error.message


def validate_manifest(document: Any) -> ValidationResult:
    """Validate a decoded manifest document against the schema.

    Args:
        document: The decoded manifest.json document

    Returns:
        ValidationResult with validation status and every error found

    Example:
        >>> result = validate_manifest({"format_version": 2})
        >>> result.valid
        False
        >>> result.errors[0].message
        'Missing required fields: header, modules, dependencies, capabilities, subpacks'
    """
    if not isinstance(document, dict):
        return ValidationResult(
            valid=False,
            errors=[
                ValidationErrorDetail(
                    field=ROOT_FIELD,
                    message=f"Manifest must be an object, got {type(document).__name__}",
                    value=document,
                )
            ],
        )

    validator = ManifestValidator(MANIFEST_SCHEMA)
    errors: list[ValidationErrorDetail] = []
    seen: set[tuple[str, str]] = set()

    for error in validator.iter_errors(document):
        detail = ValidationErrorDetail(
            field=format_field_path(error.absolute_path),
            message=_format_error_message(error),
            value=error.instance if error.absolute_path else None,
        )
        # Several missing properties on one object collapse to one detail
        if (detail.field, detail.message) in seen:
            continue
        seen.add((detail.field, detail.message))
        errors.append(detail)

    if errors:
        errors.sort(key=lambda detail: detail.field)
        return ValidationResult(valid=False, errors=errors)

    return ValidationResult(valid=True, document=document)


def decode_manifest_text(raw_text: str | bytes) -> dict:
    """Decode manifest text into a structurally valid document.

    Args:
        raw_text: manifest.json contents as text or UTF-8 bytes

    Returns:
        The decoded document

    Raises:
        StructuralDecodeError: If the text is not JSON or does not match the schema
    """
    try:
        document = json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise StructuralDecodeError(
            [
                ValidationErrorDetail(
                    field=ROOT_FIELD,
                    message=f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
                )
            ]
        ) from e
    except UnicodeDecodeError as e:
        raise StructuralDecodeError(
            [ValidationErrorDetail(field=ROOT_FIELD, message=f"Invalid UTF-8 text: {e.reason}")]
        ) from e

    result = validate_manifest(document)
    if not result.valid:
        raise StructuralDecodeError(result.errors)
    return document
