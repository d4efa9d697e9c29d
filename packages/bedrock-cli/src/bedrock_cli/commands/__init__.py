# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import inspect, validate

__all__ = ["inspect", "validate"]
