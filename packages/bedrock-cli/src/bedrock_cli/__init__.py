# SPDX-License-Identifier: MIT
"""Command line tool for Bedrock add-on manifests."""

__version__ = "0.1.0"
