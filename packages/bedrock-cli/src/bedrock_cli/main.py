# SPDX-License-Identifier: MIT
"""CLI entry point for the bedrock command."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import click

from bedrock_manifest import ManifestError, StructuralDecodeError

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands.

    Attributes:
        project_dir: Directory given with -C, or None for the working directory
        config: Configuration loaded from the project's pyproject.toml
    """

    def __init__(self) -> None:
        self.project_dir: Optional[Path] = None
        self.config: Optional[CLIConfig] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def configure_logging(verbose: bool) -> None:
    """Send library log records to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


class ManifestGroup(click.Group):
    """Command group that reports manifest and configuration errors.

    Subcommands let these exceptions propagate; each one becomes an error
    message and exit status 1.
    """

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except StructuralDecodeError as e:
            for detail in e.errors:
                echo_error(f"[{detail.field}] {detail.message}")
        except ManifestError as e:
            echo_error(f"[{e.field}] {e.message}")
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
        ctx.exit(1)


@click.group(cls=ManifestGroup)
@click.version_option(package_name="bedrock-manifest-tools")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show normalizer log messages, including version fallbacks.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Pack directory to read pyproject.toml and manifest.json from.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Bedrock add-on manifest tool.

    Validate and inspect manifest.json files of Bedrock add-on packs.

    \b
    Examples:
        bedrock inspect
        bedrock inspect path/to/manifest.json
        bedrock validate --strict
    """
    ctx.project_dir = directory
    configure_logging(verbose)


from .commands import inspect, validate  # noqa: E402

cli.add_command(inspect.inspect)
cli.add_command(validate.validate)


def main() -> None:
    """Run the bedrock command."""
    cli(prog_name="bedrock")


if __name__ == "__main__":
    main()
