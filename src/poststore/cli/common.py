"""Helpers shared by the CLI subcommands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from poststore.core.store import DocumentStore
from poststore.exceptions import ConfigError

root_argument = click.argument(
    "root",
    type=click.Path(exists=True, file_okay=False),
    envvar="POSTSTORE_ROOT",
    default=".",
)

format_option = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)


def open_store(root: str, output_format: str = "text") -> DocumentStore:
    """Load the store at ``root`` or exit with code 2 on a config error."""
    try:
        return DocumentStore.from_directory(Path(root))
    except ConfigError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(2)
