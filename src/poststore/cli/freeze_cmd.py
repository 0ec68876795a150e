"""``poststore freeze [ROOT]`` --- Write posts-lock.json.

Records the content hash of every loaded document so that a later
``poststore check`` can detect edits to published posts.

Exit Codes:
    0 --- Manifest written.
    2 --- No documents found, or the site configuration is invalid.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from poststore.cli.common import open_store, root_argument
from poststore.core.manifest import MANIFEST_FILENAME, Manifest


@click.command("freeze")
@root_argument
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Output path (default: <root>/{MANIFEST_FILENAME}).",
)
def freeze_command(root: str, output: str | None) -> None:
    """Record the current published documents under ROOT."""
    store = open_store(root)
    if len(store) == 0:
        click.echo("No documents found in the target directory.")
        sys.exit(2)

    manifest = Manifest.from_store(store)
    out_path = Path(output) if output else Path(root) / MANIFEST_FILENAME
    manifest.write(out_path)
    click.echo(f"Recorded {manifest.entry_count} documents in {out_path}")
