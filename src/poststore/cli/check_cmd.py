"""``poststore check [ROOT]`` --- Verify published documents are unchanged.

Exit Codes:
    0 --- Every recorded document is present and unmodified.
    1 --- One or more documents were edited or removed.
    2 --- The manifest is missing, unreadable or malformed, or the site
          configuration is invalid.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from poststore.cli.common import format_option, open_store, root_argument
from poststore.core.manifest import MANIFEST_FILENAME, Manifest
from poststore.exceptions import ManifestError


@click.command("check")
@root_argument
@click.option(
    "--manifest", "manifest_path",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Manifest to check against (default: <root>/{MANIFEST_FILENAME}).",
)
@format_option
def check_command(root: str, manifest_path: str | None, output_format: str) -> None:
    """Check documents under ROOT against a frozen manifest."""
    path = Path(manifest_path) if manifest_path else Path(root) / MANIFEST_FILENAME
    try:
        manifest = Manifest.read(path)
    except ManifestError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(2)

    errors = manifest.validate()
    if errors:
        if output_format == "json":
            click.echo(json.dumps({"errors": errors}, indent=2))
        else:
            click.echo(f"Error: invalid manifest {path}")
            for error in errors:
                click.echo(f"  {error}")
        sys.exit(2)

    store = open_store(root, output_format)
    violations = manifest.check(store)

    if output_format == "json":
        click.echo(json.dumps({
            "checked": manifest.entry_count,
            "violations": [
                {"identifier": v.identifier, "kind": v.kind.value, "detail": v.detail}
                for v in violations
            ],
        }, indent=2))
    else:
        from poststore.cli.output import print_violations
        print_violations(violations)

    sys.exit(1 if violations else 0)
