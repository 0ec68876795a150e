"""``poststore show ROOT IDENTIFIER`` --- Show one document.

Exit Codes:
    0 --- Document found and printed.
    1 --- No document with that identifier.
    2 --- The site configuration is invalid.
"""

from __future__ import annotations

import json
import sys

import click

from poststore.cli.common import format_option, open_store
from poststore.exceptions import NotFound


@click.command("show")
@click.argument("root", type=click.Path(exists=True, file_okay=False))
@click.argument("identifier")
@format_option
def show_command(root: str, identifier: str, output_format: str) -> None:
    """Show the document IDENTIFIER from the site at ROOT."""
    store = open_store(root, output_format)
    try:
        doc = store.get(identifier)
    except NotFound as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            click.echo(f"Error: {exc}")
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(doc.to_dict(), indent=2))
    else:
        from poststore.cli.output import print_document_detail
        print_document_detail(doc)
