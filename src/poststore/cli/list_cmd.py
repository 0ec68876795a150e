"""``poststore list [ROOT]`` --- List documents in publication order.

Exit Codes:
    0 --- Listing printed.
    2 --- ``--strict`` was given and at least one file failed to load,
          or the site configuration is invalid.
"""

from __future__ import annotations

import json
import sys

import click

from poststore.cli.common import format_option, open_store, root_argument


@click.command("list")
@root_argument
@click.option("--category", "-c", default=None, help="Only list documents in this category.")
@format_option
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with code 2 if any file failed to load.",
)
def list_command(root: str, category: str | None, output_format: str, strict: bool) -> None:
    """List documents under ROOT, oldest first.

    ROOT defaults to $POSTSTORE_ROOT or the current directory.
    """
    store = open_store(root, output_format)
    documents = list(store.list(category=category))

    if output_format == "json":
        click.echo(json.dumps({
            "documents": [doc.to_dict(include_body=False) for doc in documents],
            "failures": [
                {"path": str(f.path), "reason": f.reason} for f in store.failures
            ],
        }, indent=2))
    else:
        from poststore.cli.output import print_document_table, print_failures
        print_document_table(documents)
        print_failures(store.failures)

    if strict and store.failures:
        sys.exit(2)
