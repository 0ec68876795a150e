"""``poststore categories [ROOT]`` --- Count documents per category."""

from __future__ import annotations

import json

import click

from poststore.cli.common import format_option, open_store, root_argument


@click.command("categories")
@root_argument
@format_option
def categories_command(root: str, output_format: str) -> None:
    """Show how many documents carry each category."""
    store = open_store(root, output_format)
    counts = store.categories()
    if output_format == "json":
        click.echo(json.dumps(counts, indent=2))
    else:
        from poststore.cli.output import print_categories
        print_categories(counts)
