"""poststore CLI --- Inspect a Jekyll-style essay collection.

Entry point for the ``poststore`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    list       --- List documents in publication order.
    show       --- Show one document by identifier.
    categories --- Count documents per category.
    freeze     --- Write posts-lock.json for the current documents.
    check      --- Verify published documents against posts-lock.json.

Usage::

    poststore list ./site
    poststore list ./site --category verification --format json
    poststore show ./site 2025-05-26-program-verification-intro
    poststore freeze ./site
    poststore check ./site
"""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from poststore import __version__
from poststore.cli.categories_cmd import categories_command
from poststore.cli.check_cmd import check_command
from poststore.cli.freeze_cmd import freeze_command
from poststore.cli.list_cmd import list_command
from poststore.cli.show_cmd import show_command


def _configure_logging(verbosity: int) -> None:
    level = logging.ERROR
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG

    from poststore.cli.output import err_console
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", count=True, help="Increase log detail (-v info, -vv debug).")
def cli(verbose: int) -> None:
    """poststore: Read-only store for Jekyll-style essay collections.

    Load posts with YAML front matter, list them in publication order,
    look them up by identifier, and check that published posts stay
    unchanged.
    """
    _configure_logging(verbose)


# Register all subcommands
cli.add_command(list_command)
cli.add_command(show_command)
cli.add_command(categories_command)
cli.add_command(freeze_command)
cli.add_command(check_command)
