"""Allow ``python -m poststore.cli``."""

from poststore.cli.main import cli

cli()
