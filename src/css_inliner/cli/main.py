"""css-inliner CLI entry point: Click group with subcommands."""

import click

from css_inliner import __version__


@click.group()
@click.version_option(version=__version__, prog_name="css-inliner")
def cli() -> None:
    """css-inliner - move <style> rules into inline style attributes."""


# Import and register subcommands
from css_inliner.cli.inline import inline  # noqa: E402
from css_inliner.cli.specificity import specificity  # noqa: E402

cli.add_command(inline)
cli.add_command(specificity)
