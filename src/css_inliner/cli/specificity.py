"""CLI command: css-inliner specificity -- score selectors."""

from __future__ import annotations

import click

from css_inliner.cascade.specificity import compute_specificity


@click.command()
@click.argument("selectors", nargs=-1, required=True)
def specificity(selectors: tuple[str, ...]) -> None:
    """Print the specificity of each SELECTOR, one per line."""
    for selector in selectors:
        click.echo(f"{compute_specificity(selector)}\t{selector}")
