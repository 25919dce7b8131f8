"""CLI command: css-inliner inline -- inline the stylesheet of an HTML document."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from css_inliner.config import InlinerConfig
from css_inliner.errors import InlinerError
from css_inliner.inliner import CSSInliner


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


@click.command()
@click.argument("source")
@click.option("-o", "--output", default=None, help="Write the result here instead of stdout")
@click.option("--strip-attrs", is_flag=True, help="Remove id and class attributes")
@click.option(
    "--formatter",
    type=click.Choice(["minimal", "html", "html5"]),
    default="minimal",
    help="Entity substitution used when writing markup",
)
@click.option("--timeout", default=10.0, type=float, help="Timeout in seconds for URL sources")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def inline(
    source: str,
    output: str | None,
    strip_attrs: bool,
    formatter: str,
    timeout: float,
    verbose: bool,
) -> None:
    """Inline the <style> blocks of SOURCE, an HTML file path or http(s) URL."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = InlinerConfig(strip_attrs=strip_attrs, formatter=formatter, fetch_timeout=timeout)
    inliner = CSSInliner(config)

    try:
        if _is_url(source):
            inliner.fetch(source)
        else:
            path = Path(source)
            if not path.is_file():
                click.echo(f"Error: no such file: {source}", err=True)
                sys.exit(1)
            inliner.read_file(path)
        html = inliner.inlinify()
    except InlinerError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for warning in inliner.warnings:
        click.echo(str(warning), err=True)

    if output:
        Path(output).write_text(html, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(html)
