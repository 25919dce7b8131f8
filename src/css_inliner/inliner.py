"""Inliner: moves ``<style>`` rules onto the elements they apply to."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx
from bs4 import BeautifulSoup, Tag

from css_inliner.cascade.collapser import collapse_inline_styles
from css_inliner.cascade.matcher import collect_matches
from css_inliner.cascade.merger import merge_element_style
from css_inliner.config import InlinerConfig
from css_inliner.document import parse_document, serialize_tree
from css_inliner.errors import InputError
from css_inliner.fetch import fetch_document
from css_inliner.model.diagnostic import Diagnostic, WarningKind
from css_inliner.model.match import InlineContext
from css_inliner.stylesheet.extractor import extract_stylesheet
from css_inliner.stylesheet.parser import parse_stylesheet

__all__ = ["inline", "CSSInliner"]

logger = logging.getLogger(__name__)


def inline(
    tree: Tag | None,
    stylesheet_text: str | None,
    *,
    strip_attrs: bool = False,
) -> list[Diagnostic]:
    """Inline *stylesheet_text* into *tree* in place.

    Every element matched by a rule gets a ``style`` attribute holding the
    resolved cascade, existing inline declarations taking precedence. All
    ``style`` attributes are then collapsed and, with *strip_attrs*, ``id``
    and ``class`` attributes are removed.

    Returns the recoverable warnings of this pass. A malformed existing
    ``style`` attribute raises :class:`DeclarationParseError` and leaves the
    tree partially updated.
    """
    if tree is None:
        raise InputError("A document tree is required for inlining")
    if stylesheet_text is None:
        raise InputError("Stylesheet text is required for inlining")

    context = InlineContext()
    stylesheet = parse_stylesheet(stylesheet_text)
    for error in stylesheet.errors:
        logger.warning("CSS syntax error: %s", error)
        context.warn(WarningKind.CSS_SYNTAX, error)

    matched = collect_matches(stylesheet, tree, context)
    for entry in matched.values():
        merge_element_style(entry.element, entry.records)

    collapse_inline_styles(tree, strip_attrs=strip_attrs, context=context)

    logger.info(
        "Inlined %d rule(s) into %d element(s) with %d warning(s)",
        len(stylesheet.rules),
        len(matched),
        len(context.warnings),
    )
    return context.warnings


class CSSInliner:
    """Read an HTML document, then render it with its stylesheet inlined.

    Usage::

        inliner = CSSInliner(InlinerConfig(strip_attrs=True))
        inliner.read_file("newsletter.html")
        html = inliner.inlinify()

    A caller-owned *tree* may be supplied; every :meth:`read` then replaces
    its contents instead of building a new document.
    """

    def __init__(
        self,
        config: InlinerConfig | None = None,
        tree: BeautifulSoup | None = None,
    ) -> None:
        self.config = config or InlinerConfig()
        self._tree = tree
        self._html: str | None = None
        self._stylesheet: str | None = None
        self._warnings: list[Diagnostic] = []

    # --- reading --------------------------------------------------------------

    def read(self, html: str) -> None:
        """Parse *html* and pull its screen ``<style>`` blocks out of the tree."""
        if not html:
            raise InputError("You must pass in html data to read")

        parsed = parse_document(html, self.config.parser)
        if self._tree is None:
            self._tree = parsed
        else:
            # move the parsed nodes into the caller's tree instance
            self._tree.clear()
            self._tree.extend(list(parsed.contents))
        self._stylesheet = extract_stylesheet(self._tree)
        self._html = html

    def read_file(self, filename: str | Path | None) -> None:
        """Read an HTML file and pass its contents to :meth:`read`."""
        if not filename:
            raise InputError("You must pass in a filename to read")
        self.read(Path(filename).read_text(encoding="utf-8"))

    def fetch(self, url: str, client: httpx.Client | None = None) -> None:
        """Retrieve *url* and pass the document to :meth:`read`."""
        html = fetch_document(
            url,
            timeout=self.config.fetch_timeout,
            user_agent=self.config.user_agent,
            client=client,
        )
        self.read(html)

    # --- rendering ------------------------------------------------------------

    def inlinify(self) -> str:
        """Inline the stored stylesheet and return the resulting markup."""
        if self._html is None or self._tree is None:
            raise InputError("You must read in your content before inlinifying")

        self._warnings = []
        self._warnings = inline(
            self._tree, self._stylesheet, strip_attrs=self.config.strip_attrs
        )
        return serialize_tree(self._tree, self.config.formatter)

    # --- accessors ------------------------------------------------------------

    @property
    def stylesheet(self) -> str | None:
        """The CSS extracted by the last :meth:`read`."""
        return self._stylesheet

    @property
    def tree(self) -> BeautifulSoup | None:
        return self._tree

    @property
    def warnings(self) -> list[Diagnostic]:
        """Warnings from the most recent :meth:`inlinify` call."""
        return list(self._warnings)

    def __repr__(self) -> str:
        return f"CSSInliner(read={self._html is not None}, warnings={len(self._warnings)})"
