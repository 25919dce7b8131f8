"""Stylesheet extraction: pull screen ``<style>`` blocks out of a document tree."""

from __future__ import annotations

import logging
import re

from bs4 import NavigableString, Tag

from css_inliner.errors import InputError

__all__ = ["extract_stylesheet", "applies_to_screen"]

logger = logging.getLogger(__name__)

_SCREEN_MEDIA_RE = re.compile(r"\b(?:all|screen)\b", re.IGNORECASE)
_COMMENT_MARKERS_RE = re.compile(r"<!--|-->")


def applies_to_screen(element: Tag) -> bool:
    """True for a ``media`` attribute that is absent, empty, ``all`` or ``screen``."""
    media = element.get("media")
    if not media:
        return True
    return _SCREEN_MEDIA_RE.search(media) is not None


def _text_of(element: Tag) -> str:
    text = "".join(str(child) for child in element.contents if isinstance(child, NavigableString))
    return _COMMENT_MARKERS_RE.sub("", text)


def _extract(content: list, chunks: list[str]) -> None:
    for node in list(content):
        if not isinstance(node, Tag):
            continue

        if node.name == "style" and applies_to_screen(node):
            chunks.append(_text_of(node))
            node.decompose()
            continue

        _extract(node.contents, chunks)


def extract_stylesheet(tree: Tag | None) -> str:
    """Remove every screen ``<style>`` block from *tree* and return their CSS.

    Blocks are concatenated in document order with HTML comment markers
    stripped. Blocks for other media (``media="print"``) are left in place.
    The tree is modified in place.
    """
    if tree is None:
        raise InputError("A document tree is required to extract a stylesheet")

    chunks: list[str] = []
    _extract(tree.contents, chunks)
    logger.debug("Extracted %d style block(s)", len(chunks))
    return "".join(chunks)
