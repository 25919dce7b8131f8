"""Document tree adapter around BeautifulSoup and soupsieve.

The cascade code only needs a handful of capabilities from the tree: parse
markup (keeping comments), answer selector queries in document order, give
every element a stable address, and serialize the result back to markup.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

__all__ = [
    "parse_document",
    "query",
    "element_address",
    "address_index",
    "serialize_tree",
]


def parse_document(html: str, parser: str = "html.parser") -> BeautifulSoup:
    """Build a mutable element tree from *html*."""
    return BeautifulSoup(html, parser)


def query(tree: Tag, selector: str) -> list[Tag]:
    """Return the elements under *tree* matching *selector*, in document order.

    Selector syntax errors from soupsieve propagate to the caller.
    """
    return tree.select(selector)


def element_address(element: Tag) -> str:
    """Return a dotted child-index path from the root to *element*.

    The root itself is ``"0"``; its third child is ``"0.2"``, and so on.
    Sibling positions are found by identity, so structurally equal elements
    still get distinct addresses.
    """
    parts: list[str] = []
    node = element
    while node.parent is not None:
        parts.append(str(node.parent.index(node)))
        node = node.parent
    parts.append("0")
    return ".".join(reversed(parts))


def address_index(tree: Tag) -> dict[int, str]:
    """Map ``id(element)`` to the address of every element under *tree*.

    One walk over the tree; the addresses equal :func:`element_address`.
    The map is only valid while *tree* is alive and unmodified.
    """
    index: dict[int, str] = {}
    stack: list[tuple[Tag, str]] = [(tree, element_address(tree))]
    while stack:
        node, address = stack.pop()
        index[id(node)] = address
        for position, child in enumerate(node.contents):
            if isinstance(child, Tag):
                stack.append((child, f"{address}.{position}"))
    return index


def serialize_tree(tree: BeautifulSoup, formatter: str = "minimal") -> str:
    """Render *tree* back to markup, keeping attributes verbatim."""
    return tree.decode(formatter=formatter)
