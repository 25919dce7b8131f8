"""Inline style collapsing: dedupe and normalize every ``style`` attribute."""

from __future__ import annotations

import logging

from bs4 import Tag

from css_inliner.model.diagnostic import WarningKind
from css_inliner.model.match import InlineContext

__all__ = ["collapse_style", "collapse_inline_styles"]

logger = logging.getLogger(__name__)

_STRIPPED_ATTRS = ("id", "class")


def _pairs(style: str) -> tuple[dict[str, str], list[str]]:
    props: dict[str, str] = {}
    dropped: list[str] = []
    for pair in style.split(";"):
        if not pair.strip():
            continue
        name, sep, value = pair.partition(":")
        if not sep:
            dropped.append(pair.strip())
            continue
        props[name.strip()] = value.strip()
    return props, dropped


def _render(props: dict[str, str]) -> str:
    # sort for predictable output
    return "".join(f"{name}: {props[name]}; " for name in sorted(props)).rstrip()


def collapse_style(style: str) -> str:
    """Collapse *style* into ``name: value;`` pairs sorted by name.

    When a property appears more than once the last value wins. Segments
    without a ``:`` are dropped.
    """
    props, _ = _pairs(style)
    return _render(props)


def _collapse(content: list, strip_attrs: bool, context: InlineContext | None) -> None:
    for node in content:
        if not isinstance(node, Tag):
            continue

        style = node.get("style")
        if style:
            props, dropped = _pairs(style)
            for segment in dropped:
                logger.warning("Dropping malformed declaration %r from style %r", segment, style)
                if context is not None:
                    context.warn(
                        WarningKind.INVALID_STYLE,
                        f"Dropped malformed declaration {segment!r} from <{node.name}>",
                    )
            node["style"] = _render(props)

        if strip_attrs:
            for attr in _STRIPPED_ATTRS:
                if attr in node.attrs:
                    del node[attr]

        _collapse(node.contents, strip_attrs, context)


def collapse_inline_styles(
    tree: Tag, strip_attrs: bool = False, context: InlineContext | None = None
) -> None:
    """Collapse the ``style`` attribute of every element under *tree* in place.

    With *strip_attrs*, ``id`` and ``class`` are removed from every element.
    Dropped declarations are recorded on *context* when one is given.
    """
    _collapse(tree.contents, strip_attrs, context)
