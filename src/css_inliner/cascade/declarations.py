"""Conversion between ``style`` attribute text and property dictionaries."""

from __future__ import annotations

import re
from collections.abc import Mapping

from css_inliner.errors import DeclarationParseError

__all__ = ["split_style", "render_style"]

# Matches a single declaration: name: value
_DECLARATION_RE = re.compile(
    r"""
    ^\s*
    (?P<name>[\w._-]+)      # property name
    \s*:\s*                 # colon separator
    (?P<value>.*?)          # value, surrounding whitespace trimmed
    \s*$
    """,
    re.VERBOSE | re.DOTALL,
)


def split_style(style: str) -> dict[str, str]:
    """Parse ``style`` attribute text into a ``{property: value}`` dict.

    Blank segments are ignored and property names are lower-cased. Any other
    segment that is not ``name: value`` raises
    :class:`~css_inliner.errors.DeclarationParseError`.
    """
    props: dict[str, str] = {}
    for segment in style.split(";"):
        if not segment.strip():
            continue
        match = _DECLARATION_RE.match(segment)
        if match is None:
            raise DeclarationParseError(
                f"Invalid or unexpected property {segment.strip()!r} in style {style!r}",
                style=style,
                segment=segment,
            )
        props[match.group("name").lower()] = match.group("value")
    return props


def render_style(props: Mapping[str, str]) -> str:
    """Render *props* as ``name:value;`` pairs in mapping order."""
    return "".join(f"{name}:{value};" for name, value in props.items())
