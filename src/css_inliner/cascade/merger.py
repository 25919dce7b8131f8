"""Style merging: fold matched rules and existing inline styles into one."""

from __future__ import annotations

from collections.abc import Iterable

from bs4 import Tag

from css_inliner.cascade.declarations import render_style, split_style
from css_inliner.model.match import MatchRecord

__all__ = ["merge_declarations", "merge_element_style"]


def merge_declarations(
    records: Iterable[MatchRecord], inline_style: str | None = None
) -> dict[str, str]:
    """Resolve the cascade for one element.

    Records are applied lightest first (specificity, then position) so that
    heavier and later rules override. Declarations from *inline_style* are
    applied last and always win.
    """
    merged: dict[str, str] = {}
    for record in sorted(records, key=lambda r: (r.specificity, r.position)):
        merged.update(record.declarations)

    if inline_style is not None:
        merged.update(split_style(inline_style))
    return merged


def merge_element_style(element: Tag, records: Iterable[MatchRecord]) -> None:
    """Write the merged style of *records* onto *element*'s ``style`` attribute.

    A malformed existing ``style`` raises before the element is modified.
    """
    merged = merge_declarations(records, element.get("style"))
    element["style"] = render_style(merged)
