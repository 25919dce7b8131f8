"""Stylesheet parser built on tinycss2.

Example:
    h1, h2 { color: navy; margin: 0 }
    .note { color: red !important; }
    @media print { p { display: none } }

parses into four rules: ``h1`` and ``h2`` (sharing one declaration block),
``.note``, and the at-rule ``@media print`` with no declarations.
"""

from __future__ import annotations

import re

import tinycss2

from css_inliner.stylesheet.model import StyleRule, Stylesheet

__all__ = ["parse_stylesheet"]

_WHITESPACE_RE = re.compile(r"\s+")


def _serialize(tokens) -> str:
    return _WHITESPACE_RE.sub(" ", tinycss2.serialize(tokens)).strip()


def _format_error(error) -> str:
    return f"line {error.source_line}, column {error.source_column}: {error.message}"


def _split_selectors(prelude) -> list[str]:
    """Split a rule prelude on top-level commas into individual selectors."""
    groups: list[list] = [[]]
    for token in prelude:
        if token.type == "literal" and token.value == ",":
            groups.append([])
        else:
            groups[-1].append(token)
    return [s for s in (_serialize(group) for group in groups) if s]


def _parse_declarations(content, errors: list[str]) -> dict[str, str]:
    """Parse the body of a rule block into a property dictionary."""
    props: dict[str, str] = {}
    for item in tinycss2.parse_declaration_list(
        content, skip_comments=True, skip_whitespace=True
    ):
        if item.type == "error":
            errors.append(_format_error(item))
            continue
        if item.type != "declaration":
            continue
        value = _serialize(item.value)
        if item.important:
            value += " !important"
        props[item.lower_name] = value
    return props


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS *source* into a Stylesheet.

    Returns one rule per selector, in source order. Repeated selectors are
    kept as separate rules so that later ones can win ties.
    """
    rules: list[StyleRule] = []
    errors: list[str] = []
    for node in tinycss2.parse_stylesheet(
        source, skip_comments=True, skip_whitespace=True
    ):
        if node.type == "error":
            errors.append(_format_error(node))
        elif node.type == "at-rule":
            selector = f"@{node.at_keyword} {_serialize(node.prelude)}".strip()
            rules.append(StyleRule(selector=selector, declarations={}))
        elif node.type == "qualified-rule":
            declarations = _parse_declarations(node.content, errors)
            for selector in _split_selectors(node.prelude):
                rules.append(StyleRule(selector=selector, declarations=declarations))
    return Stylesheet(rules=rules, errors=errors)
