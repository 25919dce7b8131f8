"""Rule matching: find the elements each stylesheet rule applies to."""

from __future__ import annotations

import logging
import re

from bs4 import Tag
from soupsieve import SelectorSyntaxError

from css_inliner.cascade.specificity import compute_specificity
from css_inliner.document import address_index, query
from css_inliner.model.diagnostic import WarningKind
from css_inliner.model.match import ElementMatches, ElementMatchSet, InlineContext, MatchRecord
from css_inliner.stylesheet.model import Stylesheet

__all__ = ["collect_matches", "is_inlineable"]

logger = logging.getLogger(__name__)

# Interaction states and pseudo-elements have no static inline equivalent.
_EXCLUDED_PSEUDO_RE = re.compile(
    r"::?(?:active|focus|hover|link|visited|after|before|selection|target"
    r"|first-line|first-letter)\b",
    re.IGNORECASE,
)


def is_inlineable(selector: str) -> bool:
    """False for at-rules and selectors using excluded pseudo-classes/elements."""
    if selector.startswith("@"):
        return False
    return _EXCLUDED_PSEUDO_RE.search(selector) is None


def collect_matches(
    stylesheet: Stylesheet, tree: Tag, context: InlineContext
) -> ElementMatchSet:
    """Match every rule of *stylesheet* against *tree*.

    Returns the matched elements keyed by address, each with its
    MatchRecords in discovery order. Positions are taken from *context*, and
    selectors that cannot be evaluated or match nothing are recorded there as
    warnings.
    """
    matched: ElementMatchSet = {}
    addresses: dict[int, str] | None = None

    for rule in stylesheet.rules:
        selector = rule.selector
        if not is_inlineable(selector):
            logger.debug("Skipping non-inlineable selector %r", selector)
            continue

        try:
            elements = query(tree, selector)
        except (SelectorSyntaxError, NotImplementedError) as exc:
            logger.warning("Cannot evaluate selector %r: %s", selector, exc)
            context.warn(WarningKind.INVALID_SELECTOR, str(exc), selector=selector)
            continue

        if not elements:
            logger.debug("Selector %r matched no elements", selector)
            context.warn(WarningKind.NO_MATCH, "Selector matched no elements", selector=selector)
            continue

        if addresses is None:
            # one walk per pass; the tree is not modified while matching
            addresses = address_index(tree)

        specificity = compute_specificity(selector)
        for element in elements:
            address = addresses[id(element)]
            entry = matched.get(address)
            if entry is None:
                entry = matched[address] = ElementMatches(element=element)
            entry.records.append(
                MatchRecord(
                    selector=selector,
                    specificity=specificity,
                    position=context.next_position(),
                    declarations=rule.declarations,
                )
            )

    return matched
