"""Selector specificity as a single weighted integer.

CSS 2.1 (http://www.w3.org/TR/CSS21/cascade.html#specificity) ranks a
selector by three counts:

    a = number of ID selectors
    b = number of class and attribute selectors
    c = number of element names

and compares them as a-b-c in a large base. Here the three counts are
flattened into ``100*a + 10*b + c``:

    *               ->   0
    li              ->   1
    ul li           ->   2
    ul ol+li        ->   3
    h1 + *[rel=up]  ->  11
    ul ol li.red    ->  13
    li.red.level    ->  21
    #x34y           -> 100

The weights only stay exact while each tier has fewer than ten members; ten
classes outweigh an ID. Counting is textual, so a ``.`` inside an attribute
value (``[class=".foo"]``) counts as a class as well.
"""

from __future__ import annotations

import re

__all__ = ["compute_specificity"]

_ID_RE = re.compile(r"#\S+")
_CLASS_RE = re.compile(r"\.")
_ATTRIBUTE_RE = re.compile(r"\[[^\]]+\]")
# An element name opens a compound: at the start or after whitespace/combinator.
_ELEMENT_RE = re.compile(r"(?:^|(?<=[\s>+~]))[A-Za-z][\w-]*")


def compute_specificity(selector: str) -> int:
    """Return the flattened specificity of *selector*, always ``>= 0``."""
    specificity = 0

    # 1 point for each element name (attribute contents can't hold one)
    specificity += len(_ELEMENT_RE.findall(_ATTRIBUTE_RE.sub("", selector.strip())))

    # 10 points for each class or attribute selector
    specificity += 10 * len(_CLASS_RE.findall(selector))
    specificity += 10 * len(_ATTRIBUTE_RE.findall(selector))

    # 100 points for each id selector
    specificity += 100 * len(_ID_RE.findall(selector))

    return specificity
