from css_inliner.cascade.collapser import collapse_inline_styles, collapse_style
from css_inliner.cascade.declarations import render_style, split_style
from css_inliner.cascade.matcher import collect_matches, is_inlineable
from css_inliner.cascade.merger import merge_declarations, merge_element_style
from css_inliner.cascade.specificity import compute_specificity

__all__ = [
    "collapse_inline_styles",
    "collapse_style",
    "collect_matches",
    "compute_specificity",
    "is_inlineable",
    "merge_declarations",
    "merge_element_style",
    "render_style",
    "split_style",
]
