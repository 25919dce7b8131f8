from css_inliner.model.diagnostic import Diagnostic, WarningKind
from css_inliner.model.match import ElementMatches, ElementMatchSet, InlineContext, MatchRecord

__all__ = [
    "Diagnostic",
    "WarningKind",
    "ElementMatches",
    "ElementMatchSet",
    "InlineContext",
    "MatchRecord",
]
