"""css_inliner - convert <style> blocks into inline style attributes for email."""

__version__ = "0.1.0"

from css_inliner.cascade import compute_specificity, render_style, split_style  # noqa: E402
from css_inliner.config import InlinerConfig  # noqa: E402
from css_inliner.document import query  # noqa: E402
from css_inliner.errors import (  # noqa: E402
    DeclarationParseError,
    FetchError,
    FetchTimeoutError,
    InlinerError,
    InputError,
)
from css_inliner.inliner import CSSInliner, inline  # noqa: E402
from css_inliner.model import Diagnostic, WarningKind  # noqa: E402
from css_inliner.stylesheet import extract_stylesheet, parse_stylesheet  # noqa: E402

__all__ = [
    "__version__",
    "CSSInliner",
    "InlinerConfig",
    "inline",
    "extract_stylesheet",
    "parse_stylesheet",
    "compute_specificity",
    "query",
    "split_style",
    "render_style",
    "Diagnostic",
    "WarningKind",
    "InlinerError",
    "InputError",
    "DeclarationParseError",
    "FetchError",
    "FetchTimeoutError",
]
