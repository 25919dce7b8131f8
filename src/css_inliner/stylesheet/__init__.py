from css_inliner.stylesheet.extractor import extract_stylesheet
from css_inliner.stylesheet.model import Stylesheet, StyleRule
from css_inliner.stylesheet.parser import parse_stylesheet

__all__ = ["extract_stylesheet", "parse_stylesheet", "Stylesheet", "StyleRule"]
