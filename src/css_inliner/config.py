from __future__ import annotations

from dataclasses import dataclass

from css_inliner import __version__


@dataclass(frozen=True)
class InlinerConfig:
    strip_attrs: bool = False  # drop id/class from every element after inlining
    parser: str = "html.parser"  # BeautifulSoup tree builder; must keep comments
    formatter: str = "minimal"  # BeautifulSoup output formatter
    fetch_timeout: float = 10.0
    user_agent: str = f"css-inliner/{__version__}"
