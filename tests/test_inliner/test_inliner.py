"""Tests for the inlining pass and the CSSInliner session."""

import httpx
import pytest

from css_inliner import (
    CSSInliner,
    DeclarationParseError,
    InlinerConfig,
    InputError,
    WarningKind,
    inline,
)
from css_inliner.document import parse_document, serialize_tree


def _inline(html: str, css: str, **kwargs) -> str:
    tree = parse_document(html)
    inline(tree, css, **kwargs)
    return serialize_tree(tree)


PAGE = """<html><head><style>
p { color: red; font-size: 12px }
.x { color: blue }
a:hover { color: orange }
@media screen { p { color: purple } }
</style><style media="print">p { color: black }</style></head>
<body><p class="x">Hi</p><p>There</p><span>plain</span></body></html>"""


# ---------------------------------------------------------------------------
# inline()
# ---------------------------------------------------------------------------


class TestPrecedence:
    def test_class_beats_element(self):
        out = _inline('<p class="x">Hi</p>', "p { color: red } .x { color: blue }")
        assert out == '<p class="x" style="color: blue;">Hi</p>'

    def test_existing_inline_style_wins(self):
        out = _inline(
            '<p class="x" style="color:green">Hi</p>',
            "p { color: red } .x { color: blue } #y { color: pink }",
        )
        assert out == '<p class="x" style="color: green;">Hi</p>'

    def test_later_rule_wins_tie(self):
        out = _inline("<a>x</a>", "a { color: red } a { color: blue }")
        assert out == '<a style="color: blue;">x</a>'

    def test_declarations_combined_and_sorted(self):
        out = _inline('<p id="i">x</p>', "#i { margin: 0 } p { color: red; border: none }")
        assert out == '<p id="i" style="border: none; color: red; margin: 0;">x</p>'

    def test_selector_group(self):
        out = _inline("<h1>a</h1><h2>b</h2>", "h1, h2 { color: navy }")
        assert out == '<h1 style="color: navy;">a</h1><h2 style="color: navy;">b</h2>'


class TestExclusions:
    def test_hover_not_inlined(self):
        out = _inline("<a>x</a>", "a:hover { color: red }")
        assert out == "<a>x</a>"

    def test_unmatched_element_gets_no_style(self):
        tree = parse_document("<p>x</p><span>y</span>")
        inline(tree, "p { color: red }")
        assert "style" not in tree.find("span").attrs


class TestIdempotence:
    def test_inlining_twice_is_stable(self):
        css = "p { color: red; margin: 0 } .x { color: blue }"
        tree = parse_document('<p class="x" style="padding:1px">Hi</p><p>There</p>')
        inline(tree, css)
        once = serialize_tree(tree)
        inline(tree, css)
        assert serialize_tree(tree) == once


class TestStripAttrs:
    def test_ids_and_classes_removed_everywhere(self):
        out = _inline(
            '<div id="wrap" class="outer"><p class="x">Hi</p><span class="none">s</span></div>',
            ".x { color: blue }",
            strip_attrs=True,
        )
        assert out == '<div><p style="color: blue;">Hi</p><span>s</span></div>'


class TestWarnings:
    def test_returned_from_call(self):
        tree = parse_document("<p>x</p>")
        warnings = inline(tree, "p { color: red } table { color: blue } p { x } div")
        kinds = [w.kind for w in warnings]
        assert WarningKind.NO_MATCH in kinds
        assert WarningKind.CSS_SYNTAX in kinds

    def test_empty_stylesheet_still_collapses(self):
        out = _inline('<p style="color:red;color:blue">x</p>', "")
        assert out == '<p style="color: blue;">x</p>'


class TestErrors:
    def test_missing_tree(self):
        with pytest.raises(InputError):
            inline(None, "p { color: red }")

    def test_missing_stylesheet(self):
        with pytest.raises(InputError):
            inline(parse_document("<p></p>"), None)

    def test_malformed_inline_style_aborts(self):
        tree = parse_document('<p style="color green">x</p>')
        with pytest.raises(DeclarationParseError):
            inline(tree, "p { margin: 0 }")
        assert tree.find("p")["style"] == "color green"


# ---------------------------------------------------------------------------
# CSSInliner
# ---------------------------------------------------------------------------


class TestCSSInliner:
    def test_full_document(self):
        inliner = CSSInliner()
        inliner.read(PAGE)
        html = inliner.inlinify()
        assert '<p class="x" style="color: blue; font-size: 12px;">Hi</p>' in html
        assert '<p style="color: red; font-size: 12px;">There</p>' in html
        assert "<span>plain</span>" in html
        assert '<style media="print">p { color: black }</style>' in html
        assert "orange" not in html
        assert "purple" not in html

    def test_stylesheet_accessor(self):
        inliner = CSSInliner()
        inliner.read(PAGE)
        assert ".x { color: blue }" in inliner.stylesheet
        assert "color: black" not in inliner.stylesheet

    def test_strip_attrs_config(self):
        inliner = CSSInliner(InlinerConfig(strip_attrs=True))
        inliner.read(PAGE)
        html = inliner.inlinify()
        assert 'class="' not in html
        assert 'id="' not in html

    def test_inlinify_is_repeatable(self):
        inliner = CSSInliner()
        inliner.read(PAGE)
        assert inliner.inlinify() == inliner.inlinify()

    def test_warnings_cleared_each_call(self):
        inliner = CSSInliner()
        inliner.read("<style>p { color: red } table { margin: 0 }</style><p>x</p>")
        inliner.inlinify()
        assert len(inliner.warnings) == 1
        inliner.inlinify()
        assert len(inliner.warnings) == 1
        assert inliner.warnings[0].selector == "table"

    def test_no_warnings_before_inlinify(self):
        assert CSSInliner().warnings == []

    def test_inlinify_before_read(self):
        with pytest.raises(InputError):
            CSSInliner().inlinify()

    def test_read_requires_html(self):
        with pytest.raises(InputError):
            CSSInliner().read("")

    def test_read_file(self, tmp_path):
        path = tmp_path / "mail.html"
        path.write_text("<style>p { color: red }</style><p>x</p>", encoding="utf-8")
        inliner = CSSInliner()
        inliner.read_file(path)
        assert inliner.inlinify() == '<p style="color: red;">x</p>'

    def test_read_file_requires_name(self):
        with pytest.raises(InputError):
            CSSInliner().read_file(None)

    def test_fetch(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<style>p { color: red }</style><p>x</p>")

        client = httpx.Client(transport=httpx.MockTransport(handler))
        inliner = CSSInliner()
        inliner.fetch("https://example.com/mail.html", client=client)
        assert inliner.inlinify() == '<p style="color: red;">x</p>'


# ---------------------------------------------------------------------------
# Caller-supplied tree
# ---------------------------------------------------------------------------


class TestSuppliedTree:
    def test_read_fills_supplied_tree(self):
        tree = parse_document("<div>old</div>")
        inliner = CSSInliner(InlinerConfig(), tree=tree)
        inliner.read("<style>p { color: red }</style><p>x</p>")
        assert inliner.tree is tree
        assert serialize_tree(tree) == "<p>x</p>"
        assert inliner.stylesheet == "p { color: red }"

    def test_inlinify_writes_into_supplied_tree(self):
        tree = parse_document("<p></p>")
        inliner = CSSInliner(tree=tree)
        inliner.read("<style>.x { margin: 0 }</style><p class='x'>x</p>")
        html = inliner.inlinify()
        assert html == '<p class="x" style="margin: 0;">x</p>'
        assert tree.find("p")["style"] == "margin: 0;"

    def test_supplied_tree_still_requires_read(self):
        with pytest.raises(InputError):
            CSSInliner(tree=parse_document("<p></p>")).inlinify()

    def test_tree_built_when_not_supplied(self):
        inliner = CSSInliner()
        assert inliner.tree is None
        inliner.read("<p>x</p>")
        assert inliner.tree.find("p") is not None


# ---------------------------------------------------------------------------
# Known limitations
# ---------------------------------------------------------------------------


class TestSemicolonInValue:
    def test_quoted_semicolon_is_split(self):
        # declarations are split on every ";", quoted or not
        tree = parse_document("<p>x</p>")
        warnings = inline(tree, 'p { content: "a;b" }')
        assert tree.find("p")["style"] == 'content: "a;'
        assert [w.kind for w in warnings] == [WarningKind.INVALID_STYLE]
