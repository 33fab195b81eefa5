"""Tests rich text — ProseMirror JSON → HTML (noeuds, marks, liens, échappement)."""
import pytest

from magazine.models import DocumentNode
from magazine.renderer.richtext import render_rich_text, safe_href

from conftest import para, rich, text


def node(data):
    return DocumentNode.model_validate(data)


# ── Noeuds ─────────────────────────────────────────────────────────────────

class TestNodes:
    def test_none(self):
        assert render_rich_text(None) == ""

    def test_doc_paragraph(self):
        assert render_rich_text(node(rich("Hello"))) == "<p>Hello</p>"

    def test_heading_level(self):
        h = node({"type": "heading", "attrs": {"level": 3}, "content": [text("Title")]})
        assert render_rich_text(h) == "<h3>Title</h3>"

    @pytest.mark.parametrize("level,tag", [(None, "h1"), (9, "h6"), (0, "h1"), ("2", "h2")])
    def test_heading_level_clamped(self, level, tag):
        h = node({"type": "heading", "attrs": {"level": level}, "content": [text("T")]})
        assert render_rich_text(h).startswith(f"<{tag}>")

    def test_lists(self):
        bullet = node({"type": "bulletList", "content": [
            {"type": "listItem", "content": [para("a")]},
            {"type": "listItem", "content": [para("b")]},
        ]})
        assert render_rich_text(bullet) == "<ul><li><p>a</p></li><li><p>b</p></li></ul>"

    def test_ordered_list_start(self):
        ol = node({"type": "orderedList", "attrs": {"start": 3}, "content": []})
        assert render_rich_text(ol) == '<ol start="3"></ol>'
        ol1 = node({"type": "orderedList", "attrs": {"start": 1}, "content": []})
        assert render_rich_text(ol1) == "<ol></ol>"

    def test_blockquote_and_rules(self):
        bq = node({"type": "blockquote", "content": [
            {"type": "paragraph", "content": [text("a"), {"type": "hardBreak"}, text("b")]},
        ]})
        assert render_rich_text(bq) == "<blockquote><p>a<br>b</p></blockquote>"
        assert render_rich_text(node({"type": "horizontalRule"})) == "<hr>"

    def test_code_block_language(self):
        cb = node({"type": "codeBlock", "attrs": {"language": "python"}, "content": [text("x < 1")]})
        assert render_rich_text(cb) == '<pre><code class="language-python">x &lt; 1</code></pre>'

    def test_unknown_node_renders_children(self):
        custom = node({"type": "callout", "content": [text("inside")]})
        assert render_rich_text(custom) == "inside"

    def test_relation_placeholder_renders_nothing(self):
        rel = node({"type": "relation-block", "attrs": {"id": "1", "collection": "block_code"}})
        assert render_rich_text(rel) == ""


# ── Marks ──────────────────────────────────────────────────────────────────

class TestMarks:
    def test_text_escaped(self):
        assert render_rich_text(node(text("<script>"))) == "&lt;script&gt;"

    def test_bold_italic_order(self):
        t = node(text("x", "bold", "italic"))
        assert render_rich_text(t) == "<strong><em>x</em></strong>"

    def test_unknown_mark_ignored(self):
        assert render_rich_text(node(text("x", "highlight"))) == "x"

    def test_link(self):
        t = node(text("site", {"type": "link", "attrs": {"href": "https://example.com"}}))
        html = render_rich_text(t)
        assert 'href="https://example.com"' in html
        assert 'rel="noopener noreferrer nofollow"' in html
        assert 'target="_blank"' in html
        assert html.endswith(">site</a>")

    def test_javascript_link_neutralised(self):
        t = node(text("x", {"type": "link", "attrs": {"href": "javascript:alert(1)"}}))
        assert 'href="#"' in render_rich_text(t)


class TestSafeHref:
    @pytest.mark.parametrize("href,expected", [
        ("https://a.b/c", "https://a.b/c"),
        ("HTTP://A.B",    "HTTP://A.B"),
        ("mailto:x@y.z",  "mailto:x@y.z"),
        ("/magazine",     "/magazine"),
        ("#top",          "#top"),
        ("page/2",        "page/2"),
        ("javascript:x",  "#"),
        ("data:text/html,x", "#"),
        (None,            "#"),
        ("",              "#"),
    ])
    def test_schemes(self, href, expected):
        assert safe_href(href) == expected
