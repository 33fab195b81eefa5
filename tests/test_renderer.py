"""
Tests renderers — blocs custom, slots de mise en page, coquille HTML.
"""
import pytest

from magazine.blocks import AdvertisingBlock, CodeBlock, ImageBlock, LeadBlock, QuoteBlock
from magazine.config import Settings, asset_url
from magazine.registry import render_block
from magazine.renderer.blocks import highlight_code
from magazine.renderer.html import node_layout, render_content, render_document, render_node
from magazine.resolver import ContentNode, UnresolvedNode

from conftest import advertising_item, doc, image_item, para, quote_item, rich


def image(**kw):
    return ImageBlock(id="1", fields=image_item(**kw))


def quote(**kw):
    return QuoteBlock(id="2", fields=quote_item(**kw))


# ── Asset URL ──────────────────────────────────────────────────────────────

class TestAssetUrl:
    def test_base(self, settings):
        assert asset_url(settings, "abc") == "https://cms.example.com/assets/abc"

    def test_trailing_slash(self):
        assert asset_url(Settings(directus_url="https://cms.example.com/"), "abc") == \
            "https://cms.example.com/assets/abc"


# ── Image ──────────────────────────────────────────────────────────────────

class TestImage:
    def test_basic(self, settings):
        html = render_block(image(), settings)
        assert 'class="picture picture--content"' in html
        assert 'src="https://cms.example.com/assets/img-1"' in html
        assert 'width="800" height="600"' in html
        assert "picture__caption" not in html

    def test_options(self, settings):
        html = render_block(image(padding=True, stretch=True, backgroundColor="#fff",
                                  width="screen", caption=rich("Credit")), settings)
        assert "picture__wrapper--padding" in html
        assert "picture__image--stretch" in html
        assert 'style="background-color:#fff"' in html
        assert "picture--screen" in html
        assert '<div class="picture__caption"><p>Credit</p></div>' in html

    def test_layout_follows_width(self):
        assert image().layout == "content"
        assert image(width="screen").layout == "full_bleed"


# ── Quote ──────────────────────────────────────────────────────────────────

class TestQuote:
    def test_medium(self, settings):
        html = render_block(quote(), settings)
        assert 'class="quote quote--medium"' in html
        assert '<blockquote class="quote__text"><p>To be or not to be</p></blockquote>' in html
        assert '<div class="quote__author"><p>Hamlet</p></div>' in html
        assert "quote__photo" not in html
        assert "quote__duty" not in html

    def test_portrait_when_variant_and_photo(self, settings):
        b = quote(type="with photo", photo={"id": "p-1"}, authorDuty=rich("Prince"))
        html = render_block(b, settings)
        assert b.has_portrait
        assert "quote--with-photo" in html
        assert 'src="https://cms.example.com/assets/p-1"' in html
        assert '<div class="quote__duty"><p>Prince</p></div>' in html

    def test_no_portrait_without_photo(self, settings):
        b = quote(type="with photo")
        assert not b.has_portrait
        assert "quote__photo" not in render_block(b, settings)

    def test_no_portrait_for_other_variant(self, settings):
        b = quote(type="big", photo={"id": "p-1"})
        assert not b.has_portrait
        assert "assets/p-1" not in render_block(b, settings)

    def test_screen_width_full_bleed(self):
        assert quote(width="screen").layout == "full_bleed"

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError):
            quote(type="huge")


# ── Code / Lead / Advertising ──────────────────────────────────────────────

class TestCode:
    def test_html_escaped(self, settings):
        html = render_block(CodeBlock(id="3", fields={"code": "<b>&</b>"}), settings)
        assert "<b>" not in html
        assert "&lt;" in html and "&amp;" in html
        assert '<code class="hljs">' in html

    def test_highlight_keeps_source_text(self):
        out = highlight_code("def f(x):\n    return x\n")
        assert "def" in out and "return" in out

    def test_always_full_bleed(self):
        assert CodeBlock(id="3", fields={"code": ""}).layout == "full_bleed"


class TestLead:
    def test_render(self, settings):
        b = LeadBlock(id="4", fields={"text": rich("Intro")})
        assert render_block(b, settings) == '<div class="lead"><p>Intro</p></div>'
        assert b.layout == "content"


class TestAdvertising:
    def test_render(self, settings):
        b = AdvertisingBlock(id="5", fields=advertising_item())
        html = render_block(b, settings)
        assert '<div class="advertising__title">Join the course</div>' in html
        assert 'href="https://school.example.com"' in html
        assert ">Sign up</a>" in html
        assert "Six weeks of practice" in html
        assert b.layout == "full_bleed"

    def test_title_required(self):
        with pytest.raises(ValueError):
            AdvertisingBlock(id="5", fields={"content": "x"})

    def test_escapes_text(self, settings):
        b = AdvertisingBlock(id="5", fields=advertising_item(title="<i>x</i>", linkUrl="javascript:1"))
        html = render_block(b, settings)
        assert "&lt;i&gt;" in html
        assert 'href="#"' in html


# ── Slots / dispatch ───────────────────────────────────────────────────────

class TestContentSlots:
    def test_slots(self, settings):
        content = ContentNode(node=doc(para("Body")).children[0])
        nodes = [content, image(width="screen"), CodeBlock(id="3", fields={"code": "x"}), image()]
        html = render_content(nodes, settings)
        assert html.count('<div class="article-container">') == 2
        assert html.count('<div class="js-fullWidthSection">') == 2
        assert html.index("Body") < html.index("js-fullWidthSection")

    def test_unresolved_produces_nothing(self, settings):
        gap = UnresolvedNode(position=0, block_id="9", collection="block_quote", reason="missing_record")
        assert render_node(gap, settings) == ""
        assert render_content([gap], settings) == ""
        assert node_layout(gap) == "content"

    def test_unknown_node_type(self, settings):
        with pytest.raises(TypeError):
            render_node("oops", settings)


class TestDocument:
    def test_shell(self, settings):
        html = render_document("Hello", "<main>x</main>", settings, description="Desc")
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Hello — Magazine</title>" in html
        assert '<meta name="description" content="Desc">' in html
        assert '<a href="/magazine/tags">Tags</a>' in html
        assert ".hljs" in html

    def test_title_escaped(self, settings):
        assert "<title>&lt;b&gt; — Magazine</title>" in render_document("<b>", "", settings)
