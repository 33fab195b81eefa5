"""
Renderers blocs custom — un renderer par collection, fonctions pures.
Signature commune : (bloc, settings) → HTML.
"""
from html import escape

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import guess_lexer
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from ..blocks import AdvertisingBlock, CodeBlock, ImageBlock, LeadBlock, QuoteBlock
from ..config import Settings, asset_url
from .richtext import render_rich_text, safe_href

_CODE_FORMATTER = HtmlFormatter(nowrap=True)


def render_lead_block(b: LeadBlock, settings: Settings) -> str:
    return f'<div class="lead">{render_rich_text(b.fields.text)}</div>'


def render_image_block(b: ImageBlock, settings: Settings) -> str:
    f = b.fields

    wrapper_cls = ["picture__wrapper"]
    if f.padding:
        wrapper_cls.append("picture__wrapper--padding")
    img_cls = ["picture__image"]
    if f.stretch:
        img_cls.append("picture__image--stretch")

    bg   = f' style="background-color:{escape(f.background_color)}"' if f.background_color else ""
    dims = ""
    if f.image.width and f.image.height:
        dims = f' width="{f.image.width}" height="{f.image.height}"'

    caption = ""
    if f.caption is not None:
        caption = f'\n  <div class="picture__caption">{render_rich_text(f.caption)}</div>'

    src = escape(asset_url(settings, f.image.id))
    return f"""<figure class="picture picture--{f.width}">
  <div class="{" ".join(wrapper_cls)}"{bg}>
    <img class="{" ".join(img_cls)}" src="{src}" alt=""{dims} loading="lazy">
  </div>{caption}
</figure>"""


def render_advertising_block(b: AdvertisingBlock, settings: Settings) -> str:
    f = b.fields
    return f"""<div class="advertising">
  <div class="advertising__column">
    <div class="advertising__title">{escape(f.title)}</div>
    <a class="advertising__link" href="{escape(safe_href(f.link_url))}">{escape(f.link_text)}</a>
  </div>
  <div class="advertising__column">
    <div class="advertising__content">{escape(f.content)}</div>
  </div>
</div>"""


def highlight_code(code: str) -> str:
    """Coloration auto (langage deviné) ; texte brut échappé si aucun lexer ne correspond."""
    try:
        lexer = guess_lexer(code)
    except ClassNotFound:
        lexer = TextLexer()
    return highlight(code, lexer, _CODE_FORMATTER)


def render_code_block(b: CodeBlock, settings: Settings) -> str:
    return f"""<div class="code">
  <pre class="code__pre"><code class="hljs">{highlight_code(b.fields.code)}</code></pre>
</div>"""


def render_quote_block(b: QuoteBlock, settings: Settings) -> str:
    f = b.fields

    variant = f.type.replace(" ", "-")
    photo = ""
    if b.has_portrait:
        src   = escape(asset_url(settings, f.photo.id))
        photo = (f'<div class="quote__photo-wrapper">'
                 f'<img class="quote__photo" src="{src}" alt="" width="250" height="250"></div>\n    ')
    duty = ""
    if f.author_duty is not None:
        duty = f'\n      <div class="quote__duty">{render_rich_text(f.author_duty)}</div>'

    return f"""<div class="quote quote--{variant}">
  <div class="quote__container">
    {photo}<div>
      <blockquote class="quote__text">{render_rich_text(f.text)}</blockquote>
      <div class="quote__author">{render_rich_text(f.author_name)}</div>{duty}
    </div>
  </div>
</div>"""
