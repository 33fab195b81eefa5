"""
Pages du magazine — liste d'articles, article, index des tags, articles d'un tag, erreurs.
Chaque fonction retourne le document HTML complet.
"""
from datetime import datetime
from html import escape
from typing import List, Optional

from ..config import Settings, asset_url
from ..models import Article, ArticleSummary, AssetRef, Author, Page, Tag
from ..pagination import Pagination
from ..resolver import ResolvedNode
from .html import render_content, render_document


# ── Helpers ─────────────────────────────────────────────────────────────────

def format_date(dt: Optional[datetime]) -> str:
    """datetime → '19 October 2026' ; None → ''."""
    if dt is None:
        return ""
    return f"{dt.day} {dt:%B %Y}"


def tag_href(tag: Tag) -> str:
    return f"/magazine/tags/{escape(tag.slug)}"


def article_href(slug: str) -> str:
    return f"/magazine/article/{escape(slug)}"


def _img(settings: Settings, ref: Optional[AssetRef], cls: str, width: int, height: int) -> str:
    if ref is None:
        return ""
    src = escape(asset_url(settings, ref.id))
    return f'<img class="{cls}" src="{src}" alt="" width="{width}" height="{height}" loading="lazy">'


def _tag_links(tags: List[Tag], cls: str) -> str:
    return "".join(f'<a href="{tag_href(t)}" class="{cls}">#{escape(t.name)}</a>' for t in tags)


def render_pagination(p: Pagination) -> str:
    """Barre ?page=N — vide si une seule page (ou aucune)."""
    if not p.visible:
        return ""
    links = "".join(
        f'<a href="?page={n}" class="pagination__page'
        f'{" pagination__page--current" if n == p.current else ""}">{n}</a>'
        for n in p.pages
    )
    return f'<div class="pagination">{links}</div>'


def _author_block(author: Optional[Author]) -> str:
    if author is None:
        return ""
    duty = f'<span class="meta__author-duty">{escape(author.duty)}</span>' if author.duty else ""
    return (f'<div class="meta__author"><span class="meta__author-name">{escape(author.name)}</span>'
            f'{duty}</div>')


# ── Liste d'articles ────────────────────────────────────────────────────────

def _list_card(a: ArticleSummary, settings: Settings) -> str:
    author = f'<div class="article-card__author">{escape(a.author.name)}</div>' if a.author else ""
    desc   = f'<div class="article-card__description">{escape(a.description)}</div>' if a.description else ""
    return f"""<div class="article-card">
  {_img(settings, a.cover, "article-card__cover", 500, 300)}
  <div class="article-card__meta">
    <span class="article-card__type">Articles</span>{_tag_links(a.tags, "article-card__tag")}
    <span class="article-card__date">{format_date(a.published_at)}</span>
  </div>
  <h2 class="article-card__title"><a href="{article_href(a.slug)}">{escape(a.title)}</a></h2>
  {desc}
  {author}
</div>"""


def render_article_list_page(articles: Page[ArticleSummary], pagination: Pagination,
                             settings: Settings) -> str:
    cards = "\n".join(_list_card(a, settings) for a in articles.items)
    body = f"""<div class="container">
<h1 class="heading">All materials</h1>
<div class="articles">
{cards}
</div>
{render_pagination(pagination)}
</div>"""
    return render_document("All materials", body, settings)


# ── Article ─────────────────────────────────────────────────────────────────

def _related_card(a: ArticleSummary, settings: Settings) -> str:
    meta = ""
    if a.tags:
        meta = (f'<div class="article-card__meta"><span class="article-card__type">Articles</span>'
                f'{_tag_links(a.tags, "article-card__tag")}</div>')
    author = f'<div class="article-card__author">{escape(a.author.name)}</div>' if a.author else ""
    return f"""<div class="article-card">
  {_img(settings, a.cover, "article-card__cover", 290, 200)}
  {meta}
  <h3 class="article-card__title"><a href="{article_href(a.slug)}">{escape(a.title)}</a></h3>
  {author}
</div>"""


def render_related(article: Article, settings: Settings) -> str:
    """Section articles liés — uniquement si la liste est non vide."""
    if not article.related_articles:
        return ""
    title = article.title_for_related_articles_section or settings.related_section_title
    cards = "\n".join(_related_card(a, settings) for a in article.related_articles)
    return f"""<div class="container">
<h2 class="section-heading">{escape(title)}</h2>
<div class="related-articles">
{cards}
</div>
</div>"""


def render_article_page(article: Article, nodes: List[ResolvedNode], settings: Settings) -> str:
    color = f' style="background-color:{escape(article.cover_color)}"' if article.cover_color else ""
    reading = ""
    if article.reading_time is not None:
        reading = f'<span class="meta__reading-time">Read for {article.reading_time} minutes</span>'
    date = f'<span class="meta__date">{format_date(article.published_at)}</span>'
    author = _author_block(article.author)

    body = f"""<div class="container">
<h1 class="page-title">{escape(article.title)}</h1>
</div>
<div class="cover"{color}>
  {_img(settings, article.cover, "cover__image", 1200, 700)}
</div>
<div class="container">
<div class="article-container">
  <div class="meta meta--header">{author}{date}{reading}</div>
</div>
</div>
<div class="container article-body">
{render_content(nodes, settings)}
</div>
<div class="container">
<div class="article-container">
  <div class="meta meta--footer">{author}{date}<span class="meta__tags">{_tag_links(article.tags, "meta__tag")}</span></div>
</div>
</div>
{render_related(article, settings)}"""
    return render_document(article.title, body, settings, description=article.description or "")


# ── Tags ────────────────────────────────────────────────────────────────────

def render_tag_list_page(tags: Page[Tag], pagination: Pagination, settings: Settings) -> str:
    links = "\n".join(f'<a href="{tag_href(t)}" class="tag">#{escape(t.name)}</a>' for t in tags.items)
    body = f"""<div class="container">
<h1 class="heading">All tags</h1>
<div class="tags">
{links}
</div>
{render_pagination(pagination)}
</div>"""
    return render_document("All tags", body, settings)


def _tag_card(a: ArticleSummary, settings: Settings) -> str:
    author = f'<div class="article-card__author">{escape(a.author.name)}</div>' if a.author else ""
    return f"""<div class="article-card">
  {_img(settings, a.cover, "article-card__cover", 400, 300)}
  <h2 class="article-card__title"><a href="{article_href(a.slug)}">{escape(a.title)}</a></h2>
  {author}
  <div class="article-card__meta">
    <span class="article-card__type">Articles</span>{_tag_links(a.tags, "article-card__tag")}
  </div>
</div>"""


def render_tag_articles_page(current: Tag, tags: List[Tag], articles: Page[ArticleSummary],
                             pagination: Pagination, settings: Settings) -> str:
    strip = "\n".join(
        f'<a href="{tag_href(t)}" class="tag{" tag--current" if t.slug == current.slug else ""}">'
        f'#{escape(t.name)}</a>'
        for t in tags
    )
    cards = "\n".join(_tag_card(a, settings) for a in articles.items)
    body = f"""<div class="container">
<h1 class="page-title">#{escape(current.name)}</h1>
<div class="tags">
{strip}
</div>
<div class="articles">
{cards}
</div>
{render_pagination(pagination)}
</div>"""
    return render_document(f"#{current.name}", body, settings)


# ── Erreurs ─────────────────────────────────────────────────────────────────

def render_error_page(status: int, message: str, settings: Settings) -> str:
    body = f"""<div class="container error">
<h1 class="heading">{status}</h1>
<p>{escape(message)}</p>
<p><a href="/magazine/article">Back to all materials</a></p>
</div>"""
    return render_document(message, body, settings)
