"""
Articles — pages HTML.
GET /magazine/article?page=N   → liste (6 par page, plus récents d'abord)
GET /magazine/article/{slug}   → article + blocs custom résolus
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from ...config import Settings
from ...directus import DirectusClient
from ...pagination import current_page, paginate
from ...renderer.pages import render_article_list_page, render_article_page
from ...resolver import UnresolvedNode, resolve_content
from ..deps import get_client, get_settings

log = logging.getLogger(__name__)
router = APIRouter(prefix="/magazine/article", tags=["Articles"])

ARTICLE_SORT = "-publishedAt"


@router.get("", response_class=HTMLResponse)
def article_list(
    page: Optional[str] = Query(None, description="Numéro de page (défaut 1)"),
    settings: Settings = Depends(get_settings),
    client: DirectusClient = Depends(get_client),
):
    size = settings.articles_per_page
    articles = client.fetch_article_list(ARTICLE_SORT, size, current_page(page))
    pagination = paginate(articles.total, size, page)
    return HTMLResponse(render_article_list_page(articles, pagination, settings))


@router.get("/{slug}", response_class=HTMLResponse)
def article_detail(
    slug: str,
    settings: Settings = Depends(get_settings),
    client: DirectusClient = Depends(get_client),
):
    article = client.fetch_article_by_slug(slug)
    if not article:
        raise HTTPException(404, "Article not found")

    records = client.fetch_blocks_for_article(article.id)
    unresolved: list[UnresolvedNode] = []
    nodes = resolve_content(article.content_flexible, records, on_unresolved=unresolved.append)
    if unresolved:
        log.info("Article %s : %d bloc(s) ignoré(s) — %s", slug, len(unresolved),
                 ", ".join(f"{u.block_id}/{u.reason}" for u in unresolved))

    return HTMLResponse(render_article_page(article, nodes, settings))
