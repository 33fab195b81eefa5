"""
Tags — pages HTML.
GET /magazine/tags?page=N          → index des tags (10 par page, tri par nom)
GET /magazine/tags/{slug}?page=N   → articles du tag (6 par page) + bandeau de tous les tags
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from ...config import Settings
from ...directus import DirectusClient
from ...pagination import current_page, paginate
from ...renderer.pages import render_tag_articles_page, render_tag_list_page
from ..deps import get_client, get_settings
from .articles import ARTICLE_SORT

router = APIRouter(prefix="/magazine/tags", tags=["Tags"])

TAG_SORT = "name"


@router.get("", response_class=HTMLResponse)
def tag_list(
    page: Optional[str] = Query(None, description="Numéro de page (défaut 1)"),
    settings: Settings = Depends(get_settings),
    client: DirectusClient = Depends(get_client),
):
    size = settings.tags_per_page
    tags = client.fetch_tag_list(TAG_SORT, size, current_page(page))
    pagination = paginate(tags.total, size, page)
    return HTMLResponse(render_tag_list_page(tags, pagination, settings))


@router.get("/{slug}", response_class=HTMLResponse)
def tag_articles(
    slug: str,
    page: Optional[str] = Query(None, description="Numéro de page (défaut 1)"),
    settings: Settings = Depends(get_settings),
    client: DirectusClient = Depends(get_client),
):
    all_tags = client.fetch_tag_list(TAG_SORT).items
    current = next((t for t in all_tags if t.slug == slug), None)
    if current is None:
        raise HTTPException(404, "Tag not found")

    size = settings.tag_articles_per_page
    articles = client.fetch_articles_by_tag(slug, ARTICLE_SORT, size, current_page(page))
    pagination = paginate(articles.total, size, page)
    return HTMLResponse(render_tag_articles_page(current, all_tags, articles, pagination, settings))
