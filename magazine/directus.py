"""
Module DIRECTUS — source de contenu (GraphQL)
Articles, tags, blocs custom d'un article. Lecture seule.
"""
import logging
from typing import Any, Dict, List, Optional, Union

import requests
from pydantic import ValidationError

from .config import Settings
from .models import Article, ArticleSummary, BlockRecord, Page, Tag

log = logging.getLogger(__name__)


class DirectusError(RuntimeError):
    """Réponse GraphQL en erreur ou payload inexploitable."""


# ── Requêtes ──────────────────────────────────────────────────────────────

_TAGS_FRAGMENT = """
    tags {
      tags_id {
        name
        slug
      }
    }"""

_AUTHOR_FRAGMENT = """
    author {
      name
      duty
    }"""

ARTICLE_BY_SLUG = f"""
query ArticleBySlug($slug: String!) {{
  articles(filter: {{ slug: {{ _eq: $slug }} }}, limit: 1) {{
    id
    title
    slug
    description
    cover {{
      id
    }}
    coverColor{_AUTHOR_FRAGMENT}
    publishedAt
    readingTime
    contentFlexible{_TAGS_FRAGMENT}
    titleForRelatedArticlesSection
    relatedArticles {{
      related_articles_id {{
        cover {{
          id
        }}{_TAGS_FRAGMENT}
        title
        slug{_AUTHOR_FRAGMENT}
      }}
    }}
  }}
}}"""

CUSTOM_BLOCKS = """
query CustomBlocks($articleId: GraphQLStringOrFloat!) {
  article_blocks(filter: { articles_id: { id: { _eq: $articleId } } }, limit: -1) {
    id
    collection
    item {
      ... on block_lead {
        text
      }
      ... on block_image {
        image {
          id
          width
          height
        }
        caption
        backgroundColor
        width
        padding
        stretch
      }
      ... on block_advertising {
        title
        content
        linkText
        linkUrl
      }
      ... on block_code {
        code
      }
      ... on block_quote {
        text
        authorName
        authorDuty
        type
        width
        photo {
          id
        }
      }
    }
  }
}"""

ARTICLES_WITH_COUNT = f"""
query ArticlesWithCount($page: Int, $limit: Int, $sort: [String]) {{
  articles(sort: $sort, limit: $limit, page: $page) {{
    cover {{
      id
    }}{_TAGS_FRAGMENT}
    publishedAt
    title
    slug
    description{_AUTHOR_FRAGMENT}
  }}
  articles_aggregated {{
    count {{
      id
    }}
  }}
}}"""

ARTICLES_BY_TAG = f"""
query ArticlesWithFilterAndCount($page: Int, $limit: Int, $sort: [String], $tagSlug: String!) {{
  articles(
    sort: $sort
    limit: $limit
    page: $page
    filter: {{ tags: {{ tags_id: {{ slug: {{ _eq: $tagSlug }} }} }} }}
  ) {{
    cover {{
      id
    }}
    title
    slug
    publishedAt{_AUTHOR_FRAGMENT}{_TAGS_FRAGMENT}
  }}
  articles_aggregated(filter: {{ tags: {{ tags_id: {{ slug: {{ _eq: $tagSlug }} }} }} }}) {{
    count {{
      id
    }}
  }}
}}"""

TAGS_WITH_COUNT = """
query TagsWithCount($page: Int, $limit: Int, $sort: [String]) {
  tags(sort: $sort, limit: $limit, page: $page) {
    name
    slug
  }
  tags_aggregated {
    count {
      id
    }
  }
}"""

ALL_TAGS = """
query Tags($sort: [String]) {
  tags(sort: $sort, limit: -1) {
    name
    slug
  }
}"""


# ── Client ────────────────────────────────────────────────────────────────

class DirectusClient:
    """
    Client GraphQL Directus.

    Usage:
        >>> client = DirectusClient(load_settings())
        >>> article = client.fetch_article_by_slug("hello-world")   # None si inconnu
        >>> blocks  = client.fetch_blocks_for_article(article.id)
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        # session partagée (keep-alive) ou module requests par défaut
        self.http = session or requests

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.settings.directus_token:
            headers["Authorization"] = f"Bearer {self.settings.directus_token}"
        return headers

    def query(self, query: str, variables: Dict[str, Any], name: str = "") -> Dict[str, Any]:
        """POST /graphql → dict `data`. HTTPError si statut non-2xx, DirectusError si `errors`."""
        log.debug("GraphQL %s %s", name, variables)
        resp = self.http.post(
            self.settings.graphql_url,
            json={"query": query, "variables": variables},
            headers=self._headers(),
            timeout=self.settings.request_timeout,
        )
        resp.raise_for_status()
        try:
            payload = resp.json()
        except ValueError as e:
            raise DirectusError(f"{name}: réponse non JSON") from e

        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors:
            msg = "; ".join(str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors)
            log.error("GraphQL %s errors=%s", name, msg)
            raise DirectusError(f"{name}: {msg}")
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise DirectusError(f"{name}: champ data absent")
        return data

    # ── Articles ──

    def fetch_article_by_slug(self, slug: str) -> Optional[Article]:
        data = self.query(ARTICLE_BY_SLUG, {"slug": slug}, "ArticleBySlug")
        rows = data.get("articles") or []
        if not rows:
            return None
        try:
            return Article.model_validate(rows[0])
        except ValidationError as e:
            raise DirectusError(f"Article {slug!r} malformé : {e}") from e

    def fetch_blocks_for_article(self, article_id: Union[int, str]) -> List[BlockRecord]:
        """Blocs custom de l'article. Ligne malformée → ignorée (loggée), jamais d'exception."""
        data = self.query(CUSTOM_BLOCKS, {"articleId": article_id}, "CustomBlocks")
        records = []
        for row in data.get("article_blocks") or []:
            try:
                records.append(BlockRecord.model_validate(row))
            except ValidationError as e:
                log.warning("article_blocks ignoré (article %s) : %s", article_id, e.errors()[0]["msg"])
        return records

    def fetch_article_list(self, sort: str, page_size: int, page: int) -> Page[ArticleSummary]:
        data = self.query(
            ARTICLES_WITH_COUNT,
            {"sort": sort, "limit": page_size, "page": page},
            "ArticlesWithCount",
        )
        return Page[ArticleSummary](
            items=_validate_list(ArticleSummary, data.get("articles"), "articles"),
            total=_total(data, "articles_aggregated"),
        )

    def fetch_articles_by_tag(self, tag_slug: str, sort: str, page_size: int,
                              page: int) -> Page[ArticleSummary]:
        data = self.query(
            ARTICLES_BY_TAG,
            {"sort": sort, "limit": page_size, "page": page, "tagSlug": tag_slug},
            "ArticlesWithFilterAndCount",
        )
        return Page[ArticleSummary](
            items=_validate_list(ArticleSummary, data.get("articles"), "articles"),
            total=_total(data, "articles_aggregated"),
        )

    # ── Tags ──

    def fetch_tag_list(self, sort: str, page_size: Optional[int] = None,
                       page: Optional[int] = None) -> Page[Tag]:
        """Sans page_size : tous les tags (total = nombre reçu)."""
        if page_size is None:
            data = self.query(ALL_TAGS, {"sort": sort}, "Tags")
            tags = _validate_list(Tag, data.get("tags"), "tags")
            return Page[Tag](items=tags, total=len(tags))

        data = self.query(
            TAGS_WITH_COUNT,
            {"sort": sort, "limit": page_size, "page": page or 1},
            "TagsWithCount",
        )
        return Page[Tag](
            items=_validate_list(Tag, data.get("tags"), "tags"),
            total=_total(data, "tags_aggregated"),
        )


# ── Helpers ───────────────────────────────────────────────────────────────

def _validate_list(model, rows, key: str) -> list:
    if rows is None:
        return []
    if not isinstance(rows, list):
        raise DirectusError(f"{key}: liste attendue")
    try:
        return [model.model_validate(r) for r in rows]
    except ValidationError as e:
        raise DirectusError(f"{key} malformé : {e}") from e


def _total(data: Dict[str, Any], key: str) -> int:
    """`{key}[0].count.id` → int. Agrégat vide → 0."""
    rows = data.get(key) or []
    if not rows:
        return 0
    try:
        return int(rows[0]["count"]["id"])
    except (KeyError, TypeError, ValueError) as e:
        raise DirectusError(f"{key}: compteur illisible") from e
