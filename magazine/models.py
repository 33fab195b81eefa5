"""
Data models — DocumentNode (ProseMirror), BlockRecord, Article, Tag, Page
Pydantic v2, alias camelCase = noms de champs Directus
"""
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

RELATION_BLOCK = "relation-block"


class DirectusModel(BaseModel):
    """Base : champs snake_case côté Python, camelCase côté Directus, clés inconnues ignorées."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# ── Rich text (ProseMirror / TipTap JSON) ──────────────────────────────

class Mark(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    kind:       str                      = Field(alias="type")
    attributes: Optional[Dict[str, Any]] = Field(default=None, alias="attrs")


class DocumentNode(BaseModel):
    """Noeud d'arbre rich text. Soit porteur de contenu, soit placeholder de relation (feuille)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    kind:       str                      = Field(alias="type")
    attributes: Optional[Dict[str, Any]] = Field(default=None, alias="attrs")
    children:   List["DocumentNode"]     = Field(default_factory=list, alias="content")
    text:       Optional[str]            = None
    marks:      List[Mark]               = Field(default_factory=list)

    @property
    def block_id(self) -> Optional[str]:
        v = (self.attributes or {}).get("id")
        return None if v in (None, "") else str(v)

    @property
    def block_collection(self) -> Optional[str]:
        return (self.attributes or {}).get("collection") or None

    @property
    def is_relation(self) -> bool:
        return (self.kind == RELATION_BLOCK
                and self.block_id is not None
                and self.block_collection is not None)


DocumentNode.model_rebuild()


# ── Blocs side-loaded ──────────────────────────────────────────────────

class BlockRecord(BaseModel):
    """Ligne article_blocks : id + collection + payload brut (champ `item` côté Directus)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    id:         str
    collection: str
    fields:     Dict[str, Any] = Field(default_factory=dict, alias="item")

    @field_validator("id", mode="before")
    @classmethod
    def _id_str(cls, v):
        return str(v)

    @field_validator("fields", mode="before")
    @classmethod
    def _fields_dict(cls, v):
        return v if isinstance(v, dict) else {}


# ── Assets / auteurs / tags ────────────────────────────────────────────

class AssetRef(DirectusModel):
    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _id_str(cls, v):
        return str(v)


class Author(DirectusModel):
    name: str
    duty: Optional[str] = None


class Tag(DirectusModel):
    name: str
    slug: str


def _unwrap_junction(items: Any, key: str) -> list:
    """[{key: {...}}, 3, ...] → [{...}] — ignore les ids bruts (relation non autorisée)."""
    out = []
    for it in items or []:
        if isinstance(it, dict) and key in it:
            it = it[key]
        if isinstance(it, dict):
            out.append(it)
    return out


def _object_or_none(v: Any) -> Any:
    return v if isinstance(v, dict) else None


# ── Articles ───────────────────────────────────────────────────────────

class ArticleSummary(DirectusModel):
    """Carte article (listes, tags, articles liés)."""
    title:        str
    slug:         str
    cover:        Optional[AssetRef] = None
    author:       Optional[Author]   = None
    tags:         List[Tag]          = Field(default_factory=list)
    published_at: Optional[datetime] = None
    description:  Optional[str]      = None

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, v):
        return _unwrap_junction(v, "tags_id")

    @field_validator("author", "cover", mode="before")
    @classmethod
    def _objects(cls, v):
        return _object_or_none(v)


class Article(ArticleSummary):
    id:               Union[int, str]
    slug:             Optional[str]          = None
    cover_color:      Optional[str]          = None
    reading_time:     Optional[int]          = None
    content_flexible: Optional[DocumentNode] = None
    title_for_related_articles_section: Optional[str] = None
    related_articles: List[ArticleSummary]   = Field(default_factory=list)

    @field_validator("related_articles", mode="before")
    @classmethod
    def _related(cls, v):
        return _unwrap_junction(v, "related_articles_id")

    @field_validator("content_flexible", mode="before")
    @classmethod
    def _content(cls, v):
        return _object_or_none(v)


# ── Listes paginées ────────────────────────────────────────────────────

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """Résultat d'une liste : items de la page demandée + total (agrégat Directus)."""
    items: List[T] = Field(default_factory=list)
    total: int = 0
