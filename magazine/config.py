"""Configuration — Settings chargés depuis les variables d'environnement (DIRECTUS_URL, TAGS_PER_PAGE, …)"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Variables d'env = noms des champs en majuscules (insensible à la casse).
    Variable vide → ignorée (valeur par défaut).
    """
    model_config = SettingsConfigDict(extra="ignore", env_ignore_empty=True)

    directus_url:          str           = Field(..., min_length=1, description="URL de base Directus (assets + /graphql)")
    directus_token:        Optional[str] = Field(default=None, description="Token statique Directus (lecture)")
    request_timeout:       float         = Field(default=10.0, gt=0)
    articles_per_page:     int           = Field(default=6,  ge=1)
    tags_per_page:         int           = Field(default=10, ge=1)
    tag_articles_per_page: int           = Field(default=6,  ge=1)
    site_title:            str           = "Magazine"
    related_section_title: str           = "More interesting articles"

    @property
    def graphql_url(self) -> str:
        return f"{self.directus_url.rstrip('/')}/graphql"


def load_settings(overrides: dict = None) -> Settings:
    """Settings depuis l'environnement, puis overrides non-None. ValidationError si DIRECTUS_URL absent."""
    return Settings(**{k: v for k, v in (overrides or {}).items() if v is not None})


def asset_url(settings: Settings, asset_id: str) -> str:
    """URL publique d'un asset Directus : {base}/assets/{id}."""
    return f"{settings.directus_url.rstrip('/')}/assets/{asset_id}"
