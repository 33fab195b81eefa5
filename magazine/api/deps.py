"""Dépendances FastAPI — Settings + client Directus, surchargeables en test (app.dependency_overrides)."""
from functools import lru_cache

from fastapi import Depends

from ..config import Settings, load_settings
from ..directus import DirectusClient


@lru_cache
def get_settings() -> Settings:
    return load_settings()


def get_client(settings: Settings = Depends(get_settings)) -> DirectusClient:
    return DirectusClient(settings)
