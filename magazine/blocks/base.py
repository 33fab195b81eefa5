"""
Blocs de base.
Fields (payload typé, alias Directus) séparés du bloc résolu (collection + id + fields).
"""
from typing import Literal

from pydantic import BaseModel, ValidationInfo, field_validator

from ..models import DirectusModel

# content    → colonne de lecture (article-container)
# full_bleed → pleine largeur (js-fullWidthSection)
Layout = Literal["content", "full_bleed"]
Width  = Literal["content", "screen"]


class BlockFields(DirectusModel):
    """Payload d'un bloc custom tel que stocké dans sa collection Directus."""

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, v, info: ValidationInfo):
        # colonne Directus à null → valeur par défaut ; champ requis → reste rejeté
        if v is None:
            field = cls.model_fields[info.field_name]
            if not field.is_required():
                return field.get_default(call_default_factory=True)
        return v


class BaseBlock(BaseModel):
    """Bloc résolu (classe parente de tous les blocs)."""
    collection: str
    id: str

    @property
    def layout(self) -> Layout:
        return "content"
