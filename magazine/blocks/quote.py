"""Bloc Quote — citation + auteur, 3 tailles ou variante avec portrait."""
from typing import Literal, Optional

from ..models import AssetRef, DocumentNode
from .base import BaseBlock, BlockFields, Layout, Width

QuoteType = Literal["small", "medium", "big", "with photo"]


class QuoteFields(BlockFields):
    text:        DocumentNode
    author_name: DocumentNode
    author_duty: Optional[DocumentNode] = None
    type:        QuoteType              = "medium"
    width:       Width                  = "content"
    photo:       Optional[AssetRef]     = None


class QuoteBlock(BaseBlock):
    collection: Literal["block_quote"] = "block_quote"
    fields: QuoteFields

    @property
    def layout(self) -> Layout:
        return "full_bleed" if self.fields.width == "screen" else "content"

    @property
    def has_portrait(self) -> bool:
        """Portrait affiché seulement si la variante le demande ET qu'une photo existe."""
        return self.fields.type == "with photo" and self.fields.photo is not None
