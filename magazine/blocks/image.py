"""Bloc Image — image + caption optionnelle, largeur contenu ou écran."""
from typing import Literal, Optional

from ..models import AssetRef, DocumentNode
from .base import BaseBlock, BlockFields, Layout, Width


class ImageAsset(AssetRef):
    width:  Optional[int] = None
    height: Optional[int] = None


class ImageFields(BlockFields):
    image:            ImageAsset
    caption:          Optional[DocumentNode] = None
    background_color: Optional[str]          = None
    width:            Width                  = "content"
    padding:          bool                   = False
    stretch:          bool                   = False


class ImageBlock(BaseBlock):
    collection: Literal["block_image"] = "block_image"
    fields: ImageFields

    @property
    def layout(self) -> Layout:
        return "full_bleed" if self.fields.width == "screen" else "content"
