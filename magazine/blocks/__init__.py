"""
Blocs custom — exports publics + Block discriminé par collection.
"""
from typing import Annotated, Union

from pydantic import Field

from .base import BaseBlock, BlockFields, Layout, Width
from .lead import LeadBlock, LeadFields
from .image import ImageBlock, ImageFields, ImageAsset
from .advertising import AdvertisingBlock, AdvertisingFields
from .code import CodeBlock, CodeFields
from .quote import QuoteBlock, QuoteFields, QuoteType

# Union discriminée par collection — ajouter un bloc = l'ajouter ici + registry + renderer
Block = Annotated[
    Union[
        LeadBlock,
        ImageBlock,
        AdvertisingBlock,
        CodeBlock,
        QuoteBlock,
    ],
    Field(discriminator="collection"),
]

__all__ = [
    "BaseBlock", "BlockFields", "Layout", "Width",
    "LeadBlock", "LeadFields",
    "ImageBlock", "ImageFields", "ImageAsset",
    "AdvertisingBlock", "AdvertisingFields",
    "CodeBlock", "CodeFields",
    "QuoteBlock", "QuoteFields", "QuoteType",
    "Block",
]
