"""Bloc Advertising — encart titre + lien + texte. Toujours pleine largeur."""
from typing import Literal

from .base import BaseBlock, BlockFields, Layout


class AdvertisingFields(BlockFields):
    title:     str
    content:   str = ""
    link_text: str = ""
    link_url:  str = "#"


class AdvertisingBlock(BaseBlock):
    collection: Literal["block_advertising"] = "block_advertising"
    fields: AdvertisingFields

    @property
    def layout(self) -> Layout:
        return "full_bleed"
