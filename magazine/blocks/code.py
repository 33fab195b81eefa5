"""Bloc Code — snippet source, coloration syntaxique côté serveur."""
from typing import Literal

from .base import BaseBlock, BlockFields, Layout


class CodeFields(BlockFields):
    code: str


class CodeBlock(BaseBlock):
    collection: Literal["block_code"] = "block_code"
    fields: CodeFields

    @property
    def layout(self) -> Layout:
        return "full_bleed"
