"""Bloc Lead — chapô en rich text."""
from typing import Literal

from ..models import DocumentNode
from .base import BaseBlock, BlockFields


class LeadFields(BlockFields):
    text: DocumentNode


class LeadBlock(BaseBlock):
    collection: Literal["block_lead"] = "block_lead"
    fields: LeadFields
