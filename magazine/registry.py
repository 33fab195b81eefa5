"""
Registry des blocs custom — collection Directus → (modèle de bloc, renderer).
Table statique : ajouter un bloc = modèle dans blocks/ + renderer + une ligne ici.
"""
import logging
from typing import Callable, Dict, List, NamedTuple, Optional, Type

from pydantic import ValidationError

from .blocks import AdvertisingBlock, BaseBlock, CodeBlock, ImageBlock, LeadBlock, QuoteBlock
from .config import Settings
from .models import BlockRecord
from .renderer.blocks import (
    render_advertising_block,
    render_code_block,
    render_image_block,
    render_lead_block,
    render_quote_block,
)

log = logging.getLogger(__name__)


class BlockEntry(NamedTuple):
    model:    Type[BaseBlock]
    renderer: Callable[[BaseBlock, Settings], str]


BLOCK_REGISTRY: Dict[str, BlockEntry] = {
    "block_lead":        BlockEntry(LeadBlock,        render_lead_block),
    "block_image":       BlockEntry(ImageBlock,       render_image_block),
    "block_advertising": BlockEntry(AdvertisingBlock, render_advertising_block),
    "block_code":        BlockEntry(CodeBlock,        render_code_block),
    "block_quote":       BlockEntry(QuoteBlock,       render_quote_block),
}


def known_collections() -> List[str]:
    return list(BLOCK_REGISTRY)


def build_block(record: BlockRecord) -> Optional[BaseBlock]:
    """
    Instancie le bloc typé d'un BlockRecord.
    Collection inconnue ou payload non conforme → None (jamais d'exception).
    """
    entry = BLOCK_REGISTRY.get(record.collection)
    if entry is None:
        return None
    try:
        return entry.model(id=record.id, fields=record.fields)
    except ValidationError as e:
        log.warning("Bloc %s (%s) invalide : %d erreur(s) — %s",
                    record.id, record.collection, e.error_count(), e.errors()[0]["msg"])
        return None


def render_block(block: BaseBlock, settings: Settings) -> str:
    return BLOCK_REGISTRY[block.collection].renderer(block, settings)
