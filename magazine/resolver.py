"""
Resolver — fusion du contenu flexible (arbre rich text) avec les blocs custom side-loaded.

Une entrée par enfant de premier niveau, dans l'ordre du document :
  - noeud porteur de contenu      → ContentNode (inchangé, enfants non re-résolus)
  - placeholder résolu            → bloc typé (LeadBlock, ImageBlock, …)
  - placeholder non résolu        → UnresolvedNode (position conservée, rien au rendu)

Les ids de blocs ne sont uniques qu'à l'échelle d'un article : résoudre par rendu d'article.
"""
import logging
from typing import Callable, Dict, Iterable, List, Literal, Optional, Union

from pydantic import BaseModel

from .blocks import BaseBlock
from .models import BlockRecord, DocumentNode
from .registry import BLOCK_REGISTRY, build_block

log = logging.getLogger(__name__)

UnresolvedReason = Literal["missing_record", "unknown_collection", "invalid_fields"]


class ContentNode(BaseModel):
    kind: Literal["content"] = "content"
    node: DocumentNode


class UnresolvedNode(BaseModel):
    kind:       Literal["unresolved"] = "unresolved"
    position:   int
    block_id:   str
    collection: str
    reason:     UnresolvedReason


ResolvedNode = Union[ContentNode, BaseBlock, UnresolvedNode]


def index_records(records: Iterable[BlockRecord]) -> Dict[str, BlockRecord]:
    """id → BlockRecord. Doublon d'id : le premier gagne."""
    index: Dict[str, BlockRecord] = {}
    for r in records:
        index.setdefault(r.id, r)
    return index


def resolve_node(
    position: int,
    node: DocumentNode,
    records: Dict[str, BlockRecord],
) -> ResolvedNode:
    if not node.is_relation:
        return ContentNode(node=node)

    block_id, collection = node.block_id, node.block_collection

    def _nothing(reason: UnresolvedReason) -> UnresolvedNode:
        return UnresolvedNode(position=position, block_id=block_id,
                              collection=collection, reason=reason)

    if collection not in BLOCK_REGISTRY:
        return _nothing("unknown_collection")
    record = records.get(block_id)
    if record is None or record.collection != collection:
        return _nothing("missing_record")
    block = build_block(record)
    if block is None:
        return _nothing("invalid_fields")
    return block


def resolve_content(
    doc: Optional[DocumentNode],
    records: Iterable[BlockRecord],
    on_unresolved: Optional[Callable[[UnresolvedNode], None]] = None,
) -> List[ResolvedNode]:
    """
    Résout les enfants de premier niveau de `doc` contre les blocs de l'article.

    Args:
        doc: noeud racine (type "doc") du contenu flexible ; None → []
        records: blocs de l'article (article_blocks)
        on_unresolved: hook de diagnostic appelé pour chaque placeholder non résolu

    Returns:
        Liste de même longueur que doc.children, même ordre.
    """
    if doc is None:
        return []
    index = index_records(records)
    resolved: List[ResolvedNode] = []
    for position, child in enumerate(doc.children):
        item = resolve_node(position, child, index)
        if isinstance(item, UnresolvedNode):
            log.debug("Bloc non résolu #%d : %s (%s) — %s",
                      position, item.block_id, item.collection, item.reason)
            if on_unresolved:
                on_unresolved(item)
        resolved.append(item)
    return resolved
