"""
Pagination — page courante + liste des pages depuis un total.
Pas de borne haute : une page au-delà de la dernière donne une liste vide côté Directus.
"""
import math
from typing import List, Optional

from pydantic import BaseModel


class Pagination(BaseModel):
    current: int
    count:   int
    pages:   List[int]

    @property
    def visible(self) -> bool:
        """La barre de pages n'est rendue qu'à partir de 2 pages."""
        return self.count > 1


def current_page(raw: Optional[str]) -> int:
    """'3' → 3 ; absent, non numérique, 0 ou négatif → 1."""
    if not isinstance(raw, str):
        return 1
    raw = raw.strip()
    if not raw.isascii() or not raw.isdigit():
        return 1
    page = int(raw)
    return page if page >= 1 else 1


def page_count(total: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size doit être ≥ 1 (reçu {page_size})")
    if total <= 0:
        return 0
    return math.ceil(total / page_size)


def paginate(total: int, page_size: int, raw: Optional[str] = None) -> Pagination:
    count = page_count(total, page_size)
    return Pagination(current=current_page(raw), count=count, pages=list(range(1, count + 1)))
