"""Fixtures partagées — Settings de test + constructeurs de documents ProseMirror / blocs."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from magazine.config import Settings
from magazine.models import BlockRecord, DocumentNode

CMS_URL = "https://cms.example.com"


@pytest.fixture
def settings():
    return Settings(directus_url=CMS_URL)


# ── Constructeurs ProseMirror ─────────────────────────────────────────────

def text(value, *marks):
    node = {"type": "text", "text": value}
    if marks:
        node["marks"] = [m if isinstance(m, dict) else {"type": m} for m in marks]
    return node


def para(value):
    return {"type": "paragraph", "content": [text(value)]}


def rich(value):
    """Petit doc rich text (une ligne) — format des champs text/caption/authorName."""
    return {"type": "doc", "content": [para(value)]}


def relation(block_id, collection):
    return {"type": "relation-block",
            "attrs": {"id": block_id, "junction": "article_blocks", "collection": collection}}


def doc(*children):
    return DocumentNode.model_validate({"type": "doc", "content": list(children)})


def record(block_id, collection, item):
    return BlockRecord.model_validate({"id": block_id, "collection": collection, "item": item})


# ── Payloads de blocs (format Directus) ───────────────────────────────────

def image_item(**kw):
    item = {
        "image": {"id": "img-1", "width": 800, "height": 600},
        "caption": None,
        "backgroundColor": None,
        "width": "content",
        "padding": False,
        "stretch": False,
    }
    item.update(kw)
    return item


def quote_item(**kw):
    item = {
        "text": rich("To be or not to be"),
        "authorName": rich("Hamlet"),
        "authorDuty": None,
        "type": "medium",
        "width": "content",
        "photo": None,
    }
    item.update(kw)
    return item


def advertising_item(**kw):
    item = {"title": "Join the course", "content": "Six weeks of practice",
            "linkText": "Sign up", "linkUrl": "https://school.example.com"}
    item.update(kw)
    return item
