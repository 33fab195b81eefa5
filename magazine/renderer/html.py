"""
Renderer HTML — dispatch des noeuds résolus + composition du corps d'article + coquille du document.
"""
from html import escape
from typing import List

from ..blocks import BaseBlock
from ..config import Settings
from ..registry import render_block
from ..resolver import ContentNode, ResolvedNode, UnresolvedNode
from .css import get_page_css
from .richtext import render_rich_text

# Slot de mise en page → wrapper à poser autour du bloc rendu
_SLOT_CLASS = {
    "content":    "article-container",
    "full_bleed": "js-fullWidthSection",
}


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_document(title: str, body: str, settings: Settings, description: str = "") -> str:
    """Génère le HTML complet d'une page."""
    site = escape(settings.site_title)
    full_title = f"{escape(title)} — {site}" if title else site
    meta_desc = f'\n  <meta name="description" content="{escape(description)}">' if description else ""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{full_title}</title>{meta_desc}
  <style>{get_page_css()}</style>
</head>
<body>
<header class="site-header">
  <div class="container">
    <a href="/magazine/article">{site}</a>
    <a href="/magazine/tags">Tags</a>
  </div>
</header>
{body}
<footer>{site}</footer>
</body>
</html>"""


# ── Dispatch noeud résolu ───────────────────────────────────────────────────

def render_node(node: ResolvedNode, settings: Settings) -> str:
    """ContentNode → rich text ; bloc → renderer du registry ; non résolu → rien."""
    if isinstance(node, ContentNode):
        return render_rich_text(node.node)
    if isinstance(node, BaseBlock):
        return render_block(node, settings)
    if isinstance(node, UnresolvedNode):
        return ""
    raise TypeError(f"Noeud non rendable : {type(node).__name__}")


def node_layout(node: ResolvedNode) -> str:
    return node.layout if isinstance(node, BaseBlock) else "content"


# ── Corps d'article ─────────────────────────────────────────────────────────

def render_content(nodes: List[ResolvedNode], settings: Settings) -> str:
    """Rend la séquence résolue, chaque noeud dans son slot (colonne ou pleine largeur)."""
    parts = []
    for node in nodes:
        inner = render_node(node, settings)
        if not inner:
            continue
        parts.append(f'<div class="{_SLOT_CLASS[node_layout(node)]}">{inner}</div>')
    return "\n".join(parts)
