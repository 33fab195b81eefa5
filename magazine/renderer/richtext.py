"""
Rich text — ProseMirror/TipTap JSON → HTML.
Règles StarterKit + Link : paragraphes, titres, listes, citations, code, marks.
Noeud inconnu → ses enfants seuls ; mark inconnue → ignorée. Tout texte est échappé.
"""
from html import escape
from typing import Optional

from ..models import DocumentNode, Mark

_NODE_TAGS = {
    "paragraph":  "p",
    "blockquote": "blockquote",
    "bulletList": "ul",
    "listItem":   "li",
}

_MARK_TAGS = {
    "bold":      "strong",
    "italic":    "em",
    "strike":    "s",
    "code":      "code",
    "underline": "u",
}

_SAFE_SCHEMES = ("http://", "https://", "mailto:", "tel:")
_LINK_REL     = "noopener noreferrer nofollow"


def render_rich_text(node: Optional[DocumentNode]) -> str:
    """Rend un noeud (doc complet ou noeud isolé) en HTML. None → ""."""
    if node is None:
        return ""
    return _render(node)


def _render(node: DocumentNode) -> str:
    kind = node.kind
    if kind == "text":
        return _render_text(node)
    if kind == "hardBreak":
        return "<br>"
    if kind == "horizontalRule":
        return "<hr>"

    inner = "".join(_render(child) for child in node.children)
    attrs = node.attributes or {}

    if kind == "heading":
        level = _heading_level(attrs.get("level"))
        return f"<h{level}>{inner}</h{level}>"
    if kind == "orderedList":
        start = attrs.get("start")
        start_attr = f' start="{int(start)}"' if isinstance(start, int) and start != 1 else ""
        return f"<ol{start_attr}>{inner}</ol>"
    if kind == "codeBlock":
        lang = attrs.get("language")
        cls  = f' class="language-{escape(str(lang))}"' if lang else ""
        return f"<pre><code{cls}>{inner}</code></pre>"

    tag = _NODE_TAGS.get(kind)
    if tag:
        return f"<{tag}>{inner}</{tag}>"
    # doc + types non gérés : contenu seul
    return inner


def _heading_level(value) -> int:
    try:
        level = int(value)
    except (TypeError, ValueError):
        return 1
    return min(max(level, 1), 6)


def _render_text(node: DocumentNode) -> str:
    out = escape(node.text or "")
    # première mark = la plus externe
    for mark in reversed(node.marks):
        out = _wrap_mark(mark, out)
    return out


def _wrap_mark(mark: Mark, inner: str) -> str:
    if mark.kind == "link":
        attrs  = mark.attributes or {}
        href   = safe_href(attrs.get("href"))
        target = attrs.get("target") or "_blank"
        return f'<a target="{escape(target)}" rel="{_LINK_REL}" href="{escape(href)}">{inner}</a>'
    tag = _MARK_TAGS.get(mark.kind)
    return f"<{tag}>{inner}</{tag}>" if tag else inner


def safe_href(href) -> str:
    """Liens absolus http(s)/mailto/tel ou relatifs uniquement — sinon '#'."""
    if not href:
        return "#"
    href = str(href).strip()
    if href.startswith(("/", "#", "?")) or href.lower().startswith(_SAFE_SCHEMES):
        return href
    if ":" not in href.split("/")[0]:
        return href
    return "#"
