"""
CSS du magazine — feuille de base + thème Pygments pour les blocs code.
Générée une fois puis mise en cache.
"""
from pygments.formatters import HtmlFormatter

_CSS_CACHE: dict = {}

_BASE_CSS = """
*{box-sizing:border-box;margin:0;padding:0}
body{font-family:'Segoe UI',sans-serif;background:#fafafa;color:#1a1a2e;line-height:1.6}
a{color:inherit}
img{max-width:100%;height:auto;display:block}
.container{max-width:1200px;margin:0 auto;padding:0 20px}
.site-header{padding:20px 0;border-bottom:1px solid #e5e7eb;margin-bottom:40px}
.site-header a{font-weight:bold;font-size:1.3rem;text-decoration:none;margin-right:24px}
.heading,.page-title{font-size:clamp(1.8rem,4vw,3rem);margin-bottom:32px;line-height:1.2}
.article-container{max-width:720px;margin:0 auto}
.js-fullWidthSection{width:100%;margin:40px 0}
.article-body>div{margin-bottom:24px}
.article-body p{margin-bottom:16px}
.cover{margin-bottom:32px}
.cover__image{width:100%;max-height:700px;object-fit:cover}
.meta{display:flex;flex-wrap:wrap;gap:16px;align-items:center;color:#6b7280;font-size:.9rem;padding:16px 0}
.meta__author-name{color:#1a1a2e;font-weight:bold;margin-right:8px}
.meta__tag,.article-card__tag,.tag{color:#e94560;text-decoration:none;margin-right:8px}
.tag--current{font-weight:bold;text-decoration:underline}
.tags{display:flex;flex-wrap:wrap;gap:8px;margin-bottom:32px}
.articles,.related-articles{display:grid;grid-template-columns:repeat(auto-fill,minmax(290px,1fr));gap:32px}
.article-card__meta{font-size:.85rem;color:#6b7280;margin:12px 0 8px}
.article-card__type{margin-right:8px}
.article-card__title{font-size:1.2rem;margin-bottom:8px}
.article-card__title a{text-decoration:none}
.article-card__description{color:#374151;font-size:.95rem;margin-bottom:8px}
.article-card__author{color:#6b7280;font-size:.85rem}
.section-heading{font-size:1.8rem;margin:60px 0 24px}
.pagination{display:flex;gap:8px;margin:48px 0}
.pagination__page{padding:8px 14px;border:1px solid #e5e7eb;border-radius:6px;text-decoration:none}
.pagination__page--current{background:#e94560;border-color:#e94560;color:#fff}
.lead{font-size:1.3rem;font-weight:500}
.picture__wrapper--padding{padding:40px}
.picture__image--stretch{width:100%}
.picture__caption{color:#6b7280;font-size:.85rem;margin-top:8px}
.advertising{display:grid;grid-template-columns:1fr 1fr;gap:40px;padding:60px 40px;background:#1a1a2e;color:#fff}
.advertising__title{font-size:1.6rem;font-weight:bold;margin-bottom:16px}
.advertising__link{color:#e94560}
.code{background:#f6f8fa;padding:24px 0}
.code__pre{max-width:960px;margin:0 auto;padding:0 20px;overflow-x:auto;font-size:.9rem}
.quote__container{display:flex;gap:24px;align-items:flex-start}
.quote__photo{border-radius:50%}
.quote__text{font-style:italic}
.quote--small .quote__text{font-size:1.1rem}
.quote--medium .quote__text{font-size:1.4rem}
.quote--big .quote__text{font-size:2rem}
.quote__author{font-weight:bold;margin-top:12px}
.quote__duty{color:#6b7280;font-size:.9rem}
.error{text-align:center;padding:120px 20px}
footer{padding:32px 20px;text-align:center;color:#6b7280;font-size:.85rem;border-top:1px solid #e5e7eb;margin-top:80px}
"""


def get_page_css() -> str:
    if "page" not in _CSS_CACHE:
        _CSS_CACHE["page"] = _BASE_CSS + HtmlFormatter().get_style_defs(".hljs")
    return _CSS_CACHE["page"]
