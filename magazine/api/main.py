"""
MAGAZINE — FastAPI app
Démarrer : uvicorn magazine.api.main:app --reload --port 8001
"""
import logging, os
from contextlib import asynccontextmanager

import requests
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..directus import DirectusError
from ..registry import known_collections
from ..renderer.pages import render_error_page
from .deps import get_settings

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper(),
                    format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)


def _settings(app: FastAPI):
    """Settings effectifs (respecte dependency_overrides)."""
    return app.dependency_overrides.get(get_settings, get_settings)()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = _settings(app)
    log.info("Magazine démarré — Directus %s — blocs : %s",
             settings.directus_url, ", ".join(known_collections()))
    yield


app = FastAPI(title="MAGAZINE — front", version=__version__, docs_url="/docs", lifespan=lifespan)


# ── Erreurs ───────────────────────────────────────────────────────────────

@app.exception_handler(StarletteHTTPException)
def http_error(request: Request, exc: StarletteHTTPException):
    """404 & co → page HTML (slug inconnu, tag inconnu, route inconnue)."""
    message = exc.detail if isinstance(exc.detail, str) else "Error"
    if exc.status_code == 404 and message == "Not Found":
        message = "Page not found"
    html = render_error_page(exc.status_code, message, _settings(request.app))
    return HTMLResponse(html, status_code=exc.status_code, headers=getattr(exc, "headers", None))


@app.exception_handler(DirectusError)
@app.exception_handler(requests.RequestException)
def backend_error(request: Request, exc: Exception):
    """Échec Directus (réseau, HTTP, GraphQL) → 502, aucune relance."""
    log.error("Directus indisponible sur %s : %s", request.url.path, exc)
    html = render_error_page(502, "Content backend unavailable", _settings(request.app))
    return HTMLResponse(html, status_code=502)


# ── Routes de base ────────────────────────────────────────────────────────

@app.get("/health")
def health():
    return {"status": "ok", "service": "magazine", "version": __version__}


@app.get("/")
def root():
    return RedirectResponse("/magazine/article")


# ── Routes ──
from .routes import articles, tags

app.include_router(articles.router)
app.include_router(tags.router)
