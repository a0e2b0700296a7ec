"""
Router FastAPI — lecture du catalogue, validation du thème, composition.

GET  /page-parts/catalog          → export JSON du catalogue (catégories → parts → champs)
GET  /page-parts/schema?key=…     → {fields, groups} d'une page part (404 si inconnue)
POST /page-parts/compose          → liste de contenu → arbre composé (422 si slot inconnu)
GET  /theme-settings/schema       → sections + réglages du thème
POST /theme-settings/validate     → {"valid": bool, "errors": [...]}

Démarrer : uvicorn page_composer.api:create_app --factory --port 8001
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from . import __version__, config
from .catalog.library import default_library
from .composer import PageComposer, PageContentItem
from .core.errors import UnknownSlot
from .fields.builder import FieldSchemaBuilder
from .theme.settings_schema import ThemeSettingsSchema

log = logging.getLogger(__name__)

page_parts_router = APIRouter(prefix="/page-parts", tags=["page_parts"])
theme_router = APIRouter(prefix="/theme-settings", tags=["theme_settings"])


class ComposeRequest(BaseModel):
    locale: Optional[str] = None
    include_schema: bool = False
    items: List[PageContentItem] = Field(default_factory=list)


def _library(request: Request):
    return request.app.state.library


# ── Page parts ─────────────────────────────────────────────────────────

@page_parts_router.get("/catalog", summary="Catalogue des page parts et de leurs champs")
def catalog(request: Request) -> dict:
    return _library(request).to_json_schema()


@page_parts_router.get("/schema", summary="Schéma des champs d'une page part")
def part_schema(key: str, request: Request) -> dict:
    schema = FieldSchemaBuilder(_library(request)).build_for_page_part(key)
    if schema is None:
        raise HTTPException(404, f"Page part inconnue : {key}")
    return schema.to_dict()


@page_parts_router.post("/compose", summary="Compose une page (conteneurs + slots)")
def compose(body: ComposeRequest, request: Request) -> dict:
    composer = PageComposer(_library(request))
    try:
        parts = composer.compose(body.items, locale=body.locale, include_schema=body.include_schema)
    except UnknownSlot as e:
        raise HTTPException(422, str(e))
    return {"locale": body.locale or config.DEFAULT_LOCALE, "parts": [p.to_dict() for p in parts]}


# ── Thème ──────────────────────────────────────────────────────────────

@theme_router.get("/schema", summary="Sections et réglages du thème")
def theme_schema() -> dict:
    return ThemeSettingsSchema.to_json_schema()


@theme_router.post("/validate", summary="Valide des valeurs de thème sans les enregistrer")
def theme_validate(values: Dict[str, Any]) -> dict:
    errors = ThemeSettingsSchema.validate(values)
    return {"valid": not errors, "errors": errors}


def create_app(library=None) -> FastAPI:
    """App prête à servir ; `library` par défaut = catalogue intégré."""
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s — %(message)s",
    )
    app = FastAPI(title="Page Composer", version=__version__)
    app.state.library = library if library is not None else default_library()
    app.include_router(page_parts_router)
    app.include_router(theme_router)
    log.info("Page Composer prêt (%d page parts)", len(app.state.library.all_keys()))
    return app
