"""
Router FastAPI — endpoints email_builder.

POST   /email-builder/render                         → Document → HTMLResponse
POST   /email-builder/parse                          → {"html"} → Document
GET    /email-builder/catalog                        → blocs disponibles + JSON schemas
GET    /email-builder/variables                      → variables client insérables
POST   /email-builder/sessions                       → ouvre une session d'édition
GET    /email-builder/sessions/{sid}                 → état + preview
POST   /email-builder/sessions/{sid}/blocks          → insère un bloc
PATCH  /email-builder/sessions/{sid}/blocks/{bid}    → met à jour un bloc
DELETE /email-builder/sessions/{sid}/blocks/{bid}    → supprime un bloc
POST   /email-builder/sessions/{sid}/move            → déplace un bloc
POST   /email-builder/sessions/{sid}/save            → HTML final, ferme la session
DELETE /email-builder/sessions/{sid}                 → annule la session
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from .blocks import BLOCK_REGISTRY
from .core.schemas import Document
from .core.variables import available_variables
from .editor.controller import EmailEditor
from .editor.sessions import store
from .parser.html import parse
from .renderer.html import generate

log = logging.getLogger(__name__)

router = APIRouter(prefix="/email-builder", tags=["email_builder"])


class ParseRequest(BaseModel):
    html: str = ""


class OpenSessionRequest(BaseModel):
    initial_html: Optional[str] = None
    lang: Optional[str] = None


class InsertRequest(BaseModel):
    kind: str


class MoveRequest(BaseModel):
    source_id: str
    target_id: str


def _session_payload(sid: str, editor: EmailEditor) -> dict:
    return {
        "session_id":   sid,
        "blocks":       editor.document.model_dump()["blocks"],
        "preview_html": editor.preview_html,
    }


@contextmanager
def _locked_editor(sid: str) -> Iterator[EmailEditor]:
    """Éditeur de la session sous son verrou ; 404 si la session n'existe plus."""
    with store.locked(sid) as editor:
        if editor is None:
            raise HTTPException(404, "Session introuvable")
        yield editor


# ── Sans état ────────────────────────────────────────────────────────────────

@router.post("/render", response_class=HTMLResponse, summary="Rend un Document en HTML email")
def render(doc: Document) -> HTMLResponse:
    """Reçoit un Document JSON, retourne le HTML canonique."""
    return HTMLResponse(content=generate(doc))


@router.post("/parse", summary="Convertit un HTML en Document")
def parse_html(req: ParseRequest) -> dict:
    """Ne renvoie jamais d'erreur : un HTML illisible donne un Document vide."""
    return parse(req.html).model_dump()


@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    catalog_data = [
        {"kind": kind, "schema": cls.model_json_schema()}
        for kind, cls in BLOCK_REGISTRY.items()
    ]
    return JSONResponse({"blocks": catalog_data})


@router.get("/variables", summary="Variables client insérables dans un texte")
def variables(campaign_type: Optional[str] = None) -> dict:
    return {"variables": available_variables(campaign_type)}


# ── Sessions d'édition ───────────────────────────────────────────────────────

@router.post("/sessions", status_code=201, summary="Ouvre une session d'édition")
def open_session(req: OpenSessionRequest) -> dict:
    sid = store.open(req.initial_html, lang=req.lang)
    with _locked_editor(sid) as editor:
        return _session_payload(sid, editor)


@router.get("/sessions/{sid}")
def get_session(sid: str) -> dict:
    with _locked_editor(sid) as editor:
        return _session_payload(sid, editor)


@router.post("/sessions/{sid}/blocks", status_code=201)
def insert_block(sid: str, req: InsertRequest) -> dict:
    with _locked_editor(sid) as editor:
        try:
            if req.kind == "reset_password":
                block = editor.insert_reset_button()
            else:
                block = editor.insert(req.kind)
        except ValueError as e:
            raise HTTPException(422, str(e))
        return {"block": block.model_dump(), **_session_payload(sid, editor)}


@router.patch("/sessions/{sid}/blocks/{block_id}")
def update_block(sid: str, block_id: str, patch: Dict[str, Any] = Body(...)) -> dict:
    with _locked_editor(sid) as editor:
        try:
            editor.update_by_id(block_id, patch)
        except ValueError as e:
            raise HTTPException(422, str(e))
        return _session_payload(sid, editor)


@router.delete("/sessions/{sid}/blocks/{block_id}")
def delete_block(sid: str, block_id: str) -> dict:
    with _locked_editor(sid) as editor:
        editor.delete_by_id(block_id)
        return _session_payload(sid, editor)


@router.post("/sessions/{sid}/move")
def move_block(sid: str, req: MoveRequest) -> dict:
    with _locked_editor(sid) as editor:
        editor.move_by_drag(req.source_id, req.target_id)
        return _session_payload(sid, editor)


@router.post("/sessions/{sid}/save")
def save_session(sid: str) -> dict:
    with _locked_editor(sid) as editor:
        html = editor.save()
        store.close(sid)
    return {"session_id": sid, "html": html}


@router.delete("/sessions/{sid}")
def cancel_session(sid: str) -> dict:
    with _locked_editor(sid) as editor:
        editor.cancel()
        store.close(sid)
    log.info("Session %s annulée", sid)
    return {"session_id": sid, "cancelled": True}
