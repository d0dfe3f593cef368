"""
EMAIL_BUILDER — FastAPI app
Démarrer : uvicorn email_builder.app:app --reload --port 8002
"""
import logging, os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .router import router

logging.basicConfig(
    level=os.getenv("EMAIL_BUILDER_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s — %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="EMAIL_BUILDER — Éditeur d'emails", version=__version__, docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(router)


@app.get("/health")
def health():
    return {"status": "ok", "service": "email_builder", "version": __version__}
