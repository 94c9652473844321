"""
BLOCK_SUPPORTS : FastAPI app
Démarrer : uvicorn src.api.main:app --reload --port 8001
"""
import logging

from fastapi import FastAPI

from block_supports import __version__, config
from block_supports.router import router as block_supports_router

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Block Supports : styles d'éléments", version=__version__, docs_url="/docs")
app.include_router(block_supports_router)


@app.get("/health")
def health():
    return {"status": "ok", "service": "block_supports", "version": __version__}
