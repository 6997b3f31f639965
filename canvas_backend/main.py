import logging

import uvicorn
from fastapi import FastAPI

from canvas_backend.config import AppConfig, load_config
from canvas_backend.features.canvas.api import router as canvas_router
from canvas_backend.features.files.api import router as files_router
from canvas_backend.infra.documents import DocumentStore
from canvas_backend.infra.fs import ensure_dir
from canvas_backend.infra.storage import BlobStore
from canvas_backend.logs import configure_logging
from canvas_backend.web.health import router as health_router

logger = logging.getLogger(__name__)


def create_app(cfg: AppConfig | None = None) -> FastAPI:
    cfg = cfg or load_config()
    configure_logging(cfg.log_level)
    ensure_dir(cfg.files_dir)
    ensure_dir(cfg.canvas_dir)

    app = FastAPI(title="canvas-backend", version="0.1.0")
    app.state.cfg = cfg
    app.state.files = BlobStore(cfg.files_dir)
    app.state.canvases = DocumentStore(cfg.canvas_dir)
    app.include_router(health_router)
    app.include_router(files_router)
    app.include_router(canvas_router)
    logger.info("serving files from %s and canvases from %s", cfg.files_dir, cfg.canvas_dir)
    return app


def run() -> None:
    cfg = load_config()
    configure_logging(cfg.log_level)
    logger.info("starting server on http://localhost:%d", cfg.port)
    uvicorn.run(
        "canvas_backend.main:create_app",
        factory=True,
        host=cfg.host,
        port=cfg.port,
        log_level=cfg.log_level,
    )


if __name__ == "__main__":
    run()
