"""
examprep/api/app.py
FastAPI application factory. Mounts middleware and all routers.
This is the only place that wires layers together.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from examprep.api.routes import history, report, subjects
from examprep.knowledge.catalog import load_catalog_file, seed_catalog
from examprep.knowledge.db import get_session_factory, init_db

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


def init_catalog() -> None:
    init_db()
    with get_session_factory()() as db:
        seed_catalog(db, load_catalog_file())


def create_app() -> FastAPI:
    app = FastAPI(
        title="ExamPrep API",
        version=API_VERSION,
        description="Practice exam history and per-subject coverage report card.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    try:
        init_catalog()
    except Exception as exc:
        logger.warning(f"Could not initialize subject catalog: {exc}")

    # Routers
    app.include_router(report.router, tags=["Report Card"])
    app.include_router(subjects.router, tags=["Subjects"])
    app.include_router(history.router, tags=["History"])

    @app.get("/health")
    def health():
        return {"status": "ok", "version": API_VERSION}

    return app
