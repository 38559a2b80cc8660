"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.shapecraft_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="ShapeCraft",
        description="Declarative shape composition: JSON shape configs to ordered scene nodes",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Builders register themselves on import; fail early if a kind is missing
    _register_builders()

    from app.api.router import api_router

    app.include_router(api_router)

    return app


def _register_builders() -> None:
    """Import the builder module so @builder decorators fire."""
    import importlib

    from app.engine.registry import get_registry

    importlib.import_module("app.engine.builders")
    get_registry().ensure_complete()


app = create_app()
