"""FastAPI dependency injection."""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

from app.config import settings
from app.engine.composer import CompositionEngine
from app.engine.descriptors import FontName
from app.engine.factory import ShapeFactory
from app.engine.fonts import HostFontLoader
from app.figma.client import DocumentClient
from app.scene.handler import MessageHandler
from app.scene.page import Page


@lru_cache
def get_page() -> Page:
    return Page()


@lru_cache
def get_font_loader() -> HostFontLoader:
    return HostFontLoader(settings.available_fonts)


def get_engine() -> CompositionEngine:
    factory = ShapeFactory(
        font_loader=get_font_loader(),
        default_font=FontName(
            family=settings.default_font_family,
            style=settings.default_font_style,
        ),
    )
    return CompositionEngine(factory)


def get_handler() -> MessageHandler:
    return MessageHandler(page=get_page(), engine=get_engine())


def make_document_client() -> DocumentClient:
    return DocumentClient(
        settings.figma_token,
        base_url=settings.figma_api_base,
        timeout=settings.figma_timeout,
        output_dir=settings.output_dir,
    )


def get_document_client_factory() -> Callable[[], DocumentClient]:
    return make_document_client
