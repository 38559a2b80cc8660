"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from app.scene.page import SceneNode, Viewport


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shape_kinds: list[str] = Field(default_factory=list)
    shape_descriptions: dict[str, str] = Field(default_factory=dict)


class MessageResult(BaseModel):
    nodes: list[SceneNode] = Field(default_factory=list)
    selection: list[str] = Field(default_factory=list)
    viewport: Viewport = Field(default_factory=Viewport)
    session_closed: bool = False


class ErrorResponse(BaseModel):
    error: str
    field: str | None = None
    value: Any = None
    message: str = ""


class PageInfo(BaseModel):
    id: str
    name: str
    child_count: int = 0


class DocumentMetadata(BaseModel):
    name: str | None = None
    version: str | None = None
    last_modified: str | None = None
    editor_type: str | None = None


class DocumentSummary(BaseModel):
    metadata: DocumentMetadata
    pages: list[PageInfo] = Field(default_factory=list)
    components: int = 0
    component_sets: int = 0
    styles: int = 0
