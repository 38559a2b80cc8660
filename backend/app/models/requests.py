"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class PluginMessage(BaseModel):
    type: str = Field(..., description="Message kind, e.g. create-shape-from-json")
    count: int = Field(default=0, ge=0, le=1000, description="Rectangle count for create-shapes")
    config: dict[str, Any] | None = Field(
        default=None,
        description="A single shape config, or {shapes: [...]} for a batch",
    )


class DocumentQuery(BaseModel):
    version: str | None = Field(default=None, description="Specific version ID")
    ids: str | None = Field(default=None, description="Comma separated node IDs")
    depth: int | None = Field(default=None, ge=1, description="Traversal depth")
    geometry: str | None = Field(default=None, description='"paths" to export vector data')
    plugin_data: str | None = Field(default=None, description="Plugin IDs to include data for")
    branch_data: bool = Field(default=False, description="Include branch metadata")
