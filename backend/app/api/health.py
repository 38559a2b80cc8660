"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from app.engine.colors import NAMED_COLORS
from app.engine.registry import get_registry
from app.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    specs = get_registry().all()
    return HealthResponse(
        status="ok",
        version="0.1.0",
        shape_kinds=[spec.kind.value for spec in specs],
        shape_descriptions={spec.kind.value: spec.description for spec in specs},
    )


@router.get("/colors")
async def colors() -> dict[str, str]:
    return dict(NAMED_COLORS)
