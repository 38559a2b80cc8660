"""GET /api/scene — inspect and reset the host page."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_page
from app.scene.page import Page, PageSnapshot, SceneNode

router = APIRouter(prefix="/scene")


@router.get("", response_model=PageSnapshot)
async def get_scene(page: Page = Depends(get_page)) -> PageSnapshot:
    return page.snapshot()


@router.get("/nodes/{node_id}", response_model=SceneNode)
async def get_node(node_id: str, page: Page = Depends(get_page)) -> SceneNode:
    node = page.get(node_id)
    if node is None:
        raise HTTPException(status_code=404, detail=f"Unknown node {node_id!r}")
    return node


@router.post("/reset", response_model=PageSnapshot)
async def reset_scene(page: Page = Depends(get_page)) -> PageSnapshot:
    page.reset()
    return page.snapshot()
