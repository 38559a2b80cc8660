"""In-memory page that owns placed nodes, selection and viewport."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, Field

from app.engine.descriptors import NodeDescriptor
from app.engine.registry import ShapeKind

logger = logging.getLogger(__name__)

# Size a freshly created node gets when the request leaves it out
DEFAULT_WIDTH = 100.0
DEFAULT_HEIGHT = 100.0

# Rough glyph metrics for content-sized text
_CHAR_WIDTH_EM = 0.6
_LINE_HEIGHT_EM = 1.2


class SceneNode(BaseModel):
    id: str
    kind: ShapeKind
    x: float
    y: float
    width: float
    height: float
    descriptor: NodeDescriptor

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.x + self.width, self.y + self.height)


class Viewport(BaseModel):
    center: tuple[float, float] = (0.0, 0.0)
    bounds: tuple[float, float, float, float] | None = None


class PageSnapshot(BaseModel):
    name: str
    nodes: list[SceneNode] = Field(default_factory=list)
    selection: list[str] = Field(default_factory=list)
    viewport: Viewport = Field(default_factory=Viewport)
    session_open: bool = True


def _content_size(node: NodeDescriptor) -> tuple[float, float]:
    font_size = node.font_size or 0.0
    lines = (node.characters or "").split("\n")
    longest = max(len(line) for line in lines)
    return (_CHAR_WIDTH_EM * font_size * longest, _LINE_HEIGHT_EM * font_size * len(lines))


def place(node_id: str, node: NodeDescriptor) -> SceneNode:
    """Apply host defaults for anything the descriptor leaves unset."""
    if node.kind == ShapeKind.TEXT:
        width, height = _content_size(node)
    else:
        width = node.width if node.width is not None else DEFAULT_WIDTH
        height = node.height if node.height is not None else DEFAULT_HEIGHT
        if node.kind == ShapeKind.LINE:
            height = 0.0
    return SceneNode(
        id=node_id,
        kind=node.kind,
        x=node.x if node.x is not None else 0.0,
        y=node.y if node.y is not None else 0.0,
        width=width,
        height=height,
        descriptor=node,
    )


class Page:
    """The host's current container."""

    def __init__(self, name: str = "Page 1", page_id: str = "0") -> None:
        self.name = name
        self.page_id = page_id
        self.nodes: list[SceneNode] = []
        self.selection: list[str] = []
        self.viewport = Viewport()
        self.session_open = True
        self._next_id = 1

    def append(self, node: NodeDescriptor) -> SceneNode:
        placed = place(f"{self.page_id}:{self._next_id}", node)
        self._next_id += 1
        self.nodes.append(placed)
        return placed

    def append_all(self, nodes: Iterable[NodeDescriptor]) -> list[SceneNode]:
        return [self.append(n) for n in nodes]

    def select(self, nodes: list[SceneNode]) -> None:
        self.selection = [n.id for n in nodes]

    def scroll_and_zoom_into_view(self, nodes: list[SceneNode]) -> None:
        if not nodes:
            return
        boxes = [n.bounds for n in nodes]
        x0 = min(b[0] for b in boxes)
        y0 = min(b[1] for b in boxes)
        x1 = max(b[2] for b in boxes)
        y1 = max(b[3] for b in boxes)
        self.viewport = Viewport(center=((x0 + x1) / 2, (y0 + y1) / 2), bounds=(x0, y0, x1, y1))

    def close_session(self) -> None:
        self.session_open = False
        logger.info("Session closed on page %s", self.name)

    def reset(self) -> None:
        self.nodes.clear()
        self.selection = []
        self.viewport = Viewport()
        self.session_open = True
        self._next_id = 1

    def get(self, node_id: str) -> SceneNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def snapshot(self) -> PageSnapshot:
        return PageSnapshot(
            name=self.name,
            nodes=list(self.nodes),
            selection=list(self.selection),
            viewport=self.viewport,
            session_open=self.session_open,
        )
