"""Plugin message dispatch: the host side of shape creation."""

from __future__ import annotations

import logging

from app.engine.composer import CompositionEngine
from app.engine.descriptors import RGB, NodeDescriptor, SolidPaint
from app.engine.registry import ShapeKind
from app.models.requests import PluginMessage
from app.models.responses import MessageResult
from app.models.shapes import ShapeConfig, parse_shape_request
from app.scene.page import Page, SceneNode

logger = logging.getLogger(__name__)

CREATE_STAR = "create-star"
CREATE_FROM_JSON = "create-shape-from-json"
CREATE_GRID = "create-shapes"

# Rectangle grid: fixed spacing and orange fill
GRID_SPACING = 150.0
GRID_FILL = SolidPaint(color=RGB(r=1.0, g=0.5, b=0.0))

PRESET_STAR = ShapeConfig(
    type="star",
    position={"x": 50, "y": 50},
    size={"width": 200, "height": 200},
    point_count=7,
    inner_radius=0.6,
    fill="red",
)


class MessageHandler:
    """Turns plugin messages into page mutations.

    Nodes are only appended once the engine has produced the complete list,
    so a failing request leaves the page exactly as it was.
    """

    def __init__(self, page: Page, engine: CompositionEngine) -> None:
        self.page = page
        self.engine = engine

    async def handle(self, msg: PluginMessage) -> MessageResult:
        logger.info("Message %s", msg.type)

        descriptors: list[NodeDescriptor] = []
        if msg.type == CREATE_STAR:
            descriptors = await self.engine.produce_one(PRESET_STAR)
        elif msg.type == CREATE_FROM_JSON and msg.config is not None:
            request = parse_shape_request(msg.config)
            descriptors = await self.engine.compose(request)
        elif msg.type == CREATE_GRID:
            descriptors = rectangle_grid(msg.count)
        elif msg.type != CREATE_FROM_JSON:
            logger.warning("Ignoring unknown message type %r", msg.type)

        placed = self._insert(descriptors)

        # JSON-driven creation keeps the session open for further requests
        if msg.type != CREATE_FROM_JSON:
            self.page.close_session()

        return MessageResult(
            nodes=placed,
            selection=list(self.page.selection),
            viewport=self.page.viewport,
            session_closed=not self.page.session_open,
        )

    def _insert(self, descriptors: list[NodeDescriptor]) -> list[SceneNode]:
        if not descriptors:
            return []
        placed = self.page.append_all(descriptors)
        self.page.select(placed)
        self.page.scroll_and_zoom_into_view(placed)
        return placed


def rectangle_grid(count: int) -> list[NodeDescriptor]:
    return [
        NodeDescriptor(kind=ShapeKind.RECTANGLE, x=i * GRID_SPACING, fills=(GRID_FILL,))
        for i in range(count)
    ]
