"""Composition engine: orders a batch by layer and builds it back-to-front."""

from __future__ import annotations

import logging

from app.engine.descriptors import NodeDescriptor
from app.engine.factory import ShapeFactory
from app.models.shapes import ShapeBatch, ShapeConfig

logger = logging.getLogger(__name__)


def draw_order(shapes: list[ShapeConfig]) -> list[ShapeConfig]:
    """Stable sort by layer index: ties keep their input order."""
    return sorted(shapes, key=lambda s: s.layer_index)


class CompositionEngine:
    """Builds every shape of a batch in draw order.

    Entries are produced strictly one after another; the first descriptor
    returned is the one drawn at the back. Any failure aborts the whole batch
    and nothing is returned.
    """

    def __init__(self, factory: ShapeFactory) -> None:
        self.factory = factory

    async def produce(self, batch: ShapeBatch) -> list[NodeDescriptor]:
        ordered = draw_order(batch.shapes)
        logger.debug(
            "Composing %d shapes, layers %s",
            len(ordered),
            [s.layer_index for s in ordered],
        )

        nodes: list[NodeDescriptor] = []
        for config in ordered:
            nodes.append(await self.factory.produce(config))
        return nodes

    async def produce_one(self, config: ShapeConfig) -> list[NodeDescriptor]:
        return await self.produce(ShapeBatch(shapes=[config]))

    async def compose(self, request: ShapeConfig | ShapeBatch) -> list[NodeDescriptor]:
        if isinstance(request, ShapeBatch):
            return await self.produce(request)
        return await self.produce_one(request)
