"""Shape factory: one ShapeConfig in, one NodeDescriptor out."""

from __future__ import annotations

import inspect
import logging
from typing import Any

import app.engine.builders  # noqa: F401  (registers builders)
from app.engine.colors import resolve_paints
from app.engine.descriptors import FontName, NodeDescriptor
from app.engine.errors import ResourceUnavailable, UnsupportedShapeType
from app.engine.fonts import DEFAULT_FONT, FontLoader
from app.engine.registry import BuilderSpec, ShapeKind, ShapeRegistry, get_registry
from app.models.shapes import ShapeConfig

logger = logging.getLogger(__name__)


class ShapeFactory:
    """Resolves geometry, paint and kind-specific rules for a single shape.

    Stateless between calls: the only collaborator is the injected font
    loader, which is awaited before any text content is assigned.
    """

    def __init__(
        self,
        font_loader: FontLoader,
        registry: ShapeRegistry | None = None,
        default_font: FontName = DEFAULT_FONT,
    ) -> None:
        self.font_loader = font_loader
        self.registry = registry or get_registry()
        self.registry.ensure_complete()
        self.default_font = default_font

    async def produce(self, config: ShapeConfig) -> NodeDescriptor:
        spec = self._dispatch(config.type)

        font = None
        if spec.needs_font:
            font = self._font_for(config)
            await self._load_font(font)

        fields: dict[str, Any] = {"kind": spec.kind}
        fields.update(spec.fn(config, font))

        if config.position is not None:
            fields["x"] = config.position.x
            fields["y"] = config.position.y

        if config.size is not None and spec.resizable:
            fields["width"] = config.size.width
            fields["height"] = (
                spec.fixed_height if spec.fixed_height is not None else config.size.height
            )

        fields["fills"] = resolve_paints(config.fill, config.fills, "fill")
        fields["strokes"] = resolve_paints(config.stroke, config.strokes, "stroke")

        if config.stroke_weight is not None and spec.stroke_weight:
            fields["stroke_weight"] = config.stroke_weight
        if config.corner_radius is not None and spec.corner_radius:
            fields["corner_radius"] = config.corner_radius

        return NodeDescriptor(**fields)

    def _dispatch(self, type_name: str) -> BuilderSpec:
        try:
            kind = ShapeKind(type_name)
        except ValueError:
            raise UnsupportedShapeType(type_name) from None
        return self.registry.get(kind)

    def _font_for(self, config: ShapeConfig) -> FontName:
        return FontName(
            family=config.font_family or self.default_font.family,
            style=config.font_style or self.default_font.style,
        )

    async def _load_font(self, font: FontName) -> None:
        try:
            result = self.font_loader.load(font)
            if inspect.isawaitable(result):
                await result
        except ResourceUnavailable:
            raise
        except Exception as e:
            raise ResourceUnavailable(str(font), str(e)) from e
        logger.debug("Font ready: %s", font)
