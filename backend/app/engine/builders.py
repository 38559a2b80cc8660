"""Per-kind construction rules.

Each builder returns the kind-specific descriptor fields. Position, size,
paint, stroke weight and corner radius are applied by the factory according
to the capabilities declared on the decorator.
"""

from __future__ import annotations

from typing import Any

from app.engine.descriptors import FontName
from app.engine.registry import ShapeKind, builder
from app.models.shapes import ShapeConfig

# Host defaults for new stars / polygons
STAR_POINT_COUNT = 5
STAR_INNER_RADIUS = 0.382
POLYGON_POINT_COUNT = 3
MIN_POINT_COUNT = 3
TEXT_FONT_SIZE = 12.0


def _point_count(value: int | None, default: int) -> int:
    # Unset, zero or degenerate counts keep the host default
    if not value or value < MIN_POINT_COUNT:
        return default
    return value


@builder(ShapeKind.RECTANGLE, corner_radius=True, description="Axis-aligned rectangle")
def build_rectangle(config: ShapeConfig, font: FontName | None) -> dict[str, Any]:
    return {}


@builder(ShapeKind.ELLIPSE, description="Ellipse inscribed in its bounds")
def build_ellipse(config: ShapeConfig, font: FontName | None) -> dict[str, Any]:
    return {}


@builder(ShapeKind.STAR, corner_radius=True, description="Star with inner/outer vertices")
def build_star(config: ShapeConfig, font: FontName | None) -> dict[str, Any]:
    inner = config.inner_radius
    if not inner:
        inner = STAR_INNER_RADIUS
    return {
        "point_count": _point_count(config.point_count, STAR_POINT_COUNT),
        "inner_radius": min(max(inner, 0.0), 1.0),
    }


@builder(ShapeKind.POLYGON, corner_radius=True, description="Regular polygon")
def build_polygon(config: ShapeConfig, font: FontName | None) -> dict[str, Any]:
    return {"point_count": _point_count(config.polygon_point_count, POLYGON_POINT_COUNT)}


@builder(ShapeKind.LINE, fixed_height=0.0, description="Horizontal line; height is always 0")
def build_line(config: ShapeConfig, font: FontName | None) -> dict[str, Any]:
    return {}


@builder(ShapeKind.FRAME, corner_radius=True, description="Container frame")
def build_frame(config: ShapeConfig, font: FontName | None) -> dict[str, Any]:
    return {}


@builder(ShapeKind.TEXT, resizable=False, needs_font=True, description="Text sized by its content")
def build_text(config: ShapeConfig, font: FontName | None) -> dict[str, Any]:
    font_size = config.font_size if config.font_size and config.font_size > 0 else TEXT_FONT_SIZE
    return {
        "characters": config.text or "",
        "font_size": font_size,
        "font_name": font,
    }
