"""ShapeCraft shape-composition engine."""

from app.engine.registry import ShapeKind, builder, get_registry
from app.engine.descriptors import FontName, NodeDescriptor, RGB, SolidPaint
from app.engine.errors import InvalidColor, ResourceUnavailable, ShapeError, UnsupportedShapeType
from app.engine.factory import ShapeFactory
from app.engine.composer import CompositionEngine

__all__ = [
    "ShapeKind",
    "builder",
    "get_registry",
    "FontName",
    "NodeDescriptor",
    "RGB",
    "SolidPaint",
    "ShapeError",
    "UnsupportedShapeType",
    "InvalidColor",
    "ResourceUnavailable",
    "ShapeFactory",
    "CompositionEngine",
]
