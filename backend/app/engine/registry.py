"""Shape builder registry — one builder per shape kind, registered via decorator.

Usage:
    @builder(ShapeKind.STAR, corner_radius=True)
    def build_star(config: ShapeConfig, font: FontName | None) -> dict[str, Any]:
        return {"point_count": config.point_count or 5}

The set of kinds is closed: ``ShapeKind`` enumerates them and
``ShapeRegistry.ensure_complete`` fails if any kind lacks a builder.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from app.engine.descriptors import FontName
    from app.models.shapes import ShapeConfig

logger = logging.getLogger(__name__)

BuildFn = Callable[["ShapeConfig", "FontName | None"], dict[str, Any]]


class ShapeKind(str, enum.Enum):
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    STAR = "star"
    POLYGON = "polygon"
    LINE = "line"
    FRAME = "frame"
    TEXT = "text"


@dataclass(frozen=True)
class BuilderSpec:
    kind: ShapeKind
    fn: BuildFn
    # Attribute support of the produced node kind
    resizable: bool = True
    fixed_height: float | None = None
    corner_radius: bool = False
    stroke_weight: bool = True
    needs_font: bool = False
    description: str = ""


class ShapeRegistry:
    """Registry of builders keyed by shape kind."""

    def __init__(self) -> None:
        self._builders: dict[ShapeKind, BuilderSpec] = {}

    def register(self, spec: BuilderSpec) -> None:
        if spec.kind in self._builders:
            raise ValueError(f"Duplicate builder for kind: {spec.kind.value}")
        self._builders[spec.kind] = spec
        logger.debug("Registered builder %s", spec.kind.value)

    def get(self, kind: ShapeKind) -> BuilderSpec:
        return self._builders[kind]

    def all(self) -> list[BuilderSpec]:
        return [self._builders[k] for k in ShapeKind if k in self._builders]

    def missing(self) -> set[ShapeKind]:
        return set(ShapeKind) - set(self._builders)

    def ensure_complete(self) -> None:
        missing = self.missing()
        if missing:
            names = sorted(k.value for k in missing)
            raise RuntimeError(f"No builder registered for: {names}")

    @property
    def count(self) -> int:
        return len(self._builders)


# Module-level singleton
_registry = ShapeRegistry()


def get_registry() -> ShapeRegistry:
    return _registry


def builder(
    kind: ShapeKind,
    *,
    resizable: bool = True,
    fixed_height: float | None = None,
    corner_radius: bool = False,
    stroke_weight: bool = True,
    needs_font: bool = False,
    description: str = "",
):
    """Decorator to register a shape builder."""

    def decorator(fn: BuildFn) -> BuildFn:
        _registry.register(
            BuilderSpec(
                kind=kind,
                fn=fn,
                resizable=resizable,
                fixed_height=fixed_height,
                corner_radius=corner_radius,
                stroke_weight=stroke_weight,
                needs_font=needs_font,
                description=description,
            )
        )
        return fn

    return decorator
