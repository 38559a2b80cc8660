"""Node descriptors — the immutable output of the shape factory."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.engine.registry import ShapeKind


class RGB(BaseModel):
    model_config = ConfigDict(frozen=True)

    r: float = Field(..., ge=0.0, le=1.0)
    g: float = Field(..., ge=0.0, le=1.0)
    b: float = Field(..., ge=0.0, le=1.0)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


class SolidPaint(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = "SOLID"
    color: RGB


class FontName(BaseModel):
    model_config = ConfigDict(frozen=True)

    family: str
    style: str = "Regular"

    def __str__(self) -> str:
        return f"{self.family} {self.style}"


class NodeDescriptor(BaseModel):
    """A fully resolved drawable node, ready for the host to insert.

    Position and size are ``None`` when the request left them to the host.
    Paint is always resolved to RGB; no hex strings or color names survive.
    """

    model_config = ConfigDict(frozen=True)

    kind: ShapeKind
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    fills: tuple[SolidPaint, ...] = ()
    strokes: tuple[SolidPaint, ...] = ()
    stroke_weight: float | None = None
    corner_radius: float | None = None

    # star / polygon
    point_count: int | None = None
    inner_radius: float | None = None

    # text
    characters: str | None = None
    font_size: float | None = None
    font_name: FontName | None = None
