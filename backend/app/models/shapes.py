"""Shape request models (ShapeConfig / ShapeBatch)."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Position(BaseModel):
    x: float
    y: float


class Size(BaseModel):
    width: float
    height: float


class PaintColor(BaseModel):
    # Range is checked during color resolution so it surfaces as InvalidColor
    r: float
    g: float
    b: float


class PaintSpec(BaseModel):
    type: str = "SOLID"
    color: str | PaintColor


class ShapeConfig(BaseModel):
    """One shape request. Keys that do not apply to ``type`` are ignored."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    type: str
    position: Position | None = None
    size: Size | None = None

    # checked by color resolution (InvalidColor)
    fill: Any = None
    stroke: Any = None
    fills: list[PaintSpec] | None = None
    strokes: list[PaintSpec] | None = None
    stroke_weight: float | None = None
    corner_radius: float | None = None

    layer_index: int = Field(
        default=0,
        validation_alias=AliasChoices("layerIndex", "zIndex", "layer_index"),
    )

    # star
    point_count: int | None = None
    inner_radius: float | None = None
    # polygon
    polygon_point_count: int | None = None
    # text
    text: str | None = None
    font_size: float | None = None
    font_family: str | None = None
    font_style: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _fold_flat_geometry(cls, data: Any) -> Any:
        """Accept ``x``/``y``/``width``/``height`` at the top level."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("position") is None and "x" in data and "y" in data:
            data["position"] = {"x": data["x"], "y": data["y"]}
        if data.get("size") is None and "width" in data and "height" in data:
            data["size"] = {"width": data["width"], "height": data["height"]}
        # null layer index means the default layer
        for key in ("layerIndex", "zIndex", "layer_index"):
            if key in data and data[key] is None:
                del data[key]
        return data


class ShapeBatch(BaseModel):
    shapes: list[ShapeConfig] = Field(default_factory=list)


def parse_shape_request(config: dict[str, Any]) -> ShapeConfig | ShapeBatch:
    """A payload with a ``shapes`` key is a batch, anything else a single shape."""
    if "shapes" in config:
        return ShapeBatch.model_validate(config)
    return ShapeConfig.model_validate(config)
