"""Color resolution: symbolic names and hex strings → normalized RGB."""

from __future__ import annotations

import re
from collections.abc import Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from app.engine.descriptors import RGB, SolidPaint
from app.engine.errors import InvalidColor

if TYPE_CHECKING:
    from app.models.shapes import PaintSpec

TRANSPARENT = "transparent"

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")

# CSS basic keywords plus a few common extended ones. Keys are lower-case.
NAMED_COLORS: MappingProxyType[str, str] = MappingProxyType({
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "lime": "#00ff00",
    "green": "#008000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "cyan": "#00ffff",
    "aqua": "#00ffff",
    "magenta": "#ff00ff",
    "fuchsia": "#ff00ff",
    "silver": "#c0c0c0",
    "gray": "#808080",
    "grey": "#808080",
    "maroon": "#800000",
    "olive": "#808000",
    "purple": "#800080",
    "teal": "#008080",
    "navy": "#000080",
    "orange": "#ffa500",
    "pink": "#ffc0cb",
    "brown": "#a52a2a",
})


def is_transparent(value: Any) -> bool:
    return isinstance(value, str) and value.strip().lower() == TRANSPARENT


def parse_hex(value: str, field: str = "color") -> RGB:
    """Parse ``#rrggbb`` / ``rrggbb`` (any case) into RGB in [0, 1]."""
    m = _HEX_RE.fullmatch(value)
    if m is None:
        raise InvalidColor(field, value, "expected 6 hex digits")
    r, g, b = (int(part, 16) / 255 for part in m.groups())
    return RGB(r=r, g=g, b=b)


def resolve_color(value: Any, field: str = "color") -> RGB | None:
    """Resolve a color value; ``None`` means no paint ("transparent").

    Surrounding whitespace is ignored for names, hex and "transparent" alike.
    """
    if not isinstance(value, str):
        raise InvalidColor(field, value, "expected a string")
    value = value.strip()
    if is_transparent(value):
        return None
    hex_value = NAMED_COLORS.get(value.lower())
    if hex_value is not None:
        return parse_hex(hex_value, field)
    return parse_hex(value, field)


def _resolve_paint_color(color: Any, field: str) -> RGB | None:
    if isinstance(color, str):
        return resolve_color(color, field)
    try:
        return RGB(r=color.r, g=color.g, b=color.b)
    except ValueError as e:
        raise InvalidColor(field, color.model_dump(), "channels must be in [0, 1]") from e


def resolve_paints(
    single: Any,
    many: Sequence[PaintSpec] | None,
    field: str,
) -> tuple[SolidPaint, ...]:
    """Resolve the singular color key, falling back to the paint list."""
    if single is not None:
        rgb = resolve_color(single, field)
        return () if rgb is None else (SolidPaint(color=rgb),)

    paints: list[SolidPaint] = []
    for i, paint in enumerate(many or ()):
        item_field = f"{field}s[{i}]"
        if paint.type.upper() != "SOLID":
            raise InvalidColor(item_field, paint.type, "only SOLID paints are supported")
        rgb = _resolve_paint_color(paint.color, item_field)
        if rgb is not None:
            paints.append(SolidPaint(color=rgb))
    return tuple(paints)
