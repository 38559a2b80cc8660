"""Errors raised by the shape engine.

Every error carries the offending field and value so the host can report
precisely which part of a request was rejected.
"""

from __future__ import annotations

from typing import Any


class ShapeError(Exception):
    """Base class for shape construction failures."""

    code = "shape_error"

    def __init__(self, message: str, *, field: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "field": self.field,
            "value": self.value,
            "message": str(self),
        }


class UnsupportedShapeType(ShapeError):
    code = "unsupported_shape_type"

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unsupported shape type: {value!r}", field="type", value=value)


class InvalidColor(ShapeError):
    code = "invalid_color"

    def __init__(self, field: str, value: Any, reason: str = "") -> None:
        message = f"Invalid color for {field}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, field=field, value=value)


class ResourceUnavailable(ShapeError):
    code = "resource_unavailable"

    def __init__(self, resource: str, reason: str = "") -> None:
        message = f"Resource unavailable: {resource}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, field="font", value=resource)
        self.resource = resource
