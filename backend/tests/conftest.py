"""Shared test fixtures."""

from __future__ import annotations

import pytest

from app.engine.composer import CompositionEngine
from app.engine.descriptors import FontName
from app.engine.factory import ShapeFactory
from app.engine.fonts import DEFAULT_FONT, StaticFontLoader


# Sample configs as the plugin UI sends them

RECTANGLE_CONFIG = {
    "type": "rectangle",
    "x": 0,
    "y": 0,
    "width": 100,
    "height": 50,
    "fill": "blue",
}

LAYERED_BATCH = {
    "shapes": [
        {"type": "star", "layerIndex": 2, "fill": "red"},
        {"type": "ellipse", "layerIndex": 1, "fill": "green"},
    ]
}

SAME_LAYER_BATCH = {
    "shapes": [
        {"type": "rectangle", "layerIndex": 0, "position": {"x": 0, "y": 0}},
        {"type": "ellipse", "layerIndex": 0, "position": {"x": 10, "y": 0}},
        {"type": "polygon", "layerIndex": 0, "position": {"x": 20, "y": 0}},
    ]
}

MIXED_BATCH = {
    "shapes": [
        {"type": "text", "text": "Hello", "fontSize": 24, "zIndex": 3},
        {"type": "frame", "size": {"width": 400, "height": 300}, "fill": "#F5F5F5"},
        {"type": "line", "width": 120, "height": 40, "stroke": "black", "strokeWeight": 2},
        {"type": "star", "pointCount": 6, "innerRadius": 0.5, "fill": "#FFD700", "zIndex": 1},
    ]
}

KITE_BATCH = {
    "shapes": [
        {"type": "rectangle", "fill": "red"},
        {"type": "kite"},
        {"type": "ellipse", "fill": "blue"},
    ]
}

# Minimal document tree in the shape the files endpoint returns
SAMPLE_DOCUMENT = {
    "name": "Design System",
    "version": "1234567890",
    "lastModified": "2025-05-01T10:00:00Z",
    "editorType": "figma",
    "schemaVersion": 0,
    "document": {
        "id": "0:0",
        "type": "DOCUMENT",
        "children": [
            {
                "id": "0:1",
                "name": "Cover",
                "type": "CANVAS",
                "children": [
                    {
                        "id": "1:2",
                        "name": "Badge",
                        "type": "RECTANGLE",
                        "fillGeometry": [{"path": "M0 0L10 0L10 10L0 10Z", "windingRule": "NONZERO"}],
                        "strokeGeometry": [{"path": "M0 0L10 0"}],
                    },
                    {"id": "1:3", "name": "Group", "type": "GROUP", "children": []},
                ],
            },
            {"id": "0:2", "name": "Icons", "type": "CANVAS", "children": []},
        ],
    },
    "components": {"1:10": {}, "1:11": {}},
    "componentSets": {"1:20": {}},
    "styles": {"S:1": {}, "S:2": {}, "S:3": {}},
}


@pytest.fixture
def font_loader() -> StaticFontLoader:
    return StaticFontLoader([DEFAULT_FONT, FontName(family="Roboto", style="Bold")])


@pytest.fixture
def factory(font_loader: StaticFontLoader) -> ShapeFactory:
    return ShapeFactory(font_loader=font_loader)


@pytest.fixture
def engine(factory: ShapeFactory) -> CompositionEngine:
    return CompositionEngine(factory)
