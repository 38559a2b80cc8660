"""Tests for the composition engine."""

from __future__ import annotations

import asyncio
import itertools

import pytest

from app.engine.composer import CompositionEngine, draw_order
from app.engine.errors import InvalidColor, ResourceUnavailable, UnsupportedShapeType
from app.engine.registry import ShapeKind
from app.models.shapes import ShapeBatch, ShapeConfig, parse_shape_request
from tests.conftest import KITE_BATCH, LAYERED_BATCH, MIXED_BATCH, RECTANGLE_CONFIG, SAME_LAYER_BATCH


def run(engine: CompositionEngine, payload: dict):
    return asyncio.run(engine.compose(parse_shape_request(payload)))


class TestOrdering:
    def test_sorted_by_layer(self, engine):
        nodes = run(engine, LAYERED_BATCH)
        assert [n.kind for n in nodes] == [ShapeKind.ELLIPSE, ShapeKind.STAR]
        assert nodes[0].fills[0].color.as_tuple() == pytest.approx((0, 128 / 255, 0))

    def test_equal_layers_keep_input_order(self, engine):
        nodes = run(engine, SAME_LAYER_BATCH)
        assert [n.kind for n in nodes] == [ShapeKind.RECTANGLE, ShapeKind.ELLIPSE, ShapeKind.POLYGON]
        assert [n.x for n in nodes] == [0, 10, 20]

    def test_missing_layer_is_zero(self, engine):
        nodes = run(engine, MIXED_BATCH)
        # frame and line have no layer (0), then star (1), then text (3)
        assert [n.kind for n in nodes] == [
            ShapeKind.FRAME,
            ShapeKind.LINE,
            ShapeKind.STAR,
            ShapeKind.TEXT,
        ]

    def test_negative_layers_go_to_back(self, engine):
        nodes = run(engine, {"shapes": [{"type": "rectangle"}, {"type": "ellipse", "layerIndex": -1}]})
        assert [n.kind for n in nodes] == [ShapeKind.ELLIPSE, ShapeKind.RECTANGLE]

    def test_stable_for_all_permutations(self):
        # Tagged entries a/b share layer 1; their relative order must survive
        # any arrangement of the other entries.
        tied = [
            ShapeConfig(type="rectangle", layer_index=1, text="a"),
            ShapeConfig(type="rectangle", layer_index=1, text="b"),
        ]
        others = [
            ShapeConfig(type="ellipse", layer_index=0),
            ShapeConfig(type="ellipse", layer_index=2),
            ShapeConfig(type="ellipse", layer_index=1),
        ]
        for perm in itertools.permutations(others):
            for pos in itertools.combinations(range(5), 2):
                entries = list(perm)
                entries.insert(pos[0], tied[0])
                entries.insert(pos[1], tied[1])
                ordered = draw_order(entries)
                tags = [s.text for s in ordered if s.text]
                assert tags == ["a", "b"]
                layers = [s.layer_index for s in ordered]
                assert layers == sorted(layers)

    def test_input_not_mutated(self, engine):
        batch = ShapeBatch.model_validate(LAYERED_BATCH)
        before = [s.type for s in batch.shapes]
        asyncio.run(engine.produce(batch))
        assert [s.type for s in batch.shapes] == before


class TestContract:
    @pytest.mark.parametrize("payload", [LAYERED_BATCH, SAME_LAYER_BATCH, MIXED_BATCH])
    def test_same_length_and_kinds(self, engine, payload):
        batch = ShapeBatch.model_validate(payload)
        nodes = asyncio.run(engine.produce(batch))
        assert len(nodes) == len(batch.shapes)
        expected = [ShapeKind(s.type) for s in draw_order(batch.shapes)]
        assert [n.kind for n in nodes] == expected

    def test_empty_batch(self, engine):
        assert run(engine, {"shapes": []}) == []

    def test_single_shape_equivalence(self, engine, factory):
        for payload in [RECTANGLE_CONFIG, *MIXED_BATCH["shapes"], *LAYERED_BATCH["shapes"]]:
            config = ShapeConfig.model_validate(payload)
            batched = asyncio.run(engine.produce(ShapeBatch(shapes=[config])))
            single = asyncio.run(factory.produce(config))
            assert batched == [single]
            assert run(engine, payload) == [single]

    def test_duplicates_allowed(self, engine):
        nodes = run(engine, {"shapes": [RECTANGLE_CONFIG, RECTANGLE_CONFIG]})
        assert len(nodes) == 2
        assert nodes[0] == nodes[1]


class TestFailFast:
    def test_unsupported_type_aborts_batch(self, engine):
        with pytest.raises(UnsupportedShapeType):
            run(engine, KITE_BATCH)

    def test_invalid_color_aborts_batch(self, engine):
        payload = {"shapes": [{"type": "rectangle"}, {"type": "ellipse", "fill": "#12"}]}
        with pytest.raises(InvalidColor):
            run(engine, payload)

    @pytest.mark.parametrize(
        ("key", "value"),
        [("fill", 123), ("stroke", {"r": 1, "g": 0, "b": 0}), ("fill", ["red"])],
    )
    def test_non_string_color_is_invalid_color(self, engine, key, value):
        with pytest.raises(InvalidColor) as exc_info:
            run(engine, {"type": "rectangle", key: value})
        assert exc_info.value.field == key
        assert exc_info.value.value == value

    def test_missing_font_aborts_batch(self, engine):
        payload = {"shapes": [{"type": "rectangle"}, {"type": "text", "fontFamily": "Nope"}]}
        with pytest.raises(ResourceUnavailable):
            run(engine, payload)

    def test_stops_at_first_failure(self, factory):
        calls: list[str] = []
        original = factory.produce

        async def counting(config):
            calls.append(config.type)
            return await original(config)

        factory.produce = counting
        engine = CompositionEngine(factory)
        with pytest.raises(UnsupportedShapeType):
            run(engine, KITE_BATCH)
        assert calls == ["rectangle", "kite"]
