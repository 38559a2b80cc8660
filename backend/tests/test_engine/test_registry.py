"""Tests for the shape builder registry."""

import pytest

from app.engine.registry import BuilderSpec, ShapeKind, ShapeRegistry, get_registry


def _noop(config, font):
    return {}


def test_register_and_get():
    reg = ShapeRegistry()
    spec = BuilderSpec(kind=ShapeKind.ELLIPSE, fn=_noop)
    reg.register(spec)
    assert reg.get(ShapeKind.ELLIPSE) is spec
    assert reg.count == 1


def test_duplicate_kind_rejected():
    reg = ShapeRegistry()
    reg.register(BuilderSpec(kind=ShapeKind.LINE, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(BuilderSpec(kind=ShapeKind.LINE, fn=_noop))


def test_incomplete_registry_fails_check():
    reg = ShapeRegistry()
    reg.register(BuilderSpec(kind=ShapeKind.RECTANGLE, fn=_noop))
    assert ShapeKind.TEXT in reg.missing()
    with pytest.raises(RuntimeError, match="text"):
        reg.ensure_complete()


def test_global_registry_covers_every_kind():
    import app.engine.builders  # noqa: F401

    reg = get_registry()
    reg.ensure_complete()
    assert [s.kind for s in reg.all()] == list(ShapeKind)


def test_capabilities():
    import app.engine.builders  # noqa: F401

    reg = get_registry()
    assert reg.get(ShapeKind.TEXT).needs_font
    assert not reg.get(ShapeKind.TEXT).resizable
    assert reg.get(ShapeKind.LINE).fixed_height == 0.0
    with_radius = {s.kind for s in reg.all() if s.corner_radius}
    assert with_radius == {ShapeKind.RECTANGLE, ShapeKind.FRAME, ShapeKind.POLYGON, ShapeKind.STAR}
