"""LayerCompositor 다중 레이어 합성 테스트."""

import pytest

from blend.layers import LayerCompositor
from raster.buffer import Color, RasterBuffer
from conftest import BLACK, RED, WHITE


def test_compose_without_overlays_returns_background(quad_background):
    assert LayerCompositor().compose(quad_background) == quad_background
    assert LayerCompositor().compose(quad_background, []) == quad_background


def test_compose_requires_background():
    with pytest.raises(ValueError):
        LayerCompositor().compose(None, [])


def test_layers_applied_in_order():
    bg = RasterBuffer.filled(3, 1, BLACK)
    overlays = [
        (RasterBuffer.filled(2, 1, RED), (0, 0)),
        (RasterBuffer(1, 1, [WHITE]), (1, 0)),
    ]
    result = LayerCompositor().compose(bg, overlays)
    assert result.pixels == (RED, WHITE, BLACK)


def test_per_layer_strength_overrides_default():
    bg = RasterBuffer.filled(2, 1, Color(0, 0, 0, 0))
    overlays = [
        (RasterBuffer(1, 1, [WHITE]), (0, 0)),
        (RasterBuffer(1, 1, [WHITE]), (1, 0), 1.0),
    ]
    result = LayerCompositor(alpha=0.5).compose(bg, overlays)
    assert result.pixels == (Color(127, 127, 127, 127), WHITE)
