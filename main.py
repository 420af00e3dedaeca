"""데모 — 2x2 배경에 1x1 흰색 전경을 합성하고 결과 픽셀을 출력한다."""

import logging

from config import blend_settings, load_config
from raster.buffer import Color, RasterBuffer
from blend.canvas import BlendCanvas, alpha_blend_mut


def demo_background() -> RasterBuffer:
    """검정 / 빨강 / 초록 / 파랑 2x2 배경."""
    return RasterBuffer(2, 2, [
        Color(0, 0, 0, 255),
        Color(255, 0, 0, 255),
        Color(0, 255, 0, 255),
        Color(0, 0, 255, 255),
    ])


def demo_foreground() -> RasterBuffer:
    return RasterBuffer(1, 1, [Color(255, 255, 255, 255)])


def main(config: dict | None = None) -> RasterBuffer:
    if config is None:
        config = load_config()
    offset, alpha = blend_settings(config)

    canvas = BlendCanvas(demo_background())
    alpha_blend_mut(canvas, demo_foreground(), offset, alpha)
    logging.info("합성 완료 (offset=%s, alpha=%s)", offset, alpha)

    result = canvas.buffer
    print(f"RasterBuffer {result.width}x{result.height}")
    for pixel in result.pixels_iter():
        print(f"  ({pixel.x}, {pixel.y}) -> {pixel.color.as_tuple()}")
    return result


if __name__ == "__main__":
    _config = load_config()
    logging.basicConfig(
        level=_config["logging"].get("level", "INFO"),
        format="%(asctime)s [%(name)s] %(message)s",
    )
    main(_config)
