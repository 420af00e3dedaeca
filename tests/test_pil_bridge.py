"""Pillow 이미지 ↔ RasterBuffer 변환 테스트."""

from PIL import Image

from raster.buffer import Color, RasterBuffer
from raster.pil_bridge import from_image, to_image


def test_from_image_row_major():
    img = Image.new("RGBA", (2, 2), (0, 0, 0, 0))
    img.putpixel((1, 0), (10, 20, 30, 40))
    img.putpixel((0, 1), (50, 60, 70, 80))
    buf = from_image(img)
    assert buf.size == (2, 2)
    assert buf.pixel_at(1, 0).color == Color(10, 20, 30, 40)
    assert buf.pixel_at(0, 1).color == Color(50, 60, 70, 80)
    assert buf.pixel_at(1, 1).color == Color(0, 0, 0, 0)


def test_from_rgb_image_gets_opaque_alpha():
    buf = from_image(Image.new("RGB", (3, 1), (1, 2, 3)))
    assert buf.pixels == (Color(1, 2, 3, 255),) * 3


def test_to_image():
    buf = RasterBuffer(2, 1, [Color(255, 0, 0, 255), Color(0, 0, 255, 128)])
    img = to_image(buf)
    assert img.mode == "RGBA"
    assert img.size == (2, 1)
    assert img.getpixel((0, 0)) == (255, 0, 0, 255)
    assert img.getpixel((1, 0)) == (0, 0, 255, 128)


def test_to_image_empty_buffer():
    img = to_image(RasterBuffer(0, 3))
    assert img.size == (0, 3)
