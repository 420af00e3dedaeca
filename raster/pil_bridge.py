"""Pillow 이미지 ↔ RasterBuffer 변환 모듈 (메모리 내 변환만, 파일 I/O 없음)."""

from PIL import Image

from .buffer import Color, RasterBuffer


def from_image(image: Image.Image) -> RasterBuffer:
    """Pillow 이미지를 RGBA RasterBuffer로 변환한다."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    width, height = image.size
    raw = image.tobytes()
    pixels = [Color(*raw[i:i + 4]) for i in range(0, len(raw), 4)]
    return RasterBuffer(width, height, pixels)


def to_image(buffer: RasterBuffer) -> Image.Image:
    """RasterBuffer를 RGBA Pillow 이미지로 변환한다."""
    if buffer.width == 0 or buffer.height == 0:
        return Image.new("RGBA", buffer.size)
    raw = bytes(channel for color in buffer.pixels for channel in color.as_tuple())
    return Image.frombytes("RGBA", buffer.size, raw)
