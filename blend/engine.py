"""알파 블렌딩 엔진 — 오프셋 좌표 매핑 + 채널별 가중 평균.

배경 버퍼가 기준 좌표계이다. 배경 픽셀 (x, y)는 전경 (x - dx, y - dy)에
대응하며, 전경 범위 밖이면 배경 픽셀을 그대로 둔다.
"""

import logging
import math
import struct

from raster.buffer import Color, PositionedPixel, RasterBuffer

logger = logging.getLogger(__name__)

_F32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """단정밀도(float32)로 반올림한다. 범위를 넘으면 ±inf."""
    try:
        return _F32.unpack(_F32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_channel(value: float) -> int:
    """float → u8 변환. 반올림 없이 0 방향으로 절삭한다."""
    if math.isnan(value):
        return 0
    return int(max(0.0, min(255.0, value)))


def _blend_channel(bg: int, fg: int, inv: float, alpha: float) -> int:
    # 곱셈과 덧셈마다 float32로 반올림
    return _to_channel(_f32(_f32(bg * inv) + _f32(fg * alpha)))


def blend_colors(background: Color, foreground: Color, alpha: float) -> Color:
    """두 색상을 alpha 비율로 섞는다.

    c = c_bg * (1 - alpha) + c_fg * alpha 를 float32 정밀도로 계산한 뒤 절삭한다.
    알파 채널도 색상 채널과 똑같이 섞인다. 블렌딩 강도는 alpha 인자만 결정한다.
    """
    alpha = _f32(alpha)
    inv = _f32(1.0 - alpha)
    return Color(
        _blend_channel(background.r, foreground.r, inv, alpha),
        _blend_channel(background.g, foreground.g, inv, alpha),
        _blend_channel(background.b, foreground.b, inv, alpha),
        _blend_channel(background.a, foreground.a, inv, alpha),
    )


def blend_pixels(pixel: PositionedPixel, alpha: float,
                 foreground_pixel: PositionedPixel) -> PositionedPixel:
    """배경 픽셀 위치는 유지하고 색상만 섞는다."""
    return PositionedPixel(
        pixel.x, pixel.y, blend_colors(pixel.color, foreground_pixel.color, alpha),
    )


def map_to_foreground(pixel: PositionedPixel, foreground: RasterBuffer,
                      offset: tuple[int, int]) -> PositionedPixel | None:
    """배경 좌표를 전경 좌표로 옮겨 전경 픽셀을 찾는다 (없으면 None)."""
    dx, dy = offset
    return foreground.pixel_at(pixel.x - dx, pixel.y - dy)


def alpha_blend(background: RasterBuffer, foreground: RasterBuffer,
                offset: tuple[int, int], alpha: float) -> RasterBuffer:
    """전경을 offset 위치에 alpha 강도로 합성한 새 버퍼를 반환한다.

    입력 버퍼는 변경하지 않는다. 결과 크기는 항상 배경 크기와 같다.

    Args:
        background: 기준 좌표계가 되는 배경 버퍼
        foreground: 합성할 전경 버퍼 (크기 제약 없음)
        offset: 배경 좌표계에서 전경 원점 (0, 0)의 위치 (dx, dy)
        alpha: 블렌딩 강도, 0.0이면 배경 유지 / 1.0이면 전경으로 대체

    Returns:
        배경과 같은 크기의 새 RasterBuffer
    """
    if not 0.0 <= alpha <= 1.0:
        logger.warning("블렌딩 강도 범위 밖: %s (보정하지 않음)", alpha)
    logger.debug(
        "블렌딩: 배경 %dx%d, 전경 %dx%d, offset=%s, alpha=%s",
        background.width, background.height,
        foreground.width, foreground.height, offset, alpha,
    )

    colors = []
    for pixel in background.pixels_iter():
        foreground_pixel = map_to_foreground(pixel, foreground, offset)
        if foreground_pixel is None:
            colors.append(pixel.color)
        else:
            colors.append(blend_pixels(pixel, alpha, foreground_pixel).color)

    return RasterBuffer(background.width, background.height, colors)
