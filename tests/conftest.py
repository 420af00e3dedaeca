import pytest

from raster.buffer import Color, RasterBuffer

BLACK = Color(0, 0, 0, 255)
RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)
WHITE = Color(255, 255, 255, 255)


@pytest.fixture
def quad_background() -> RasterBuffer:
    """검정 / 빨강 / 초록 / 파랑 2x2 배경."""
    return RasterBuffer(2, 2, [BLACK, RED, GREEN, BLUE])


@pytest.fixture
def white_dot() -> RasterBuffer:
    return RasterBuffer(1, 1, [WHITE])


def numbered(width: int, height: int) -> RasterBuffer:
    """픽셀마다 r 채널에 인덱스를 넣은 버퍼 (위치 확인용)."""
    return RasterBuffer(width, height, [Color(i, 0, 0, 255) for i in range(width * height)])
