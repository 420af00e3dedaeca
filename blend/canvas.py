"""블렌딩 캔버스 — 배경 버퍼를 소유하고 합성 결과로 통째로 교체한다."""

from raster.buffer import Color, RasterBuffer

from .engine import alpha_blend


class BlendCanvas:
    """RasterBuffer 하나를 들고 있는 가변 캔버스."""

    def __init__(self, buffer: RasterBuffer):
        self._buffer = buffer

    @property
    def buffer(self) -> RasterBuffer:
        return self._buffer

    def clear(self, color: Color = Color(0, 0, 0, 255)) -> None:
        """캔버스를 지정 색상으로 초기화한다 (크기 유지)."""
        self._buffer = RasterBuffer.filled(self._buffer.width, self._buffer.height, color)

    def blend(self, foreground: RasterBuffer, offset: tuple[int, int] = (0, 0),
              alpha: float = 1.0) -> None:
        """전경을 합성하고 결과 버퍼로 교체한다.

        기존 버퍼를 모두 읽은 뒤 한 번에 교체하므로 중간 상태는 보이지 않는다.
        """
        self._buffer = alpha_blend(self._buffer, foreground, offset, alpha)


def alpha_blend_mut(canvas: BlendCanvas, foreground: RasterBuffer,
                    offset: tuple[int, int], alpha: float) -> None:
    """canvas의 배경 버퍼를 합성 결과로 교체한다."""
    canvas.blend(foreground, offset, alpha)
