"""레이어 합성 모듈 — 배경 + 여러 전경 오버레이."""

import logging

from raster.buffer import RasterBuffer

from .canvas import BlendCanvas, alpha_blend_mut

logger = logging.getLogger(__name__)


class LayerCompositor:
    """배경 위에 전경 레이어들을 순서대로 합성한다."""

    def __init__(self, alpha: float = 1.0):
        self._alpha = alpha

    def compose(
        self,
        background: RasterBuffer | None,
        overlays: list[tuple] | None = None,
    ) -> RasterBuffer:
        """배경 위에 오버레이 레이어들을 합성하여 새 버퍼를 반환한다.

        Args:
            background: 기준 배경 버퍼
            overlays: [(버퍼, (dx, dy))] 또는 [(버퍼, (dx, dy), alpha)] 리스트.
                alpha를 생략하면 생성 시 지정한 기본 강도를 사용한다.

        Returns:
            배경과 같은 크기의 RasterBuffer
        """
        if background is None:
            raise ValueError("배경 버퍼가 필요합니다.")

        canvas = BlendCanvas(background)
        for i, layer in enumerate(overlays or []):
            if len(layer) == 3:
                foreground, offset, alpha = layer
            else:
                foreground, offset = layer
                alpha = self._alpha
            logger.debug("레이어 %d 합성: offset=%s, alpha=%s", i, offset, alpha)
            alpha_blend_mut(canvas, foreground, offset, alpha)

        return canvas.buffer
