"""RGBA 래스터 버퍼 모듈 — 행 우선(row-major) 픽셀 배열과 좌표 조회."""

from dataclasses import dataclass
from typing import Iterator


class BufferShapeError(ValueError):
    """픽셀 개수와 width×height가 맞지 않는 버퍼."""


@dataclass(frozen=True)
class Color:
    """8비트 RGBA 색상 (프리멀티플라이 아님)."""
    r: int
    g: int
    b: int
    a: int

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
                raise ValueError(f"채널 {name} 범위 오류: {value!r}")

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class PositionedPixel:
    """버퍼에서 읽어낸 (x, y) 좌표 + 색상. 저장되지 않는 임시 뷰."""
    x: int
    y: int
    color: Color


@dataclass(frozen=True)
class RasterBuffer:
    """width×height RGBA 버퍼.

    pixels는 행 우선 순서이며 index = y * width + x.
    생성 후에는 변경되지 않는다.
    """
    width: int
    height: int
    pixels: tuple[Color, ...] = ()

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise BufferShapeError(f"음수 크기: {self.width}x{self.height}")
        pixels = tuple(self.pixels)
        if len(pixels) != self.width * self.height:
            raise BufferShapeError(
                f"픽셀 개수 불일치: {len(pixels)} != {self.width}x{self.height}"
            )
        object.__setattr__(self, "pixels", pixels)

    @classmethod
    def filled(cls, width: int, height: int, color: Color) -> "RasterBuffer":
        """단색으로 채운 버퍼를 만든다."""
        return cls(width, height, (color,) * (width * height))

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def pixel_at(self, x: int, y: int) -> PositionedPixel | None:
        """(x, y) 픽셀을 반환한다. 범위 밖(음수 포함)이면 None."""
        if x < 0 or y < 0:
            return None
        if x >= self.width or y >= self.height:
            return None
        return PositionedPixel(x, y, self.pixels[y * self.width + x])

    def index_to_coords(self, index: int) -> tuple[int, int]:
        """선형 인덱스를 (x, y) 좌표로 변환한다."""
        if self.width == 0:
            raise BufferShapeError("width가 0인 버퍼는 좌표 변환 불가")
        return index % self.width, index // self.width

    def pixels_iter(self) -> Iterator[PositionedPixel]:
        """모든 픽셀을 행 우선 순서로 순회한다."""
        for index, color in enumerate(self.pixels):
            x, y = self.index_to_coords(index)
            yield PositionedPixel(x, y, color)

    def positioned_pixels(self) -> list[PositionedPixel]:
        return list(self.pixels_iter())
