"""A grid of colours that can be written out as PPM pixel rows."""

from __future__ import annotations

from os import PathLike
from typing import Iterator

from .patterns import BLACK, Color


class Canvas:
    """A width by height grid of colours, initially black."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels: list[list[Color]] = [[BLACK] * width for _ in range(height)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_at(self, x: int, y: int) -> Color:
        """The colour at (x, y); positions off the canvas read as black."""
        if self._inside(x, y):
            return self.pixels[y][x]
        return BLACK

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the colour at (x, y); positions off the canvas are ignored."""
        if self._inside(x, y):
            self.pixels[y][x] = color

    def ppm_rows(self) -> Iterator[str]:
        """Each row as space-separated 0-255 channel values, truncated toward zero."""
        for row in self.pixels:
            yield "".join(
                f"{int(c.r * 255)} {int(c.g * 255)} {int(c.b * 255)} " for c in row
            )

    def to_ppm(self, path: str | PathLike) -> None:
        """Write the pixel rows to a file, one line per row."""
        with open(path, "w", encoding="ascii") as handle:
            for line in self.ppm_rows():
                handle.write(line + "\n")