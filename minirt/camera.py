"""A pinhole camera that maps canvas pixels to world-space rays."""

from __future__ import annotations

import math

from .matrix import Matrix
from .rays import Ray
from .tuples import point


class Camera:
    """A camera with hsize by vsize pixels and a horizontal field of view in radians."""

    def __init__(self, hsize: int, vsize: int, field_of_view: float):
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform: Matrix = Matrix.identity()
        half_view = math.tan(field_of_view / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

    def _pixel_position(self, px: float, py: float):
        world_x = self.half_width - (px + 0.5) * self.pixel_size
        world_y = self.half_height - (py + 0.5) * self.pixel_size
        return point(world_x, world_y, -1)

    def ray_for_pixel(self, px: float, py: float) -> Ray:
        """The ray from the camera through the centre of pixel (px, py)."""
        inverse = self.transform.inverse()
        pixel = inverse @ self._pixel_position(px, py)
        origin = inverse @ point(0, 0, 0)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)