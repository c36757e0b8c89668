"""Rays and their evaluation and transformation."""

from __future__ import annotations

from dataclasses import dataclass

from .matrix import Matrix
from .tuples import Tuple


@dataclass(frozen=True)
class Ray:
    """A half-line starting at origin and running along direction."""

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """The point reached after travelling t units of direction."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """A new ray with origin and direction multiplied by the matrix."""
        return Ray(matrix @ self.origin, matrix @ self.direction)