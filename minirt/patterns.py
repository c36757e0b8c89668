"""Colours and surface patterns."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from .matrix import Matrix
from .tuples import EPSILON, Tuple

_CHECKER_SCALE = 0.2
_AXIS_NUDGE = 0.00001


@dataclass(frozen=True)
class Color:
    """An RGB colour with components nominally in [0, 1]."""

    r: float
    g: float
    b: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b))

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, scalar: float) -> Color:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Color(self.r * scalar, self.g * scalar, self.b * scalar)

    __rmul__ = __mul__

    @classmethod
    def from_rgb255(cls, r: float, g: float, b: float) -> Color:
        """Build a colour from 0-255 channel values."""
        return cls(r / 255.0, g / 255.0, b / 255.0)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)


class PatternType(Enum):
    SOLID = "solid"
    CHECKERS = "checkers"


@dataclass(frozen=True)
class Pattern:
    """A two-colour pattern with its own transform."""

    type: PatternType = PatternType.SOLID
    color1: Color = BLACK
    color2: Color = BLACK
    transform: Matrix = field(default_factory=Matrix.identity)

    @classmethod
    def checkers(cls, color1: Color, color2: Color) -> Pattern:
        return cls(PatternType.CHECKERS, color1, color2, Matrix.identity())

    def at(self, point: Tuple) -> Color:
        """Colour of the pattern at a point in pattern space; non-checkers yield black."""
        if self.type is not PatternType.CHECKERS:
            return BLACK
        cells = (abs(math.floor(c * _CHECKER_SCALE + EPSILON))
                 for c in (point.x, point.y, point.z))
        if sum(int(c) for c in cells) % 2 == 0:
            return self.color1
        return self.color2

    def at_shape(self, shape_transform: Matrix, world_point: Tuple) -> Color:
        """Colour at a world point on a shape with the given transform."""
        object_point = shape_transform.inverse() @ world_point
        x = object_point.x + (_AXIS_NUDGE if abs(object_point.x) < _AXIS_NUDGE else 0)
        z = object_point.z + (_AXIS_NUDGE if abs(object_point.z) < _AXIS_NUDGE else 0)
        object_point = Tuple(x, object_point.y, z, object_point.w)
        pattern_point = self.transform.inverse() @ object_point
        return self.at(pattern_point)