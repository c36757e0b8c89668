"""Homogeneous 4-component tuples for points and vectors, plus numeric helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

EPSILON = 1e-5


@dataclass(frozen=True)
class Tuple:
    """A homogeneous coordinate: w is 1.0 for points and 0.0 for vectors."""

    x: float
    y: float
    z: float
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y,
                     self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y,
                     self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar,
                     self.z * scalar, self.w * scalar)

    def __truediv__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple(self.x / scalar, self.y / scalar,
                     self.z / scalar, self.w / scalar)

    def magnitude(self) -> float:
        """Length over all four components."""
        return math.sqrt(self.x * self.x + self.y * self.y
                         + self.z * self.z + self.w * self.w)

    def normalize(self) -> Tuple:
        """Divide by the four-component magnitude; a zero tuple raises ZeroDivisionError."""
        return self / self.magnitude()

    def normalize_xyz(self) -> Tuple:
        """Normalize using only x, y and z; a zero-length tuple is returned unchanged."""
        mag = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if mag == 0:
            return self
        return Tuple(self.x / mag, self.y / mag, self.z / mag, self.w)

    def dot(self, other: Tuple) -> float:
        return (self.x * other.x + self.y * other.y
                + self.z * other.z + self.w * other.w)

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of the xyz parts, returned as a vector."""
        return vector(self.y * other.z - self.z * other.y,
                      self.z * other.x - self.x * other.z,
                      self.x * other.y - self.y * other.x)

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this direction about the given normal."""
        return self - normal * (2 * self.dot(normal))


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 0.0)


def _leading_digits(text: str) -> tuple[str, str]:
    digits = []
    rest = text
    for ch in text:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    rest = text[len(digits):]
    return "".join(digits), rest


def parse_float(text: str) -> float:
    """Read an optional sign, digits and an optional fraction; stop at anything else.

    Leading whitespace is not skipped, and text without digits yields zero.
    """
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]
    elif text.startswith("+"):
        text = text[1:]

    integer_digits, text = _leading_digits(text)
    integer_part = 0.0
    for ch in integer_digits:
        integer_part = integer_part * 10 + (ord(ch) - ord("0"))

    fractional_part = 0.0
    if text.startswith("."):
        fraction_digits, _ = _leading_digits(text[1:])
        fraction = 1.0
        for ch in fraction_digits:
            fraction *= 0.1
            fractional_part += (ord(ch) - ord("0")) * fraction

    return sign * (integer_part + fractional_part)


def degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)