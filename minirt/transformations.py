"""Affine transformation matrices and the view transform."""

from __future__ import annotations

import math

from .matrix import Matrix
from .tuples import Tuple


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [1, 0, 0, x],
        [0, 1, 0, y],
        [0, 0, 1, z],
        [0, 0, 0, 1],
    ])


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [x, 0, 0, 0],
        [0, y, 0, 0],
        [0, 0, z, 0],
        [0, 0, 0, 1],
    ])


def rotation_x(rad: float) -> Matrix:
    c, s = math.cos(rad), math.sin(rad)
    return Matrix([
        [1, 0, 0, 0],
        [0, c, -s, 0],
        [0, s, c, 0],
        [0, 0, 0, 1],
    ])


def rotation_y(rad: float) -> Matrix:
    c, s = math.cos(rad), math.sin(rad)
    return Matrix([
        [c, 0, s, 0],
        [0, 1, 0, 0],
        [-s, 0, c, 0],
        [0, 0, 0, 1],
    ])


def rotation_z(rad: float) -> Matrix:
    c, s = math.cos(rad), math.sin(rad)
    return Matrix([
        [c, -s, 0, 0],
        [s, c, 0, 0],
        [0, 0, 1, 0],
        [0, 0, 0, 1],
    ])


def skewing(x_y: float, x_z: float, y_x: float, y_z: float,
            z_x: float, z_y: float) -> Matrix:
    """Shear matrix: each coordinate moves in proportion to the other two."""
    return Matrix([
        [1, x_y, x_z, 0],
        [y_x, 1, y_z, 0],
        [z_x, z_y, 1, 0],
        [0, 0, 0, 1],
    ])


def look_at(origin: Tuple, target: Tuple, up: Tuple) -> Matrix:
    """View transform for an eye at origin looking towards target."""
    forward = (target - origin).normalize()
    left = up.normalize().cross(forward)
    true_up = forward.cross(left)
    orientation = Matrix.orientation(left, true_up, forward)
    return orientation @ translation(-origin.x, -origin.y, -origin.z)