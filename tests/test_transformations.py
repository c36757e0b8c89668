import math

import pytest

from minirt.matrix import Matrix
from minirt.transformations import (
    look_at,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    skewing,
    translation,
)
from minirt.tuples import point, vector


def flat(m):
    return [v for row in m for v in row]


def test_translation_moves_point_by_offset():
    p = point(-3, 4, 5)
    result = translation(5, -3, 2) @ p
    assert tuple(result - p) == pytest.approx(tuple(vector(5, -3, 2)))


def test_translation_leaves_vectors_alone():
    v = vector(-3, 4, 5)
    assert translation(5, -3, 2) @ v == v


def test_translation_inverse_is_opposite_translation():
    inv = translation(5, -3, 2).inverse()
    assert flat(inv) == pytest.approx(flat(translation(-5, 3, -2)))


def test_scaling_point():
    assert scaling(2, 3, 4) @ point(1, 1, 1) == point(2, 3, 4)


def test_scaling_inverse_round_trip():
    m = scaling(2, 2, 2) @ scaling(0.5, 0.5, 0.5)
    assert flat(m) == pytest.approx(flat(Matrix.identity()))


@pytest.mark.parametrize("rotation", [rotation_x, rotation_y, rotation_z])
@pytest.mark.parametrize("angle", [0.3, math.pi / 2, 2.0])
def test_rotation_preserves_length(rotation, angle):
    v = vector(1, 2, 3)
    assert (rotation(angle) @ v).magnitude() == pytest.approx(v.magnitude())


@pytest.mark.parametrize("rotation", [rotation_x, rotation_y, rotation_z])
def test_rotation_by_opposite_angle_cancels(rotation):
    m = rotation(0.7) @ rotation(-0.7)
    assert flat(m) == pytest.approx(flat(Matrix.identity()))


@pytest.mark.parametrize("rotation", [rotation_x, rotation_y, rotation_z])
def test_rotation_transpose_is_inverse(rotation):
    m = rotation(1.1)
    assert flat(m.transpose()) == pytest.approx(flat(m.inverse()))


def test_rotation_z_quarter_turn():
    result = rotation_z(math.pi / 2) @ vector(1, 0, 0)
    assert tuple(result) == pytest.approx(tuple(vector(0, 1, 0)))


def test_skewing_zero_is_identity():
    assert skewing(0, 0, 0, 0, 0, 0) == Matrix.identity()


def test_skewing_places_factors():
    m = skewing(1.5, 2.5, 3.5, 4.5, 5.5, 6.5)
    assert (m[0, 1], m[0, 2], m[1, 0], m[1, 2], m[2, 0], m[2, 1]) == (
        1.5, 2.5, 3.5, 4.5, 5.5, 6.5)


def test_look_at_sends_eye_to_origin():
    eye = point(1, 3, 2)
    m = look_at(eye, point(4, -2, 8), vector(1, 1, 0))
    assert tuple(m @ eye) == pytest.approx(tuple(point(0, 0, 0)))


def test_look_at_forward_maps_to_negative_z():
    eye = point(1, 3, 2)
    target = point(4, -2, 8)
    m = look_at(eye, target, vector(0, 1, 0))
    forward = (target - eye).normalize()
    assert tuple(m @ forward) == pytest.approx(tuple(vector(0, 0, -1)))


def test_look_at_same_points_raises():
    with pytest.raises(ZeroDivisionError):
        look_at(point(1, 1, 1), point(1, 1, 1), vector(0, 1, 0))