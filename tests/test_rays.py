import dataclasses

import pytest

from minirt.matrix import Matrix
from minirt.rays import Ray
from minirt.transformations import scaling, translation
from minirt.tuples import point, vector


def test_position_at_zero_is_origin():
    ray = Ray(point(2, 3, 4), vector(1, 0, 0))
    assert ray.position(0) == point(2, 3, 4)


@pytest.mark.parametrize("t", [-1.5, 0.25, 1.0, 3.0])
def test_position_moves_along_direction(t):
    ray = Ray(point(2, 3, 4), vector(1, -2, 0.5))
    assert ray.position(t) - ray.origin == ray.direction * t


def test_position_is_a_point():
    ray = Ray(point(1, 1, 1), vector(0, 1, 0))
    assert ray.position(2.5).w == 1.0


def test_translation_leaves_direction_unchanged():
    ray = Ray(point(1, 2, 3), vector(0, 1, 0))
    moved = ray.transform(translation(3, 4, 5))
    assert moved.direction == vector(0, 1, 0)
    assert moved.origin == translation(3, 4, 5) @ point(1, 2, 3)


def test_translation_round_trip():
    ray = Ray(point(1, 2, 3), vector(0, 1, 0))
    back = ray.transform(translation(3, 4, 5)).transform(translation(-3, -4, -5))
    assert back == ray


def test_scaling_scales_direction():
    ray = Ray(point(1, 2, 3), vector(0, 1, 0))
    scaled = ray.transform(scaling(2, 3, 4))
    assert scaled.direction == scaling(2, 3, 4) @ vector(0, 1, 0)
    assert scaled.direction.w == 0.0


def test_identity_transform_is_noop():
    ray = Ray(point(1, -2, 3), vector(0.5, 0, 1))
    assert ray.transform(Matrix.identity()) == ray


def test_ray_is_immutable():
    ray = Ray(point(0, 0, 0), vector(0, 0, 1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        ray.origin = point(1, 1, 1)