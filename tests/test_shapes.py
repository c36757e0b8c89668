import pytest

from minirt.matrix import Matrix
from minirt.patterns import Color, PatternType
from minirt.shapes import (
    Cylinder,
    Material,
    Plane,
    Sphere,
    create_plane,
    create_sphere,
    cylinder_material,
    normal_at,
    plane_material,
    sphere_material,
)
from minirt.transformations import scaling
from minirt.tuples import point, vector

RED = Color(1, 0, 0)


def test_default_material_is_zeroed():
    m = Material()
    assert (m.ambient, m.diffuse, m.specular, m.shininess, m.reflective) == (0, 0, 0, 0, 0)


def test_sphere_material_values():
    m = sphere_material(RED)
    assert (m.color, m.ambient, m.diffuse, m.specular, m.shininess, m.reflective) == (
        RED, 0.2, 0.7, 0.7, 300, 0.0)


def test_cylinder_material_values():
    m = cylinder_material(RED)
    assert (m.color, m.ambient, m.diffuse, m.specular, m.shininess, m.reflective) == (
        RED, 0.2, 0.9, 0.1, 100, 0.0)
    assert m.has_pattern is False


def test_plane_material_values():
    m = plane_material(RED)
    assert (m.ambient, m.diffuse, m.specular, m.shininess, m.transparency) == (
        0.2, 0.9, 0.1, 200, 0.0)
    assert m.pattern.type is PatternType.SOLID


def test_create_sphere_defaults():
    s = create_sphere()
    assert s.center == point(0, 0, 0)
    assert s.radius == 1.0
    assert s.material.reflective == 0.1
    assert s.material.shininess == 300


@pytest.mark.parametrize("direction", [vector(1, 0, 0), vector(0, 0, 1), vector(0, -1, 0)])
def test_sphere_normal_points_outward(direction):
    center = point(1, 2, 3)
    s = Sphere(center, 2.0)
    n = s.normal_at(center + direction * 2.0)
    assert tuple(n) == pytest.approx(tuple(direction))


def test_sphere_normal_is_unit():
    s = Sphere(point(0, 0, 0), 3.0)
    assert s.normal_at(point(1, 2, 2)).magnitude() == pytest.approx(1.0)


def make_cylinder():
    return Cylinder(point(0, 0, 0), vector(0, 1, 0), 2.0, 4.0)


def test_cylinder_top_cap_normal_is_axis():
    c = make_cylinder()
    assert c.normal_at(point(0.5, 4, 0)) == c.axis


def test_cylinder_bottom_cap_normal_is_negated_axis():
    c = make_cylinder()
    assert c.normal_at(point(0.5, 0, 0)) == -c.axis


def test_cylinder_side_normal_is_radial():
    c = make_cylinder()
    p = c.center + c.axis * 2 + vector(1, 0, 0)
    assert tuple(c.normal_at(p)) == pytest.approx(tuple(vector(1, 0, 0)))


def test_cylinder_bounds():
    c = make_cylinder()
    assert (c.minimum, c.maximum) == (0.0, c.height)


def test_plane_normal_ignores_point():
    n = vector(0, 1, 0)
    pl = Plane(point(0, 0, 0), n)
    assert pl.normal_at(point(10, 0, -7)) == n
    assert pl.normal_at(point(-3, 0, 2)) == n


def test_create_plane_normalizes_and_patterns():
    pl = create_plane(point(0, 1, 0), vector(0, 3, 4), RED)
    assert pl.normal.magnitude() == pytest.approx(1.0)
    assert pl.material.color == RED
    assert pl.material.shininess == 200
    assert pl.material.pattern.type is PatternType.CHECKERS
    assert pl.material.pattern.transform == scaling(2, 2, 2)
    assert pl.transform == Matrix.identity()


def test_create_plane_zero_normal_raises():
    with pytest.raises(ZeroDivisionError):
        create_plane(point(0, 0, 0), vector(0, 0, 0), RED)


def test_normal_at_dispatches_to_shape():
    s = Sphere(point(0, 0, 0), 1.0)
    c = make_cylinder()
    pl = Plane(point(0, 0, 0), vector(0, 0, 1))
    p = point(0.6, 0.8, 0)
    assert normal_at(s, p) == s.normal_at(p)
    assert normal_at(c, point(1, 2, 0)) == c.normal_at(point(1, 2, 0))
    assert normal_at(pl, p) == pl.normal


def test_normal_at_degenerate_is_zero_vector():
    assert normal_at(Sphere(point(0, 0, 0), 0.0), point(1, 0, 0)) == vector(0, 0, 0)
    assert normal_at(Plane(point(0, 0, 0), vector(0, 0, 0)), point(1, 0, 0)) == vector(0, 0, 0)