"""Scene primitives, their materials and surface normals."""

from __future__ import annotations

from dataclasses import dataclass, field

from .matrix import Matrix
from .patterns import BLACK, WHITE, Color, Pattern, PatternType
from .transformations import scaling
from .tuples import EPSILON, Tuple, point, vector


@dataclass
class Material:
    """Surface properties for the Phong lighting model."""

    color: Color = BLACK
    ambient: float = 0.0
    diffuse: float = 0.0
    specular: float = 0.0
    shininess: float = 0.0
    reflective: float = 0.0
    transparency: float = 0.0
    has_pattern: bool = False
    pattern: Pattern = field(default_factory=Pattern)


def sphere_material(color: Color) -> Material:
    return Material(color=color, ambient=0.2, diffuse=0.7, specular=0.7,
                    shininess=300, reflective=0.0)


def cylinder_material(color: Color) -> Material:
    return Material(color=color, ambient=0.2, diffuse=0.9, specular=0.1,
                    shininess=100, reflective=0.0, has_pattern=False)


def plane_material(color: Color) -> Material:
    return Material(color=color, ambient=0.2, diffuse=0.9, specular=0.1,
                    shininess=200, reflective=0.0, transparency=0.0,
                    pattern=Pattern(PatternType.SOLID))


@dataclass
class Sphere:
    center: Tuple = field(default_factory=lambda: point(0, 0, 0))
    radius: float = 1.0
    material: Material = field(default_factory=Material)

    def normal_at(self, world_point: Tuple) -> Tuple:
        offset = world_point - self.center
        normal = offset.normalize()
        if normal.dot(offset) < 0:
            normal = -normal
        return normal


@dataclass
class Cylinder:
    """A capped cylinder rising from center along axis for height units."""

    center: Tuple
    axis: Tuple
    diameter: float
    height: float
    material: Material = field(default_factory=Material)

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return self.height

    def normal_at(self, world_point: Tuple) -> Tuple:
        offset = world_point - self.center
        projection = offset.dot(self.axis)
        if projection >= self.height - EPSILON:
            return self.axis
        if projection <= EPSILON:
            return -self.axis
        return (offset - self.axis * projection).normalize()


@dataclass
class Plane:
    point: Tuple
    normal: Tuple
    material: Material = field(default_factory=Material)
    transform: Matrix = field(default_factory=Matrix.identity)

    def normal_at(self, world_point: Tuple) -> Tuple:
        return self.normal


def create_sphere() -> Sphere:
    """Unit sphere at the origin with a slightly reflective default material."""
    material = Material(ambient=0.2, diffuse=0.7, specular=0.7,
                        shininess=300, reflective=0.1)
    return Sphere(point(0, 0, 0), 1.0, material)


def create_plane(point: Tuple, normal: Tuple, color: Color) -> Plane:
    """A plane with a normalized normal and a scaled black-and-white checker pattern."""
    material = plane_material(color)
    checkers = Pattern.checkers(WHITE, BLACK)
    material.pattern = Pattern(checkers.type, checkers.color1, checkers.color2,
                               scaling(2, 2, 2))
    return Plane(point, normal.normalize(), material, Matrix.identity())


def normal_at(shape, world_point: Tuple) -> Tuple:
    """Surface normal of any primitive; degenerate shapes yield a zero vector."""
    if isinstance(shape, Sphere) and shape.radius > 0:
        return shape.normal_at(world_point)
    if isinstance(shape, Cylinder) and shape.diameter > 0:
        return shape.normal_at(world_point)
    if isinstance(shape, Plane) and (shape.normal.x != 0 or shape.normal.y != 0
                                     or shape.normal.z != 0):
        return shape.normal_at(world_point)
    return vector(0, 0, 0)