"""Ray intersection with spheres, planes, cylinders and whole scenes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .rays import Ray
from .shapes import Cylinder, Plane, Sphere
from .tuples import EPSILON


@dataclass(frozen=True)
class Intersection:
    """A hit at distance t along a ray on the given shape."""

    t: float
    shape: Any


def solve_quadratic(discriminant: float, a: float, b: float) -> tuple[float, float]:
    """Both roots in ascending order, or two infinities when a is near zero.

    A negative discriminant raises ValueError.
    """
    if abs(a) < EPSILON:
        return math.inf, math.inf
    root = math.sqrt(discriminant)
    t1 = (-b - root) / (2 * a)
    t2 = (-b + root) / (2 * a)
    return (t1, t2) if t1 <= t2 else (t2, t1)


def check_cap(ray: Ray, t: float, cylinder: Cylinder) -> bool:
    """Whether the point at t lies within the cylinder's radius of its axis."""
    radius = cylinder.diameter / 2
    to_point = ray.position(t) - cylinder.center
    squared = to_point.dot(to_point) - to_point.dot(cylinder.axis) ** 2
    if squared < 0:
        return False
    return math.sqrt(squared) <= radius


def intersect_sphere(sphere: Sphere, ray: Ray) -> list[Intersection]:
    """Both hits with the sphere, nearest first; empty when the ray misses."""
    sphere_to_ray = ray.origin - sphere.center
    a = ray.direction.dot(ray.direction)
    b = 2.0 * ray.direction.dot(sphere_to_ray)
    c = sphere_to_ray.dot(sphere_to_ray) - sphere.radius * sphere.radius
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0:
        return []
    root = math.sqrt(discriminant)
    t1 = (-b - root) / (2.0 * a)
    t2 = (-b + root) / (2.0 * a)
    if t1 > t2:
        t1, t2 = t2, t1
    return [Intersection(t1, sphere), Intersection(t2, sphere)]


def intersect_plane(plane: Plane, ray: Ray) -> list[Intersection]:
    """The single hit in front of the ray origin, if the ray is not parallel."""
    denom = plane.normal.dot(ray.direction)
    if abs(denom) <= EPSILON:
        return []
    t = (plane.point - ray.origin).dot(plane.normal) / denom
    if t < 0:
        return []
    return [Intersection(t, plane)]


def _intersect_body(cylinder: Cylinder, ray: Ray) -> list[float]:
    oc = ray.origin - cylinder.center
    d_axis = ray.direction.dot(cylinder.axis)
    oc_axis = oc.dot(cylinder.axis)
    a = ray.direction.dot(ray.direction) - d_axis ** 2
    b = 2 * (ray.direction.dot(oc) - d_axis * oc_axis)
    c = oc.dot(oc) - oc_axis ** 2 - (cylinder.diameter / 2) ** 2
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return []
    hits = []
    for t in solve_quadratic(discriminant, a, b):
        height = (ray.position(t) - cylinder.center).dot(cylinder.axis)
        if 0 <= height <= cylinder.height:
            hits.append(t)
    return hits


def _intersect_caps(cylinder: Cylinder, ray: Ray) -> list[float]:
    direction_dot = ray.direction.dot(cylinder.axis)
    if abs(direction_dot) < EPSILON:
        return []
    hits = []
    for offset in (0, cylinder.height):
        cap_center = cylinder.center + cylinder.axis * offset
        t = (cap_center - ray.origin).dot(cylinder.axis) / direction_dot
        if check_cap(ray, t, cylinder):
            hits.append(t)
    return hits


def intersect_cylinder(cylinder: Cylinder, ray: Ray) -> list[Intersection]:
    """Hits with the side first, then with the bottom and top caps."""
    ts = _intersect_body(cylinder, ray) + _intersect_caps(cylinder, ray)
    return [Intersection(t, cylinder) for t in ts]


def intersect_world(scene, ray: Ray) -> list[Intersection]:
    """All hits with the scene's spheres, planes and cylinders, sorted by t."""
    hits: list[Intersection] = []
    for sphere in scene.spheres:
        hits.extend(intersect_sphere(sphere, ray))
    for plane in scene.planes:
        hits.extend(intersect_plane(plane, ray))
    for cylinder in scene.cylinders:
        hits.extend(intersect_cylinder(cylinder, ray))
    return sorted(hits, key=lambda hit: hit.t)