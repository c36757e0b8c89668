"""Precomputed hit data and the Schlick reflectance approximation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .rays import Ray
from .shapes import normal_at
from .tuples import EPSILON, Tuple


@dataclass
class Computations:
    """Everything shading needs to know about one ray-surface hit."""

    t: float
    shape: Any
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool
    over_point: Tuple
    reflectv: Tuple
    n1: float = 1.0
    n2: float = 1.0


def prepare_computations(t: float, ray: Ray, hit_object: Any) -> Computations:
    """Hit point, eye and normal vectors, with the normal flipped toward the eye."""
    hit_point = ray.position(t)
    eyev = -ray.direction
    normalv = normal_at(hit_object, hit_point)
    inside = normalv.dot(eyev) < 0
    if inside:
        normalv = -normalv
    return Computations(
        t=t,
        shape=hit_object,
        point=hit_point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        over_point=hit_point + normalv * EPSILON,
        reflectv=ray.direction.reflect(normalv),
    )


def schlick(comps: Computations) -> float:
    """Fraction of light reflected at the hit; 1.0 under total internal reflection."""
    cos = comps.eyev.dot(comps.normalv)
    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)
    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1 - r0) * (1 - cos) ** 5