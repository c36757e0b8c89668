"""The scene description: ambient light, camera, light and primitives."""

from __future__ import annotations

from dataclasses import dataclass, field

from .patterns import BLACK, Color
from .shapes import Cylinder, Plane, Sphere
from .tuples import Tuple


def _zero() -> Tuple:
    return Tuple(0.0, 0.0, 0.0, 0.0)


@dataclass
class Light:
    """A point light source."""

    position: Tuple = field(default_factory=_zero)
    intensity: float = 0.0
    color: Color = BLACK


@dataclass
class SceneCamera:
    """Camera placement as read from a scene file; fov is in degrees."""

    position: Tuple = field(default_factory=_zero)
    orientation: Tuple = field(default_factory=_zero)
    fov: float = 0.0


@dataclass
class Scene:
    """Everything needed to render a picture."""

    ambient_intensity: float = 0.0
    ambient_color: Color = BLACK
    camera: SceneCamera = field(default_factory=SceneCamera)
    light: Light = field(default_factory=Light)
    lights: list[Light] = field(default_factory=list)
    light_count: int = 0
    spheres: list[Sphere] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    cylinders: list[Cylinder] = field(default_factory=list)

    def add_light(self, light: Light) -> None:
        """Append a light to the light list and count it."""
        self.lights.append(light)
        self.light_count += 1