"""Reading scene descriptions: one element per line, fields separated by spaces."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Iterable

from .patterns import Color
from .scene import Light, Scene
from .shapes import Cylinder, Sphere, create_plane, cylinder_material, sphere_material
from .tuples import parse_float, point, vector

logger = logging.getLogger(__name__)


class SceneError(ValueError):
    """A scene description line or file that cannot be used."""


def _split(text: str, sep: str) -> list[str]:
    """Split on a separator, dropping empty pieces."""
    return [part for part in text.split(sep) if part]


def _field(fields: list[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


def _require_fields(fields: list[str], count: int, element: str) -> None:
    if len(fields) < count:
        raise SceneError(f"Invalid {element} format")


def _components(text: str, element: str) -> list[str]:
    """The comma-separated pieces of a field; at least three are required."""
    parts = _split(text, ",")
    if len(parts) < 3:
        raise SceneError(f"Invalid {element} position format")
    return parts


def _xyz(parts: list[str]) -> tuple[float, float, float]:
    x, y, z = (parse_float(p) for p in parts[:3])
    return x, y, z


def _color(parts: list[str]) -> Color:
    return Color.from_rgb255(*_xyz(parts))


def is_valid_line(line: str) -> bool:
    """Blank lines, comments and lines starting with a space are skipped."""
    return bool(line) and line[0] not in "\n# "


def parse_ambient(line: str, scene: Scene) -> None:
    """A <ratio> <r,g,b>"""
    fields = _split(line, " ")
    if len(fields) < 3:
        raise SceneError("Invalid ambient light format")
    color = _split(fields[2], ",")
    if len(color) < 3:
        raise SceneError("Invalid ambient light color format")
    scene.ambient_intensity = parse_float(fields[1])
    scene.ambient_color = _color(color)


def parse_camera(line: str, scene: Scene) -> None:
    """C <x,y,z> <orientation> <fov in degrees>"""
    fields = _split(line, " ")
    _require_fields(fields, 4, "camera")
    pos = _components(fields[1], "camera")
    orient = _components(fields[2], "camera orientation")
    scene.camera.position = point(*_xyz(pos))
    scene.camera.orientation = vector(*_xyz(orient))
    scene.camera.fov = parse_float(fields[3])


def parse_light(line: str, scene: Scene) -> None:
    """L <x,y,z> <brightness> <r,g,b>"""
    fields = _split(line, " ")
    _require_fields(fields, 4, "light")
    pos = _components(fields[1], "light")
    color = _components(fields[3], "light color")
    scene.light = Light(
        position=point(*_xyz(pos)),
        intensity=parse_float(fields[2]) * 1.2,
        color=_color(color),
    )
    scene.light_count += 1


def parse_sphere(line: str, scene: Scene) -> None:
    """sp <x,y,z> <diameter> <r,g,b>"""
    fields = _split(line, " ")
    _require_fields(fields, 4, "sphere")
    pos = _components(fields[1], "sphere")
    color = _components(fields[3], "sphere color")
    scene.spheres.append(Sphere(
        center=point(*_xyz(pos)),
        radius=parse_float(fields[2]) / 2.0,
        material=sphere_material(_color(color)),
    ))


def parse_plane(line: str, scene: Scene) -> None:
    """pl <x,y,z> <normal> <r,g,b[,reflective[,transparency]]> [reflective [transparency]]"""
    fields = _split(line, " ")
    _require_fields(fields, 4, "plane")
    pos = _components(fields[1], "plane")
    normal = _components(fields[2], "plane normal")
    color = _components(fields[3], "plane color")
    try:
        plane = create_plane(point(*_xyz(pos)), vector(*_xyz(normal)), _color(color))
    except ZeroDivisionError as exc:
        raise SceneError("Invalid plane normal: zero length") from exc
    material = plane.material
    if len(color) > 3:
        material.reflective = parse_float(color[3])
    if len(color) > 4:
        material.transparency = parse_float(color[4])
    if len(fields) > 4:
        material.reflective = parse_float(fields[4])
    if len(fields) > 5:
        material.transparency = parse_float(fields[5])
    scene.planes.append(plane)


def parse_cylinder(line: str, scene: Scene) -> None:
    """cy <x,y,z> <axis> <diameter> <height> <r,g,b>"""
    fields = _split(line, " ")
    _require_fields(fields, 5, "cylinder")
    pos = _components(fields[1], "cylinder position")
    orient = _components(fields[2], "cylinder orientation")
    color = _components(_field(fields, 5), "cylinder color")
    try:
        axis = vector(*_xyz(orient)).normalize()
    except ZeroDivisionError as exc:
        raise SceneError("Invalid cylinder orientation: zero length") from exc
    scene.cylinders.append(Cylinder(
        center=point(*_xyz(pos)),
        axis=axis,
        diameter=parse_float(fields[3]),
        height=parse_float(fields[4]),
        material=cylinder_material(_color(color)),
    ))


_PARSERS = (
    ("sp", parse_sphere),
    ("pl", parse_plane),
    ("cy", parse_cylinder),
    ("A", parse_ambient),
    ("C", parse_camera),
    ("L", parse_light),
)


def parse_line(line: str, scene: Scene) -> None:
    """Dispatch a line on its identifier; unknown identifiers are ignored."""
    for prefix, parser in _PARSERS:
        if line.startswith(prefix):
            parser(line, scene)
            return


def parse_scene_lines(lines: Iterable[str]) -> Scene:
    """Build a scene from lines; malformed elements are reported and skipped.

    Raises SceneError when the result has no sphere or no light.
    """
    scene = Scene()
    for raw in lines:
        line = raw.split("\n", 1)[0]
        if not is_valid_line(line):
            continue
        try:
            parse_line(line, scene)
        except SceneError as exc:
            logger.error("Error: %s", exc)
    if not scene.spheres or scene.light_count == 0:
        raise SceneError("Scene must contain at least one sphere and one light")
    return scene


def parse_scene(path: str | PathLike) -> Scene:
    """Read a scene file."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return parse_scene_lines(handle)
    except OSError as exc:
        raise SceneError(f"Could not open file {path}") from exc