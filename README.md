# minirt

Dependency-free building blocks for a small ray tracer. It reads a
plain-text scene description, provides points, vectors and 4x4 matrices,
a pinhole camera that turns pixels into rays, ray intersection with
spheres, planes and cylinders, surface normals, checker patterns, hit
precomputation with a Schlick reflectance term, and a canvas that writes
its pixels as PPM rows.

## Scene files

A scene is a text file with one element per line. Fields are separated
by spaces. Triples such as positions and colours are separated by
commas. Lines that are empty, or that start with `#` or a space, are
ignored, as are lines whose identifier is not one of those below.

| Element   | Line                                                         |
|-----------|--------------------------------------------------------------|
| Ambient   | `A <ratio> <r,g,b>`                                          |
| Camera    | `C <x,y,z> <dx,dy,dz> <fov in degrees>`                      |
| Light     | `L <x,y,z> <brightness> <r,g,b>`                             |
| Sphere    | `sp <x,y,z> <diameter> <r,g,b>`                              |
| Plane     | `pl <x,y,z> <nx,ny,nz> <r,g,b> [reflective] [transparency]`  |
| Cylinder  | `cy <x,y,z> <ax,ay,az> <diameter> <height> <r,g,b>`          |

Colour channels are given in the range 0 to 255 and stored scaled to
0 to 1. A light's brightness is stored multiplied by 1.2. Plane and
cylinder directions are normalized. A plane's reflective and
transparency values may also follow its colour as fourth and fifth
components (`r,g,b,reflective,transparency`); the separate fields win
when both are given.

A malformed element line is logged as an error and skipped. A scene must
contain at least one sphere and one light, and a file must be readable;
otherwise loading raises `minirt.parser.SceneError` (a `ValueError`).

Example:

```
# a single red ball above a checkered floor
A 0.2 255,255,255
C 0,1,-5 0,0,1 70
L -4,6,-6 0.7 255,255,255
sp 0,1,0 2 255,0,0
pl 0,0,0 0,1,0 200,200,200
cy 2,0,1 0,1,0 1 2 0,0,255
```

## Loading a scene

```python
from minirt.parser import parse_scene, parse_scene_lines

scene = parse_scene("scene.rt")

# or from lines already in memory
scene = parse_scene_lines([
    "A 0.2 255,255,255",
    "C 0,0,-5 0,0,1 60",
    "L 0,5,-5 0.8 255,255,255",
    "sp 0,0,0 2 255,0,0",
])
print(scene.spheres[0].radius)   # 1.0
print(scene.camera.fov)          # 60.0
```

Single lines can be applied to an existing `minirt.scene.Scene` with
`parse_line`, or with the element parsers `parse_ambient`,
`parse_camera`, `parse_light`, `parse_sphere`, `parse_plane` and
`parse_cylinder`; these raise `SceneError` on a malformed line.

## Geometry building blocks

Points and vectors are four-component `Tuple`s; points carry `w = 1` and
vectors `w = 0`. Tuples support `+`, `-`, unary `-`, `*` and `/` by a
number, and `magnitude`, `normalize`, `normalize_xyz`, `dot`, `cross`
and `reflect`.

```python
import math

from minirt.tuples import point, vector
from minirt.transformations import translation, scaling, rotation_y, look_at

p = point(1, 2, 3)
v = vector(0, 1, 0)

m = translation(5, 0, 0) @ scaling(2, 2, 2) @ rotation_y(math.pi / 2)
moved = m @ p
back = m.inverse() @ moved   # approximately p again

view = look_at(point(0, 1, -5), point(0, 1, 0), vector(0, 1, 0))
```

`Matrix` also offers `transpose`, `submatrix`, `minor`, `cofactor` and
`determinant`, and `skewing`, `rotation_x` and `rotation_z` build the
remaining transforms. A matrix whose determinant is within `1e-5` of
zero has no inverse; `inverse()` then returns the 4x4 identity matrix.

## Rays and intersections

```python
import math

from minirt.camera import Camera
from minirt.intersections import intersect_sphere, intersect_world
from minirt.rays import Ray
from minirt.shapes import create_sphere
from minirt.tuples import point, vector

camera = Camera(200, 100, math.pi / 2)
ray = camera.ray_for_pixel(100, 50)

ball = create_sphere()
hits = intersect_sphere(ball, Ray(point(0, 0, -5), vector(0, 0, 1)))
print([hit.t for hit in hits])   # [4.0, 6.0]
```

`intersect_plane` and `intersect_cylinder` work the same way, and
`intersect_world(scene, ray)` gathers the hits with every sphere, plane
and cylinder in a scene, sorted by distance. `minirt.world` turns a hit
into `Computations` with `prepare_computations` and gives the Schlick
reflectance approximation with `schlick`.

## Writing images

```python
from minirt.canvas import Canvas
from minirt.patterns import Color

canvas = Canvas(10, 5)
canvas.write_pixel(2, 3, Color(1.0, 0.5, 0.0))
canvas.to_ppm("out.ppm")
```

`to_ppm` writes one line per canvas row, each pixel as three integer
channel values (truncated towards zero after scaling by 255); no PPM
header is written. `ppm_rows()` yields the same lines without touching
the file system.

## What it does not do

The package has no lighting or shading step: materials carry ambient,
diffuse, specular, shininess and reflective values, but nothing here
computes a lit colour, casts shadow rays or follows reflections. There
is no rendering loop that fills a canvas from a scene, no window to show
a picture in, and no command-line program. Those steps are left to the
code that uses these building blocks.