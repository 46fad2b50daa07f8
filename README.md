# minirt

A small ray tracer. It casts one ray per pixel through a pinhole camera into
a fixed demo scene (two spheres, a capped cylinder and a plane), shades what
it hits, and falls back to a sky gradient where nothing is hit. The image is
written as a binary PPM file.

It also reads scene descriptions in the `.rt` format: tab-separated lines
for ambient light (`A`), camera (`C`), lights (`L`), spheres (`sp`), planes
(`pl`) and cylinders (`cy`).

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
minirt [output] [--width W] [--height H]
```

Renders the demo scene and writes it to `output` (default `minirt.ppm`) at
`W` x `H` pixels (default 800 x 600). On a write error or an invalid size it
prints a message to standard error and exits with status 1. Run
`minirt --help` for the option list.

## Library use

Rendering:

```python
from minirt.scene import Camera
from minirt.vector import Vec3
from minirt.camera import initialize_camera
from minirt.render import render, save_ppm

camera = Camera(lookat=Vec3(0, 0, -1), vup=Vec3(0, 1, 0), fov=90)
frame = initialize_camera(camera, 800, 600)
pixels = render(frame)          # rows of packed 0xRRGGBBAA integers
save_ppm(pixels, "out.ppm")
```

`initialize_camera` places the eye at the origin and takes the viewing
direction and focal length from `camera.lookat`. `CameraFrame.pixel_center`
gives the position of any pixel centre.

Reading a scene file:

```python
from minirt.parser import parse_file, ParseError

try:
    scene = parse_file("room.rt")
except ParseError as err:
    print(f"bad scene: {err}")
else:
    for obj in scene:
        print(obj)
```

An ambient line looks like `A<TAB>0.2<TAB>255,255,255`; a light line like
`L<TAB>-40.0,50.0,0.0<TAB>0.6<TAB>10,0,255`. The object kind is chosen by
the first of the letters `L C A s c p` found anywhere in the line. A file
without the `.rt` extension, an unreadable file, a line with none of those
letters (including a line holding only a newline) or a line with the wrong
number of fields raises `ParseError`. Adding more than 100 objects to a
`Scene` raises `SceneError`. Numbers are read leniently (`minirt.numbers`):
parsing stops at the first character that does not fit, and colour channels
wrap to 8 bits. `parse_lines` builds a scene from any iterable of lines.

Vector maths lives in `minirt.vector` (`Vec3` with `+`, `-`, unary `-`,
`scale`, `dot`, `cross`, `length`, `unit` and friends, plus `reflection`,
`refraction`, `reflectance` and `lerp` helpers), colours in `minirt.color`
(`Color`, `parse_color`), and the intersection routines (`hit_sphere`,
`intersect_plane`, `hit_cylinder`, `intersections`, `color_ray`) in
`minirt.trace`.

## What it does not do

- The renderer draws only its built-in demo scene. Scenes read with
  `minirt.parser` are not rendered, and the command line takes no scene file.
- Lights and ambient light are parsed but play no part in shading.
- There is no window or live display; output is a PPM file only.