# rtscene

Building blocks for a small ray tracer:

- `rtscene.vec3` – the immutable `Vec3` type with component-wise and scalar
  arithmetic, `dot`, `cross`, `length`, `squared_length`, `normalized` and
  `reflect`.
- `rtscene.noise` – 3D gradient noise (`perlin_noise`) with a fixed
  permutation table, plus `fade` and `lerp`.
- `rtscene.rotation` – `rotate_x`, `rotate_z` (radians) and `rotate_axis`
  (degrees, about any axis).
- `rtscene.model` – `Ray`, `HitPoint`, `ObjectKind`, the shapes `Sphere`,
  `Plane`, `Cylinder`, `Cone`, plus `Light`, `SceneObject`, `Camera` and
  `Scene`.
- `rtscene.sphere` – `hit_sphere`, `sphere_normal`, `light_in_sphere`.
- `rtscene.cone` – `hit_cone` and `cone_normal` for capped 45-degree cones.
- `rtscene.texture` – `checkerboard_plane` and `bump_map_sphere`.
- `rtscene.motion` – objects following waypoint routes: `move_objects`,
  `step`, `point_close`, `direction_to_target`.
- `rtscene.controls` – keyboard handling through `handle_key`.
- `rtscene.reader`, `rtscene.parse_basic`, `rtscene.parse_solid`,
  `rtscene.scene_file` – reading `.rt` scene descriptions.

The package has no third-party dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Scene files

A scene file has the `.rt` extension and holds one element per line.
Blank lines are ignored; any other line must start with one of these
identifiers followed by whitespace, or `ParseError` is raised.

| Id   | Element  | Fields                                                                  |
|------|----------|-------------------------------------------------------------------------|
| `A`  | ambient  | accepted, contents not read                                             |
| `C`  | camera   | accepted, contents not read                                             |
| `L`  | light    | position, brightness (0–1), optional color                              |
| `sp` | sphere   | center, diameter, color, optional `t`/`f` bump flag, optional route     |
| `pl` | plane    | point, normal, color, optional `t`/`f` checkerboard flag, optional route |
| `cy` | cylinder | base, axis, diameter, height, color, optional route                     |
| `co` | cone     | apex, axis, diameter, height, color, optional route                     |

Vectors are written as `x,y,z`. Colors take components from 0 to 255 and
are stored divided by 255; when a light has no color it is set to
`Vec3(255, 255, 255)`. Normals and axes take components between -1 and 1,
must not be zero, and are stored normalised. Diameters and heights must be
positive. A cone's base radius is set equal to its height.

A route is a count `n`, then `n` waypoints, then a speed (its absolute
value is used). The object's starting position becomes the first waypoint,
and the object loops through all of them.

```
L  0,10,0  0.7  255,255,255
sp 0,0,20  10   200,40,40  t  2  5,0,20  -5,0,20  3.0
pl 0,-5,0  0,1,0  120,120,120  t
```

## Usage

```python
from rtscene.scene_file import load_scene, parse_text
from rtscene.model import ObjectKind, Ray
from rtscene.vec3 import Vec3
from rtscene.sphere import hit_sphere, sphere_normal

scene = load_scene("example.rt")          # or parse_text(text)
ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, 1))
for obj in scene.objects:
    if obj.kind is ObjectKind.SPHERE:
        hit = hit_sphere(ray, obj)
        if hit.object is not None:
            print(hit.t, hit.p, sphere_normal(hit))
```

A miss is a `HitPoint` with `t == -1.0` and `object` set to `None`.
`load_scene` raises `rtscene.reader.ParseError` when the name does not end
in `.rt`, the file cannot be opened, it is empty, or a line is malformed.

### Motion and controls

`rtscene.motion.move_objects(scene)` advances every object with a route by
`scene.delta_time`.

`rtscene.controls.handle_key(scene, KeyEvent(Key.W, Action.PRESS))` applies
a key to the current mode and returns whether something changed:

- camera mode: arrows rotate the view direction, W/S/A/D/Q/Z move the
  camera, `O` selects the current object, `L` switches to light mode;
- light mode: `TAB` selects the next light, W/S/A/D/Q/Z move it one unit,
  `O` goes to object mode, `L` back to camera mode;
- object mode: `TAB` selects the next object, arrows rotate it (planes,
  cylinders and cones), W/S/A/D/Q/Z move it one unit, `L` goes to light
  mode, `O` back to camera mode.

`Escape` raises `SystemExit`. `scene.current_name` names the current
selection.

## What it does not do

There is no renderer: nothing here casts rays per pixel, computes lighting
or shadows, or writes an image, and there is no window or command-line
program. Ray intersection is provided for spheres and cones only, not for
planes or cylinders. Ambient and camera lines in a scene file are accepted
but their values are not read, so the `Scene`'s camera and ambient settings
keep their defaults.