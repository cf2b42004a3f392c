# minirt

The geometry and scene-building layer of a small ray tracer, in pure Python
with no third-party dependencies.

## Modules

- `minirt.vec3.Vec3`: an immutable 3D vector with `+`, `-`, scalar `*` and
  `/`, negation, `dot`, `cross`, `mag`, `angle` (radians), `unit`, `dist`,
  `resized`, `midpoint`, `reflect` and `shifted` (adds a scalar to every
  component). Dividing by zero returns the vector unchanged.
- `minirt.vec4.Vec4`: the 4D counterpart, with `xyz()` to drop the fourth
  component and `from_vec3(v, w)` to add one. Dividing by zero gives the zero
  vector.
- `minirt.matrix`: immutable row-major `Matrix3` and `Matrix4`. Both support
  `@` products, `apply` (matrix times column vector) and `det`. `Matrix4` also
  has `apply_transposed`, `apply3` (upper-left 3x3 block), `transposed` and
  `inverse`; a singular matrix inverts to the zero matrix. `tensor3` and
  `tensor4` build outer products.
- `minirt.quaternion`: `quat_multiply` (Hamilton product, `w` as the scalar
  part) and `qrotate(point, angle, axis)`, which rotates a point by an angle in
  degrees about a unit axis through the origin.
- `minirt.utils`: `Color` (8-bit RGBA with a `Material`, packed as
  `0xRRGGBBAA`, with `from_packed`, `packed`, `unit` and `lerp`),
  `point_on_ray`, `format_vector`, `format_basis`, `print_error`, and small
  list helpers `add_instance`, `search_instance` (by identity), `del_instance`
  and `del_all`.
- `minirt.shapes`: an RGBA `Image` buffer of `Pixel`s, `draw_line`
  (Bresenham, colour graded from one end to the other with
  `interpolate_color` and `fraction`) and `draw_circle` (midpoint circle).
- `minirt.mesh`: `Basis`, `Vertex` (positions in original `op`, local `lp`,
  world `wp` and camera `cp` space), `Triangle` and `MeshObject`, plus
  `axis_vertices` and `transform_normal`.
- `minirt.transform`: `transform_point`, `basis_matrix` and
  `transform_object`, which computes an object's local positions from its
  original ones.
- `minirt.sphere`: `create_sphere(center, diameter, color, gen)` tessellates a
  sphere from an octahedron, splitting every triangle into four `gen` times
  (`split_sphere`) and giving each vertex a unit normal (`sphere_normals`).
  With `gen` 0 the result is an octahedron with a low specular coefficient.
- `minirt.light.create_light` and `minirt.plane.create_plane`: point lights and
  infinite matte planes.
- `minirt.world`: a `World` that collects objects, lights and planes, places
  objects in world space (`set_tm`, `place_object`) and tracks the farthest
  coordinate in `far.z`. `build_world` assembles a world from a sequence of
  `ObjectDescription`s whose `kind` is an `ObjectKind`: `AMBIENT`, `CAMERA`,
  `LIGHT`, `SPHERE` (subdivided three times), `OCTAHEDRON`, `PLANE` or `OBJ`.
- `minirt.obj_file`: `parse_obj_lines` builds a mesh from the `v`, `vn` and `f`
  lines of a Wavefront OBJ file; `load_obj(world, filename)` reads a file,
  colours the mesh white and adds it to the world, or prints a warning and
  returns `None` if the file cannot be opened. `parse_face_index` splits a
  face corner such as `"3/1/2"`.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Example

```python
from minirt.vec3 import Vec3
from minirt.utils import Color
from minirt.sphere import create_sphere
from minirt.light import create_light
from minirt.world import World

world = World()
sphere = create_sphere(Vec3(0.0, 0.0, 20.0), 10.0, Color(255, 0, 0, 255), 2)
world.place_object(sphere)
world.add_object(sphere)
world.add_light(create_light(Vec3(-10.0, 10.0, 0.0), 0.7, Color(255, 255, 255, 255)))
print(len(sphere.triangles), world.far.z)
```

## What it does not do

- It casts no rays and renders no images of a scene; `minirt.shapes` only
  draws lines and circles into an in-memory `Image`.
- It opens no window and handles no keyboard or mouse input.
- It does not read scene description files; scenes are built in code from
  `ObjectDescription`s.
- A `CAMERA` description is stored on the world as given; there is no camera
  model or projection.
- There are no cylinders or cones, and no texture loading: `World.textures`
  is a list the caller supplies.
- There is no command-line program.

## Running the tests

```
pytest
```