"""Spheres built by subdividing an octahedron."""

from __future__ import annotations

from dataclasses import dataclass, field

from minirt.mesh import MeshObject, Triangle, Vertex
from minirt.transform import transform_object
from minirt.utils import Color, Material
from minirt.vec3 import Vec3

UNIT = 1.0
"""Length of the per-vertex normals."""

GEN0_SPECULAR = 0.05
"""Specular coefficient of an undivided sphere (an octahedron)."""

_CORNER_SIGNS = (
    (1, 1, 1),
    (-1, 1, 1),
    (-1, 1, -1),
    (1, 1, -1),
    (1, -1, 1),
    (-1, -1, 1),
    (-1, -1, -1),
    (1, -1, -1),
)

_OCTAHEDRON_FACES = (
    (0, 1, 2),
    (0, 2, 4),
    (0, 4, 5),
    (0, 5, 1),
    (3, 1, 2),
    (3, 2, 4),
    (3, 4, 5),
    (3, 5, 1),
)


@dataclass(slots=True, eq=False)
class _BoundingBox:
    """An axis-aligned box: eight corner vertices and the triangles inside it."""

    vertices: list[Vertex] = field(default_factory=list)
    triangles: list[Triangle] = field(default_factory=list)


def _bounding_box(radius: float) -> _BoundingBox:
    return _BoundingBox(
        vertices=[
            Vertex(op=Vec3(sx * radius, sy * radius, sz * radius))
            for sx, sy, sz in _CORNER_SIGNS
        ]
    )


def _init_octahedron(obj: MeshObject) -> None:
    r = obj.size1
    points = (
        Vec3(0.0, r, 0.0),
        Vec3(r, 0.0, 0.0),
        Vec3(0.0, 0.0, r),
        Vec3(0.0, -r, 0.0),
        Vec3(-r, 0.0, 0.0),
        Vec3(0.0, 0.0, -r),
    )
    vertices = obj.add_vertices(len(points))
    for vertex, point in zip(vertices, points):
        vertex.op = point
    obj.triangles = [
        Triangle(vertices[a], vertices[b], vertices[c])
        for a, b, c in _OCTAHEDRON_FACES
    ]


def split_sphere(obj: MeshObject) -> None:
    """Split every triangle into four, pushing the new vertices onto the sphere.

    Each triangle gets three fresh midpoint vertices; they are not shared
    with neighbouring triangles.
    """
    radius = obj.size1
    new_triangles: list[Triangle] = []
    for tri in obj.triangles:
        m12, m23, m31 = obj.add_vertices(3)
        m12.op = tri.ver1.op.midpoint(tri.ver2.op).resized(radius)
        m23.op = tri.ver2.op.midpoint(tri.ver3.op).resized(radius)
        m31.op = tri.ver3.op.midpoint(tri.ver1.op).resized(radius)
        new_triangles.extend((
            Triangle(tri.ver1, m12, m31),
            Triangle(m12, tri.ver2, m23),
            Triangle(m23, tri.ver3, m31),
            Triangle(m12, m23, m31),
        ))
    obj.triangles = new_triangles


def sphere_normals(obj: MeshObject) -> None:
    """Give every vertex a unit normal pointing away from the centre.

    A new normal is added for each vertex and attached to the matching
    corner of every triangle that uses that vertex.
    """
    vertices = list(obj.vertices)
    normals = obj.add_normals(len(vertices))
    by_vertex: dict[int, Vertex] = {}
    for vertex, normal in zip(vertices, normals):
        normal.op = vertex.op.resized(UNIT)
        normal.lp = vertex.lp
        normal.wp = vertex.wp
        normal.cp = vertex.cp
        by_vertex[id(vertex)] = normal
    for tri in obj.triangles:
        normal = by_vertex.get(id(tri.ver1))
        if normal is not None:
            tri.norm1 = normal
        if tri.ver2 is not tri.ver1:
            normal = by_vertex.get(id(tri.ver2))
            if normal is not None:
                tri.norm2 = normal
        if tri.ver3 is not tri.ver1 and tri.ver3 is not tri.ver2:
            normal = by_vertex.get(id(tri.ver3))
            if normal is not None:
                tri.norm3 = normal


def create_sphere(center: Vec3, diameter: float, color: Color, gen: int) -> MeshObject:
    """Build a sphere mesh by splitting an octahedron ``gen`` times.

    With ``gen`` equal to 0 the result is an octahedron with a low specular
    coefficient.
    """
    if gen < 0:
        raise ValueError(f"subdivision count must not be negative, got {gen}")
    obj = MeshObject(center)
    obj.size1 = diameter * 0.5
    obj.color = Color(color.r, color.g, color.b, color.a, material=Material())
    if gen == 0:
        obj.color.material.ks = GEN0_SPECULAR
    obj.boxes = [_bounding_box(obj.size1)]
    _init_octahedron(obj)
    for _ in range(gen):
        split_sphere(obj)
    sphere_normals(obj)
    transform_object(obj)
    obj.boxes[0].triangles = obj.triangles
    obj.claim_triangles()
    return obj