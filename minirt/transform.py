"""Placing mesh objects in their local frame."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from minirt.matrix import Matrix4
from minirt.mesh import Basis, MeshObject, Vertex, axis_vertices
from minirt.vec3 import Vec3
from minirt.vec4 import from_vec3


def transform_point(point: Vec3, tm: Matrix4) -> Vec3:
    """Apply a 4x4 transform to a point in homogeneous coordinates (w = 1)."""
    return tm.apply(from_vec3(point, 1.0)).xyz()


def basis_matrix(basis: Basis) -> Matrix4:
    """A matrix whose first three columns are the basis axes ``i``, ``j``, ``k``."""
    i, j, k = basis.i, basis.j, basis.k
    return Matrix4((
        i.x, j.x, k.x, 0.0,
        i.y, j.y, k.y, 0.0,
        i.z, j.z, k.z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ))


def _box_vertices(obj: MeshObject) -> Iterator[Vertex]:
    for box in obj.boxes:
        yield from box.vertices


def _apply(obj: MeshObject, tm: Matrix4) -> None:
    for vertex in (*obj.vertices, *obj.normals, *_box_vertices(obj), *obj.axis):
        vertex.lp = transform_point(vertex.lp, tm)


def transform_object(obj: MeshObject) -> None:
    """Compute local positions from original ones.

    Local positions start as copies of the original ones, are scaled by the
    lengths of the object's basis axes, then rotated onto the unit axes of
    that basis. Axis markers are rebuilt and moved the same way.
    """
    obj.copy_vertices("op", "lp")
    for vertex in _box_vertices(obj):
        vertex.lp = vertex.op
    standard = Basis()
    obj.axis = axis_vertices(standard)
    scale = replace(
        standard,
        i=standard.i * obj.basis.i.mag(),
        j=standard.j * obj.basis.j.mag(),
        k=standard.k * obj.basis.k.mag(),
    )
    _apply(obj, basis_matrix(scale))
    rotation = replace(
        obj.basis,
        i=obj.basis.i.unit(),
        j=obj.basis.j.unit(),
        k=obj.basis.k.unit(),
    )
    _apply(obj, basis_matrix(rotation))