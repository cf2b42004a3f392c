"""Triangle meshes: vertices, triangles, bases and mesh objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from minirt.utils import Color
from minirt.vec3 import Vec3

AXIS_LEN = 10.0
"""Length of the axis markers drawn for an object."""

X, Y, Z, O = range(4)
"""Positions of the axis markers returned by :func:`axis_vertices`."""

_SPACES = ("op", "lp", "wp", "cp")


@dataclass(slots=True)
class Basis:
    """An orthogonal frame: origin ``o``, axes ``i``, ``j``, ``k`` and world origin ``w_o``."""

    o: Vec3 = field(default_factory=Vec3)
    i: Vec3 = field(default_factory=lambda: Vec3(1.0, 0.0, 0.0))
    j: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    k: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 1.0))
    w_o: Vec3 = field(default_factory=Vec3)


@dataclass(slots=True, eq=False)
class Vertex:
    """A point held in several spaces.

    ``op`` is the original position, ``lp`` the local one, ``wp`` the world
    one and ``cp`` the camera one.
    """

    op: Vec3 = field(default_factory=Vec3)
    lp: Vec3 = field(default_factory=Vec3)
    wp: Vec3 = field(default_factory=Vec3)
    cp: Vec3 = field(default_factory=Vec3)


@dataclass(slots=True, eq=False)
class Triangle:
    """Three shared vertices, optional per-vertex normals and the owning object."""

    ver1: Optional[Vertex] = None
    ver2: Optional[Vertex] = None
    ver3: Optional[Vertex] = None
    norm1: Optional[Vertex] = None
    norm2: Optional[Vertex] = None
    norm3: Optional[Vertex] = None
    obj: Any = None

    def set_vertices(self, v1: Vertex, v2: Vertex, v3: Vertex) -> None:
        self.ver1, self.ver2, self.ver3 = v1, v2, v3

    def set_normals(self, n1: Vertex, n2: Vertex, n3: Vertex) -> None:
        self.norm1, self.norm2, self.norm3 = n1, n2, n3


def _check_space(name: str) -> None:
    if name not in _SPACES:
        raise ValueError(f"unknown vertex space {name!r}; expected one of {_SPACES}")


class MeshObject:
    """A renderable object made of triangles that share vertices.

    ``boxes`` holds bounding boxes; each box exposes its corner vertices
    through a ``vertices`` attribute.
    """

    def __init__(self, center: Optional[Vec3] = None) -> None:
        self.basis = Basis()
        if center is not None:
            self.basis.w_o = center
        self.axis: list[Vertex] = axis_vertices(self.basis)
        self.color = Color()
        self.size1 = 0.0
        self.size2 = 0.0
        self.boxes: list[Any] = []
        self.vertices: list[Vertex] = []
        self.normals: list[Vertex] = []
        self.triangles: list[Triangle] = []
        self.texture: Any = None
        self.uv_mapper: Optional[Callable[..., Any]] = None

    def add_vertices(self, count: int) -> list[Vertex]:
        """Append ``count`` fresh vertices and return them."""
        new = [Vertex() for _ in range(count)]
        self.vertices.extend(new)
        return new

    def add_normals(self, count: int) -> list[Vertex]:
        """Append ``count`` fresh normals and return them."""
        new = [Vertex() for _ in range(count)]
        self.normals.extend(new)
        return new

    def add_triangles(self, count: int) -> list[Triangle]:
        """Append ``count`` fresh triangles and return them."""
        new = [Triangle() for _ in range(count)]
        self.triangles.extend(new)
        return new

    def copy_vertices(self, src: str, dst: str) -> None:
        """Copy every vertex and normal position from space ``src`` to ``dst``.

        Spaces are named ``"op"``, ``"lp"``, ``"wp"`` or ``"cp"``.
        """
        _check_space(src)
        _check_space(dst)
        for vertex in (*self.vertices, *self.normals):
            setattr(vertex, dst, getattr(vertex, src))

    def claim_triangles(self) -> None:
        """Mark this object as the owner of each of its triangles."""
        for triangle in self.triangles:
            triangle.obj = self


def axis_vertices(basis: Basis) -> list[Vertex]:
    """Axis markers X, Y, Z of length AXIS_LEN and the origin O, in local space."""
    return [
        Vertex(lp=basis.i.resized(AXIS_LEN)),
        Vertex(lp=basis.j.resized(AXIS_LEN)),
        Vertex(lp=basis.k.resized(AXIS_LEN)),
        Vertex(lp=basis.o),
    ]


def transform_normal(normal: Vec3, src_basis: Basis, tgt_basis: Basis) -> Vec3:
    """Re-express a normal given in ``src_basis`` in ``tgt_basis``, as a unit vector."""
    result = (
        tgt_basis.i * normal.dot(src_basis.i)
        + tgt_basis.j * normal.dot(src_basis.j)
        + tgt_basis.k * normal.dot(src_basis.k)
    )
    return result.unit()