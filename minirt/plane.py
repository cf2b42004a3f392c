"""Infinite planes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from minirt.mesh import Basis, Vertex
from minirt.utils import Color, Material
from minirt.vec3 import Vec3


def _plane_material() -> Material:
    return Material(ka=1.0, kd=0.8, ks=0.0, ns=12.0)


@dataclass(slots=True, eq=False)
class Plane:
    """A plane through ``basis.w_o`` with unit normal ``norm.wp``."""

    norm: Vertex = field(default_factory=Vertex)
    basis: Basis = field(default_factory=Basis)
    color: Color = field(default_factory=lambda: Color(material=_plane_material()))
    texture: Any = None


def create_plane(point: Vec3, norm: Vec3, color: Color) -> Plane:
    """A matte plane through ``point`` facing along ``norm``."""
    return Plane(
        norm=Vertex(wp=norm.unit()),
        basis=Basis(w_o=point),
        color=Color(color.r, color.g, color.b, color.a, material=_plane_material()),
    )