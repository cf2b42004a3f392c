"""Point lights."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from minirt.mesh import Vertex
from minirt.utils import Color
from minirt.vec3 import Vec3


@dataclass(slots=True, eq=False)
class Light:
    """A point light: its position, brightness ratio and colour."""

    point: Vertex = field(default_factory=Vertex)
    bright: float = 1.0
    color: Color = field(default_factory=Color)


def create_light(center: Vec3, bright: float, color: Color) -> Light:
    """A light at ``center`` in world space with its own copy of ``color``."""
    return Light(
        point=Vertex(wp=center),
        bright=bright,
        color=replace(color, material=replace(color.material)),
    )