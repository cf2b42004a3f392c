"""The scene: objects, lights, planes and the transform into world space."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional

from minirt.light import Light, create_light
from minirt.matrix import Matrix4
from minirt.mesh import Basis, MeshObject
from minirt.obj_file import load_obj
from minirt.plane import Plane, create_plane
from minirt.sphere import create_sphere
from minirt.transform import transform_point
from minirt.utils import Color
from minirt.vec3 import Vec3

SPHERE_GEN = 3
"""Number of times a sphere's starting octahedron is subdivided."""

MAX_TXTR = 16
"""Blue values MAX_TXTR - 1 and MAX_TXTR select the built-in procedural textures."""


class ObjectKind(enum.Enum):
    """The kinds of scene elements a description can hold."""

    AMBIENT = enum.auto()
    CAMERA = enum.auto()
    LIGHT = enum.auto()
    SPHERE = enum.auto()
    OCTAHEDRON = enum.auto()
    PLANE = enum.auto()
    OBJ = enum.auto()


@dataclass(slots=True)
class ObjectDescription:
    """One parsed scene element, before it is built."""

    kind: ObjectKind
    coord: Vec3 = field(default_factory=Vec3)
    norm: Vec3 = field(default_factory=Vec3)
    color: Color = field(default_factory=Color)
    ratio: float = 0.0
    d: float = 0.0
    h: float = 0.0
    fov: float = 0.0
    obj_file: Optional[str] = None


@dataclass(slots=True)
class Ambient:
    """Ambient lighting: a brightness ratio and a colour."""

    bright: float = 0.0
    color: Color = field(default_factory=Color)


def _lookup_texture(textures: list[Any], blue: int, current: Any) -> Any:
    if 1 <= blue <= len(textures):
        return textures[blue - 1]
    return current


def _object_texture(color: Color, textures: Optional[list[Any]], current: Any) -> Any:
    if not textures or color.r or color.g:
        return current
    texture = current
    if color.b < MAX_TXTR - 1:
        texture = _lookup_texture(textures, color.b, current)
    if color.b == MAX_TXTR - 1:
        texture = MAX_TXTR - 1
    elif color.b == MAX_TXTR:
        texture = MAX_TXTR
    return texture


def _plane_texture(color: Color, textures: Optional[list[Any]], current: Any) -> Any:
    if not textures or color.r or color.g:
        return current
    if color.b < MAX_TXTR - 1:
        return _lookup_texture(textures, color.b, current)
    if color.b == MAX_TXTR - 1:
        return MAX_TXTR - 1
    return MAX_TXTR


@dataclass(slots=True, eq=False)
class World:
    """Everything in a scene, expressed in one world frame.

    ``far.z`` tracks the largest absolute world coordinate of any placed
    vertex.
    """

    flags: int = 0
    basis: Basis = field(default_factory=Basis)
    far: Vec3 = field(default_factory=Vec3)
    boxes: list[Any] = field(default_factory=list)
    objects: list[MeshObject] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    textures: Optional[list[Any]] = None
    camera: Any = None
    ambient: Ambient = field(default_factory=Ambient)
    tm: Matrix4 = field(default_factory=Matrix4.identity)

    def add_object(self, obj: MeshObject) -> list[MeshObject]:
        """Add an object, register its first bounding box and pick its texture."""
        self.objects.append(obj)
        if obj.boxes and obj.boxes[0] is not None:
            self.boxes.append(obj.boxes[0])
        obj.texture = _object_texture(obj.color, self.textures, obj.texture)
        return self.objects

    def add_light(self, light: Light) -> list[Light]:
        self.lights.append(light)
        return self.lights

    def add_plane(self, plane: Plane) -> list[Plane]:
        """Add a plane and pick its texture."""
        self.planes.append(plane)
        plane.texture = _plane_texture(plane.color, self.textures, plane.texture)
        return self.planes

    def set_tm(self, origin: Vec3) -> Matrix4:
        """Build the local-to-world matrix for an object placed at ``origin``."""
        i, j, k = self.basis.i, self.basis.j, self.basis.k
        self.tm = Matrix4((
            i.x, i.y, i.z, i.dot(origin),
            j.x, j.y, j.z, j.dot(origin),
            k.x, k.y, k.z, k.dot(origin),
            0.0, 0.0, 0.0, 1.0,
        ))
        return self.tm

    def place_object(self, obj: MeshObject) -> None:
        """Compute world positions of every vertex, normal, box corner and axis marker."""
        tm = self.set_tm(obj.basis.w_o)
        farthest = self.far.z
        for vertex in obj.vertices:
            vertex.wp = transform_point(vertex.lp, tm)
            farthest = max(farthest, *(abs(c) for c in vertex.wp))
        self.far = Vec3(self.far.x, self.far.y, farthest)
        for normal in obj.normals:
            normal.wp = tm.apply3(normal.lp)
        for box in obj.boxes:
            for corner in box.vertices:
                corner.wp = transform_point(corner.lp, tm)
        for marker in obj.axis:
            marker.wp = transform_point(marker.lp, tm)

    def clear(self) -> None:
        """Drop every object, box, light, plane and texture."""
        self.objects.clear()
        self.boxes.clear()
        self.lights.clear()
        self.planes.clear()
        self.textures = None


def _build_element(world: World, desc: ObjectDescription) -> Optional[MeshObject]:
    kind = desc.kind
    if kind is ObjectKind.CAMERA:
        world.camera = desc
    elif kind is ObjectKind.SPHERE:
        return create_sphere(desc.coord, desc.d, desc.color, SPHERE_GEN)
    elif kind is ObjectKind.OCTAHEDRON:
        return create_sphere(desc.coord, desc.d, desc.color, 0)
    elif kind is ObjectKind.OBJ:
        if desc.obj_file is None:
            raise ValueError("an OBJ description needs a file name")
        load_obj(world, desc.obj_file)
    elif kind is ObjectKind.AMBIENT:
        world.ambient = Ambient(
            bright=desc.ratio,
            color=replace(desc.color, material=replace(desc.color.material)),
        )
    elif kind is ObjectKind.LIGHT:
        world.add_light(create_light(desc.coord, desc.ratio, desc.color))
    elif kind is ObjectKind.PLANE:
        world.add_plane(create_plane(desc.coord, desc.norm, desc.color))
    return None


def build_world(descriptions: Iterable[ObjectDescription]) -> World:
    """Build a world from scene descriptions, in the order given."""
    world = World()
    for desc in descriptions:
        obj = _build_element(world, desc)
        if obj is not None:
            world.place_object(obj)
            world.add_object(obj)
    return world