"""Loading triangle meshes from Wavefront OBJ files."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from minirt.mesh import MeshObject, Vertex
from minirt.transform import transform_object
from minirt.utils import Color
from minirt.vec3 import Vec3

if TYPE_CHECKING:
    from minirt.world import World

OBJ_V = "v"
OBJ_VN = "vn"
OBJ_F = "f"

_INTEGER = re.compile(r"[+-]?\d+")


def _is_int(text: str) -> bool:
    return bool(_INTEGER.fullmatch(text))


def parse_face_index(text: Optional[str]) -> tuple[int, int, int]:
    """Split a face corner such as ``"3/1/2"`` into three indices.

    Missing or malformed parts are -1. Empty parts are dropped before the
    indices are assigned, so ``"3//2"`` gives ``(3, 2, -1)``.
    """
    if text is None:
        return (-1, -1, -1)
    parts = [part for part in text.split("/") if part]
    if not parts or not _is_int(parts[0]):
        return (-1, -1, -1)
    vertex = int(parts[0])
    texture = int(parts[1]) if len(parts) > 1 and _is_int(parts[1]) else -1
    normal = int(parts[2]) if len(parts) > 2 and _is_int(parts[2]) else -1
    return (vertex, texture, normal)


def _read_xyz(words: Sequence[str]) -> Optional[Vec3]:
    if len(words) < 4:
        print("Wrong float number.")
        return None
    return Vec3(float(words[1]), float(words[2]), float(words[3]))


def _pick(items: Sequence[Vertex], index: int, what: str) -> Vertex:
    if not 1 <= index <= len(items):
        raise ValueError(f"{what} index {index} out of range 1..{len(items)}")
    return items[index - 1]


def _add_face(obj: MeshObject, words: Sequence[str]) -> None:
    texts = (list(words[1:4]) + [None] * 3)[:3]
    corners = [parse_face_index(text) for text in texts]
    if any(corner[0] < 0 for corner in corners):
        return
    vertices = [_pick(obj.vertices, corner[0], "vertex") for corner in corners]
    normals = None
    if all(corner[2] != -1 for corner in corners):
        normals = [_pick(obj.normals, corner[2], "normal") for corner in corners]
    elif obj.normals:
        normals = [_pick(obj.normals, corner[0], "normal") for corner in corners]
    triangle = obj.add_triangles(1)[0]
    triangle.set_vertices(*vertices)
    if normals is not None:
        triangle.set_normals(*normals)


def parse_obj_lines(lines: Iterable[str]) -> MeshObject:
    """Build a mesh from the ``v``, ``vn`` and ``f`` lines of an OBJ file.

    Other lines are ignored. Vertex lines with fewer than three coordinates
    are reported and skipped; faces whose corners lack a vertex index are
    skipped. Face indices outside the known vertices or normals raise
    ValueError.
    """
    obj = MeshObject()
    for line in lines:
        words = line.split()
        if not words:
            continue
        keyword = words[0]
        if keyword == OBJ_V:
            point = _read_xyz(words)
            if point is not None:
                obj.add_vertices(1)[0].op = point
        elif keyword == OBJ_VN:
            point = _read_xyz(words)
            if point is not None:
                obj.add_normals(1)[0].op = point
        elif keyword == OBJ_F:
            _add_face(obj, words)
    return obj


def load_obj(world: World, filename: str) -> Optional[MeshObject]:
    """Load a white mesh from an OBJ file and add it to the world.

    A file that cannot be opened is reported and gives None.
    """
    try:
        with open(filename, encoding="utf-8") as handle:
            obj = parse_obj_lines(handle)
    except OSError:
        print(f'Warning: "{filename}" couldn\'t be open.')
        return None
    obj.color = Color.from_packed(0xFFFFFFFF)
    transform_object(obj)
    world.add_object(obj)
    obj.claim_triangles()
    return obj