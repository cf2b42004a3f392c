import math

import pytest

from minirt.matrix import Matrix4
from minirt.mesh import AXIS_LEN, X, Y, Z, O, Basis, MeshObject, Vertex
from minirt.transform import basis_matrix, transform_object, transform_point
from minirt.vec3 import Vec3


class _Box:
    def __init__(self, corners):
        self.vertices = [Vertex(op=c) for c in corners]


ROTATED = Basis(i=Vec3(0.0, 1.0, 0.0), j=Vec3(-1.0, 0.0, 0.0), k=Vec3(0.0, 0.0, 1.0))


def test_transform_point_identity():
    p = Vec3(1.5, -2.0, 3.0)
    assert transform_point(p, Matrix4.identity()) == p


def test_transform_point_translation():
    tm = Matrix4((
        1, 0, 0, 4.0,
        0, 1, 0, 5.0,
        0, 0, 1, 6.0,
        0, 0, 0, 1,
    ))
    result = transform_point(Vec3(1.0, 2.0, 3.0), tm)
    assert tuple(result) == pytest.approx((5.0, 7.0, 9.0), abs=1e-9)


def test_basis_matrix_of_standard_basis_is_identity():
    assert basis_matrix(Basis()) == Matrix4.identity()


def test_basis_matrix_columns_are_axes():
    m = basis_matrix(ROTATED)
    cols = m.columns()
    assert Vec3(*cols[0][:3]) == ROTATED.i
    assert Vec3(*cols[1][:3]) == ROTATED.j
    assert Vec3(*cols[2][:3]) == ROTATED.k
    assert cols[3] == (0.0, 0.0, 0.0, 1.0)


def test_transform_object_default_basis_keeps_positions():
    obj = MeshObject()
    v = obj.add_vertices(1)[0]
    v.op = Vec3(1.0, 2.0, 3.0)
    transform_object(obj)
    assert tuple(v.lp) == pytest.approx((1.0, 2.0, 3.0), abs=1e-9)


def test_transform_object_rotates_onto_basis():
    obj = MeshObject()
    obj.basis = Basis(i=ROTATED.i, j=ROTATED.j, k=ROTATED.k)
    vx, vy = obj.add_vertices(2)
    vx.op = Vec3(1.0, 0.0, 0.0)
    vy.op = Vec3(0.0, 1.0, 0.0)
    transform_object(obj)
    assert tuple(vx.lp) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)
    assert tuple(vy.lp) == pytest.approx((-1.0, 0.0, 0.0), abs=1e-9)
    assert vx.op == Vec3(1.0, 0.0, 0.0)


def test_transform_object_rotation_preserves_length():
    obj = MeshObject()
    obj.basis = Basis(i=ROTATED.i, j=ROTATED.j, k=ROTATED.k)
    v = obj.add_vertices(1)[0]
    v.op = Vec3(3.0, -4.0, 12.0)
    transform_object(obj)
    assert math.isclose(v.lp.mag(), 13.0)


def test_transform_object_scales_by_axis_length():
    obj = MeshObject()
    obj.basis = Basis(i=Vec3(2.0, 0.0, 0.0))
    v = obj.add_vertices(1)[0]
    v.op = Vec3(1.0, 1.0, 1.0)
    transform_object(obj)
    assert tuple(v.lp) == pytest.approx((2.0, 1.0, 1.0), abs=1e-9)


def test_transform_object_moves_normals_and_boxes():
    obj = MeshObject()
    obj.basis = Basis(i=ROTATED.i, j=ROTATED.j, k=ROTATED.k)
    n = obj.add_normals(1)[0]
    n.op = Vec3(1.0, 0.0, 0.0)
    box = _Box([Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0)])
    obj.boxes.append(box)
    transform_object(obj)
    assert tuple(n.lp) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)
    assert tuple(box.vertices[0].lp) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)
    assert tuple(box.vertices[1].lp) == pytest.approx((-1.0, 0.0, 0.0), abs=1e-9)


def test_transform_object_rebuilds_axis():
    obj = MeshObject()
    obj.basis = Basis(i=ROTATED.i, j=ROTATED.j, k=ROTATED.k)
    transform_object(obj)
    assert tuple(obj.axis[X].lp) == pytest.approx((0.0, AXIS_LEN, 0.0), abs=1e-6)
    assert tuple(obj.axis[Y].lp) == pytest.approx((-AXIS_LEN, 0.0, 0.0), abs=1e-6)
    assert tuple(obj.axis[Z].lp) == pytest.approx((0.0, 0.0, AXIS_LEN), abs=1e-6)
    assert tuple(obj.axis[O].lp) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)