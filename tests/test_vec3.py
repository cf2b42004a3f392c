import math

import pytest

from minirt.vec3 import Vec3

A = Vec3(1.5, -2.0, 3.25)
B = Vec3(-0.5, 4.0, 2.0)


def approx_vec(v):
    return pytest.approx(tuple(v))


def test_add_then_sub_round_trip():
    assert tuple((A + B) - B) == approx_vec(A)


def test_add_is_commutative():
    assert A + B == B + A


def test_sub_self_is_zero():
    assert A - A == Vec3(0.0, 0.0, 0.0)


def test_mul_then_div_round_trip():
    assert tuple((A * 2.5) / 2.5) == approx_vec(A)


def test_rmul_matches_mul():
    assert 3.0 * A == A * 3.0


def test_div_by_zero_returns_same_vector():
    assert A / 0 == A


def test_neg_adds_to_zero():
    assert A + (-A) == Vec3()


def test_dot_with_self_is_square_of_mag():
    assert A.dot(A) == pytest.approx(A.mag() ** 2)


def test_cross_is_orthogonal_to_inputs():
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(B) == pytest.approx(0.0, abs=1e-9)


def test_cross_is_anticommutative():
    assert tuple(A.cross(B)) == approx_vec(-(B.cross(A)))


def test_cross_of_x_and_y_axes_is_z_axis():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_mag_of_axis_vector():
    assert Vec3(0, 0, -7.0).mag() == pytest.approx(7.0)


def test_angle_of_perpendicular_vectors():
    assert Vec3(1, 0, 0).angle(Vec3(0, 2, 0)) == pytest.approx(math.pi / 2)


def test_angle_of_parallel_vectors_is_zero():
    assert A.angle(A * 3.0) == pytest.approx(0.0, abs=1e-6)


def test_angle_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3().angle(A)


def test_unit_has_length_one_and_same_direction():
    u = A.unit()
    assert u.mag() == pytest.approx(1.0)
    assert A.angle(u) == pytest.approx(0.0, abs=1e-6)


def test_dist_equals_mag_of_difference():
    assert A.dist(B) == pytest.approx((A - B).mag())


def test_dist_is_symmetric():
    assert A.dist(B) == pytest.approx(B.dist(A))


def test_resized_sets_length():
    assert A.resized(5.0).mag() == pytest.approx(5.0)


@pytest.mark.parametrize("size", [0.0, -2.0])
def test_resized_non_positive_size_keeps_vector(size):
    assert A.resized(size) == A


def test_resized_zero_vector_keeps_vector():
    assert Vec3().resized(3.0) == Vec3()


def test_midpoint_is_equidistant():
    m = A.midpoint(B)
    assert m.dist(A) == pytest.approx(m.dist(B))
    assert m.dist(A) == pytest.approx(A.dist(B) / 2)


def test_reflect_preserves_length():
    n = Vec3(0.3, 1.0, -0.2).unit()
    assert A.reflect(n).mag() == pytest.approx(A.mag())


def test_reflect_twice_is_identity():
    n = Vec3(0.3, 1.0, -0.2).unit()
    assert tuple(A.reflect(n).reflect(n)) == approx_vec(A)


def test_reflect_flips_normal_component():
    n = Vec3(0, 1, 0)
    r = Vec3(2.0, -3.0, 1.0).reflect(n)
    assert tuple(r) == approx_vec(Vec3(2.0, 3.0, 1.0))


def test_shifted_round_trip():
    assert tuple(A.shifted(1.75).shifted(-1.75)) == approx_vec(A)


def test_shifted_adds_to_every_component():
    s = A.shifted(2.0)
    assert tuple(s - A) == approx_vec(Vec3(2.0, 2.0, 2.0))