"""Rotation of points by quaternions."""

from __future__ import annotations

import math

from minirt.vec3 import Vec3
from minirt.vec4 import Vec4

PI180 = math.pi / 180.0


def quat_multiply(q1: Vec4, q2: Vec4) -> Vec4:
    """Hamilton product of two quaternions, with ``w`` as the scalar part."""
    return Vec4(
        x=q1.w * q2.x + q1.x * q2.w + q1.y * q2.z - q1.z * q2.y,
        y=q1.w * q2.y - q1.x * q2.z + q1.y * q2.w + q1.z * q2.x,
        z=q1.w * q2.z + q1.x * q2.y - q1.y * q2.x + q1.z * q2.w,
        w=q1.w * q2.w - q1.x * q2.x - q1.y * q2.y - q1.z * q2.z,
    )


def qrotate(point: Vec3, angle: float, axis: Vec3) -> Vec3:
    """Rotate a point by ``angle`` degrees about a unit ``axis`` through the origin."""
    if not angle:
        return point
    half = angle * PI180 * 0.5
    s = math.sin(half)
    q = Vec4(s * axis.x, s * axis.y, s * axis.z, math.cos(half))
    conjugate = Vec4(-q.x, -q.y, -q.z, q.w)
    p = Vec4(point.x, point.y, point.z, 0.0)
    return quat_multiply(quat_multiply(q, p), conjugate).xyz()