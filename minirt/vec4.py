"""Four-component vector arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from minirt.vec3 import Vec3


@dataclass(frozen=True, slots=True)
class Vec4:
    """An immutable 4D vector, typically homogeneous coordinates or a quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Vec4) -> Vec4:
        return Vec4(self.x + other.x, self.y + other.y,
                    self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4) -> Vec4:
        return Vec4(self.x - other.x, self.y - other.y,
                    self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> Vec4:
        return Vec4(self.x * scalar, self.y * scalar,
                    self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec4:
        """Divide by a scalar; dividing by zero gives the zero vector."""
        if scalar == 0:
            return Vec4()
        return Vec4(self.x / scalar, self.y / scalar,
                    self.z / scalar, self.w / scalar)

    def dot(self, other: Vec4) -> float:
        return (self.x * other.x + self.y * other.y
                + self.z * other.z + self.w * other.w)

    def cross(self, other: Vec4) -> Vec4:
        """Cross product of the xyz parts; w of the result is zero."""
        return Vec4(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            self.w * other.w - self.w * other.w,
        )

    def mag(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2 + self.w ** 2)

    def unit(self) -> Vec4:
        """The vector scaled to length 1."""
        return self.resized(1.0)

    def dist(self, other: Vec4) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
            + (self.w - other.w) ** 2
        )

    def resized(self, size: float) -> Vec4:
        """The vector scaled to the given length.

        Raises ZeroDivisionError for the zero vector.
        """
        return self * (size / self.mag())

    def xyz(self) -> Vec3:
        """The first three components as a Vec3."""
        return Vec3(self.x, self.y, self.z)


def from_vec3(v: Vec3, w: float) -> Vec4:
    """Extend a Vec3 with a fourth component."""
    return Vec4(v.x, v.y, v.z, w)