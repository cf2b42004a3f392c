"""Three-component vector arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

EPSILON = 1e-6
"""Smallest scale factor that :meth:`Vec3.resized` still applies."""


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector or point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        """Divide by a scalar; dividing by zero leaves the vector unchanged."""
        if scalar == 0:
            return self
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def mag(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def angle(self, other: Vec3) -> float:
        """Angle between the two vectors in radians."""
        cosine = self.dot(other) / (self.mag() * other.mag())
        return math.acos(max(-1.0, min(1.0, cosine)))

    def unit(self) -> Vec3:
        """The vector scaled to length 1."""
        return self.resized(1.0)

    def dist(self, other: Vec3) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def resized(self, size: float) -> Vec3:
        """The vector scaled to the given length.

        A non-positive size, a zero vector, or a scale factor not above
        EPSILON leaves the vector unchanged.
        """
        if size <= 0:
            return self
        magnitude = self.mag()
        if magnitude == 0:
            return self
        factor = size / magnitude
        if factor > EPSILON:
            return self * factor
        return self

    def midpoint(self, other: Vec3) -> Vec3:
        return Vec3(
            (self.x + other.x) * 0.5,
            (self.y + other.y) * 0.5,
            (self.z + other.z) * 0.5,
        )

    def reflect(self, normal: Vec3) -> Vec3:
        """Reflect the vector about the given (unit) normal."""
        return self - normal * (self.dot(normal) * 2.0)

    def shifted(self, scalar: float) -> Vec3:
        """Add the scalar to every component."""
        return Vec3(self.x + scalar, self.y + scalar, self.z + scalar)