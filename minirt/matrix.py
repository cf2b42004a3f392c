"""3x3 and 4x4 matrices stored in row-major order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from minirt.vec3 import Vec3
from minirt.vec4 import Vec4


def _dot(a: Iterable[float], b: Iterable[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _as_elements(values: Iterable[float], count: int, name: str) -> tuple[float, ...]:
    elements = tuple(float(value) for value in values)
    if len(elements) != count:
        raise ValueError(f"{name} needs {count} elements, got {len(elements)}")
    return elements


@dataclass(frozen=True, slots=True)
class Matrix3:
    """An immutable 3x3 matrix; ``elements`` holds the rows one after another."""

    elements: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", _as_elements(self.elements, 9, "Matrix3"))

    @classmethod
    def zeros(cls) -> Matrix3:
        return cls((0.0,) * 9)

    @classmethod
    def ones(cls) -> Matrix3:
        """A matrix with every element set to 1."""
        return cls((1.0,) * 9)

    @classmethod
    def identity(cls) -> Matrix3:
        return cls((1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0))

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.elements[row * 3 + col]

    def rows(self) -> tuple[tuple[float, ...], ...]:
        e = self.elements
        return (e[0:3], e[3:6], e[6:9])

    def columns(self) -> tuple[tuple[float, ...], ...]:
        return tuple(zip(*self.rows()))

    def __matmul__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        cols = other.columns()
        return Matrix3(_dot(row, col) for row in self.rows() for col in cols)

    def apply(self, v: Vec3) -> Vec3:
        """Multiply the matrix by a column vector."""
        return Vec3(*(_dot(row, v) for row in self.rows()))

    def det(self) -> float:
        (a, b, c), (d, e, f), (g, h, i) = self.rows()
        return a * e * i + b * f * g + c * d * h - c * e * g - a * f * h - b * d * i


@dataclass(frozen=True, slots=True)
class Matrix4:
    """An immutable 4x4 matrix; ``elements`` holds the rows one after another."""

    elements: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", _as_elements(self.elements, 16, "Matrix4"))

    @classmethod
    def zeros(cls) -> Matrix4:
        return cls((0.0,) * 16)

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(1.0 if row == col else 0.0 for row in range(4) for col in range(4))

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.elements[row * 4 + col]

    def rows(self) -> tuple[tuple[float, ...], ...]:
        e = self.elements
        return (e[0:4], e[4:8], e[8:12], e[12:16])

    def columns(self) -> tuple[tuple[float, ...], ...]:
        return tuple(zip(*self.rows()))

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        cols = other.columns()
        return Matrix4(_dot(row, col) for row in self.rows() for col in cols)

    def apply(self, v: Vec4) -> Vec4:
        """Multiply the matrix by a column vector."""
        return Vec4(*(_dot(row, v) for row in self.rows()))

    def apply_transposed(self, v: Vec4) -> Vec4:
        """Multiply the transposed matrix by a column vector."""
        return Vec4(*(_dot(col, v) for col in self.columns()))

    def apply3(self, v: Vec3) -> Vec3:
        """Multiply the upper-left 3x3 block by a column vector."""
        return Vec3(*(_dot(row[:3], v) for row in self.rows()[:3]))

    def _minor(self, row: int, col: int) -> Matrix3:
        return Matrix3(
            value
            for k, value in enumerate(self.elements)
            if k // 4 != row and k % 4 != col
        )

    def det(self) -> float:
        return sum(
            value * self._minor(0, col).det() * (-1) ** col
            for col, value in enumerate(self.rows()[0])
        )

    def inverse(self) -> Matrix4:
        """The inverse matrix; a singular matrix gives the zero matrix."""
        det = self.det()
        if det == 0:
            return Matrix4.zeros()
        scale = 1.0 / det
        cofactors = Matrix4(
            self._minor(row, col).det() * (-1) ** (row + col) * scale
            for row in range(4)
            for col in range(4)
        )
        return cofactors.transposed()

    def transposed(self) -> Matrix4:
        return Matrix4(value for col in self.columns() for value in col)


def tensor3(v1: Vec3, v2: Vec3) -> Matrix3:
    """Outer product of two 3D vectors."""
    return Matrix3(a * b for a in v1 for b in v2)


def tensor4(v1: Vec4, v2: Vec4) -> Matrix4:
    """Outer product of two 4D vectors."""
    return Matrix4(a * b for a in v1 for b in v2)