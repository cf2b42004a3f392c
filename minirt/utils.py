"""Colours, materials, small geometric checks, printing helpers and list helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol

from minirt.vec3 import Vec3

PRECISION = 0.001
"""Tolerance used when deciding whether a point lies on a ray."""

RED = "\033[0;31m"
RESET = "\033[0m"


@dataclass(slots=True)
class Material:
    """Phong lighting coefficients."""

    ka: float = 1.0
    kd: float = 0.2
    ks: float = 0.9
    ns: float = 128.0


def _check_channel(name: str, value: int) -> None:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"colour channel {name} must be an integer 0..255, got {value!r}")


@dataclass(slots=True)
class Color:
    """An 8-bit RGBA colour together with the material it is drawn with.

    The packed form is ``0xRRGGBBAA``.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255
    material: Material = field(default_factory=Material)

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_channel(name, getattr(self, name))

    @classmethod
    def from_packed(cls, value: int) -> Color:
        """Build a colour from a packed ``0xRRGGBBAA`` integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"packed colour out of range: {value!r}")
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    def packed(self) -> int:
        """The colour as a packed ``0xRRGGBBAA`` integer."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    def unit(self) -> tuple[float, float, float]:
        """The red, green and blue channels as fractions of 255."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)

    def lerp(self, other: Color, fraction: float) -> Color:
        """Linear blend towards ``other``; channels are truncated to integers."""

        def blend(start: int, end: int) -> int:
            value = int(start + (end - start) * fraction)
            return max(0, min(255, value))

        return Color(
            blend(self.r, other.r),
            blend(self.g, other.g),
            blend(self.b, other.b),
            blend(self.a, other.a),
            material=self.material,
        )


def point_on_ray(point: Vec3, direction: Vec3) -> bool:
    """Whether ``point`` lies on the ray from the origin along ``direction``."""
    offset = point.cross(direction).mag() / direction.mag()
    return not offset > PRECISION * 0.5


class _BasisLike(Protocol):
    o: Vec3
    i: Vec3
    j: Vec3
    k: Vec3
    w_o: Vec3


def format_vector(v: Vec3) -> str:
    return f"vector3: [{v.x:f}, {v.y:f}, {v.z:f}]"


def format_basis(basis: _BasisLike) -> str:
    """A multi-line description of a basis: origin, axes and world origin."""
    lines = [
        "basis:",
        f"o: {format_vector(basis.o)}",
        f"u: {format_vector(basis.i)}",
        f"j: {format_vector(basis.j)}",
        f"k: {format_vector(basis.k)}",
        f"w_o: {format_vector(basis.w_o)}",
    ]
    return "\n".join(lines)


def print_error(message: str) -> None:
    """Print a highlighted error header followed by the message."""
    print(f"{RED}Error{RESET}")
    print(message)


def add_instance(items: Optional[list[Any]], item: Any) -> list[Any]:
    """A new list holding the items followed by ``item``."""
    return [*(items or ()), item]


def search_instance(items: Optional[list[Any]], item: Any) -> int:
    """Index of the very object ``item`` in ``items``, or -1 if absent."""
    if not items:
        return -1
    return next((idx for idx, candidate in enumerate(items) if candidate is item), -1)


def del_instance(items: Optional[list[Any]], item: Any) -> Optional[list[Any]]:
    """A new list without the object ``item``.

    ``None`` stays ``None``; an empty list, or one without the item, is
    returned unchanged.
    """
    if items is None:
        return None
    idx = search_instance(items, item)
    if idx < 0:
        return items
    return items[:idx] + items[idx + 1:]


def del_all(items: Optional[list[Any]], finalize: Callable[[Any], None]) -> None:
    """Call ``finalize`` on every item in order; the list is discarded."""
    for item in items or ():
        finalize(item)
    return None