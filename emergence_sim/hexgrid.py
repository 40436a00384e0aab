"""Axial hexagonal coordinates, directions, layouts and shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterator


class Direction(Enum):
    """One of the six neighbouring directions of a hex tile."""

    TOP_RIGHT = 0
    TOP = 1
    TOP_LEFT = 2
    BOTTOM_LEFT = 3
    BOTTOM = 4
    BOTTOM_RIGHT = 5

    @property
    def offset(self) -> "Hex":
        """The axial offset of one step in this direction."""
        return _DIRECTION_OFFSETS[self]

    def left(self) -> "Direction":
        """The direction one 60 degree step to the left."""
        return Direction((self.value + 1) % 6)

    def right(self) -> "Direction":
        """The direction one 60 degree step to the right."""
        return Direction((self.value - 1) % 6)


@dataclass(frozen=True, order=True)
class Hex:
    """A hexagon in axial coordinates; the third cubic coordinate is derived."""

    x: int = 0
    y: int = 0

    ZERO: ClassVar["Hex"]

    @property
    def z(self) -> int:
        """The derived third cubic coordinate."""
        return -self.x - self.y

    @property
    def cubic(self) -> tuple[int, int, int]:
        """The cubic coordinates of this hex."""
        return (self.x, self.y, self.z)

    def __add__(self, other: "Hex") -> "Hex":
        return Hex(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Hex") -> "Hex":
        return Hex(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Hex":
        return Hex(-self.x, -self.y)

    def neighbor(self, direction: Direction) -> "Hex":
        """The adjacent hex in `direction`."""
        return self + direction.offset

    def all_neighbors(self) -> tuple["Hex", ...]:
        """All six adjacent hexes, in `Direction` order."""
        return tuple(self.neighbor(direction) for direction in Direction)

    def distance_to(self, other: "Hex") -> int:
        """The number of steps needed to walk from `self` to `other`."""
        diff = other - self
        return (abs(diff.x) + abs(diff.y) + abs(diff.z)) // 2

    def rotate_right(self, times: int) -> "Hex":
        """Rotates this hex around the origin by `times` 60 degree steps."""
        result = self
        for _ in range(times % 6):
            result = Hex(result.x + result.y, -result.x)
        return result


Hex.ZERO = Hex(0, 0)

_DIRECTION_OFFSETS = {
    Direction.TOP_RIGHT: Hex(1, -1),
    Direction.TOP: Hex(0, -1),
    Direction.TOP_LEFT: Hex(-1, 0),
    Direction.BOTTOM_LEFT: Hex(-1, 1),
    Direction.BOTTOM: Hex(0, 1),
    Direction.BOTTOM_RIGHT: Hex(1, 0),
}

_SQRT_3 = math.sqrt(3.0)


class HexOrientation(Enum):
    """Whether hexes are drawn with a flat side or a point on top."""

    FLAT = "flat"
    POINTY = "pointy"

    @property
    def forward(self) -> tuple[float, float, float, float]:
        if self is HexOrientation.FLAT:
            return (1.5, 0.0, _SQRT_3 / 2.0, _SQRT_3)
        return (_SQRT_3, _SQRT_3 / 2.0, 0.0, 1.5)

    @property
    def inverse(self) -> tuple[float, float, float, float]:
        if self is HexOrientation.FLAT:
            return (2.0 / 3.0, 0.0, -1.0 / 3.0, _SQRT_3 / 3.0)
        return (_SQRT_3 / 3.0, -1.0 / 3.0, 0.0, 2.0 / 3.0)


@dataclass(frozen=True)
class HexLayout:
    """Maps hex coordinates to and from 2D world positions."""

    orientation: HexOrientation = HexOrientation.FLAT
    origin: tuple[float, float] = (0.0, 0.0)
    hex_size: tuple[float, float] = (1.0, 1.0)

    def hex_to_world_pos(self, hex: Hex) -> tuple[float, float]:
        """The centre of `hex` in world coordinates."""
        f0, f1, f2, f3 = self.orientation.forward
        x = (f0 * hex.x + f1 * hex.y) * self.hex_size[0]
        y = (f2 * hex.x + f3 * hex.y) * self.hex_size[1]
        return (x + self.origin[0], y + self.origin[1])

    def world_pos_to_hex(self, pos: tuple[float, float]) -> Hex:
        """The hex containing the world position `pos`."""
        px = (pos[0] - self.origin[0]) / self.hex_size[0]
        py = (pos[1] - self.origin[1]) / self.hex_size[1]
        b0, b1, b2, b3 = self.orientation.inverse
        q = b0 * px + b1 * py
        r = b2 * px + b3 * py
        return _round_fractional(q, r)


def _round_fractional(q: float, r: float) -> Hex:
    s = -q - r
    rq, rr, rs = round(q), round(r), round(s)
    dq, dr, ds = abs(rq - q), abs(rr - r), abs(rs - s)
    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dr > ds:
        rr = -rq - rs
    return Hex(int(rq), int(rr))


def hexagon(center: Hex, radius: int) -> Iterator[Hex]:
    """Yields every hex within `radius` steps of `center`."""
    for x in range(-radius, radius + 1):
        for y in range(max(-radius, -x - radius), min(radius, -x + radius) + 1):
            yield center + Hex(x, y)


def range_count(radius: int) -> int:
    """The number of hexes within `radius` steps of a hex, itself included."""
    return 3 * radius * (radius + 1) + 1