"""Tile positions, heights, facings and structure footprints on the hex grid."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator, Optional, Protocol

from emergence_sim.hexgrid import Direction, Hex, HexLayout, hexagon

logger = logging.getLogger(__name__)

_U8_MAX = 255


class _Geometry(Protocol):
    """The parts of the map geometry that tile positions rely on."""

    radius: int
    layout: HexLayout

    def is_valid(self, tile_pos: "TilePos") -> bool: ...

    def get_height(self, tile_pos: "TilePos") -> "Height": ...

    def height_difference(self, starting_pos: "TilePos", ending_pos: "TilePos") -> "Height": ...

    def is_passable(self, starting_pos: "TilePos", ending_pos: "TilePos") -> bool: ...

    def get_structure(self, tile_pos: "TilePos") -> Optional[object]: ...


@dataclass(frozen=True, order=True)
class Height:
    """The discretized height of a tile, between 0 and 255 inclusive."""

    value: int = 0

    MIN: ClassVar["Height"]
    MAX: ClassVar["Height"]
    MAX_STEP: ClassVar["Height"]
    TOPPER_THICKNESS: ClassVar[float] = 0.224
    STEP_HEIGHT: ClassVar[float] = 1.0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _U8_MAX:
            raise ValueError(f"height {self.value} is outside 0..={_U8_MAX}")

    def __add__(self, other: "Height") -> "Height":
        return Height(min(self.value + other.value, _U8_MAX))

    def __sub__(self, other: "Height") -> "Height":
        return Height(max(self.value - other.value, 0))

    def __str__(self) -> str:
        return str(self.value)

    def abs_diff(self, other: "Height") -> "Height":
        """The absolute difference between two heights."""
        return Height(abs(self.value - other.value))

    def into_world_pos(self) -> float:
        """The world `y` coordinate that corresponds to this height."""
        return self.value * self.STEP_HEIGHT

    @classmethod
    def from_world_pos(cls, world_y: float) -> "Height":
        """The height at world coordinate `world_y`, clamped to the allowed range."""
        scaled = world_y / cls.STEP_HEIGHT
        if math.isnan(scaled):
            logger.error("NaN height conversion detected. Are your transforms broken?")
            return cls.MAX
        if scaled <= 0.0:
            return cls.MIN
        if scaled > _U8_MAX:
            return cls.MAX
        return cls(math.floor(scaled + 0.5))


Height.MIN = Height(0)
Height.MAX = Height(_U8_MAX)
Height.MAX_STEP = Height(1)


_ROTATION_COUNTS = {
    Direction.TOP: 0,
    Direction.TOP_LEFT: 1,
    Direction.BOTTOM_LEFT: 2,
    Direction.BOTTOM: 3,
    Direction.BOTTOM_RIGHT: 4,
    Direction.TOP_RIGHT: 5,
}

_FACING_NAMES = {
    Direction.TOP_RIGHT: "Top-right",
    Direction.TOP: "Top",
    Direction.TOP_LEFT: "Top-left",
    Direction.BOTTOM_LEFT: "Bottom-left",
    Direction.BOTTOM: "Bottom",
    Direction.BOTTOM_RIGHT: "Bottom-right",
}


@dataclass
class Facing:
    """The hex direction an object faces; defaults to `Direction.TOP`."""

    direction: Direction = Direction.TOP

    def rotate_left(self) -> None:
        """Rotates this facing one 60 degree step to the left."""
        self.direction = self.direction.left()

    def rotate_right(self) -> None:
        """Rotates this facing one 60 degree step to the right."""
        self.direction = self.direction.right()

    def rotation_count(self) -> int:
        """The number of `Hex.rotate_right` steps from `Direction.TOP` to this facing."""
        return _ROTATION_COUNTS[self.direction]

    def __str__(self) -> str:
        return _FACING_NAMES[self.direction]


class RotationDirection(Enum):
    """The direction of a facing rotation."""

    LEFT = "Left"
    RIGHT = "Right"

    @classmethod
    def random(cls, rng: random.Random) -> "RotationDirection":
        """Picks a rotation direction uniformly at random."""
        return cls.LEFT if rng.random() < 0.5 else cls.RIGHT

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TilePos:
    """A tile on the map, in axial hex coordinates."""

    x: int = 0
    y: int = 0

    ZERO: ClassVar["TilePos"]

    @property
    def hex(self) -> Hex:
        """The underlying hex coordinate."""
        return Hex(self.x, self.y)

    @property
    def z(self) -> int:
        """The derived third cubic coordinate."""
        return -self.x - self.y

    def __add__(self, other: "TilePos") -> "TilePos":
        return TilePos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "TilePos") -> "TilePos":
        return TilePos(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    @classmethod
    def random(cls, map_geometry: _Geometry, rng: random.Random) -> "TilePos":
        """A tile sampled by rejection from the valid positions of `map_geometry`."""
        radius = map_geometry.radius
        while True:
            proposed = cls(rng.randrange(-radius, radius), rng.randrange(-radius, radius))
            if map_geometry.is_valid(proposed):
                return proposed

    def into_world_pos(self, map_geometry: _Geometry) -> tuple[float, float, float]:
        """The world position of the top of the tile column at this tile."""
        x, z = map_geometry.layout.hex_to_world_pos(self.hex)
        y = map_geometry.get_height(self).into_world_pos()
        return (x, y, z)

    def top_of_tile(self, map_geometry: _Geometry) -> tuple[float, float, float]:
        """The world position of the top of the tile topper at this tile."""
        x, y, z = self.into_world_pos(map_geometry)
        return (x, y + Height.TOPPER_THICKNESS, z)

    @classmethod
    def from_world_pos(
        cls, world_pos: tuple[float, float, float], map_geometry: _Geometry
    ) -> "TilePos":
        """The tile nearest to `world_pos`."""
        hex_ = map_geometry.layout.world_pos_to_hex((world_pos[0], world_pos[2]))
        return cls(hex_.x, hex_.y)

    def neighbor(self, direction: Direction) -> "TilePos":
        """The adjacent tile in `direction`."""
        hex_ = self.hex.neighbor(direction)
        return TilePos(hex_.x, hex_.y)

    def _adjacent(self) -> Iterator["TilePos"]:
        for hex_ in self.hex.all_neighbors():
            yield TilePos(hex_.x, hex_.y)

    def all_neighbors(self, map_geometry: _Geometry) -> list["TilePos"]:
        """All adjacent tiles that are on the map."""
        return [pos for pos in self._adjacent() if map_geometry.is_valid(pos)]

    def reachable_neighbors(self, map_geometry: _Geometry) -> list["TilePos"]:
        """Adjacent tiles at most `Height.MAX_STEP` above or below this one."""
        if not map_geometry.is_valid(self):
            return []
        return [
            pos
            for pos in self._adjacent()
            if map_geometry.is_valid(pos)
            and map_geometry.height_difference(self, pos) <= Height.MAX_STEP
        ]

    def passable_neighbors(self, map_geometry: _Geometry) -> list["TilePos"]:
        """Adjacent tiles that can be walked onto from this one."""
        if not map_geometry.is_valid(self):
            return []
        return [
            pos
            for pos in self._adjacent()
            if map_geometry.is_valid(pos) and map_geometry.is_passable(self, pos)
        ]

    def empty_neighbors(self, map_geometry: _Geometry) -> list["TilePos"]:
        """Adjacent tiles that are on the map and free of structures."""
        return [
            pos
            for pos in self._adjacent()
            if map_geometry.is_valid(pos) and map_geometry.get_structure(pos) is None
        ]

    def rotated(self, facing: Facing) -> "TilePos":
        """This position rotated around the origin to match `facing`."""
        hex_ = self.hex.rotate_right(facing.rotation_count())
        return TilePos(hex_.x, hex_.y)


TilePos.ZERO = TilePos(0, 0)


def _single_tile() -> frozenset[TilePos]:
    return frozenset({TilePos.ZERO})


@dataclass(frozen=True)
class Footprint:
    """The tiles taken up by a structure, relative to its centre at the origin."""

    tiles: frozenset[TilePos] = field(default_factory=_single_tile)

    def __iter__(self) -> Iterator[TilePos]:
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def __contains__(self, tile_pos: object) -> bool:
        return tile_pos in self.tiles

    @classmethod
    def single(cls) -> "Footprint":
        """A footprint that occupies a single tile."""
        return cls(_single_tile())

    @classmethod
    def hexagon(cls, radius: int) -> "Footprint":
        """A footprint filling a solid hexagon of the given radius."""
        return cls(frozenset(TilePos(h.x, h.y) for h in hexagon(Hex.ZERO, radius)))

    def in_world_space(self, center: TilePos) -> frozenset[TilePos]:
        """The tiles this footprint occupies when centred at `center`."""
        return frozenset(center + offset for offset in self.tiles)

    def rotated(self, facing: Facing) -> "Footprint":
        """This footprint rotated to match `facing`."""
        return Footprint(frozenset(pos.rotated(facing) for pos in self.tiles))