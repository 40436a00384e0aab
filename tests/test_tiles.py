import random
import sys

import pytest

from emergence_sim.hexgrid import Direction, Hex, HexLayout
from emergence_sim.tiles import Facing, Footprint, Height, RotationDirection, TilePos


class _Geometry:
    def __init__(self, radius, structures=None):
        self.radius = radius
        self.layout = HexLayout()
        self.heights = {}
        self.structures = dict(structures or {})

    def update_height(self, tile_pos, height):
        self.heights[tile_pos] = height

    def is_valid(self, tile_pos):
        return Hex.ZERO.distance_to(tile_pos.hex) <= self.radius

    def get_height(self, tile_pos):
        return self.heights.get(tile_pos, Height.MIN)

    def height_difference(self, starting_pos, ending_pos):
        return self.get_height(starting_pos).abs_diff(self.get_height(ending_pos))

    def get_structure(self, tile_pos):
        return self.structures.get(tile_pos)

    def is_passable(self, starting_pos, ending_pos):
        return (
            self.is_valid(starting_pos)
            and self.is_valid(ending_pos)
            and self.get_structure(ending_pos) is None
            and self.height_difference(starting_pos, ending_pos) <= Height.MAX_STEP
        )


def test_height_is_invertable():
    for i in range(256):
        height = Height(i)
        assert Height.from_world_pos(height.into_world_pos()) == height


def test_height_clamps():
    assert Height.from_world_pos(0.0) == Height.MIN
    assert Height.from_world_pos(-1.0) == Height.MIN
    assert Height.from_world_pos(9000.0) == Height.MAX
    assert Height.from_world_pos(sys.float_info.max) == Height.MAX


def test_height_nan_maps_to_max():
    assert Height.from_world_pos(float("nan")) == Height.MAX


def test_height_arithmetic_saturates():
    assert Height(250) + Height(10) == Height.MAX
    assert Height(3) - Height(5) == Height.MIN
    assert Height(3) + Height(2) == Height(5)


def test_height_rejects_out_of_range():
    with pytest.raises(ValueError):
        Height(256)


def test_world_to_tile_pos_conversions_are_invertable():
    geometry = _Geometry(10)
    for x in range(-10, 11):
        for y in range(-10, 11):
            tile_pos = TilePos(x, y)
            geometry.update_height(tile_pos, Height(17))
            world_pos = tile_pos.into_world_pos(geometry)
            assert world_pos[1] == Height(17).into_world_pos()
            assert TilePos.from_world_pos(world_pos, geometry) == tile_pos


def test_top_of_tile_adds_topper_thickness():
    geometry = _Geometry(2)
    geometry.update_height(TilePos(1, 0), Height(3))
    base = TilePos(1, 0).into_world_pos(geometry)
    top = TilePos(1, 0).top_of_tile(geometry)
    assert top[0] == base[0] and top[2] == base[2]
    assert top[1] == pytest.approx(base[1] + Height.TOPPER_THICKNESS)


def test_tile_pos_display_uses_cubic_coordinates():
    assert str(TilePos(1, 2)) == "(1, 2, -3)"


def test_neighbor_and_all_neighbors():
    geometry = _Geometry(1)
    assert TilePos.ZERO.neighbor(Direction.TOP) == TilePos(0, -1)
    assert len(TilePos.ZERO.all_neighbors(geometry)) == 6
    edge = TilePos(1, 0)
    neighbors = edge.all_neighbors(geometry)
    assert len(neighbors) == 3
    assert all(geometry.is_valid(pos) for pos in neighbors)


def test_reachable_neighbors_respect_step_height():
    geometry = _Geometry(1)
    geometry.update_height(TilePos(0, -1), Height(2))
    geometry.update_height(TilePos(1, 0), Height(1))
    reachable = TilePos.ZERO.reachable_neighbors(geometry)
    assert TilePos(0, -1) not in reachable
    assert TilePos(1, 0) in reachable
    assert len(reachable) == 5


def test_neighbors_of_invalid_tile_are_empty():
    geometry = _Geometry(1)
    assert TilePos(5, 5).reachable_neighbors(geometry) == []
    assert TilePos(5, 5).passable_neighbors(geometry) == []


def test_passable_and_empty_neighbors_skip_structures():
    geometry = _Geometry(1, structures={TilePos(0, 1): 42})
    passable = TilePos.ZERO.passable_neighbors(geometry)
    empty = TilePos.ZERO.empty_neighbors(geometry)
    assert TilePos(0, 1) not in passable
    assert TilePos(0, 1) not in empty
    assert len(passable) == 5
    assert len(empty) == 5


def test_random_tile_is_valid():
    geometry = _Geometry(3)
    rng = random.Random(7)
    for _ in range(50):
        assert geometry.is_valid(TilePos.random(geometry, rng))


def test_facing_rotation_round_trips():
    facing = Facing()
    assert facing.direction == Direction.TOP
    assert facing.rotation_count() == 0
    facing.rotate_left()
    assert facing.direction == Direction.TOP_LEFT
    assert facing.rotation_count() == 1
    facing.rotate_right()
    assert facing == Facing()


def test_facing_display():
    assert str(Facing()) == "Top"
    assert str(Facing(Direction.BOTTOM_RIGHT)) == "Bottom-right"


def test_rotating_to_facing_matches_direction():
    top = TilePos.ZERO.neighbor(Direction.TOP)
    for direction in Direction:
        assert top.rotated(Facing(direction)) == TilePos.ZERO.neighbor(direction)


def test_rotation_direction_random_is_a_member():
    rng = random.Random(3)
    results = {RotationDirection.random(rng) for _ in range(50)}
    assert results == {RotationDirection.LEFT, RotationDirection.RIGHT}


def test_footprint_default_is_single():
    assert Footprint() == Footprint.single()
    assert set(Footprint.single()) == {TilePos.ZERO}


def test_footprint_hexagon_size_and_world_space():
    footprint = Footprint.hexagon(1)
    assert len(footprint) == 7
    center = TilePos(17, -2)
    world = footprint.in_world_space(center)
    assert center in world
    assert len(world) == 7
    assert all(Hex.ZERO.distance_to((pos - center).hex) <= 1 for pos in world)


def test_footprint_rotation_preserves_hexagon():
    footprint = Footprint.hexagon(1)
    assert footprint.rotated(Facing(Direction.BOTTOM)) == footprint
    line = Footprint(frozenset({TilePos.ZERO, TilePos(0, -1)}))
    rotated = line.rotated(Facing(Direction.BOTTOM))
    assert rotated.tiles == frozenset({TilePos.ZERO, TilePos(0, 1)})