import pytest

from emergence_sim.hexgrid import (
    Direction,
    Hex,
    HexLayout,
    HexOrientation,
    hexagon,
    range_count,
)


def test_hexagon_radius_one_has_seven_tiles():
    assert len(list(hexagon(Hex.ZERO, 1))) == 7


@pytest.mark.parametrize("radius", [0, 1, 2, 5, 10])
def test_hexagon_matches_range_count(radius):
    tiles = list(hexagon(Hex.ZERO, radius))
    assert len(tiles) == range_count(radius)
    assert len(set(tiles)) == len(tiles)


@pytest.mark.parametrize("radius", [1, 3, 7])
def test_hexagon_contains_exactly_tiles_within_radius(radius):
    center = Hex(4, -2)
    tiles = set(hexagon(center, radius))
    assert all(center.distance_to(tile) <= radius for tile in tiles)
    ring = {t for t in hexagon(center, radius + 1) if center.distance_to(t) == radius + 1}
    assert not ring & tiles


def test_neighbors_are_at_distance_one_and_distinct():
    origin = Hex(3, 5)
    neighbors = origin.all_neighbors()
    assert len(set(neighbors)) == 6
    assert all(origin.distance_to(n) == 1 for n in neighbors)
    assert origin not in neighbors


def test_neighbor_follows_direction_order():
    origin = Hex(-2, 1)
    assert origin.all_neighbors() == tuple(origin.neighbor(d) for d in Direction)


def test_direction_offsets_cancel():
    total = Hex(0, 0)
    for value in range(6):
        total = total + Direction(value).offset
    assert total == Hex(0, 0)


def test_opposite_directions_cancel():
    for direction in Direction:
        opposite = Direction((direction.value + 3) % 6)
        assert direction.offset + opposite.offset == Hex.ZERO


def test_left_and_right_are_inverse():
    for value in range(6):
        direction = Direction(value)
        assert direction.left().right() is direction
        assert direction.right().left() is direction


def test_six_left_turns_return_to_start():
    direction = Direction.TOP
    for _ in range(6):
        direction = direction.left()
    assert direction is Direction.TOP


def test_rotate_right_six_times_is_identity():
    hex = Hex(3, -7)
    assert hex.rotate_right(6) == hex
    assert hex.rotate_right(0) == hex


def test_rotate_right_preserves_distance_from_origin():
    hex = Hex(2, 3)
    for n in range(6):
        assert Hex.ZERO.distance_to(hex.rotate_right(n)) == Hex.ZERO.distance_to(hex)


def test_rotate_right_matches_direction_left():
    for value in range(6):
        direction = Direction(value)
        assert direction.offset.rotate_right(1) == direction.left().offset


def test_cubic_coordinates_sum_to_zero():
    for hex in hexagon(Hex(1, 1), 3):
        assert sum(hex.cubic) == 0


def test_distance_is_symmetric():
    a, b = Hex(5, -3), Hex(-2, 4)
    assert a.distance_to(b) == b.distance_to(a)
    assert a.distance_to(a) == 0


def test_origin_maps_to_world_origin():
    assert HexLayout().hex_to_world_pos(Hex.ZERO) == (0.0, 0.0)


@pytest.mark.parametrize("orientation", list(HexOrientation))
def test_layout_round_trip(orientation):
    layout = HexLayout(orientation=orientation, origin=(0.5, -1.0), hex_size=(0.7, 0.7))
    for hex in hexagon(Hex.ZERO, 10):
        assert layout.world_pos_to_hex(layout.hex_to_world_pos(hex)) == hex


def test_layout_round_trip_with_small_offsets():
    layout = HexLayout()
    for hex in hexagon(Hex.ZERO, 4):
        x, y = layout.hex_to_world_pos(hex)
        assert layout.world_pos_to_hex((x + 0.1, y - 0.1)) == hex