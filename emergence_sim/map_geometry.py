"""The map's size and arrangement, and what occupies each tile."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Collection, Hashable, Optional

from emergence_sim.hexgrid import Hex, HexLayout, hexagon, range_count
from emergence_sim.tiles import Footprint, Height, TilePos

Entity = Hashable


class MissingTileError(LookupError):
    """A map index had no entry for the requested tile."""

    def __init__(self, tile_pos: TilePos) -> None:
        super().__init__(f"no entry for tile {tile_pos}")
        self.tile_pos = tile_pos


class LitterState(Enum):
    """How much litter lies on a tile."""

    EMPTY = "empty"
    PARTIAL = "partial"
    FULL = "full"


class DeliveryMode(Enum):
    """Whether a unit is picking items up or dropping them off."""

    PICK_UP = "pick_up"
    DROP_OFF = "drop_off"


def _remove_all(index: dict[TilePos, Entity], tile_pos: TilePos) -> Optional[Entity]:
    """Removes the entity at `tile_pos` and every other entry pointing to it."""
    removed = index.pop(tile_pos, None)
    if removed is not None:
        for pos in [pos for pos, entity in index.items() if entity == removed]:
            del index[pos]
    return removed


class MapGeometry:
    """The overall size of the map and indexes of what is on each tile."""

    def __init__(self, radius: int, layout: HexLayout = HexLayout()) -> None:
        self.layout = layout
        self.radius = radius
        self._terrain_index: dict[TilePos, Entity] = {}
        self._structure_index: dict[TilePos, Entity] = {}
        self._ghost_structure_index: dict[TilePos, Entity] = {}
        self._ghost_terrain_index: dict[TilePos, Entity] = {}
        self._litter_index: dict[TilePos, LitterState] = {}
        # Every tile starts at the minimum height.
        self._height_index: dict[TilePos, Height] = {
            TilePos(h.x, h.y): Height.MIN for h in hexagon(Hex.ZERO, radius)
        }

    def is_valid(self, tile_pos: TilePos) -> bool:
        """Whether `tile_pos` lies on the map."""
        return Hex.ZERO.distance_to(tile_pos.hex) <= self.radius

    def is_footprint_valid(self, tile_pos: TilePos, footprint: Footprint) -> bool:
        """Whether every tile of `footprint` centred at `tile_pos` is on the map."""
        return all(self.is_valid(pos) for pos in footprint.in_world_space(tile_pos))

    def is_passable(self, starting_pos: TilePos, ending_pos: TilePos) -> bool:
        """Whether a unit can step from `starting_pos` onto `ending_pos`.

        Off-map tiles, tiles with structures, tiles full of litter and tiles
        more than `Height.MAX_STEP` higher or lower are not passable.
        """
        if not self.is_valid(starting_pos) or not self.is_valid(ending_pos):
            return False
        if self.get_structure(ending_pos) is not None:
            return False
        if self.get_litter_state(ending_pos) is LitterState.FULL:
            return False
        try:
            return self.height_difference(starting_pos, ending_pos) <= Height.MAX_STEP
        except MissingTileError:
            return False

    def _is_space_available(self, center: TilePos, footprint: Footprint) -> bool:
        return all(
            self.get_structure(pos) is None for pos in footprint.in_world_space(center)
        )

    def _is_terrain_valid(
        self,
        center: TilePos,
        footprint: Footprint,
        terrain_of: Callable[[Entity], Hashable],
        allowed_terrain_types: Optional[Collection[Hashable]],
    ) -> bool:
        if allowed_terrain_types is None:
            return True
        for pos in footprint.in_world_space(center):
            terrain_entity = self._terrain_index.get(pos)
            if terrain_entity is None:
                raise MissingTileError(pos)
            if terrain_of(terrain_entity) not in allowed_terrain_types:
                return False
        return True

    def _is_terrain_flat(self, center: TilePos, footprint: Footprint) -> bool:
        height = self.get_height(center)
        return all(
            self._height_index.get(pos) == height
            for pos in footprint.in_world_space(center)
        )

    def can_build(
        self,
        center: TilePos,
        footprint: Footprint,
        terrain_of: Callable[[Entity], Hashable],
        allowed_terrain_types: Optional[Collection[Hashable]],
    ) -> bool:
        """Whether a structure with the (already rotated) `footprint` fits at `center`.

        The area must be on the map, flat, free of structures and, unless
        `allowed_terrain_types` is None, made only of allowed terrain, where
        `terrain_of` maps a terrain entity to its terrain type.
        """
        return (
            self.is_footprint_valid(center, footprint)
            and self._is_terrain_flat(center, footprint)
            and self._is_space_available(center, footprint)
            and self._is_terrain_valid(center, footprint, terrain_of, allowed_terrain_types)
        )

    def update_height(self, tile_pos: TilePos, height: Height) -> None:
        """Records the height of the tile at `tile_pos`."""
        self._height_index[tile_pos] = height

    def get_height(self, tile_pos: TilePos) -> Height:
        """The height of the tile at `tile_pos`; raises MissingTileError if unknown."""
        try:
            return self._height_index[tile_pos]
        except KeyError:
            raise MissingTileError(tile_pos) from None

    def average_height(self, tile_pos: TilePos, radius: int) -> float:
        """The mean world height of tiles within `radius` of `tile_pos`.

        Off-map tiles contribute nothing but still count towards the divisor.
        """
        total = sum(
            self.get_height(pos).into_world_pos()
            for pos in (TilePos(h.x, h.y) for h in hexagon(tile_pos.hex, radius))
            if self.is_valid(pos)
        )
        return total / range_count(radius)

    def height_difference(self, starting_pos: TilePos, ending_pos: TilePos) -> Height:
        """The absolute height difference between two tiles."""
        return self.get_height(starting_pos).abs_diff(self.get_height(ending_pos))

    def get_candidates(self, tile_pos: TilePos, delivery_mode: DeliveryMode) -> list[Entity]:
        """Entities at `tile_pos` that might have or want an item.

        Picking up looks at structures, ghost terrain and terrain litter;
        dropping off looks at structures, ghost terrain and ghost structures.
        """
        if delivery_mode is DeliveryMode.DROP_OFF:
            indexes = (
                self._structure_index,
                self._ghost_terrain_index,
                self._ghost_structure_index,
            )
        else:
            indexes = (
                self._structure_index,
                self._ghost_terrain_index,
                self._terrain_index,
            )
        return [index[tile_pos] for index in indexes if tile_pos in index]

    def get_workplaces(self, tile_pos: TilePos) -> list[Entity]:
        """Entities units might work at, ghost structures before structures."""
        indexes = (self._ghost_structure_index, self._structure_index)
        return [index[tile_pos] for index in indexes if tile_pos in index]

    def get_terrain(self, tile_pos: TilePos) -> Optional[Entity]:
        """The terrain entity at `tile_pos`, if any."""
        return self._terrain_index.get(tile_pos)

    def add_terrain(self, tile_pos: TilePos, terrain_entity: Entity) -> None:
        """Indexes `terrain_entity` at `tile_pos`."""
        self._terrain_index[tile_pos] = terrain_entity

    def get_structure(self, tile_pos: TilePos) -> Optional[Entity]:
        """The structure entity at `tile_pos`, if any."""
        return self._structure_index.get(tile_pos)

    def add_structure(
        self, center: TilePos, footprint: Footprint, structure_entity: Entity
    ) -> None:
        """Indexes `structure_entity` on every tile of `footprint` centred at `center`."""
        for pos in footprint.in_world_space(center):
            self._structure_index[pos] = structure_entity

    def remove_structure(self, tile_pos: TilePos) -> Optional[Entity]:
        """Removes the structure at `tile_pos` from all its tiles and returns it."""
        return _remove_all(self._structure_index, tile_pos)

    def get_ghost_structure(self, tile_pos: TilePos) -> Optional[Entity]:
        """The ghost structure entity at `tile_pos`, if any."""
        return self._ghost_structure_index.get(tile_pos)

    def add_ghost_structure(
        self, center: TilePos, footprint: Footprint, ghost_structure_entity: Entity
    ) -> None:
        """Indexes a ghost structure on every tile of `footprint` centred at `center`."""
        for pos in footprint.in_world_space(center):
            self._ghost_structure_index[pos] = ghost_structure_entity

    def remove_ghost_structure(self, tile_pos: TilePos) -> Optional[Entity]:
        """Removes the ghost structure at `tile_pos` from all its tiles and returns it."""
        return _remove_all(self._ghost_structure_index, tile_pos)

    def add_ghost_terrain(self, ghost_terrain_entity: Entity, tile_pos: TilePos) -> None:
        """Indexes a ghost terrain entity at `tile_pos`."""
        self._ghost_terrain_index[tile_pos] = ghost_terrain_entity

    def remove_ghost_terrain(self, tile_pos: TilePos) -> Optional[Entity]:
        """Removes the ghost terrain at `tile_pos` and returns it."""
        return _remove_all(self._ghost_terrain_index, tile_pos)

    def get_ghost_terrain(self, tile_pos: TilePos) -> Optional[Entity]:
        """The ghost terrain entity at `tile_pos`, if any."""
        return self._ghost_terrain_index.get(tile_pos)

    def set_litter_state(self, tile_pos: TilePos, litter_state: LitterState) -> None:
        """Records how much litter lies at `tile_pos`."""
        self._litter_index[tile_pos] = litter_state

    def get_litter_state(self, tile_pos: TilePos) -> LitterState:
        """How much litter lies at `tile_pos`; empty if never recorded."""
        return self._litter_index.get(tile_pos, LitterState.EMPTY)