"""Tile-centric signal maps used for path-finding and decision-making."""

from __future__ import annotations

import random
from typing import Iterable, Optional

from emergence_sim.map_geometry import MapGeometry
from emergence_sim.signal_types import Emitter, SignalStrength, SignalType
from emergence_sim.tiles import Footprint, TilePos

DIFFUSION_FRACTION = 0.1
"""The fraction of a tile's signal sent to each neighbour per diffusion step.

Must stay below 1/6, since a tile can have six neighbours.
"""

DEGRADATION_FRACTION = 0.01
"""The fraction of every signal that decays at each step."""

EPSILON_STRENGTH = SignalStrength(1e-8)
"""Decayed signals at or below this strength are removed entirely."""

_SignalMap = dict[TilePos, SignalStrength]


class Signals:
    """The strength of every signal type on every tile."""

    def __init__(self) -> None:
        self._maps: dict[SignalType, _SignalMap] = {}

    def get(self, signal_type: SignalType, tile_pos: TilePos) -> SignalStrength:
        """The strength of `signal_type` at `tile_pos`; zero where absent."""
        signal_map = self._maps.get(signal_type)
        if signal_map is None:
            return SignalStrength.ZERO
        return signal_map.get(tile_pos, SignalStrength.ZERO)

    def detectable(self, signal_types: Iterable[SignalType], tile_pos: TilePos) -> bool:
        """Whether any of `signal_types` has a non-zero strength at `tile_pos`."""
        return any(
            self.get(signal_type, tile_pos) > SignalStrength.ZERO
            for signal_type in signal_types
        )

    def add_signal(
        self,
        signal_type: SignalType,
        tile_pos: TilePos,
        signal_strength: SignalStrength,
    ) -> None:
        """Adds `signal_strength` of `signal_type` at `tile_pos`."""
        signal_map = self._maps.setdefault(signal_type, {})
        signal_map[tile_pos] = signal_map.get(tile_pos, SignalStrength.ZERO) + signal_strength

    def all_signals_at_position(self, tile_pos: TilePos) -> dict[SignalType, SignalStrength]:
        """The strength of every known signal type at `tile_pos`."""
        return {signal_type: self.get(signal_type, tile_pos) for signal_type in self._maps}

    def neighboring_signals(
        self,
        signal_type: SignalType,
        tile_pos: TilePos,
        map_geometry: MapGeometry,
    ) -> dict[TilePos, SignalStrength]:
        """Strength of `signal_type` at `tile_pos` and at its passable neighbours."""
        strengths = {tile_pos: self.get(signal_type, tile_pos)}
        for neighbor in tile_pos.passable_neighbors(map_geometry):
            strengths[neighbor] = self.get(signal_type, neighbor)
        return strengths

    def upstream(
        self,
        tile_pos: TilePos,
        signal_types: Iterable[SignalType],
        map_geometry: MapGeometry,
    ) -> Optional[TilePos]:
        """The adjacent passable tile with the strongest summed `signal_types`.

        Returns None when no tile has any signal, or when `tile_pos` itself is
        the strongest.
        """
        totals: dict[TilePos, SignalStrength] = {}
        for signal_type in signal_types:
            for pos, strength in self.neighboring_signals(
                signal_type, tile_pos, map_geometry
            ).items():
                totals[pos] = totals.get(pos, SignalStrength.ZERO) + strength

        best_choice: Optional[TilePos] = None
        best_score = SignalStrength.ZERO
        for pos, score in totals.items():
            if score > best_score:
                best_score = score
                best_choice = pos

        if best_choice is None or best_choice == tile_pos:
            return None
        return best_choice

    def diffuse(self, map_geometry: MapGeometry, diffusion_fraction: float) -> None:
        """Spreads a fraction of every signal to each passable neighbouring tile."""
        for signal_map in self._maps.values():
            additions: list[tuple[TilePos, SignalStrength]] = []
            removals: list[tuple[TilePos, SignalStrength]] = []

            for occupied_tile, strength in signal_map.items():
                if strength == SignalStrength.ZERO:
                    continue
                share = strength * diffusion_fraction
                neighbors = occupied_tile.passable_neighbors(map_geometry)
                additions.extend((neighbor, share) for neighbor in neighbors)
                removals.append((occupied_tile, share * len(neighbors)))

            # Removals happen before additions to avoid iteration order effects.
            for pos, amount in removals:
                signal_map[pos] = signal_map.get(pos, SignalStrength.ZERO) - amount
            for pos, amount in additions:
                signal_map[pos] = signal_map.get(pos, SignalStrength.ZERO) + amount

    def degrade(self) -> None:
        """Decays every signal, dropping those that become negligible."""
        for signal_map in self._maps.values():
            for pos, strength in list(signal_map.items()):
                new_strength = strength * (1.0 - DEGRADATION_FRACTION)
                if new_strength > EPSILON_STRENGTH:
                    signal_map[pos] = new_strength
                else:
                    del signal_map[pos]

    def random_signal_type(self, rng: random.Random) -> Optional[SignalType]:
        """A signal type present in the maps, chosen at random; None if there are none."""
        if not self._maps:
            return None
        return rng.choice(list(self._maps))


def emit_signals(
    signals: Signals,
    emitters: Iterable[tuple[TilePos, Emitter, Optional[Footprint]]],
) -> None:
    """Adds the signals of each emitter at its position.

    Each entry is `(center, emitter, footprint)`; emitters with a footprint
    emit from every tile of it centred at `center`, others only at `center`.
    """
    for center, emitter, footprint in emitters:
        tiles = footprint.in_world_space(center) if footprint is not None else (center,)
        for tile_pos in tiles:
            for signal_type, signal_strength in emitter.signals:
                signals.add_signal(signal_type, tile_pos, signal_strength)