"""World generation settings: terrain choice and starting organism placement."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from emergence_sim.tiles import TilePos


def _default_terrain_weights() -> dict[str, float]:
    return {"loam": 1.0, "muddy": 0.3, "rocky": 0.2}


@dataclass
class GenerationConfig:
    """Controls how the starting world is generated."""

    map_radius: int = 20
    n_ant: int = 5
    n_plant: int = 12
    n_fungi: int = 2
    n_hive: int = 1
    terrain_weights: dict[str, float] = field(default_factory=_default_terrain_weights)

    def choose_terrain(self, rng: random.Random) -> str:
        """Picks a terrain type at random, in proportion to its weight."""
        if not self.terrain_weights:
            raise ValueError("no terrain types to choose from")
        names = list(self.terrain_weights)
        weights = [self.terrain_weights[name] for name in names]
        if any(weight < 0 for weight in weights):
            raise ValueError("terrain weights must not be negative")
        if sum(weights) <= 0:
            raise ValueError("terrain weights must not all be zero")
        return rng.choices(names, weights=weights, k=1)[0]

    def organism_positions(
        self, positions: Sequence[TilePos], rng: random.Random
    ) -> dict[str, list[TilePos]]:
        """Picks distinct starting tiles for each kind of organism.

        Returns positions keyed by "ant", "acacia", "leuco" and "ant_hive".
        Raises ValueError if there are fewer positions than organisms.
        """
        counts = (
            ("ant", self.n_ant),
            ("acacia", self.n_plant),
            ("leuco", self.n_fungi),
            ("ant_hive", self.n_hive),
        )
        n_entities = sum(count for _, count in counts)
        if n_entities > len(positions):
            raise ValueError(
                f"{n_entities} organisms do not fit on {len(positions)} tiles"
            )

        remaining = rng.sample(list(positions), n_entities)
        placements: dict[str, list[TilePos]] = {}
        for name, count in counts:
            split = len(remaining) - count
            placements[name] = remaining[split:]
            remaining = remaining[:split]
        return placements