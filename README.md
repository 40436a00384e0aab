# emergence_sim

The core of a hex-grid colony simulation, with no rendering. It has no dependencies beyond the standard library.

## Modules

- `emergence_sim.hexgrid` handles axial hex coordinates. It has `Hex`, `Direction`, `HexOrientation`, `HexLayout`, `hexagon()` and `range_count()`.
- `emergence_sim.tiles` holds the tile-level types: `TilePos`, `Height`, `Facing`, `RotationDirection` and `Footprint`.
- `emergence_sim.map_geometry` provides `MapGeometry`, which indexes what is on each tile:
  - terrain, structures, ghost structures, ghost terrain, litter (`LitterState`) and height.
  - It answers whether a tile is on the map, whether it is passable, and whether a footprint can be built on.
  - It also lists the delivery candidates (`DeliveryMode`) and the workplaces on a tile.
  - A lookup for a tile with no recorded height raises `MissingTileError`.
- `emergence_sim.signal_types` defines the signal vocabulary: `SignalStrength`, `SignalKind`, `SignalType`, `Purpose` and `Emitter`.
  - `SignalType.item_signal_types()` lists the signals that are relevant to finding items.
- `emergence_sim.signals` provides `Signals`, which stores signal maps. These maps can be:
  - added to, diffused to passable neighbours (`DIFFUSION_FRACTION`) and degraded (`DEGRADATION_FRACTION`, `EPSILON_STRENGTH`);
  - queried with `upstream()`, which returns the best adjacent tile to move to.
  - `emit_signals()` applies a batch of emitters.
- `emergence_sim.time` handles game time:
  - `Days` is a duration.
  - `InGameTime` is the clock. `advance(seconds)`, `elapsed_days()`, `fraction_of_day()` and `twenty_four_hour_time()` work on it.
  - `TimePool` fills with days. A negative maximum raises `MaxPoolLessThanZero`.
- `emergence_sim.light` has `Illuminance`, measured in lux, and `TotalLight`, which sums light sources.
- `emergence_sim.terrain_manifest` has `TerrainData` and `RawTerrainManifest`, which supports JSON round trips and `process()`.
  - Malformed JSON raises `ValueError`.
- `emergence_sim.generation` has `GenerationConfig`, with weighted terrain choice and distinct starting positions for ants, acacia, leuco and ant hives.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
import random

from emergence_sim.map_geometry import MapGeometry
from emergence_sim.signal_types import SignalKind, SignalStrength, SignalType
from emergence_sim.signals import DIFFUSION_FRACTION, Signals
from emergence_sim.tiles import TilePos

geometry = MapGeometry(radius=5)
signals = Signals()

food = SignalType(SignalKind.PULL, "leuco_chunk")
signals.add_signal(food, TilePos(2, 0), SignalStrength.new(10.0))

for _ in range(20):
    signals.diffuse(geometry, DIFFUSION_FRACTION)
    signals.degrade()

# The best neighbouring tile to step onto when following the signal,
# or None when already at a local peak or when nothing is detectable.
print(signals.upstream(TilePos(0, 0), [food], geometry))

print(TilePos.random(geometry, random.Random(0)))
```

## Notes

- A signal strength never drops below zero, because subtraction is clamped at zero.
- A `Height` is an integer from 0 to 255. `Height.from_world_pos` rounds to the nearest step and clamps to that range. For NaN it logs an error and returns `Height.MAX`.
- The functions that take randomness accept a `random.Random` instance, so results can be made reproducible.

## What this package does not do

- It draws nothing and loads no assets.
- It has no command-line program and no game loop. The caller decides when to advance time, emit, diffuse and degrade signals.
- It stores no structure, item or unit definitions. Entities in `MapGeometry` are any hashable values the caller chooses.
- `GenerationConfig` picks terrain types and positions, but it does not compute terrain heights or create any entities.