"""Read-only data for each variety of terrain."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True)
class TerrainData:
    """Data stored for each variety of terrain.

    `walking_speed` multiplies unit speed; 1.0 is normal and values are positive.
    """

    walking_speed: float


@dataclass
class RawTerrainManifest:
    """The terrain manifest as stored in the manifest file."""

    terrain_types: dict[str, TerrainData] = field(default_factory=dict)

    EXTENSION: ClassVar[str] = "terrain_manifest.json"

    def to_json(self) -> str:
        """Serializes this manifest to JSON."""
        return json.dumps(
            {
                "terrain_types": {
                    name: {"walking_speed": data.walking_speed}
                    for name, data in self.terrain_types.items()
                }
            }
        )

    @classmethod
    def from_json(cls, text: str) -> "RawTerrainManifest":
        """Parses a manifest from JSON, raising ValueError if it is malformed."""
        document: Any = json.loads(text)
        try:
            raw_types = document["terrain_types"]
            terrain_types = {
                str(name): TerrainData(walking_speed=_as_float(entry["walking_speed"]))
                for name, entry in raw_types.items()
            }
        except (KeyError, TypeError, AttributeError) as error:
            raise ValueError(f"malformed terrain manifest: {error!r}") from error
        return cls(terrain_types=terrain_types)

    def process(self) -> dict[str, TerrainData]:
        """The processed manifest, mapping each terrain name to its data."""
        return dict(self.terrain_types)


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)