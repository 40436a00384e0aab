"""The amount of light available in the world."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True, order=True)
class Illuminance:
    """Light illuminance in lux."""

    lux: float = 0.0

    def __add__(self, other: "Illuminance") -> "Illuminance":
        return Illuminance(self.lux + other.lux)

    def __str__(self) -> str:
        hundreds = self.lux / 100.0
        rounded = math.copysign(math.floor(abs(hundreds) + 0.5), hundreds) * 100.0
        return f"{rounded:.0f} lux"


@dataclass
class TotalLight:
    """The total amount of light currently available."""

    illuminance: Illuminance = field(default_factory=Illuminance)

    def update(self, illuminances: Iterable[Illuminance]) -> Illuminance:
        """Sets the total to the sum of the light from every source."""
        total = Illuminance(0.0)
        for light in illuminances:
            total = total + light
        self.illuminance = total
        return total

    def __str__(self) -> str:
        return str(self.illuminance)