"""In-game time: elapsed days, time of day and pools of time."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True, order=True)
class Days:
    """A duration of time, in in-game days."""

    value: float = 0.0

    def __add__(self, other: "Days") -> "Days":
        return Days(self.value + other.value)

    def __sub__(self, other: "Days") -> "Days":
        return Days(self.value - other.value)

    def __mul__(self, factor: float) -> "Days":
        return Days(self.value * factor)

    def __truediv__(self, divisor: float) -> "Days":
        return Days(self.value / divisor)


@dataclass
class InGameTime:
    """The in-game clock."""

    elapsed_time: Days = field(default_factory=Days)
    seconds_per_day: float = 60.0

    def elapsed_days(self) -> int:
        """The number of whole days that have elapsed."""
        return int(math.floor(self.elapsed_time.value))

    def fraction_of_day(self) -> float:
        """How far through the day it is: 0.0 dawn, 0.25 noon, 0.5 dusk, 0.75 midnight."""
        return math.fmod(self.elapsed_time.value, 1.0)

    def twenty_four_hour_time(self) -> float:
        """The time of day on a 24 hour clock starting at midnight."""
        return math.fmod((self.fraction_of_day() + 0.25) * 24.0, 24.0)

    def advance(self, seconds: float) -> Days:
        """Advances the clock by `seconds` of wall-clock time and returns the step in days."""
        delta = Days(seconds / self.seconds_per_day)
        self.elapsed_time = self.elapsed_time + delta
        return delta

    def __str__(self) -> str:
        return f"{self.elapsed_days()} days elapsed\n{self.twenty_four_hour_time():.2f}h"


class MaxPoolLessThanZero(ValueError):
    """The maximum of a pool was set below zero."""


@dataclass
class TimePool:
    """A pool of days that fills up until some event occurs."""

    current: Days = field(default_factory=Days)
    max: Days = field(default_factory=Days)

    ZERO: ClassVar[Days] = Days(0.0)

    @classmethod
    def simple(cls, max: float) -> "TimePool":
        """An empty pool with the given capacity in days."""
        return cls(current=Days(0.0), max=Days(max))

    def is_full(self) -> bool:
        """Whether the pool has reached its maximum."""
        return self.current >= self.max

    def set_current(self, new_quantity: Days) -> Days:
        """Sets the current amount, clamped to the pool's range, and returns it."""
        actual = Days(min(max(new_quantity.value, 0.0), self.max.value))
        self.current = actual
        return actual

    def set_max(self, new_max: Days) -> None:
        """Sets the maximum, re-clamping the current amount; rejects negative maxima."""
        if new_max < self.ZERO:
            raise MaxPoolLessThanZero(f"maximum {new_max.value} is less than zero")
        self.max = new_max
        self.set_current(self.current)