"""Signal strengths, signal varieties and the emitters that produce them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, Hashable, Iterable

from emergence_sim.map_geometry import DeliveryMode


@dataclass(frozen=True, order=True)
class SignalStrength:
    """How strong a signal is; arithmetic never takes it below zero."""

    value: float = 0.0

    ZERO: ClassVar["SignalStrength"]

    @classmethod
    def new(cls, value: float) -> "SignalStrength":
        """A strength of `value`, raised to zero if negative."""
        return cls(max(value, 0.0))

    def __add__(self, other: "SignalStrength") -> "SignalStrength":
        return SignalStrength(self.value + other.value)

    def __sub__(self, other: "SignalStrength") -> "SignalStrength":
        return SignalStrength(max(self.value - other.value, 0.0))

    def __mul__(self, factor: float) -> "SignalStrength":
        return SignalStrength(self.value * factor)

    __rmul__ = __mul__


SignalStrength.ZERO = SignalStrength(0.0)


class SignalKind(Enum):
    """The variety of a signal, without the thing it refers to."""

    PUSH = "Push"
    """Take this item away from here."""
    PULL = "Pull"
    """Bring me an item of this type."""
    WORK = "Work"
    """Perform work at this type of structure."""
    DEMOLISH = "Demolish"
    """Destroy a structure of this type."""
    CONTAINS = "Contains"
    """Has an item of this type: the passive form of PUSH."""
    STORES = "Stores"
    """Stores items of this type: the passive form of PULL."""
    UNIT = "Unit"
    """Has a unit of this type."""

    @property
    def rank(self) -> int:
        """The position of this kind in declaration order."""
        return _KIND_ORDER[self]


_KIND_ORDER = {kind: index for index, kind in enumerate(SignalKind)}


class Purpose(Enum):
    """Whether a goal is pursued for its own sake or as a step towards another."""

    INTRINSIC = "intrinsic"
    INSTRUMENTAL = "instrumental"


def _target_key(target: Any) -> tuple[int, Any]:
    if isinstance(target, (int, float)) and not isinstance(target, bool):
        return (0, target)
    if isinstance(target, str):
        return (1, target)
    return (2, repr(target))


@dataclass(frozen=True)
class SignalType:
    """A signal variety together with the item, structure or unit it is about."""

    kind: SignalKind
    target: Hashable

    def _sort_key(self) -> tuple[int, tuple[int, Any]]:
        return (self.kind.rank, _target_key(self.target))

    def __lt__(self, other: "SignalType") -> bool:
        if not isinstance(other, SignalType):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: "SignalType") -> bool:
        if not isinstance(other, SignalType):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: "SignalType") -> bool:
        if not isinstance(other, SignalType):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: "SignalType") -> bool:
        if not isinstance(other, SignalType):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def display(self, name_of: Callable[[Hashable], str] = str) -> str:
        """Pretty form such as ``Push(acacia_leaf)``, naming the target with `name_of`."""
        return f"{self.kind.value}({name_of(self.target)})"

    def __str__(self) -> str:
        return self.display()

    @staticmethod
    def item_signal_types(
        item_kinds: Iterable[Hashable],
        delivery_mode: DeliveryMode,
        purpose: Purpose,
    ) -> list["SignalType"]:
        """The signals relevant to finding any of `item_kinds`.

        Picking up looks for PUSH and, when instrumental, CONTAINS; dropping
        off looks for PULL and, when instrumental, STORES.
        """
        if delivery_mode is DeliveryMode.PICK_UP:
            active, passive = SignalKind.PUSH, SignalKind.CONTAINS
        else:
            active, passive = SignalKind.PULL, SignalKind.STORES

        signal_types: list[SignalType] = []
        for item_kind in item_kinds:
            signal_types.append(SignalType(active, item_kind))
            if purpose is Purpose.INSTRUMENTAL:
                signal_types.append(SignalType(passive, item_kind))
        return signal_types


@dataclass
class Emitter:
    """The signals a game object emits at each step; may change over time."""

    signals: list[tuple[SignalType, SignalStrength]] = field(default_factory=list)