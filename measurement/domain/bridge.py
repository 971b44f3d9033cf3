# measurement/domain/bridge.py
"""
Approximate conversion through a pivot unit.

Units that share no ladder are connected through a dimension's pivot unit
(grams for mass, liters for volume). Every unit belongs to one subsystem: a
ladder with a designated bridge unit (the anchor), or a single standalone
unit. The anchor carries a floating constant giving its size in pivot units.

A conversion takes two legs. To the pivot: move along the subsystem ladder
to the anchor, then multiply by the constant. From the pivot: move along the
ladder from the anchor to the target unit, then divide by the constant.
Both legs are lossy; the result is never exact and never fails.
"""

import math
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

from measurement.domain.exceptions import BridgeDefinitionError, UnitNotRegisteredError
from measurement.domain.ladder import Ladder

U = TypeVar("U", bound=Hashable)


@dataclass(frozen=True, slots=True)
class Subsystem(Generic[U]):
    """
    A group of units joined to the pivot by one floating constant.

    Attributes:
        name: Human readable name, used in error messages
        anchor: Unit the constant applies to
        factor: Pivot units in one anchor unit
        ladder: Ladder the anchor sits on, None for a standalone unit
    """

    name: str
    anchor: U
    factor: float
    ladder: Ladder[U] | None = None

    def __post_init__(self):
        if not math.isfinite(self.factor) or self.factor <= 0:
            raise BridgeDefinitionError(
                f"Subsystem '{self.name}' factor must be positive and finite, got {self.factor}"
            )
        if self.ladder is not None and self.anchor not in self.ladder:
            raise BridgeDefinitionError(
                f"Subsystem '{self.name}' anchor {self.anchor!r} is not on ladder '{self.ladder.name}'"
            )

    @property
    def units(self) -> tuple[U, ...]:
        if self.ladder is None:
            return (self.anchor,)
        return self.ladder.units

    def __contains__(self, unit: object) -> bool:
        if self.ladder is None:
            return unit == self.anchor
        return unit in self.ladder

    def move(self, amount: float, from_unit: U, to_unit: U) -> float:
        """Scale along the subsystem ladder using float arithmetic."""
        if from_unit == to_unit or self.ladder is None:
            return amount
        idx_from = self.ladder.index_of(from_unit)
        idx_to = self.ladder.index_of(to_unit)
        f = self.ladder.factor(idx_from, idx_to)
        if idx_from < idx_to:
            return amount / f
        return amount * f


@dataclass(frozen=True, slots=True)
class PivotBridge(Generic[U]):
    """Registration table of every subsystem of a dimension around its pivot."""

    pivot: U
    subsystems: tuple[Subsystem[U], ...]

    def __post_init__(self):
        owners: dict[U, str] = {}
        for subsystem in self.subsystems:
            for unit in subsystem.units:
                if unit in owners:
                    raise BridgeDefinitionError(
                        f"Unit {unit!r} is registered in both '{owners[unit]}' "
                        f"and '{subsystem.name}'"
                    )
                owners[unit] = subsystem.name

        pivot_home = next((s for s in self.subsystems if self.pivot in s), None)
        if pivot_home is None or pivot_home.anchor != self.pivot or pivot_home.factor != 1:
            raise BridgeDefinitionError(
                f"Pivot {self.pivot!r} must anchor a subsystem with factor 1"
            )

    @property
    def units(self) -> tuple[U, ...]:
        return tuple(unit for subsystem in self.subsystems for unit in subsystem.units)

    def subsystem_of(self, unit: U) -> Subsystem[U]:
        for subsystem in self.subsystems:
            if unit in subsystem:
                return subsystem
        raise UnitNotRegisteredError(unit)

    def to_pivot(self, amount: float, unit: U) -> float:
        subsystem = self.subsystem_of(unit)
        return subsystem.move(amount, unit, subsystem.anchor) * subsystem.factor

    def from_pivot(self, amount: float, unit: U) -> float:
        subsystem = self.subsystem_of(unit)
        return subsystem.move(amount, subsystem.anchor, unit) / subsystem.factor

    def convert(self, amount: float, from_unit: U, to_unit: U) -> float:
        """Convert through the pivot. Total for every registered unit."""
        amount = float(amount)
        if from_unit == to_unit or amount == 0:
            return amount
        return self.from_pivot(self.to_pivot(amount, from_unit), to_unit)
