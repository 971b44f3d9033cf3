# measurement/domain/ladder.py
"""
Unit ladders.

Unit systems usually define their units as a sequence where every unit is a
whole multiple of the previous one: 1000 mg in a gram, 1000 g in a kilogram.
A ladder stores such a sequence from the smallest unit to the largest, each
step carrying the multiplier from its predecessor.
"""

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from measurement.domain.exceptions import LadderDefinitionError

U = TypeVar("U", bound=Hashable)


@dataclass(frozen=True, slots=True)
class LadderStep(Generic[U]):
    """One rung: a unit and how many previous-rung units make one of it."""

    unit: U
    from_prev: int


@dataclass(frozen=True, slots=True)
class Ladder(Generic[U]):
    """
    Ordered sequence of units with integer multipliers between neighbours.

    Steps are ordered by increasing unit size. The first step has no
    predecessor, so its multiplier is 1. A unit appears at most once.
    """

    name: str
    steps: tuple[LadderStep[U], ...]

    def __post_init__(self):
        if not self.steps:
            raise LadderDefinitionError(f"Ladder '{self.name}' has no steps")

        if self.steps[0].from_prev != 1:
            raise LadderDefinitionError(
                f"Ladder '{self.name}' must start with multiplier 1, "
                f"got {self.steps[0].from_prev}"
            )

        seen = set()
        for step in self.steps:
            if isinstance(step.from_prev, bool) or not isinstance(step.from_prev, int):
                raise LadderDefinitionError(
                    f"Ladder '{self.name}': multiplier for {step.unit!r} must be an integer"
                )
            if step.from_prev <= 0:
                raise LadderDefinitionError(
                    f"Ladder '{self.name}': multiplier for {step.unit!r} must be positive, "
                    f"got {step.from_prev}"
                )
            if step.unit in seen:
                raise LadderDefinitionError(
                    f"Ladder '{self.name}': unit {step.unit!r} appears more than once"
                )
            seen.add(step.unit)

    @classmethod
    def of(cls, name: str, steps: Iterable[tuple[U, int]]) -> "Ladder[U]":
        """Build a ladder from ``(unit, from_prev)`` pairs."""
        return cls(name, tuple(LadderStep(unit, from_prev) for unit, from_prev in steps))

    def __len__(self) -> int:
        return len(self.steps)

    def __contains__(self, unit: object) -> bool:
        return self.index_of(unit) is not None

    @property
    def units(self) -> tuple[U, ...]:
        return tuple(step.unit for step in self.steps)

    def index_of(self, unit: object) -> int | None:
        """Position of ``unit`` in the ladder, or None if it is not on it."""
        for idx, step in enumerate(self.steps):
            if step.unit == unit:
                return idx
        return None

    def multipliers(self, idx_from: int, idx_to: int) -> Iterator[int]:
        """
        Yield the multipliers crossed when walking from one position to another.

        Walking up the ladder crosses the multiplier of every rung above the
        start; walking down crosses the multiplier of every rung left behind.
        """
        for idx in range(idx_from, idx_to):
            yield self.steps[idx + 1].from_prev
        for idx in range(idx_from, idx_to, -1):
            yield self.steps[idx].from_prev

    def factor(self, idx_from: int, idx_to: int) -> int:
        """Exact integer ratio between two positions."""
        f = 1
        for multiplier in self.multipliers(idx_from, idx_to):
            f *= multiplier
        return f
