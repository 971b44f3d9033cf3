# measurement/domain/exact.py
"""
Exact conversion along unit ladders.

Only integer multipliers are used. A conversion fails, rather than losing
information, when the units share no ladder, when the factor or the result
overflows the numeric representation, or when an integer amount does not
divide evenly into the coarser unit. Failure is an expected outcome and is
reported through ``ExactResult.ok``, never raised.
"""

from collections.abc import Hashable, Iterable
from typing import NamedTuple, TypeVar

from measurement.domain.ladder import Ladder
from measurement.domain.numeric import (
    Amount,
    checked_cast,
    checked_mul,
    exact_div,
    like,
    representation_of,
)

U = TypeVar("U", bound=Hashable)


class ExactResult(NamedTuple):
    amount: Amount
    ok: bool


def convert_by_ladder(
    amount: Amount, from_unit: U, to_unit: U, ladder: Ladder[U]
) -> ExactResult:
    """
    Convert an amount between two units of the same ladder.

    Args:
        amount: Python int/float or numpy int32/int64/float32/float64 scalar
        from_unit: Unit the amount is expressed in
        to_unit: Unit to express the amount in
        ladder: Ladder expected to contain both units

    Returns:
        ExactResult with the converted amount in the same representation as
        the input, or the unchanged input and ``ok=False`` on failure.
    """
    if from_unit == to_unit or amount == 0:
        return ExactResult(amount, True)

    dtype = representation_of(amount)

    idx_from, idx_to = ladder.index_of(from_unit), ladder.index_of(to_unit)
    if idx_from is None or idx_to is None:
        return ExactResult(amount, False)

    factor = dtype(1)
    for multiplier in ladder.multipliers(idx_from, idx_to):
        factor = checked_mul(factor, multiplier, dtype)
        if factor is None:
            return ExactResult(amount, False)

    value = checked_cast(amount, dtype)
    if value is None:
        return ExactResult(amount, False)

    if idx_from < idx_to:
        converted = exact_div(value, factor, dtype)  # loss of precision without fractions
    else:
        converted = checked_mul(value, factor, dtype)

    if converted is None:
        return ExactResult(amount, False)

    return ExactResult(like(converted, amount), True)


def convert_exact(
    amount: Amount, from_unit: U, to_unit: U, ladders: Iterable[Ladder[U]]
) -> ExactResult:
    """
    Convert on the first ladder, in priority order, holding both units.

    Ladders are never merged: units on different ladders have no exact path.
    """
    if from_unit == to_unit or amount == 0:
        return ExactResult(amount, True)

    for ladder in ladders:
        if from_unit in ladder and to_unit in ladder:
            return convert_by_ladder(amount, from_unit, to_unit, ladder)

    return ExactResult(amount, False)
