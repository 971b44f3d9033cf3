# measurement/domain/dimension.py
"""Dimension facade: exact conversion first, pivot bridge as the fallback."""

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

from measurement.domain.bridge import PivotBridge
from measurement.domain.exact import ExactResult, convert_exact
from measurement.domain.ladder import Ladder
from measurement.domain.units import MeasureType
from measurement.domain.numeric import Amount
from measurement.logging_config import get_logger

logger = get_logger(__name__)

U = TypeVar("U", bound=Hashable)


@dataclass(frozen=True, slots=True)
class Dimension(Generic[U]):
    """
    Everything needed to convert within one measurement dimension.

    Ladders are scanned in the order given, so their order is the priority
    of exact conversion. The bridge must cover every unit of the dimension.
    """

    measure_type: MeasureType
    ladders: tuple[Ladder[U], ...]
    bridge: PivotBridge[U]

    @property
    def name(self) -> str:
        return self.measure_type.value

    @property
    def pivot(self) -> U:
        return self.bridge.pivot

    def try_convert_exact(self, amount: Amount, from_unit: U, to_unit: U) -> ExactResult:
        return convert_exact(amount, from_unit, to_unit, self.ladders)

    def convert_approx(self, amount: float, from_unit: U, to_unit: U) -> float:
        return self.bridge.convert(amount, from_unit, to_unit)

    def convert_with_exactness(
        self, amount: float, from_unit: U, to_unit: U
    ) -> tuple[float, bool]:
        """
        Convert an amount, preferring the exact path. Never fails.

        Returns:
            The converted amount and whether it came from the exact path
        """
        amount = float(amount)
        converted, ok = self.try_convert_exact(amount, from_unit, to_unit)
        if ok:
            return converted, True

        logger.debug(
            f"No exact {self.name} path {from_unit} -> {to_unit}, "
            f"bridging through {self.pivot}"
        )
        return self.convert_approx(amount, from_unit, to_unit), False

    def convert(self, amount: float, from_unit: U, to_unit: U) -> float:
        converted, _ = self.convert_with_exactness(amount, from_unit, to_unit)
        return converted
