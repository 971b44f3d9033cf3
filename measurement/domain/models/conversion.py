"""Domain model for the outcome of a quantity conversion"""

from dataclasses import dataclass
from typing import Any

from .quantity import BaseQuantity


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """
    A quantity before and after conversion.

    ``exact`` tells whether the target amount came from integer ladder
    factors alone or from the approximate pivot bridge.
    """

    source: BaseQuantity
    target: BaseQuantity
    exact: bool

    @property
    def measure_type(self) -> str:
        return self.source.dimension.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "measure_type": self.measure_type,
            "source": self.source.to_dict(),
            "target": self.target.to_dict(),
            "exact": self.exact,
        }
