# measurement/domain/models/quantity.py
"""Single-dimension quantities: an amount paired with a unit."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

import numpy as np

from measurement.domain.dimension import Dimension
from measurement.domain.exceptions import InvalidAmountError, InvalidUnitError
from measurement.domain.mass import MASS
from measurement.domain.units import MassUnit, VolumeUnit
from measurement.domain.volume import VOLUME


def format_amount(amount: float) -> str:
    """Shortest round-tripping positional form: 420.0 -> "420", 1e-05 -> "0.00001"."""
    return np.format_float_positional(float(amount), trim="-")


class BaseQuantity:
    """
    Behaviour shared by Mass and Volume.

    Subclasses are frozen dataclasses with ``amount`` and ``unit`` fields and
    bind the unit enum and the dimension they convert in. Conversions always
    return a new quantity.
    """

    __slots__ = ()

    unit_type: ClassVar[type[Enum]]
    dimension: ClassVar[Dimension]

    def convert(self, unit):
        """Express this quantity in another unit, exactly when possible."""
        return type(self)(
            amount=self.dimension.convert(self.amount, self.unit, unit),
            unit=unit,
        )

    def is_zero(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return format_amount(self.amount) + self.unit.symbol

    def to_dict(self) -> dict[str, Any]:
        return {"amount": float(self.amount), "unit": self.unit.symbol}

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        try:
            unit = cls.unit_type(data["unit"])
        except ValueError as e:
            raise InvalidUnitError(
                f"Unknown {cls.dimension.name} unit: {data['unit']!r}"
            ) from e
        try:
            amount = float(data["amount"])
        except (TypeError, ValueError) as e:
            raise InvalidAmountError(
                f"Invalid {cls.dimension.name} amount: {data['amount']!r}"
            ) from e
        return cls(amount=amount, unit=unit)

    @classmethod
    def from_string(cls, text: str):
        """Parse a ``"<amount><unit>"`` literal such as ``"420g"``."""
        from measurement.application.services.quantity_parser import QuantityParser

        return QuantityParser(cls).parse(text)


@dataclass(frozen=True, slots=True)
class Mass(BaseQuantity):
    amount: float
    unit: MassUnit

    unit_type: ClassVar[type[Enum]] = MassUnit
    dimension: ClassVar[Dimension] = MASS


@dataclass(frozen=True, slots=True)
class Volume(BaseQuantity):
    amount: float
    unit: VolumeUnit

    unit_type: ClassVar[type[Enum]] = VolumeUnit
    dimension: ClassVar[Dimension] = VOLUME
