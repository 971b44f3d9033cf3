from measurement.domain.exceptions import InvalidAmountError, InvalidUnitError
from measurement.domain.models.quantity import BaseQuantity, Mass, Volume
from measurement.domain.validators import ValidationError, validate_amount
from measurement.logging_config import get_logger

logger = get_logger(__name__)


class QuantityParser:
    """
    Parses "<amount><unit>" literals such as "420g" or "0.5l".
    The unit is the longest known suffix the text ends with, so "1ml" is
    milliliters rather than liters. Suffixes are case-sensitive: "Ml" is
    megaliters.
    """

    def __init__(self, quantity_type: type[BaseQuantity]) -> None:
        self.quantity_type = quantity_type
        # Longest first, so the first match is the longest suffix
        self.units = sorted(
            quantity_type.unit_type, key=lambda unit: len(unit.symbol), reverse=True
        )

    def match_unit(self, text: str):
        """Unit with the longest suffix terminating the text, or None."""
        for unit in self.units:
            if text.endswith(unit.symbol):
                return unit
        return None

    def parse(self, text: str) -> BaseQuantity:
        """
        Parses a single quantity literal.

        Raises:
            InvalidUnitError: If no unit suffix matches
            InvalidAmountError: If the amount is missing, malformed or not finite
        """
        text = text.strip()
        dimension = self.quantity_type.dimension.name

        unit = self.match_unit(text)
        if unit is None:
            raise InvalidUnitError(f"Invalid {dimension} unit in {text!r}")

        amount_str = text[: len(text) - len(unit.symbol)]
        # Whitespace or digit separators inside the literal are not part of a number
        if not amount_str or amount_str != amount_str.strip() or "_" in amount_str:
            raise InvalidAmountError(f"Invalid {dimension} amount in {text!r}")

        try:
            amount = validate_amount(float(amount_str))
        except ValidationError as e:
            raise InvalidAmountError(f"Invalid {dimension} amount in {text!r}: {e}") from e
        except ValueError as e:
            raise InvalidAmountError(f"Invalid {dimension} amount in {text!r}") from e

        logger.debug(f"Parsed {text!r} as {amount} {unit.symbol}")
        return self.quantity_type(amount=amount, unit=unit)


_mass_parser = QuantityParser(Mass)
_volume_parser = QuantityParser(Volume)


def parse_mass(text: str) -> Mass:
    return _mass_parser.parse(text)


def parse_volume(text: str) -> Volume:
    return _volume_parser.parse(text)


def parse_quantity(text: str) -> Mass | Volume:
    """
    Parses a literal of any dimension.
    The longest suffix wins across dimensions too: "1floz" is US fluid
    ounces, not "1fl" of avoirdupois ounces.
    """
    stripped = text.strip()
    best = None
    for parser in (_mass_parser, _volume_parser):
        unit = parser.match_unit(stripped)
        if unit is not None and (best is None or len(unit.symbol) > len(best[0].symbol)):
            best = (unit, parser)

    if best is None:
        raise InvalidUnitError(f"Invalid unit in {stripped!r}")
    return best[1].parse(stripped)
