from measurement.domain.exceptions import InvalidUnitError
from measurement.domain.models.conversion import ConversionResult
from measurement.domain.models.quantity import BaseQuantity
from measurement.logging_config import get_logger

logger = get_logger(__name__)


class ConversionService:
    """
    Converts parsed quantities and records which path produced the result.
    """

    def resolve_unit(self, quantity: BaseQuantity, symbol: str):
        """Look up a target unit by suffix within the quantity's dimension."""
        try:
            return quantity.unit_type(symbol.strip())
        except ValueError as e:
            raise InvalidUnitError(
                f"Unknown {quantity.dimension.name} unit: {symbol!r}"
            ) from e

    def convert(self, quantity: BaseQuantity, unit) -> ConversionResult:
        amount, exact = quantity.dimension.convert_with_exactness(
            quantity.amount, quantity.unit, unit
        )

        logger.info(
            f"Converted {quantity} to {unit} ({'exact' if exact else 'approximate'})"
        )
        return ConversionResult(
            source=quantity,
            target=type(quantity)(amount=amount, unit=unit),
            exact=exact,
        )
