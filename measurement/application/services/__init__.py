from .conversion import ConversionService
from .quantity_parser import QuantityParser, parse_mass, parse_quantity, parse_volume

__all__ = [
    "ConversionService",
    "QuantityParser",
    "parse_mass",
    "parse_quantity",
    "parse_volume",
]
