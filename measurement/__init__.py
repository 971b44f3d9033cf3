"""Exact-first unit conversion for mass and volume."""

from measurement.domain.exact import ExactResult
from measurement.domain.mass import (
    convert_approx_mass,
    convert_mass,
    try_convert_exact_mass,
)
from measurement.domain.volume import (
    convert_approx_volume,
    convert_volume,
    try_convert_exact_volume,
)
from measurement.domain.models import (
    Mass,
    MassUnit,
    Measurements,
    MeasureType,
    Volume,
    VolumeUnit,
)
from measurement.application.services.quantity_parser import (
    parse_mass,
    parse_quantity,
    parse_volume,
)

__all__ = [
    "ExactResult",
    "Mass",
    "MassUnit",
    "Measurements",
    "MeasureType",
    "Volume",
    "VolumeUnit",
    "convert_approx_mass",
    "convert_approx_volume",
    "convert_mass",
    "convert_volume",
    "parse_mass",
    "parse_quantity",
    "parse_volume",
    "try_convert_exact_mass",
    "try_convert_exact_volume",
]
