# measurement/domain/models/__init__.py
from measurement.domain.units import MassUnit, MeasureType, VolumeUnit
from .quantity import Mass, Volume
from .measurements import Measurements
from .conversion import ConversionResult

__all__ = [
    "MassUnit",
    "MeasureType",
    "VolumeUnit",
    "Mass",
    "Volume",
    "Measurements",
    "ConversionResult",
]
