# measurement/domain/volume.py
"""
Volume registration table.

Five independent ladders, each with a bridge unit whose size in liters is
known. Liters are not on every ladder, so conversions between ladders move
to the nearest bridge unit first and apply its liter constant once per leg.
Metric cups and acre-feet are not whole multiples of anything here and are
left out.
"""

from measurement.domain.bridge import PivotBridge, Subsystem
from measurement.domain.constants import (
    LITERS_PER_CUBIC_DECIMETER,
    LITERS_PER_CUBIC_FOOT,
    LITERS_PER_IMPERIAL_PINT,
    LITERS_PER_US_PINT,
)
from measurement.domain.dimension import Dimension
from measurement.domain.exact import ExactResult
from measurement.domain.ladder import Ladder
from measurement.domain.units import MeasureType, VolumeUnit
from measurement.domain.numeric import Amount

VOLUME_UNITS: tuple[VolumeUnit, ...] = tuple(VolumeUnit)

LITER_LADDER = Ladder.of(
    "liter",
    [
        (VolumeUnit.MILLILITERS, 1),
        (VolumeUnit.CENTILITERS, 10),
        (VolumeUnit.DECILITERS, 10),
        (VolumeUnit.LITERS, 10),
        (VolumeUnit.KILOLITERS, 1000),
        (VolumeUnit.MEGALITERS, 1000),
    ],
)

CUBIC_METER_LADDER = Ladder.of(
    "cubic meter",
    [
        (VolumeUnit.CUBIC_MILLIMETERS, 1),
        (VolumeUnit.CUBIC_CENTIMETERS, 10 * 10 * 10),
        (VolumeUnit.CUBIC_DECIMETERS, 10 * 10 * 10),
        (VolumeUnit.CUBIC_METERS, 10 * 10 * 10),
        (VolumeUnit.CUBIC_KILOMETERS, 1000 * 1000 * 1000),
    ],
)

CUBIC_INCH_LADDER = Ladder.of(
    "cubic inch",
    [
        (VolumeUnit.CUBIC_INCHES, 1),
        (VolumeUnit.CUBIC_FEET, 12 * 12 * 12),
        (VolumeUnit.CUBIC_YARDS, 3 * 3 * 3),
        (VolumeUnit.CUBIC_MILES, 1760 * 1760 * 1760),
    ],
)

IMPERIAL_LADDER = Ladder.of(
    "imperial",
    [
        (VolumeUnit.IMPERIAL_TEASPOONS, 1),
        (VolumeUnit.IMPERIAL_TABLESPOONS, 3),
        (VolumeUnit.IMPERIAL_FLUID_OUNCES, 2),
        (VolumeUnit.IMPERIAL_GILLS, 5),
        (VolumeUnit.IMPERIAL_PINTS, 4),
        (VolumeUnit.IMPERIAL_QUARTS, 2),
        (VolumeUnit.IMPERIAL_GALLONS, 4),
        (VolumeUnit.BUSHELS, 8),
    ],
)

US_CUSTOMARY_LADDER = Ladder.of(
    "US customary",
    [
        (VolumeUnit.TEASPOONS, 1),
        (VolumeUnit.TABLESPOONS, 3),
        (VolumeUnit.FLUID_OUNCES, 2),
        (VolumeUnit.CUPS, 8),
        (VolumeUnit.PINTS, 2),
        (VolumeUnit.QUARTS, 2),
        (VolumeUnit.GALLONS, 4),
    ],
)

VOLUME_BRIDGE = PivotBridge(
    pivot=VolumeUnit.LITERS,
    subsystems=(
        Subsystem("cubic meter", VolumeUnit.CUBIC_DECIMETERS, LITERS_PER_CUBIC_DECIMETER, CUBIC_METER_LADDER),
        Subsystem("cubic inch", VolumeUnit.CUBIC_FEET, LITERS_PER_CUBIC_FOOT, CUBIC_INCH_LADDER),
        Subsystem("imperial", VolumeUnit.IMPERIAL_PINTS, LITERS_PER_IMPERIAL_PINT, IMPERIAL_LADDER),
        Subsystem("US customary", VolumeUnit.PINTS, LITERS_PER_US_PINT, US_CUSTOMARY_LADDER),
        Subsystem("liter", VolumeUnit.LITERS, 1.0, LITER_LADDER),
    ),
)

VOLUME = Dimension(
    measure_type=MeasureType.VOLUME,
    ladders=tuple(subsystem.ladder for subsystem in VOLUME_BRIDGE.subsystems),
    bridge=VOLUME_BRIDGE,
)


def try_convert_exact_volume(
    amount: Amount, from_unit: VolumeUnit, to_unit: VolumeUnit
) -> ExactResult:
    """Convert using only integer factors."""
    return VOLUME.try_convert_exact(amount, from_unit, to_unit)


def convert_approx_volume(amount: float, from_unit: VolumeUnit, to_unit: VolumeUnit) -> float:
    return VOLUME.convert_approx(amount, from_unit, to_unit)


def convert_volume(amount: float, from_unit: VolumeUnit, to_unit: VolumeUnit) -> float:
    return VOLUME.convert(amount, from_unit, to_unit)
