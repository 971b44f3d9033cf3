# measurement/domain/mass.py
"""
Mass registration table.

A single ladder covers the metric units plus carats. It relies on
measurements having at most three decimal places before the next unit is
the better fit, so most rungs are 1000 apart. Ounces, pounds, stones, short
tons, troy ounces and slugs are not whole multiples of any metric unit and
reach grams only through floating constants.
"""

from measurement.domain.bridge import PivotBridge, Subsystem
from measurement.domain.constants import (
    GRAMS_PER_OUNCE,
    GRAMS_PER_POUND,
    GRAMS_PER_SHORT_TON,
    GRAMS_PER_SLUG,
    GRAMS_PER_STONE,
    GRAMS_PER_TROY_OUNCE,
)
from measurement.domain.dimension import Dimension
from measurement.domain.exact import ExactResult
from measurement.domain.ladder import Ladder
from measurement.domain.units import MassUnit, MeasureType
from measurement.domain.numeric import Amount

MASS_UNITS: tuple[MassUnit, ...] = tuple(MassUnit)

METRIC_MASS_LADDER = Ladder.of(
    "metric mass",
    [
        (MassUnit.PICOGRAMS, 1),
        (MassUnit.NANOGRAMS, 1000),
        (MassUnit.MICROGRAMS, 1000),
        (MassUnit.MILLIGRAMS, 1000),
        (MassUnit.CENTIGRAMS, 10),
        (MassUnit.DECIGRAMS, 10),
        (MassUnit.CARATS, 2),
        (MassUnit.GRAMS, 5),
        (MassUnit.KILOGRAMS, 1000),
        (MassUnit.METRIC_TONS, 1000),
    ],
)

MASS_BRIDGE = PivotBridge(
    pivot=MassUnit.GRAMS,
    subsystems=(
        Subsystem("metric", MassUnit.GRAMS, 1.0, METRIC_MASS_LADDER),
        Subsystem("avoirdupois ounce", MassUnit.OUNCES, GRAMS_PER_OUNCE),
        Subsystem("avoirdupois pound", MassUnit.POUNDS, GRAMS_PER_POUND),
        Subsystem("stone", MassUnit.STONES, GRAMS_PER_STONE),
        Subsystem("short ton", MassUnit.SHORT_TONS, GRAMS_PER_SHORT_TON),
        Subsystem("troy ounce", MassUnit.OUNCES_TROY, GRAMS_PER_TROY_OUNCE),
        Subsystem("slug", MassUnit.SLUGS, GRAMS_PER_SLUG),
    ),
)

MASS = Dimension(
    measure_type=MeasureType.MASS,
    ladders=(METRIC_MASS_LADDER,),
    bridge=MASS_BRIDGE,
)


def try_convert_exact_mass(amount: Amount, from_unit: MassUnit, to_unit: MassUnit) -> ExactResult:
    """Convert using only integer factors."""
    return MASS.try_convert_exact(amount, from_unit, to_unit)


def convert_approx_mass(amount: float, from_unit: MassUnit, to_unit: MassUnit) -> float:
    return MASS.convert_approx(amount, from_unit, to_unit)


def convert_mass(amount: float, from_unit: MassUnit, to_unit: MassUnit) -> float:
    return MASS.convert(amount, from_unit, to_unit)
