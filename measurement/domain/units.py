# measurement/domain/units.py
"""
Unit identifiers for each measurement dimension.

Each member's value is its canonical short suffix, used when parsing and
printing ``"<amount><unit>"`` literals and when tagging units in JSON.
Suffixes are unique across all dimensions, so a suffix alone identifies
both the unit and its dimension.

Usage:
    from measurement.domain.units import MassUnit

    MassUnit("kg")  # MassUnit.KILOGRAMS
    MassUnit.KILOGRAMS.symbol  # "kg"
"""

from enum import Enum


class MeasureType(Enum):
    MASS = "mass"
    VOLUME = "volume"


class _UnitEnum(Enum):
    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class MassUnit(_UnitEnum):
    PICOGRAMS = "pg"
    NANOGRAMS = "ng"
    MICROGRAMS = "mcg"
    MILLIGRAMS = "mg"
    CENTIGRAMS = "cg"
    DECIGRAMS = "dg"
    GRAMS = "g"
    KILOGRAMS = "kg"
    OUNCES = "oz"
    POUNDS = "lb"
    STONES = "st"
    METRIC_TONS = "ton"
    SHORT_TONS = "sst"
    CARATS = "ct"
    OUNCES_TROY = "ozt"
    SLUGS = "slug"


class VolumeUnit(_UnitEnum):
    MILLILITERS = "ml"
    CENTILITERS = "cl"
    DECILITERS = "dl"
    LITERS = "l"
    KILOLITERS = "kl"
    MEGALITERS = "Ml"
    CUBIC_MILLIMETERS = "mm3"
    CUBIC_CENTIMETERS = "cm3"
    CUBIC_DECIMETERS = "dm3"
    CUBIC_FEET = "ft3"
    CUBIC_INCHES = "in3"
    CUBIC_METERS = "m3"
    CUBIC_KILOMETERS = "km3"
    CUBIC_MILES = "mi3"
    CUBIC_YARDS = "yd3"
    BUSHELS = "bu"
    CUPS = "cup"
    FLUID_OUNCES = "floz"
    GALLONS = "gal"
    PINTS = "pt"
    QUARTS = "qt"
    TABLESPOONS = "tbsp"
    TEASPOONS = "tsp"
    IMPERIAL_FLUID_OUNCES = "impfloz"
    IMPERIAL_GALLONS = "impgal"
    IMPERIAL_GILLS = "impgil"
    IMPERIAL_PINTS = "imppt"
    IMPERIAL_QUARTS = "impqt"
    IMPERIAL_TABLESPOONS = "imptbsp"
    IMPERIAL_TEASPOONS = "imptsp"
