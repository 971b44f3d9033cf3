import pytest

from measurement.domain.units import MassUnit, MeasureType, VolumeUnit


def test_suffixes_are_unique_across_dimensions():
    symbols = [unit.symbol for unit in MassUnit] + [unit.symbol for unit in VolumeUnit]
    assert len(symbols) == len(set(symbols))


@pytest.mark.parametrize(
    "symbol, unit",
    [
        ("kg", MassUnit.KILOGRAMS),
        ("mcg", MassUnit.MICROGRAMS),
        ("ozt", MassUnit.OUNCES_TROY),
        ("Ml", VolumeUnit.MEGALITERS),
        ("ml", VolumeUnit.MILLILITERS),
        ("impgil", VolumeUnit.IMPERIAL_GILLS),
    ],
)
def test_lookup_by_symbol(symbol, unit):
    assert type(unit)(symbol) is unit


def test_lookup_is_case_sensitive():
    with pytest.raises(ValueError):
        MassUnit("KG")


def test_str_is_symbol():
    assert str(MassUnit.KILOGRAMS) == "kg"
    assert f"{VolumeUnit.FLUID_OUNCES}" == "floz"


def test_measure_type_values():
    assert MeasureType("mass") is MeasureType.MASS
    assert MeasureType.VOLUME.value == "volume"
