from measurement.domain.models import Mass, Measurements, Volume
from measurement.domain.units import MassUnit, VolumeUnit


def test_defaults_are_zero():
    measurements = Measurements()

    assert measurements.is_zero()
    assert measurements.to_dict() == {}


def test_zero_quantities_count_as_zero():
    measurements = Measurements(
        mass=Mass(0, MassUnit.GRAMS), volume=Volume(0, VolumeUnit.LITERS)
    )
    assert measurements.is_zero()


def test_to_dict_omits_zero_fields():
    measurements = Measurements(
        quantity=2,
        mass=Mass(420, MassUnit.GRAMS),
        volume=Volume(0, VolumeUnit.LITERS),
    )

    assert measurements.to_dict() == {
        "quantity": 2.0,
        "mass": {"amount": 420.0, "unit": "g"},
    }


def test_from_dict_round_trip():
    data = {
        "quantity": 1.0,
        "mass": {"amount": 0.5, "unit": "kg"},
        "volume": {"amount": 330.0, "unit": "ml"},
    }

    measurements = Measurements.from_dict(data)

    assert measurements.mass == Mass(0.5, MassUnit.KILOGRAMS)
    assert measurements.volume == Volume(330.0, VolumeUnit.MILLILITERS)
    assert measurements.to_dict() == data


def test_from_dict_missing_fields():
    measurements = Measurements.from_dict({"volume": {"amount": 1, "unit": "cup"}})

    assert measurements.quantity == 0.0
    assert measurements.mass is None
    assert not measurements.is_zero()
