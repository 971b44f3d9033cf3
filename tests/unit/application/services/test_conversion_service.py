import logging

import pytest

from measurement.application.services.conversion import ConversionService
from measurement.domain.exceptions import InvalidUnitError
from measurement.domain.models.quantity import Mass, Volume
from measurement.domain.units import MassUnit, VolumeUnit


@pytest.fixture
def service():
    return ConversionService()


def test_exact_conversion(service):
    result = service.convert(Mass(420, MassUnit.GRAMS), MassUnit.KILOGRAMS)

    assert result.exact
    assert result.source == Mass(420, MassUnit.GRAMS)
    assert result.target == Mass(0.42, MassUnit.KILOGRAMS)
    assert result.measure_type == "mass"


def test_approximate_conversion(service):
    result = service.convert(Volume(1, VolumeUnit.GALLONS), VolumeUnit.LITERS)

    assert not result.exact
    assert result.target.amount == pytest.approx(3.785408, rel=1e-6)
    assert result.target.unit is VolumeUnit.LITERS


def test_result_matches_quantity_convert(service):
    quantity = Mass(1, MassUnit.OUNCES)

    result = service.convert(quantity, MassUnit.GRAMS)

    assert result.target == quantity.convert(MassUnit.GRAMS)


def test_to_dict(service):
    result = service.convert(Volume(1, VolumeUnit.LITERS), VolumeUnit.MILLILITERS)

    assert result.to_dict() == {
        "measure_type": "volume",
        "source": {"amount": 1.0, "unit": "l"},
        "target": {"amount": 1000.0, "unit": "ml"},
        "exact": True,
    }


def test_conversion_is_logged(service, caplog):
    caplog.set_level(logging.INFO, logger="measurement")

    service.convert(Mass(1, MassUnit.OUNCES), MassUnit.GRAMS)

    assert "Converted 1oz to g (approximate)" in caplog.text


def test_bridge_fallback_is_logged(service, caplog):
    caplog.set_level(logging.DEBUG, logger="measurement")

    service.convert(Volume(1, VolumeUnit.GALLONS), VolumeUnit.LITERS)

    assert "No exact volume path gal -> l, bridging through l" in caplog.text


def test_exact_conversion_does_not_bridge(service, caplog):
    caplog.set_level(logging.DEBUG, logger="measurement")

    service.convert(Volume(1, VolumeUnit.GALLONS), VolumeUnit.PINTS)

    assert "bridging" not in caplog.text


class TestResolveUnit:
    def test_resolves_within_dimension(self, service):
        assert service.resolve_unit(Mass(1, MassUnit.GRAMS), " kg ") is MassUnit.KILOGRAMS

    def test_rejects_unit_of_other_dimension(self, service):
        with pytest.raises(InvalidUnitError, match="Unknown mass unit"):
            service.resolve_unit(Mass(1, MassUnit.GRAMS), "l")
