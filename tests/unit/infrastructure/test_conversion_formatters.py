"""Test output formatting (console and JSON)"""

import json

import pytest

from measurement.domain.models.conversion import ConversionResult
from measurement.domain.models.quantity import Mass, Volume
from measurement.domain.units import MassUnit, VolumeUnit
from measurement.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
)


@pytest.fixture
def exact_result():
    return ConversionResult(
        source=Mass(420, MassUnit.GRAMS),
        target=Mass(0.42, MassUnit.KILOGRAMS),
        exact=True,
    )


@pytest.fixture
def approximate_result():
    return ConversionResult(
        source=Volume(1, VolumeUnit.PINTS),
        target=Volume(0.473176, VolumeUnit.LITERS),
        exact=False,
    )


class TestConsoleOutputFormatter:
    def test_exact(self, exact_result, capsys):
        ConsoleOutputFormatter().format_result(exact_result)

        assert capsys.readouterr().out == "420g = 0.42kg (exact)\n"

    def test_approximate(self, approximate_result, capsys):
        ConsoleOutputFormatter().format_result(approximate_result)

        assert capsys.readouterr().out == "1pt = 0.473176l (approximate)\n"

    def test_precision(self, approximate_result, capsys):
        ConsoleOutputFormatter(precision=3).format_result(approximate_result)

        assert capsys.readouterr().out == "1pt = 0.473l (approximate)\n"


class TestJSONOutputFormatter:
    def test_output_is_valid_json(self, exact_result):
        output = json.loads(JSONOutputFormatter().format_result(exact_result))

        assert output == {
            "measure_type": "mass",
            "source": {"amount": 420.0, "unit": "g"},
            "target": {"amount": 0.42, "unit": "kg"},
            "exact": True,
        }

    def test_precision_rounds_nested_amounts(self, approximate_result):
        output = json.loads(JSONOutputFormatter(precision=2).format_result(approximate_result))

        assert output["target"]["amount"] == 0.47
        assert output["exact"] is False

    def test_result_is_not_mutated(self, approximate_result):
        JSONOutputFormatter(precision=1).format_result(approximate_result)

        assert approximate_result.target.amount == 0.473176
