"""Output formatting services for conversion results."""

import json
from typing import Protocol

from measurement.domain.models.conversion import ConversionResult
from measurement.domain.models.quantity import format_amount


def _format_dict_floats(d, precision):
    for k, v in d.items():
        if isinstance(v, float):
            d[k] = round(v, precision)
        elif isinstance(v, dict):
            _format_dict_floats(v, precision)
    return d


def _build_output_dict(result: ConversionResult, precision: int | None = None) -> dict:
    output_dict = result.to_dict()
    if precision is not None:
        _format_dict_floats(output_dict, precision)
    return output_dict


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(self, result: ConversionResult) -> str | None:
        """Format and display a conversion result"""
        ...


class ConsoleOutputFormatter:
    """Format conversion results for console output"""

    def __init__(self, precision: int | None = None):
        self.precision = precision

    def format_result(self, result: ConversionResult) -> None:
        output_dict = _build_output_dict(result, self.precision)
        source, target = output_dict["source"], output_dict["target"]
        path = "exact" if output_dict["exact"] else "approximate"

        print(
            f"{format_amount(source['amount'])}{source['unit']} = "
            f"{format_amount(target['amount'])}{target['unit']} ({path})"
        )


class JSONOutputFormatter:
    """Format conversion results as JSON (for API/automation)"""

    def __init__(self, precision: int | None = None):
        self.precision = precision

    def format_result(self, result: ConversionResult) -> str:
        output_dict = _build_output_dict(result, self.precision)
        return json.dumps(output_dict, indent=2)
