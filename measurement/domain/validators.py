"""Input validation for amounts entering the conversion engine."""

import math

import numpy as np


class ValidationError(ValueError):
    """Raised when validation fails."""

    pass


def validate_amount(amount: float, name: str = "amount") -> float:
    """Check that an amount is a finite real number.

    The conversion core accepts any float and lets NaN and Inf propagate;
    parsers and containers call this to reject them at the boundary.

    Args:
        amount: Value to validate
        name: Name for error messages

    Returns:
        The amount as a float

    Raises:
        ValidationError: If the amount is not numeric or not finite
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, np.number)):
        raise ValidationError(f"{name} must be numeric, got {type(amount)}")

    value = float(amount)
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")

    return value
