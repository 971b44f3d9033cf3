import numpy as np
import pytest

from measurement.domain.validators import ValidationError, validate_amount


@pytest.mark.parametrize("amount", [0, 1, -2.5, np.float32(0.5), np.int64(7)])
def test_valid_amounts(amount):
    assert validate_amount(amount) == float(amount)


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), -float("inf")])
def test_non_finite_amounts_rejected(amount):
    with pytest.raises(ValidationError, match="must be finite"):
        validate_amount(amount)


@pytest.mark.parametrize("amount", ["1", None, True])
def test_non_numeric_amounts_rejected(amount):
    with pytest.raises(ValidationError, match="must be numeric"):
        validate_amount(amount)


def test_name_used_in_message():
    with pytest.raises(ValidationError, match="mass"):
        validate_amount(float("nan"), name="mass")


def test_validation_error_is_value_error():
    assert issubclass(ValidationError, ValueError)
