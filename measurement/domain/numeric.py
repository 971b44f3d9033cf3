# measurement/domain/numeric.py
"""
Fixed-width numeric representations for exact conversion.

Exact ladder conversion is defined over four representations: signed 32-bit
and 64-bit integers, and 32-bit and 64-bit floats. They are modelled with
numpy scalar types so that range and width behave exactly as they would in a
fixed-width language, while overflow is reported instead of wrapping.

Plain Python numbers are accepted too: an ``int`` is treated as ``int64`` and
a ``float`` as ``float64``. Values come back in the same kind they came in.
"""

from typing import Union

import numpy as np

Amount = Union[int, float, np.int32, np.int64, np.float32, np.float64]
Representation = type[np.number]

REPRESENTATIONS: tuple[Representation, ...] = (
    np.int32,
    np.int64,
    np.float32,
    np.float64,
)


def representation_of(amount: Amount) -> Representation:
    """Return the numpy scalar type an amount is computed in.

    Raises:
        TypeError: If the amount is not one of the supported representations
    """
    if isinstance(amount, np.generic):
        dtype = type(amount)
        if dtype not in REPRESENTATIONS:
            raise TypeError(f"Unsupported numeric representation: {dtype.__name__}")
        return dtype
    if isinstance(amount, bool):
        raise TypeError("Boolean is not a numeric amount")
    if isinstance(amount, int):
        return np.int64
    if isinstance(amount, float):
        return np.float64
    raise TypeError(f"Unsupported amount type: {type(amount).__name__}")


def is_integer(dtype: Representation) -> bool:
    return issubclass(dtype, np.integer)


def checked_cast(value: Amount, dtype: Representation) -> np.number | None:
    """Cast a value into a representation, None if it does not fit."""
    if is_integer(dtype):
        as_int = int(value)
        info = np.iinfo(dtype)
        if as_int < info.min or as_int > info.max:
            return None
        return dtype(as_int)
    with np.errstate(over="ignore"):
        cast = dtype(value)
    if not np.isfinite(cast):
        return None
    return cast


def checked_mul(a: Amount, b: Amount, dtype: Representation) -> np.number | None:
    """Multiply two values in a representation, None on overflow.

    Integer products are computed exactly and range checked against the
    width of ``dtype``. Float products overflow to infinity, which is
    reported the same way.
    """
    if is_integer(dtype):
        return checked_cast(int(a) * int(b), dtype)
    with np.errstate(over="ignore", invalid="ignore"):
        product = dtype(a) * dtype(b)
    if not np.isfinite(product):
        return None
    return product


def exact_div(a: Amount, b: Amount, dtype: Representation) -> np.number | None:
    """Divide in a representation.

    For integers the division must leave no remainder, otherwise None is
    returned. Floats divide without an exactness check.
    """
    if is_integer(dtype):
        numerator, denominator = int(a), int(b)
        if numerator % denominator != 0:
            return None
        return checked_cast(numerator // denominator, dtype)
    with np.errstate(over="ignore", invalid="ignore"):
        quotient = dtype(a) / dtype(b)
    if not np.isfinite(quotient):
        return None
    return quotient


def like(value: np.number, template: Amount) -> Amount:
    """Return ``value`` in the same kind as ``template``.

    Numpy scalars stay numpy scalars, plain Python numbers are unboxed.
    """
    if isinstance(template, np.generic):
        return value
    if isinstance(template, int):
        return int(value)
    return float(value)
