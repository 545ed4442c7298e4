"""Input coercion to exact decimals.

Accepted inputs:
    int     converted exactly
    float   converted through its shortest round-trip repr, so 1.005 is the
            decimal 1.005 and not the binary value 1.00499999999999989...
    str     parsed as a float first, then converted as above

Everything else (bool and decimal.Decimal included) is rejected.

Python 3.13+. Zero external dependencies.
"""

import math
from decimal import Decimal
from typing import TypeAlias

from decimalpattern.diagnostics import ErrorTemplate, InvalidInputError

__all__ = ["NumericInput", "to_decimal"]

NumericInput: TypeAlias = int | float | str


def _from_float(value: float, original: object) -> Decimal:
    if math.isnan(value):
        raise InvalidInputError(ErrorTemplate.not_a_number(original), input_value=repr(original))
    return Decimal(repr(value))


def to_decimal(value: object) -> Decimal:
    """Convert a formatter input to an exact Decimal.

    Args:
        value: int, float, or numeric string

    Returns:
        Decimal; infinite for float or string infinities

    Raises:
        InvalidInputError: NaN, unparseable string, or unsupported type

    Examples:
        >>> to_decimal(1.005)
        Decimal('1.005')
        >>> to_decimal("-1e-3")
        Decimal('-0.001')
        >>> to_decimal(10**20)
        Decimal('100000000000000000000')
    """
    match value:
        case bool():
            diagnostic = ErrorTemplate.unsupported_input_type(value)
            raise InvalidInputError(diagnostic, input_value=repr(value))
        case int():
            return Decimal(value)
        case float():
            return _from_float(value, value)
        case str():
            try:
                parsed = float(value)
            except ValueError as e:
                diagnostic = ErrorTemplate.unparseable_number(value)
                raise InvalidInputError(diagnostic, input_value=repr(value)) from e
            return _from_float(parsed, value)
        case _:
            diagnostic = ErrorTemplate.unsupported_input_type(value)
            raise InvalidInputError(diagnostic, input_value=repr(value))
