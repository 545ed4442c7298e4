"""One-shot formatting without a formatter instance.

Example:
    >>> format_number(1234.5)
    '1,234.5'
    >>> format_number(-1234.56, "#,##0.00;(#,##0.00)")
    '(1,234.56)'
    >>> format_number(0.125, "0.00", rounding_mode="half_up")
    '0.13'

Python 3.13+. Zero external dependencies.
"""

from decimalpattern.constants import DEFAULT_PATTERN
from decimalpattern.enums import RoundingMode
from decimalpattern.syntax import compile_pattern

from .renderer import render_number
from .values import NumericInput, to_decimal

__all__ = ["format_number"]


def format_number(
    value: NumericInput,
    pattern: str = DEFAULT_PATTERN,
    *,
    rounding_mode: RoundingMode | str = RoundingMode.HALF_EVEN,
) -> str:
    """Format a number with a pattern.

    Compiled patterns come from the shared compiled-pattern cache, so
    repeated calls with the same pattern skip parsing.

    Args:
        value: int, float, or numeric string
        pattern: Pattern string (default: "#,##0.###")
        rounding_mode: RoundingMode or its string value (default: half_even)

    Returns:
        Formatted string

    Raises:
        MalformedPatternError: If the pattern cannot be compiled
        InvalidInputError: NaN, unparseable string, or unsupported type
        RoundingRequiredError: UNNECESSARY mode on an inexact value
        ValueError: If rounding_mode is not a known mode

    Thread-safe.
    """
    mode = RoundingMode(rounding_mode)
    return render_number(to_decimal(value), compile_pattern(pattern), mode)
