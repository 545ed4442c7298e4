"""Number renderer: exact decimal + PatternRules + RoundingMode to text.

Rendering steps:
    1. Infinities render as the infinity glyph, optionally signed, and skip
       every other rule (affixes included).
    2. The value is multiplied by the rules' multiplier.
    3. The sign is taken from the scaled value; negative zero counts as
       positive.
    4. The body is rendered in standard or exponential notation. Standard
       notation rounds the signed value; exponential notation rounds the
       magnitude, so CEILING and FLOOR act on |value| there.
    5. The body is wrapped in the prefix and suffix for the sign.

The hot path does not log.

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal, localcontext

from decimalpattern.constants import (
    DECIMAL_SEPARATOR,
    EXPONENT_SYMBOL,
    GROUPING_SEPARATOR,
    INFINITY_SYMBOL,
    MINUS_SIGN,
    ZERO_DIGIT,
)
from decimalpattern.enums import RoundingMode
from decimalpattern.syntax import PatternRules

from .rounding import round_decimal

__all__ = ["apply_grouping", "render_number"]


def apply_grouping(digits: str, size: int) -> str:
    """Insert grouping separators every `size` digits, counting from the right.

    Examples:
        >>> apply_grouping("1234567", 3)
        '1,234,567'
        >>> apply_grouping("123456789", 5)
        '1234,56789'
    """
    head = len(digits) % size or size
    groups = [digits[:head]]
    groups.extend(digits[start : start + size] for start in range(head, len(digits), size))
    return GROUPING_SEPARATOR.join(groups)


def _split_digits(rounded: Decimal, scale: int) -> tuple[str, str]:
    """Split a value quantized to `scale` into integer and fraction digit strings.

    The fraction string has exactly `scale` digits.
    """
    units = int("".join(map(str, rounded.as_tuple().digits)))
    integer, fraction = divmod(units, 10**scale)
    return str(integer), str(fraction).zfill(scale) if scale else ""


def _trim_fraction(fraction: str, min_digits: int) -> str:
    """Drop trailing zeros, keeping at least `min_digits` digits."""
    return fraction[: max(len(fraction.rstrip(ZERO_DIGIT)), min_digits)]


def _scale(value: Decimal, multiplier: int) -> Decimal:
    if multiplier == 1:
        return value
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + len(str(multiplier)))
        return value * multiplier


def _render_standard(value: Decimal, rules: PatternRules, mode: RoundingMode) -> str:
    scale = rules.max_fraction_digits
    rounded = round_decimal(value, scale, mode).copy_abs()
    integer, fraction = _split_digits(rounded, scale)

    if rules.min_integer_digits == 0 and integer == ZERO_DIGIT:
        integer = ""
    else:
        integer = integer.zfill(rules.min_integer_digits)

    if rules.grouping_used and rules.grouping_size > 0:
        integer = apply_grouping(integer, rules.grouping_size)

    fraction = _trim_fraction(fraction, rules.min_fraction_digits)

    if fraction or rules.decimal_separator_always_shown:
        return integer + DECIMAL_SEPARATOR + fraction
    # Never leave the body blank, e.g. "#" on 0.
    return integer or ZERO_DIGIT


def _render_exponential(value: Decimal, rules: PatternRules, mode: RoundingMode) -> str:
    """Render a non-negative value in scientific notation."""
    if value.is_zero():
        point = DECIMAL_SEPARATOR if rules.max_fraction_digits > 0 else ""
        return (
            ZERO_DIGIT * rules.min_integer_digits
            + point
            + EXPONENT_SYMBOL
            + ZERO_DIGIT * rules.min_exponent_digits
        )

    scale = rules.max_fraction_digits
    exponent = value.adjusted()
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits))
        mantissa = value.scaleb(-exponent)

    rounded = round_decimal(mantissa, scale, mode)
    if rounded >= 10:
        # 9.995 -> 10.00 -> 1.000E+1
        exponent += 1
        rounded = round_decimal(rounded.scaleb(-1), scale, mode)

    integer, fraction = _split_digits(rounded, scale)
    fraction = _trim_fraction(fraction, rules.min_fraction_digits)
    body = integer
    if fraction or rules.decimal_separator_always_shown:
        body += DECIMAL_SEPARATOR + fraction

    sign = MINUS_SIGN if exponent < 0 else ""
    return body + EXPONENT_SYMBOL + sign + str(abs(exponent)).zfill(rules.min_exponent_digits)


def render_number(value: Decimal, rules: PatternRules, mode: RoundingMode) -> str:
    """Render an exact decimal according to compiled rules.

    Args:
        value: Decimal from to_decimal(); may be infinite, never NaN
        rules: Compiled pattern rules
        mode: Rounding mode

    Returns:
        Formatted string

    Raises:
        RoundingRequiredError: mode is UNNECESSARY and the value is inexact
            at the rendered scale

    Examples:
        >>> from decimalpattern.syntax import compile_pattern
        >>> render_number(Decimal("-1234.5"), compile_pattern("$#,##0.00"), RoundingMode.HALF_EVEN)
        '-$1,234.50'
        >>> render_number(Decimal("-Infinity"), compile_pattern("$0"), RoundingMode.HALF_EVEN)
        '-∞'
    """
    if value.is_infinite():
        return MINUS_SIGN + INFINITY_SYMBOL if value.is_signed() else INFINITY_SYMBOL

    scaled = _scale(value, rules.multiplier)
    prefix, suffix = rules.affixes(negative=scaled < 0)

    if rules.use_exponential_notation:
        body = _render_exponential(scaled.copy_abs(), rules, mode)
    else:
        body = _render_standard(scaled, rules, mode)
    return prefix + body + suffix
