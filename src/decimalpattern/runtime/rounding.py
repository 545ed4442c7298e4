"""Rounding to a fixed number of fraction digits.

All rounding is done on exact decimals, so ties are detected exactly and
no epsilon is involved. Each RoundingMode maps to one decimal rounding rule:

    UP           ROUND_UP          away from zero
    DOWN         ROUND_DOWN        toward zero
    CEILING      ROUND_CEILING     toward +infinity
    FLOOR        ROUND_FLOOR       toward -infinity
    HALF_UP      ROUND_HALF_UP     nearest, ties away from zero
    HALF_DOWN    ROUND_HALF_DOWN   nearest, ties toward zero
    HALF_EVEN    ROUND_HALF_EVEN   nearest, ties to even digit
    UNNECESSARY  (Inexact trapped) exact values only

Python 3.13+. Zero external dependencies.
"""

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
    Inexact,
    localcontext,
)

from decimalpattern.diagnostics import ErrorTemplate, RoundingRequiredError
from decimalpattern.enums import RoundingMode

__all__ = ["round_decimal"]


def _decimal_rounding(mode: RoundingMode) -> str:
    """Map a RoundingMode to the decimal module's rounding constant."""
    match mode:
        case RoundingMode.UP:
            return ROUND_UP
        case RoundingMode.DOWN:
            return ROUND_DOWN
        case RoundingMode.CEILING:
            return ROUND_CEILING
        case RoundingMode.FLOOR:
            return ROUND_FLOOR
        case RoundingMode.HALF_UP:
            return ROUND_HALF_UP
        case RoundingMode.HALF_DOWN:
            return ROUND_HALF_DOWN
        case RoundingMode.HALF_EVEN:
            return ROUND_HALF_EVEN
        case RoundingMode.UNNECESSARY:
            # Any rule works: discarding a nonzero digit traps before it applies.
            return ROUND_DOWN


def round_decimal(value: Decimal, scale: int, mode: RoundingMode) -> Decimal:
    """Round a finite signed decimal to exactly `scale` fraction digits.

    The sign is seen by the rounding rule, so CEILING and FLOOR resolve
    differently for positive and negative values.

    Args:
        value: Finite decimal, signed
        scale: Number of fraction digits to keep (>= 0)
        mode: Rounding mode

    Returns:
        Decimal with exponent -scale

    Raises:
        RoundingRequiredError: mode is UNNECESSARY and value has nonzero
            digits beyond scale

    Examples:
        >>> round_decimal(Decimal("1.25"), 1, RoundingMode.HALF_EVEN)
        Decimal('1.2')
        >>> round_decimal(Decimal("-1.21"), 1, RoundingMode.CEILING)
        Decimal('-1.2')
        >>> round_decimal(Decimal("5"), 2, RoundingMode.UNNECESSARY)
        Decimal('5.00')
    """
    quantum = Decimal(1).scaleb(-scale)
    with localcontext() as ctx:
        # Coefficient of the result must fit without further rounding.
        ctx.prec = max(ctx.prec, value.adjusted() + scale + 2)
        if mode == RoundingMode.UNNECESSARY:
            ctx.traps[Inexact] = True
        try:
            return value.quantize(quantum, rounding=_decimal_rounding(mode))
        except Inexact as e:
            text = str(value)
            diagnostic = ErrorTemplate.rounding_necessary(text, scale)
            raise RoundingRequiredError(diagnostic, value=text, scale=scale) from e
