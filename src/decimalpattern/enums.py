"""Enumerations for decimalpattern type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a rounding mode can be
configured from plain text (e.g. a settings file) without a lookup table.

Python 3.13+.
"""

from enum import StrEnum


class RoundingMode(StrEnum):
    """Rounding policy applied when a value has more digits than the pattern keeps.

    StrEnum provides automatic string conversion: str(RoundingMode.HALF_EVEN) == "half_even"

    Examples (pattern "0", one retained digit position):
        ===========  =====  =====  =====  =====  =====
        Mode          5.5    2.5    1.6    1.1   -2.5
        ===========  =====  =====  =====  =====  =====
        UP              6      3      2      2     -3
        DOWN            5      2      1      1     -2
        CEILING         6      3      2      2     -2
        FLOOR           5      2      1      1     -3
        HALF_UP         6      3      2      1     -3
        HALF_DOWN       5      2      2      1     -2
        HALF_EVEN       6      2      2      1     -2
        UNNECESSARY   error  error  error  error  error
        ===========  =====  =====  =====  =====  =====
    """

    UP = "up"
    """Away from zero."""

    DOWN = "down"
    """Toward zero (truncation)."""

    CEILING = "ceiling"
    """Toward positive infinity."""

    FLOOR = "floor"
    """Toward negative infinity."""

    HALF_UP = "half_up"
    """Nearest neighbor; ties away from zero."""

    HALF_DOWN = "half_down"
    """Nearest neighbor; ties toward zero."""

    HALF_EVEN = "half_even"
    """Nearest neighbor; ties to the even neighbor (banker's rounding). Default."""

    UNNECESSARY = "unnecessary"
    """Value must already be exact at the target scale; otherwise an error is raised."""


__all__ = [
    "RoundingMode",
]
