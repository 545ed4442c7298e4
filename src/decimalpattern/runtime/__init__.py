"""Number formatting runtime package.

Provides input coercion, rounding, rendering, and the DecimalFormat API.
Depends on syntax package for pattern compilation.

Python 3.13+.
"""

from .decimal_format import DecimalFormat
from .functions import format_number
from .renderer import apply_grouping, render_number
from .rounding import round_decimal
from .values import NumericInput, to_decimal

__all__ = [
    "DecimalFormat",
    "NumericInput",
    "apply_grouping",
    "format_number",
    "render_number",
    "round_decimal",
    "to_decimal",
]
