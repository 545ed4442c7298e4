"""decimalpattern - DecimalFormat-style number formatting.

Formats numbers with the DecimalFormat pattern language: digit
placeholders, grouping, scientific notation, percent/per-mille scaling and
signed sub-patterns, with eight rounding modes. Output is locale-independent
and deterministic; the default rounding mode is half-even.

Public API:
    DecimalFormat - Stateful formatter with per-field accessors
    format_number - One-shot formatting through the compiled-pattern cache
    compile_pattern - Compile a pattern string to PatternRules
    PatternRules - Compiled rule set
    RoundingMode - The eight rounding modes
    DEFAULT_PATTERN - "#,##0.###"

Exceptions:
    DecimalFormatError - Base exception class
    MalformedPatternError - Pattern cannot be compiled
    InvalidInputError - NaN, unparseable string, or unsupported type
    RoundingRequiredError - UNNECESSARY rounding on an inexact value

Submodules:
    decimalpattern.syntax - Pattern scanner and compiler
    decimalpattern.runtime - Rounding and rendering
    decimalpattern.diagnostics - Error codes, diagnostics and formatter
    decimalpattern.constants - Pattern symbols, defaults and limits
"""

from .constants import DEFAULT_PATTERN
from .diagnostics import (
    DecimalFormatError,
    InvalidInputError,
    MalformedPatternError,
    RoundingRequiredError,
)
from .enums import RoundingMode
from .runtime import DecimalFormat, format_number
from .syntax import PatternRules, compile_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("decimalpattern")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_PATTERN",
    "DecimalFormat",
    "DecimalFormatError",
    "InvalidInputError",
    "MalformedPatternError",
    "PatternRules",
    "RoundingMode",
    "RoundingRequiredError",
    "__version__",
    "compile_pattern",
    "format_number",
]
