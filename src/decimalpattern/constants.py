"""Shared constants for decimalpattern.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Pattern symbols: Characters with special meaning in a number pattern
- Output symbols: Characters emitted by the renderer
- Multipliers: Scale factors selected by percent/per-mille affixes
- Defaults: Values used when the caller supplies none
- Cache limits: Memory bounds for the compiled-pattern cache

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern symbols
    "ZERO_DIGIT",
    "OPTIONAL_DIGIT",
    "GROUPING_SEPARATOR",
    "DECIMAL_SEPARATOR",
    "PATTERN_SEPARATOR",
    "QUOTE",
    "PERCENT",
    "PER_MILLE",
    "EXPONENT_CHARS",
    "NUMBER_CHARS",
    # Output symbols
    "MINUS_SIGN",
    "EXPONENT_SYMBOL",
    "INFINITY_SYMBOL",
    # Multipliers
    "DEFAULT_MULTIPLIER",
    "PERCENT_MULTIPLIER",
    "PER_MILLE_MULTIPLIER",
    # Defaults
    "DEFAULT_PATTERN",
    # Cache limits
    "MAX_PATTERN_CACHE_SIZE",
]

# ============================================================================
# PATTERN SYMBOLS
# ============================================================================
#
# The pattern language is fixed and locale-independent: these characters
# keep their meaning regardless of where the formatted output is shown.
# Output uses the same characters for the grouping and decimal separators.
#
# ============================================================================

# Required digit: always rendered, zero-padded when the value has fewer digits.
ZERO_DIGIT: str = "0"

# Optional digit: rendered only when significant.
OPTIONAL_DIGIT: str = "#"

# Grouping separator. Its distance from the end of the integer part sets
# the grouping size; only the last one in a pattern counts.
GROUPING_SEPARATOR: str = ","

# Decimal separator between integer and fraction digits.
DECIMAL_SEPARATOR: str = "."

# Separates the positive sub-pattern from the optional negative one.
PATTERN_SEPARATOR: str = ";"

# Opens/closes a quoted literal span. Two in a row stand for one literal quote.
QUOTE: str = "'"

# Percent sign: multiplies by 100 and stays in the affix.
PERCENT: str = "%"

# Per-mille sign (U+2030): multiplies by 1000 and stays in the affix.
PER_MILLE: str = "‰"

# Exponent markers; the renderer always emits EXPONENT_SYMBOL.
EXPONENT_CHARS: frozenset[str] = frozenset("Ee")

# Characters that belong to the number part of a sub-pattern.
NUMBER_CHARS: frozenset[str] = frozenset(
    (ZERO_DIGIT, OPTIONAL_DIGIT, GROUPING_SEPARATOR, DECIMAL_SEPARATOR)
)

# ============================================================================
# OUTPUT SYMBOLS
# ============================================================================

# Prepended to the positive prefix when no negative sub-pattern is given.
MINUS_SIGN: str = "-"

# Separates mantissa and exponent in scientific notation.
EXPONENT_SYMBOL: str = "E"

# Rendered for infinite values (U+221E), optionally preceded by MINUS_SIGN.
INFINITY_SYMBOL: str = "∞"

# ============================================================================
# MULTIPLIERS
# ============================================================================

DEFAULT_MULTIPLIER: int = 1
PERCENT_MULTIPLIER: int = 100
PER_MILLE_MULTIPLIER: int = 1000

# ============================================================================
# DEFAULTS
# ============================================================================

# Pattern used when a formatter is constructed without one:
# grouping by thousands, at least one integer digit, up to 3 fraction digits.
DEFAULT_PATTERN: str = "#,##0.###"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached compiled patterns.
# Applications use a handful of patterns; 256 leaves ample headroom while
# bounding memory when patterns are built from user input.
MAX_PATTERN_CACHE_SIZE: int = 256
