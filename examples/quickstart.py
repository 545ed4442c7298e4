"""Quickstart example for decimalpattern.

This example demonstrates formatting numbers with patterns, rounding modes,
per-field adjustments and error handling.
"""

from decimalpattern import (
    DecimalFormat,
    DecimalFormatError,
    MalformedPatternError,
    RoundingMode,
    format_number,
)
from decimalpattern.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Default pattern
print("=" * 50)
print("Example 1: Default Pattern")
print("=" * 50)

fmt = DecimalFormat()
print(fmt.to_pattern())
# Output: #,##0.###
print(fmt.format(1234567.891))
# Output: 1,234,567.891
print(fmt.format(-0.5))
# Output: -0.5

# Example 2: Currency-style patterns
print("\n" + "=" * 50)
print("Example 2: Currency Patterns")
print("=" * 50)

print(format_number(-1234.5, "$#,##0.00"))
# Output: -$1,234.50
print(format_number(-1234.5, "$#,##0.00;($#,##0.00)"))
# Output: ($1,234.50)

# Example 3: Percent, per-mille and scientific notation
print("\n" + "=" * 50)
print("Example 3: Scaling and Exponents")
print("=" * 50)

print(format_number(0.1234, "#,##0.00%"))
# Output: 12.34%
print(format_number(0.45, "#,##0‰"))
# Output: 450‰
print(format_number(0.00012, "0.00E0"))
# Output: 1.20E-4

# Example 4: Rounding modes
print("\n" + "=" * 50)
print("Example 4: Rounding Modes")
print("=" * 50)

for mode in RoundingMode:
    if mode is RoundingMode.UNNECESSARY:
        continue
    fmt = DecimalFormat("0.0", rounding_mode=mode)
    print(f"{mode.value:>10}: {fmt.format(1.25):>5} {fmt.format(-1.25):>5}")
# Output (first line):         up:   1.3  -1.3

# Example 5: Adjusting rules without re-parsing
print("\n" + "=" * 50)
print("Example 5: Accessors")
print("=" * 50)

fmt = DecimalFormat("#,##0")
fmt.min_fraction_digits = 2
fmt.negative_prefix = "("
fmt.negative_suffix = ")"
print(fmt.format(-9876.5))
# Output: (9,876.50)

# Rounding mode survives apply_pattern()
fmt.rounding_mode = RoundingMode.HALF_UP
fmt.apply_pattern("0.00")
print(fmt.format(1.245))
# Output: 1.25

# Example 6: Errors and diagnostics
print("\n" + "=" * 50)
print("Example 6: Errors")
print("=" * 50)

try:
    DecimalFormat("0.0,0")
except MalformedPatternError as e:
    print(e)
    # Output:
    # error[PATTERN_GROUPING_IN_FRACTION]: Grouping separator in fraction part of pattern '0.0,0'
    #   --> column 4
    #   = help: Grouping applies to integer digits only; move ',' before the '.'
    if e.diagnostic is not None:
        print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))

try:
    format_number(1.005, "0.00", rounding_mode="unnecessary")
except DecimalFormatError as e:
    print(type(e).__name__)
    # Output: RoundingRequiredError

print(format_number(float("inf"), "$#,##0.00"))
# Output: ∞
