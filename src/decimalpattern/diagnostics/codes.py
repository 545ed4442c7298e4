"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (malformed pattern structure)
        2000-2999: Input errors (values that cannot be formatted)
        3000-3999: Rounding errors (exactness requirements)
    """

    # Pattern errors (1000-1999)
    PATTERN_MULTIPLE_DECIMAL_SEPARATORS = 1001
    PATTERN_GROUPING_IN_FRACTION = 1002
    PATTERN_EXPONENT_WITHOUT_DIGITS = 1003

    # Input errors (2000-2999)
    INPUT_NOT_A_NUMBER = 2001
    INPUT_UNPARSEABLE = 2002
    INPUT_UNSUPPORTED_TYPE = 2003

    # Rounding errors (3000-3999)
    ROUNDING_NECESSARY = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a pattern string for error reporting.

    Patterns are single-line, so a span is a pair of character offsets.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the span start."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the pattern (None for value and rounding errors)
        hint: Suggestion for fixing the error
        input_value: Offending input, rendered with repr() (value errors)
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    input_value: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[PATTERN_MULTIPLE_DECIMAL_SEPARATORS]: Multiple decimal separators in pattern '0.0.0'
              --> column 4
              = help: A number pattern may contain at most one '.'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
