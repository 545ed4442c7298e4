"""decimalpattern exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class DecimalFormatError(Exception):
    """Base exception for all decimalpattern errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DecimalFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MalformedPatternError(DecimalFormatError):
    """Pattern cannot be decomposed into a coherent rule set.

    Raised only for structural problems (a second decimal point, a grouping
    separator in the fraction, an exponent marker without exponent digits).
    Other unusual patterns are accepted leniently.

    Attributes:
        pattern: The full pattern string that failed to compile
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str = "") -> None:
        """Initialize MalformedPatternError.

        Args:
            message: Error message string OR Diagnostic object
            pattern: The full pattern string that failed to compile
        """
        super().__init__(message)
        self.pattern = pattern


class InvalidInputError(DecimalFormatError):
    """Value cannot be formatted.

    Examples:
    - NaN (float or the string "nan")
    - A string that does not parse as a number
    - A type other than int, float or str

    Infinities are not errors: they render as a signed infinity glyph.

    Attributes:
        input_value: repr() of the rejected value
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize InvalidInputError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: repr() of the rejected value
        """
        super().__init__(message)
        self.input_value = input_value


class RoundingRequiredError(DecimalFormatError):
    """RoundingMode.UNNECESSARY applied to a value that is inexact at the target scale.

    Attributes:
        value: The decimal value (as text) that needed rounding
        scale: Number of fraction digits the pattern keeps
    """

    def __init__(self, message: str | Diagnostic, *, value: str = "", scale: int = 0) -> None:
        """Initialize RoundingRequiredError.

        Args:
            message: Error message string OR Diagnostic object
            value: The decimal value (as text) that needed rounding
            scale: Number of fraction digits the pattern keeps
        """
        super().__init__(message)
        self.value = value
        self.scale = scale
