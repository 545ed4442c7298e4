"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def multiple_decimal_separators(pattern: str, position: int) -> Diagnostic:
        """A number part contains more than one decimal separator.

        Args:
            pattern: The full pattern string
            position: Offset of the second decimal separator

        Returns:
            Diagnostic for PATTERN_MULTIPLE_DECIMAL_SEPARATORS
        """
        msg = f"Multiple decimal separators in pattern '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_MULTIPLE_DECIMAL_SEPARATORS,
            message=msg,
            span=SourceSpan(start=position, end=position + 1),
            hint="A number pattern may contain at most one '.'; quote it to use it as text",
        )

    @staticmethod
    def grouping_in_fraction(pattern: str, position: int) -> Diagnostic:
        """A grouping separator appears after the decimal separator.

        Args:
            pattern: The full pattern string
            position: Offset of the misplaced grouping separator

        Returns:
            Diagnostic for PATTERN_GROUPING_IN_FRACTION
        """
        msg = f"Grouping separator in fraction part of pattern '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_GROUPING_IN_FRACTION,
            message=msg,
            span=SourceSpan(start=position, end=position + 1),
            hint="Grouping applies to integer digits only; move ',' before the '.'",
        )

    @staticmethod
    def exponent_without_digits(pattern: str, position: int) -> Diagnostic:
        """An exponent marker is not followed by any exponent digit.

        Args:
            pattern: The full pattern string
            position: Offset of the character following the exponent marker

        Returns:
            Diagnostic for PATTERN_EXPONENT_WITHOUT_DIGITS
        """
        msg = f"Malformed exponential pattern '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_EXPONENT_WITHOUT_DIGITS,
            message=msg,
            span=SourceSpan(start=position, end=position),
            hint="Follow 'E' with at least one '0', e.g. '0.00E0'",
        )

    @staticmethod
    def not_a_number(value: object) -> Diagnostic:
        """Value is NaN.

        Args:
            value: The rejected value (float NaN or a string spelling it)

        Returns:
            Diagnostic for INPUT_NOT_A_NUMBER
        """
        return Diagnostic(
            code=DiagnosticCode.INPUT_NOT_A_NUMBER,
            message="Cannot format NaN",
            hint="Filter NaN values before formatting; infinities are supported",
            input_value=repr(value),
        )

    @staticmethod
    def unparseable_number(value: str) -> Diagnostic:
        """String does not parse as a number.

        Args:
            value: The rejected string

        Returns:
            Diagnostic for INPUT_UNPARSEABLE
        """
        msg = f"Cannot parse {value!r} as a number"
        return Diagnostic(
            code=DiagnosticCode.INPUT_UNPARSEABLE,
            message=msg,
            hint="Numeric strings must use Python float syntax, e.g. '-1234.5' or '1e-3'",
            input_value=repr(value),
        )

    @staticmethod
    def unsupported_input_type(value: object) -> Diagnostic:
        """Value has a type the formatter does not accept.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for INPUT_UNSUPPORTED_TYPE
        """
        type_name = type(value).__name__
        msg = f"Cannot format value of type '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.INPUT_UNSUPPORTED_TYPE,
            message=msg,
            hint="Pass an int, a float, or a numeric string",
            input_value=repr(value),
        )

    @staticmethod
    def rounding_necessary(value: str, scale: int) -> Diagnostic:
        """UNNECESSARY rounding requested for an inexact value.

        Args:
            value: The decimal value as text
            scale: Number of fraction digits the pattern keeps

        Returns:
            Diagnostic for ROUNDING_NECESSARY
        """
        msg = f"Rounding necessary: {value} has more than {scale} fraction digit(s)"
        return Diagnostic(
            code=DiagnosticCode.ROUNDING_NECESSARY,
            message=msg,
            hint="Choose a rounding mode other than UNNECESSARY or widen the fraction digits",
            input_value=value,
        )
