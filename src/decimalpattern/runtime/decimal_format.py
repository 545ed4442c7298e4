"""DecimalFormat: stateful number formatter.

A DecimalFormat owns three independent pieces of state:
    - the pattern text, returned verbatim by to_pattern()
    - the compiled PatternRules, replaced by apply_pattern() and
      adjusted field by field through the properties
    - the rounding mode, which apply_pattern() never resets

Instances are not locked. Callers sharing one formatter between threads
must serialize mutate-then-format sequences themselves.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import replace

from decimalpattern.constants import DEFAULT_PATTERN
from decimalpattern.enums import RoundingMode
from decimalpattern.syntax import PatternRules, compile_pattern

from .renderer import render_number
from .values import NumericInput, to_decimal

__all__ = ["DecimalFormat"]

logger = logging.getLogger(__name__)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


class DecimalFormat:
    """Formats numbers according to a DecimalFormat-style pattern.

    Pattern characters:
        0     digit, zero-padded
        #     digit, omitted when not significant
        ,     grouping separator (size = digits after the last one)
        .     decimal separator
        E     exponent marker, followed by one or more '0'
        %     multiply by 100 (kept in the affix)
        ‰     multiply by 1000 (kept in the affix)
        ;     separates the positive and negative sub-patterns
        '     quotes literal text; '' is a literal quote

    Without a negative sub-pattern, negative numbers get a minus sign in
    front of the whole positive prefix.

    Examples:
        >>> DecimalFormat().format(1234567.891)
        '1,234,567.891'
        >>> DecimalFormat("$#,##0.00;($#,##0.00)").format(-100)
        '($100.00)'
        >>> fmt = DecimalFormat("0.00E0")
        >>> fmt.format(0.00012)
        '1.20E-4'
        >>> fmt = DecimalFormat("#,##0.0", rounding_mode=RoundingMode.HALF_UP)
        >>> fmt.format(1.25)
        '1.3'
    """

    __slots__ = ("_pattern", "_rounding_mode", "_rules")

    # Type annotations for __slots__ attributes (mypy requirement)
    _pattern: str
    _rounding_mode: RoundingMode
    _rules: PatternRules

    def __init__(
        self,
        pattern: str | None = None,
        *,
        rounding_mode: RoundingMode | str = RoundingMode.HALF_EVEN,
    ) -> None:
        """Initialize DecimalFormat.

        Args:
            pattern: Pattern string (default: "#,##0.###")
            rounding_mode: RoundingMode or its string value (default: half_even)

        Raises:
            MalformedPatternError: If the pattern cannot be compiled
            ValueError: If rounding_mode is not a known mode
        """
        self._rounding_mode = RoundingMode(rounding_mode)
        text = DEFAULT_PATTERN if pattern is None else pattern
        self._rules = compile_pattern(text)
        self._pattern = text

    def format(self, value: NumericInput) -> str:
        """Format a number.

        Args:
            value: int, float, or numeric string

        Returns:
            Formatted string

        Raises:
            InvalidInputError: NaN, unparseable string, or unsupported type
            RoundingRequiredError: UNNECESSARY mode on an inexact value
        """
        return render_number(to_decimal(value), self._rules, self._rounding_mode)

    def apply_pattern(self, pattern: str) -> None:
        """Replace all rules with those of a new pattern.

        Field changes made through the properties are discarded. The
        rounding mode is kept.

        Raises:
            MalformedPatternError: If the pattern cannot be compiled; the
                formatter is left unchanged
        """
        rules = compile_pattern(pattern)
        self._rules = rules
        self._pattern = pattern
        logger.debug(
            "Applied pattern %r (rounding mode %s)", pattern, self._rounding_mode
        )

    def to_pattern(self) -> str:
        """Return the last pattern supplied, verbatim."""
        return self._pattern

    def copy(self) -> "DecimalFormat":
        """Return an independent formatter with the same state.

        Property changes made to this formatter are carried over.
        """
        clone = DecimalFormat.__new__(DecimalFormat)
        clone._pattern = self._pattern
        clone._rounding_mode = self._rounding_mode
        clone._rules = replace(self._rules)
        return clone

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> DecimalFormat("0.00")
            DecimalFormat('0.00', rounding_mode='half_even')
        """
        return f"DecimalFormat({self._pattern!r}, rounding_mode={self._rounding_mode.value!r})"

    # ------------------------------------------------------------------
    # Rounding mode
    # ------------------------------------------------------------------

    @property
    def rounding_mode(self) -> RoundingMode:
        """Rounding mode applied when digits are dropped."""
        return self._rounding_mode

    @rounding_mode.setter
    def rounding_mode(self, mode: RoundingMode | str) -> None:
        self._rounding_mode = RoundingMode(mode)

    # ------------------------------------------------------------------
    # Affixes
    # ------------------------------------------------------------------

    @property
    def positive_prefix(self) -> str:
        return self._rules.positive_prefix

    @positive_prefix.setter
    def positive_prefix(self, value: str) -> None:
        self._rules.positive_prefix = value

    @property
    def positive_suffix(self) -> str:
        return self._rules.positive_suffix

    @positive_suffix.setter
    def positive_suffix(self, value: str) -> None:
        self._rules.positive_suffix = value

    @property
    def negative_prefix(self) -> str:
        return self._rules.negative_prefix

    @negative_prefix.setter
    def negative_prefix(self, value: str) -> None:
        self._rules.negative_prefix = value

    @property
    def negative_suffix(self) -> str:
        return self._rules.negative_suffix

    @negative_suffix.setter
    def negative_suffix(self, value: str) -> None:
        self._rules.negative_suffix = value

    # ------------------------------------------------------------------
    # Digit counts
    # ------------------------------------------------------------------
    # Setting one bound past the other moves the other bound along with it.

    @property
    def min_integer_digits(self) -> int:
        return self._rules.min_integer_digits

    @min_integer_digits.setter
    def min_integer_digits(self, value: int) -> None:
        _check_non_negative("min_integer_digits", value)
        self._rules.min_integer_digits = value
        self._rules.max_integer_digits = max(self._rules.max_integer_digits, value)

    @property
    def max_integer_digits(self) -> int:
        """Upper bound on integer digits; stored but never truncates output."""
        return self._rules.max_integer_digits

    @max_integer_digits.setter
    def max_integer_digits(self, value: int) -> None:
        _check_non_negative("max_integer_digits", value)
        self._rules.max_integer_digits = value
        self._rules.min_integer_digits = min(self._rules.min_integer_digits, value)

    @property
    def min_fraction_digits(self) -> int:
        return self._rules.min_fraction_digits

    @min_fraction_digits.setter
    def min_fraction_digits(self, value: int) -> None:
        _check_non_negative("min_fraction_digits", value)
        self._rules.min_fraction_digits = value
        self._rules.max_fraction_digits = max(self._rules.max_fraction_digits, value)

    @property
    def max_fraction_digits(self) -> int:
        """Number of fraction digits rounding keeps."""
        return self._rules.max_fraction_digits

    @max_fraction_digits.setter
    def max_fraction_digits(self, value: int) -> None:
        _check_non_negative("max_fraction_digits", value)
        self._rules.max_fraction_digits = value
        self._rules.min_fraction_digits = min(self._rules.min_fraction_digits, value)

    # ------------------------------------------------------------------
    # Grouping and separators
    # ------------------------------------------------------------------

    @property
    def grouping_used(self) -> bool:
        return self._rules.grouping_used

    @grouping_used.setter
    def grouping_used(self, value: bool) -> None:
        self._rules.grouping_used = value

    @property
    def grouping_size(self) -> int:
        """Digits per group; 0 disables grouping even when grouping_used."""
        return self._rules.grouping_size

    @grouping_size.setter
    def grouping_size(self, value: int) -> None:
        _check_non_negative("grouping_size", value)
        self._rules.grouping_size = value

    @property
    def decimal_separator_always_shown(self) -> bool:
        return self._rules.decimal_separator_always_shown

    @decimal_separator_always_shown.setter
    def decimal_separator_always_shown(self, value: bool) -> None:
        self._rules.decimal_separator_always_shown = value

    # ------------------------------------------------------------------
    # Exponent and multiplier
    # ------------------------------------------------------------------

    @property
    def use_exponential_notation(self) -> bool:
        return self._rules.use_exponential_notation

    @use_exponential_notation.setter
    def use_exponential_notation(self, value: bool) -> None:
        self._rules.use_exponential_notation = value

    @property
    def min_exponent_digits(self) -> int:
        return self._rules.min_exponent_digits

    @min_exponent_digits.setter
    def min_exponent_digits(self, value: int) -> None:
        _check_non_negative("min_exponent_digits", value)
        self._rules.min_exponent_digits = value

    @property
    def multiplier(self) -> int:
        """Scale factor applied before rendering (100 for percent, 1000 for per-mille)."""
        return self._rules.multiplier

    @multiplier.setter
    def multiplier(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"multiplier must be an integer, got {value!r}"
            raise ValueError(msg)
        if value <= 0:
            msg = f"multiplier must be positive, got {value}"
            raise ValueError(msg)
        self._rules.multiplier = value
