"""Compiled pattern rule types.

SubPattern is the immutable result of compiling one half of a pattern.
PatternRules is the mutable rule set a formatter owns; it is built from
sub-patterns by one of two constructors:

    PatternRules.derived(positive)            pattern has no ';' part
    PatternRules.explicit(positive, negative) pattern has a negative sub-pattern

Only the affixes differ between the two. Digit counts, grouping, exponent
and multiplier always come from the positive sub-pattern.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from decimalpattern.constants import DEFAULT_MULTIPLIER, MINUS_SIGN

__all__ = ["ParsedPattern", "PatternRules", "SubPattern"]


@dataclass(frozen=True, slots=True)
class SubPattern:
    """One compiled sub-pattern (text on one side of an unquoted ';').

    Immutable so compiled results can be cached and shared between
    formatters.

    Attributes:
        prefix: Literal text before the number
        suffix: Literal text after the number (and exponent)
        min_integer_digits: Count of '0' in the integer part
        max_integer_digits: Count of '0' and '#' in the integer part
        min_fraction_digits: Count of '0' in the fraction part
        max_fraction_digits: Count of '0' and '#' in the fraction part
        grouping_used: Integer part contains ','
        grouping_size: Characters after the last ',' in the integer part
        decimal_separator_always_shown: '.' present with nothing after it
        use_exponential_notation: Number part followed by 'E'/'e'
        min_exponent_digits: Count of '0' after the exponent marker
        multiplier: 100 for '%', 1000 for per-mille, else 1
    """

    prefix: str = ""
    suffix: str = ""
    min_integer_digits: int = 0
    max_integer_digits: int = 0
    min_fraction_digits: int = 0
    max_fraction_digits: int = 0
    grouping_used: bool = False
    grouping_size: int = 0
    decimal_separator_always_shown: bool = False
    use_exponential_notation: bool = False
    min_exponent_digits: int = 0
    multiplier: int = DEFAULT_MULTIPLIER


@dataclass(frozen=True, slots=True)
class ParsedPattern:
    """Both halves of a parsed pattern.

    Attributes:
        positive: Compiled positive sub-pattern
        negative: Compiled explicit negative sub-pattern, or None when the
            negative affixes are derived from the positive ones
    """

    positive: SubPattern
    negative: SubPattern | None = None


@dataclass(slots=True)
class PatternRules:
    """Mutable rule set owned by a single formatter.

    Replaced wholesale when a pattern is re-applied; individual fields are
    changed through the formatter's property setters.

    Examples:
        >>> rules = PatternRules.derived(SubPattern(prefix="$", min_integer_digits=1))
        >>> rules.negative_prefix
        '-$'
        >>> rules.affixes(negative=True)
        ('-$', '')
    """

    positive_prefix: str
    positive_suffix: str
    negative_prefix: str
    negative_suffix: str
    min_integer_digits: int
    max_integer_digits: int
    min_fraction_digits: int
    max_fraction_digits: int
    grouping_used: bool
    grouping_size: int
    decimal_separator_always_shown: bool
    use_exponential_notation: bool
    min_exponent_digits: int
    multiplier: int

    @classmethod
    def derived(cls, positive: SubPattern) -> "PatternRules":
        """Build rules for a pattern without a negative sub-pattern.

        The negative prefix is the minus sign followed by the whole positive
        prefix, so "$#,##0" formats -5 as "-$5", never "$-5".

        Args:
            positive: Compiled positive sub-pattern

        Returns:
            New PatternRules
        """
        return cls._from_subpattern(
            positive,
            negative_prefix=MINUS_SIGN + positive.prefix,
            negative_suffix=positive.suffix,
        )

    @classmethod
    def explicit(cls, positive: SubPattern, negative: SubPattern) -> "PatternRules":
        """Build rules for a pattern with an explicit negative sub-pattern.

        Only the negative sub-pattern's affixes are used; its digit part
        merely marks where the number goes.

        Args:
            positive: Compiled positive sub-pattern
            negative: Compiled negative sub-pattern

        Returns:
            New PatternRules
        """
        return cls._from_subpattern(
            positive,
            negative_prefix=negative.prefix,
            negative_suffix=negative.suffix,
        )

    @classmethod
    def _from_subpattern(
        cls,
        positive: SubPattern,
        *,
        negative_prefix: str,
        negative_suffix: str,
    ) -> "PatternRules":
        return cls(
            positive_prefix=positive.prefix,
            positive_suffix=positive.suffix,
            negative_prefix=negative_prefix,
            negative_suffix=negative_suffix,
            min_integer_digits=positive.min_integer_digits,
            max_integer_digits=positive.max_integer_digits,
            min_fraction_digits=positive.min_fraction_digits,
            max_fraction_digits=positive.max_fraction_digits,
            grouping_used=positive.grouping_used,
            grouping_size=positive.grouping_size,
            decimal_separator_always_shown=positive.decimal_separator_always_shown,
            use_exponential_notation=positive.use_exponential_notation,
            min_exponent_digits=positive.min_exponent_digits,
            multiplier=positive.multiplier,
        )

    def affixes(self, *, negative: bool) -> tuple[str, str]:
        """Select the (prefix, suffix) pair for a sign.

        Args:
            negative: True for the negative branch

        Returns:
            Tuple of (prefix, suffix)
        """
        if negative:
            return self.negative_prefix, self.negative_suffix
        return self.positive_prefix, self.positive_suffix
