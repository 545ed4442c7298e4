"""Pattern compiler: pattern string to PatternRules.

Compilation runs in two steps:

    parse_pattern(pattern)    -> ParsedPattern   (cached, immutable)
    compile_pattern(pattern)  -> PatternRules    (fresh, mutable)

The parse step splits the pattern on its first unquoted ';', scans each
half and counts digit placeholders. Results are memoised in a bounded LRU
cache; because cached values are frozen, every formatter still receives its
own independently mutable rule set.

Python 3.13+. Zero external dependencies.
"""

import logging
from functools import lru_cache

from decimalpattern.constants import (
    DECIMAL_SEPARATOR,
    GROUPING_SEPARATOR,
    MAX_PATTERN_CACHE_SIZE,
    OPTIONAL_DIGIT,
    ZERO_DIGIT,
)
from decimalpattern.diagnostics import ErrorTemplate, MalformedPatternError

from .rules import ParsedPattern, PatternRules, SubPattern
from .scanner import ScanResult, find_pattern_separator, scan_subpattern

__all__ = [
    "clear_pattern_cache",
    "compile_pattern",
    "parse_pattern",
    "pattern_cache_info",
]

logger = logging.getLogger(__name__)


def _build_subpattern(scan: ScanResult, pattern: str) -> SubPattern:
    """Count digit placeholders in a scanned sub-pattern.

    Raises:
        MalformedPatternError: Second decimal separator, or grouping
            separator after the decimal separator
    """
    number = scan.number_text
    integer_text, point, fraction_text = number.partition(DECIMAL_SEPARATOR)
    fraction_start = scan.number_start + len(integer_text) + 1

    second_point = fraction_text.find(DECIMAL_SEPARATOR)
    if second_point >= 0:
        diagnostic = ErrorTemplate.multiple_decimal_separators(
            pattern, fraction_start + second_point
        )
        raise MalformedPatternError(diagnostic, pattern=pattern)

    misplaced_comma = fraction_text.find(GROUPING_SEPARATOR)
    if misplaced_comma >= 0:
        diagnostic = ErrorTemplate.grouping_in_fraction(pattern, fraction_start + misplaced_comma)
        raise MalformedPatternError(diagnostic, pattern=pattern)

    last_comma = integer_text.rfind(GROUPING_SEPARATOR)
    grouping_used = last_comma >= 0
    grouping_size = len(integer_text) - last_comma - 1 if grouping_used else 0

    min_integer = integer_text.count(ZERO_DIGIT)
    min_fraction = fraction_text.count(ZERO_DIGIT)

    return SubPattern(
        prefix=scan.prefix,
        suffix=scan.suffix,
        min_integer_digits=min_integer,
        max_integer_digits=min_integer + integer_text.count(OPTIONAL_DIGIT),
        min_fraction_digits=min_fraction,
        max_fraction_digits=min_fraction + fraction_text.count(OPTIONAL_DIGIT),
        grouping_used=grouping_used,
        grouping_size=grouping_size,
        decimal_separator_always_shown=bool(point) and not fraction_text,
        use_exponential_notation=scan.use_exponential_notation,
        min_exponent_digits=scan.min_exponent_digits,
        multiplier=scan.multiplier,
    )


@lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def parse_pattern(pattern: str) -> ParsedPattern:
    """Parse a pattern into its immutable positive and negative halves.

    An empty negative half ("0;") counts as absent.

    Args:
        pattern: Pattern string, e.g. "#,##0.00;(#,##0.00)"

    Returns:
        ParsedPattern; negative is None when the negative affixes are derived

    Raises:
        MalformedPatternError: If either half cannot be decomposed

    Thread-safe. Results cached per pattern string.
    """
    separator = find_pattern_separator(pattern)
    if separator < 0:
        positive_text, negative_text = pattern, ""
    else:
        positive_text, negative_text = pattern[:separator], pattern[separator + 1 :]

    positive = _build_subpattern(scan_subpattern(positive_text, pattern=pattern), pattern)
    negative = None
    if negative_text:
        negative_scan = scan_subpattern(negative_text, pattern=pattern, offset=separator + 1)
        negative = _build_subpattern(negative_scan, pattern)

    logger.debug(
        "Compiled pattern %r: integer=%d..%d fraction=%d..%d grouping=%s exponential=%s "
        "multiplier=%d explicit_negative=%s",
        pattern,
        positive.min_integer_digits,
        positive.max_integer_digits,
        positive.min_fraction_digits,
        positive.max_fraction_digits,
        positive.grouping_size if positive.grouping_used else None,
        positive.use_exponential_notation,
        positive.multiplier,
        negative is not None,
    )
    return ParsedPattern(positive=positive, negative=negative)


def compile_pattern(pattern: str) -> PatternRules:
    """Compile a pattern string into a fresh rule set.

    Args:
        pattern: Pattern string

    Returns:
        New PatternRules owned by the caller

    Raises:
        MalformedPatternError: If the pattern cannot be decomposed

    Examples:
        >>> rules = compile_pattern("#,##0.00;(#,##0.00)")
        >>> rules.max_fraction_digits, rules.negative_prefix, rules.negative_suffix
        (2, '(', ')')
        >>> compile_pattern("$0").negative_prefix
        '-$'
    """
    parsed = parse_pattern(pattern)
    if parsed.negative is None:
        return PatternRules.derived(parsed.positive)
    return PatternRules.explicit(parsed.positive, parsed.negative)


def clear_pattern_cache() -> None:
    """Clear the compiled-pattern cache.

    Thread-safe.
    """
    parse_pattern.cache_clear()


def pattern_cache_info() -> dict[str, int]:
    """Get compiled-pattern cache statistics.

    Returns:
        Dictionary with cache statistics:
        - hits: Lookups answered from the cache
        - misses: Lookups that parsed the pattern
        - size: Current number of cached patterns
        - max_size: Maximum cache size

    Example:
        >>> clear_pattern_cache()
        >>> _ = compile_pattern("0.00")
        >>> pattern_cache_info()
        {'hits': 0, 'misses': 1, 'size': 1, 'max_size': 256}

    Thread-safe.
    """
    info = parse_pattern.cache_info()
    return {
        "hits": info.hits,
        "misses": info.misses,
        "size": info.currsize,
        "max_size": MAX_PATTERN_CACHE_SIZE,
    }
