"""Character scanner for number sub-patterns.

A sub-pattern is read left to right by a four-state machine:

    PREFIX --(0 # , .)--> NUMBER --(E e)--> EXPONENT --(non-0)--> SUFFIX
                            \\--------------(other)---------------^

Transitions are computed by next_state(), a pure function of the current
state and one unquoted character. Characters that do not move the machine
forward are appended to the prefix (PREFIX) or suffix (SUFFIX).

Quoting:
    A single quote toggles a quoted span. Quoted characters are copied
    verbatim into the current affix and never change state, set the
    multiplier, or count as digits. Two consecutive quotes produce one
    literal quote, inside or outside a span. An opening quote in the
    NUMBER or EXPONENT state ends the number part, like any other
    non-number character.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum

from decimalpattern.constants import (
    DEFAULT_MULTIPLIER,
    EXPONENT_CHARS,
    NUMBER_CHARS,
    PATTERN_SEPARATOR,
    PER_MILLE,
    PER_MILLE_MULTIPLIER,
    PERCENT,
    PERCENT_MULTIPLIER,
    QUOTE,
    ZERO_DIGIT,
)
from decimalpattern.diagnostics import ErrorTemplate, MalformedPatternError

__all__ = ["ScanResult", "ScanState", "find_pattern_separator", "next_state", "scan_subpattern"]

logger = logging.getLogger(__name__)


class ScanState(StrEnum):
    """Region of the sub-pattern the scanner is in.

    StrEnum provides automatic string conversion: str(ScanState.PREFIX) == "prefix"
    """

    PREFIX = "prefix"
    """Literal text before the first number character."""

    NUMBER = "number"
    """Digit placeholders, grouping and decimal separators."""

    EXPONENT = "exponent"
    """Exponent marker and its '0' digits."""

    SUFFIX = "suffix"
    """Literal text after the number (and exponent)."""


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Raw regions of one scanned sub-pattern.

    Attributes:
        prefix: Prefix text with quotes resolved
        suffix: Suffix text with quotes resolved
        number_text: Contiguous run of '0', '#', ',' and '.' characters
        number_start: Offset of number_text in the full pattern
        use_exponential_notation: An exponent marker followed the number part
        min_exponent_digits: Count of '0' after the exponent marker
        multiplier: Set by '%' or per-mille in either affix
    """

    prefix: str
    suffix: str
    number_text: str
    number_start: int
    use_exponential_notation: bool
    min_exponent_digits: int
    multiplier: int


def find_pattern_separator(pattern: str) -> int:
    """Find the first ';' outside quoted spans.

    Args:
        pattern: Full pattern string

    Returns:
        Index of the separator, or -1 if the pattern has no negative sub-pattern

    Examples:
        >>> find_pattern_separator("#,##0;(#,##0)")
        5
        >>> find_pattern_separator("'a;b'0")
        -1
    """
    in_quote = False
    for index, char in enumerate(pattern):
        if char == QUOTE:
            in_quote = not in_quote
        elif char == PATTERN_SEPARATOR and not in_quote:
            return index
    return -1


def next_state(state: ScanState, char: str) -> ScanState:
    """Transition function of the sub-pattern scanner.

    Args:
        state: Current scanner state
        char: Next unquoted character (a quote counts as an ordinary character)

    Returns:
        State after consuming char
    """
    match state:
        case ScanState.PREFIX:
            return ScanState.NUMBER if char in NUMBER_CHARS else ScanState.PREFIX
        case ScanState.NUMBER:
            if char in NUMBER_CHARS:
                return ScanState.NUMBER
            if char in EXPONENT_CHARS:
                return ScanState.EXPONENT
            return ScanState.SUFFIX
        case ScanState.EXPONENT:
            return ScanState.EXPONENT if char == ZERO_DIGIT else ScanState.SUFFIX
        case ScanState.SUFFIX:
            return ScanState.SUFFIX


def scan_subpattern(text: str, *, pattern: str, offset: int = 0) -> ScanResult:
    """Split one sub-pattern into prefix, number part, exponent and suffix.

    Args:
        text: Sub-pattern text
        pattern: Full pattern string (for error reporting)
        offset: Position of text inside pattern

    Returns:
        ScanResult with the raw regions

    Raises:
        MalformedPatternError: If an exponent marker has no '0' after it
    """
    state = ScanState.PREFIX
    prefix: list[str] = []
    suffix: list[str] = []
    number: list[str] = []
    number_start = offset
    exponential = False
    exponent_digits = 0
    multiplier = DEFAULT_MULTIPLIER
    in_quote = False

    index = 0
    while index < len(text):
        char = text[index]
        affix = prefix if state is ScanState.PREFIX else suffix

        if in_quote and char != QUOTE:
            affix.append(char)
            index += 1
            continue

        if not in_quote:
            new_state = next_state(state, char)
            if state is ScanState.EXPONENT and new_state is ScanState.SUFFIX and not exponent_digits:
                diagnostic = ErrorTemplate.exponent_without_digits(pattern, offset + index)
                raise MalformedPatternError(diagnostic, pattern=pattern)
            if state is ScanState.PREFIX and new_state is ScanState.NUMBER:
                number_start = offset + index
            elif new_state is ScanState.EXPONENT and state is ScanState.NUMBER:
                exponential = True
            state = new_state
            affix = prefix if state is ScanState.PREFIX else suffix

        if char == QUOTE:
            if text[index + 1 : index + 2] == QUOTE:
                affix.append(QUOTE)
                index += 2
                continue
            in_quote = not in_quote
            index += 1
            continue

        match state:
            case ScanState.NUMBER:
                number.append(char)
            case ScanState.EXPONENT:
                if char == ZERO_DIGIT:
                    exponent_digits += 1
            case ScanState.PREFIX | ScanState.SUFFIX:
                if char == PERCENT:
                    multiplier = PERCENT_MULTIPLIER
                elif char == PER_MILLE:
                    multiplier = PER_MILLE_MULTIPLIER
                affix.append(char)
        index += 1

    if state is ScanState.EXPONENT and not exponent_digits:
        diagnostic = ErrorTemplate.exponent_without_digits(pattern, offset + len(text))
        raise MalformedPatternError(diagnostic, pattern=pattern)

    if in_quote:
        logger.warning(
            "Unterminated quote in pattern %r; remaining text treated as literal", pattern
        )

    return ScanResult(
        prefix="".join(prefix),
        suffix="".join(suffix),
        number_text="".join(number),
        number_start=number_start,
        use_exponential_notation=exponential,
        min_exponent_digits=exponent_digits,
        multiplier=multiplier,
    )
