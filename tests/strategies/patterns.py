"""Hypothesis strategies for pattern compilation and rendering tests.

Provides strategies for generating well-formed patterns together with the
rule values they must compile to, literal affixes, finite numeric inputs
and rounding modes.

Usage:
    from hypothesis import given
    from tests.strategies.patterns import plain_patterns

    @given(shape=plain_patterns())
    def test_counts(shape):
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from decimalpattern.enums import RoundingMode

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# AFFIXES
# ============================================================================

# Characters with no meaning in a pattern. Excludes digits placeholders,
# separators, quotes, exponent markers, and percent/per-mille.
AFFIX_ALPHABET = "$€£¥ abcdxyz()[]<>+-_/:"

affix_texts: SearchStrategy[str] = st.text(alphabet=AFFIX_ALPHABET, max_size=4)


# ============================================================================
# PATTERNS
# ============================================================================


@dataclass(frozen=True, slots=True)
class PatternShape:
    """A generated pattern and the rule values it must compile to."""

    pattern: str
    prefix: str
    suffix: str
    min_integer_digits: int
    max_integer_digits: int
    min_fraction_digits: int
    max_fraction_digits: int
    grouping_used: bool
    grouping_size: int
    decimal_separator_always_shown: bool


@composite
def plain_patterns(draw: st.DrawFn) -> PatternShape:
    """Generate a standard-notation pattern with known digit counts.

    Events emitted:
    - pattern_grouping={none|size_N}
    - pattern_fraction={none|always_shown|fixed|optional|mixed}
    - pattern_affixes={none|prefix|suffix|both}
    """
    int_hashes = draw(st.integers(min_value=0, max_value=4))
    int_zeros = draw(st.integers(min_value=1, max_value=3))
    frac_zeros = draw(st.integers(min_value=0, max_value=3))
    frac_hashes = draw(st.integers(min_value=0, max_value=3))
    prefix = draw(affix_texts)
    suffix = draw(affix_texts)

    integer = "#" * int_hashes + "0" * int_zeros
    grouping_size = 0
    if draw(st.booleans()):
        grouping_size = draw(st.integers(min_value=1, max_value=len(integer)))
        cut = len(integer) - grouping_size
        integer = integer[:cut] + "," + integer[cut:]
        event(f"pattern_grouping=size_{grouping_size}")
    else:
        event("pattern_grouping=none")

    fraction = "0" * frac_zeros + "#" * frac_hashes
    always_shown = False
    if fraction:
        point = "."
        if frac_zeros and frac_hashes:
            event("pattern_fraction=mixed")
        elif frac_zeros:
            event("pattern_fraction=fixed")
        else:
            event("pattern_fraction=optional")
    elif draw(st.booleans()):
        point = "."
        always_shown = True
        event("pattern_fraction=always_shown")
    else:
        point = ""
        event("pattern_fraction=none")

    match (bool(prefix), bool(suffix)):
        case (True, True):
            event("pattern_affixes=both")
        case (True, False):
            event("pattern_affixes=prefix")
        case (False, True):
            event("pattern_affixes=suffix")
        case _:
            event("pattern_affixes=none")

    return PatternShape(
        pattern=prefix + integer + point + fraction + suffix,
        prefix=prefix,
        suffix=suffix,
        min_integer_digits=int_zeros,
        max_integer_digits=int_zeros + int_hashes,
        min_fraction_digits=frac_zeros,
        max_fraction_digits=frac_zeros + frac_hashes,
        grouping_used=grouping_size > 0,
        grouping_size=grouping_size,
        decimal_separator_always_shown=always_shown,
    )


# ============================================================================
# VALUES
# ============================================================================

finite_values: SearchStrategy[float] = st.floats(
    min_value=-1e12, max_value=1e12, allow_nan=False, allow_infinity=False
)


@composite
def value_by_magnitude(draw: st.DrawFn) -> float:
    """Generate a finite float with event emission for its magnitude.

    Events emitted:
    - value_magnitude={zero|tiny|small|medium|large}
    """
    magnitude = draw(st.sampled_from(["zero", "tiny", "small", "medium", "large"]))

    match magnitude:
        case "zero":
            value = draw(st.sampled_from([0.0, -0.0]))
        case "tiny":
            value = draw(st.floats(min_value=-1e-3, max_value=1e-3, allow_nan=False))
        case "small":
            value = draw(st.floats(min_value=-10.0, max_value=10.0, allow_nan=False))
        case "medium":
            value = draw(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
        case _:  # large
            value = draw(st.floats(min_value=-1e15, max_value=1e15, allow_nan=False))

    event(f"value_magnitude={magnitude}")
    return value


# ============================================================================
# ROUNDING MODES
# ============================================================================

# Every mode that accepts inexact values.
lossy_rounding_modes: SearchStrategy[RoundingMode] = st.sampled_from(
    [mode for mode in RoundingMode if mode is not RoundingMode.UNNECESSARY]
)


@composite
def rounding_mode_with_event(draw: st.DrawFn) -> RoundingMode:
    """Generate a lossy rounding mode with event emission.

    Events emitted:
    - rounding_mode={up|down|ceiling|floor|half_up|half_down|half_even}
    """
    mode = draw(lossy_rounding_modes)
    event(f"rounding_mode={mode.value}")
    return mode
