"""Hypothesis strategies for decimalpattern property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- patterns: pattern strings, affixes, finite values and rounding modes

Usage:
    from tests.strategies import plain_patterns, finite_values
    from tests.strategies.patterns import affix_texts, value_by_magnitude

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - plain_patterns, value_by_magnitude, rounding_mode_with_event
"""

from .patterns import (
    AFFIX_ALPHABET,
    PatternShape,
    affix_texts,
    finite_values,
    lossy_rounding_modes,
    plain_patterns,
    rounding_mode_with_event,
    value_by_magnitude,
)

__all__ = [
    "AFFIX_ALPHABET",
    "PatternShape",
    "affix_texts",
    "finite_values",
    "lossy_rounding_modes",
    "plain_patterns",
    "rounding_mode_with_event",
    "value_by_magnitude",
]
