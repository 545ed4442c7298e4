"""Tests for pattern compilation and the compiled-pattern cache.

Python 3.13+.
"""

import logging

import pytest
from hypothesis import given

from decimalpattern.diagnostics import DiagnosticCode, MalformedPatternError, SourceSpan
from decimalpattern.syntax import (
    PatternRules,
    clear_pattern_cache,
    compile_pattern,
    parse_pattern,
    pattern_cache_info,
)
from tests.strategies import PatternShape, plain_patterns


class TestDigitCounts:
    """Digit placeholders map to min/max counts."""

    def test_default_pattern(self) -> None:
        rules = compile_pattern("#,##0.###")
        assert rules.min_integer_digits == 1
        assert rules.max_integer_digits == 4
        assert rules.min_fraction_digits == 0
        assert rules.max_fraction_digits == 3
        assert rules.grouping_used
        assert rules.grouping_size == 3
        assert not rules.decimal_separator_always_shown
        assert not rules.use_exponential_notation
        assert rules.multiplier == 1

    def test_fixed_digits(self) -> None:
        rules = compile_pattern("00.00")
        assert (rules.min_integer_digits, rules.max_integer_digits) == (2, 2)
        assert (rules.min_fraction_digits, rules.max_fraction_digits) == (2, 2)
        assert not rules.grouping_used

    def test_hash_before_zero_in_fraction(self) -> None:
        """Fraction counts depend on the characters, not their order."""
        rules = compile_pattern("0.#0")
        assert rules.min_fraction_digits == 1
        assert rules.max_fraction_digits == 2

    def test_all_optional_integer(self) -> None:
        rules = compile_pattern("###.##")
        assert rules.min_integer_digits == 0
        assert rules.max_integer_digits == 3

    def test_trailing_point_always_shown(self) -> None:
        rules = compile_pattern("#,##0.")
        assert rules.decimal_separator_always_shown
        assert rules.max_fraction_digits == 0

    @pytest.mark.parametrize("pattern", ["", "abc", "'0'"])
    def test_degenerate_pattern_all_zero(self, pattern: str) -> None:
        """No digit characters gives all-zero counts."""
        rules = compile_pattern(pattern)
        assert rules.min_integer_digits == 0
        assert rules.max_integer_digits == 0
        assert rules.min_fraction_digits == 0
        assert rules.max_fraction_digits == 0
        assert not rules.grouping_used

    @given(shape=plain_patterns())
    def test_generated_patterns(self, shape: PatternShape) -> None:
        """Generated patterns compile to the counts they were built from."""
        rules = compile_pattern(shape.pattern)
        assert rules.positive_prefix == shape.prefix
        assert rules.positive_suffix == shape.suffix
        assert rules.min_integer_digits == shape.min_integer_digits
        assert rules.max_integer_digits == shape.max_integer_digits
        assert rules.min_fraction_digits == shape.min_fraction_digits
        assert rules.max_fraction_digits == shape.max_fraction_digits
        assert rules.grouping_used == shape.grouping_used
        assert rules.grouping_size == shape.grouping_size
        assert rules.decimal_separator_always_shown == shape.decimal_separator_always_shown


class TestGrouping:
    """Grouping size comes from the last comma."""

    @pytest.mark.parametrize(
        ("pattern", "size"),
        [("#,##0", 3), ("#,####0", 5), ("#,##,##0", 3), ("#,#", 1), ("0,", 0)],
    )
    def test_grouping_size(self, pattern: str, size: int) -> None:
        rules = compile_pattern(pattern)
        assert rules.grouping_used
        assert rules.grouping_size == size

    def test_grouping_size_ignores_fraction(self) -> None:
        assert compile_pattern("#,##0.00").grouping_size == 3


class TestExponent:
    def test_exponential_pattern(self) -> None:
        rules = compile_pattern("0.00E00")
        assert rules.use_exponential_notation
        assert rules.min_exponent_digits == 2
        assert rules.min_integer_digits == 1
        assert rules.max_fraction_digits == 2


class TestMultiplier:
    @pytest.mark.parametrize(
        ("pattern", "multiplier"),
        [("#,##0.00%", 100), ("#,##0‰", 1000), ("%#", 100), ("0", 1)],
    )
    def test_multiplier(self, pattern: str, multiplier: int) -> None:
        assert compile_pattern(pattern).multiplier == multiplier

    def test_multiplier_from_positive_subpattern_only(self) -> None:
        assert compile_pattern("0;0%").multiplier == 1


class TestNegativeSubpattern:
    """Derived vs explicit negative affixes."""

    def test_derived_affixes(self) -> None:
        rules = compile_pattern("$#,##0.00 USD")
        assert rules.negative_prefix == "-$"
        assert rules.negative_suffix == " USD"

    def test_explicit_affixes(self) -> None:
        rules = compile_pattern("$#,##0.00;($#,##0.00)")
        assert rules.positive_prefix == "$"
        assert rules.negative_prefix == "($"
        assert rules.negative_suffix == ")"

    def test_explicit_digits_ignored(self) -> None:
        """Digit counts always come from the positive sub-pattern."""
        rules = compile_pattern("0.00;(#,##0.0000)")
        assert rules.max_fraction_digits == 2
        assert not rules.grouping_used

    def test_empty_negative_is_derived(self) -> None:
        rules = compile_pattern("0;")
        assert rules.negative_prefix == "-"
        assert rules.negative_suffix == ""

    def test_quoted_semicolon_is_not_separator(self) -> None:
        rules = compile_pattern("0' ; '")
        assert rules.positive_suffix == " ; "
        assert rules.negative_prefix == "-"
        assert rules.negative_suffix == " ; "


class TestMalformed:
    """Only structurally broken patterns are rejected."""

    def test_multiple_decimal_separators(self) -> None:
        with pytest.raises(MalformedPatternError) as exc_info:
            compile_pattern("0.0.0")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.PATTERN_MULTIPLE_DECIMAL_SEPARATORS
        assert diagnostic.span == SourceSpan(start=3, end=4)

    def test_grouping_in_fraction(self) -> None:
        with pytest.raises(MalformedPatternError) as exc_info:
            compile_pattern("0.0,0")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.PATTERN_GROUPING_IN_FRACTION
        assert diagnostic.span == SourceSpan(start=3, end=4)

    @pytest.mark.parametrize("pattern", ["0.0E", "0.00E+0", "0E#"])
    def test_exponent_without_digits(self, pattern: str) -> None:
        with pytest.raises(MalformedPatternError) as exc_info:
            compile_pattern(pattern)
        assert exc_info.value.pattern == pattern
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.PATTERN_EXPONENT_WITHOUT_DIGITS

    def test_error_in_negative_subpattern_points_into_full_pattern(self) -> None:
        with pytest.raises(MalformedPatternError) as exc_info:
            compile_pattern("$0;(0.0.0)")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.span == SourceSpan(start=7, end=8)

    @pytest.mark.parametrize("pattern", ["#0#", "0#,", ",", ".", "0 0", "'unterminated 0"])
    def test_lenient_patterns_accepted(self, pattern: str) -> None:
        assert isinstance(compile_pattern(pattern), PatternRules)


@pytest.mark.usefixtures("fresh_pattern_cache")
class TestPatternCache:
    """Compiled-pattern cache behavior."""

    def test_parse_result_cached(self) -> None:
        first = parse_pattern("#,##0.00")
        second = parse_pattern("#,##0.00")
        assert first is second
        info = pattern_cache_info()
        assert info["hits"] == 1
        assert info["misses"] == 1
        assert info["size"] == 1
        assert info["max_size"] == 256

    def test_compile_returns_fresh_rules(self) -> None:
        """Each compile gets its own mutable rule set."""
        first = compile_pattern("#,##0.00")
        second = compile_pattern("#,##0.00")
        assert first == second
        assert first is not second
        first.max_fraction_digits = 5
        first.negative_prefix = "neg "
        assert second.max_fraction_digits == 2
        assert compile_pattern("#,##0.00").negative_prefix == "-"

    def test_clear(self) -> None:
        parse_pattern("0")
        clear_pattern_cache()
        assert pattern_cache_info()["size"] == 0

    def test_malformed_not_cached(self) -> None:
        with pytest.raises(MalformedPatternError):
            compile_pattern("0.0.0")
        assert pattern_cache_info()["size"] == 0

    def test_debug_log_on_miss(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="decimalpattern.syntax.compiler"):
            compile_pattern("0.00")
            compile_pattern("0.00")
        messages = [r.getMessage() for r in caplog.records]
        messages = [m for m in messages if "Compiled pattern" in m]
        assert len(messages) == 1
        assert "'0.00'" in messages[0]
