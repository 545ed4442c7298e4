"""Pattern syntax package.

Scans and compiles number patterns into formatting rules.
Depends only on constants and diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .compiler import clear_pattern_cache, compile_pattern, parse_pattern, pattern_cache_info
from .rules import ParsedPattern, PatternRules, SubPattern
from .scanner import ScanResult, ScanState, find_pattern_separator, next_state, scan_subpattern

__all__ = [
    "ParsedPattern",
    "PatternRules",
    "ScanResult",
    "ScanState",
    "SubPattern",
    "clear_pattern_cache",
    "compile_pattern",
    "find_pattern_separator",
    "next_state",
    "parse_pattern",
    "pattern_cache_info",
    "scan_subpattern",
]
