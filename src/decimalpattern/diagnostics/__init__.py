"""Diagnostic system for decimalpattern errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DecimalFormatError,
    InvalidInputError,
    MalformedPatternError,
    RoundingRequiredError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DecimalFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidInputError",
    "MalformedPatternError",
    "OutputFormat",
    "RoundingRequiredError",
    "SourceSpan",
]
