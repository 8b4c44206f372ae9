"""Diagnostic system for MessageFormat errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DepthLimitExceededError,
    FormattingError,
    MessageFormatError,
    MessageRenderError,
    PatternSyntaxError,
    PoundSubstitutionError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormattingError",
    "MessageFormatError",
    "MessageRenderError",
    "OutputFormat",
    "PatternSyntaxError",
    "PoundSubstitutionError",
    "SourceSpan",
]
