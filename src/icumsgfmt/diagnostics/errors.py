"""Exceptions raised by icumsgfmt.

Each exception takes either plain text or a Diagnostic. With a Diagnostic,
the exception message is its rustc-style report and the record stays
available as ``.diagnostic`` for programmatic inspection.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MessageFormatError(Exception):
    """Root of the icumsgfmt exception hierarchy.

    Attributes:
        diagnostic: Structured details, or None for plain-text errors
    """

    diagnostic: Diagnostic | None

    def __init__(self, message: str | Diagnostic) -> None:
        match message:
            case Diagnostic():
                self.diagnostic = message
                text = message.format_error()
            case _:
                self.diagnostic = None
                text = message
        super().__init__(text)


class PatternSyntaxError(MessageFormatError):
    """Malformed pattern detected during compilation.

    Unbalanced braces, unknown block headers, malformed key/value pairs and
    choice blocks without an 'other' option all raise this error. A pattern
    that fails to compile is unusable; there is no partial result.
    """


class MessageRenderError(MessageFormatError):
    """Internal failure while rendering a compiled pattern.

    Problems with the supplied arguments (missing or non-numeric values) do
    NOT raise; they are rendered inline as diagnostic text. This error covers
    structural misuse only.
    """


class PoundSubstitutionError(MessageRenderError):
    """A '#' survived rendering outside any plural/selectordinal branch.

    Example:
        "Item # of {N}"  ← '#' at top level has no number to stand for.
        Quote it as '#' to emit a literal pound sign.
    """


class DepthLimitExceededError(MessageRenderError):
    """A walk over a pattern tree went deeper than its DepthGuard allows.

    Compiled text is already bounded by max_nesting_depth, so in practice
    this comes from trees assembled in code.
    """


class FormattingError(MessageRenderError):
    """Babel could not format a number for the locale.

    Attributes:
        fallback_value: Plain str() of the value, usable in place of the
            formatted text
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        super().__init__(message)
        self.fallback_value = fallback_value
