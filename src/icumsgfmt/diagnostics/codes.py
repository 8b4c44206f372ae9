"""Diagnostic codes, pattern locations and the Diagnostic record.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        2000-2999: Render errors (internal consistency failures while rendering)
        3000-3999: Syntax errors (pattern compilation failures)
    """

    # Render errors (2000-2999)
    UNREPLACED_POUND = 2001
    MAX_DEPTH_EXCEEDED = 2002
    FORMATTING_FAILED = 2003

    # Syntax errors (3000-3999)
    UNMATCHED_CLOSE_BRACE = 3001
    UNBALANCED_BRACES = 3002
    UNKNOWN_BLOCK_TYPE = 3003
    MISSING_CHOICE_VALUE = 3004
    INVALID_CHOICE_KEY = 3005
    MISSING_OTHER_OPTION = 3006
    NESTING_DEPTH_EXCEEDED = 3007
    MARKER_IN_PATTERN = 3008


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a problem inside pattern text.

    Offsets count characters (code points) of the pattern as given, before
    any literal protection. Line and column start at 1.

    Attributes:
        start: Offset of the first character
        end: Offset one past the last character
        line: Line of start
        column: Column of start
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Reject negative offsets, reversed ranges and 0-based positions.

        Raises:
            ValueError: Naming the offending field
        """
        problems = (
            (self.start < 0, f"start must be >= 0, got {self.start}"),
            (self.end < self.start, f"end ({self.end}) must be >= start ({self.start})"),
            (self.line < 1, f"line is 1-indexed, got {self.line}"),
            (self.column < 1, f"column is 1-indexed, got {self.column}"),
        )
        for failed, detail in problems:
            if failed:
                msg = f"SourceSpan.{detail}"
                raise ValueError(msg)

    @classmethod
    def at(cls, text: str, offset: int, length: int = 1) -> "SourceSpan":
        """Span of ``length`` characters starting at ``offset`` in ``text``.

        Example:
            >>> SourceSpan.at("ab\\ncd", 4)
            SourceSpan(start=4, end=5, line=2, column=2)
        """
        line = text.count("\n", 0, offset) + 1
        column = offset - (text.rfind("\n", 0, offset) + 1) + 1
        return cls(start=offset, end=offset + length, line=line, column=column)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One compile or render problem, with everything needed to report it.

    Modelled on rustc output: a code and message, plus optional location,
    fix suggestion and documentation link.

    Attributes:
        code: Stable identifier of the problem
        message: One-line description
        span: Where in the pattern, if a position applies
        hint: How to fix it
        help_url: ICU user guide section covering the syntax involved
        argument_name: Argument of the block at fault
        snippet: Pattern fragment at fault
        severity: "error" or "warning"
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    argument_name: str | None = None
    snippet: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Multi-line rustc-style report (DiagnosticFormatter defaults).

        Example:
            >>> print(ErrorTemplate.unreplaced_pound().format_error())  # doctest: +ELLIPSIS
            error[UNREPLACED_POUND]: Not all # were replaced
              = help: '#' is only meaningful inside plural/selectordinal branches; ...
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
