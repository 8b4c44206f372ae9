"""Rendering of Diagnostic objects for terminals, logs and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_RESET = "\033[0m"
_SEVERITY_COLORS = {
    "error": "\033[1;31m",  # bold red
    "warning": "\033[1;33m",  # bold yellow
}


class OutputFormat(StrEnum):
    """Output styles supported by DiagnosticFormatter."""

    RUST = "rust"  # multi-line, rustc-like (default)
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # one JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns diagnostics into text.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate free text to max_content_length characters
        color: Wrap the severity label in ANSI color codes (rust style only)
        max_content_length: Truncation length used when sanitize is set

    Example:
        >>> diagnostic = ErrorTemplate.missing_other_option("select", "GENDER")
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[MISSING_OTHER_OPTION]: Missing other key in select statement 'GENDER'
          = argument: GENDER
          = help: Add an 'other {...}' branch; it is used when no key matches
          = note: see https://unicode-org.github.io/icu/userguide/...
        >>> print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic))
        MISSING_OTHER_OPTION: Missing other key in select statement 'GENDER'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format several diagnostics, separated by blank lines."""
        return "\n\n".join(map(self.format, diagnostics))

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Header line followed by indented detail lines.

        Example output:
            error[UNMATCHED_CLOSE_BRACE]: No matching { for }
              --> line 1, column 7
              = help: Remove the '}' or quote it as '}' to emit it literally
        """
        label = diagnostic.severity
        if self.color:
            label = f"{_SEVERITY_COLORS[label]}{label}{_ANSI_RESET}"

        lines = [f"{label}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        if diagnostic.span is not None:
            lines.append(f"  --> line {diagnostic.span.line}, column {diagnostic.span.column}")
        details = (
            ("argument", diagnostic.argument_name),
            ("help", diagnostic.hint and self._clip(diagnostic.hint)),
            ("note", diagnostic.help_url and f"see {diagnostic.help_url}"),
        )
        lines.extend(f"  = {name}: {text}" for name, text in details if text)
        return "\n".join(lines)

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if (span := diagnostic.span) is not None:
            data.update(line=span.line, column=span.column, start=span.start, end=span.end)
        optional = {
            "argument_name": diagnostic.argument_name,
            "snippet": diagnostic.snippet and self._clip(diagnostic.snippet),
            "hint": diagnostic.hint and self._clip(diagnostic.hint),
            "help_url": diagnostic.help_url,
        }
        data.update({key: value for key, value in optional.items() if value})
        return json.dumps(data, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return f"{text[: self.max_content_length]}..."
        return text
