"""Enumerations for icumsgfmt type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ChoiceKind(StrEnum):
    """Kind of choice block.

    StrEnum provides automatic string conversion: str(ChoiceKind.PLURAL) == "plural"
    """

    SELECT = "select"
    """Keyword selection: {GENDER, select, male {...} other {...}}"""

    PLURAL = "plural"
    """Cardinal plural selection: {COUNT, plural, offset:1 one {...} other {...}}"""

    ORDINAL = "selectordinal"
    """Ordinal plural selection: {PLACE, selectordinal, one {#st} other {#th}}"""


class SegmentKind(StrEnum):
    """Kind of top-level segment produced by the tokenizer."""

    TEXT = "text"
    """Plain text between blocks"""

    BLOCK = "block"
    """Contents of a balanced {...} block, braces excluded"""


class ParamKind(StrEnum):
    """Representation held by a ParamValue."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    TEXT = "text"


class ArgumentUse(StrEnum):
    """How a pattern uses a named argument.

    StrEnum provides automatic string conversion: str(ArgumentUse.PLURAL) == "plural"
    """

    PLACEHOLDER = "placeholder"
    """Interpolated directly: {NAME}"""

    SELECT = "select"
    """Selector of a select block"""

    PLURAL = "plural"
    """Selector of a plural block (must be numeric)"""

    ORDINAL = "selectordinal"
    """Selector of a selectordinal block (must be numeric)"""


__all__ = [
    "ArgumentUse",
    "ChoiceKind",
    "ParamKind",
    "SegmentKind",
]
