"""Tagged parameter value shared by choice keys and runtime arguments.

ParamValue holds one of three representations - integer, decimal or text -
and compares across the numeric representations so that a choice key parsed
from "=1" matches a runtime argument of 1 or 1.0 alike.

Python 3.13+. Zero external dependencies (formatting delegates to a
LocaleContext supplied by the caller).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from icumsgfmt.enums import ParamKind

if TYPE_CHECKING:
    from icumsgfmt.runtime.locale_context import LocaleContext

__all__ = ["ParamValue", "format_float"]

# Signed 64-bit range; larger integers are treated as decimals.
_I64_MIN: int = -(2**63)
_I64_MAX: int = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def format_float(value: float) -> str:
    """Render a float in plain positional notation without a trailing '.0'.

    Examples:
        >>> format_float(20.0)
        '20'
        >>> format_float(1e-7)
        '0.0000001'
        >>> format_float(float("nan"))
        'NaN'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True, slots=True, eq=False)
class ParamValue:
    """Immutable integer, decimal or text value.

    Construct through the factories rather than directly:

        >>> ParamValue.from_integer(3) == ParamValue.from_decimal(3.0)
        True
        >>> ParamValue.from_text("3") == ParamValue.from_integer(3)
        False
        >>> ParamValue.parse_numeric("=1") is None
        True

    Equality and hashing agree across INTEGER and DECIMAL: an integer equals
    a decimal iff the decimal is finite, integral and numerically equal, and
    equal values hash equally. NaN equals NaN so a NaN key stays retrievable.

    Attributes:
        kind: Which representation the value holds
        value: The held int, float or str
    """

    kind: ParamKind
    value: int | float | str

    def __post_init__(self) -> None:
        """Validate that value matches kind."""
        match self.kind:
            case ParamKind.INTEGER:
                if isinstance(self.value, bool) or not isinstance(self.value, int):
                    msg = f"INTEGER ParamValue requires int, got {type(self.value).__name__}"
                    raise TypeError(msg)
                if not _I64_MIN <= self.value <= _I64_MAX:
                    msg = f"INTEGER ParamValue out of 64-bit range: {self.value}"
                    raise ValueError(msg)
            case ParamKind.DECIMAL:
                if not isinstance(self.value, float):
                    msg = f"DECIMAL ParamValue requires float, got {type(self.value).__name__}"
                    raise TypeError(msg)
            case ParamKind.TEXT:
                if not isinstance(self.value, str):
                    msg = f"TEXT ParamValue requires str, got {type(self.value).__name__}"
                    raise TypeError(msg)

    @classmethod
    def from_integer(cls, value: int) -> ParamValue:
        """Create an INTEGER value (signed 64-bit range)."""
        return cls(ParamKind.INTEGER, value)

    @classmethod
    def from_decimal(cls, value: float | Decimal) -> ParamValue:
        """Create a DECIMAL value; Decimal inputs are converted to float."""
        return cls(ParamKind.DECIMAL, float(value))

    @classmethod
    def from_text(cls, value: str) -> ParamValue:
        """Create a TEXT value."""
        return cls(ParamKind.TEXT, value)

    @classmethod
    def of(cls, value: object) -> ParamValue:
        """Coerce a host value into a ParamValue.

        Args:
            value: ParamValue, int, float, Decimal or str

        Returns:
            Equivalent ParamValue

        Raises:
            TypeError: For bool and any other type
            ValueError: For ints outside the signed 64-bit range
        """
        match value:
            case ParamValue():
                return value
            case bool():
                msg = "ParamValue cannot hold bool; pass an int or a string instead"
                raise TypeError(msg)
            case int():
                return cls.from_integer(value)
            case float() | Decimal():
                return cls.from_decimal(value)
            case str():
                return cls.from_text(value)
            case _:
                msg = f"Unsupported parameter type: {type(value).__name__}"
                raise TypeError(msg)

    @classmethod
    def parse_numeric(cls, text: str) -> ParamValue | None:
        """Parse text as an integer, then as a decimal.

        Integers outside the 64-bit range parse as decimals. Whitespace,
        underscores and any other decoration make the text non-numeric.

        Args:
            text: Candidate numeric text

        Returns:
            INTEGER or DECIMAL ParamValue, or None if text is not numeric

        Examples:
            >>> ParamValue.parse_numeric("42").kind
            <ParamKind.INTEGER: 'integer'>
            >>> ParamValue.parse_numeric("1.5").kind
            <ParamKind.DECIMAL: 'decimal'>
            >>> ParamValue.parse_numeric("one") is None
            True
        """
        if _INTEGER_RE.fullmatch(text):
            number = int(text)
            if _I64_MIN <= number <= _I64_MAX:
                return cls.from_integer(number)
        if _DECIMAL_RE.fullmatch(text):
            return cls.from_decimal(float(text))
        return None

    @property
    def is_numeric(self) -> bool:
        """True for INTEGER and DECIMAL values."""
        return self.kind is not ParamKind.TEXT

    def as_numeric(self) -> int | float | None:
        """Numeric view of the value.

        INTEGER returns the exact int, DECIMAL its float, TEXT a best-effort
        decimal parse of the text (None if it is not numeric).
        """
        match self.kind:
            case ParamKind.INTEGER | ParamKind.DECIMAL:
                return self.value  # type: ignore[return-value]
            case ParamKind.TEXT:
                text = str(self.value)
                if _DECIMAL_RE.fullmatch(text):
                    return float(text)
                return None

    def format_with_locale(self, locale_context: LocaleContext) -> str:
        """Render the value for output in the given locale.

        Numbers go through the locale's decimal formatter (grouping and
        decimal separator). A non-finite decimal keeps its default text form.
        Text is returned verbatim.
        """
        match self.kind:
            case ParamKind.INTEGER:
                return locale_context.format_decimal(self.value)  # type: ignore[arg-type]
            case ParamKind.DECIMAL:
                if not math.isfinite(self.value):  # type: ignore[arg-type]
                    return str(self)
                return locale_context.format_decimal(self.value)  # type: ignore[arg-type]
            case ParamKind.TEXT:
                return str(self.value)

    def _identity(self) -> tuple[str, int | float | str]:
        if self.kind is ParamKind.TEXT:
            return ("text", self.value)
        if isinstance(self.value, float) and math.isnan(self.value):
            return ("number", "nan")
        return ("number", self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParamValue):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        """Return the default, locale-independent text form."""
        if self.kind is ParamKind.DECIMAL:
            return format_float(self.value)  # type: ignore[arg-type]
        return str(self.value)

    def __repr__(self) -> str:
        return f"ParamValue({self.kind.name}, {self.value!r})"
