"""Locale-scoped number formatting backed by Babel.

Renders argument values and '#' substitutions with the grouping and decimal
separator of a CLDR locale. Nothing here touches Python's process-wide
``locale`` module, so formatting for different locales can run side by side.

A MessageFormat acquires one LocaleContext lazily and reuses it; contexts
are cached per normalized locale code.

Python 3.13+. Uses Babel for CLDR data.
"""

import logging
import math
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from icumsgfmt.constants import MAX_LOCALE_CACHE_SIZE
from icumsgfmt.diagnostics import ErrorTemplate, FormattingError
from icumsgfmt.locale_utils import normalize_locale

__all__ = ["LocaleContext", "to_decimal"]

logger = logging.getLogger(__name__)

_FALLBACK_LOCALE: str = "en_US"


def to_decimal(value: int | float | Decimal) -> Decimal:
    """Convert a finite number to Decimal for formatting and plural operands.

    Integral floats become integral Decimals (20.0 → Decimal("20")) so they
    format and pluralize as integers. Other floats use their shortest repr,
    so 0.1 becomes Decimal("0.1") rather than its binary expansion.

    Raises:
        TypeError: For bool or non-numeric values
        ValueError: For NaN or infinite values
    """
    match value:
        case bool():
            msg = "bool is not a number for formatting"
            raise TypeError(msg)
        case int():
            return Decimal(value)
        case float():
            if not math.isfinite(value):
                msg = f"Cannot format non-finite value {value!r}"
                raise ValueError(msg)
            if value.is_integer():
                return Decimal(int(value))
            return Decimal(repr(value))
        case Decimal():
            if not value.is_finite():
                msg = f"Cannot format non-finite value {value!r}"
                raise ValueError(msg)
            return value
        case _:
            msg = f"Expected int, float or Decimal, got {type(value).__name__}"
            raise TypeError(msg)


def _parse_locale(locale_code: str) -> Locale:
    """Parse a locale code with Babel.

    Raises:
        UnknownLocaleError: If Babel has no CLDR data for the locale
        ValueError: If the code is malformed
    """
    return Locale.parse(normalize_locale(locale_code))


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Number formatting for one locale.

    Obtain instances through create(), which caches one context per
    normalized code and never fails, or create_or_raise(), which rejects
    unknown codes. A context is immutable and may be shared freely between
    threads; only the class-level cache is locked.

    Attributes:
        locale_code: Code as requested by the caller (kept even on fallback)
        is_fallback: True when the code was unusable and en_US data is used

    Examples:
        >>> LocaleContext.create("de-DE").format_decimal(1234.5)
        '1.234,5'
        >>> ctx = LocaleContext.create("xx-UNKNOWN")
        >>> ctx.locale_code, ctx.is_fallback
        ('xx-UNKNOWN', True)
    """

    # LRU order: least recently used first. ClassVar keeps these out of the fields.
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Drop every cached context."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Number of cached contexts."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Cache snapshot: size, max_size and cached keys in LRU order.

        Example:
            >>> LocaleContext.clear_cache()
            >>> _ = LocaleContext.create("en-US")
            >>> LocaleContext.cache_info()
            {'size': 1, 'max_size': 128, 'locales': ('en_US',)}
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache),
            }

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Return the cached context for locale_code, building it if needed.

        Unknown or malformed codes log a warning and use en_US data; the
        returned context then has is_fallback=True. Concurrent callers asking
        for the same code receive the same instance.

        Args:
            locale_code: BCP-47 or POSIX locale code ('en-US', 'lv_LV')
        """
        key = normalize_locale(locale_code)

        with cls._cache_lock:
            cached = cls._cache.get(key)
            if cached is not None:
                cls._cache.move_to_end(key)
                return cached

        # Parsing happens outside the lock; Babel may load CLDR data from disk
        try:
            ctx = cls(locale_code=locale_code, _babel_locale=_parse_locale(locale_code))
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "Unusable locale '%s' (%s). Falling back to %s", locale_code, e, _FALLBACK_LOCALE
            )
            ctx = cls(
                locale_code=locale_code,
                _babel_locale=Locale.parse(_FALLBACK_LOCALE),
                is_fallback=True,
            )

        with cls._cache_lock:
            # Another thread may have stored this key while we were parsing
            winner = cls._cache.setdefault(key, ctx)
            if winner is ctx and len(cls._cache) > MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            return winner

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Build an uncached context, rejecting codes Babel cannot use.

        Raises:
            ValueError: If the locale is unknown or malformed
        """
        try:
            babel_locale = _parse_locale(locale_code)
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale used for formatting and plural rules."""
        return self._babel_locale

    def format_decimal(self, value: int | float | Decimal) -> str:
        """Format a number with the locale's grouping and decimal separator.

        Every significant fraction digit is kept; integral floats print
        without a fraction.

        Raises:
            FormattingError: If the value cannot be formatted; str(value) is
                carried as fallback_value

        Examples:
            >>> LocaleContext.create("en-US").format_decimal(-1234.25)
            '-1,234.25'
            >>> LocaleContext.create("en-US").format_decimal(20.0)
            '20'
        """
        try:
            number = to_decimal(value)
            return babel_numbers.format_decimal(
                number, locale=self._babel_locale, decimal_quantization=False
            )
        except (ValueError, TypeError, InvalidOperation) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed(value, self.locale_code, str(e)),
                fallback_value=str(value),
            ) from e
