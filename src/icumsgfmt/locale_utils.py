"""Locale code helpers shared by the formatter facade and the Babel collaborators.

Callers may spell locales the BCP-47 way (``de-DE``) or the POSIX way
(``de_DE``). Babel wants the latter, and caches key on it, so every lookup
goes through normalize_locale first.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_valid_locale_format",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Return the POSIX spelling of a locale code.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
    """
    return locale_code.replace("-", "_")


def is_valid_locale_format(locale_code: str) -> bool:
    """Check that a locale code is non-empty alphanumerics with '_'/'-' separators."""
    if not locale_code:
        return False
    return normalize_locale(locale_code).replace("_", "").isalnum()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a Babel Locale, memoized per code.

    Plural selection runs once per rendered choice block, so the parse is
    cached rather than repeated.

    Raises:
        babel.core.UnknownLocaleError: If Babel has no data for the locale
        ValueError: If the code is not a well-formed locale identifier

    Example:
        >>> get_babel_locale("lv-LV").territory
        'LV'
    """
    # Babel loads CLDR data when first imported
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
