"""CLDR plural categories for plural and selectordinal blocks, via Babel.

Python 3.13+. Babel supplies the CLDR rule data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import logging
from decimal import Decimal

from babel import Locale
from babel.core import UnknownLocaleError

from icumsgfmt.locale_utils import get_babel_locale

__all__ = ["select_ordinal_category", "select_plural_category"]

logger = logging.getLogger(__name__)


def _english_like_category(n: int | float | Decimal) -> str:
    return "one" if abs(n) == 1 else "other"


def select_plural_category(n: int | float | Decimal, locale: str | Locale) -> str:
    """Return the cardinal category of n: zero, one, two, few, many or other.

    Decimal inputs keep their visible fraction digits, so the CLDR operands
    differ for Decimal("1") and Decimal("1.0") in locales that care.

    Args:
        n: Number to classify (already offset-adjusted and made non-negative
            by the renderer)
        locale: Locale code in either spelling, or a Babel Locale

    Examples:
        >>> select_plural_category(0, "lv_LV")
        'zero'
        >>> select_plural_category(5, "ru-RU")
        'many'
        >>> select_plural_category(2, "ar")
        'two'
        >>> select_plural_category(1, "xx-XX")
        'one'

    A code Babel cannot parse or has no data for gets the English-like
    one/other rule rather than an error.
    """
    if isinstance(locale, Locale):
        return locale.plural_form(n)
    try:
        babel_locale = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return _english_like_category(n)
    return babel_locale.plural_form(n)


def select_ordinal_category(n: int | float | Decimal, locale: str | Locale) -> str:
    """Select the category used by selectordinal blocks.

    Known limitation: ordinal categories are computed with the CARDINAL
    rules of the locale, so English 2 yields "other" rather than "two" and
    {N, selectordinal, one {#st} two {#nd} few {#rd} other {#th}} renders
    "2th". Use =N exact keys to spell out ordinal forms.

    Args:
        n: Number to categorize
        locale: Locale code or Babel Locale

    Returns:
        Cardinal plural category for n
    """
    logger.debug("selectordinal uses cardinal plural rules for %s", n)
    return select_plural_category(n, locale)
