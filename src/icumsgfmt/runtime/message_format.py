"""MessageFormat - stateful formatter for one pattern and one locale.

Compiles the pattern on first use and caches both the compiled tree and the
locale context, so repeated format() calls only walk the tree.

Python 3.13+. Uses Babel for number formatting and plural rules.
"""

import logging
import threading
from collections.abc import Mapping

from icumsgfmt.constants import DEFAULT_LOCALE, MAX_DEPTH, MAX_PATTERN_SIZE
from icumsgfmt.locale_utils import is_valid_locale_format
from icumsgfmt.runtime.compiled import CompiledPattern, coerce_parameters, compile_pattern
from icumsgfmt.runtime.locale_context import LocaleContext
from icumsgfmt.runtime.renderer import PatternRenderer

__all__ = ["MessageFormat"]

logger = logging.getLogger(__name__)


class MessageFormat:
    """Formatter for a single MessageFormat pattern.

    Compilation is lazy: syntax errors surface on the first format() call or
    on access to ``compiled``, and the result is cached for the lifetime of
    the instance.

    Thread Safety:
        With thread_safe=False (default) the lazy compile is unsynchronized;
        share the instance across threads only after a first format() call.
        With thread_safe=True every public method holds an internal RLock.

    Example:
        >>> fmt = MessageFormat("{GENDER, select, female {She} other {They}} liked it", "en_US")
        >>> fmt.format({"GENDER": "female"})
        'She liked it'
    """

    __slots__ = (
        "_compiled",
        "_locale",
        "_locale_context",
        "_lock",
        "_max_nesting_depth",
        "_max_pattern_size",
        "_pattern",
        "_thread_safe",
    )

    def __init__(
        self,
        pattern: str,
        locale: str = DEFAULT_LOCALE,
        /,
        *,
        max_pattern_size: int | None = None,
        max_nesting_depth: int | None = None,
        thread_safe: bool = False,
    ) -> None:
        """Initialize formatter for pattern and locale.

        Args:
            pattern: MessageFormat pattern text [positional-only]
            locale: Locale code (en_US, de-DE, ru) [positional-only]
            max_pattern_size: Maximum pattern length (default: 1 MiB characters).
                             Set to 0 to disable limit (not recommended for untrusted input).
            max_nesting_depth: Maximum nested choice depth (default: 100).
            thread_safe: Guard compile and format with an internal RLock (default: False)

        Raises:
            ValueError: If locale code is empty or has invalid format
        """
        MessageFormat._validate_locale_format(locale)

        self._pattern = pattern
        self._locale = locale
        self._max_pattern_size = max_pattern_size if max_pattern_size is not None else MAX_PATTERN_SIZE
        self._max_nesting_depth = max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH

        self._compiled: CompiledPattern | None = None
        self._locale_context: LocaleContext | None = None

        self._thread_safe = thread_safe
        self._lock: threading.RLock | None = threading.RLock() if thread_safe else None

        logger.info(
            "MessageFormat initialized for locale: %s (pattern length=%d, thread_safe=%s)",
            locale,
            len(pattern),
            thread_safe,
        )

    @staticmethod
    def _validate_locale_format(locale: str) -> None:
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if not is_valid_locale_format(locale):
            msg = f"Invalid locale code format: '{locale}'"
            raise ValueError(msg)

    @property
    def pattern(self) -> str:
        """Pattern text this formatter was created with (read-only)."""
        return self._pattern

    @property
    def locale(self) -> str:
        """Locale code for this formatter (read-only).

        Example:
            >>> MessageFormat("{N}", "lv_LV").locale
            'lv_LV'
        """
        return self._locale

    @property
    def is_thread_safe(self) -> bool:
        """Whether this formatter synchronizes access (read-only)."""
        return self._thread_safe

    @property
    def is_compiled(self) -> bool:
        """Whether the pattern has been compiled yet."""
        return self._compiled is not None

    @property
    def compiled(self) -> CompiledPattern:
        """Compiled pattern, compiling on first access.

        Raises:
            PatternSyntaxError: If the pattern is malformed
            ValueError: If the pattern exceeds max_pattern_size
        """
        if self._lock is not None:
            with self._lock:
                return self._compile()
        return self._compile()

    def format(self, parameters: Mapping[str, object] | None = None) -> str:
        """Render the pattern, substituting '#' inside plural branches.

        Args:
            parameters: Argument values by name (ParamValue, int, float,
                Decimal or str)

        Returns:
            Formatted message. Missing or unusable arguments appear inline as
            "Undefined parameter - NAME" / "Invalid parameter - NAME".

        Raises:
            PatternSyntaxError: If the pattern is malformed
            PoundSubstitutionError: If a '#' is left outside plural scope
            TypeError: If an argument has an unsupported type

        Example:
            >>> MessageFormat("{N, plural, one {# file} other {# files}}").format({"N": 1234})
            '1,234 files'
        """
        if self._lock is not None:
            with self._lock:
                return self._format_impl(parameters, ignore_pound=False)
        return self._format_impl(parameters, ignore_pound=False)

    def format_ignoring_pound(self, parameters: Mapping[str, object] | None = None) -> str:
        """Render the pattern leaving every '#' as written.

        Same as format() except that '#' is never substituted and a stray
        '#' is not an error.
        """
        if self._lock is not None:
            with self._lock:
                return self._format_impl(parameters, ignore_pound=True)
        return self._format_impl(parameters, ignore_pound=True)

    def _compile(self) -> CompiledPattern:
        if self._compiled is None:
            self._compiled = compile_pattern(
                self._pattern,
                max_pattern_size=self._max_pattern_size,
                max_nesting_depth=self._max_nesting_depth,
            )
        return self._compiled

    def _get_locale_context(self) -> LocaleContext:
        if self._locale_context is None:
            self._locale_context = LocaleContext.create(self._locale)
        return self._locale_context

    def _format_impl(self, parameters: Mapping[str, object] | None, *, ignore_pound: bool) -> str:
        """Internal implementation of format (no locking)."""
        compiled = self._compile()
        renderer = PatternRenderer(
            self._get_locale_context(),
            ignore_pound=ignore_pound,
            max_depth=compiled.max_nesting_depth,
        )
        return renderer.render(compiled.pattern, compiled.literals, coerce_parameters(parameters))

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> MessageFormat("Hi {NAME}", "en_US")
            MessageFormat('Hi {NAME}', locale='en_US')
        """
        return f"MessageFormat({self._pattern!r}, locale={self._locale!r})"
