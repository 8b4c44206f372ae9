"""Limits, reserved syntax and inline diagnostic texts.

Shared by the syntax and runtime packages; kept in a leaf module so neither
has to import the other for them. Limits here are defaults: MessageFormat,
compile_pattern and PatternParser accept per-instance overrides.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Input limits
    "MAX_PATTERN_SIZE",
    # Pattern syntax
    "OTHER_KEY",
    "POUND",
    "LITERAL_PLACEHOLDER_MARKER",
    "DEFAULT_LOCALE",
    # Inline diagnostics
    "UNDEFINED_PARAMETER",
    "INVALID_PARAMETER",
    "INVALID_OFFSET",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Deepest nesting of choice blocks, shared by parse, render and introspection.
# Real messages nest two or three choices at most; 100 levels is malformed
# or adversarial input.
MAX_DEPTH: int = 100

# ============================================================================
# CACHE LIMITS
# ============================================================================

# LocaleContext instances kept in the LRU cache.
# An application rarely formats for more than a few dozen locales.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum pattern length in characters (1 MiB).
# A single message pattern is normally well under 1 KB.
MAX_PATTERN_SIZE: int = 1024 * 1024

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

# Every select/plural/selectordinal block must declare this option.
OTHER_KEY: str = "other"

# Replaced by the offset-adjusted number inside plural/selectordinal branches.
POUND: str = "#"

# Noncharacter U+FDDF marks protected literal placeholders: _<marker><index>_
LITERAL_PLACEHOLDER_MARKER: str = "\ufddf"

# Locale used when none is given.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# INLINE DIAGNOSTICS
# ============================================================================

# Render-time problems with the supplied arguments never raise. The renderer
# emits these texts in place of the offending block instead.
# These are format strings - use .format(name=...) / .format(offset=...)
UNDEFINED_PARAMETER: str = "Undefined parameter - {name}"
INVALID_PARAMETER: str = "Invalid parameter - {name}"
INVALID_OFFSET: str = "Invalid offset - {offset}"
