"""icumsgfmt - ICU MessageFormat patterns with CLDR plural rules.

Compiles MessageFormat pattern text (arguments, select, plural with offset,
selectordinal, apostrophe quoting, '#' substitution) into an immutable tree
and renders it with locale-aware number formatting via Babel.

Public API:
    MessageFormat - Stateful formatter: one pattern, one locale, lazy compile
    compile_pattern - Compile pattern text to a reusable CompiledPattern
    CompiledPattern - Compiled tree plus protected literal table
    ParamValue - Integer/decimal/text argument value
    extract_arguments - Names of the arguments a pattern reads

Exceptions:
    MessageFormatError - Base exception class
    PatternSyntaxError - Malformed pattern text
    MessageRenderError - Render-time failures
    PoundSubstitutionError - '#' left outside any plural branch

Submodules:
    icumsgfmt.syntax.ast - AST node types (Pattern, Literal, Placeholder, Choice)
    icumsgfmt.introspection - Argument extraction
    icumsgfmt.diagnostics - Error types, diagnostic codes and formatting
    icumsgfmt.runtime.locale_context - Thread-safe LocaleContext for formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import ParamValue
from .diagnostics import (
    MessageFormatError,
    MessageRenderError,
    PatternSyntaxError,
    PoundSubstitutionError,
)
from .introspection import argument_kinds, extract_arguments
from .runtime import CompiledPattern, MessageFormat, compile_pattern


# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("icumsgfmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CompiledPattern",
    "MessageFormat",
    "MessageFormatError",
    "MessageRenderError",
    "ParamValue",
    "PatternSyntaxError",
    "PoundSubstitutionError",
    "__version__",
    "argument_kinds",
    "compile_pattern",
    "extract_arguments",
]
