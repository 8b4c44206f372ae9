"""MessageFormat runtime package.

Provides rendering, Babel-backed locale collaborators, compiled patterns,
and the MessageFormat API. Depends on syntax package for compilation.

Python 3.13+.
"""

from .compiled import CompiledPattern, coerce_parameters, compile_pattern
from .locale_context import LocaleContext
from .message_format import MessageFormat
from .plural_rules import select_ordinal_category, select_plural_category
from .renderer import PatternRenderer, RenderContext, render

__all__ = [
    "CompiledPattern",
    "LocaleContext",
    "MessageFormat",
    "PatternRenderer",
    "RenderContext",
    "coerce_parameters",
    "compile_pattern",
    "render",
    "select_ordinal_category",
    "select_plural_category",
]
