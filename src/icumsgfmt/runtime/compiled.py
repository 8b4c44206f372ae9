"""Compiled MessageFormat patterns.

A CompiledPattern bundles the immutable AST with the literal table produced
while compiling, so the pair can be cached and rendered any number of times
for any locale.

Python 3.13+. Uses Babel (via LocaleContext) when rendering.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from icumsgfmt.constants import DEFAULT_LOCALE, MAX_DEPTH
from icumsgfmt.core.param_value import ParamValue
from icumsgfmt.runtime.locale_context import LocaleContext
from icumsgfmt.runtime.renderer import PatternRenderer
from icumsgfmt.syntax.ast import Pattern
from icumsgfmt.syntax.parser import PatternParser

__all__ = ["CompiledPattern", "coerce_parameters", "compile_pattern"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Result of compiling a pattern.

    Attributes:
        source: Original pattern text
        pattern: Root of the compiled tree
        literals: Protected literal texts, indexed by placeholder token
        max_nesting_depth: Nesting limit the pattern was compiled under; rendering
            and introspection walk the tree with the same limit
    """

    source: str
    pattern: Pattern
    literals: tuple[str, ...]
    max_nesting_depth: int = MAX_DEPTH

    def render(
        self,
        parameters: Mapping[str, object] | None = None,
        locale: str | LocaleContext = DEFAULT_LOCALE,
        *,
        ignore_pound: bool = False,
    ) -> str:
        """Render with the given arguments.

        Args:
            parameters: Argument values by name; host values (int, float,
                Decimal, str) are coerced with ParamValue.of
            locale: Locale code or an existing LocaleContext
            ignore_pound: Leave '#' untouched

        Raises:
            TypeError: If an argument has an unsupported type
            PoundSubstitutionError: If a '#' remains outside plural scope

        Example:
            >>> compiled = compile_pattern("{N, plural, one {# day} other {# days}}")
            >>> compiled.render({"N": 2}, "en_US")
            '2 days'
        """
        locale_context = locale if isinstance(locale, LocaleContext) else LocaleContext.create(locale)
        renderer = PatternRenderer(
            locale_context, ignore_pound=ignore_pound, max_depth=self.max_nesting_depth
        )
        return renderer.render(self.pattern, self.literals, coerce_parameters(parameters))


def coerce_parameters(parameters: Mapping[str, object] | None) -> dict[str, ParamValue]:
    """Convert a mapping of host values into ParamValue arguments.

    Raises:
        TypeError: If a value is a bool or of an unsupported type
    """
    if not parameters:
        return {}
    return {name: ParamValue.of(value) for name, value in parameters.items()}


def compile_pattern(
    text: str,
    *,
    max_pattern_size: int | None = None,
    max_nesting_depth: int | None = None,
) -> CompiledPattern:
    """Compile pattern text.

    Args:
        text: MessageFormat pattern
        max_pattern_size: Maximum pattern length (default: 1 MiB characters, 0 disables)
        max_nesting_depth: Maximum nested choice depth (default: 100)

    Raises:
        ValueError: If text exceeds max_pattern_size
        PatternSyntaxError: On any structural error in the pattern
    """
    parser = PatternParser(max_pattern_size=max_pattern_size, max_nesting_depth=max_nesting_depth)
    pattern, literals = parser.parse(text)
    logger.debug(
        "Compiled pattern: %d top-level blocks, %d protected literals", len(pattern), len(literals)
    )
    return CompiledPattern(
        source=text,
        pattern=pattern,
        literals=literals.entries,
        max_nesting_depth=parser.max_nesting_depth,
    )
