"""Argument introspection for compiled MessageFormat patterns.

Lets callers discover which arguments a pattern reads, and how, before
rendering it. Useful for validating parameter maps or translation files.

Key features:
- Type-safe traversal using the AST node TypeIs guards
- Frozen dataclasses with slots for results
- Depth limiting for programmatically built trees

Python 3.13+.
"""

from dataclasses import dataclass

from .constants import MAX_DEPTH
from .core.depth_guard import DepthGuard
from .enums import ArgumentUse
from .runtime.compiled import CompiledPattern, compile_pattern
from .syntax.ast import Choice, Pattern, Placeholder

__all__ = [
    "ArgumentInfo",
    "PatternIntrospection",
    "argument_kinds",
    "extract_arguments",
    "introspect_pattern",
]


@dataclass(frozen=True, slots=True)
class ArgumentInfo:
    """One use of an argument inside a pattern."""

    name: str
    """Argument name as written in the pattern."""

    use: ArgumentUse
    """How the argument is used at this site."""


@dataclass(frozen=True, slots=True)
class PatternIntrospection:
    """Introspection result for a pattern."""

    arguments: frozenset[ArgumentInfo]
    """Every distinct (name, use) pair in the pattern."""

    has_choices: bool
    """Whether the pattern contains select/plural/selectordinal blocks."""

    def get_argument_names(self) -> frozenset[str]:
        """Get set of argument names."""
        return frozenset(arg.name for arg in self.arguments)

    def requires_argument(self, name: str) -> bool:
        """Check if the pattern reads a specific argument.

        Note that an argument used only inside an unselected branch still
        counts as required.
        """
        return any(arg.name == name for arg in self.arguments)


class _ArgumentCollector:
    """Walks a pattern tree collecting argument uses."""

    __slots__ = ("_depth_guard", "arguments", "has_choices")

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        self.arguments: set[ArgumentInfo] = set()
        self.has_choices = False
        self._depth_guard = DepthGuard(max_depth=max_depth)

    def visit_pattern(self, pattern: Pattern) -> None:
        for block in pattern.blocks:
            if Placeholder.guard(block):
                self.arguments.add(ArgumentInfo(block.argument_name, ArgumentUse.PLACEHOLDER))
            elif Choice.guard(block):
                self._visit_choice(block)

    def _visit_choice(self, choice: Choice) -> None:
        self.has_choices = True
        self.arguments.add(ArgumentInfo(choice.argument_name, ArgumentUse(choice.kind.value)))
        with self._depth_guard:
            for option in choice.options.values():
                self.visit_pattern(option)


def _as_pattern(source: Pattern | CompiledPattern | str) -> tuple[Pattern, int]:
    """Return the tree to walk and the nesting limit to walk it with."""
    match source:
        case Pattern():
            return source, MAX_DEPTH
        case CompiledPattern():
            return source.pattern, source.max_nesting_depth
        case str():
            return compile_pattern(source).pattern, MAX_DEPTH
        case _:
            msg = f"Expected Pattern, CompiledPattern or str, got {type(source).__name__}"
            raise TypeError(msg)


def introspect_pattern(source: Pattern | CompiledPattern | str) -> PatternIntrospection:
    """Collect every argument use in a pattern.

    Args:
        source: Compiled tree, CompiledPattern, or pattern text (compiled here)

    Returns:
        Introspection result

    Raises:
        PatternSyntaxError: If source is malformed pattern text
        TypeError: If source has an unsupported type

    Example:
        >>> info = introspect_pattern("{G, select, female {{NAME}} other {they}}")
        >>> sorted(info.get_argument_names())
        ['G', 'NAME']
    """
    pattern, max_depth = _as_pattern(source)
    collector = _ArgumentCollector(max_depth=max_depth)
    collector.visit_pattern(pattern)
    return PatternIntrospection(
        arguments=frozenset(collector.arguments),
        has_choices=collector.has_choices,
    )


def extract_arguments(source: Pattern | CompiledPattern | str) -> frozenset[str]:
    """Extract argument names from a pattern (simplified API).

    Example:
        >>> sorted(extract_arguments("{N, plural, one {# by {WHO}} other {# by {WHO}}}"))
        ['N', 'WHO']
    """
    return introspect_pattern(source).get_argument_names()


def argument_kinds(source: Pattern | CompiledPattern | str) -> dict[str, frozenset[ArgumentUse]]:
    """Map each argument name to the set of ways the pattern uses it.

    Example:
        >>> argument_kinds("{N} {N, plural, other {#}}")["N"] == {
        ...     ArgumentUse.PLACEHOLDER, ArgumentUse.PLURAL}
        True
    """
    uses: dict[str, set[ArgumentUse]] = {}
    for arg in introspect_pattern(source).arguments:
        uses.setdefault(arg.name, set()).add(arg.use)
    return {name: frozenset(kinds) for name, kinds in uses.items()}
