"""MessageFormat renderer - converts a compiled AST to a formatted string.

Walks the pattern tree, interpolating arguments, resolving select / plural /
selectordinal branches, substituting '#', and finally restoring protected
literals.

Python 3.13+. Indirect dependency: Babel (via plural_rules and locale_context).

Error Handling:
    Problems with the supplied arguments never abort rendering. A missing
    or non-numeric argument is rendered inline as diagnostic text
    ("Undefined parameter - NAME", "Invalid parameter - NAME") and the rest
    of the message still renders. Only structural misuse raises: a '#'
    outside any plural/selectordinal branch (PoundSubstitutionError) or a
    tree nested beyond max_depth (DepthLimitExceededError).

Thread Safety:
    Per-call state (working literal table, depth guard) lives in a
    RenderContext created for each render() call, so one renderer and one
    compiled pattern can serve concurrent calls.
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from icumsgfmt.constants import (
    INVALID_OFFSET,
    INVALID_PARAMETER,
    MAX_DEPTH,
    POUND,
    UNDEFINED_PARAMETER,
)
from icumsgfmt.core.depth_guard import DepthGuard
from icumsgfmt.core.param_value import ParamValue, format_float
from icumsgfmt.diagnostics import ErrorTemplate, PoundSubstitutionError
from icumsgfmt.enums import ChoiceKind
from icumsgfmt.runtime.locale_context import LocaleContext, to_decimal
from icumsgfmt.runtime.plural_rules import select_ordinal_category, select_plural_category
from icumsgfmt.syntax.ast import Choice, Literal, Pattern, Placeholder
from icumsgfmt.syntax.literals import LiteralTable

__all__ = ["PatternRenderer", "RenderContext", "render"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RenderContext:
    """Per-call rendering state.

    Attributes:
        literals: Working copy of the compiled literal table; grows with the
            formatted text of each interpolated argument
        guard: Depth guard for nested sub-patterns
    """

    literals: LiteralTable
    guard: DepthGuard = field(default_factory=DepthGuard)


class PatternRenderer:
    """Renders compiled patterns for one locale.

    Attributes:
        locale_context: Number formatting and plural rule locale
        ignore_pound: Leave '#' untouched instead of substituting numbers
        max_depth: Maximum sub-pattern nesting depth

    Example:
        >>> from icumsgfmt.syntax import parse
        >>> pattern, literals = parse("{N, plural, one {# file} other {# files}}")
        >>> renderer = PatternRenderer(LocaleContext.create("en_US"))
        >>> renderer.render(pattern, literals, {"N": ParamValue.from_integer(1234)})
        '1,234 files'
    """

    __slots__ = ("ignore_pound", "locale_context", "max_depth")

    def __init__(
        self,
        locale_context: LocaleContext,
        *,
        ignore_pound: bool = False,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        self.locale_context = locale_context
        self.ignore_pound = ignore_pound
        self.max_depth = max_depth

    def render(
        self,
        pattern: Pattern,
        literals: LiteralTable | tuple[str, ...],
        parameters: Mapping[str, ParamValue],
    ) -> str:
        """Render pattern against parameters.

        Args:
            pattern: Compiled pattern tree
            literals: Literal table produced when the pattern was compiled, or
                its entries (CompiledPattern.literals); it is copied, never
                modified, and verbatim entries stay verbatim
            parameters: Argument values by name

        Returns:
            Rendered message, possibly containing inline diagnostics

        Raises:
            PoundSubstitutionError: If a '#' remains outside plural scope
                (unless ignore_pound)
            DepthLimitExceededError: If the tree is nested beyond max_depth
        """
        if not pattern.blocks:
            return ""

        context = RenderContext(
            literals=_working_table(literals),
            guard=DepthGuard(max_depth=self.max_depth),
        )
        parts: list[str] = []
        self._render_pattern(pattern, parameters, context, parts)
        message = "".join(parts)

        if not self.ignore_pound and POUND in message:
            raise PoundSubstitutionError(ErrorTemplate.unreplaced_pound())

        return context.literals.restore(message)

    def _render_pattern(
        self,
        pattern: Pattern,
        parameters: Mapping[str, ParamValue],
        context: RenderContext,
        out: list[str],
    ) -> None:
        for block in pattern.blocks:
            match block:
                case Literal():
                    out.append(block.text)
                case Placeholder():
                    self._render_placeholder(block, parameters, context, out)
                case Choice(kind=ChoiceKind.SELECT):
                    self._render_select(block, parameters, context, out)
                case Choice():
                    self._render_plural(block, parameters, context, out)
                case _:
                    msg = f"Unknown block type: {type(block).__name__}"
                    raise TypeError(msg)

    def _render_placeholder(
        self,
        block: Placeholder,
        parameters: Mapping[str, ParamValue],
        context: RenderContext,
        out: list[str],
    ) -> None:
        value = parameters.get(block.argument_name)
        if value is None:
            out.append(self._undefined(block.argument_name))
            return
        # Protected so that '#' or braces inside the value stay literal
        text = value.format_with_locale(self.locale_context)
        out.append(context.literals.add(text, verbatim=True))

    def _render_select(
        self,
        block: Choice,
        parameters: Mapping[str, ParamValue],
        context: RenderContext,
        out: list[str],
    ) -> None:
        value = parameters.get(block.argument_name)
        if value is None:
            out.append(self._undefined(block.argument_name))
            return
        option = block.options.get(value, block.other)
        with context.guard:
            self._render_pattern(option, parameters, context, out)

    def _render_plural(
        self,
        block: Choice,
        parameters: Mapping[str, ParamValue],
        context: RenderContext,
        out: list[str],
    ) -> None:
        value = parameters.get(block.argument_name)
        if value is None:
            out.append(self._undefined(block.argument_name))
            return

        number = value.as_numeric()
        if number is None:
            logger.debug("Non-numeric value for %s argument '%s'", block.kind, block.argument_name)
            out.append(INVALID_PARAMETER.format(name=block.argument_name))
            return

        offset = block.offset
        if isinstance(offset, bool) or not isinstance(offset, int):
            logger.debug("Invalid offset %r in block '%s'", offset, block.argument_name)
            out.append(INVALID_OFFSET.format(offset=offset))
            return

        diff = number - offset

        # Exact keys (=0, =1, ...) match the raw value, before the offset applies
        option = block.options.get(value)
        if option is None:
            if not math.isfinite(diff):
                logger.debug("Non-finite value for %s argument '%s'", block.kind, block.argument_name)
                out.append(INVALID_PARAMETER.format(name=format_float(diff)))
                return
            operand = abs(to_decimal(diff))
            if block.kind is ChoiceKind.ORDINAL:
                category = select_ordinal_category(operand, self.locale_context.babel_locale)
            else:
                category = select_plural_category(operand, self.locale_context.babel_locale)
            option = block.options.get(ParamValue.from_text(category), block.other)

        branch: list[str] = []
        with context.guard:
            self._render_pattern(option, parameters, context, branch)
        rendered = "".join(branch)

        if not self.ignore_pound:
            rendered = rendered.replace(POUND, self._format_diff(diff))
        out.append(rendered)

    def _format_diff(self, diff: int | float) -> str:
        if isinstance(diff, float) and not math.isfinite(diff):
            return format_float(diff)
        return self.locale_context.format_decimal(diff)

    @staticmethod
    def _undefined(name: str) -> str:
        logger.debug("Argument '%s' not provided", name)
        return UNDEFINED_PARAMETER.format(name=name)


def render(
    pattern: Pattern,
    literals: LiteralTable | tuple[str, ...],
    parameters: Mapping[str, ParamValue],
    locale_context: LocaleContext,
    *,
    ignore_pound: bool = False,
) -> str:
    """Render a compiled pattern once.

    Convenience wrapper around PatternRenderer; see PatternRenderer.render().
    """
    renderer = PatternRenderer(locale_context, ignore_pound=ignore_pound)
    return renderer.render(pattern, literals, parameters)


def _working_table(literals: LiteralTable | tuple[str, ...]) -> LiteralTable:
    if isinstance(literals, LiteralTable):
        return literals.copy()
    return LiteralTable(literals)
