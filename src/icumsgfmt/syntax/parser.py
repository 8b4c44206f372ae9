"""Recursive-descent MessageFormat pattern parser.

Compiles pattern text into the immutable AST defined in
:mod:`icumsgfmt.syntax.ast`.

Architecture:
    1. :func:`~icumsgfmt.syntax.literals.protect_literals` hides quoted text
       behind placeholder tokens.
    2. :func:`~icumsgfmt.syntax.tokenizer.split_segments` splits the text into
       top-level text and {...} block segments.
    3. Each block is classified by its header, in priority order:

       - ``NAME, plural, [offset:N] ...``  → Choice(PLURAL)
       - ``NAME, selectordinal, ...``      → Choice(ORDINAL)
       - ``NAME, select, ...``             → Choice(SELECT)
       - ``NAME``                          → Placeholder
       - anything else                     → PatternSyntaxError

    4. Choice bodies are split again into ``key {sub-pattern}`` pairs and each
       sub-pattern is parsed recursively.

Security:
    Includes configurable limits on pattern size and block nesting depth to
    prevent DoS via oversized or adversarially nested input.

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass
from functools import partial

from icumsgfmt.constants import LITERAL_PLACEHOLDER_MARKER, MAX_DEPTH, MAX_PATTERN_SIZE
from icumsgfmt.core.depth_guard import DepthGuard
from icumsgfmt.core.param_value import ParamValue
from icumsgfmt.diagnostics import ErrorTemplate, PatternSyntaxError, SourceSpan
from icumsgfmt.enums import ChoiceKind
from icumsgfmt.syntax.ast import OTHER, Block, Choice, Literal, Pattern, Placeholder
from icumsgfmt.syntax.literals import LiteralTable, protect_literals
from icumsgfmt.syntax.tokenizer import split_segments

__all__ = ["PatternParser"]

_PLURAL_HEADER_RE = re.compile(r"^\s*(\w+)\s*,\s*plural\s*,(?:\s*offset:(\d+))?")
_ORDINAL_HEADER_RE = re.compile(r"^\s*(\w+)\s*,\s*selectordinal\s*,")
_SELECT_HEADER_RE = re.compile(r"^\s*(\w+)\s*,\s*select\s*,")
_SIMPLE_RE = re.compile(r"^\s*\w")

_HEADER_RES: dict[ChoiceKind, re.Pattern[str]] = {
    ChoiceKind.PLURAL: _PLURAL_HEADER_RE,
    ChoiceKind.ORDINAL: _ORDINAL_HEADER_RE,
    ChoiceKind.SELECT: _SELECT_HEADER_RE,
}


class PatternParser:
    """MessageFormat pattern parser.

    Stateless between calls; one instance may be shared freely.

    Security:
    - Configurable max_pattern_size prevents DoS via large inputs
    - Configurable max_nesting_depth prevents DoS via deeply nested choices

    Attributes:
        max_pattern_size: Maximum allowed pattern length in characters
        max_nesting_depth: Maximum allowed choice nesting depth

    Example:
        >>> pattern, literals = PatternParser().parse("Hi {NAME}!")
        >>> pattern.blocks
        (Literal(text='Hi '), Placeholder(argument_name='NAME'), Literal(text='!'))
    """

    __slots__ = ("_max_nesting_depth", "_max_pattern_size")

    def __init__(
        self,
        *,
        max_pattern_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_pattern_size: Maximum pattern length (default: 1 MiB characters).
                             Set to 0 to disable the limit (not recommended).
            max_nesting_depth: Maximum nested choice depth (default: 100).
        """
        self._max_pattern_size = (
            max_pattern_size if max_pattern_size is not None else MAX_PATTERN_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_pattern_size(self) -> int:
        """Maximum allowed pattern length in characters."""
        return self._max_pattern_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed choice nesting depth."""
        return self._max_nesting_depth

    def parse(self, source: str) -> tuple[Pattern, LiteralTable]:
        """Compile raw pattern text.

        Args:
            source: MessageFormat pattern text

        Returns:
            Tuple of (AST, literal table holding the protected quoted text)

        Raises:
            ValueError: If source exceeds max_pattern_size (DoS prevention)
            PatternSyntaxError: On any structural error in the pattern; error
                spans point into source, not the protected text
        """
        if self._max_pattern_size > 0 and len(source) > self._max_pattern_size:
            msg = (
                f"Pattern size ({len(source):,} characters) exceeds maximum "
                f"({self._max_pattern_size:,} characters). "
                "Configure max_pattern_size to increase limit."
            )
            raise ValueError(msg)

        marker_pos = source.find(LITERAL_PLACEHOLDER_MARKER)
        if marker_pos != -1:
            raise PatternSyntaxError(
                ErrorTemplate.marker_in_pattern(SourceSpan.at(source, marker_pos))
            )

        protected, literals = protect_literals(source)
        state = _ParseState(source, protected, literals, self._new_guard())
        pattern = self._parse_pattern(protected, 0, state)
        return pattern, literals

    def parse_pattern(self, text: str) -> Pattern:
        """Parse literal-protected text into a Pattern.

        Error spans are positions within ``text``.

        Raises:
            PatternSyntaxError: On any structural error in the pattern
        """
        return self._parse_pattern(text, 0, _ParseState.of_text(text, self._new_guard()))

    def parse_choice(self, kind: ChoiceKind, text: str) -> Choice:
        """Parse the contents of one select/plural/selectordinal block.

        Args:
            kind: Choice kind whose header ``text`` starts with
            text: Block contents, braces excluded

        Raises:
            PatternSyntaxError: On any structural error in the block
        """
        return self._parse_choice(kind, text, 0, _ParseState.of_text(text, self._new_guard()))

    def _new_guard(self) -> DepthGuard:
        return DepthGuard(max_depth=self._max_nesting_depth)

    def _parse_pattern(self, text: str, base: int, state: "_ParseState") -> Pattern:
        blocks: list[Block] = []
        for segment in split_segments(text, partial(state.locate, base)):
            if segment.is_block:
                blocks.append(self._parse_block(segment.text, base + segment.start, state))
            else:
                blocks.append(Literal(segment.text))
        return Pattern(tuple(blocks))

    def _parse_block(self, text: str, base: int, state: "_ParseState") -> Block:
        if _PLURAL_HEADER_RE.match(text):
            return self._parse_choice(ChoiceKind.PLURAL, text, base, state)
        if _ORDINAL_HEADER_RE.match(text):
            return self._parse_choice(ChoiceKind.ORDINAL, text, base, state)
        if _SELECT_HEADER_RE.match(text):
            return self._parse_choice(ChoiceKind.SELECT, text, base, state)
        if _SIMPLE_RE.match(text):
            return Placeholder(text.strip())
        raise PatternSyntaxError(ErrorTemplate.unknown_block_type(text))

    def _parse_choice(
        self, kind: ChoiceKind, text: str, base: int, state: "_ParseState"
    ) -> Choice:
        header = _HEADER_RES[kind].match(text)
        if header is None:
            raise PatternSyntaxError(ErrorTemplate.unknown_block_type(text))

        argument_name = header.group(1)
        offset = 0
        if kind is ChoiceKind.PLURAL and header.group(2) is not None:
            offset = int(header.group(2))

        guard = state.guard
        if guard.depth >= guard.max_depth:
            raise PatternSyntaxError(ErrorTemplate.nesting_depth_exceeded(guard.max_depth))

        body_base = base + header.end()
        segments = split_segments(text[header.end() :], partial(state.locate, body_base))
        options: dict[ParamValue, Pattern] = {}

        # looking for (key block)+ sequence
        pos = 0
        with guard:
            while pos < len(segments):
                key_segment = segments[pos]
                if key_segment.is_block:
                    raise PatternSyntaxError(
                        ErrorTemplate.invalid_choice_key(
                            kind, argument_name, f"{{{key_segment.text}}}"
                        )
                    )
                if pos + 1 == len(segments):
                    if key_segment.text.isspace():
                        break
                    raise PatternSyntaxError(
                        ErrorTemplate.missing_choice_value(kind, argument_name, key_segment.text)
                    )

                key = _parse_key(kind, argument_name, key_segment.text)
                value_segment = segments[pos + 1]
                options[key] = self._parse_pattern(
                    value_segment.text, body_base + value_segment.start, state
                )
                pos += 2

        if OTHER not in options:
            raise PatternSyntaxError(ErrorTemplate.missing_other_option(kind, argument_name))

        return Choice(kind=kind, argument_name=argument_name, offset=offset, options=options)


@dataclass(frozen=True, slots=True)
class _ParseState:
    """Per-call parser state.

    Offsets handed around the parser index the protected text; locate()
    maps them back into source for error spans.
    """

    source: str
    protected: str
    literals: LiteralTable
    guard: DepthGuard

    @classmethod
    def of_text(cls, text: str, guard: DepthGuard) -> "_ParseState":
        """State for text with no protected literals (offsets map to themselves)."""
        return cls(text, text, LiteralTable(), guard)

    def locate(self, base: int, offset: int) -> SourceSpan:
        """Source span of the character at ``base + offset`` in the protected text."""
        position = self.literals.source_offset(self.protected, base + offset)
        return SourceSpan.at(self.source, position)


def _parse_key(kind: ChoiceKind, argument_name: str, raw: str) -> ParamValue:
    """Turn key text such as ' =0 ' or ' female ' into an option key."""
    key = raw.strip()
    if key.startswith("="):
        key = key[1:]
    if not key or any(char.isspace() for char in key):
        raise PatternSyntaxError(ErrorTemplate.invalid_choice_key(kind, argument_name, raw))
    return ParamValue.parse_numeric(key) or ParamValue.from_text(key)
