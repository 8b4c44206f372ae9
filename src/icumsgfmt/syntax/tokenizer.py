"""Brace-depth segment tokenizer.

Splits pattern text into alternating plain-text and {...} block segments at
the top nesting level only. Nested braces stay inside their enclosing block
segment and are split again when the parser recurses into it.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from icumsgfmt.diagnostics import ErrorTemplate, PatternSyntaxError, SourceSpan
from icumsgfmt.enums import SegmentKind

__all__ = ["Segment", "split_segments"]


@dataclass(frozen=True, slots=True)
class Segment:
    """One top-level piece of pattern text.

    Attributes:
        kind: TEXT for plain text, BLOCK for the contents of a {...} block
        text: Segment text (braces excluded for blocks)
        start: Character offset of text within the scanned string
    """

    kind: SegmentKind
    text: str
    start: int

    @property
    def is_block(self) -> bool:
        """True for BLOCK segments."""
        return self.kind is SegmentKind.BLOCK


def split_segments(
    text: str, locate: Callable[[int], SourceSpan] | None = None
) -> tuple[Segment, ...]:
    """Split text into top-level TEXT and BLOCK segments.

    Empty text segments are dropped; empty blocks ("{}") are kept so the
    parser can reject them.

    Args:
        text: Pattern text with quoted literals already protected
        locate: Maps an offset into text to the SourceSpan reported in errors
            (default: the position within text itself)

    Returns:
        Segments in source order

    Raises:
        PatternSyntaxError: On a '}' with no open block, or a '{' never closed

    Example:
        >>> [(s.kind.value, s.text) for s in split_segments("Hi {A, select, x {y} other {z}}!")]
        [('text', 'Hi '), ('block', 'A, select, x {y} other {z}'), ('text', '!')]
    """
    span_at = locate if locate is not None else partial(SourceSpan.at, text)
    segments: list[Segment] = []
    open_positions: list[int] = []
    cut = 0

    for pos, char in enumerate(text):
        if char == "{":
            if not open_positions:
                if pos > cut:
                    segments.append(Segment(SegmentKind.TEXT, text[cut:pos], cut))
                cut = pos + 1
            open_positions.append(pos)
        elif char == "}":
            if not open_positions:
                raise PatternSyntaxError(
                    ErrorTemplate.unmatched_close_brace(span_at(pos))
                )
            open_positions.pop()
            if not open_positions:
                segments.append(Segment(SegmentKind.BLOCK, text[cut:pos], cut))
                cut = pos + 1

    if open_positions:
        raise PatternSyntaxError(
            ErrorTemplate.unbalanced_braces(span_at(open_positions[0]))
        )

    if cut < len(text):
        segments.append(Segment(SegmentKind.TEXT, text[cut:], cut))

    return tuple(segments)
