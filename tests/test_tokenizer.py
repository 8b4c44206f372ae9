"""Tests for syntax/tokenizer.py - brace-depth segment splitting."""

from __future__ import annotations

import pytest

from icumsgfmt.diagnostics import DiagnosticCode, PatternSyntaxError, SourceSpan
from icumsgfmt.enums import SegmentKind
from icumsgfmt.syntax.tokenizer import Segment, split_segments


def _shape(text: str) -> list[tuple[str, str]]:
    return [(segment.kind.value, segment.text) for segment in split_segments(text)]


class TestSplitSegments:
    """Test well-formed input."""

    def test_empty(self) -> None:
        """Empty text has no segments."""
        assert split_segments("") == ()

    def test_plain_text(self) -> None:
        """Text without braces is one TEXT segment."""
        assert _shape("hello world") == [("text", "hello world")]

    def test_text_block_text(self) -> None:
        """Top-level blocks split the surrounding text."""
        assert _shape("New York in {SEASON} is nice.") == [
            ("text", "New York in "),
            ("block", "SEASON"),
            ("text", " is nice."),
        ]

    def test_nested_braces_stay_in_block(self) -> None:
        """Only the outermost braces delimit a block."""
        assert _shape("Hi {A, select, x {y} other {z}}!") == [
            ("text", "Hi "),
            ("block", "A, select, x {y} other {z}"),
            ("text", "!"),
        ]

    def test_adjacent_blocks_drop_empty_text(self) -> None:
        """No empty TEXT segment appears between adjacent blocks."""
        segments = split_segments("{a}{b}")
        assert [s.kind for s in segments] == [SegmentKind.BLOCK, SegmentKind.BLOCK]
        assert [s.start for s in segments] == [1, 4]

    def test_empty_block_kept(self) -> None:
        """An empty block is reported so the parser can reject it."""
        assert _shape("{}") == [("block", "")]

    def test_segment_start_offsets(self) -> None:
        """start points at the first character of the segment text."""
        segments = split_segments("ab{cd}ef")
        assert segments == (
            Segment(SegmentKind.TEXT, "ab", 0),
            Segment(SegmentKind.BLOCK, "cd", 3),
            Segment(SegmentKind.TEXT, "ef", 6),
        )
        assert segments[1].is_block
        assert not segments[0].is_block


class TestSplitSegmentsErrors:
    """Test brace imbalance."""

    def test_stray_close_brace(self) -> None:
        """A '}' with no open block raises UNMATCHED_CLOSE_BRACE."""
        with pytest.raises(PatternSyntaxError) as exc_info:
            split_segments("a}b")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.UNMATCHED_CLOSE_BRACE
        assert diagnostic.message == "No matching { for }"
        assert diagnostic.span is not None
        assert diagnostic.span.start == 1

    def test_close_after_balanced_block(self) -> None:
        """An extra '}' after a complete block is still unmatched."""
        with pytest.raises(PatternSyntaxError) as exc_info:
            split_segments("{a}}")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.UNMATCHED_CLOSE_BRACE

    def test_unclosed_open_brace(self) -> None:
        """A '{' never closed raises UNBALANCED_BRACES at the outermost brace."""
        with pytest.raises(PatternSyntaxError) as exc_info:
            split_segments("ab{c{d}")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.UNBALANCED_BRACES
        assert diagnostic.message == "There are mismatched { or } in the pattern"
        assert diagnostic.span is not None
        assert diagnostic.span.start == 2

    def test_span_line_and_column(self) -> None:
        """Spans report 1-indexed line and column."""
        with pytest.raises(PatternSyntaxError) as exc_info:
            split_segments("x\n  }")
        span = exc_info.value.diagnostic.span  # type: ignore[union-attr]
        assert span is not None
        assert (span.line, span.column) == (2, 3)

    def test_locate_maps_error_offsets(self) -> None:
        """Error spans come from the locate callback when one is given."""
        with pytest.raises(PatternSyntaxError) as exc_info:
            split_segments("ab}", lambda pos: SourceSpan.at("0123ab}", pos + 4))
        span = exc_info.value.diagnostic.span  # type: ignore[union-attr]
        assert span is not None
        assert (span.start, span.column) == (6, 7)
