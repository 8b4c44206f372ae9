"""Literal protection for quoted pattern text.

Quoted spans ('{...}', '#', '}') and doubled quotes ('') are swapped for
opaque placeholder tokens before parsing, so that braces and pound signs
inside them are invisible to the tokenizer and to '#' substitution. The
original text is kept in a LiteralTable and restored after rendering.

Token format:
    "_" + U+FDDF + decimal index + "_", one token per protected literal

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Iterable, Iterator

from icumsgfmt.constants import LITERAL_PLACEHOLDER_MARKER

__all__ = ["LiteralTable", "placeholder_token", "protect_literals"]

_DOUBLE_APOSTROPHE_RE = re.compile(r"''")
_QUOTED_LITERAL_RE = re.compile(r"'([{}#].*?)'")
_TOKEN_RE = re.compile(rf"_{LITERAL_PLACEHOLDER_MARKER}([0-9]+)_")


def placeholder_token(index: int) -> str:
    """Return the in-text token for literal ``index``.

    Example:
        >>> placeholder_token(3) == "_\\ufddf3_"
        True
    """
    return f"_{LITERAL_PLACEHOLDER_MARKER}{index}_"


class LiteralTable:
    """Append-only table of protected literal text.

    Entries are addressed by insertion index. Compilation fills the table
    once; each render works on its own copy() so the compiled table is never
    mutated.

    Restoration resolves tokens nested inside restored text, but only tokens
    of a lower index than the entry that contains them ('' inside a quoted
    span is protected first, so it has the lower index). Entries added with
    verbatim=True are never expanded.

    Example:
        >>> table = LiteralTable()
        >>> token = table.add("{0}")
        >>> table.restore(f"x {token} y")
        'x {0} y'
    """

    __slots__ = ("_entries", "_source_lengths", "_verbatim")

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)
        self._verbatim: set[int] = set()
        # Length of the pattern text each compile-time token replaced
        self._source_lengths: dict[int, int] = {}

    def add(
        self, text: str, *, verbatim: bool = False, source_length: int | None = None
    ) -> str:
        """Append ``text`` and return the placeholder token standing for it.

        Args:
            text: Literal text
            verbatim: Restore text exactly as given, even if it contains
                token-like sequences (used for runtime argument values)
            source_length: Length of the pattern text the token replaces,
                quotes included (compile-time literals only)
        """
        index = len(self._entries)
        self._entries.append(text)
        if verbatim:
            self._verbatim.add(index)
        if source_length is not None:
            self._source_lengths[index] = source_length
        return placeholder_token(index)

    def copy(self) -> "LiteralTable":
        """Return an independent working copy."""
        table = LiteralTable(self._entries)
        table._verbatim = set(self._verbatim)
        table._source_lengths = dict(self._source_lengths)
        return table

    def source_length(self, text: str) -> int:
        """Length ``text`` had in the pattern before its literals were protected.

        Tokens without a recorded source length count as written.

        Example:
            >>> text, table = protect_literals("It''s }")
            >>> table.source_length(text[: text.index("}")])
            6
        """
        length = len(text)
        for match in _TOKEN_RE.finditer(text):
            recorded = self._source_lengths.get(int(match.group(1)))
            if recorded is not None:
                length += recorded - len(match.group(0))
        return length

    def source_offset(self, protected: str, offset: int) -> int:
        """Map an offset into protected text back to the original pattern."""
        return self.source_length(protected[:offset])

    def restore(self, text: str) -> str:
        """Replace every placeholder token in ``text`` with its literal.

        Tokens with an index outside the table are left untouched.
        """
        return self._expand(text, len(self._entries))

    def _expand(self, text: str, limit: int) -> str:
        entries = self._entries

        def _substitute(match: re.Match[str]) -> str:
            index = int(match.group(1))
            if index >= limit:
                return match.group(0)
            if index in self._verbatim:
                return entries[index]
            return self._expand(entries[index], index)

        return _TOKEN_RE.sub(_substitute, text)

    @property
    def entries(self) -> tuple[str, ...]:
        """Snapshot of the table in index order."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiteralTable):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LiteralTable({self._entries!r})"


def protect_literals(pattern: str, table: LiteralTable | None = None) -> tuple[str, LiteralTable]:
    """Hide quoted text behind placeholder tokens.

    Two passes, in order:
        1. every '' becomes a protected single quote
        2. every '{...', '}...' or '#...' quoted span (shortest match up to the
           next quote, within one line) becomes its inner text, verbatim

    A lone quote not followed by {, }, # or another quote is ordinary text.

    Args:
        pattern: Raw pattern text
        table: Table to append to (a new one by default)

    Returns:
        Tuple of (protected pattern, literal table)

    Example:
        >>> text, table = protect_literals("It''s '{0}'")
        >>> table.entries
        ("'", '{0}')
        >>> table.restore(text)
        "It's {0}"
    """
    if table is None:
        table = LiteralTable()
    protected = _DOUBLE_APOSTROPHE_RE.sub(lambda _match: table.add("'", source_length=2), pattern)
    protected = _QUOTED_LITERAL_RE.sub(
        lambda match: table.add(
            match.group(1), source_length=table.source_length(match.group(0))
        ),
        protected,
    )
    return protected, table
