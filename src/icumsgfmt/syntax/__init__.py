"""MessageFormat syntax: AST, literal protection, tokenizer and parser.

Python 3.13+. Zero external dependencies.
"""

from .ast import OTHER, Block, Choice, Literal, Pattern, Placeholder
from .literals import LiteralTable, placeholder_token, protect_literals
from .parser import PatternParser
from .tokenizer import Segment, split_segments


def parse(source: str) -> tuple[Pattern, LiteralTable]:
    """Compile pattern text with default limits.

    Convenience wrapper around PatternParser().parse().

    Raises:
        PatternSyntaxError: On any structural error in the pattern
    """
    return PatternParser().parse(source)


__all__ = [
    "OTHER",
    "Block",
    "Choice",
    "Literal",
    "LiteralTable",
    "Pattern",
    "PatternParser",
    "Placeholder",
    "Segment",
    "parse",
    "placeholder_token",
    "protect_literals",
    "split_segments",
]
