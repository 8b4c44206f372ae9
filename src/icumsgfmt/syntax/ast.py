"""MessageFormat AST (Abstract Syntax Tree) node definitions.

A compiled pattern is a strict tree: a Pattern owns its blocks, and every
Choice owns one sub-Pattern per option. All nodes are immutable and can be
shared read-only between concurrent render calls.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
import sys
from typing import TypeAlias

if sys.version_info >= (3, 13):
    from typing import TypeIs
else:
    from typing_extensions import TypeIs

from icumsgfmt.constants import OTHER_KEY
from icumsgfmt.core.param_value import ParamValue
from icumsgfmt.enums import ChoiceKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern structure
    "Pattern",
    # Blocks
    "Literal",
    "Placeholder",
    "Choice",
    # Type aliases
    "Block",
    "OTHER",
]

# Option key every Choice must carry.
OTHER: ParamValue = ParamValue.from_text(OTHER_KEY)


@dataclass(frozen=True, slots=True)
class Pattern:
    """Ordered sequence of blocks.

    Example:
        "Hello {NAME}!" → Pattern((Literal("Hello "), Placeholder("NAME"), Literal("!")))
    """

    blocks: tuple["Block", ...] = ()

    def __len__(self) -> int:
        """Return number of top-level blocks."""
        return len(self.blocks)


@dataclass(frozen=True, slots=True)
class Literal:
    """Plain text, rendered verbatim (after literal restoration)."""

    text: str

    @staticmethod
    def guard(block: object) -> TypeIs["Literal"]:
        """Type guard for Literal.

        Example:
            if Literal.guard(block):
                block.text  # Type-safe! mypy knows block is Literal
        """
        return isinstance(block, Literal)


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Simple argument: {NAME}"""

    argument_name: str

    @staticmethod
    def guard(block: object) -> TypeIs["Placeholder"]:
        """Type guard for Placeholder."""
        return isinstance(block, Placeholder)


@dataclass(frozen=True, slots=True)
class Choice:
    """Select, plural or selectordinal block.

    Examples:
        {GENDER, select, male {He} female {She} other {They}}
        {COUNT, plural, offset:1 =0 {nobody} one {# other} other {# others}}
        {PLACE, selectordinal, one {#st} two {#nd} few {#rd} other {#th}}

    Attributes:
        kind: SELECT, PLURAL or ORDINAL
        argument_name: Name of the runtime argument selected on
        offset: Subtracted from PLURAL values before category lookup and '#'
            substitution; 0 for SELECT and ORDINAL. The renderer reports a
            non-int offset inline rather than raising.
        options: Read-only mapping from key to sub-pattern. Numeric keys
            (from "=N" or bare digits) match numerically; the rest are text.

    Raises:
        ValueError: If options has no "other" key
    """

    kind: ChoiceKind
    argument_name: str
    offset: int
    options: Mapping[ParamValue, Pattern]

    def __post_init__(self) -> None:
        """Enforce the 'other' option and freeze the options mapping."""
        if OTHER not in self.options:
            msg = f"{self.kind} block '{self.argument_name}' requires an 'other' option"
            raise ValueError(msg)
        if not isinstance(self.options, MappingProxyType):
            object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    @property
    def other(self) -> Pattern:
        """Sub-pattern used when no other option matches."""
        return self.options[OTHER]

    @staticmethod
    def guard(block: object) -> TypeIs["Choice"]:
        """Type guard for Choice."""
        return isinstance(block, Choice)


Block: TypeAlias = Literal | Placeholder | Choice
