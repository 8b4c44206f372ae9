"""Nesting depth limits shared by the parser, renderer and introspection.

Choice blocks nest arbitrarily in pattern text, and trees built in code can
nest even deeper. Every recursive walk over them enters a DepthGuard once per
level so that hostile input fails with DepthLimitExceededError instead of
exhausting the interpreter stack.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from icumsgfmt.constants import MAX_DEPTH
from icumsgfmt.diagnostics import DepthLimitExceededError, ErrorTemplate

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)

# Python frames spent per nesting level (parse/render recursion plus match dispatch)
_FRAMES_PER_LEVEL = 3


@dataclass(slots=True)
class DepthGuard:
    """Counts nesting levels of one walk and rejects levels past max_depth.

    Example:
        >>> guard = DepthGuard(max_depth=2)
        >>> with guard:
        ...     with guard:
        ...         guard.depth
        2

    A guard is owned by a single parse, render or introspection call, so it
    needs no locking. It is mutable on purpose: entering and leaving adjust
    current_depth.

    Attributes:
        max_depth: Deepest level allowed, clamped to what the stack can hold
        current_depth: Levels currently entered
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        # Raise before counting: a failed __enter__ gets no matching __exit__
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.expression_depth_exceeded(self.max_depth))
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Number of levels currently entered."""
        return self.current_depth


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Lower a requested nesting limit to one the interpreter stack can reach.

    Args:
        requested_depth: Limit asked for by the caller
        reserve_frames: Frames kept free for the caller's own stack

    Returns:
        requested_depth, or the largest safe limit when that is smaller.
        A warning is logged whenever the value is lowered.

    Example:
        With sys.getrecursionlimit() == 200, depth_clamp(100) returns 50.
    """
    limit = sys.getrecursionlimit()
    safe_depth = max(1, (limit - reserve_frames) // _FRAMES_PER_LEVEL)
    if requested_depth <= safe_depth:
        return requested_depth
    logger.warning(
        "Requested depth %d exceeds Python recursion limit (%d). Clamping to %d; "
        "raise sys.setrecursionlimit() to allow deeper patterns.",
        requested_depth,
        limit,
        safe_depth,
    )
    return safe_depth
