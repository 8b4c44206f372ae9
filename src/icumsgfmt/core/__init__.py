"""Core utilities shared across syntax and runtime layers.

This package provides foundational utilities that both the syntax layer
(compilation) and runtime layer (rendering) depend on:

    core <- syntax <- runtime

Exports:
    DepthGuard: Context manager for recursion depth limiting
    ParamValue: Tagged integer/decimal/text value used as choice keys and arguments

Python 3.13+.
"""

from .depth_guard import DepthGuard
from .param_value import ParamValue

__all__ = ["DepthGuard", "ParamValue"]
