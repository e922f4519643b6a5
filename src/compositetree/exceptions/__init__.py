"""
Composite tree exception classes.

This package provides all exception types raised by the tree nodes.
"""

from compositetree.exceptions.core import (
    CompositeTreeError,
    CycleError,
    UnsupportedOperationError,
)

__all__ = [
    "CompositeTreeError",
    "UnsupportedOperationError",
    "CycleError",
]
