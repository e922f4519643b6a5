"""
Exception classes for composite tree operations.

This module defines the error kinds raised when a tree node is asked to do
something its variant does not support, or when a mutation would break the
tree shape.
"""


class CompositeTreeError(Exception):
    """Base exception for all composite tree errors."""

    pass


class UnsupportedOperationError(CompositeTreeError, NotImplementedError):
    """Raised when child management is invoked on a node that has no children."""

    def __init__(self, operation: str, node_type: str):
        """
        Initialize the exception.

        Params:
            operation: Name of the rejected operation ("add" or "remove")
            node_type: Class name of the node that rejected it
        """
        self.operation = operation
        self.node_type = node_type
        super().__init__(f"{node_type} does not support '{operation}'")


class CycleError(CompositeTreeError):
    """Raised when adding a child would make a node its own descendant."""

    def __init__(self, parent_type: str, child_type: str):
        """
        Initialize the exception.

        Params:
            parent_type: Class name of the node receiving the child
            child_type: Class name of the rejected child
        """
        self.parent_type = parent_type
        self.child_type = child_type
        super().__init__(
            f"Cannot add {child_type} to {parent_type}: the parent is already reachable from the child"
        )
