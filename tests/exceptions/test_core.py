"""
Tests for the exception hierarchy and messages.
"""

from compositetree.exceptions import CompositeTreeError, CycleError, UnsupportedOperationError


class TestUnsupportedOperationError:
    """Tests for UnsupportedOperationError."""

    def test_is_tree_error(self):
        """Catchable as the package base error."""
        assert isinstance(UnsupportedOperationError("add", "Leaf"), CompositeTreeError)

    def test_is_not_implemented_error(self):
        """Catchable as the built-in NotImplementedError."""
        assert isinstance(UnsupportedOperationError("add", "Leaf"), NotImplementedError)

    def test_message_and_attributes(self):
        """The message names the node type and the operation."""
        error = UnsupportedOperationError("remove", "Leaf")
        assert error.operation == "remove"
        assert error.node_type == "Leaf"
        assert str(error) == "Leaf does not support 'remove'"


class TestCycleError:
    """Tests for CycleError."""

    def test_is_tree_error(self):
        """Catchable as the package base error."""
        assert isinstance(CycleError("Composite", "Composite"), CompositeTreeError)

    def test_message_and_attributes(self):
        """The message names both node types."""
        error = CycleError("Composite", "Leaf")
        assert error.parent_type == "Composite"
        assert error.child_type == "Leaf"
        assert "Cannot add Leaf to Composite" in str(error)
