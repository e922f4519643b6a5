"""
Tree node models for the composite tree.

This module contains the abstract Component base and its two variants.
Leaf is a terminal node that renders a fixed label. Composite owns an ordered
list of child components and renders them recursively. Client code is
expected to work only against Component.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator

from pydantic import BaseModel, Field

from compositetree.core.constants import BRANCH_LABEL, CHILD_SEPARATOR, LEAF_LABEL
from compositetree.exceptions import CycleError, UnsupportedOperationError

logger = logging.getLogger(__name__)


class Component(BaseModel, ABC):
    """
    Base class for all tree node types.

    Child management is declared here so that client code never needs to know
    which concrete variant it holds. Variants without children keep the
    default add/remove, which reject the call.
    """

    @abstractmethod
    def operation(self) -> str:
        """Return the textual representation of this node."""
        ...

    def add(self, child: "Component") -> None:
        """
        Attach a child to this node.

        Params:
            child: Component to attach

        Raises:
            UnsupportedOperationError: Always, unless a variant overrides it
        """
        raise UnsupportedOperationError("add", type(self).__name__)

    def remove(self, child: "Component") -> None:
        """
        Detach a child from this node.

        Params:
            child: Component to detach

        Raises:
            UnsupportedOperationError: Always, unless a variant overrides it
        """
        raise UnsupportedOperationError("remove", type(self).__name__)

    def is_composite(self) -> bool:
        """Check whether this node can hold children."""
        return False

    def iter_nodes(self) -> Iterator["Component"]:
        """Yield this node and all of its descendants in pre-order."""
        yield self

    def contains(self, node: "Component") -> bool:
        """
        Check whether a node is this node or one of its descendants.

        Nodes compare equal by structure, so the lookup uses identity.

        Params:
            node: Component to look for

        Returns:
            True if the very same object is reachable from this node
        """
        return any(candidate is node for candidate in self.iter_nodes())


class Leaf(Component):
    """Terminal node. Renders a fixed label and has no children."""

    def operation(self) -> str:
        return LEAF_LABEL

    def is_composite(self) -> bool:
        return False


class Composite(Component):
    """
    Internal node that delegates to an ordered list of children.

    Children keep insertion order and may repeat. The same child object may
    also be shared with other trees; the composite only holds a reference for
    traversal.
    """

    children: list[Component] = Field(default_factory=list)

    def add(self, child: Component) -> None:
        """
        Append a child at the end of the children list.

        Params:
            child: Component to append

        Raises:
            CycleError: If this composite is reachable from the child
        """
        if child.contains(self):
            raise CycleError(type(self).__name__, type(child).__name__)

        self.children.append(child)
        logger.debug(
            "Added %s to %s (%d children)",
            type(child).__name__,
            type(self).__name__,
            len(self.children),
        )

    def remove(self, child: Component) -> None:
        """
        Remove the first occurrence of a child, matched by identity.

        Removing a child that is not present does nothing.

        Params:
            child: Component to remove
        """
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                logger.debug(
                    "Removed %s from %s (%d children)",
                    type(child).__name__,
                    type(self).__name__,
                    len(self.children),
                )
                return

        logger.debug("%s is not a child of %s, nothing removed", type(child).__name__, type(self).__name__)

    def is_composite(self) -> bool:
        return True

    def iter_nodes(self) -> Iterator[Component]:
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def operation(self) -> str:
        """
        Render all children depth-first and wrap them in the branch label.

        Returns:
            "Branch(" + child results joined by "+" + ")"
        """
        results = [child.operation() for child in self.children]
        return f"{BRANCH_LABEL}({CHILD_SEPARATOR.join(results)})"
