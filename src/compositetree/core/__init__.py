"""
Core composite tree components.

This package provides the node models and the rendering tokens they use.
"""

from compositetree.core.component import Component, Composite, Leaf
from compositetree.core.constants import BRANCH_LABEL, CHILD_SEPARATOR, LEAF_LABEL

__all__ = [
    "Component",
    "Leaf",
    "Composite",
    "LEAF_LABEL",
    "BRANCH_LABEL",
    "CHILD_SEPARATOR",
]
