"""
compositetree - Composite pattern trees of leaves and branches

Leaves and branches share one Component interface, so client code can render
and extend a tree without knowing which kind of node it holds.
"""

from importlib.metadata import version

from compositetree.client import Client
from compositetree.config import ReportConfig
from compositetree.core import Component, Composite, Leaf
from compositetree.exceptions import (
    CompositeTreeError,
    CycleError,
    UnsupportedOperationError,
)

__version__ = version("compositetree")

__all__ = [
    "__version__",
    "Component",
    "Leaf",
    "Composite",
    "Client",
    "ReportConfig",
    "CompositeTreeError",
    "UnsupportedOperationError",
    "CycleError",
]
