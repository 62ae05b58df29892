"""Core abstractions for BoxTreeLib.

This package contains the node model, the external iterators and the
collectors that aggregate over them.
"""

from .errors import (
    BoxTreeError,
    ConfigurationError,
    IteratorOutOfBoundsError,
    NotALeafError,
)
from .node import Box, Component, NodeKind, Product
from .iterator import (
    BreadthFirstIterator,
    DepthFirstIterator,
    IteratorState,
    ListIterator,
    NullIterator,
    TreeIterator,
    create_iterator,
    walk,
)
from .collector import (
    DataCollector,
    LeafSumCollector,
    NameCollector,
    collect_names,
    naive_recursive_sum,
    sum_leaf_values,
)

__all__ = [
    "BoxTreeError",
    "ConfigurationError",
    "IteratorOutOfBoundsError",
    "NotALeafError",
    "Box",
    "Component",
    "NodeKind",
    "Product",
    "BreadthFirstIterator",
    "DepthFirstIterator",
    "IteratorState",
    "ListIterator",
    "NullIterator",
    "TreeIterator",
    "create_iterator",
    "walk",
    "DataCollector",
    "LeafSumCollector",
    "NameCollector",
    "collect_names",
    "naive_recursive_sum",
    "sum_leaf_values",
]
