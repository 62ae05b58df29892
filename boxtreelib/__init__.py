"""BoxTreeLib - Composite trees walked through external iterators.

A tree of Boxes (containers) and Products (leaves) that is traversed by
pluggable, client-driven iterators and priced by summing its leaves:

    from boxtreelib import Box, Product, net_price

    box = Box("box", strategy="bfs")
    box.append(Product("pen"))
    net_price(box)  # 20
"""

import logging

__version__ = "0.1.0"

from ._common.config import (
    DEFAULT_STRATEGY,
    DEFAULT_UNIT_PRICE,
    TraversalConfig,
    TraversalStrategy,
)
from .core import (
    BoxTreeError,
    ConfigurationError,
    IteratorOutOfBoundsError,
    NotALeafError,
    Box,
    Component,
    NodeKind,
    Product,
    BreadthFirstIterator,
    DepthFirstIterator,
    IteratorState,
    ListIterator,
    NullIterator,
    TreeIterator,
    create_iterator,
    walk,
    DataCollector,
    LeafSumCollector,
    NameCollector,
    collect_names,
    naive_recursive_sum,
    sum_leaf_values,
)
from .api import (
    build_iterator,
    count_leaves,
    count_nodes,
    get_tree_stats,
    net_price,
    render_tree,
    visit_names,
)

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Config
    "DEFAULT_STRATEGY",
    "DEFAULT_UNIT_PRICE",
    "TraversalConfig",
    "TraversalStrategy",
    # Errors
    "BoxTreeError",
    "ConfigurationError",
    "IteratorOutOfBoundsError",
    "NotALeafError",
    # Nodes
    "Box",
    "Component",
    "NodeKind",
    "Product",
    # Iterators
    "BreadthFirstIterator",
    "DepthFirstIterator",
    "IteratorState",
    "ListIterator",
    "NullIterator",
    "TreeIterator",
    "create_iterator",
    "walk",
    # Collectors
    "DataCollector",
    "LeafSumCollector",
    "NameCollector",
    "collect_names",
    "naive_recursive_sum",
    "sum_leaf_values",
    # API
    "build_iterator",
    "count_leaves",
    "count_nodes",
    "get_tree_stats",
    "net_price",
    "render_tree",
    "visit_names",
]
