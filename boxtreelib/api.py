"""High-level API for BoxTreeLib.

This module provides simple, functional interfaces for common operations
on a Box tree. These functions wrap the iterator and collector classes
for ease of use in simple cases.
"""

from numbers import Real
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from ._common.config import TraversalStrategy
from .core.collector import collect_names, sum_leaf_values
from .core.iterator import TreeIterator, create_iterator, walk
from .core.node import Box, Component, NodeKind


def build_iterator(
    container: Box,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST
) -> TreeIterator:
    """Create a fresh external iterator over a box.

    Example:
        >>> it = build_iterator(box, "bfs")
        >>> it.first()
        >>> while not it.is_done():
        ...     print(it.current_item().name)
        ...     it.next()
    """
    return create_iterator(container, strategy)


def net_price(
    container: Box,
    strategy: Optional[Union[TraversalStrategy, str]] = None
) -> Real:
    """Total price of every Product inside a box.

    Args:
        container: Box to price
        strategy: Traversal to use (None = the box's own strategy)

    Returns:
        Sum of the leaf values, 0 for an empty box
    """
    if strategy is None:
        strategy = container.strategy
    return sum_leaf_values(container, strategy)


def visit_names(
    container: Box,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST
) -> List[str]:
    """Names of the nodes under a box in visiting order.

    Example:
        >>> visit_names(root, "bfs")
        ['B', 'C', 'D', 'E', 'F', 'G']
    """
    return collect_names(container, strategy)


def count_nodes(container: Box) -> int:
    """Count every node below a box (the box itself is not counted)."""
    count = 0
    for _ in walk(create_iterator(container, TraversalStrategy.DEPTH_FIRST)):
        count += 1
    return count


def count_leaves(container: Box) -> int:
    """Count the Products below a box."""
    return sum(
        1 for node in walk(create_iterator(container, TraversalStrategy.DEPTH_FIRST))
        if node.kind is NodeKind.LEAF
    )


def get_tree_stats(container: Box) -> Dict[str, Any]:
    """Get statistics about a tree.

    Depth is relative to ``container`` (its children are at depth 1).

    Returns:
        Dictionary with nodes, containers, leaves, max_depth and total
    """
    stats = {
        'nodes': 0,
        'containers': 0,
        'leaves': 0,
        'max_depth': 0,
        'total': 0,
    }

    for node, depth in _descendants_with_depth(container):
        stats['nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)
        if node.kind is NodeKind.LEAF:
            stats['leaves'] += 1
            stats['total'] += node.leaf_value()
        else:
            stats['containers'] += 1

    return stats


def render_tree(container: Box) -> str:
    """Draw a box and everything in it, one node per line.

    Example:
        >>> print(render_tree(big_box))
        big box
        ├── medium box
        │   └── small box
        │       ├── product one (20)
        │       └── product two (20)
        ├── product three (20)
        └── product four (20)
    """
    lines = [_label(container)]
    _render_children(container, lines)
    return "\n".join(lines)


# Helper functions

def _label(node: Component) -> str:
    if node.kind is NodeKind.LEAF:
        return f"{node.name} ({node.leaf_value()})"
    return node.name


def _render_children(container: Box, lines: List[str]) -> None:
    # Stack of (node, prefix, is_last_sibling)
    stack: List[Tuple[Component, str, bool]] = []
    _push_children(stack, container, "")

    while stack:
        node, prefix, last = stack.pop()
        lines.append(f"{prefix}{'└── ' if last else '├── '}{_label(node)}")
        if node.kind is NodeKind.CONTAINER:
            _push_children(stack, node, prefix + ("    " if last else "│   "))


def _push_children(stack: List[Tuple[Component, str, bool]], container: Box, prefix: str) -> None:
    children = container.get_items()
    for position in range(len(children) - 1, -1, -1):
        stack.append((children[position], prefix, position == len(children) - 1))


def _descendants_with_depth(container: Box) -> Iterator[Tuple[Component, int]]:
    """Pre-order walk yielding (node, depth) with the container's children at depth 1."""
    stack: List[Tuple[Component, int]] = [(child, 1) for child in reversed(container.get_items())]

    while stack:
        node, depth = stack.pop()
        yield (node, depth)
        if node.kind is NodeKind.CONTAINER:
            stack.extend((child, depth + 1) for child in reversed(node.get_items()))
