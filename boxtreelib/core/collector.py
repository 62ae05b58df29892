"""Aggregation over external iterators for BoxTreeLib.

Collectors drive an iterator from ``first()`` to ``is_done()`` and fold the
visited nodes into a result. Deep iterators (depth-first, breadth-first)
already schedule every descendant, so a collector must only act on what it
visits and never recurse into a visited Box itself.
"""

import logging
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, List, Optional, Union

from .._common.config import TraversalConfig, TraversalStrategy
from .errors import ConfigurationError
from .iterator import create_iterator, walk
from .node import Box, NodeKind

logger = logging.getLogger(__name__)


def sum_leaf_values(container: Box,
                    strategy: Union[TraversalStrategy, str]) -> Real:
    """Sum the values of every Product reachable from ``container``.

    Each Product is counted exactly once whatever its depth. An empty box
    totals 0.

    Args:
        container: Box to price
        strategy: Traversal used to visit the tree

    Returns:
        Total of the leaf values
    """
    strategy = TraversalStrategy.parse(strategy)
    iterator = create_iterator(container, strategy)

    total = 0
    for node in walk(iterator):
        if node.kind is NodeKind.LEAF:
            total += node.leaf_value()
        elif not strategy.is_deep:
            # Shallow walks never reach grandchildren, so let the box price itself
            total += node.net_price()

    logger.debug("Priced %r with %s: %s", container, strategy.value, total)
    return total


def naive_recursive_sum(container: Box,
                        strategy: Union[TraversalStrategy, str]) -> Real:
    """Sum leaf values while also recursing into every visited Box.

    This is the broken aggregator: a deep iterator already visits the
    descendants of each Box, so recursing as well counts them again. On a
    box holding a box of two Products plus two more Products, breadth-first
    gives 120 instead of 80.
    """
    total = 0
    for node in walk(create_iterator(container, strategy)):
        box = node.as_container()
        if box is None:
            total += node.leaf_value()
        else:
            total += naive_recursive_sum(box, strategy)
    return total


def collect_names(container: Box,
                  strategy: Union[TraversalStrategy, str]) -> List[str]:
    """Return the names of the visited nodes in visit order."""
    return [node.name for node in walk(create_iterator(container, strategy))]


class DataCollector(ABC):
    """Abstract base class for collectors bound to a TraversalConfig."""

    def __init__(self, config: Optional[TraversalConfig] = None):
        """Initialize collector with a configuration.

        Args:
            config: Traversal configuration (None = defaults)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or TraversalConfig()

        errors = self.config.validate()
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(errors)}"
            )

    @property
    def strategy(self) -> TraversalStrategy:
        return self.config.strategy

    @abstractmethod
    def collect(self, container: Box) -> Any:
        """Walk ``container`` and return the collected result."""
        pass


class LeafSumCollector(DataCollector):
    """Totals the Product values under a Box."""

    def collect(self, container: Box) -> Real:
        return sum_leaf_values(container, self.strategy)


class NameCollector(DataCollector):
    """Lists node names in the configured visiting order."""

    def collect(self, container: Box) -> List[str]:
        return collect_names(container, self.strategy)
