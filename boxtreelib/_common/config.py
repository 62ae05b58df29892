"""Configuration system for BoxTreeLib.

This module defines how users pick a traversal strategy and the
pricing constants shared by the node model and the collectors.
"""

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import List, Union


# Fixed price reported by a Product unless another value is given
DEFAULT_UNIT_PRICE = 20


class TraversalStrategy(Enum):
    """How an iterator walks a Box.

    DEPTH_FIRST and BREADTH_FIRST visit every descendant exactly once.
    CHILDREN only visits the immediate children of the Box.
    """
    DEPTH_FIRST = "dfs"         # Pre-order, explicit stack
    BREADTH_FIRST = "bfs"       # Level order, FIFO queue
    CHILDREN = "children"       # Direct children, index walk

    @classmethod
    def parse(cls, value: Union['TraversalStrategy', str]) -> 'TraversalStrategy':
        """Convert a strategy or one of its aliases to a TraversalStrategy.

        Args:
            value: TraversalStrategy member or alias string

        Returns:
            Matching TraversalStrategy

        Raises:
            ValueError: If the alias is not recognized
        """
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower()
        if key not in _STRATEGY_ALIASES:
            raise ValueError(
                f"Unknown traversal strategy: {value}. "
                f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
            )
        return _STRATEGY_ALIASES[key]

    @property
    def is_deep(self) -> bool:
        """True if the strategy reaches every descendant."""
        return self is not TraversalStrategy.CHILDREN


_STRATEGY_ALIASES = {
    'dfs': TraversalStrategy.DEPTH_FIRST,
    'depth_first': TraversalStrategy.DEPTH_FIRST,
    'depth-first-search': TraversalStrategy.DEPTH_FIRST,
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'breadth-first-search': TraversalStrategy.BREADTH_FIRST,
    'children': TraversalStrategy.CHILDREN,
    'list': TraversalStrategy.CHILDREN,
}

DEFAULT_STRATEGY = TraversalStrategy.DEPTH_FIRST


@dataclass
class TraversalConfig:
    """Complete configuration for walking and pricing a Box tree."""

    strategy: TraversalStrategy = DEFAULT_STRATEGY
    unit_price: Real = DEFAULT_UNIT_PRICE

    @classmethod
    def from_strategy(cls, strategy: Union[TraversalStrategy, str]) -> 'TraversalConfig':
        """Create a config from a strategy or alias string."""
        return cls(strategy=TraversalStrategy.parse(strategy))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if isinstance(self.unit_price, bool) or not isinstance(self.unit_price, Real):
            errors.append("unit_price must be a real number")
        elif not math.isfinite(self.unit_price):
            errors.append("unit_price must be finite")
        elif self.unit_price < 0:
            errors.append("unit_price cannot be negative")

        return errors
