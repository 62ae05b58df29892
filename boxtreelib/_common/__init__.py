"""Common components shared by the node model, iterators and collectors.

This internal package holds configuration only. It should NOT be imported
directly by users, and it must NEVER import from core to avoid circular
dependencies.
"""

from .config import (
    DEFAULT_STRATEGY,
    DEFAULT_UNIT_PRICE,
    TraversalConfig,
    TraversalStrategy,
)

__all__ = [
    'DEFAULT_STRATEGY',
    'DEFAULT_UNIT_PRICE',
    'TraversalConfig',
    'TraversalStrategy',
]
