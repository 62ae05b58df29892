"""External iterators for BoxTreeLib.

Iterators implement the different orders for walking a Box. The calling
code drives them step by step through ``first()``, ``next()``,
``is_done()`` and ``current_item()``; ``walk()`` wraps that loop in a
generator for ordinary ``for`` statements.

Every iterator keeps its own frontier (stack, queue or index), so any
number of iterators can walk the same tree at once. One iterator instance
serves one traversal at a time; sharing an instance between two logical
traversals is not supported.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import Deque, Iterator, List, Optional, Tuple, Union

from .._common.config import TraversalStrategy
from .errors import IteratorOutOfBoundsError
from .node import Box, Component, NodeKind

logger = logging.getLogger(__name__)


class IteratorState(Enum):
    """Where an iterator is in its traversal."""
    READY = "ready"           # Nothing consumed yet
    ACTIVE = "active"         # Items consumed, items remaining
    EXHAUSTED = "exhausted"   # Frontier is empty


class TreeIterator(ABC):
    """Abstract base class for external iterators."""

    _started = False

    @abstractmethod
    def first(self) -> Optional[Component]:
        """Restart the traversal and return its first item (None if empty)."""
        pass

    @abstractmethod
    def next(self) -> Optional[Component]:
        """Advance past the current item and return it.

        Returns None once the traversal is exhausted; never raises.
        """
        pass

    @abstractmethod
    def is_done(self) -> bool:
        """Check whether the traversal has no items left."""
        pass

    @abstractmethod
    def current_item(self) -> Component:
        """Return the current item without advancing.

        Raises:
            IteratorOutOfBoundsError: If the traversal is exhausted
        """
        pass

    @property
    def state(self) -> IteratorState:
        if self.is_done():
            return IteratorState.EXHAUSTED
        if not self._started:
            return IteratorState.READY
        return IteratorState.ACTIVE

    def __iter__(self) -> Iterator[Component]:
        return walk(self)


class DepthFirstIterator(TreeIterator):
    """Lazy pre-order depth-first iterator over a Box.

    A LIFO stack holds the nodes still to visit. Popping a Box pushes its
    children in reverse order, so its whole subtree comes out before its
    next sibling.
    """

    def __init__(self, container: Box):
        """Initialize iterator over ``container``'s descendants.

        Args:
            container: Box whose descendants are visited (the box itself is not)
        """
        self.container = container
        self._stack: List[Component] = []
        self._build_stack()

    def _build_stack(self) -> None:
        self._stack = list(reversed(self.container.get_items()))

    def first(self) -> Optional[Component]:
        self._build_stack()
        self._started = True
        return self._stack[-1] if self._stack else None

    def next(self) -> Optional[Component]:
        self._started = True
        if not self._stack:
            return None

        node = self._stack.pop()
        if node.kind is NodeKind.CONTAINER:
            self._stack.extend(reversed(node.get_items()))
        return node

    def current_item(self) -> Component:
        if self.is_done():
            raise IteratorOutOfBoundsError()
        return self._stack[-1]

    def is_done(self) -> bool:
        return not self._stack


class BreadthFirstIterator(TreeIterator):
    """Lazy level-order iterator over a Box.

    A FIFO queue holds the nodes still to visit. Dequeuing a Box appends
    its children at the back, so every node at depth N comes out before
    any node at depth N+1.
    """

    def __init__(self, container: Box):
        self.container = container
        self._queue: Deque[Component] = deque()
        self._build_queue()

    def _build_queue(self) -> None:
        self._queue = deque(self.container.get_items())

    def first(self) -> Optional[Component]:
        self._build_queue()
        self._started = True
        return self._queue[0] if self._queue else None

    def next(self) -> Optional[Component]:
        self._started = True
        if not self._queue:
            return None

        node = self._queue.popleft()
        if node.kind is NodeKind.CONTAINER:
            self._queue.extend(node.get_items())
        return node

    def current_item(self) -> Component:
        if self.is_done():
            raise IteratorOutOfBoundsError()
        return self._queue[0]

    def is_done(self) -> bool:
        return not self._queue


class ListIterator(TreeIterator):
    """Index walk over a box's direct children.

    Used for the CHILDREN strategy. Like the deep iterators, ``first()``
    re-reads the children so it sees the box as it is now.
    """

    def __init__(self, container: Box):
        self.container = container
        self._items: Tuple[Component, ...] = container.get_items()
        self._current = 0

    def first(self) -> Optional[Component]:
        self._items = self.container.get_items()
        self._current = 0
        self._started = True
        return self._items[0] if self._items else None

    def next(self) -> Optional[Component]:
        self._started = True
        if self.is_done():
            return None
        item = self._items[self._current]
        self._current += 1
        return item

    def current_item(self) -> Component:
        if self.is_done():
            raise IteratorOutOfBoundsError()
        return self._items[self._current]

    def is_done(self) -> bool:
        return self._current >= len(self._items)


class NullIterator(TreeIterator):
    """Iterator over nothing, returned for Products."""

    def first(self) -> None:
        self._started = True
        return None

    def next(self) -> None:
        self._started = True
        return None

    def current_item(self) -> Component:
        raise IteratorOutOfBoundsError()

    def is_done(self) -> bool:
        return True


def walk(iterator: TreeIterator) -> Iterator[Component]:
    """Drive an external iterator from first() to exhaustion.

    Yields:
        Each item in the iterator's order
    """
    iterator.first()
    while not iterator.is_done():
        yield iterator.current_item()
        iterator.next()


def create_iterator(container: Box,
                    strategy: Union[TraversalStrategy, str]) -> TreeIterator:
    """Create an iterator over ``container`` by strategy.

    Args:
        container: Box to walk
        strategy: TraversalStrategy or alias (dfs, bfs, children, ...)

    Returns:
        TreeIterator instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategy = TraversalStrategy.parse(strategy)

    if strategy is TraversalStrategy.DEPTH_FIRST:
        iterator = DepthFirstIterator(container)
    elif strategy is TraversalStrategy.BREADTH_FIRST:
        iterator = BreadthFirstIterator(container)
    else:
        iterator = ListIterator(container)

    logger.debug("Created %s for %r", iterator.__class__.__name__, container)
    return iterator
