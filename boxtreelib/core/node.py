"""Node model for BoxTreeLib.

A tree is built from two kinds of node: a Box holds an ordered list of
children, a Product holds a fixed price and nothing else. Both share the
Component interface, and every node reports its kind through ``kind`` so
callers can branch on it instead of probing types.

Navigation logic lives in the iterators (see ``iterator.py``); a Box owns
its children but never walks them itself.
"""

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum
from numbers import Real
from typing import List, Optional, Tuple, Union, TYPE_CHECKING

from .._common.config import DEFAULT_STRATEGY, DEFAULT_UNIT_PRICE, TraversalStrategy
from .errors import NotALeafError

if TYPE_CHECKING:
    from .iterator import TreeIterator

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Discriminator for the two node capabilities."""
    CONTAINER = "container"
    LEAF = "leaf"


class Component(ABC):
    """Abstract base class for every node in a Box tree.

    Nodes compare and hash by identity: two Products with the same name
    and price are still two different nodes.
    """

    kind: NodeKind

    def __init__(self, name: str):
        self._name = str(name)

    @property
    def name(self) -> str:
        """Label given at construction."""
        return self._name

    def is_container(self) -> bool:
        return self.kind is NodeKind.CONTAINER

    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    def as_container(self) -> Optional['Box']:
        """Return this node as a Box, or None if it cannot hold children.

        This is the capability check to make before calling append() or
        remove() on a node of unknown kind.
        """
        return None

    def get_child_at(self, index) -> Optional['Component']:
        """Return the child at ``index``, or None if there is none."""
        return None

    def get_iterator(self, strategy=None) -> 'TreeIterator':
        """Return an external iterator over this node's descendants."""
        from .iterator import NullIterator
        return NullIterator()

    @abstractmethod
    def leaf_value(self) -> Real:
        """Return the fixed value of a leaf node."""
        pass

    @abstractmethod
    def net_price(self) -> Real:
        """Return the total price of this node."""
        pass

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"


class Box(Component):
    """Container node: an ordered list of children and a traversal strategy.

    The Box owns its children exclusively. A child must not be appended to
    more than one Box, and a Box must never end up inside itself; neither
    rule is checked at runtime.

    Example:
        >>> box = Box("big box")
        >>> box.append(Product("pen"))
        >>> box.net_price()
        20
    """

    kind = NodeKind.CONTAINER

    def __init__(self,
                 name: str,
                 strategy: Union[TraversalStrategy, str] = DEFAULT_STRATEGY):
        """Initialize an empty Box.

        Args:
            name: Label for the box
            strategy: Traversal used by get_iterator() and net_price()

        Raises:
            ValueError: If the strategy name is not recognized
        """
        super().__init__(name)
        self._strategy = TraversalStrategy.parse(strategy)
        self._children: List[Component] = []

    @property
    def strategy(self) -> TraversalStrategy:
        return self._strategy

    def as_container(self) -> 'Box':
        return self

    def get_child_at(self, index) -> Optional[Component]:
        # Only plain in-range integers address a child
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if index < 0 or index >= len(self._children):
            return None
        return self._children[index]

    def append(self, child: Component) -> None:
        """Add ``child`` after the existing children."""
        self._children.append(child)

    add = append

    def remove(self, child: Component) -> None:
        """Remove ``child`` if it is one of this box's children.

        Matching is by identity only. Removing a node that is not a child
        does nothing.
        """
        for position, candidate in enumerate(self._children):
            if candidate is child:
                del self._children[position]
                return
        logger.debug("remove(): %r is not a child of %r", child, self)

    def get_items(self) -> Tuple[Component, ...]:
        """Return a snapshot of the children in order."""
        return tuple(self._children)

    def get_count(self) -> int:
        return len(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        # An empty Box is still a container for as_container() checks
        return True

    def get_iterator(self, strategy=None) -> 'TreeIterator':
        """Return a fresh iterator over this box.

        Args:
            strategy: Override for the box's own strategy (None = use it)
        """
        from .iterator import create_iterator
        return create_iterator(self, self._strategy if strategy is None else strategy)

    def leaf_value(self) -> Real:
        raise NotALeafError(f"{self!r} is a container and has no leaf value")

    def net_price(self) -> Real:
        """Sum of the prices of every Product inside this box."""
        from .collector import sum_leaf_values
        return sum_leaf_values(self, self._strategy)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(name={self._name!r}, "
                f"children={len(self._children)}, strategy={self._strategy.value!r})")


class Product(Component):
    """Leaf node with a fixed price."""

    kind = NodeKind.LEAF

    def __init__(self, name: str, value: Real = DEFAULT_UNIT_PRICE):
        """Initialize a Product.

        Args:
            name: Label for the product
            value: Fixed, non-negative price

        Raises:
            ValueError: If value is not a finite, non-negative number
        """
        super().__init__(name)
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValueError(f"Product value must be a real number, got {value!r}")
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"Product value must be finite and non-negative, got {value!r}")
        self._value = value

    @property
    def value(self) -> Real:
        return self._value

    def leaf_value(self) -> Real:
        return self._value

    def net_price(self) -> Real:
        return self._value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, value={self._value!r})"
