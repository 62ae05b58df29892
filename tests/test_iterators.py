"""Unit tests for the external iterators.

Tests visiting order, the first/next/is_done/current_item contract and
the Ready/Active/Exhausted state machine for every strategy.
"""

import unittest
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from boxtreelib import (
    Box,
    Product,
    BreadthFirstIterator,
    DepthFirstIterator,
    ListIterator,
    IteratorOutOfBoundsError,
    IteratorState,
    TraversalStrategy,
    create_iterator,
    walk,
)
from boxtreelib.testing import lettered_tree, nested_boxes


def drain(iterator):
    """Collect names with the classic first/is_done/next loop."""
    names = []
    iterator.first()
    while not iterator.is_done():
        names.append(iterator.current_item().name)
        iterator.next()
    return names


class TestVisitingOrder(unittest.TestCase):
    """Test the order each strategy reports nodes in."""

    def setUp(self):
        # A{B{E{F, G}}, C, D}
        self.root = lettered_tree()

    def test_breadth_first_order(self):
        iterator = BreadthFirstIterator(self.root)
        self.assertEqual(drain(iterator), ["B", "C", "D", "E", "F", "G"])

    def test_depth_first_order(self):
        iterator = DepthFirstIterator(self.root)
        self.assertEqual(drain(iterator), ["B", "E", "F", "G", "C", "D"])

    def test_children_order(self):
        iterator = ListIterator(self.root)
        self.assertEqual(drain(iterator), ["B", "C", "D"])

    def test_root_not_visited(self):
        for strategy in TraversalStrategy:
            with self.subTest(strategy=strategy):
                names = [node.name for node in walk(create_iterator(self.root, strategy))]
                self.assertNotIn("A", names)

    def test_depth_first_finishes_subtree_before_sibling(self):
        """Every descendant of B comes out before C."""
        names = drain(DepthFirstIterator(self.root))
        self.assertLess(names.index("G"), names.index("C"))

    def test_breadth_first_is_level_ordered(self):
        depths = {"B": 1, "C": 1, "D": 1, "E": 2, "F": 3, "G": 3}
        names = drain(BreadthFirstIterator(self.root))
        visited_depths = [depths[name] for name in names]
        self.assertEqual(visited_depths, sorted(visited_depths))

    def test_nested_boxes_orders(self):
        big_box = nested_boxes()
        self.assertEqual(
            drain(DepthFirstIterator(big_box)),
            ["medium box", "small box", "product one", "product two",
             "product three", "product four"],
        )
        self.assertEqual(
            drain(BreadthFirstIterator(big_box)),
            ["medium box", "product three", "product four", "small box",
             "product one", "product two"],
        )


class TestIteratorContract(unittest.TestCase):
    """Test first/next/is_done/current_item edge cases."""

    ITERATORS = (DepthFirstIterator, BreadthFirstIterator)

    def test_empty_box_is_done_immediately(self):
        for iterator_class in self.ITERATORS:
            with self.subTest(iterator=iterator_class.__name__):
                iterator = iterator_class(Box("empty"))
                self.assertTrue(iterator.is_done())
                self.assertIsNone(iterator.first())
                self.assertIsNone(iterator.next())
                self.assertIs(iterator.state, IteratorState.EXHAUSTED)

    def test_not_done_before_first_when_box_has_children(self):
        for iterator_class in self.ITERATORS:
            with self.subTest(iterator=iterator_class.__name__):
                iterator = iterator_class(lettered_tree())
                self.assertFalse(iterator.is_done())
                self.assertIs(iterator.state, IteratorState.READY)
                self.assertEqual(iterator.current_item().name, "B")

    def test_first_returns_first_item(self):
        for iterator_class in self.ITERATORS:
            with self.subTest(iterator=iterator_class.__name__):
                iterator = iterator_class(lettered_tree())
                self.assertEqual(iterator.first().name, "B")

    def test_next_returns_node_it_advances_past(self):
        iterator = DepthFirstIterator(lettered_tree())
        iterator.first()
        self.assertEqual(iterator.next().name, "B")
        self.assertEqual(iterator.current_item().name, "E")

    def test_next_past_exhaustion_returns_none(self):
        for iterator_class in self.ITERATORS:
            with self.subTest(iterator=iterator_class.__name__):
                iterator = iterator_class(lettered_tree())
                drain(iterator)
                self.assertTrue(iterator.is_done())
                for _ in range(3):
                    self.assertIsNone(iterator.next())
                    self.assertTrue(iterator.is_done())

    def test_current_item_raises_when_exhausted(self):
        for iterator_class in self.ITERATORS + (ListIterator,):
            with self.subTest(iterator=iterator_class.__name__):
                iterator = iterator_class(lettered_tree())
                drain(iterator)
                with self.assertRaises(IteratorOutOfBoundsError) as ctx:
                    iterator.current_item()
                self.assertEqual(str(ctx.exception), "The iteration has already terminated")

    def test_current_item_never_raises_while_active(self):
        iterator = BreadthFirstIterator(lettered_tree())
        iterator.first()
        while not iterator.is_done():
            iterator.current_item()
            iterator.next()

    def test_state_machine(self):
        iterator = DepthFirstIterator(lettered_tree())
        self.assertIs(iterator.state, IteratorState.READY)
        iterator.first()
        self.assertIs(iterator.state, IteratorState.ACTIVE)
        iterator.next()
        self.assertIs(iterator.state, IteratorState.ACTIVE)
        drain(iterator)
        self.assertIs(iterator.state, IteratorState.EXHAUSTED)

    def test_first_restarts_traversal(self):
        for iterator_class in self.ITERATORS:
            with self.subTest(iterator=iterator_class.__name__):
                iterator = iterator_class(lettered_tree())
                first_pass = drain(iterator)
                second_pass = drain(iterator)
                self.assertEqual(first_pass, second_pass)

    def test_first_sees_current_children(self):
        """first() rebuilds the frontier from the box as it is now."""
        for iterator_class in self.ITERATORS + (ListIterator,):
            with self.subTest(iterator=iterator_class.__name__):
                box = Box("box")
                iterator = iterator_class(box)
                self.assertTrue(iterator.is_done())

                box.append(Product("late"))

                self.assertEqual(iterator.first().name, "late")
                self.assertFalse(iterator.is_done())

    def test_children_first_sees_appended_sibling(self):
        """A restarted ListIterator walks the children added since."""
        root = lettered_tree()
        iterator = ListIterator(root)
        self.assertEqual(drain(iterator), ["B", "C", "D"])

        root.append(Product("H"))

        self.assertEqual(drain(iterator), ["B", "C", "D", "H"])

    def test_iterators_are_independent(self):
        root = lettered_tree()
        one = BreadthFirstIterator(root)
        two = BreadthFirstIterator(root)
        one.first()
        two.first()

        one.next()
        one.next()

        self.assertEqual(one.current_item().name, "D")
        self.assertEqual(two.current_item().name, "B")

    def test_traversal_leaves_tree_unchanged(self):
        root = lettered_tree()
        before = root.get_items()
        drain(DepthFirstIterator(root))
        drain(BreadthFirstIterator(root))
        self.assertEqual(root.get_items(), before)


@pytest.mark.parametrize("strategy,expected", [
    ("dfs", DepthFirstIterator),
    ("depth-first-search", DepthFirstIterator),
    ("bfs", BreadthFirstIterator),
    ("breadth_first", BreadthFirstIterator),
    ("children", ListIterator),
    (TraversalStrategy.BREADTH_FIRST, BreadthFirstIterator),
])
def test_create_iterator_by_name(strategy, expected):
    """Factory resolves enum members and aliases."""
    assert isinstance(create_iterator(Box("box"), strategy), expected)


def test_create_iterator_unknown_strategy():
    with pytest.raises(ValueError, match="Unknown traversal strategy"):
        create_iterator(Box("box"), "zigzag")


def test_box_get_iterator_uses_own_strategy():
    assert isinstance(Box("box", "bfs").get_iterator(), BreadthFirstIterator)
    assert isinstance(Box("box").get_iterator(), DepthFirstIterator)
    assert isinstance(Box("box").get_iterator("bfs"), BreadthFirstIterator)


def test_python_iteration_protocol():
    """Iterators plug into for loops through walk()."""
    names = [node.name for node in BreadthFirstIterator(lettered_tree())]
    assert names == ["B", "C", "D", "E", "F", "G"]


if __name__ == '__main__':
    unittest.main()
