#!/usr/bin/env python3
"""
Pricing a box of boxes with different traversal strategies.

This example demonstrates:
- Building a Box/Product tree
- Visiting order of depth-first and breadth-first iterators
- Why breadth-first pricing must not recurse into boxes
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from boxtreelib import build_iterator, naive_recursive_sum, net_price, render_tree
from boxtreelib.testing import two_level_boxes


def main():
    big_box = two_level_boxes()
    print(render_tree(big_box))
    print()

    for strategy in ("dfs", "bfs"):
        iterator = build_iterator(big_box, strategy)
        order = []
        iterator.first()
        while not iterator.is_done():
            order.append(iterator.current_item().name)
            iterator.next()
        print(f"{strategy.upper()} order: {', '.join(order)}")
        print(f"{strategy.upper()} total: {net_price(big_box, strategy)}")

    print(f"\nNaive recursive BFS total: {naive_recursive_sum(big_box, 'bfs')} (double-counted)")


if __name__ == "__main__":
    main()
