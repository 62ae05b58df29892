"""Testing utilities for BoxTreeLib consumers."""

from .fixtures import lettered_tree, nested_boxes, single_product_box, two_level_boxes

__all__ = ['lettered_tree', 'nested_boxes', 'single_product_box', 'two_level_boxes']
