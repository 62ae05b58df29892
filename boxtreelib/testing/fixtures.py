"""Ready-made Box trees for BoxTreeLib tests and consumers.

Each builder takes an optional TraversalConfig; its strategy is given to
every Box and its unit_price to every Product.
"""

from typing import Optional

from .._common.config import TraversalConfig
from ..core.errors import ConfigurationError
from ..core.node import Box, Product


def _resolve(config: Optional[TraversalConfig]) -> TraversalConfig:
    config = config or TraversalConfig()
    errors = config.validate()
    if errors:
        raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
    return config


def single_product_box(config: Optional[TraversalConfig] = None) -> Box:
    """A box holding one product.

    Structure:
    box
    └── product
    """
    config = _resolve(config)
    box = Box("box", config.strategy)
    box.append(Product("product", config.unit_price))
    return box


def nested_boxes(config: Optional[TraversalConfig] = None) -> Box:
    """Three nested boxes holding four products.

    Structure:
    big box
    ├── medium box
    │   └── small box
    │       ├── product one
    │       └── product two
    ├── product three
    └── product four
    """
    config = _resolve(config)
    big_box = Box("big box", config.strategy)
    medium_box = Box("medium box", config.strategy)
    small_box = Box("small box", config.strategy)

    small_box.append(Product("product one", config.unit_price))
    small_box.append(Product("product two", config.unit_price))
    medium_box.append(small_box)
    big_box.append(medium_box)
    big_box.append(Product("product three", config.unit_price))
    big_box.append(Product("product four", config.unit_price))
    return big_box


def two_level_boxes(config: Optional[TraversalConfig] = None) -> Box:
    """One inner box with two products beside two more products.

    Structure:
    big box
    ├── medium box
    │   ├── product one
    │   └── product two
    ├── product three
    └── product four
    """
    config = _resolve(config)
    big_box = Box("big box", config.strategy)
    medium_box = Box("medium box", config.strategy)

    medium_box.append(Product("product one", config.unit_price))
    medium_box.append(Product("product two", config.unit_price))
    big_box.append(medium_box)
    big_box.append(Product("product three", config.unit_price))
    big_box.append(Product("product four", config.unit_price))
    return big_box


def lettered_tree(config: Optional[TraversalConfig] = None) -> Box:
    """Single-letter tree for checking visiting order.

    Structure:
    A
    ├── B
    │   └── E
    │       ├── F
    │       └── G
    ├── C
    └── D
    """
    config = _resolve(config)
    root = Box("A", config.strategy)
    b = Box("B", config.strategy)
    e = Box("E", config.strategy)

    e.append(Product("F", config.unit_price))
    e.append(Product("G", config.unit_price))
    b.append(e)
    root.append(b)
    root.append(Product("C", config.unit_price))
    root.append(Product("D", config.unit_price))
    return root
