"""
Domain models and value objects.

Contains fundamental domain entities: Bound, RandomPair, Product.
"""

from src.core.domain.bounds import (
    BOUND_BIT_WIDTH,
    DEFAULT_BOUND,
    LOWER_BOUND,
    UPPER_BOUND,
    Bound,
)
from src.core.domain.product import Product
from src.core.domain.random_pair import RandomPair

__all__ = [
    # Bounds
    "LOWER_BOUND",
    "UPPER_BOUND",
    "BOUND_BIT_WIDTH",
    "DEFAULT_BOUND",
    "Bound",
    # Pair / Product
    "RandomPair",
    "Product",
]
