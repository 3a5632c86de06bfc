"""
Core math modules

Точная целочисленная арифметика без ограничения разрядности.
"""

from src.core.math.exact_arithmetic import (
    DEFAULT_SIGNED_BITS,
    exact_multiply,
    fits_in_signed_bits,
    format_exact,
)

__all__ = [
    "DEFAULT_SIGNED_BITS",
    "exact_multiply",
    "fits_in_signed_bits",
    "format_exact",
]
