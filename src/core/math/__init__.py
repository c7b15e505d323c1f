"""
Core math modules

Численные примитивы для геометрии коробки.
"""

from src.core.math.numerical_safeguards import (
    MAX_ROUND_DECIMALS,
    is_in_half_open_range,
    is_valid_float,
    round_to_decimals,
    strip_float_noise,
)

__all__ = [
    "MAX_ROUND_DECIMALS",
    "is_in_half_open_range",
    "is_valid_float",
    "round_to_decimals",
    "strip_float_noise",
]
