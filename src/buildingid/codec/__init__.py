"""
UBID codec.

Encodes building bounding boxes as UBID codes and decodes them back.
"""

from .code import UbidCode
from .code_area import UbidCodeArea
from .grid_math import chebyshev_distance, significant_digit_count

__all__ = [
    "UbidCode",
    "UbidCodeArea",
    "chebyshev_distance",
    "significant_digit_count",
]
