"""
Grid-unit arithmetic shared by the UBID encoder and decoder.
"""

from typing import Tuple

from ..core import constants
from ..models import GridCell


def chebyshev_distance(delta: float, unit: float) -> int:
    """
    Convert a distance in degrees to whole grid cells.

    Uses Python's round(), which rounds halves to the nearest even integer.

    Args:
        delta: Distance in degrees
        unit: Cell height or width in degrees

    Returns:
        Distance in grid cells
    """
    return int(round(delta / unit))


def significant_digit_count(plus_code: str) -> int:
    """Number of significant digits in a Plus Code (padding and separator excluded)."""
    stripped = plus_code.replace(constants.OLC_PADDING_CHARACTER, "")
    return len(stripped) - len(constants.OLC_SEPARATOR_CHARACTER)


def half_cell(cell: GridCell) -> Tuple[float, float]:
    """Half the height and half the width of a grid cell, in degrees."""
    return cell.latitude_height / 2, cell.longitude_width / 2
