"""
Data models for the building identifier codec.

Contains value types for points, bounding boxes and grid cells.
"""

from .geometry import GeoPoint, BoundingBox
from .grid import GridCell

__all__ = [
    "GeoPoint",
    "BoundingBox",
    "GridCell",
]
