"""
Unique Building Identifier (UBID)

This package encodes building footprints as UBID codes: the Open Location
Code for the center of mass plus the extents of the bounding box, counted
in grid cells of that code.
"""

__version__ = "0.1.0"
__description__ = "Unique Building Identifier (UBID) codec"

from .codec import UbidCode, UbidCodeArea
from .exceptions import (
    BuildingIdError,
    DecodeFailure,
    InternalInconsistency,
    InvalidArgument,
    InvalidCode,
)
from .models import BoundingBox, GeoPoint, GridCell
from .provider import OpenLocationCodeProvider

__all__ = [
    "UbidCode",
    "UbidCodeArea",
    "BoundingBox",
    "GeoPoint",
    "GridCell",
    "OpenLocationCodeProvider",
    "BuildingIdError",
    "DecodeFailure",
    "InternalInconsistency",
    "InvalidArgument",
    "InvalidCode",
]
