"""
UBID code area.

The decoded form of a UBID code: a bounding box together with the grid cell
of the Plus Code for the center of mass.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..models import BoundingBox, GeoPoint, GridCell
from ..provider import OpenLocationCodeProvider, default_provider
from . import grid_math
from .code import UbidCode


@dataclass(frozen=True)
class UbidCodeArea:
    """Bounding box plus the center-of-mass grid cell and its digit count."""

    box: BoundingBox
    center_cell: GridCell
    center_code_length: int

    @property
    def min(self) -> GeoPoint:
        return self.box.min

    @property
    def max(self) -> GeoPoint:
        return self.box.max

    @property
    def south(self) -> float:
        return self.box.south

    @property
    def west(self) -> float:
        return self.box.west

    @property
    def north(self) -> float:
        return self.box.north

    @property
    def east(self) -> float:
        return self.box.east

    @property
    def latitude_height(self) -> float:
        return self.box.latitude_height

    @property
    def longitude_width(self) -> float:
        return self.box.longitude_width

    def encode(self, provider: Optional[OpenLocationCodeProvider] = None) -> UbidCode:
        """
        Encode this area as a UBID code.

        Call resize() first when this area came from UbidCode.decode(),
        otherwise the extents land half a cell too far out.

        Raises:
            InvalidArgument: If a coordinate is out of range or the code length is invalid
            InternalInconsistency: If an encoded Plus Code cannot be decoded
        """
        return UbidCode.encode_points(
            self.min,
            self.max,
            self.center_cell.center,
            code_length=self.center_code_length,
            provider=provider,
        )

    def resize(self) -> "UbidCodeArea":
        """
        Shrink the bounding box by half a center cell on every side.

        Decoding places the extents on cell edges; this moves them back to
        cell centers so that re-encoding picks the same cells.

        Raises:
            InvalidArgument: If the resulting points are out of range
        """
        half_height, half_width = grid_math.half_cell(self.center_cell)

        box = BoundingBox(
            min=GeoPoint(
                latitude=self.min.latitude + half_height,
                longitude=self.min.longitude + half_width,
            ),
            max=GeoPoint(
                latitude=self.max.latitude - half_height,
                longitude=self.max.longitude - half_width,
            ),
        )
        return UbidCodeArea(
            box=box,
            center_cell=self.center_cell,
            center_code_length=self.center_code_length,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min": self.min.to_dict(),
            "max": self.max.to_dict(),
            "center_code": self.center_cell.code,
            "center_code_length": self.center_code_length,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        provider: Optional[OpenLocationCodeProvider] = None
    ) -> "UbidCodeArea":
        """
        Rebuild an area from to_dict() output.

        The center cell is decoded again from its Plus Code.
        """
        provider = provider or default_provider
        return cls(
            box=BoundingBox.from_dict(data),
            center_cell=provider.decode(data["center_code"]),
            center_code_length=int(data["center_code_length"]),
        )
