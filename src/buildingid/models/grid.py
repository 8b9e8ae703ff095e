"""
Grid cell data model.

Contains the decoded Open Location Code cell as produced by the provider.
"""

from dataclasses import dataclass

from ..core import constants
from .geometry import GeoPoint


@dataclass(frozen=True)
class GridCell:
    """Rectangular area a Plus Code decodes to."""

    code: str  # Plus Code text
    south: float  # Latitude of the southern edge (degrees)
    west: float  # Longitude of the western edge (degrees)
    north: float  # Latitude of the northern edge (degrees)
    east: float  # Longitude of the eastern edge (degrees)
    code_length: int  # Digit count reported by the OLC library

    @property
    def latitude_height(self) -> float:
        """Height of the cell in degrees of latitude."""
        return self.north - self.south

    @property
    def longitude_width(self) -> float:
        """Width of the cell in degrees of longitude."""
        return self.east - self.west

    @property
    def center(self) -> GeoPoint:
        """Center of the cell, clamped to the valid coordinate range."""
        return GeoPoint(
            latitude=min(self.south + self.latitude_height / 2, constants.LATITUDE_MAX),
            longitude=min(self.west + self.longitude_width / 2, constants.LONGITUDE_MAX),
        )
