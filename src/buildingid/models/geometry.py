"""
Geometry data models.

Contains the latitude/longitude point and bounding box value types.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..core import constants
from ..exceptions import InvalidArgument


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not (constants.LATITUDE_MIN <= self.latitude <= constants.LATITUDE_MAX):
            raise InvalidArgument(
                f"Latitude {self.latitude} is outside of range: "
                f"{constants.LATITUDE_MIN:g} to {constants.LATITUDE_MAX:g}"
            )
        if not (constants.LONGITUDE_MIN <= self.longitude <= constants.LONGITUDE_MAX):
            raise InvalidArgument(
                f"Longitude {self.longitude} is outside of range: "
                f"{constants.LONGITUDE_MIN:g} to {constants.LONGITUDE_MAX:g}"
            )

    def to_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeoPoint":
        return cls(latitude=float(data["latitude"]), longitude=float(data["longitude"]))


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned bounding box.

    Coordinates are absolute latitude/longitude, min is the south-west
    corner and max is the north-east corner.
    """

    min: GeoPoint
    max: GeoPoint

    @property
    def south(self) -> float:
        return self.min.latitude

    @property
    def west(self) -> float:
        return self.min.longitude

    @property
    def north(self) -> float:
        return self.max.latitude

    @property
    def east(self) -> float:
        return self.max.longitude

    @property
    def latitude_height(self) -> float:
        """Height in degrees of latitude."""
        return self.north - self.south

    @property
    def longitude_width(self) -> float:
        """Width in degrees of longitude."""
        return self.east - self.west

    @property
    def center(self) -> GeoPoint:
        """Midpoint of the box."""
        return GeoPoint(
            latitude=(self.south + self.north) / 2,
            longitude=(self.west + self.east) / 2,
        )

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {"min": self.min.to_dict(), "max": self.max.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoundingBox":
        return cls(min=GeoPoint.from_dict(data["min"]), max=GeoPoint.from_dict(data["max"]))
