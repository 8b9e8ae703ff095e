"""
UBID code.

A UBID is the Plus Code for a building's center of mass followed by the
Chebyshev distances, in grid cells of that Plus Code, to the northern,
eastern, southern and western extents of its bounding box:

    849VQJH6+95J-51-58-42-50
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, TYPE_CHECKING

from ..core import constants
from ..exceptions import DecodeFailure, InvalidArgument, InvalidCode
from ..models import BoundingBox, GeoPoint
from ..provider import OpenLocationCodeProvider, default_provider
from . import grid_math

if TYPE_CHECKING:
    from .code_area import UbidCodeArea

logger = logging.getLogger(__name__)

_ALPHABET = re.escape(constants.OLC_CODE_ALPHABET)
_DISTANCE = r"(0|[1-9][0-9]*)"

PATTERN = re.compile(
    "^"
    + "([{a}]{{{lo},{hi}}}{sep}[{a}]*)".format(
        a=_ALPHABET,
        lo=constants.OLC_MIN_PREFIX_DIGITS,
        hi=constants.OLC_MAX_PREFIX_DIGITS,
        sep=re.escape(constants.OLC_SEPARATOR_CHARACTER),
    )
    + (re.escape(constants.UBID_SEPARATOR_CHARACTER) + _DISTANCE) * 4
    + "$"
)

# Match group indices
GROUP_OPEN_LOCATION_CODE = 1
GROUP_NORTH = 2
GROUP_EAST = 3
GROUP_SOUTH = 4
GROUP_WEST = 5


@dataclass(frozen=True)
class UbidCode:
    """
    A UBID code string.

    The value is not validated on construction; use is_valid() or decode().
    """

    value: Optional[str]

    @classmethod
    def encode(
        cls,
        south_latitude: float,
        west_longitude: float,
        north_latitude: float,
        east_longitude: float,
        center_latitude: float,
        center_longitude: float,
        code_length: int = constants.DEFAULT_CODE_LENGTH,
        provider: Optional[OpenLocationCodeProvider] = None
    ) -> "UbidCode":
        """
        Encode a bounding box and center of mass as a UBID code.

        Args:
            south_latitude: Latitude of the minima (degrees)
            west_longitude: Longitude of the minima (degrees)
            north_latitude: Latitude of the maxima (degrees)
            east_longitude: Longitude of the maxima (degrees)
            center_latitude: Latitude of the center of mass (degrees)
            center_longitude: Longitude of the center of mass (degrees)
            code_length: Number of digits in the Plus Code
            provider: Plus Code provider (defaults to the shared instance)

        Returns:
            UBID code

        Raises:
            InvalidArgument: If a coordinate is out of range or the code length is invalid
            InternalInconsistency: If an encoded Plus Code cannot be decoded
        """
        provider = provider or default_provider

        min_cell = provider.encode_cell(south_latitude, west_longitude, code_length)
        max_cell = provider.encode_cell(north_latitude, east_longitude, code_length)
        center_cell = provider.encode_cell(center_latitude, center_longitude, code_length)

        height = center_cell.latitude_height
        width = center_cell.longitude_width

        north = grid_math.chebyshev_distance(max_cell.north - center_cell.north, height)
        east = grid_math.chebyshev_distance(max_cell.east - center_cell.east, width)
        south = grid_math.chebyshev_distance(center_cell.south - min_cell.south, height)
        west = grid_math.chebyshev_distance(center_cell.west - min_cell.west, width)

        value = constants.UBID_SEPARATOR_CHARACTER.join(
            [center_cell.code, str(north), str(east), str(south), str(west)]
        )

        logger.debug(
            f"Encoded ({south_latitude}, {west_longitude}) - ({north_latitude}, {east_longitude}) "
            f"center ({center_latitude}, {center_longitude}) as {value}"
        )

        return cls(value)

    @classmethod
    def encode_points(
        cls,
        min: GeoPoint,
        max: GeoPoint,
        center: GeoPoint,
        code_length: int = constants.DEFAULT_CODE_LENGTH,
        provider: Optional[OpenLocationCodeProvider] = None
    ) -> "UbidCode":
        """Encode the minima, maxima and center of mass points as a UBID code."""
        return cls.encode(
            min.latitude,
            min.longitude,
            max.latitude,
            max.longitude,
            center.latitude,
            center.longitude,
            code_length=code_length,
            provider=provider,
        )

    def _match(self) -> Optional["re.Match"]:
        if not isinstance(self.value, str):
            return None
        return PATTERN.fullmatch(self.value)

    def decode(self, provider: Optional[OpenLocationCodeProvider] = None) -> "UbidCodeArea":
        """
        Decode this UBID code into its bounding box and center cell.

        Returns:
            UbidCodeArea for this code

        Raises:
            InvalidCode: If this code is absent, malformed or cannot be decoded
        """
        from .code_area import UbidCodeArea

        if self.value is None:
            raise InvalidCode(self, "Invalid UBID: null object reference")

        match = self._match()
        if match is None:
            raise InvalidCode(self, "Invalid UBID: regular expression failed to match")

        provider = provider or default_provider
        plus_code = match.group(GROUP_OPEN_LOCATION_CODE)

        try:
            center_cell = provider.decode(plus_code)
            center_code_length = grid_math.significant_digit_count(plus_code)

            height = center_cell.latitude_height
            width = center_cell.longitude_width

            min_point = GeoPoint(
                latitude=center_cell.south - float(match.group(GROUP_SOUTH)) * height,
                longitude=center_cell.west - float(match.group(GROUP_WEST)) * width,
            )
            max_point = GeoPoint(
                latitude=center_cell.north + float(match.group(GROUP_NORTH)) * height,
                longitude=center_cell.east + float(match.group(GROUP_EAST)) * width,
            )
        except InvalidArgument as e:
            raise InvalidCode(
                self, "Invalid UBID: latitude and/or longitude coordinates are outside of range", e
            ) from e
        except DecodeFailure as e:
            raise InvalidCode(self, "Invalid UBID: decode failed", e) from e

        area = UbidCodeArea(
            box=BoundingBox(min=min_point, max=max_point),
            center_cell=center_cell,
            center_code_length=center_code_length,
        )
        logger.debug(f"Decoded {self.value} as {area}")
        return area

    def is_valid(self, provider: Optional[OpenLocationCodeProvider] = None) -> bool:
        """
        Check whether this UBID code is well formed.

        Only the grammar and the Plus Code syntax are checked; never raises.
        """
        match = self._match()
        if match is None:
            return False

        provider = provider or default_provider
        return provider.is_valid(match.group(GROUP_OPEN_LOCATION_CODE))

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UbidCode":
        return cls(data.get("value"))

    def __str__(self) -> str:
        return "" if self.value is None else self.value
