"""
Open Location Code provider.

Thin facade over the openlocationcode package that converts its results
into GridCell values and its errors into the codec's exception taxonomy.
"""

import logging
from typing import Optional

from openlocationcode import openlocationcode as olc

from .core import constants
from .exceptions import DecodeFailure, InternalInconsistency, InvalidArgument
from .models import GeoPoint, GridCell


class OpenLocationCodeProvider:
    """Encode and decode Plus Codes."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize provider.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def encode(
        self,
        latitude: float,
        longitude: float,
        code_length: int = constants.DEFAULT_CODE_LENGTH
    ) -> str:
        """
        Encode a location as a Plus Code.

        Args:
            latitude: Latitude in decimal degrees (-90 to 90)
            longitude: Longitude in decimal degrees (-180 to 180)
            code_length: Number of significant digits in the code

        Returns:
            Plus Code text

        Raises:
            InvalidArgument: If a coordinate is out of range or the code length is invalid
        """
        # The library clips latitude and wraps longitude silently
        GeoPoint(latitude, longitude)

        try:
            return olc.encode(latitude, longitude, code_length)
        except ValueError as e:
            raise InvalidArgument(f"Invalid code length {code_length}: {e}") from e

    def decode(self, code: str) -> GridCell:
        """
        Decode a Plus Code into its grid cell.

        Args:
            code: Plus Code text

        Returns:
            GridCell for the code

        Raises:
            InvalidArgument: If the code is not a syntactically valid Plus Code
            DecodeFailure: If the code is valid but cannot be decoded (e.g. a short code)
        """
        if not self.is_valid(code):
            raise InvalidArgument(f"Invalid Plus Code: {code!r}")

        try:
            area = olc.decode(code)
        except ValueError as e:
            raise DecodeFailure(f"Unable to decode Plus Code {code!r}: {e}") from e

        return GridCell(
            code=code,
            south=area.latitudeLo,
            west=area.longitudeLo,
            north=area.latitudeHi,
            east=area.longitudeHi,
            code_length=area.codeLength,
        )

    def encode_cell(
        self,
        latitude: float,
        longitude: float,
        code_length: int = constants.DEFAULT_CODE_LENGTH
    ) -> GridCell:
        """
        Encode a location and decode the resulting code into its grid cell.

        Raises:
            InvalidArgument: If a coordinate is out of range or the code length is invalid
            InternalInconsistency: If the freshly encoded code cannot be decoded
        """
        code = self.encode(latitude, longitude, code_length)

        try:
            return self.decode(code)
        except (InvalidArgument, DecodeFailure) as e:
            self.logger.error(f"Encoded Plus Code {code!r} failed to decode: {e}")
            raise InternalInconsistency(
                f"Encoded Plus Code {code!r} for ({latitude}, {longitude}) could not be decoded"
            ) from e

    @staticmethod
    def is_valid(code: Optional[str]) -> bool:
        """Check whether text is a syntactically valid Plus Code."""
        if not isinstance(code, str):
            return False
        return olc.isValid(code)


default_provider = OpenLocationCodeProvider()
