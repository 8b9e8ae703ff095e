"""
Exceptions raised by the building identifier codec.
"""

from typing import Any, Optional


class BuildingIdError(Exception):
    """Base exception for building identifier operations."""


class InvalidArgument(BuildingIdError, ValueError):
    """Raised when a coordinate or code length is outside the accepted domain."""


class DecodeFailure(BuildingIdError):
    """Raised when a syntactically valid Plus Code cannot be decoded."""


class InternalInconsistency(BuildingIdError, RuntimeError):
    """Raised when a Plus Code produced by the encoder cannot be decoded again."""


class InvalidCode(BuildingIdError, ValueError):
    """
    Raised when a UBID code cannot be parsed or decoded.

    Attributes:
        code: The offending UBID code
        message: Human readable reason
    """

    def __init__(self, code: Any, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        value = getattr(self.code, "value", self.code)
        return f"{self.message} ({value!r})"
