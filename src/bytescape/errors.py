"""Custom exception hierarchy for bytescape validation and rendering errors."""

from typing import TYPE_CHECKING

from .types import Codepoint

if TYPE_CHECKING:
    from .validate import ValidationReason


class ByteScapeError(Exception):
    """Base exception for all bytescape errors."""


class InvalidBufferError(ByteScapeError):
    """Raised when a source buffer fails validation."""

    def __init__(
        self,
        message: str,
        *,
        reason: "ValidationReason",
        position: int | None = None,
    ) -> None:
        """Initialize with the failure reason and optional position that get appended to the message."""
        extra = f" (reason: {reason.value}) "
        if position is not None:
            extra += f"(position: {position}) "
        super().__init__(message + extra)
        self.reason = reason
        self.position = position


class MalformedEscapeError(ByteScapeError):
    """Raised by the strict policy when an escape sequence cannot be decoded."""

    def __init__(
        self,
        message: str,
        *,
        position: int,
        fragment: bytes,
    ) -> None:
        extra = f" (position: {position}) (fragment: {fragment!r}) "
        super().__init__(message + extra)
        self.position = position
        self.fragment = fragment


class CodepointError(MalformedEscapeError):
    """Raised by the strict policy when a Unicode escape names an unencodable codepoint."""

    def __init__(
        self,
        message: str,
        *,
        position: int,
        fragment: bytes,
        codepoint: Codepoint,
    ) -> None:
        """
        Initialize CodepointError with escape details.

        Args:
            message: Error message.
            position: Offset of the escape's backslash in the source.
            fragment: The raw escape text.
            codepoint: The parsed value that could not be encoded.
        """
        super().__init__(
            f"{message} (codepoint: {codepoint:#x})",
            position=position,
            fragment=fragment,
        )
        self.codepoint = codepoint


class PolicyError(ByteScapeError):
    """Raised when escape policy lookup fails."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available = available
