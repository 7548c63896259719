"""
Shallow validation of NUL-terminated UTF-8 source buffers.
"""

import logging
from enum import Enum
from typing import Final

from .errors import InvalidBufferError

log = logging.getLogger(__name__)

TERMINATOR: Final[bytes] = b"\x00"

# never valid anywhere in a UTF-8 stream
_INVALID_BYTES: Final[frozenset[int]] = frozenset((0xFE, 0xFF))


class ValidationReason(str, Enum):
    """Why a buffer was rejected."""

    BAD_LENGTH = "bad-length"
    INVALID_BYTE = "invalid-byte"
    EMBEDDED_NUL = "embedded-nul"
    MISSING_TERMINATOR = "missing-terminator"
    MALFORMED_UTF8 = "malformed-utf8"


def terminate(data: bytes) -> bytes:
    """Append the single zero byte the validator expects at the end of a buffer."""
    return data + TERMINATOR


def check_buffer(
    buffer: bytes, length: int | None = None, *, structural: bool = False
) -> None:
    """
    Validate a NUL-terminated buffer, raising on the first problem found.

    The default check is deliberately shallow: it rejects the bytes ``0xFE``
    and ``0xFF`` and requires exactly one zero byte, at ``length - 1``.
    Continuation counts, overlong forms and surrogates are only checked
    when ``structural`` is set.

    :param buffer: Buffer including its terminator.
    :param length: Total buffer length; defaults to ``len(buffer)``.
    :param structural: Also require the text before the terminator to be well-formed UTF-8.
    :raises InvalidBufferError: If the buffer is rejected.
    """
    if length is None:
        length = len(buffer)

    if length <= 0 or length > len(buffer):
        raise InvalidBufferError(
            f"buffer length {length} does not fit a terminated buffer of {len(buffer)} bytes",
            reason=ValidationReason.BAD_LENGTH,
        )

    view = memoryview(buffer)[:length]
    for position, byte in enumerate(view):
        if byte in _INVALID_BYTES:
            raise InvalidBufferError(
                f"byte {byte:#04x} is never valid in UTF-8",
                reason=ValidationReason.INVALID_BYTE,
                position=position,
            )
        if byte == 0 and position != length - 1:
            raise InvalidBufferError(
                "zero byte before end of buffer",
                reason=ValidationReason.EMBEDDED_NUL,
                position=position,
            )

    if view[length - 1] != 0:
        raise InvalidBufferError(
            "buffer is not terminated",
            reason=ValidationReason.MISSING_TERMINATOR,
            position=length - 1,
        )

    if structural:
        try:
            bytes(view[: length - 1]).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidBufferError(
                f"text is not well-formed UTF-8: {e.reason}",
                reason=ValidationReason.MALFORMED_UTF8,
                position=e.start,
            ) from e


def validate(
    buffer: bytes, length: int | None = None, *, structural: bool = False
) -> bool:
    """
    Return ``True`` if ``buffer`` passes :func:`check_buffer`.

    .. code-block:: python

        validate(terminate(b"hello"))   # True
        validate(b"a\\x00b\\x00", 4)      # False: embedded NUL
    """
    try:
        check_buffer(buffer, length, structural=structural)
    except InvalidBufferError as e:
        log.debug(f"buffer rejected: {e}")
        return False
    return True


__all__ = [
    "TERMINATOR",
    "ValidationReason",
    "terminate",
    "check_buffer",
    "validate",
]
