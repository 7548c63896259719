"""
Codepoint to UTF-8 encoding.
"""

from typing import Final

from .types import Codepoint, EncodedSequence

MAX_CODEPOINT: Final[int] = 0x10FFFF
SURROGATE_MIN: Final[int] = 0xD800
SURROGATE_MAX: Final[int] = 0xDFFF

# exclusive upper bound of the codepoints each sequence length can carry
_SEQUENCE_LIMITS: Final[tuple[tuple[int, int], ...]] = (
    (0x80, 1),
    (0x800, 2),
    (0x1_0000, 3),
    (MAX_CODEPOINT + 1, 4),
)


def _leading_byte(value: int, sequence_count: int) -> int:
    """
    Encode ``value`` as the first byte of a UTF-8 sequence of the given length.

    The top ``sequence_count`` bits are set and followed by a single 0 bit;
    the remaining low bits carry the payload.

    :raises ValueError: If ``sequence_count`` is not 2, 3 or 4.
    """
    match sequence_count:
        case 2:
            return (value & 0b1_1111) | 0b1100_0000
        case 3:
            return (value & 0b1111) | 0b1110_0000
        case 4:
            return (value & 0b0111) | 0b1111_0000
        case _:
            raise ValueError(f"illegal byte count for leading byte: {sequence_count}")


def _trailing_byte(value: int) -> int:
    """Encode the low 6 bits of ``value`` as a continuation byte."""
    return (value & 0b11_1111) | 0b1000_0000


def is_surrogate(codepoint: Codepoint) -> bool:
    """Return ``True`` for UTF-16 surrogate halves (U+D800 to U+DFFF)."""
    return SURROGATE_MIN <= codepoint <= SURROGATE_MAX


def sequence_length(codepoint: Codepoint) -> int | None:
    """Return the number of UTF-8 bytes needed for ``codepoint``, or ``None`` if out of range."""
    if codepoint < 0:
        return None
    for limit, length in _SEQUENCE_LIMITS:
        if codepoint < limit:
            return length
    return None


def encode_codepoint(codepoint: Codepoint) -> EncodedSequence | None:
    """
    Encode a codepoint as UTF-8.

    Bytes are returned in stream order, leading byte first. Surrogate halves
    are encoded like any other 3-byte value; callers that want to refuse them
    check :func:`is_surrogate` first.

    :param codepoint: Integer in ``[0, 0x10FFFF]``.
    :return: 1 to 4 bytes, or ``None`` when the codepoint is outside the Unicode range.

    .. code-block:: python

        encode_codepoint(0x48)     # b"H"
        encode_codepoint(0xE9)     # b"\\xc3\\xa9"
        encode_codepoint(0x1F600)  # b"\\xf0\\x9f\\x98\\x80"
    """
    length = sequence_length(codepoint)
    if length is None:
        return None
    if length == 1:
        return bytes((codepoint,))

    # payload bits not held by the leading byte, split into 6-bit chunks
    shift = 6 * (length - 1)
    encoded = [_leading_byte(codepoint >> shift, length)]
    while shift:
        shift -= 6
        encoded.append(_trailing_byte(codepoint >> shift))
    return bytes(encoded)


__all__ = [
    "MAX_CODEPOINT",
    "is_surrogate",
    "sequence_length",
    "encode_codepoint",
]
