"""
Escape sequence recognition.

A scan step starts at a backslash and produces an :class:`EscapeToken`
describing how much of the source is copied verbatim, which bytes (if any)
replace the escape, and where scanning resumes. The renderer applies tokens;
it never inspects the grammar itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

import regex as re

from .types import Codepoint
from .utf8 import encode_codepoint, is_surrogate

BACKSLASH: Final[int] = ord("\\")
UNICODE_INTRODUCER: Final[bytes] = b"u{"
CLOSE_BRACE: Final[int] = ord("}")

# U+10FFFF needs six digits; leading zeros are tolerated up to eight
MAX_HEX_DIGITS: Final[int] = 8

SIMPLE_ESCAPES: Final[dict[int, bytes]] = {
    ord("n"): b"\n",
    ord("r"): b"\r",
    ord("t"): b"\t",
    ord('"'): b'"',
    BACKSLASH: b"\\",
}

_HEX_RUN: Final = re.compile(rb"[0-9A-Fa-f]+")


class EscapeKind(str, Enum):
    """Classification of a single scan step."""

    SIMPLE = "simple"
    UNICODE = "unicode"
    # well-formed \u{...} whose value cannot be encoded
    INVALID_CODEPOINT = "invalid-codepoint"
    # \u{ + hex digits without a closing brace, or with too many digits
    MALFORMED = "malformed"
    NOT_AN_ESCAPE = "not-an-escape"

    @property
    def degraded(self) -> bool:
        """Whether the escape is passed through instead of decoded."""
        return self not in (EscapeKind.SIMPLE, EscapeKind.UNICODE)


@dataclass(frozen=True, slots=True)
class EscapeToken:
    """
    One recognized (or rejected) escape in a source buffer.

    Offsets index the source buffer. Applying a token copies
    ``source[cursor:literal_end]`` verbatim, appends ``replacement`` and moves
    the read cursor to ``resume``.
    """

    kind: EscapeKind
    # offset of the introducing backslash
    start: int
    literal_end: int
    resume: int
    replacement: bytes = b""
    codepoint: Codepoint | None = None

    @property
    def span(self) -> tuple[int, int]:
        """Source range covered by the escape text, from its backslash to the resume point."""
        return self.start, self.resume

    def fragment(self, source: bytes) -> bytes:
        """Return the raw escape text from ``source``."""
        return source[self.start : self.resume]


def scan_escape(
    source: bytes, start: int, end: int, *, allow_surrogates: bool = True
) -> EscapeToken:
    """
    Classify the escape whose backslash sits at ``source[start]``.

    Only ``source[:end]`` is considered; ``end`` is the logical end of the text.

    :param source: Source buffer.
    :param start: Offset of a backslash in ``source``.
    :param end: Logical end of the text, exclusive.
    :param allow_surrogates: Encode surrogate halves instead of treating them as invalid.
    :return: Token describing the scan step.
    """
    escape_at = start + 1

    if escape_at < end and source[escape_at] in SIMPLE_ESCAPES:
        return EscapeToken(
            EscapeKind.SIMPLE,
            start,
            literal_end=start,
            resume=start + 2,
            replacement=SIMPLE_ESCAPES[source[escape_at]],
        )

    digit_start = start + 3
    digits = None
    if source[escape_at : min(digit_start, end)] == UNICODE_INTRODUCER:
        digits = _HEX_RUN.match(source, digit_start, end)

    if digits is None:
        # step over the byte after the backslash so a lone "\\" cannot stall the scan
        after = min(start + 2, end)
        return EscapeToken(
            EscapeKind.NOT_AN_ESCAPE, start, literal_end=after, resume=after
        )

    digit_end = digits.end()
    closed = digit_end < end and source[digit_end] == CLOSE_BRACE
    if not closed or digit_end - digit_start > MAX_HEX_DIGITS:
        # resume inside the fragment so a later backslash in it is still found
        return EscapeToken(
            EscapeKind.MALFORMED, start, literal_end=digit_start, resume=digit_start
        )

    codepoint = int(digits.group(), 16)
    encoded = None
    if allow_surrogates or not is_surrogate(codepoint):
        encoded = encode_codepoint(codepoint)

    if encoded is None:
        return EscapeToken(
            EscapeKind.INVALID_CODEPOINT,
            start,
            literal_end=digit_end,
            resume=digit_end,
            codepoint=codepoint,
        )

    return EscapeToken(
        EscapeKind.UNICODE,
        start,
        literal_end=start,
        resume=digit_end + 1,
        replacement=encoded,
        codepoint=codepoint,
    )


__all__ = [
    "SIMPLE_ESCAPES",
    "MAX_HEX_DIGITS",
    "EscapeKind",
    "EscapeToken",
    "scan_escape",
]
