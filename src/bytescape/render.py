"""
Escape rendering: replace escape sequences in a source buffer with the bytes they denote.
"""

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from .escape import BACKSLASH, EscapeToken, scan_escape
from .types import Source

if TYPE_CHECKING:
    from .policy import EscapePolicy

log = logging.getLogger(__name__)


def _as_bytes(source: Source) -> bytes:
    """Return ``source`` as bytes, encoding text as UTF-8."""
    if isinstance(source, str):
        # lone surrogates in the text are kept rather than rejected
        return source.encode("utf-8", errors="surrogatepass")
    return bytes(source)


def _logical_end(source: bytes) -> int:
    """Offset of the first zero byte, or the full length when there is none."""
    end = source.find(0)
    return len(source) if end < 0 else end


def _tokens(
    source: bytes, end: int, allow_surrogates: bool
) -> Iterator[tuple[int, EscapeToken]]:
    """Yield ``(cursor, token)`` for each scan step, cursor being the read position before it."""
    cursor = 0
    while (start := source.find(BACKSLASH, cursor, end)) >= 0:
        token = scan_escape(source, start, end, allow_surrogates=allow_surrogates)
        yield cursor, token
        cursor = token.resume


def iter_escapes(
    source: Source, *, allow_surrogates: bool = True
) -> Iterator[EscapeToken]:
    """
    Yield the token produced by every scan step over ``source``, in order.

    Degraded escapes are included; rendering the same source applies exactly
    these tokens.
    """
    buf = _as_bytes(source)
    for _, token in _tokens(buf, _logical_end(buf), allow_surrogates):
        yield token


def render(
    source: Source,
    *,
    policy: "EscapePolicy | None" = None,
    allow_surrogates: bool = True,
) -> bytes:
    """
    Decode simple and Unicode escapes in ``source`` into literal bytes.

    Recognized escapes are ``\\n``, ``\\r``, ``\\t``, ``\\"``, ``\\\\`` and
    ``\\u{X}`` with 1 to 8 hexadecimal digits. Anything else is copied
    verbatim and scanning continues, so with the default policy this never
    raises. Scanning stops at the first zero byte, which lets a terminated
    buffer be passed straight from the validator.

    :param source: Text to render; ``str`` input is encoded as UTF-8 first.
    :param policy: Consulted for every escape before it is applied; ``None`` means best effort.
    :param allow_surrogates: Encode ``\\u{D800}``..``\\u{DFFF}`` instead of leaving them as-is.
    :return: Rendered bytes, never longer than the logical source.
    :raises MalformedEscapeError: Only if ``policy`` rejects an escape.

    .. code-block:: python

        render(b"a\\\\nb\\\\u{62}c")      # b"a\\nbbc"
        render("caf\\\\u{E9}")         # b"caf\\xc3\\xa9"
    """
    buf = _as_bytes(source)
    end = _logical_end(buf)

    # every replacement is shorter than its escape text, so end bounds the output
    result = bytearray()
    cursor = 0
    for cursor, token in _tokens(buf, end, allow_surrogates):
        if policy is not None:
            policy.handle(token, buf)
        result += buf[cursor : token.literal_end]
        result += token.replacement
        cursor = token.resume

    result += buf[cursor:end]
    log.debug(f"rendered {end} source bytes into {len(result)} bytes")
    return bytes(result)


def render_text(
    source: str,
    *,
    policy: "EscapePolicy | None" = None,
    allow_surrogates: bool = True,
) -> str:
    """Render ``source`` and decode the result back to ``str``."""
    rendered = render(source, policy=policy, allow_surrogates=allow_surrogates)
    return rendered.decode("utf-8", errors="surrogatepass")


__all__ = [
    "iter_escapes",
    "render",
    "render_text",
]
