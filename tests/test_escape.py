"""Unit tests for escape token classification."""

import pytest

from bytescape import EscapeKind, iter_escapes, scan_escape


def _scan(source: bytes, start: int = 0):
    return scan_escape(source, start, len(source))


# Token classification
# ---------------------------------------------------------------------------


def test_simple_token():
    """A simple escape replaces two bytes with one."""
    token = _scan(b"\\t")
    assert token.kind is EscapeKind.SIMPLE
    assert token.replacement == b"\t"
    assert (token.literal_end, token.resume) == (0, 2)


def test_unicode_token():
    """A unicode escape records its codepoint and full span."""
    token = _scan(b"ab\\u{1F600}cd", 2)
    assert token.kind is EscapeKind.UNICODE
    assert token.codepoint == 0x1F600
    assert token.replacement == b"\xf0\x9f\x98\x80"
    assert token.span == (2, 11)
    assert token.fragment(b"ab\\u{1F600}cd") == b"\\u{1F600}"


def test_invalid_codepoint_token():
    """Out-of-range values consume the digit run but leave the brace."""
    token = _scan(b"\\u{110000}")
    assert token.kind is EscapeKind.INVALID_CODEPOINT
    assert token.codepoint == 0x110000
    assert token.replacement == b""
    assert token.literal_end == token.resume == 9


def test_rejected_surrogate_token():
    """Surrogates classify as invalid when disallowed."""
    token = scan_escape(b"\\u{DC00}", 0, 8, allow_surrogates=False)
    assert token.kind is EscapeKind.INVALID_CODEPOINT
    assert token.codepoint == 0xDC00


@pytest.mark.parametrize("source", [b"\\u{41", b"\\u{123456789}"])
def test_malformed_token_resumes_at_digits(source):
    """Malformed unicode escapes resume at the start of the digit run."""
    token = _scan(source)
    assert token.kind is EscapeKind.MALFORMED
    assert token.literal_end == token.resume == 3


@pytest.mark.parametrize(
    "source, resume",
    [(b"\\q", 2), (b"\\", 1), (b"\\u", 2), (b"\\u{", 2), (b"\\u{g}", 2)],
)
def test_not_an_escape_steps_over_next_byte(source, resume):
    """An unrecognized escape consumes at most the byte after the backslash."""
    token = _scan(source)
    assert token.kind is EscapeKind.NOT_AN_ESCAPE
    assert token.literal_end == token.resume == resume


def test_end_bounds_lookahead():
    """Bytes past ``end`` are never part of an escape."""
    token = scan_escape(b"\\u{41}", 0, 5)
    assert token.kind is EscapeKind.MALFORMED


def test_degraded_flag():
    """Only decoded kinds are not degraded."""
    assert not EscapeKind.SIMPLE.degraded
    assert not EscapeKind.UNICODE.degraded
    assert EscapeKind.MALFORMED.degraded
    assert EscapeKind.INVALID_CODEPOINT.degraded
    assert EscapeKind.NOT_AN_ESCAPE.degraded


# Iteration
# ---------------------------------------------------------------------------


def test_iter_escapes_in_order():
    """Every scan step is reported, including degraded ones."""
    kinds = [t.kind for t in iter_escapes("a\\nb\\q\\u{41}\\u{41")]
    assert kinds == [
        EscapeKind.SIMPLE,
        EscapeKind.NOT_AN_ESCAPE,
        EscapeKind.UNICODE,
        EscapeKind.MALFORMED,
    ]


def test_iter_escapes_empty():
    """Text without escapes yields nothing."""
    assert list(iter_escapes(b"plain text")) == []
