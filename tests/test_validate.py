"""Unit tests for the shallow buffer validator."""

import pytest

from bytescape import InvalidBufferError, ValidationReason, check_buffer, terminate, validate


# Accepted buffers
# ---------------------------------------------------------------------------


def test_terminated_text_is_valid():
    """Plain text plus a single trailing zero byte passes."""
    assert validate(terminate(b"hello"))
    assert validate(terminate("café \U0001f600".encode("utf-8")))


def test_empty_text_is_valid():
    """A buffer holding only the terminator passes."""
    assert terminate(b"") == b"\x00"
    assert validate(b"\x00")


def test_explicit_length_limits_scan():
    """Bytes after ``length`` are not inspected."""
    assert validate(b"ab\x00\xff\xff", 3)


def test_shallow_check_accepts_malformed_utf8():
    """Truncated sequences pass unless structural checking is requested."""
    assert validate(terminate(b"\xc3"))
    assert validate(terminate(b"\xc0\xaf"))


# Rejected buffers
# ---------------------------------------------------------------------------


def test_embedded_nul_rejected():
    """A zero byte before the end is rejected."""
    assert not validate(b"a\x00b\x00", 4)
    with pytest.raises(InvalidBufferError) as exc:
        check_buffer(b"a\x00b\x00", 4)
    assert exc.value.reason is ValidationReason.EMBEDDED_NUL
    assert exc.value.position == 1


def test_missing_terminator_rejected():
    """A buffer whose last byte is not zero is rejected."""
    with pytest.raises(InvalidBufferError) as exc:
        check_buffer(b"abc")
    assert exc.value.reason is ValidationReason.MISSING_TERMINATOR
    assert not validate(b"abc")


@pytest.mark.parametrize("byte", [0xFE, 0xFF])
def test_invalid_bytes_rejected(byte):
    """0xFE and 0xFF never appear in UTF-8."""
    buffer = terminate(b"ok" + bytes([byte]))
    assert not validate(buffer)
    with pytest.raises(InvalidBufferError) as exc:
        check_buffer(buffer)
    assert exc.value.reason is ValidationReason.INVALID_BYTE
    assert exc.value.position == 2


@pytest.mark.parametrize("buffer, length", [(b"", None), (b"a\x00", 0), (b"a\x00", 5)])
def test_bad_length_rejected(buffer, length):
    """Lengths that cannot hold a terminator, or overrun the buffer, are rejected."""
    with pytest.raises(InvalidBufferError) as exc:
        check_buffer(buffer, length)
    assert exc.value.reason is ValidationReason.BAD_LENGTH


# Structural validation
# ---------------------------------------------------------------------------


def test_structural_rejects_malformed_utf8():
    """Opting in to structural checks catches truncated sequences."""
    assert not validate(terminate(b"ab\xc3"), structural=True)
    with pytest.raises(InvalidBufferError) as exc:
        check_buffer(terminate(b"ab\xc3"), structural=True)
    assert exc.value.reason is ValidationReason.MALFORMED_UTF8
    assert exc.value.position == 2


def test_structural_accepts_well_formed_text():
    """Well-formed multi-byte text passes the structural check."""
    assert validate(terminate("naïve 日本".encode("utf-8")), structural=True)
