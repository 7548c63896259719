"""Unit tests for random input generation."""

import random

import pytest

import bytescape as bsc
from bytescape.generate import WORDS, random_codepoint, random_unicode_escape


def test_seeded_output_is_repeatable():
    """The same seed yields the same text."""
    first = bsc.generate_input(20, rng=random.Random(42))
    second = bsc.generate_input(20, rng=random.Random(42))
    assert first == second


def test_escape_count():
    """One unicode escape is emitted per segment."""
    text = bsc.generate_input(50, rng=random.Random(1))
    assert text.count("\\u{") == 50


def test_zero_segments_is_plain_words():
    """With no segments only the opening words are produced."""
    text = bsc.generate_input(0, rng=random.Random(3))
    assert "\\" not in text
    assert all(word in WORDS for word in text.split(" "))


def test_negative_segment_count():
    """Negative counts are rejected."""
    with pytest.raises(ValueError):
        bsc.generate_input(-1)


def test_codepoints_avoid_surrogates_and_reserved():
    """Generated codepoints are encodable scalar values outside U+FDD0..U+FDEF."""
    rng = random.Random(7)
    for _ in range(2000):
        point = random_codepoint(rng)
        assert 0x20 <= point <= 0x10FFFF
        assert not 0xD800 <= point <= 0xDFFF
        assert not 0xFDD0 <= point <= 0xFDEF


def test_escape_padding_within_limit():
    """Escapes carry between one and eight hex digits."""
    rng = random.Random(11)
    for _ in range(500):
        escape = random_unicode_escape(rng)
        digits = escape[3:-1]
        assert escape.startswith("\\u{") and escape.endswith("}")
        assert 1 <= len(digits) <= 8
        int(digits, 16)


def test_generated_input_renders_completely():
    """Every generated escape decodes and the output shrinks."""
    text = bsc.generate_input(200, rng=random.Random(5))
    source = text.encode("utf-8")
    rendered = bsc.render(source)
    assert len(rendered) < len(source)
    assert "\\u{" not in rendered.decode("utf-8")
    assert all(not t.kind.degraded for t in bsc.iter_escapes(source))
