"""Random escape-laden input for benchmarks and tests."""

import random
from typing import Final

# lexicon for the dummy text
WORDS: Final[tuple[str, ...]] = (
    "lorem", "ipsum", "dolor", "sit", "amet",
    "it", "was", "the", "best", "of", "times", "worst",
    "past", "is", "a", "foreign", "country",
    "call", "me", "Ishmael",
    "frog", "blast", "vent", "core",
    "phosphoglyceraldehyde", "supercalifragilisticexpialidocious",
    "antidisestablishmentarianism",
    "I", "am", "very", "model", "modern", "major", "general",
)  # fmt: skip

# noncharacters some consumers refuse to accept in literals
_RESERVED: Final[range] = range(0xFDD0, 0xFDF0)


def random_codepoint(rng: random.Random) -> int:
    """Pick a printable-or-higher codepoint, avoiding surrogates and reserved noncharacters."""
    while True:
        if rng.random() < 0.5:
            point = rng.randint(0x20, 0xD7FF)
        else:
            point = rng.randint(0xE000, 0x10FFFF)
        if point not in _RESERVED:
            return point


def random_unicode_escape(rng: random.Random) -> str:
    """Return ``\\u{...}`` for a random codepoint, zero-padded to 1 to 8 hex digits."""
    width = rng.randint(1, 8)
    return f"\\u{{{random_codepoint(rng):0{width}x}}}"


def random_segment(rng: random.Random) -> str:
    """Return 1 to 10 random words joined by spaces."""
    return " ".join(rng.choice(WORDS) for _ in range(rng.randint(1, 10)))


def generate_input(segment_count: int, *, rng: random.Random | None = None) -> str:
    """
    Build dummy text with ``segment_count`` Unicode escapes.

    The text opens with a word segment; each further segment is followed by
    one escape.

    :param segment_count: Number of segment/escape pairs after the opening segment.
    :param rng: Random source; pass a seeded ``random.Random`` for repeatable output.
    :raises ValueError: If ``segment_count`` is negative.
    """
    if segment_count < 0:
        raise ValueError(f"segment count must not be negative: {segment_count}")
    rng = rng or random.Random()

    parts = [random_segment(rng)]
    for _ in range(segment_count):
        parts.append(f" {random_segment(rng)} {random_unicode_escape(rng)}")
    return "".join(parts)


__all__ = [
    "WORDS",
    "random_codepoint",
    "random_unicode_escape",
    "random_segment",
    "generate_input",
]
