"""
Core types for escape rendering.
"""

type Codepoint = int
type EncodedSequence = bytes
type Source = bytes | str
