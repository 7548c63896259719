"""bytescape: decode backslash escapes in UTF-8 text into literal bytes."""

from .errors import (
    ByteScapeError,
    CodepointError,
    InvalidBufferError,
    MalformedEscapeError,
    PolicyError,
)
from .escape import EscapeKind, EscapeToken, scan_escape
from .generate import generate_input
from .policy import (
    BestEffortPolicy,
    EscapePolicy,
    StrictPolicy,
    WarnPolicy,
    get_policy,
    list_policies,
)
from .render import iter_escapes, render, render_text
from .utf8 import encode_codepoint, sequence_length
from .validate import ValidationReason, check_buffer, terminate, validate

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bytescape")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "render",
    "render_text",
    "iter_escapes",
    "scan_escape",
    "EscapeKind",
    "EscapeToken",
    "encode_codepoint",
    "sequence_length",
    "validate",
    "check_buffer",
    "terminate",
    "ValidationReason",
    "EscapePolicy",
    "BestEffortPolicy",
    "WarnPolicy",
    "StrictPolicy",
    "get_policy",
    "list_policies",
    "generate_input",
    "ByteScapeError",
    "InvalidBufferError",
    "MalformedEscapeError",
    "CodepointError",
    "PolicyError",
]
