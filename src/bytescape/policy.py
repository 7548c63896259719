"""Handling of malformed escapes during rendering."""

import logging
from abc import ABC, abstractmethod
from typing import Final, Literal, override

from .errors import CodepointError, MalformedEscapeError, PolicyError
from .escape import EscapeKind, EscapeToken

log = logging.getLogger(__name__)

# =========================================================================================

# malformed escape policies


class EscapePolicy(ABC):
    """Base policy consulted for every escape token before it is applied."""

    @abstractmethod
    def handle(self, token: EscapeToken, source: bytes) -> None:
        """Accept ``token`` or raise to abort rendering."""


class BestEffortPolicy(EscapePolicy):
    """Policy that passes malformed escapes through unchanged and keeps scanning."""

    @override
    def handle(self, token: EscapeToken, source: bytes) -> None:
        """Accept every token."""


class WarnPolicy(EscapePolicy):
    """Policy that degrades like best-effort but logs each malformed escape."""

    @override
    def handle(self, token: EscapeToken, source: bytes) -> None:
        """Log a warning for degraded tokens."""
        if token.kind.degraded:
            log.warning(
                f"{token.kind.value} escape at offset {token.start} left as-is: "
                f"{token.fragment(source)!r}"
            )


class StrictPolicy(EscapePolicy):
    """Policy that raises on the first escape it cannot decode."""

    @override
    def handle(self, token: EscapeToken, source: bytes) -> None:
        """Raise for degraded tokens."""
        if not token.kind.degraded:
            return

        fragment = token.fragment(source)
        if token.kind is EscapeKind.INVALID_CODEPOINT:
            raise CodepointError(
                "codepoint cannot be encoded as UTF-8",
                position=token.start,
                fragment=fragment,
                codepoint=token.codepoint,
            )
        if token.kind is EscapeKind.MALFORMED:
            raise MalformedEscapeError(
                "unterminated or overlong unicode escape",
                position=token.start,
                fragment=fragment,
            )
        raise MalformedEscapeError(
            "unsupported escape sequence", position=token.start, fragment=fragment
        )


PolicyName = Literal["best-effort", "warn", "strict"]

DEFAULT_POLICY: Final[str] = "best-effort"

_ESCAPE_POLICIES: Final[dict[str, type[EscapePolicy]]] = {
    "best-effort": BestEffortPolicy,
    "warn": WarnPolicy,
    "strict": StrictPolicy,
}


def list_policies() -> list[str]:
    """Return available escape policy names."""
    return list(_ESCAPE_POLICIES.keys())


def get_policy(name: PolicyName = "best-effort") -> EscapePolicy:
    """
    Create an escape policy by name.

    :param name: Policy identifier: "best-effort", "warn", or "strict".
    :raises PolicyError: If name is unknown.

    .. code-block:: python

        policy = get_policy("strict")
        render(b"\\\\q", policy=policy)  # raises MalformedEscapeError
    """
    if name not in _ESCAPE_POLICIES:
        raise PolicyError(
            "unknown policy name",
            invalid_name=name,
            available=list_policies(),
        )
    return _ESCAPE_POLICIES[name]()


__all__ = [
    "PolicyName",
    "DEFAULT_POLICY",
    "EscapePolicy",
    "BestEffortPolicy",
    "WarnPolicy",
    "StrictPolicy",
    "list_policies",
    "get_policy",
]
