"""Invalid byte handling for the string escapers."""

import logging
from abc import ABC, abstractmethod
from typing import Final, Literal, override

from .errors import InvalidModeSpecifier
from .types import REPLACEMENT_CHAR, ByteBuffer, TextSink

log = logging.getLogger(__name__)

# =========================================================================================

# invalid byte policies


class InvalidBytePolicy(ABC):
    """Base policy for writing bytes the decoder rejected."""

    # name used in registries and reprs
    NAME: str = "base"

    @abstractmethod
    def write_invalid(
        self, buf: ByteBuffer, start: int, end: int, sink: TextSink
    ) -> None:
        """Write a stand-in for the ill-formed bytes ``buf[start:end]``."""


class ExactPolicy(InvalidBytePolicy):
    """Policy that keeps every invalid byte as a ``\\xHH`` escape."""

    NAME = "exact"

    @override
    def write_invalid(
        self, buf: ByteBuffer, start: int, end: int, sink: TextSink
    ) -> None:
        """Write one ``\\xHH`` per byte so the output reads back byte-identical."""
        for i in range(start, end):
            sink.write(f"\\x{buf[i]:02x}")


class LossyPolicy(InvalidBytePolicy):
    """Policy that substitutes U+FFFD for each ill-formed subsequence."""

    NAME = "lossy"

    @override
    def write_invalid(
        self, buf: ByteBuffer, start: int, end: int, sink: TextSink
    ) -> None:
        """Write a single replacement character however many bytes were skipped."""
        sink.write(REPLACEMENT_CHAR)


PolicyName = Literal["exact", "lossy"]

EXACT: Final[InvalidBytePolicy] = ExactPolicy()
LOSSY: Final[InvalidBytePolicy] = LossyPolicy()

_POLICIES: Final[dict[str, InvalidBytePolicy]] = {
    EXACT.NAME: EXACT,
    LOSSY.NAME: LOSSY,
}


def list_policies() -> list[str]:
    """Return available invalid byte policy names."""
    return list(_POLICIES.keys())


def get_policy(name: PolicyName = "exact") -> InvalidBytePolicy:
    """
    Look up an invalid byte policy by name.

    :param name: Policy identifier, "exact" or "lossy".
    :raises InvalidModeSpecifier: If name is unknown.
    """
    if name not in _POLICIES:
        log.critical(f"invalid byte policy {name!r}")
        raise InvalidModeSpecifier(
            "unknown policy name",
            invalid_name=name,
            available_modes=list_policies(),
        )
    return _POLICIES[name]


__all__ = [
    "PolicyName",
    "InvalidBytePolicy",
    "ExactPolicy",
    "LossyPolicy",
    "list_policies",
    "get_policy",
]
