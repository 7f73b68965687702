"""Display mode helpers for escaped output."""

import logging
from enum import Enum
from typing import Literal

from .errors import InvalidModeSpecifier

log = logging.getLogger(__name__)

ModeName = Literal["quoted", "bare"]


class Mode(str, Enum):
    """
    Named display modes.

    ``QUOTED`` wraps the output in its delimiters and escapes them inside,
    ``BARE`` writes the escaped body only.
    """

    QUOTED = "quoted"
    BARE = "bare"

    @classmethod
    def get(cls, name: "str | Mode") -> "Mode":
        """Get display mode by name (case-insensitive)."""
        if isinstance(name, Mode):
            return name
        try:
            return cls[name.upper()]
        except (KeyError, AttributeError):
            log.critical(f"invalid display mode {name!r}")
            raise InvalidModeSpecifier(
                "unknown mode",
                invalid_name=str(name),
                available_modes=list_modes(),
            ) from None

    @classmethod
    def from_format_spec(cls, spec: str, bare_spec: str, owner: str) -> "Mode":
        """
        Map a format spec to a display mode.

        The empty spec selects ``QUOTED`` and ``bare_spec`` selects ``BARE``.

        :param spec: Spec given to ``format()`` or an f-string.
        :param bare_spec: The one spec the caller accepts for bare output.
        :param owner: Name of the formatted type, for the error message.
        :raises InvalidModeSpecifier: For any other spec.
        """
        if spec == "":
            return cls.QUOTED
        if spec == bare_spec:
            return cls.BARE
        log.critical(f"invalid format string {spec!r} for {owner}")
        raise InvalidModeSpecifier(
            f"invalid format string for {owner}",
            invalid_name=spec,
            available_modes=["", bare_spec],
        )


def list_modes() -> list[str]:
    """Return available display mode names."""
    return [mode.value for mode in Mode]


__all__ = [
    "ModeName",
    "Mode",
    "list_modes",
]
