"""Custom exception hierarchy for ezcaper escaping errors."""


class EzcaperError(Exception):
    """Base exception for all ezcaper errors."""


class CodepointError(EzcaperError, ValueError):
    """Raised when a value cannot be treated as a codepoint."""

    def __init__(self, message: str, *, codepoint: int | None = None) -> None:
        """Initialize with an optional codepoint that gets appended to the message."""
        if codepoint is not None:
            message = f"{message} (codepoint: {codepoint:#x})"
        super().__init__(message)
        self.codepoint = codepoint


class CodepointTooLarge(CodepointError):
    """Raised when a codepoint above U+10FFFF would be rendered."""

    def __init__(self, codepoint: int) -> None:
        super().__init__("codepoint too large", codepoint=codepoint)


class InvalidModeSpecifier(EzcaperError, ValueError):
    """
    Raised when a display mode is requested that the operation does not know.

    This signals a caller bug, not bad data, and is never caught inside ezcaper.
    """

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available_modes: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name is not None:
            extra += f"(available: {available_modes}) (got {invalid_name!r}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available_modes = available_modes


class Utf8DecodeError(EzcaperError):
    """Raised by the stepping decoder when no scalar value starts at ``start``."""

    def __init__(self, *, start: int, end: int) -> None:
        super().__init__(f"invalid UTF-8 at bytes {start}..{end}")
        # resume decoding from ``end``, always > start
        self.start = start
        self.end = end


class LiteralSyntaxError(EzcaperError, ValueError):
    """Raised when an escaped literal cannot be read back."""

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        text: str | None = None,
    ) -> None:
        extra = ""
        if position is not None:
            extra += f" (position: {position})"
        super().__init__(message + extra)
        self.position = position
        self.text = text
