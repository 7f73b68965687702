"""
Core types for escaping.
"""

from enum import Enum
from typing import Final, Protocol

type Codepoint = int
type ByteBuffer = bytes | bytearray | memoryview

MAX_CODEPOINT: Final[int] = 0x10FFFF
REPLACEMENT_CHAR: Final[str] = "\ufffd"


class ControlKind(Enum):
    """Relevant control categories of a codepoint."""

    NORMAL = "normal"
    # escaped standalone, verbatim inside running text
    FORMAT = "format"
    CONTROL = "control"


class TextSink(Protocol):
    """Anything escaped text can be appended to."""

    def write(self, s: str, /) -> object: ...
